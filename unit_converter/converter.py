"""Unit conversion engine.

Length and weight go through a base unit (meter / kilogram):

    result = value × factor(source) / factor(destination)

so only one factor per unit is stored, never a pairwise table.
Temperature goes through Celsius with affine maps:

    Fahrenheit → Celsius:  (F − 32) / 1.8
    Kelvin → Celsius:      K − 273.15
"""

import logging
import math
from types import MappingProxyType
from typing import Union

from unit_converter.config import (
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_SCALE,
    KELVIN_OFFSET,
    LENGTH_TO_METER,
    UNIT_NAMES,
    WEIGHT_TO_KG,
)
from unit_converter.errors import CatalogInconsistencyError, IncompatibleCategories, OutOfRange
from unit_converter.models import Category, ConversionRequest, Unit

logger = logging.getLogger(__name__)

UnitLike = Union[Unit, str]

_CATEGORY_BY_UNIT = MappingProxyType({
    unit: category for category in Category for unit in category.members
})

_FACTOR_TABLES = MappingProxyType({
    Category.LENGTH: MappingProxyType({Unit(name): f for name, f in LENGTH_TO_METER.items()}),
    Category.WEIGHT: MappingProxyType({Unit(name): f for name, f in WEIGHT_TO_KG.items()}),
})


def as_unit(unit: UnitLike) -> Unit:
    """Accept a Unit or its display name."""
    return unit if isinstance(unit, Unit) else Unit.from_name(unit)


def category_of(unit: UnitLike) -> Category:
    """Return the category a unit belongs to."""
    unit = as_unit(unit)
    try:
        return _CATEGORY_BY_UNIT[unit]
    except KeyError:
        raise CatalogInconsistencyError(f"{unit.value} has no category") from None


def are_compatible(source_unit: UnitLike, destination_unit: UnitLike) -> bool:
    """True when both units belong to the same category."""
    return category_of(source_unit) is category_of(destination_unit)


def units_in(category: Category) -> tuple:
    """Units of a category in picker order."""
    members = category.members
    return tuple(Unit(name) for name in UNIT_NAMES if Unit(name) in members)


def factor(unit: UnitLike) -> float:
    """Base units per 1 ``unit`` (meters for length, kilograms for weight)."""
    unit = as_unit(unit)
    category = category_of(unit)
    table = _FACTOR_TABLES.get(category)
    if table is None:
        raise CatalogInconsistencyError(f"{category.value} has no factor table")
    try:
        return table[unit]
    except KeyError:
        raise CatalogInconsistencyError(
            f"{unit.value} is missing from the {category.value.lower()} factor table"
        ) from None


def to_celsius(value: float, unit: UnitLike) -> float:
    """Convert a temperature in ``unit`` to Celsius."""
    unit = as_unit(unit)
    if unit is Unit.CELSIUS:
        return value
    if unit is Unit.FAHRENHEIT:
        return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
    if unit is Unit.KELVIN:
        return value - KELVIN_OFFSET
    raise CatalogInconsistencyError(f"{unit.value} is not a temperature unit")


def from_celsius(celsius: float, unit: UnitLike) -> float:
    """Convert a Celsius temperature to ``unit``."""
    unit = as_unit(unit)
    if unit is Unit.CELSIUS:
        return celsius
    if unit is Unit.FAHRENHEIT:
        return celsius * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
    if unit is Unit.KELVIN:
        return celsius + KELVIN_OFFSET
    raise CatalogInconsistencyError(f"{unit.value} is not a temperature unit")


def convert(value: float, source_unit: UnitLike, destination_unit: UnitLike) -> float:
    """Convert ``value`` from ``source_unit`` to ``destination_unit``.

    Raises IncompatibleCategories when the units belong to different
    categories, OutOfRange when the result overflows a float, and
    ValueError for a non-finite value.
    """
    source_unit = as_unit(source_unit)
    destination_unit = as_unit(destination_unit)

    source_category = category_of(source_unit)
    destination_category = category_of(destination_unit)
    if source_category is not destination_category:
        raise IncompatibleCategories(
            source_unit, destination_unit, source_category, destination_category
        )

    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value {value!r}")

    if source_unit is destination_unit:
        return value

    if source_category is Category.TEMPERATURE:
        celsius = to_celsius(value, source_unit)
        result = from_celsius(celsius, destination_unit)
    else:
        base_value = value * factor(source_unit)
        result = base_value / factor(destination_unit)

    if not math.isfinite(result):
        raise OutOfRange()

    logger.debug("Converted %r %s -> %r %s", value, source_unit.value,
                 result, destination_unit.value)
    return result


def convert_request(request: ConversionRequest) -> float:
    """Run a ConversionRequest through convert()."""
    return convert(request.value, request.source_unit, request.destination_unit)
