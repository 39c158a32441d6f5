"""Data models for the unit converter."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from unit_converter.config import CATEGORY_MEMBERS, UNIT_NAMES
from unit_converter.errors import ConversionError


class Unit(str, Enum):
    """A unit from the fixed catalog. Declaration order is picker order."""
    INCH = "Inch"
    FOOT = "Foot"
    YARD = "Yard"
    MILE = "Mile"
    POUND = "Pound"
    OUNCE = "Ounce"
    TON = "Ton"
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"

    @classmethod
    def from_name(cls, name: str, case_sensitive: bool = True) -> "Unit":
        """Look up a unit by its display name.

        Raises ValueError for names outside the catalog.
        """
        if case_sensitive:
            return cls(name.strip())
        wanted = name.strip().lower()
        for unit in cls:
            if unit.value.lower() == wanted:
                return unit
        raise ValueError(f"Unknown unit: {name!r}. Choose from: {', '.join(UNIT_NAMES)}")

    def __str__(self) -> str:
        return self.value


class Category(str, Enum):
    """A partition of the unit catalog."""
    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"

    @property
    def members(self) -> frozenset:
        return frozenset(Unit(name) for name in CATEGORY_MEMBERS[self.value])

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConversionRequest:
    """A single conversion, built per user action and discarded afterwards."""
    value: float
    source_unit: Unit
    destination_unit: Unit


@dataclass(frozen=True)
class FormResult:
    """Outcome of submitting the conversion form.

    Exactly one of ``text`` and ``error`` is set.
    """
    request: Optional[ConversionRequest] = None
    value: Optional[float] = None
    text: Optional[str] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def notification(self) -> Optional[str]:
        return self.error.message if self.error else None
