"""Tabular view of the unit catalog."""

import pandas as pd

from unit_converter.config import BASE_UNIT_NAMES
from unit_converter.converter import factor, units_in
from unit_converter.models import Category


def catalog_frame() -> pd.DataFrame:
    """One row per unit: unit, category, base unit and factor.

    Temperature units have no factor; their base and factor cells are empty.
    """
    rows = []
    for category in Category:
        base = BASE_UNIT_NAMES.get(category.value)
        for unit in units_in(category):
            rows.append({
                "unit": unit.value,
                "category": category.value,
                "base_unit": base,
                "factor": factor(unit) if base else None,
            })
    return pd.DataFrame(rows, columns=["unit", "category", "base_unit", "factor"])
