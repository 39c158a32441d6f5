"""Application configuration and constants."""

import os
from types import MappingProxyType

# Display
DISPLAY_DECIMALS = int(os.environ.get("UNIT_CONVERTER_DECIMALS", "2"))

# Logging
LOG_LEVEL = os.environ.get("UNIT_CONVERTER_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Unit catalog, in picker order
UNIT_NAMES = (
    "Inch", "Foot", "Yard", "Mile",
    "Pound", "Ounce", "Ton",
    "Celsius", "Fahrenheit", "Kelvin",
)

# Category membership (category name -> unit names)
CATEGORY_MEMBERS = MappingProxyType({
    "Length": frozenset({"Inch", "Foot", "Yard", "Mile"}),
    "Weight": frozenset({"Pound", "Ounce", "Ton"}),
    "Temperature": frozenset({"Celsius", "Fahrenheit", "Kelvin"}),
})

# Base unit of each factor-table category
BASE_UNIT_NAMES = MappingProxyType({
    "Length": "meter",
    "Weight": "kilogram",
})

# Meters per 1 unit
LENGTH_TO_METER = MappingProxyType({
    "Inch": 0.0254,
    "Foot": 0.3048,
    "Yard": 0.9144,
    "Mile": 1609.34,
})

# Kilograms per 1 unit
WEIGHT_TO_KG = MappingProxyType({
    "Pound": 0.453592,
    "Ounce": 0.0283495,
    "Ton": 907.185,
})

# Temperature affine maps (through Celsius)
FAHRENHEIT_SCALE = 1.8
FAHRENHEIT_OFFSET = 32
KELVIN_OFFSET = 273.15

# User-facing notifications
MESSAGES = MappingProxyType({
    "empty_input": "Please enter a value to convert.",
    "invalid_number": "Please enter a valid number.",
    "incompatible_categories": "Cannot convert between different unit types.",
    "out_of_range": "Result is out of range.",
})
