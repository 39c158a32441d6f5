"""Error types raised by the conversion engine and form."""

from typing import Optional

from unit_converter.config import MESSAGES


class ConversionError(Exception):
    """Base class for errors the user can fix by changing the input."""

    code = "conversion_error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or MESSAGES.get(self.code, "Conversion failed.")
        super().__init__(self.message)


class EmptyInput(ConversionError):
    """No numeric text was entered."""

    code = "empty_input"


class InvalidNumber(ConversionError):
    """The entered text is not a finite real number."""

    code = "invalid_number"

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        super().__init__(message)


class IncompatibleCategories(ConversionError):
    """Source and destination units belong to different categories."""

    code = "incompatible_categories"

    def __init__(self, source_unit, destination_unit,
                 source_category=None, destination_category=None, message: Optional[str] = None):
        self.source_unit = source_unit
        self.destination_unit = destination_unit
        self.source_category = source_category
        self.destination_category = destination_category
        super().__init__(message)


class CatalogInconsistencyError(RuntimeError):
    """The static unit tables disagree with each other.

    Indicates a programming defect, never a user error.
    """


class OutOfRange(ConversionError):
    """The converted value does not fit in a float."""

    code = "out_of_range"
