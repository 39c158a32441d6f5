"""Conversion form: the boundary between raw user input and the engine.

Check order on submit:
1. Empty text (EmptyInput)
2. Unparseable or non-finite text (InvalidNumber)
3. Units from different categories (IncompatibleCategories)
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from unit_converter.config import DISPLAY_DECIMALS
from unit_converter.converter import UnitLike, as_unit, convert_request
from unit_converter.errors import ConversionError, EmptyInput, InvalidNumber
from unit_converter.models import ConversionRequest, FormResult

logger = logging.getLogger(__name__)


def parse_value(text: Optional[str]) -> float:
    """Parse user-entered numeric text into a finite float."""
    if text is None or not text.strip():
        raise EmptyInput()
    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        raise InvalidNumber(text) from None
    if not math.isfinite(value):
        raise InvalidNumber(text)
    return value


def format_result(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Format a result with a fixed number of decimals.

    Rounds half away from zero on the shortest repr of the float, so
    0.125 displays as 0.13.
    """
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = 350 + decimals
        quantized = Decimal(repr(float(value))).quantize(exponent, rounding=ROUND_HALF_UP)
    return format(quantized, "f")


def submit(
    text: Optional[str],
    source_unit: UnitLike,
    destination_unit: UnitLike,
    decimals: int = DISPLAY_DECIMALS,
) -> FormResult:
    """Handle one press of the Convert button.

    User errors come back inside the FormResult; catalog defects raise.
    """
    source_unit = as_unit(source_unit)
    destination_unit = as_unit(destination_unit)

    try:
        value = parse_value(text)
        request = ConversionRequest(value, source_unit, destination_unit)
        result = convert_request(request)
    except ConversionError as e:
        logger.warning("Rejected conversion %r %s -> %s: %s",
                       text, source_unit.value, destination_unit.value, e.message)
        return FormResult(error=e)

    return FormResult(
        request=request,
        value=result,
        text=format_result(result, decimals),
    )
