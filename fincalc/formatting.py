"""
Display formatting for calculator results.

Output matches en-US number formatting with USD currency: grouping
separators, half-away-from-zero rounding of the shortest decimal form of
the float (so 1.005 rounds to 1.01), and a leading minus sign ahead of the
currency symbol.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Enough significant digits to quantize any finite float to cents
DECIMAL_PRECISION = 400


def _is_negative(value: float) -> bool:
    return value < 0 or (value == 0 and math.copysign(1.0, value) < 0)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "-∞" if value < 0 else "∞"


def _decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def _round(amount: Decimal, digits: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return abs(amount).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def _grouped(amount: Decimal) -> str:
    return f"{amount:,f}"


def format_currency(value: float, digits: int = 2) -> str:
    """Format as USD with exactly `digits` fraction digits, e.g. -$1,234.50."""
    if not math.isfinite(value):
        text = _non_finite(value)
        return f"-${text[1:]}" if text.startswith("-") else f"${text}"

    sign = "-" if _is_negative(value) else ""
    return f"{sign}${_grouped(_round(_decimal(value), digits))}"


def format_number(value: float, digits: int = 0) -> str:
    """Format with grouping and at most `digits` fraction digits."""
    if not math.isfinite(value):
        return _non_finite(value)

    text = _grouped(_round(_decimal(value), digits))
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    sign = "-" if _is_negative(value) else ""
    return f"{sign}{text}"


def format_percent(value: float, digits: int = 2) -> str:
    """
    Format a percentage value, e.g. 6.5 -> "6.50%".

    The value is divided by 100 first and scaled back exactly, the way a
    percent-style number formatter treats a fraction.
    """
    fraction = value / 100
    if not math.isfinite(fraction):
        return f"{_non_finite(fraction)}%"

    scaled = _round(_decimal(fraction).scaleb(2), digits)
    sign = "-" if _is_negative(fraction) else ""
    return f"{sign}{_grouped(scaled)}%"


def format_years_and_months(months: float) -> str:
    """
    Render a month count as "N years M months", rounding up to whole months.

    Zero components are omitted; non-finite or non-positive input is "0 months".
    """
    if not math.isfinite(months) or months <= 0:
        return "0 months"

    rounded = math.ceil(months)
    years, remaining = divmod(rounded, 12)

    parts = []
    if years > 0:
        parts.append(f"{years} year{'' if years == 1 else 's'}")
    if remaining > 0:
        parts.append(f"{remaining} month{'' if remaining == 1 else 's'}")
    return " ".join(parts) or "0 months"
