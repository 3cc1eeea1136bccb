"""Compact display strings for calculator results."""
import math

from calc_config import PRECISION, SCI_DIGITS, SCI_LOWER, SCI_UPPER


def _strip(digits):
    return digits.rstrip("0").rstrip(".") if "." in digits else digits


def format_number(value, precision=PRECISION):
    """Render `value` with at most `precision` fractional digits.

    Magnitudes above 1e12 or below 1e-6 switch to scientific notation.

    >>> format_number(2.5)
    '2.5'
    >>> format_number(0.1 + 0.2)
    '0.3'
    >>> format_number(1000000000000.5)
    '1e+12'
    >>> format_number(-0.0000001234567)
    '-1.234567e-7'
    """
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        value = 0.0
    magnitude = abs(value)
    if magnitude > SCI_UPPER or magnitude < SCI_LOWER and value != 0:
        mantissa, _, exp = f"{value:.{SCI_DIGITS}e}".partition("e")
        return f"{_strip(mantissa)}e{int(exp):+d}"
    fixed = _strip(f"{value:.{precision}f}")
    return "0" if fixed == "-0" else fixed
