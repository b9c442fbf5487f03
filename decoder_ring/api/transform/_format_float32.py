"""Shortest round-trip text for a binary32 value, %g style."""

import math
import struct

# Significant digits needed to round-trip any binary32 value
_MAX_DIGITS = 9


def _is_float32(candidate: float, value: float) -> bool:
    try:
        (narrowed,) = struct.unpack(">f", struct.pack(">f", candidate))
    except OverflowError:
        return False
    return narrowed == value


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return (digits, decimal exponent) of the shortest decimal that reads back as value."""
    for precision in range(_MAX_DIGITS):
        text = f"{value:.{precision}e}"
        if _is_float32(float(text), value):
            break
    mantissa, _, exponent = text.partition("e")
    return mantissa.replace(".", "").rstrip("0"), int(exponent)


def _format_float32(value: float) -> str:
    """Format a binary32 value with the fewest digits that identify it.

    Exponent notation (``1.5e+07``, at least two exponent digits) is used when
    the decimal exponent is below -4 or at least 6; plain notation otherwise.
    Infinities print as ``+Inf``/``-Inf`` and NaN as ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return f"{sign}0"

    digits, exponent = _shortest_digits(abs(value))
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{sign}{mantissa}e{exponent:+03d}"
    if exponent < 0:
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    integer = digits[: exponent + 1].ljust(exponent + 1, "0")
    fraction = digits[exponent + 1 :]
    return f"{sign}{integer}.{fraction}" if fraction else f"{sign}{integer}"
