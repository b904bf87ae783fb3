"""
Sexagesimal angle conversion and locale independent number parsing
"""

import re

from BrightStars.errors import FormatError

# Plain ASCII decimal notation only, '.' as decimal point whatever the locale
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)$")


def parse_int(text: str) -> int:
    value = text.strip()
    if not _INT_RE.match(value):
        raise FormatError(f"Expected an integer, got {text!r}")
    return int(value)


def parse_float(text: str) -> float:
    value = text.strip()
    if not _FLOAT_RE.match(value):
        raise FormatError(f"Expected a decimal number, got {text!r}")
    return float(value)


def to_decimal_degrees(value, minutes, seconds, in_hours: bool) -> float:
    """
    Converts a sexagesimal triple to decimal degrees.

    With in_hours the triple is hours/minutes/seconds of time (right
    ascension) and the result is multiplied by 15.  Otherwise it is
    degrees/minutes/seconds of arc and the sign must be applied by the
    caller, see apply_sign().
    """
    degrees = value + minutes / 60 + seconds / 3600
    if in_hours:
        degrees *= 15
    return degrees


def apply_sign(sign: str, degrees: float) -> float:
    if sign == "-":
        return -degrees
    return degrees


def ra_to_deg(ra_h, ra_m, ra_s):
    return to_decimal_degrees(ra_h, ra_m, ra_s, in_hours=True)


def dec_to_deg(sign, dec_d, dec_m, dec_s):
    return apply_sign(sign, to_decimal_degrees(dec_d, dec_m, dec_s, in_hours=False))
