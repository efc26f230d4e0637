################################################################################
# pymetencoder/conversion.py
#
# Conversion and number formatting functions for pymetencoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import logging, math, re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
################################################################################
# EXCEPTION CLASSES
################################################################################
class ConversionError(Exception):
    def __init__(self, val, unit_from, unit_to):
        self.msg = "Cannot convert {} from {} to {}".format(val, unit_from, unit_to)
        super().__init__(self.msg)
################################################################################
# UNIT CONVERSION
################################################################################
def _convert(x, factor=1, intercept=0):
    """
    Converts a value using y = mx + c
    """
    return (factor * x) + intercept
def convert(val, unit_from, unit_to, unit_type):
    """
    Converts value from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Convert from this unit
    :param str unit_to: Convert to this unit
    :param str unit_type: Type of unit
    :returns: Converted value
    :rtype: numeric
    """
    if unit_type == "time":
        return _convert_time(val, unit_from, unit_to)
    elif unit_type == "speed":
        return _convert_speed(val, unit_from, unit_to)
    else:
        raise ValueError("Cannot convert unit type '{}'".format(unit_type))
def _convert_time(val, unit_from, unit_to):
    """
    Converts time values from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Unit to convert from
    :param str unit_to: Unit to convert to
    :returns: Converted value
    :rtype: numeric
    """
    FACTORS = {
        "s": 1, "min": 60, "h": 60 * 60, "day": 60 * 60 * 24
    }
    try:
        # Divide last so that whole multiples convert exactly
        return _convert(val, factor=FACTORS[unit_from]) / FACTORS[unit_to]
    except KeyError:
        raise ConversionError(val, unit_from, unit_to)
def _convert_speed(val, unit_from, unit_to):
    if unit_from == unit_to:
        return val
    if unit_from == "m/s":
        if unit_to == "KT":
            return _convert(val, factor=1.94384)

    # If we have reached this point, we are unable to convert
    raise ConversionError(val, unit_from, unit_to)
################################################################################
# NUMBER FORMATTING
################################################################################
def to_number(val):
    """
    Converts a decimal string (or number) from the entry forms into a float

    :param anything val: Value to convert
    :returns: Numeric value, or None if the value is missing or not a number
    :rtype: float
    """
    if val is None or isinstance(val, bool):
        return None
    val = str(val).strip()
    if val == "":
        return None
    try:
        num = float(val)
    except ValueError:
        logging.warning("{} is not a number".format(val))
        return None
    if not math.isfinite(num):
        logging.warning("{} is not a finite number".format(val))
        return None
    return num
def round_half_up(val):
    """
    Rounds to the nearest integer, with halves rounded away from zero. The
    value goes through its string form so that 0.05 * 10 rounds to 1.
    """
    try:
        return int(Decimal(str(val)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise ValueError("{} cannot be rounded".format(val))
def zero_pad(value, width):
    """
    Renders a non-negative integer zero-padded to the given width. Missing or
    invalid values are treated as 0. Values wider than width are not truncated.

    :param anything value: Value to pad
    :param int width: Minimum number of digits
    :rtype: string
    """
    num = to_number(value)
    if num is None or num < 0:
        num = 0
    return "{:0{width}d}".format(round_half_up(num), width=width)
def sign_magnitude(value):
    """
    Encodes a temperature in degrees as sTTT: a sign figure (0 for zero or
    positive, 1 for negative) followed by the magnitude in tenths of a degree

    :param numeric value: Temperature in degrees
    :rtype: string
    """
    num = to_number(value)
    if num is None:
        num = 0
    sign = 0 if num >= 0 else 1
    tenths = round_half_up(Decimal(str(abs(num))) * 10)
    return "{}{:03d}".format(sign, tenths)
def digits(value):
    """
    Returns the figures of a value with the decimal point and sign removed,
    e.g. 1008.5 becomes "10085". Numbers are read first, so trailing zeros
    after the decimal point are dropped ("1008.50" and 1008.5 both give
    "10085", "1008.0" gives "1008").
    """
    if value is None:
        return ""
    num = to_number(value)
    if num is not None:
        value = format(Decimal(str(num)).normalize(), "f")
    return re.sub(r"[^0-9]", "", str(value))
def last_digits(value, n, default_char="0"):
    """
    Returns the last n figures of a value, left-padded with default_char

    :param anything value: Value to take figures from
    :param int n: Number of figures
    :rtype: string
    """
    return digits(value)[-n:].rjust(n, default_char)
################################################################################
# TIME FUNCTIONS
################################################################################
def to_utc(dt):
    """
    Returns the datetime in UTC. Naive datetimes are assumed to be UTC already.
    ISO 8601 strings are accepted as well.
    """
    if dt is None:
        return None
    if isinstance(dt, str):
        dt = datetime.fromisoformat(dt.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
def hours_between(start, end):
    """
    Returns the number of hours from start to end (negative if end is earlier)
    """
    seconds = (to_utc(end) - to_utc(start)).total_seconds()
    return convert(seconds, "s", "h", "time")
