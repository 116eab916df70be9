import math

# Integral results at or beyond this magnitude keep float notation (1e+16)
_INTEGRAL_LIMIT = 1e16


def format_result(value: float) -> str:
    """Plain string form of a float, as shown after a binary evaluation or a sign flip.

    Whole numbers drop the trailing ``.0`` and negative zero shows as ``0``.
    """
    if value == 0:
        return '0'
    if math.isfinite(value) and value == int(value) and abs(value) < _INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)


def format_significant(value: float, digits: int = 9) -> str:
    """General (fixed or scientific) notation limited to `digits` significant digits."""
    if value == 0:
        return '0'
    return format(value, f'.{digits}g')


def parse_number(text: str) -> float:
    """Parse a display entry. Raises ValueError if it is not a plain number."""
    return float(text)
