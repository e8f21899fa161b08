"""
Bittenhumans input validators.

Byte counts accepted by the formatters are unsigned 64-bit integers. Validators here
check that contract at the public boundary and raise built-in exceptions with readable
messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .consts import U64_MAX


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(4.5)
        '<type: float>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    type_name = getattr(target_type, "__name__", str(target_type))
    return f"<type: {type_name}>"


def fmt_value(x: Any, max_repr: int = 120) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Inner ">" is escaped so it does not clash with the wrapper brackets, and long reprs
    are truncated with "...".

    Examples:
        >>> fmt_value(-1)
        '<int: -1>'
        >>> fmt_value("1 MB")
        "<str: '1 MB'>"
    """
    t = type(x).__name__
    try:
        r = repr(x)
    except Exception as e:
        r = f"<{t} object (repr failed: {type(e).__name__})>"

    r = r.replace(">", "\\>")
    if len(r) > max_repr:
        r = r[:max(1, max_repr)] + "..."
    return f"<{t}: {r}>"


def validate_byte_count(value: Any) -> int:
    """
    Validate a byte count and return it as a plain int.

    Args:
        value: Integer byte count. Objects implementing __index__ (e.g. numpy integers)
               are accepted and converted.

    Returns:
        int: The byte count, 0 <= value <= 2**64 - 1.

    Raises:
        TypeError: If value is not an integer, or is a bool.
        ValueError: If value is negative or does not fit in 64 bits.

    Examples:
        >>> validate_byte_count(1024)
        1024
        >>> validate_byte_count(-1)
        Traceback (most recent call last):
        ...
        ValueError: byte count must be in range [0, 18446744073709551615], got <int: -1>
    """
    if isinstance(value, bool):
        raise TypeError(f"byte count must be an int, but found {fmt_type(value)}")

    try:
        count = operator.index(value)
    except TypeError:
        raise TypeError(f"byte count must be an int, but found {fmt_type(value)}") from None

    if not 0 <= count <= U64_MAX:
        raise ValueError(f"byte count must be in range [0, {U64_MAX}], got {fmt_value(value)}")
    return count


def validate_precision(precision: Any) -> int:
    """Validate the number of decimal digits rendered after the point."""
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be an int, but found {fmt_type(precision)}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    return precision
