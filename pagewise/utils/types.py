import operator
from typing import Any

from pagewise.utils.exceptions import InvalidPaginationArgument

# Constants
DEFAULT_ITEMS_PER_PAGE = 20
DEFAULT_PAGE_NUMBER = 1
DEFAULT_WINDOW_SIZE = 5  # Page numbers shown in the navigation window


def as_int(value: Any, name: str) -> int:
    """Convert an integral value to int, rejecting anything else.

    Args:
        value: Value supplied by the caller
        name: Argument name used in the error message

    Returns:
        The value as a plain int

    Raises:
        InvalidPaginationArgument: If the value is not integral
    """
    if isinstance(value, bool):
        raise InvalidPaginationArgument(f"{name} must be an integer, not bool")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidPaginationArgument(
            f"{name} must be an integer, not {type(value).__name__}"
        ) from None


def coerce_int(value: Any, default: int) -> int:
    """Leniently parse untrusted input (query strings, form fields) as int.

    Args:
        value: Raw value, usually a string or None
        default: Returned when the value cannot be parsed

    Returns:
        Parsed integer or the default
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default
