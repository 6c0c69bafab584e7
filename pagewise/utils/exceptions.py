class PagewiseError(Exception):
    """Base exception for all Pagewise errors."""


class InvalidPaginationArgument(PagewiseError, TypeError):
    """Raised when a pagination argument is not an integer."""
