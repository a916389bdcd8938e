"""Module-specific errors for package_search domain."""


class ErrUnknownField(Exception):
    """Raised when a field name is outside the package search vocabulary."""
    pass


class ErrInvalidTerm(Exception):
    """Raised when a term's value does not fit its field."""
    pass


__all__ = [
    "ErrUnknownField",
    "ErrInvalidTerm",
]
