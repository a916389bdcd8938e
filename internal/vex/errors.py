"""Module-specific errors for the vex domain."""


class ErrMalformedInput(Exception):
    """Raised when a publish body without explicit id is not a CSAF document."""

    pass


class ErrMissingParameter(Exception):
    """Raised when a lookup names neither an advisory nor a CVE."""

    pass


class ErrUnsupportedQuery(Exception):
    """Raised for CVE based lookups."""

    pass


class ErrAdvisoryNotFound(Exception):
    """Raised when no advisory is stored under the identifier."""

    pass


class ErrDecodeFailure(Exception):
    """Raised when a stored compressed object cannot be decompressed."""

    pass


class ErrStoreFailure(Exception):
    """Raised when the object store fails to read or write."""

    pass


__all__ = [
    "ErrMalformedInput",
    "ErrMissingParameter",
    "ErrUnsupportedQuery",
    "ErrAdvisoryNotFound",
    "ErrDecodeFailure",
    "ErrStoreFailure",
]
