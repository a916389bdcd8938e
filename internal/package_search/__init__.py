from .type import PackageField, PackageTerm, default_fields, marker_fields
from .errors import ErrUnknownField, ErrInvalidTerm

__all__ = [
    "PackageField",
    "PackageTerm",
    "default_fields",
    "marker_fields",
    "ErrUnknownField",
    "ErrInvalidTerm",
]
