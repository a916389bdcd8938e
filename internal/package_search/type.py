from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constant import *
from .errors import ErrInvalidTerm, ErrUnknownField


class PackageField(Enum):
    """Searchable package attributes.

    Each member is ``(query name, default-matchable)``. Default-matchable
    fields carry a free-text value and also match bare terms; the others
    are payload-free component kinds, matched only as ``is:<name>``.

    The set is closed. New members are only ever appended.
    """

    DEPENDENT = (FIELD_DEPENDENT, True)
    PURL = (FIELD_PURL, True)
    TYPE = (FIELD_TYPE, True)
    NAMESPACE = (FIELD_NAMESPACE, True)
    NAME = (FIELD_NAME, True)
    VERSION = (FIELD_VERSION, True)
    DESCRIPTION = (FIELD_DESCRIPTION, True)
    DIGEST = (FIELD_DIGEST, True)
    LICENSE = (FIELD_LICENSE, True)
    QUALIFIER = (FIELD_QUALIFIER, True)
    APPLICATION = (FIELD_APPLICATION, False)
    LIBRARY = (FIELD_LIBRARY, False)
    FRAMEWORK = (FIELD_FRAMEWORK, False)
    CONTAINER = (FIELD_CONTAINER, False)
    OPERATING_SYSTEM = (FIELD_OPERATING_SYSTEM, False)
    DEVICE = (FIELD_DEVICE, False)
    FIRMWARE = (FIELD_FIRMWARE, False)
    FILE = (FIELD_FILE, False)

    def __init__(self, query_name: str, default: bool):
        self.query_name = query_name
        self.default = default

    @property
    def carries_value(self) -> bool:
        return self.default

    @property
    def is_marker(self) -> bool:
        return not self.default

    @classmethod
    def resolve(cls, name: str) -> "PackageField":
        """Look up a field by its query name (case-insensitive).

        Raises:
            ErrUnknownField: If name is not part of the vocabulary
        """
        key = (name or "").strip().lower()
        for member in cls:
            if member.query_name == key:
                return member
        raise ErrUnknownField(ERROR_UNKNOWN_FIELD.format(name=name))

    def __str__(self) -> str:
        return self.query_name


def default_fields() -> list[PackageField]:
    """Fields a bare query term is matched against, in declaration order."""
    return [f for f in PackageField if f.default]


def marker_fields() -> list[PackageField]:
    return [f for f in PackageField if f.is_marker]


@dataclass(frozen=True)
class PackageTerm:
    """One field-qualified term of a package query."""

    field: PackageField
    value: Optional[str] = None

    def __post_init__(self):
        if self.field.carries_value:
            if not self.value:
                raise ErrInvalidTerm(
                    ERROR_VALUE_REQUIRED.format(name=self.field.query_name)
                )
        elif self.value is not None:
            raise ErrInvalidTerm(
                ERROR_VALUE_NOT_ALLOWED.format(name=self.field.query_name)
            )

    @classmethod
    def of(cls, name: str, value: Optional[str] = None) -> "PackageTerm":
        return cls(PackageField.resolve(name), value)

    def to_query(self) -> str:
        """Render as ``name:value`` or ``is:name`` for markers."""
        if self.field.is_marker:
            return f"{MARKER_QUALIFIER}{FIELD_SEPARATOR}{self.field.query_name}"
        value = self.value
        if any(c.isspace() for c in value) or '"' in value or "\\" in value:
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            value = f'"{escaped}"'
        return f"{self.field.query_name}{FIELD_SEPARATOR}{value}"


__all__ = [
    "PackageField",
    "PackageTerm",
    "default_fields",
    "marker_fields",
]
