"""ABOUTME: Exceptions raised by the type registry and effectiveness engine.
ABOUTME: UnknownTypeError is recoverable, TableIntegrityError is fatal at import."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typetriad.registry import Language


class TypeTriadError(Exception):
    """Base class for all errors raised by this package."""


class UnknownTypeError(TypeTriadError, LookupError):
    """No type has the given display name in the given language."""

    def __init__(self, name: str, language: "Language") -> None:
        self.name = name
        self.language = language
        super().__init__(f"Unknown type '{name}' ({language.value})")


class TableIntegrityError(TypeTriadError):
    """The static multiplier table is incomplete or holds a non-canonical value."""
