"""
Error taxonomy for configuration processing.

All errors raised by this package derive from ConfigurationError and carry
structured context (field paths, kind/name pairs) so callers can log or
surface them without re-deriving anything from the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ConfigurationError(Exception):
    """Base class for all configuration errors."""

    pass


class UnrecognizedDocumentShape(ConfigurationError):
    """
    Raised when a document matches neither the gateway nor the storefront shape.

    Also raised when a document of one kind is handed to the configurator
    for the other kind.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Unrecognized configuration document: {reason}")


@dataclass(frozen=True)
class Violation:
    """
    A single structural problem found while validating a document.

    Attributes:
        path: Dotted path to the offending field (list indexes and map keys included)
        expected: Human-readable description of the constraint that failed
        value: The offending value (None when the field is missing)
        code: Machine-readable violation code (e.g. "missing", "enum")
    """

    path: str
    expected: str
    value: Any = None
    code: str = ""

    def __str__(self) -> str:
        if self.code == "missing":
            return f"{self.path}: {self.expected}"
        return f"{self.path}: {self.expected} (got {self.value!r})"


class SchemaViolation(ConfigurationError):
    """
    Raised when a document does not satisfy its schema.

    Validation is exhaustive: every violation found during the walk is
    collected here rather than only the first one.
    """

    def __init__(self, kind: str, violations: list[Violation]):
        self.kind = kind
        self.violations = list(violations)
        lines = "\n".join(f"  - {v}" for v in self.violations)
        super().__init__(
            f"Invalid {kind} configuration ({len(self.violations)} violation(s)):\n{lines}"
        )

    @property
    def paths(self) -> list[str]:
        """Dotted paths of every violation, in discovery order."""
        return [v.path for v in self.violations]


class DependencyNotFound(ConfigurationError):
    """
    Raised when a handler or middleware reference has no registry entry.

    `path` is filled in when the lookup happens during injection and names
    the document field holding the reference.
    """

    def __init__(self, kind: str, name: str, path: str | None = None, available: list[str] | None = None):
        self.kind = kind
        self.name = name
        self.path = path
        self.available = list(available or [])
        location = f" (referenced at {path})" if path else ""
        listing = ", ".join(self.available) or "(none)"
        super().__init__(
            f"No {kind} registered under '{name}'{location}. Available: {listing}"
        )


class ConfigurationBaseNotImplemented(ConfigurationError):
    """Raised when the base configurator's abstract steps are invoked directly."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Configurator.{operation} is not implemented on the base configurator. "
            "Use GatewayConfigurator or StorefrontConfigurator."
        )


class RegistryFrozenError(ConfigurationError):
    """Raised when registering into or unregistering from a frozen registry."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(
            f"Cannot register {kind} '{name}': registry is frozen"
        )


class DocumentLoadError(ConfigurationError):
    """Raised when a configuration file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to load configuration from {path}: {reason}")


def format_error(e: BaseException) -> str:
    """Return a short operator-facing message like 'SchemaViolation: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
