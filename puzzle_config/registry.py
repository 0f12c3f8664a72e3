"""
Injectable Registry.

Named, typed store of runtime dependencies (handlers, middlewares) that
configuration documents reference by name.

Lifecycle:
    Dependencies are registered at application startup. While a
    configurator is configuring, the registry is frozen and registration
    raises RegistryFrozenError. Once configure() returns or raises, the
    registry is writable again, so a failed configure() can be fixed by
    registering the missing dependency and calling configure() again.
    Call freeze() to keep it read-only for good.

Usage:
    registry = InjectableRegistry()
    registry.register("indexHandler", Injectable.HANDLER, index_handler)
    registry.register("auth", Injectable.MIDDLEWARE, auth_middleware)

    configurator = GatewayConfigurator(registry=registry)
    configurator.configure(document)
"""

from __future__ import annotations

import logging
from typing import Any

from .enums import Injectable
from .errors import DependencyNotFound, RegistryFrozenError

logger = logging.getLogger(__name__)


class InjectableRegistry:
    """
    Registry of injectable dependencies keyed by (kind, name).

    Stored values are opaque to the registry. Making sure a handler is
    callable as a handler is the caller's job.

    Example:
        registry = InjectableRegistry()
        registry.register("indexHandler", Injectable.HANDLER, handler)

        registry.get("indexHandler", Injectable.HANDLER)  # -> handler
        registry.get("missing", Injectable.HANDLER)       # DependencyNotFound
    """

    def __init__(self) -> None:
        self._dependencies: dict[Injectable, dict[str, Any]] = {kind: {} for kind in Injectable}
        self._frozen = False

    def register(self, name: str, kind: Injectable | str, dependency: Any) -> None:
        """
        Register a dependency.

        Args:
            name: Name used to reference the dependency in documents
            kind: Dependency kind (HANDLER or MIDDLEWARE)
            dependency: The concrete dependency

        Raises:
            RegistryFrozenError: If the registry is frozen
            ValueError: If kind is not a known Injectable

        Note:
            Registering the same (kind, name) twice replaces the earlier entry.
        """
        kind = Injectable(kind)
        if self._frozen:
            raise RegistryFrozenError(kind.value, name)

        entries = self._dependencies[kind]
        if name in entries:
            logger.warning(f"[registry] Replacing existing {kind.value}: {name}")
        entries[name] = dependency
        logger.info(f"[registry] Registered {kind.value}: {name}")

    def get(self, name: str, kind: Injectable | str) -> Any:
        """
        Get a registered dependency.

        Args:
            name: Registered name
            kind: Dependency kind

        Returns:
            The dependency stored under (kind, name)

        Raises:
            DependencyNotFound: If nothing is registered under (kind, name)
        """
        kind = Injectable(kind)
        entries = self._dependencies[kind]
        if name not in entries:
            raise DependencyNotFound(kind.value, name, available=list(entries))
        return entries[name]

    def has(self, name: str, kind: Injectable | str) -> bool:
        """Check if a dependency is registered."""
        return name in self._dependencies[Injectable(kind)]

    def names(self, kind: Injectable | str) -> list[str]:
        """Registered names for a kind, in registration order."""
        return list(self._dependencies[Injectable(kind)])

    def unregister(self, name: str, kind: Injectable | str) -> bool:
        """
        Remove a dependency.

        Returns:
            True if it was removed, False if it was not registered

        Raises:
            RegistryFrozenError: If the registry is frozen
        """
        kind = Injectable(kind)
        if self._frozen:
            raise RegistryFrozenError(kind.value, name)

        entries = self._dependencies[kind]
        if name in entries:
            del entries[name]
            logger.info(f"[registry] Unregistered {kind.value}: {name}")
            return True
        return False

    def freeze(self) -> None:
        """Make the registry read-only. Idempotent."""
        if not self._frozen:
            self._frozen = True
            logger.debug(
                f"[registry] Frozen | "
                f"handlers={len(self._dependencies[Injectable.HANDLER])} | "
                f"middlewares={len(self._dependencies[Injectable.MIDDLEWARE])}"
            )

    def unfreeze(self) -> None:
        """Make the registry writable again. Idempotent."""
        if self._frozen:
            self._frozen = False
            logger.debug("[registry] Unfrozen")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def clear(self) -> None:
        """Remove every dependency and unfreeze (for testing)."""
        for entries in self._dependencies.values():
            entries.clear()
        self._frozen = False
        logger.debug("[registry] Cleared all dependencies")

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._dependencies.values())

    def __repr__(self) -> str:
        return (
            f"InjectableRegistry(handlers={self.names(Injectable.HANDLER)}, "
            f"middlewares={self.names(Injectable.MIDDLEWARE)}, frozen={self._frozen})"
        )


# Process-wide registry instance
_registry: InjectableRegistry | None = None


def get_injectable_registry() -> InjectableRegistry:
    """
    Get the process-wide injectable registry.

    Creates the registry on first access.
    """
    global _registry
    if _registry is None:
        _registry = InjectableRegistry()
    return _registry


def register_injectable(name: str, kind: Injectable | str, dependency: Any) -> None:
    """Register a dependency in the process-wide registry."""
    get_injectable_registry().register(name, kind, dependency)


def reset_injectable_registry() -> None:
    """
    Reset the process-wide registry (for testing).

    Creates a fresh registry instance on next access.
    """
    global _registry
    if _registry is not None:
        _registry.clear()
    _registry = None
