"""
Configurators.

A configurator turns a raw configuration document into a runtime
configuration in two steps:

    1. validate            - check the document against its shape
    2. inject_dependencies - replace handler/middleware names with the
                             dependencies registered under those names

Only two variants exist, one per DocumentKind:

    StorefrontConfigurator - validates; nothing to inject
    GatewayConfigurator    - validates; resolves fragment and API references

Usage:
    registry = InjectableRegistry()
    registry.register("indexHandler", Injectable.HANDLER, index_handler)

    configurator = GatewayConfigurator(registry=registry)
    configurator.configure(document)

    configurator.configuration["fragments"][0]["versions"]["1.0.0"]["handler"]
    # -> index_handler

    # Or let the document pick its configurator
    configurator = configure_document(document, registry)
"""

from __future__ import annotations

import copy
import logging
from typing import Any, final

from .enums import DocumentKind, Injectable
from .errors import ConfigurationBaseNotImplemented, DependencyNotFound
from .registry import InjectableRegistry, get_injectable_registry
from .settings import PuzzleSettings, get_settings
from .validation import detect_document_kind, validate_document

logger = logging.getLogger(__name__)


class Configurator:
    """
    Base configurator.

    Defines configure() and the stored configuration. validate() and
    inject_dependencies() must be supplied by a variant; calling them on the
    base raises ConfigurationBaseNotImplemented.

    configure() never exposes a half-processed document: injection runs on
    a deep copy of the input, and the stored configuration is only replaced
    once both steps succeed.
    """

    kind: DocumentKind | None = None

    def __init__(
        self,
        registry: InjectableRegistry | None = None,
        *,
        settings: PuzzleSettings | None = None,
    ):
        """
        Initialize configurator.

        Args:
            registry: Registry to resolve references against
                (defaults to the process-wide registry)
            settings: Behaviour settings (defaults to get_settings())
        """
        self._registry = registry if registry is not None else get_injectable_registry()
        self._settings = settings if settings is not None else get_settings()
        self._configuration: dict[str, Any] | None = None

    @property
    def registry(self) -> InjectableRegistry:
        return self._registry

    @property
    def configuration(self) -> dict[str, Any] | None:
        """The active configuration, or None before the first successful configure()."""
        return self._configuration

    def configure(self, document: dict[str, Any]) -> dict[str, Any]:
        """
        Validate a document, inject its dependencies and store the result.

        Args:
            document: Raw decoded document (left unmodified)

        Returns:
            The stored configuration

        Raises:
            UnrecognizedDocumentShape: Document is not of this configurator's kind
            SchemaViolation: Document breaks its schema
            DependencyNotFound: A reference has no registry entry
            ConfigurationBaseNotImplemented: Called on the base configurator
        """
        # Frozen for this call only; an explicit freeze() by the caller is kept
        scoped_freeze = self._settings.freeze_registry_on_configure and not self._registry.frozen
        if scoped_freeze:
            self._registry.freeze()

        try:
            self.validate(document)

            working = copy.deepcopy(document)
            self.inject_dependencies(working)
        finally:
            if scoped_freeze:
                self._registry.unfreeze()

        self._configuration = working
        logger.info(f"[configurator] Configured | {self._summary(working)}")
        return working

    def validate(self, document: dict[str, Any]) -> None:
        raise ConfigurationBaseNotImplemented("validate")

    def inject_dependencies(self, document: dict[str, Any]) -> None:
        raise ConfigurationBaseNotImplemented("inject_dependencies")

    def _summary(self, document: dict[str, Any]) -> str:
        return f"kind={self.kind.value if self.kind else None}"

    def __repr__(self) -> str:
        configured = self._configuration is not None
        return f"{type(self).__name__}(configured={configured})"


@final
class StorefrontConfigurator(Configurator):
    """Configurator for storefront documents. Storefronts carry no references."""

    kind = DocumentKind.STOREFRONT

    def validate(self, document: dict[str, Any]) -> None:
        validate_document(
            document,
            self.kind,
            allow_unknown_fields=self._settings.allow_unknown_fields,
        )

    def inject_dependencies(self, document: dict[str, Any]) -> None:
        pass

    def _summary(self, document: dict[str, Any]) -> str:
        return (
            f"kind={self.kind.value} | "
            f"gateways={len(document['gateways'])} | "
            f"pages={len(document['pages'])}"
        )


@final
class GatewayConfigurator(Configurator):
    """
    Configurator for gateway documents.

    Injection resolves, in document order:
    - each fragment version's handler, then the fragment's render middlewares
    - each API version's handler, then every endpoint's middlewares

    A document without a middleware list has nothing to resolve there and
    the key stays absent. The first unresolved reference aborts configure()
    with DependencyNotFound.
    """

    kind = DocumentKind.GATEWAY

    def validate(self, document: dict[str, Any]) -> None:
        validate_document(
            document,
            self.kind,
            allow_unknown_fields=self._settings.allow_unknown_fields,
        )

    def inject_dependencies(self, document: dict[str, Any]) -> None:
        for i, fragment in enumerate(document["fragments"]):
            for version_name, version in fragment["versions"].items():
                self._inject_handler(version, f"fragments.{i}.versions[{version_name}]")

            self._inject_middlewares(fragment["render"], f"fragments.{i}.render")

        for i, api in enumerate(document["api"]):
            for version_name, version in api["versions"].items():
                version_path = f"api.{i}.versions[{version_name}]"
                self._inject_handler(version, version_path)

                for j, endpoint in enumerate(version["endpoints"]):
                    self._inject_middlewares(endpoint, f"{version_path}.endpoints.{j}")

    def _inject_handler(self, version: dict[str, Any], path: str) -> None:
        name = version.get("handler")
        if name is not None:
            version["handler"] = self._resolve(name, Injectable.HANDLER, f"{path}.handler")

    def _inject_middlewares(self, owner: dict[str, Any], path: str) -> None:
        names = owner.get("middlewares")
        if names is not None:
            owner["middlewares"] = [
                self._resolve(name, Injectable.MIDDLEWARE, f"{path}.middlewares.{k}")
                for k, name in enumerate(names)
            ]

    def _resolve(self, name: str, kind: Injectable, path: str) -> Any:
        try:
            return self._registry.get(name, kind)
        except DependencyNotFound as e:
            logger.warning(f"[configurator] Unresolved {kind.value} '{name}' at {path}")
            raise DependencyNotFound(kind.value, name, path=path, available=e.available) from e

    def _summary(self, document: dict[str, Any]) -> str:
        return (
            f"kind={self.kind.value} | "
            f"name={document['name']} | "
            f"fragments={len(document['fragments'])} | "
            f"apis={len(document['api'])}"
        )


CONFIGURATORS: dict[DocumentKind, type[Configurator]] = {
    DocumentKind.GATEWAY: GatewayConfigurator,
    DocumentKind.STOREFRONT: StorefrontConfigurator,
}


def create_configurator(
    kind: DocumentKind | str,
    registry: InjectableRegistry | None = None,
    *,
    settings: PuzzleSettings | None = None,
) -> Configurator:
    """
    Create the configurator for a document kind.

    Args:
        kind: DocumentKind or its value ("gateway" / "storefront")
        registry: Registry for reference resolution
        settings: Behaviour settings

    Raises:
        ValueError: If kind is not a DocumentKind
    """
    return CONFIGURATORS[DocumentKind(kind)](registry, settings=settings)


def configure_document(
    document: dict[str, Any],
    registry: InjectableRegistry | None = None,
    *,
    settings: PuzzleSettings | None = None,
) -> Configurator:
    """
    Detect a document's kind, then configure it with the matching configurator.

    Returns:
        The configurator holding the finalized configuration

    Raises:
        UnrecognizedDocumentShape: If the kind cannot be determined
    """
    kind = detect_document_kind(document)
    configurator = create_configurator(kind, registry, settings=settings)
    configurator.configure(document)
    return configurator
