"""
puzzle-config - validation and dependency injection for gateway and storefront configuration.

Configuration documents describe either a gateway (a backend-for-frontend
serving page fragments and APIs) or a storefront (which assembles pages from
gateway fragments). This package:

- **Validates** documents against closed, declarative shapes and reports
  every violation at once
- **Injects** dependencies: handler and middleware names in gateway
  documents are replaced with the objects registered under those names
- **Stores** the finalized configuration on the configurator

Quick Start:
    >>> from puzzle_config import GatewayConfigurator, Injectable, InjectableRegistry
    >>>
    >>> registry = InjectableRegistry()
    >>> registry.register("indexHandler", Injectable.HANDLER, index_handler)
    >>>
    >>> configurator = GatewayConfigurator(registry=registry)
    >>> configurator.configure(document)
    >>> configurator.configuration
"""

__version__ = "0.1.0"

from puzzle_config.configurator import (
    CONFIGURATORS,
    Configurator,
    GatewayConfigurator,
    StorefrontConfigurator,
    configure_document,
    create_configurator,
)
from puzzle_config.enums import (
    DocumentKind,
    HttpMethod,
    Injectable,
    ResourceInjectType,
    ResourceJsExecuteType,
    ResourceLocation,
    ResourceType,
    TransferProtocol,
)
from puzzle_config.errors import (
    ConfigurationBaseNotImplemented,
    ConfigurationError,
    DependencyNotFound,
    DocumentLoadError,
    RegistryFrozenError,
    SchemaViolation,
    UnrecognizedDocumentShape,
    Violation,
    format_error,
)
from puzzle_config.loaders import configure_from_file, load_document
from puzzle_config.registry import (
    InjectableRegistry,
    get_injectable_registry,
    register_injectable,
    reset_injectable_registry,
)
from puzzle_config.settings import PuzzleSettings, configure_logging, get_settings
from puzzle_config.validation import (
    detect_document_kind,
    format_path,
    validate_document,
    validate_shape,
)

__all__ = [
    "__version__",
    # Configurators
    "Configurator",
    "GatewayConfigurator",
    "StorefrontConfigurator",
    "CONFIGURATORS",
    "create_configurator",
    "configure_document",
    # Registry
    "InjectableRegistry",
    "get_injectable_registry",
    "register_injectable",
    "reset_injectable_registry",
    # Validation
    "detect_document_kind",
    "format_path",
    "validate_document",
    "validate_shape",
    # Loading
    "load_document",
    "configure_from_file",
    # Settings
    "PuzzleSettings",
    "get_settings",
    "configure_logging",
    # Enums
    "DocumentKind",
    "Injectable",
    "HttpMethod",
    "ResourceType",
    "ResourceInjectType",
    "ResourceLocation",
    "ResourceJsExecuteType",
    "TransferProtocol",
    # Errors
    "ConfigurationError",
    "UnrecognizedDocumentShape",
    "SchemaViolation",
    "Violation",
    "DependencyNotFound",
    "ConfigurationBaseNotImplemented",
    "RegistryFrozenError",
    "DocumentLoadError",
    "format_error",
]
