"""
Configuration Shapes.

Declarative descriptions of gateway and storefront documents, used purely
for validation. See puzzle_config.validation for the walker that consumes them.
"""

from .common import Shape, TLSSettings
from .gateway import (
    API,
    APIVersion,
    Asset,
    Dependency,
    Endpoint,
    Fragment,
    FragmentVersion,
    GatewayConfig,
    RenderOptions,
)
from .storefront import GatewayReference, Page, StorefrontConfig, StorefrontDependency

__all__ = [
    "Shape",
    "TLSSettings",
    # Gateway
    "GatewayConfig",
    "API",
    "APIVersion",
    "Endpoint",
    "Fragment",
    "FragmentVersion",
    "RenderOptions",
    "Asset",
    "Dependency",
    # Storefront
    "StorefrontConfig",
    "GatewayReference",
    "Page",
    "StorefrontDependency",
]
