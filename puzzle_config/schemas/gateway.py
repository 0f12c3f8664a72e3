"""
Gateway document shape.

A gateway serves versioned page fragments and an API surface. Handler and
middleware fields hold registry names here; GatewayConfigurator swaps them
for the registered dependencies after validation.

Example:
    {
        "name": "Browsing",
        "url": "http://localhost:4446",
        "port": 4446,
        "fragmentsFolder": "./fragments",
        "api": [],
        "fragments": [
            {
                "name": "product",
                "testCookie": "product-ab",
                "render": {"url": "/", "middlewares": ["auth"]},
                "version": "1.0.0",
                "versions": {
                    "1.0.0": {"assets": [], "dependencies": [], "handler": "productHandler"}
                }
            }
        ]
    }
"""

from __future__ import annotations

from pydantic import StrictBool, StrictStr

from ..enums import (
    HttpMethod,
    ResourceInjectType,
    ResourceJsExecuteType,
    ResourceLocation,
    ResourceType,
)
from .common import Number, Port, Shape, TLSSettings, UrlPatterns


class Endpoint(Shape):
    path: StrictStr
    method: HttpMethod
    controller: StrictStr
    middlewares: list[StrictStr] | None = None
    route_cache: Number | None = None
    cache_control: StrictStr | None = None


class APIVersion(Shape):
    handler: StrictStr | None = None
    endpoints: list[Endpoint]


class API(Shape):
    """
    An API exposed by the gateway.

    Attributes:
        name: API name (used as the route prefix)
        test_cookie: Cookie that selects a non-live version for testing
        live_version: Version served by default
        versions: Version name -> APIVersion
    """

    name: StrictStr
    test_cookie: StrictStr
    live_version: StrictStr
    versions: dict[StrictStr, APIVersion]


class RenderOptions(Shape):
    """How and where a fragment is rendered."""

    url: UrlPatterns
    static: StrictBool | None = None
    self_replace: StrictBool | None = None
    placeholder: StrictBool | None = None
    timeout: Number | None = None
    middlewares: list[StrictStr] | None = None
    route_cache: Number | None = None


class Asset(Shape):
    name: StrictStr
    type: ResourceType
    inject_type: ResourceInjectType
    file_name: StrictStr
    link: StrictStr | None = None
    location: ResourceLocation
    execute_type: ResourceJsExecuteType | None = None


class Dependency(Shape):
    """Third party resource a fragment depends on (e.g. a shared library)."""

    name: StrictStr
    type: ResourceType
    link: StrictStr | None = None
    preview: StrictStr | None = None
    inject_type: ResourceInjectType | None = None


class FragmentVersion(Shape):
    assets: list[Asset]
    dependencies: list[Dependency]
    handler: StrictStr | None = None


class Fragment(Shape):
    """
    A versioned page component served by the gateway.

    Attributes:
        name: Fragment name
        test_cookie: Cookie that selects a non-active version for testing
        render: Rendering options
        version: Active version
        versions: Version name -> FragmentVersion
    """

    name: StrictStr
    test_cookie: StrictStr
    render: RenderOptions
    version: StrictStr
    versions: dict[StrictStr, FragmentVersion]


class GatewayConfig(Shape):
    """Top-level gateway document."""

    name: StrictStr
    url: StrictStr
    port: Port
    fragments_folder: StrictStr
    is_mobile: StrictBool | None = None
    cors_domains: list[StrictStr] | None = None
    spdy: TLSSettings | None = None
    api: list[API]
    fragments: list[Fragment]
