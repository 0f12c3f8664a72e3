"""
Storefront document shape.

A storefront aggregates fragments from one or more gateways into pages.
Storefront documents carry no handler or middleware references.
"""

from __future__ import annotations

from pydantic import StrictStr

from .common import Number, Port, Shape, TLSSettings, UrlPatterns


class GatewayReference(Shape):
    """A gateway the storefront pulls fragments from."""

    name: StrictStr
    url: StrictStr
    asset_url: StrictStr | None = None


class Page(Shape):
    """
    A page served by the storefront.

    Attributes:
        html: Page template
        url: One or many URL patterns the page answers on
    """

    html: StrictStr
    url: UrlPatterns


class StorefrontDependency(Shape):
    """Static resource shared by every page (inline content or a link)."""

    content: StrictStr | None = None
    link: StrictStr | None = None


class StorefrontConfig(Shape):
    """Top-level storefront document."""

    gateways: list[GatewayReference]
    port: Port
    pages: list[Page]
    poll_interval: Number | None = None
    dependencies: list[StorefrontDependency]
    spdy: TLSSettings | None = None
