"""
Closed value sets used by configuration documents.

Every enumerated field in a gateway or storefront document takes its value
from one of these. Members compare equal to their raw string value, so
documents decoded from JSON/YAML can be checked against them directly.
"""

from __future__ import annotations

from enum import Enum


class DocumentKind(str, Enum):
    """The two document shapes a configurator can accept."""

    GATEWAY = "gateway"
    STOREFRONT = "storefront"


class Injectable(str, Enum):
    """Kinds of runtime dependencies held by the injectable registry."""

    HANDLER = "HANDLER"
    MIDDLEWARE = "MIDDLEWARE"


class HttpMethod(str, Enum):
    GET = "get"
    POST = "post"


class ResourceType(str, Enum):
    CSS = "CSS"
    JS = "JS"


class ResourceInjectType(str, Enum):
    INLINE = "INLINE"
    EXTERNAL = "EXTERNAL"


class ResourceLocation(str, Enum):
    """Where in the rendered page an asset is placed."""

    HEAD = "HEAD"
    BODY_START = "BODY_START"
    BODY_END = "BODY_END"
    CONTENT_START = "CONTENT_START"
    CONTENT_END = "CONTENT_END"


class ResourceJsExecuteType(str, Enum):
    """Script execution mode for JS assets."""

    ASYNC = "async"
    DEFER = "defer"
    SYNC = "sync"


class TransferProtocol(str, Enum):
    """Protocols offered during TLS/ALPN negotiation."""

    H2 = "h2"
    SPDY = "spdy/3.1"
    HTTP1 = "http/1.1"
