"""
Shared building blocks for configuration shapes.

Shapes are closed: keys are the camelCase names used in configuration files,
and unknown keys are reported as violations. Scalars are strict, so a port
written as "8080" or a flag written as 1 is rejected rather than coerced.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainValidator, StrictStr
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..enums import TransferProtocol


class Shape(BaseModel):
    """Base for every configuration shape."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        frozen=True,
    )


def _one_or_many_strings(value: Any) -> str | list[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    raise PydanticCustomError(
        "one_or_many_strings",
        "Input should be a string or a list of strings",
    )


def _number(value: Any) -> int | float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise PydanticCustomError("number", "Input should be a number")


def _port(value: Any) -> int | float:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return value
    raise PydanticCustomError("port", "Input should be a whole number")


def _str_or_bytes(value: Any) -> str | bytes:
    if isinstance(value, (str, bytes)):
        return value
    raise PydanticCustomError("str_or_bytes", "Input should be a string or bytes")


# A URL pattern may be written as "/home" or ["/home", "/"]
UrlPatterns = Annotated[str | list[str], PlainValidator(_one_or_many_strings)]

# Ports are JSON numbers with no fractional part: 4446 or 4446.0
Port = Annotated[int | float, PlainValidator(_port)]

# PEM material may be inline text or raw bytes read by the bootstrap code
KeyMaterial = Annotated[str | bytes, PlainValidator(_str_or_bytes)]

# JSON numbers: int or float, never bool
Number = Annotated[int | float, PlainValidator(_number)]


class TLSSettings(Shape):
    """
    TLS/SPDY settings for a gateway or storefront listener.

    Attributes:
        key: Private key material
        cert: Certificate material
        passphrase: Key passphrase
        protocols: Protocols advertised during ALPN negotiation
    """

    key: KeyMaterial
    cert: KeyMaterial
    passphrase: StrictStr
    protocols: list[TransferProtocol]
