"""
Document validation.

One generic walker validates any document against any Shape and reports
every violation it finds, not just the first. Document kind detection
lives here too, since it decides which shape a document is walked against.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from .enums import DocumentKind
from .errors import SchemaViolation, UnrecognizedDocumentShape, Violation
from .schemas import GatewayConfig, Shape, StorefrontConfig

logger = logging.getLogger(__name__)

SHAPES: dict[DocumentKind, type[Shape]] = {
    DocumentKind.GATEWAY: GatewayConfig,
    DocumentKind.STOREFRONT: StorefrontConfig,
}

# Keys only one kind of document carries
_GATEWAY_MARKERS = frozenset({"fragments", "api", "fragmentsFolder"})
_STOREFRONT_MARKERS = frozenset({"gateways", "pages"})

MARKERS: dict[DocumentKind, frozenset[str]] = {
    DocumentKind.GATEWAY: _GATEWAY_MARKERS,
    DocumentKind.STOREFRONT: _STOREFRONT_MARKERS,
}


def _require_mapping(document: Any) -> None:
    if not isinstance(document, Mapping):
        raise UnrecognizedDocumentShape(
            f"expected a mapping, got {type(document).__name__}"
        )


def detect_document_kind(document: Any) -> DocumentKind:
    """
    Work out which kind of document this is from its top-level keys.

    Args:
        document: Raw decoded document

    Returns:
        DocumentKind.GATEWAY or DocumentKind.STOREFRONT

    Raises:
        UnrecognizedDocumentShape: If the document is not a mapping, or its
            keys point at both kinds or at neither
    """
    _require_mapping(document)

    keys = set(document)
    is_gateway = bool(keys & _GATEWAY_MARKERS)
    is_storefront = bool(keys & _STOREFRONT_MARKERS)

    if is_gateway and is_storefront:
        raise UnrecognizedDocumentShape(
            "document mixes gateway keys "
            f"{sorted(keys & _GATEWAY_MARKERS)} with storefront keys "
            f"{sorted(keys & _STOREFRONT_MARKERS)}"
        )
    if is_gateway:
        return DocumentKind.GATEWAY
    if is_storefront:
        return DocumentKind.STOREFRONT
    raise UnrecognizedDocumentShape(
        f"none of {sorted(_GATEWAY_MARKERS | _STOREFRONT_MARKERS)} present"
    )


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _field_annotation(shape: type[BaseModel], key: Any) -> Any:
    for name, field in shape.model_fields.items():
        if key in (name, field.alias):
            return field.annotation
    return None


def format_path(loc: tuple[Any, ...], shape: type[Shape] | None = None) -> str:
    """
    Render a location tuple as a path.

    Field names and list indexes are dotted; map keys are bracketed, so a
    version key such as "1.0.0" stays a single segment:

        fragments.0.versions[1.0.0].assets.0.type

    Map keys can only be told apart from field names by walking the shape
    the location came from. Without a shape every part is dotted.
    """
    path = ""
    node: Any = shape
    for part in loc:
        node = _strip_optional(node)
        if get_origin(node) is dict:
            path += f"[{part}]"
            node = get_args(node)[1]
            continue

        if get_origin(node) is list:
            node = get_args(node)[0]
        elif isinstance(node, type) and issubclass(node, BaseModel):
            node = _field_annotation(node, part)
        else:
            node = None
        path += f".{part}" if path else str(part)
    return path or "<root>"


def _to_violation(error: Mapping[str, Any], shape: type[Shape]) -> Violation:
    code = error["type"]
    return Violation(
        path=format_path(error["loc"], shape),
        expected=error["msg"],
        value=None if code == "missing" else error.get("input"),
        code=code,
    )


def validate_shape(
    document: Any,
    shape: type[Shape],
    *,
    allow_unknown_fields: bool = False,
) -> list[Violation]:
    """
    Validate a document against a shape.

    Args:
        document: Raw decoded document
        shape: Shape to validate against
        allow_unknown_fields: Ignore keys the shape does not declare

    Returns:
        Every violation found, in walk order. Empty if the document is valid.
    """
    try:
        shape.model_validate(document)
    except ValidationError as e:
        violations = [_to_violation(error, shape) for error in e.errors(include_url=False)]
    else:
        return []

    if allow_unknown_fields:
        violations = [v for v in violations if v.code != "extra_forbidden"]
    return violations


def validate_document(
    document: Any,
    kind: DocumentKind | str,
    *,
    allow_unknown_fields: bool = False,
) -> None:
    """
    Validate a document as the given kind.

    The document only has to carry one of this kind's marker keys. Marker
    keys of the other kind are ordinary unknown keys and are reported by
    the shape walk (or kept, with allow_unknown_fields).

    Raises:
        UnrecognizedDocumentShape: If the document is not a mapping or
            carries none of this kind's marker keys
        SchemaViolation: If the document breaks its schema (all violations)
    """
    kind = DocumentKind(kind)
    _require_mapping(document)
    if not set(document) & MARKERS[kind]:
        raise UnrecognizedDocumentShape(
            f"expected a {kind.value} document, found none of {sorted(MARKERS[kind])}"
        )

    violations = validate_shape(
        document, SHAPES[kind], allow_unknown_fields=allow_unknown_fields
    )
    if violations:
        logger.warning(
            f"[validation] {kind.value} document rejected | violations={len(violations)}"
        )
        raise SchemaViolation(kind.value, violations)

    logger.debug(f"[validation] {kind.value} document valid")
