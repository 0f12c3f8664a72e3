"""
Document Loaders.

Read configuration documents from JSON or YAML files.

File Format (gateway.yml):
    name: Browsing
    url: http://localhost:4446
    port: 4446
    fragmentsFolder: ./fragments
    api: []
    fragments:
      - name: product
        testCookie: product-ab
        render:
          url: /
        version: 1.0.0
        versions:
          1.0.0:
            assets: []
            dependencies: []
            handler: productHandler

Usage:
    document = load_document("config/gateway.yml")
    configurator = configure_document(document, registry)

    # Or in one step
    configurator = configure_from_file("config/gateway.yml", registry)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .configurator import Configurator, configure_document
from .errors import DocumentLoadError, UnrecognizedDocumentShape
from .registry import InjectableRegistry
from .settings import PuzzleSettings

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_document(path: str | Path) -> dict[str, Any]:
    """
    Load a configuration document from a file.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        The decoded document

    Raises:
        DocumentLoadError: If the file cannot be read or decoded
        UnrecognizedDocumentShape: If the file does not hold a mapping
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise DocumentLoadError(str(path), f"unsupported file type '{suffix}'")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(str(path), str(e)) from e

    try:
        if suffix in JSON_SUFFIXES:
            document = json.loads(text)
        else:
            document = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(str(path), f"invalid {suffix.lstrip('.')}: {e}") from e

    if not isinstance(document, Mapping):
        raise UnrecognizedDocumentShape(
            f"{path} holds a {type(document).__name__}, not a mapping"
        )

    logger.info(f"[loader] Loaded document: {path}")
    return dict(document)


def configure_from_file(
    path: str | Path,
    registry: InjectableRegistry | None = None,
    *,
    settings: PuzzleSettings | None = None,
) -> Configurator:
    """Load a document and configure it with the configurator for its kind."""
    return configure_document(load_document(path), registry, settings=settings)
