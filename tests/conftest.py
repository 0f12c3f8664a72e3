"""
Pytest configuration and fixtures for puzzle-config tests.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add the repository root to path for imports
# This allows `from puzzle_config import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from puzzle_config import (  # noqa: E402
    Injectable,
    InjectableRegistry,
    PuzzleSettings,
    get_settings,
    reset_injectable_registry,
)


@pytest.fixture(autouse=True)
def _isolate_process_state():
    """Fresh process-wide registry and settings cache for every test."""
    reset_injectable_registry()
    get_settings.cache_clear()
    yield
    reset_injectable_registry()
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return PuzzleSettings()


@pytest.fixture
def index_handler():
    return MagicMock(name="indexHandler")


@pytest.fixture
def auth_middleware():
    return MagicMock(name="auth")


@pytest.fixture
def registry(index_handler, auth_middleware):
    """Registry with one handler and one middleware."""
    registry = InjectableRegistry()
    registry.register("indexHandler", Injectable.HANDLER, index_handler)
    registry.register("auth", Injectable.MIDDLEWARE, auth_middleware)
    return registry


@pytest.fixture
def gateway_document():
    """Minimal valid gateway document with no handler/middleware references."""
    return {
        "name": "Browsing",
        "url": "http://localhost:4446",
        "port": 4446,
        "fragmentsFolder": "./fragments",
        "api": [
            {
                "name": "product",
                "testCookie": "product-api-ab",
                "liveVersion": "1.0.0",
                "versions": {
                    "1.0.0": {
                        "endpoints": [
                            {
                                "path": "/detail",
                                "method": "get",
                                "controller": "productController",
                            }
                        ]
                    }
                },
            }
        ],
        "fragments": [
            {
                "name": "header",
                "testCookie": "header-ab",
                "render": {"url": "/"},
                "version": "1.0.0",
                "versions": {
                    "1.0.0": {
                        "assets": [
                            {
                                "name": "header-css",
                                "type": "CSS",
                                "injectType": "EXTERNAL",
                                "fileName": "header.min.css",
                                "location": "HEAD",
                            }
                        ],
                        "dependencies": [],
                    }
                },
            }
        ],
    }


@pytest.fixture
def gateway_document_with_references(gateway_document):
    """Gateway document referencing indexHandler and the auth middleware."""
    fragment = gateway_document["fragments"][0]
    fragment["versions"]["1.0.0"]["handler"] = "indexHandler"
    fragment["render"]["middlewares"] = ["auth"]

    api_version = gateway_document["api"][0]["versions"]["1.0.0"]
    api_version["handler"] = "indexHandler"
    api_version["endpoints"][0]["middlewares"] = ["auth", "auth"]
    return gateway_document


@pytest.fixture
def storefront_document():
    """Minimal valid storefront document."""
    return {
        "gateways": [
            {"name": "Browsing", "url": "http://localhost:4446"},
        ],
        "port": 4444,
        "pages": [
            {"html": "<html><body><fragment from='Browsing' name='header'></fragment></body></html>", "url": "/home"},
        ],
        "dependencies": [],
    }
