"""
Tests for the Injectable Registry.

Tests cover:
- Registration and lookup by (kind, name)
- DependencyNotFound for unknown names
- Freezing
- Process-wide registry helpers
"""

from unittest.mock import MagicMock

import pytest

from puzzle_config import (
    DependencyNotFound,
    Injectable,
    InjectableRegistry,
    RegistryFrozenError,
    get_injectable_registry,
    register_injectable,
    reset_injectable_registry,
)

# =============================================================================
# InjectableRegistry Tests
# =============================================================================


class TestInjectableRegistry:
    """Tests for InjectableRegistry."""

    def test_register_and_get(self):
        registry = InjectableRegistry()
        handler = MagicMock()

        registry.register("indexHandler", Injectable.HANDLER, handler)

        assert registry.get("indexHandler", Injectable.HANDLER) is handler

    def test_kind_accepts_string_value(self):
        registry = InjectableRegistry()
        middleware = MagicMock()

        registry.register("auth", "MIDDLEWARE", middleware)

        assert registry.get("auth", Injectable.MIDDLEWARE) is middleware
        assert registry.get("auth", "MIDDLEWARE") is middleware

    def test_unknown_kind_rejected(self):
        registry = InjectableRegistry()

        with pytest.raises(ValueError):
            registry.register("x", "CONTROLLER", object())

    def test_kinds_are_separate_namespaces(self):
        registry = InjectableRegistry()
        handler = MagicMock()
        middleware = MagicMock()

        registry.register("shared", Injectable.HANDLER, handler)
        registry.register("shared", Injectable.MIDDLEWARE, middleware)

        assert registry.get("shared", Injectable.HANDLER) is handler
        assert registry.get("shared", Injectable.MIDDLEWARE) is middleware

    def test_later_registration_overwrites(self):
        registry = InjectableRegistry()
        first = MagicMock()
        second = MagicMock()

        registry.register("indexHandler", Injectable.HANDLER, first)
        registry.register("indexHandler", Injectable.HANDLER, second)

        assert registry.get("indexHandler", Injectable.HANDLER) is second
        assert len(registry) == 1

    def test_get_raises_when_not_found(self):
        registry = InjectableRegistry()
        registry.register("indexHandler", Injectable.HANDLER, MagicMock())

        with pytest.raises(DependencyNotFound) as exc_info:
            registry.get("missingHandler", Injectable.HANDLER)

        error = exc_info.value
        assert error.kind == "HANDLER"
        assert error.name == "missingHandler"
        assert error.path is None
        assert error.available == ["indexHandler"]
        assert "missingHandler" in str(error)
        assert "Available: indexHandler" in str(error)

    def test_name_registered_under_other_kind_not_found(self):
        registry = InjectableRegistry()
        registry.register("auth", Injectable.MIDDLEWARE, MagicMock())

        with pytest.raises(DependencyNotFound):
            registry.get("auth", Injectable.HANDLER)

    def test_falsy_dependency_is_found(self):
        registry = InjectableRegistry()
        registry.register("noop", Injectable.HANDLER, None)

        assert registry.has("noop", Injectable.HANDLER) is True
        assert registry.get("noop", Injectable.HANDLER) is None

    def test_has(self):
        registry = InjectableRegistry()

        assert registry.has("auth", Injectable.MIDDLEWARE) is False
        registry.register("auth", Injectable.MIDDLEWARE, MagicMock())
        assert registry.has("auth", Injectable.MIDDLEWARE) is True

    def test_names(self):
        registry = InjectableRegistry()
        registry.register("b", Injectable.HANDLER, MagicMock())
        registry.register("a", Injectable.HANDLER, MagicMock())

        assert registry.names(Injectable.HANDLER) == ["b", "a"]
        assert registry.names(Injectable.MIDDLEWARE) == []

    def test_unregister(self):
        registry = InjectableRegistry()
        registry.register("auth", Injectable.MIDDLEWARE, MagicMock())

        assert registry.unregister("auth", Injectable.MIDDLEWARE) is True
        assert registry.has("auth", Injectable.MIDDLEWARE) is False
        assert registry.unregister("auth", Injectable.MIDDLEWARE) is False

    def test_clear(self):
        registry = InjectableRegistry()
        registry.register("auth", Injectable.MIDDLEWARE, MagicMock())
        registry.freeze()

        registry.clear()

        assert len(registry) == 0
        assert registry.frozen is False


# =============================================================================
# Freezing Tests
# =============================================================================


class TestRegistryFreeze:
    """Tests for the register-then-freeze lifecycle."""

    def test_register_after_freeze_raises(self):
        registry = InjectableRegistry()
        registry.freeze()

        with pytest.raises(RegistryFrozenError) as exc_info:
            registry.register("late", Injectable.HANDLER, MagicMock())

        assert exc_info.value.kind == "HANDLER"
        assert exc_info.value.name == "late"
        assert registry.has("late", Injectable.HANDLER) is False

    def test_unregister_after_freeze_raises(self):
        registry = InjectableRegistry()
        registry.register("auth", Injectable.MIDDLEWARE, MagicMock())
        registry.freeze()

        with pytest.raises(RegistryFrozenError):
            registry.unregister("auth", Injectable.MIDDLEWARE)

    def test_lookup_still_works_when_frozen(self):
        registry = InjectableRegistry()
        handler = MagicMock()
        registry.register("indexHandler", Injectable.HANDLER, handler)
        registry.freeze()
        registry.freeze()

        assert registry.frozen is True
        assert registry.get("indexHandler", Injectable.HANDLER) is handler

    def test_unfreeze_allows_registration(self):
        registry = InjectableRegistry()
        registry.freeze()
        registry.unfreeze()
        registry.unfreeze()

        registry.register("late", Injectable.HANDLER, MagicMock())

        assert registry.frozen is False
        assert registry.has("late", Injectable.HANDLER) is True


# =============================================================================
# Process-wide Registry Tests
# =============================================================================


class TestProcessWideRegistry:
    """Tests for the process-wide registry helpers."""

    def test_same_instance_returned(self):
        assert get_injectable_registry() is get_injectable_registry()

    def test_register_injectable(self):
        handler = MagicMock()

        register_injectable("indexHandler", Injectable.HANDLER, handler)

        assert get_injectable_registry().get("indexHandler", Injectable.HANDLER) is handler

    def test_reset_creates_fresh_registry(self):
        first = get_injectable_registry()
        register_injectable("indexHandler", Injectable.HANDLER, MagicMock())

        reset_injectable_registry()
        second = get_injectable_registry()

        assert second is not first
        assert second.has("indexHandler", Injectable.HANDLER) is False
