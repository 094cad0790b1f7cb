"""Tests for the component registry."""

import pytest

from whisper_diary.core import Registry, RegistryError


class Widget:
    def __init__(self, size: int = 1):
        self.size = size


class TestRegistry:
    def test_register_and_create(self):
        registry = Registry[Widget]("widgets")
        registry.register("basic")(Widget)
        
        widget = registry.create("basic", size=3)
        assert isinstance(widget, Widget)
        assert widget.size == 3

    def test_duplicate_key_rejected(self):
        registry = Registry[Widget]("widgets")
        registry.register("basic")(Widget)
        
        with pytest.raises(RegistryError):
            registry.register("basic")(Widget)

    def test_unknown_key_lists_available(self):
        registry = Registry[Widget]("widgets")
        registry.register("basic")(Widget)
        
        with pytest.raises(RegistryError, match="basic"):
            registry.get("fancy")

    def test_list_keeps_registration_order(self):
        registry = Registry[Widget]("widgets")
        for key in ("b", "a", "c"):
            registry.register(key)(Widget)
        
        assert registry.list() == ["b", "a", "c"]
        assert "a" in registry
        assert "z" not in registry
