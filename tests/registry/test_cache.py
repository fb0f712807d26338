"""Tests for RegistryCache."""

from slashctl.registry.cache import RegistryCache
from slashctl.registry.models import Registry


class TestRegistryCache:
    """Test RegistryCache."""

    def test_starts_empty(self):
        cache = RegistryCache()

        assert cache.get() is None
        assert not cache.is_populated

    def test_set_and_clear(self):
        cache = RegistryCache()
        registry = Registry()

        cache.set(registry)
        assert cache.get() is registry
        assert cache.is_populated

        cache.clear()
        assert cache.get() is None

    def test_instances_are_independent(self):
        first, second = RegistryCache(), RegistryCache()
        first.set(Registry())

        assert second.get() is None
