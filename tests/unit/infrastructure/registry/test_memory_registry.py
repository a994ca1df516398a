"""Unit tests for the in-memory registry resource store."""

import pytest

from i18nmail.infrastructure.registry.base import (
    Collection,
    Resource,
    ResourceStore,
    ResourceStoreError,
    join_path,
    locale_path,
)
from i18nmail.infrastructure.registry.memory_registry import InMemoryResourceStore

TENANT = "carbon.super"


def test_resource_store_is_abstract() -> None:
    """ResourceStore cannot be instantiated directly."""
    with pytest.raises(TypeError):
        ResourceStore()  # type: ignore[abstract]


def test_memory_store_implements_resource_store() -> None:
    """InMemoryResourceStore is a ResourceStore."""
    assert isinstance(InMemoryResourceStore(), ResourceStore)


class TestPaths:
    """Tests for path helpers."""

    def test_join_path(self):
        """Test joining path segments."""
        assert join_path("/identity/email", "passwordreset") == "/identity/email/passwordreset"
        assert join_path("/identity/email/", "/passwordreset/") == "/identity/email/passwordreset"
        assert join_path("/") == "/"

    def test_locale_path_lowercases(self):
        """Test that the locale sub-key is lower-cased."""
        assert locale_path("/identity/email/otp", "en_US") == "/identity/email/otp/en_us"
        assert locale_path("/identity/email/otp", None) == "/identity/email/otp"


class TestInMemoryResourceStore:
    """Test suite for InMemoryResourceStore."""

    def test_put_and_get(self):
        """Test storing and reading back a resource."""
        store = InMemoryResourceStore()
        store.put(Resource(properties={"a": "1"}), "/root/item", TENANT)

        resource = store.get("/root/item", TENANT)

        assert resource is not None
        assert resource.get_property("a") == "1"
        assert resource.path == "/root/item"

    def test_get_missing(self):
        """Test that a missing path returns None."""
        assert InMemoryResourceStore().get("/root/item", TENANT) is None

    def test_put_creates_parent_collections(self):
        """Test that missing parents are created as collections."""
        store = InMemoryResourceStore()
        store.put(Resource(), "/root/type/item", TENANT)

        assert store.exists("/root", TENANT)
        assert isinstance(store.get("/root/type", TENANT), Collection)

    def test_collection_children_in_insertion_order(self):
        """Test that children keep insertion order."""
        store = InMemoryResourceStore()
        store.put(Collection(), "/root/b", TENANT)
        store.put(Collection(), "/root/a", TENANT)
        store.put(Resource(), "/root/b/deep", TENANT)

        root = store.get("/root", TENANT)

        assert isinstance(root, Collection)
        assert root.children == ["/root/b", "/root/a"]

    def test_locale_sub_key_is_case_insensitive(self):
        """Test that locale lookups ignore case."""
        store = InMemoryResourceStore()
        store.put(Resource(properties={"x": "y"}), "/root/type", TENANT, "en_US")

        assert store.get("/root/type", TENANT, "EN_us") is not None
        assert store.exists("/root/type/en_us", TENANT)

    def test_put_replaces(self):
        """Test that put replaces an existing resource."""
        store = InMemoryResourceStore()
        store.put(Resource(properties={"v": "1"}), "/root/item", TENANT)
        store.put(Resource(properties={"v": "2"}), "/root/item", TENANT)

        assert store.get("/root/item", TENANT).get_property("v") == "2"

    def test_returned_resources_are_copies(self):
        """Test that the store keeps its own copies."""
        store = InMemoryResourceStore()
        original = Resource(properties={"v": "1"})
        store.put(original, "/root/item", TENANT)

        original.set_property("v", "changed")
        fetched = store.get("/root/item", TENANT)
        fetched.set_property("v", "changed again")

        assert store.get("/root/item", TENANT).get_property("v") == "1"

    def test_delete_subtree(self):
        """Test that delete removes the whole subtree."""
        store = InMemoryResourceStore()
        store.put(Collection(), "/root/type", TENANT)
        store.put(Resource(), "/root/type", TENANT, "en_US")
        store.put(Resource(), "/root/typeother", TENANT)

        store.delete("/root/type", TENANT)

        assert not store.exists("/root/type", TENANT)
        assert not store.exists("/root/type/en_us", TENANT)
        assert store.exists("/root/typeother", TENANT)

    def test_delete_locale_only(self):
        """Test that delete with a locale removes only that translation."""
        store = InMemoryResourceStore()
        store.put(Resource(), "/root/type", TENANT, "en_US")
        store.put(Resource(), "/root/type", TENANT, "fr_FR")

        store.delete("/root/type", TENANT, "EN_US")

        assert store.get("/root/type", TENANT, "en_US") is None
        assert store.get("/root/type", TENANT, "fr_FR") is not None

    def test_delete_missing_is_noop(self):
        """Test that deleting a missing path does not fail."""
        InMemoryResourceStore().delete("/root/nothing", TENANT)

    def test_tenants_are_isolated(self):
        """Test that tenants do not share resources."""
        store = InMemoryResourceStore()
        store.put(Resource(), "/root/item", "tenant-a.com")

        assert store.exists("/root/item", "tenant-a.com")
        assert not store.exists("/root/item", "tenant-b.com")
        assert store.size("tenant-b.com") == 0

    def test_relative_path_rejected(self):
        """Test that a relative path is rejected."""
        with pytest.raises(ResourceStoreError):
            InMemoryResourceStore().get("root/item", TENANT)

    def test_blank_tenant_rejected(self):
        """Test that a blank tenant is rejected."""
        with pytest.raises(ResourceStoreError):
            InMemoryResourceStore().exists("/root/item", "")

    def test_clear(self):
        """Test that clear empties every tenant."""
        store = InMemoryResourceStore()
        store.put(Resource(), "/root/item", TENANT)

        store.clear()

        assert store.size(TENANT) == 0
