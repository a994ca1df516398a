"""Registry resource stores and template resource mapping."""

from i18nmail.infrastructure.registry.base import (
    PATH_SEPARATOR,
    Collection,
    Resource,
    ResourceStore,
    ResourceStoreError,
    join_path,
    locale_path,
)
from i18nmail.infrastructure.registry.memory_registry import InMemoryResourceStore

__all__ = [
    "PATH_SEPARATOR",
    "Collection",
    "InMemoryResourceStore",
    "Resource",
    "ResourceStore",
    "ResourceStoreError",
    "join_path",
    "locale_path",
]
