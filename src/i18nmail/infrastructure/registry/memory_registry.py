"""In-memory registry resource store.

Keeps every tenant's resources in a dict guarded by a re-entrant lock.
Children of a collection are listed in insertion order. Writing a resource
creates any missing parent collections, like a registry does.
"""

import copy
import threading
from dataclasses import replace

from i18nmail.core.logging import get_logger
from i18nmail.infrastructure.registry.base import (
    PATH_SEPARATOR,
    Collection,
    Resource,
    ResourceStore,
    ResourceStoreError,
    locale_path,
)

logger = get_logger(__name__)


def _parent_path(path: str) -> str | None:
    if path == PATH_SEPARATOR:
        return None
    parent = path.rsplit(PATH_SEPARATOR, 1)[0]
    return parent or PATH_SEPARATOR


def _normalize(path: str) -> str:
    if not path or not path.startswith(PATH_SEPARATOR):
        raise ResourceStoreError(f"Registry path must be absolute: {path!r}")
    return path.rstrip(PATH_SEPARATOR) or PATH_SEPARATOR


class InMemoryResourceStore(ResourceStore):
    """Thread-safe, tenant-isolated resource store held in process memory.

    Resources are copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self) -> None:
        # tenant_domain -> path -> resource
        self._tenants: dict[str, dict[str, Resource]] = {}
        self._lock = threading.RLock()

    def _tenant(self, tenant_domain: str) -> dict[str, Resource]:
        if not tenant_domain:
            raise ResourceStoreError("Tenant domain is required")
        return self._tenants.setdefault(tenant_domain, {})

    def _children(self, nodes: dict[str, Resource], path: str) -> list[str]:
        prefix = path if path == PATH_SEPARATOR else f"{path}{PATH_SEPARATOR}"
        return [
            p for p in nodes
            if p != path and p.startswith(prefix) and PATH_SEPARATOR not in p[len(prefix):]
        ]

    def _ensure_parents(self, nodes: dict[str, Resource], path: str) -> None:
        parent = _parent_path(path)
        missing: list[str] = []
        while parent is not None and parent not in nodes:
            missing.append(parent)
            parent = _parent_path(parent)
        for p in reversed(missing):
            nodes[p] = Collection(path=p)

    def exists(self, path: str, tenant_domain: str) -> bool:
        path = _normalize(path)
        with self._lock:
            return path in self._tenant(tenant_domain)

    def get(self, path: str, tenant_domain: str, locale: str | None = None) -> Resource | None:
        path = locale_path(_normalize(path), locale)
        with self._lock:
            nodes = self._tenant(tenant_domain)
            resource = nodes.get(path)
            if resource is None:
                return None
            resource = copy.deepcopy(resource)
            if isinstance(resource, Collection):
                resource.children = self._children(nodes, path)
            return resource

    def put(
        self,
        resource: Resource,
        path: str,
        tenant_domain: str,
        locale: str | None = None,
    ) -> None:
        path = locale_path(_normalize(path), locale)
        stored = replace(copy.deepcopy(resource), path=path)
        if isinstance(stored, Collection):
            stored.children = []
        with self._lock:
            nodes = self._tenant(tenant_domain)
            self._ensure_parents(nodes, path)
            nodes[path] = stored
        logger.debug("Resource stored", path=path, tenant_domain=tenant_domain)

    def delete(self, path: str, tenant_domain: str, locale: str | None = None) -> None:
        path = locale_path(_normalize(path), locale)
        prefix = f"{path}{PATH_SEPARATOR}"
        with self._lock:
            nodes = self._tenant(tenant_domain)
            doomed = [p for p in nodes if p == path or p.startswith(prefix)]
            for p in doomed:
                del nodes[p]
        if doomed:
            logger.debug("Resource deleted", path=path, tenant_domain=tenant_domain, removed=len(doomed))

    def size(self, tenant_domain: str) -> int:
        """Number of resources stored for a tenant."""
        with self._lock:
            return len(self._tenants.get(tenant_domain, {}))

    def clear(self) -> None:
        """Drop every tenant's resources."""
        with self._lock:
            self._tenants.clear()
