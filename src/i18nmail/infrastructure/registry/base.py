"""Base abstractions for registry resource stores.

A resource store keeps property bags at slash-separated paths, isolated per
tenant. A locale may be given as a sub-key beneath a path; stores keep it at
``<path>/<locale in lower case>``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

PATH_SEPARATOR = "/"


class ResourceStoreError(Exception):
    """Raised by a resource store when an operation cannot be completed."""


@dataclass
class Resource:
    """A stored key-value property bag with optional raw content."""

    properties: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None
    path: str | None = None

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value


@dataclass
class Collection(Resource):
    """A directory-like resource that also lists the full paths of its children."""

    children: list[str] = field(default_factory=list)


def join_path(*parts: str) -> str:
    """Join path segments with the registry separator.

    Example:
        >>> join_path("/identity/email", "passwordreset")
        '/identity/email/passwordreset'
    """
    head, *tail = parts
    path = head.rstrip(PATH_SEPARATOR)
    for part in tail:
        path = f"{path}{PATH_SEPARATOR}{part.strip(PATH_SEPARATOR)}"
    return path or PATH_SEPARATOR


def locale_path(path: str, locale: str | None) -> str:
    """Resolve the path of a locale sub-key beneath ``path``."""
    if locale is None:
        return path
    return join_path(path, locale.lower())


class ResourceStore(ABC):
    """Abstract base class for tenant-scoped registry resource stores."""

    @abstractmethod
    def exists(self, path: str, tenant_domain: str) -> bool:
        """Check whether a resource exists at path."""
        ...

    @abstractmethod
    def get(self, path: str, tenant_domain: str, locale: str | None = None) -> Resource | None:
        """Get the resource at path (or its locale sub-key), or None if absent."""
        ...

    @abstractmethod
    def put(
        self,
        resource: Resource,
        path: str,
        tenant_domain: str,
        locale: str | None = None,
    ) -> None:
        """Create or replace the resource at path (or its locale sub-key)."""
        ...

    @abstractmethod
    def delete(self, path: str, tenant_domain: str, locale: str | None = None) -> None:
        """Delete the resource at path (or its locale sub-key) and everything beneath it."""
        ...
