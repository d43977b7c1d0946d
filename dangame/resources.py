"""Keyed storage of loaded resources such as textures and fonts."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Hashable, TypeVar

R = TypeVar("R")


class ResourceError(RuntimeError):
    """A resource could not be loaded or stored."""


class ResourceHolder(Generic[R]):
    """Loads resources with a loader callable and keeps them by identifier."""

    def __init__(self, loader: Callable[..., R]) -> None:
        self._loader = loader
        self._resources: Dict[Hashable, R] = {}

    def load(self, identifier: Hashable, filename: str, *args: Any) -> R:
        """Load ``filename`` under ``identifier``; extra args go to the loader."""
        if identifier in self._resources:
            raise ResourceError(f"resource already loaded for {identifier!r}")
        try:
            resource = self._loader(filename, *args)
        except Exception as exc:
            raise ResourceError(f"Failed to load {filename}") from exc
        if resource is None or resource is False:
            raise ResourceError(f"Failed to load {filename}")
        self._resources[identifier] = resource
        return resource

    def get(self, identifier: Hashable) -> R:
        try:
            return self._resources[identifier]
        except KeyError:
            raise KeyError(f"Resource not found for ID: {identifier!r}") from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._resources