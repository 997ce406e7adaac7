from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from treewire.container import Container

_UNSET: Any = object()


@dataclass(frozen=True, slots=True)
class InstanceResolver:
    """Always return the same pre-built value."""

    instance: Any

    def resolve(self, container: Container) -> Any:  # noqa: ARG002
        return self.instance


@dataclass(slots=True)
class SingletonResolver:
    """Construct ``concrete`` on first resolution and return the cached value afterwards.

    The cache belongs to this resolver, and a resolver belongs to exactly one container
    registry, so every container keeps its own singleton.
    """

    concrete: Callable[..., Any]
    _instance: Any = field(default=_UNSET, init=False, repr=False)

    def resolve(self, container: Container) -> Any:
        if self._instance is _UNSET:
            self._instance = container.invoke(self.concrete)
        return self._instance

    @property
    def is_resolved(self) -> bool:
        return self._instance is not _UNSET


@dataclass(frozen=True, slots=True)
class TransientResolver:
    """Construct a fresh ``concrete`` on every resolution."""

    concrete: Callable[..., Any]

    def resolve(self, container: Container) -> Any:
        return container.invoke(self.concrete)


@dataclass(frozen=True, slots=True)
class CallbackResolver:
    """Delegate every resolution to ``handler(container)``."""

    handler: Callable[[Container], Any]

    def resolve(self, container: Container) -> Any:
        return self.handler(container)
