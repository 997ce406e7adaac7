from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from treewire.container import Container


@runtime_checkable
class ResolverProtocol(Protocol):
    """Protocol shared by registration strategies and dependency markers."""

    def resolve(self, container: Container) -> Any:
        """Produce a value for the container that requested it.

        Args:
            container: Container on which ``get`` was invoked. Nested resolutions must
                go through this container so parent/child scoping applies at every depth.

        """
