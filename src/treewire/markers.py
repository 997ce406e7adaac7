"""Dependency markers that change how a single declared dependency is obtained.

Markers are placed inside an ``inject`` declaration instead of a plain key:

.. code-block:: python

    class App:
        inject = (Lazy.of(Logger), Optional.of(Settings), All.of(Plugin))

        def __init__(self, get_logger, settings, plugins) -> None: ...

They are frozen value objects and never stored in a container registry;
``Container.get`` recognises them and calls their ``resolve`` method with the
requesting container.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from treewire._internal.keys import assert_key

if TYPE_CHECKING:
    from typing_extensions import Self

    from treewire.container import Container


@dataclass(frozen=True)
class DependencyWrapper(ABC):
    """Base class for markers wrapping an inner dependency key."""

    key: Any

    def __post_init__(self) -> None:
        assert_key(self.key)

    @classmethod
    def of(cls, key: Any) -> Self:
        """Wrap ``key``.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.

        """
        return cls(key)

    @abstractmethod
    def resolve(self, container: Container) -> Any:
        """Produce the injected value for ``container``."""


@dataclass(frozen=True)
class Lazy(DependencyWrapper):
    """Inject a zero-argument callable that resolves the key when called.

    Every call performs ``container.get(key)``; caching is left to the strategy
    registered for the key.
    """

    def resolve(self, container: Container) -> Callable[[], Any]:
        return functools.partial(container.get, self.key)


@dataclass(frozen=True)
class All(DependencyWrapper):
    """Inject a tuple with one value per registration made for the key.

    Only the requesting container's registrations are used, in registration order.
    Resolves to an empty tuple when the key was never registered there.
    """

    def resolve(self, container: Container) -> tuple[Any, ...]:
        return container.get_all(self.key)


@dataclass(frozen=True)
class Optional(DependencyWrapper):
    """Inject the key's value only when it is explicitly registered, else ``None``.

    With ``check_parent`` the ancestors are searched in order as well, and the first
    container holding a registration resolves the key. Auto-registration never runs.
    """

    check_parent: bool = False

    @classmethod
    def of(cls, key: Any, check_parent: bool = False) -> Self:  # noqa: FBT001, FBT002
        return cls(key, check_parent)

    def resolve(self, container: Container) -> Any:
        current: Container | None = container
        while current is not None:
            if current.has_handler(self.key):
                return current.get(self.key)
            if not self.check_parent:
                return None
            current = current.parent
        return None


@dataclass(frozen=True)
class Parent(DependencyWrapper):
    """Resolve the key from the parent container, skipping the requesting one.

    Resolves to ``None`` when the requesting container is a root container.
    """

    def resolve(self, container: Container) -> Any:
        parent = container.parent
        if parent is None:
            return None
        return parent.get(self.key)


@dataclass(frozen=True)
class Factory(DependencyWrapper):
    """Inject a callable constructing a new instance of the key on each call.

    The registered lifetime of the key is bypassed. The key's own dependencies are
    resolved first and the caller's arguments are appended after them:

    .. code-block:: python

        class Service:
            inject = (Logger,)

            def __init__(self, logger: Logger, data: str) -> None: ...

        make_service = container.get(Factory.of(Service))
        service = make_service("payload")
    """

    def resolve(self, container: Container) -> Callable[..., Any]:
        return functools.partial(container.invoke, self.key)
