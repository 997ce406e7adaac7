from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, TypeVar, overload

from treewire._internal.descriptors import INJECT_ATTRIBUTE
from treewire._internal.keys import assert_key
from treewire._internal.metadata import lifetime_metadata
from treewire.lifetimes import Lifetime

C = TypeVar("C", bound=Callable[..., Any])


def inject(*keys: Any) -> Callable[[C], C]:
    """Declare the dependency keys passed positionally to a class or factory function.

    Equivalent to assigning ``inject = (...)`` in the class body. Markers such as
    ``Lazy.of(...)`` are accepted anywhere a key is.

    Args:
        *keys: Dependency keys in constructor argument order.

    Raises:
        TreewireInvalidKeyError: If any key is ``None`` or unhashable.

    Examples:
        .. code-block:: python

            @inject(Logger, Lazy.of(Database))
            class Repository:
                def __init__(self, logger: Logger, get_db: Callable[[], Database]) -> None: ...

    """
    declared = tuple(assert_key(key) for key in keys)

    def decorator(target: C) -> C:
        setattr(target, INJECT_ATTRIBUTE, declared)
        return target

    return decorator


@overload
def singleton(target: C) -> C: ...


@overload
def singleton(target: Literal["from_decorator"] = "from_decorator") -> Callable[[C], C]: ...


def singleton(target: C | Literal["from_decorator"] = "from_decorator") -> C | Callable[[C], C]:
    """Tag a class so auto-registration shares one instance per container.

    The tag is inherited by subclasses that do not carry their own tag.

    Returns:
        The decorated class in direct form (``@singleton``), or a decorator callable
        in call form (``@singleton()``).

    """
    return _tag_lifetime(target, Lifetime.SINGLETON)


@overload
def transient(target: C) -> C: ...


@overload
def transient(target: Literal["from_decorator"] = "from_decorator") -> Callable[[C], C]: ...


def transient(target: C | Literal["from_decorator"] = "from_decorator") -> C | Callable[[C], C]:
    """Tag a class so auto-registration constructs a new instance on every resolution.

    The tag is inherited by subclasses that do not carry their own tag.

    Returns:
        The decorated class in direct form (``@transient``), or a decorator callable
        in call form (``@transient()``).

    """
    return _tag_lifetime(target, Lifetime.TRANSIENT)


def _tag_lifetime(target: C | Literal["from_decorator"], lifetime: Lifetime) -> C | Callable[[C], C]:
    if isinstance(target, str) and target == "from_decorator":

        def decorator(decorated: C) -> C:
            lifetime_metadata.set(decorated, lifetime)
            return decorated

        return decorator

    lifetime_metadata.set(target, lifetime)
    return target
