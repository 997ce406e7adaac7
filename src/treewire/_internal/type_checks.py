from __future__ import annotations

import types
from collections.abc import Iterator
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def ancestor_chain(target: object) -> Iterator[Any]:
    """Yield ``target`` followed by its base classes in method resolution order.

    Non-class callables have no ancestors, so only the target itself is yielded.
    Dependency descriptors and lifetime metadata share this lookup order: the
    first member that declares something wins.

    Args:
        target: Class or callable whose declarations are being looked up.

    """
    if is_runtime_class(target):
        yield from target.__mro__
        return
    yield target


__all__ = ["ancestor_chain", "is_runtime_class"]
