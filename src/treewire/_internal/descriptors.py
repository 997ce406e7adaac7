from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any

from treewire._internal.type_checks import ancestor_chain, is_runtime_class
from treewire.exceptions import TreewireInvalidDescriptorError

INJECT_ATTRIBUTE = "inject"


class DescriptorSource(Enum):
    """Kind of dependency declaration found on a single class or callable."""

    DECLARED_LIST = "declared_list"
    """``inject = [A, B]`` (or a tuple) stored directly on the owner."""

    DECLARED_FUNCTION = "declared_function"
    """``inject`` static method, class method or function returning the keys."""

    NONE = "none"
    """The owner does not declare dependencies itself."""


@dataclass(frozen=True, slots=True)
class OwnDescriptor:
    """Dependency declaration read from one member of the ancestor chain."""

    source: DescriptorSource
    declared: Any = None


class DependencyDescriptorReader:
    """Read the ordered dependency keys a class or callable is constructed with."""

    def get_dependencies(self, target: Any) -> tuple[Any, ...]:
        """Return the dependency keys to pass positionally when constructing ``target``.

        The target's own declaration wins; otherwise the first ancestor declaring one is
        used in full. Declarations are never merged across the chain.

        Args:
            target: Class or callable about to be invoked by the container.

        Raises:
            TreewireInvalidDescriptorError: If a declaration is not a list/tuple and not a
                callable returning one.

        """
        for owner in ancestor_chain(target):
            own = self.read_own(owner)
            if own.source is DescriptorSource.DECLARED_LIST:
                return tuple(own.declared)
            if own.source is DescriptorSource.DECLARED_FUNCTION:
                return self._call_declared_function(target, own.declared)
        return ()

    def read_own(self, owner: Any) -> OwnDescriptor:
        """Classify the declaration stored directly on ``owner``, ignoring inheritance.

        Args:
            owner: Class or callable to inspect.

        """
        namespace = vars(owner) if is_runtime_class(owner) else getattr(owner, "__dict__", {})
        declared = namespace.get(INJECT_ATTRIBUTE)
        if declared is None:
            return OwnDescriptor(DescriptorSource.NONE)
        if isinstance(declared, (list, tuple)):
            return OwnDescriptor(DescriptorSource.DECLARED_LIST, declared)
        if isinstance(declared, (staticmethod, classmethod)) or inspect.isfunction(declared):
            return OwnDescriptor(DescriptorSource.DECLARED_FUNCTION, declared)
        raise TreewireInvalidDescriptorError(owner, declared)

    def _call_declared_function(self, target: Any, declared: Any) -> tuple[Any, ...]:
        if isinstance(declared, classmethod):
            # Bound against the requested target so subclasses see themselves.
            keys = declared.__get__(None, target)()
        elif isinstance(declared, staticmethod):
            keys = declared.__func__()
        else:
            keys = declared()
        if not isinstance(keys, (list, tuple)):
            raise TreewireInvalidDescriptorError(target, keys)
        return tuple(keys)
