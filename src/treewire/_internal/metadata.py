from __future__ import annotations

from typing import Any
from weakref import WeakKeyDictionary

from treewire._internal.type_checks import ancestor_chain
from treewire.lifetimes import Lifetime


class LifetimeMetadata:
    """Side-table mapping classes (or callables) to the lifetime they were decorated with.

    Populated at configuration time by ``@singleton`` / ``@transient`` and consulted by
    ``Container.auto_register``. Entries are weak so decorated classes defined in a local
    scope can still be garbage collected.
    """

    def __init__(self) -> None:
        self._lifetimes: WeakKeyDictionary[Any, Lifetime] = WeakKeyDictionary()

    def set(self, target: Any, lifetime: Lifetime) -> None:
        """Attach ``lifetime`` to ``target``, replacing any earlier tag on it."""
        self._lifetimes[target] = lifetime

    def get_own(self, target: Any) -> Lifetime | None:
        """Return the tag declared directly on ``target``."""
        try:
            return self._lifetimes.get(target)
        except TypeError:
            # Objects that cannot be weakly referenced are never tagged.
            return None

    def read(self, target: Any) -> Lifetime | None:
        """Return the tag of ``target`` or of its nearest ancestor that declares one."""
        for owner in ancestor_chain(target):
            lifetime = self.get_own(owner)
            if lifetime is not None:
                return lifetime
        return None


lifetime_metadata = LifetimeMetadata()
"""Process-wide side-table written by the registration decorators."""
