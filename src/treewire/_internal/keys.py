from __future__ import annotations

import datetime
import decimal
import inspect
import pathlib
import uuid
from dataclasses import dataclass
from typing import Any, TypeGuard, TypeVar

from treewire._internal.type_checks import is_runtime_class
from treewire.exceptions import TreewireInvalidKeyError

K = TypeVar("K")


def assert_key(key: K) -> K:
    """Return ``key`` unchanged when it can be used as a registry key.

    Args:
        key: Dependency key passed to a public container operation.

    Raises:
        TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.

    """
    if key is None:
        raise TreewireInvalidKeyError(key)
    try:
        hash(key)
    except TypeError as error:
        raise TreewireInvalidKeyError(key) from error
    return key


@dataclass(frozen=True, slots=True)
class ConstructibleTypePolicy:
    """Internal policy deciding which keys may be auto-registered as classes."""

    ignored_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
    )

    def is_constructible(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a candidate can be instantiated by the container.

        Value types such as dates, paths and UUIDs are runtime classes but need
        constructor arguments, so they are never auto-registered.

        Args:
            candidate: Value being checked for eligibility or runtime type constraints.

        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ == "builtins":
            return False
        if inspect.isabstract(candidate):
            return False
        if getattr(candidate, "_is_protocol", False):
            return False
        if issubclass(candidate, type):
            return False
        return not issubclass(candidate, self.ignored_base_types)
