from __future__ import annotations

from typing import Any


class TreewireError(Exception):
    """Represent a base class for all treewire-specific failures.

    Catch this type when you want to handle any treewire error path without
    matching each concrete exception class individually.
    """


class TreewireInvalidKeyError(TreewireError):
    """Signal that a value cannot be used as a dependency key.

    Raised by every public container operation that accepts a key (``get``,
    ``register_*``, ``auto_register``, ``auto_register_all``, ``has_handler``,
    ``invoke``) and by the marker ``of`` constructors when the key is ``None``
    or unhashable. The check runs before any registry lookup or mutation.

    Typical fixes include passing the class or token itself instead of a value
    that evaluated to ``None``, and using tuples instead of lists as composite
    tokens.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        if key is None:
            msg = "Dependency key cannot be None."
        else:
            msg = f"Dependency key {key!r} is not hashable."
        super().__init__(msg)


class TreewireKeyNotRegisteredError(TreewireError):
    """Signal that a dependency key has no registration and cannot be auto-registered.

    Raised by ``Container.get`` for tokens that are not constructible classes
    (strings, abstract base classes, protocols, arbitrary objects), and for any
    unregistered key when ``autoregister_concrete_types`` is disabled.

    Typical fixes include registering the key explicitly (``register_instance``,
    ``register_singleton``, ``register_transient``, ``register_handler``) or
    reaching an ancestor registration through ``Parent.of`` or
    ``Optional.of(key, check_parent=True)``.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Dependency key {key!r} is not registered and cannot be auto-registered.")


class TreewireInvalidRegistrationError(TreewireError):
    """Signal invalid registration arguments.

    Raised when a singleton/transient concrete or a handler is not callable, or
    when ``register_resolver`` receives an object without a ``resolve`` method.
    """


class TreewireInvalidDescriptorError(TreewireError):
    """Signal an ``inject`` declaration that does not describe dependencies.

    A class (or callable) declares its constructor dependencies through an
    ``inject`` attribute holding a list/tuple of keys, or through an
    ``inject`` static method/class method returning one. Any other value is
    rejected when the descriptor is read.
    """

    def __init__(self, target: Any, declared: Any) -> None:
        self.target = target
        self.declared = declared
        super().__init__(
            f"Invalid 'inject' declaration on {target!r}: expected a list, a tuple or a "
            f"callable returning one, got {declared!r}.",
        )
