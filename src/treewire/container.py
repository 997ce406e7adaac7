from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar, overload

from treewire._internal.descriptors import DependencyDescriptorReader
from treewire._internal.keys import ConstructibleTypePolicy, assert_key
from treewire._internal.metadata import LifetimeMetadata
from treewire._internal.metadata import lifetime_metadata as global_lifetime_metadata
from treewire.exceptions import (
    TreewireInvalidRegistrationError,
    TreewireKeyNotRegisteredError,
)
from treewire.lifetimes import Lifetime
from treewire.markers import DependencyWrapper
from treewire.resolvers.protocol import ResolverProtocol
from treewire.resolvers.strategies import (
    CallbackResolver,
    InstanceResolver,
    SingletonResolver,
    TransientResolver,
)

T = TypeVar("T")
R = TypeVar("R", bound=ResolverProtocol)

logger = logging.getLogger(__name__)
_MISSING_INSTANCE: Any = object()


class Container:
    """Register dependency keys and resolve fully-wired instances.

    Keys are usually classes, but any hashable value except ``None`` works as an
    opaque token. Each key maps to one live resolver (instance, singleton, transient or
    handler); registering a key again replaces the live resolver for that container.

    Constructor dependencies are declared with an ``inject`` attribute (or the
    ``@inject(...)`` decorator) and resolved positionally through this container.
    Unregistered constructible classes are auto-registered on first ``get`` in the
    container that was asked, using the lifetime from ``@singleton``/``@transient``
    when present.

    Containers form a tree through ``create_child``. A child starts with an empty
    registry and only keeps a reference to its parent: ancestors are reached
    explicitly through ``Parent.of`` and ``Optional.of(key, check_parent=True)``.

    Containers are not thread-safe; serialize configuration and resolution when sharing
    one across threads. Cyclic ``inject`` declarations recurse until ``RecursionError``.
    """

    def __init__(
        self,
        *,
        autoregister_concrete_types: bool = True,
        autoregister_default_lifetime: Lifetime = Lifetime.SINGLETON,
        lifetime_metadata: LifetimeMetadata = global_lifetime_metadata,
    ) -> None:
        """Initialize an empty root container.

        Args:
            autoregister_concrete_types: Enable on-demand registration of constructible
                classes during ``get``. Disable for strict mode where every key must be
                registered explicitly.
            autoregister_default_lifetime: Lifetime used by ``auto_register`` when the
                class (and its ancestors) carry no ``@singleton``/``@transient`` tag.
            lifetime_metadata: Side-table consulted for decorator-applied lifetimes.

        """
        self._autoregister_concrete_types = autoregister_concrete_types
        self._autoregister_default_lifetime = autoregister_default_lifetime
        self._lifetime_metadata = lifetime_metadata
        self._descriptor_reader = DependencyDescriptorReader()
        self._constructible_policy = ConstructibleTypePolicy()
        self._resolvers: dict[Any, ResolverProtocol] = {}
        self._registration_history: dict[Any, list[ResolverProtocol]] = {}
        self._parent: Container | None = None

    @property
    def parent(self) -> Container | None:
        """Container this one was created from, or ``None`` for a root container."""
        return self._parent

    def create_child(self) -> Container:
        """Create a child container with an empty registry and the same configuration.

        Returns:
            New container whose ``parent`` is this container.

        """
        child = type(self)(
            autoregister_concrete_types=self._autoregister_concrete_types,
            autoregister_default_lifetime=self._autoregister_default_lifetime,
            lifetime_metadata=self._lifetime_metadata,
        )
        child._parent = self
        return child

    def register_instance(self, key: Any, instance: Any = _MISSING_INSTANCE) -> None:
        """Register a pre-built value returned as-is on every resolution.

        Args:
            key: Dependency key to bind.
            instance: Value to return. Defaults to ``key`` itself.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.

        Examples:
            .. code-block:: python

                container.register_instance(Settings, Settings(debug=True))
                container.register_instance("api_url", "https://api.example.com")

        """
        assert_key(key)
        value = key if instance is _MISSING_INSTANCE else instance
        self.register_resolver(key, InstanceResolver(value))

    def register_singleton(self, key: Any, concrete: Callable[..., Any] | None = None) -> None:
        """Register ``concrete`` to be constructed once and shared within this container.

        Args:
            key: Dependency key to bind.
            concrete: Class (or callable) to construct. Defaults to ``key``.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.
            TreewireInvalidRegistrationError: If the concrete is not callable.

        """
        assert_key(key)
        self.register_resolver(key, SingletonResolver(self._callable_concrete(key, concrete)))

    def register_transient(self, key: Any, concrete: Callable[..., Any] | None = None) -> None:
        """Register ``concrete`` to be constructed anew on every resolution.

        Args:
            key: Dependency key to bind.
            concrete: Class (or callable) to construct. Defaults to ``key``.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.
            TreewireInvalidRegistrationError: If the concrete is not callable.

        """
        assert_key(key)
        self.register_resolver(key, TransientResolver(self._callable_concrete(key, concrete)))

    def register_handler(self, key: Any, handler: Callable[[Container], Any]) -> None:
        """Register a callback invoked with the requesting container on every resolution.

        Args:
            key: Dependency key to bind.
            handler: Callable receiving the container; its return value is injected.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.
            TreewireInvalidRegistrationError: If ``handler`` is not callable.

        """
        assert_key(key)
        if not callable(handler):
            msg = f"Handler registered for {key!r} must be callable, got {handler!r}."
            raise TreewireInvalidRegistrationError(msg)
        self.register_resolver(key, CallbackResolver(handler))

    def register_resolver(self, key: Any, resolver: R) -> R:
        """Bind ``key`` to any object implementing ``resolve(container)``.

        The live registration for ``key`` in this container is replaced; earlier
        registrations stay visible to ``get_all`` in registration order.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.
            TreewireInvalidRegistrationError: If ``resolver`` has no ``resolve`` method.

        """
        assert_key(key)
        if not isinstance(resolver, ResolverProtocol):
            msg = f"Resolver registered for {key!r} must define resolve(container), got {resolver!r}."
            raise TreewireInvalidRegistrationError(msg)

        if key in self._resolvers:
            logger.debug("Replacing registration for %r with %s", key, type(resolver).__name__)
        else:
            logger.debug("Registering %r with %s", key, type(resolver).__name__)
        self._resolvers[key] = resolver
        self._registration_history.setdefault(key, []).append(resolver)
        return resolver

    def auto_register(self, key: Any) -> None:
        """Register ``key`` using its default policy.

        Constructible classes are registered with the lifetime declared by
        ``@singleton``/``@transient`` on the class or its nearest tagged ancestor, and
        with ``autoregister_default_lifetime`` otherwise. Any other key is registered as
        an instance of itself.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.

        """
        assert_key(key)
        if not self._constructible_policy.is_constructible(key):
            self.register_instance(key)
            return

        lifetime = self._lifetime_metadata.read(key) or self._autoregister_default_lifetime
        if lifetime is Lifetime.TRANSIENT:
            self.register_transient(key)
        else:
            self.register_singleton(key)

    def auto_register_all(self, keys: Iterable[Any]) -> None:
        """Apply ``auto_register`` to every key, in order.

        All keys are validated before the first registration, so an invalid key leaves
        the registry untouched.

        Raises:
            TreewireInvalidKeyError: If any key is ``None`` or unhashable.

        """
        validated = [assert_key(key) for key in keys]
        for key in validated:
            self.auto_register(key)

    def has_handler(self, key: Any, check_parent: bool = False) -> bool:  # noqa: FBT001, FBT002
        """Return whether ``key`` is explicitly registered.

        Args:
            key: Dependency key to look up.
            check_parent: Also search ancestor containers.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.

        """
        assert_key(key)
        if key in self._resolvers:
            return True
        if check_parent and self._parent is not None:
            return self._parent.has_handler(key, check_parent=True)
        return False

    @overload
    def get(self, key: type[T]) -> T: ...

    @overload
    def get(self, key: Any) -> Any: ...

    def get(self, key: Any) -> Any:
        """Resolve ``key`` to a value.

        Args:
            key: Dependency key or dependency marker (``Lazy``, ``All``, ``Optional``,
                ``Parent``, ``Factory``).

        Returns:
            Resolved value.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.
            TreewireKeyNotRegisteredError: If ``key`` is not registered in this
                container and cannot be auto-registered.

        Notes:
            Exceptions raised by constructors or handlers propagate unchanged. Only this
            container's registry is consulted; the parent is never searched implicitly.

        Examples:
            .. code-block:: python

                container.register_singleton(LoggerBase, ConsoleLogger)
                app = container.get(App)

        """
        assert_key(key)
        if isinstance(key, DependencyWrapper):
            return key.resolve(self)

        resolver = self._resolvers.get(key)
        if resolver is not None:
            return resolver.resolve(self)

        if key is Container:
            return self

        if not self._autoregister_concrete_types:
            raise TreewireKeyNotRegisteredError(key)
        if not self._constructible_policy.is_constructible(key):
            raise TreewireKeyNotRegisteredError(key)

        logger.debug("Auto-registering %r on first resolution", key)
        self.auto_register(key)
        resolver = self._resolvers[key]
        try:
            return resolver.resolve(self)
        except BaseException:
            self._discard_auto_registration(key, resolver)
            raise

    def get_all(self, key: Any) -> tuple[Any, ...]:
        """Resolve every registration made for ``key`` in this container.

        Returns:
            One value per registration, in registration order. Empty when ``key`` was
            never registered here. Nothing is auto-registered.

        Raises:
            TreewireInvalidKeyError: If ``key`` is ``None`` or unhashable.

        """
        assert_key(key)
        return tuple(resolver.resolve(self) for resolver in self._registration_history.get(key, ()))

    def invoke(self, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
        """Call ``fn`` with its declared dependencies followed by the extra arguments.

        Dependencies come from ``fn``'s own ``inject`` declaration, or the nearest
        ancestor's when ``fn`` is a class that declares none, and are resolved through
        this container.

        Args:
            fn: Class or callable to construct.
            *args: Positional arguments appended after the resolved dependencies.
            **kwargs: Keyword arguments passed through unchanged.

        Raises:
            TreewireInvalidKeyError: If ``fn`` or a declared dependency is ``None`` or
                unhashable.

        """
        assert_key(fn)
        dependencies = [self.get(dependency) for dependency in self._descriptor_reader.get_dependencies(fn)]
        return fn(*dependencies, *args, **kwargs)

    def _discard_auto_registration(self, key: Any, resolver: ResolverProtocol) -> None:
        # Only the implicit registration made by ``get`` is removed. A registration
        # made meanwhile (for example by a handler) replaced it and is kept.
        if self._resolvers.get(key) is not resolver:
            return
        del self._resolvers[key]
        history = self._registration_history[key]
        history.pop()
        if not history:
            del self._registration_history[key]
        logger.debug("Discarded auto-registration for %r after failed resolution", key)

    def _callable_concrete(self, key: Any, concrete: Callable[..., Any] | None) -> Callable[..., Any]:
        resolved = key if concrete is None else concrete
        if not callable(resolved):
            msg = f"Concrete registered for {key!r} must be a class or callable, got {resolved!r}."
            raise TreewireInvalidRegistrationError(msg)
        return resolved
