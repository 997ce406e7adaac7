from treewire.container import Container
from treewire.exceptions import (
    TreewireError,
    TreewireInvalidDescriptorError,
    TreewireInvalidKeyError,
    TreewireInvalidRegistrationError,
    TreewireKeyNotRegisteredError,
)
from treewire.lifetimes import Lifetime
from treewire.markers import All, DependencyWrapper, Factory, Lazy, Optional, Parent
from treewire.registration_decorators import inject, singleton, transient
from treewire.resolvers import (
    CallbackResolver,
    InstanceResolver,
    ResolverProtocol,
    SingletonResolver,
    TransientResolver,
)

__all__ = [
    "All",
    "CallbackResolver",
    "Container",
    "DependencyWrapper",
    "Factory",
    "InstanceResolver",
    "Lazy",
    "Lifetime",
    "Optional",
    "Parent",
    "ResolverProtocol",
    "SingletonResolver",
    "TransientResolver",
    "TreewireError",
    "TreewireInvalidDescriptorError",
    "TreewireInvalidKeyError",
    "TreewireInvalidRegistrationError",
    "TreewireKeyNotRegisteredError",
    "inject",
    "singleton",
    "transient",
]
