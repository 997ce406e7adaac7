from treewire.resolvers.protocol import ResolverProtocol
from treewire.resolvers.strategies import (
    CallbackResolver,
    InstanceResolver,
    SingletonResolver,
    TransientResolver,
)

__all__ = [
    "CallbackResolver",
    "InstanceResolver",
    "ResolverProtocol",
    "SingletonResolver",
    "TransientResolver",
]
