from enum import Enum


class Lifetime(str, Enum):
    """Defines how long a class resolved through auto-registration lives."""

    TRANSIENT = "transient"
    """A new instance is created every time the key is requested."""

    SINGLETON = "singleton"
    """A single instance is created and shared for the lifetime of the container."""
