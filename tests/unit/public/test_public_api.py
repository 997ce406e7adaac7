from enum import Enum

import treewire
from treewire import Lifetime


def test_public_exports_are_importable() -> None:
    for name in treewire.__all__:
        assert hasattr(treewire, name), name


def test_all_is_sorted() -> None:
    assert treewire.__all__ == sorted(treewire.__all__)


class TestLifetime:
    def test_lifetime_values(self) -> None:
        """Lifetime values are stable strings."""
        assert Lifetime.TRANSIENT.value == "transient"
        assert Lifetime.SINGLETON.value == "singleton"

    def test_lifetime_is_str_enum(self) -> None:
        """Lifetime members compare equal to their values."""
        assert issubclass(Lifetime, Enum)
        assert Lifetime.SINGLETON == "singleton"

    def test_lifetime_enum_members(self) -> None:
        """Lifetime has exactly two members."""
        assert list(Lifetime) == [Lifetime.TRANSIENT, Lifetime.SINGLETON]
