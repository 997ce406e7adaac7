from __future__ import annotations

import gc

from treewire import Container, Lifetime
from treewire._internal.metadata import LifetimeMetadata


def test_read_returns_none_for_untagged_class() -> None:
    class Service:
        pass

    assert LifetimeMetadata().read(Service) is None


def test_read_walks_ancestor_chain() -> None:
    metadata = LifetimeMetadata()

    class Base:
        pass

    class Middle(Base):
        pass

    class Leaf(Middle):
        pass

    metadata.set(Base, Lifetime.TRANSIENT)

    assert metadata.read(Leaf) is Lifetime.TRANSIENT
    assert metadata.get_own(Leaf) is None

    metadata.set(Middle, Lifetime.SINGLETON)

    assert metadata.read(Leaf) is Lifetime.SINGLETON
    assert metadata.read(Base) is Lifetime.TRANSIENT


def test_set_replaces_previous_tag() -> None:
    metadata = LifetimeMetadata()

    class Service:
        pass

    metadata.set(Service, Lifetime.TRANSIENT)
    metadata.set(Service, Lifetime.SINGLETON)

    assert metadata.read(Service) is Lifetime.SINGLETON


def test_values_that_cannot_be_weakly_referenced_are_untagged() -> None:
    assert LifetimeMetadata().read("token") is None
    assert LifetimeMetadata().get_own(42) is None


def test_entries_do_not_keep_classes_alive() -> None:
    metadata = LifetimeMetadata()

    class Temporary:
        pass

    metadata.set(Temporary, Lifetime.TRANSIENT)
    del Temporary
    gc.collect()

    assert len(metadata._lifetimes) == 0  # noqa: SLF001


def test_container_uses_custom_side_table() -> None:
    metadata = LifetimeMetadata()

    class Service:
        pass

    metadata.set(Service, Lifetime.TRANSIENT)
    container = Container(lifetime_metadata=metadata)

    assert container.get(Service) is not container.get(Service)

    default = Container()

    assert default.get(Service) is default.get(Service)
