"""Shared pytest fixtures for treewire tests."""

import pytest

from treewire import Container, Lifetime


@pytest.fixture()
def container() -> Container:
    """Default root container with auto-registration enabled."""
    return Container()


@pytest.fixture()
def container_no_autoregister() -> Container:
    """Root container in strict mode."""
    return Container(autoregister_concrete_types=False)


@pytest.fixture()
def container_transient() -> Container:
    """Root container auto-registering untagged classes as transient."""
    return Container(autoregister_default_lifetime=Lifetime.TRANSIENT)
