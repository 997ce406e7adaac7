from __future__ import annotations

from treewire import Container, inject, singleton, transient


class Logger:
    pass


def _consumers(key: object) -> tuple[type, type]:
    @inject(key)
    class App1:
        def __init__(self, logger: object) -> None:
            self.logger = logger

    @inject(key)
    class App2:
        def __init__(self, logger: object) -> None:
            self.logger = logger

    return App1, App2


def test_singleton_decorator_call_form(container: Container) -> None:
    @singleton()
    class TaggedLogger:
        pass

    app1_type, app2_type = _consumers(TaggedLogger)

    assert container.get(app1_type).logger is container.get(app2_type).logger


def test_singleton_decorator_direct_form(container_transient: Container) -> None:
    @singleton
    class TaggedLogger:
        pass

    assert container_transient.get(TaggedLogger) is container_transient.get(TaggedLogger)


def test_transient_decorator(container: Container) -> None:
    @transient()
    class TaggedLogger:
        pass

    app1_type, app2_type = _consumers(TaggedLogger)

    assert container.get(app1_type).logger is not container.get(app2_type).logger


def test_transient_decorator_direct_form(container: Container) -> None:
    @transient
    class TaggedLogger:
        pass

    assert container.get(TaggedLogger) is not container.get(TaggedLogger)


def test_subclass_inherits_base_lifetime(container: Container) -> None:
    @transient()
    class LoggerBase:
        pass

    class DerivedLogger(LoggerBase):
        pass

    app1_type, app2_type = _consumers(DerivedLogger)

    assert container.get(app1_type).logger is not container.get(app2_type).logger


def test_subclass_lifetime_overrides_base_lifetime(container: Container) -> None:
    @singleton()
    class LoggerBase:
        pass

    @transient()
    class DerivedLogger(LoggerBase):
        pass

    app1_type, app2_type = _consumers(DerivedLogger)

    assert container.get(app1_type).logger is not container.get(app2_type).logger
    assert container.get(LoggerBase) is container.get(LoggerBase)


def test_unrelated_class_attributes_do_not_hide_base_lifetime(container: Container) -> None:
    @transient()
    class LoggerBase:
        pass

    class DerivedLogger(LoggerBase):
        something = "test"

    assert container.get(DerivedLogger) is not container.get(DerivedLogger)


def test_explicit_registration_wins_over_decorator(container: Container) -> None:
    @transient()
    class TaggedLogger:
        pass

    container.register_singleton(TaggedLogger)

    assert container.get(TaggedLogger) is container.get(TaggedLogger)


def test_inject_returns_decorated_target_unchanged() -> None:
    class App:
        pass

    decorated = inject(Logger, "token")(App)

    assert decorated is App
    assert App.inject == (Logger, "token")  # type: ignore[attr-defined]


def test_inject_on_subclass_overrides_base_declaration(container: Container) -> None:
    container.register_instance("name", "configured")

    @inject(Logger)
    class Base:
        def __init__(self, *values: object) -> None:
            self.values = values

    @inject("name")
    class Derived(Base):
        pass

    assert container.get(Derived).values == ("configured",)
    assert isinstance(container.get(Base).values[0], Logger)
