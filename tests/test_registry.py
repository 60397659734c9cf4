import pytest

from benchpress.core.errors import UnboundCapability
from benchpress.core.registry import BindingRegistry
from benchpress.schemas.capabilities import Capability, bind


def writer_a(path, content):
    pass


def writer_b(path, content):
    pass


def test_resolve_returns_registered_implementation():
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer_a)])
    assert registry.resolve(Capability.WRITE_FILE) is writer_a


def test_last_registered_binding_wins():
    registry = BindingRegistry([
        bind(Capability.WRITE_FILE, writer_a),
        bind(Capability.NOW, 1.0),
        bind(Capability.WRITE_FILE, writer_b),
    ])

    assert registry.resolve(Capability.WRITE_FILE) is writer_b
    assert len(registry) == 2
    assert len(registry.bindings) == 3


def test_resolve_accepts_identifier_value():
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer_a)])
    assert registry.resolve("write_file") is writer_a
    assert "write_file" in registry


def test_unbound_capability():
    registry = BindingRegistry()

    with pytest.raises(UnboundCapability) as exc_info:
        registry.resolve(Capability.WRITE_FILE)
    assert exc_info.value.identifier == Capability.WRITE_FILE
    assert isinstance(exc_info.value, LookupError)


def test_unknown_identifier_is_unbound():
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer_a)])

    assert not registry.has("no_such_capability")
    with pytest.raises(UnboundCapability):
        registry.resolve("no_such_capability")


def test_require_reports_missing_identifier():
    registry = BindingRegistry([bind(Capability.NOW, 0.0)])

    registry.require(Capability.NOW)
    with pytest.raises(UnboundCapability) as exc_info:
        registry.require(Capability.NOW, Capability.WRITE_FILE)
    assert exc_info.value.identifier == Capability.WRITE_FILE


def test_extend_returns_new_registry():
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer_a)])
    extended = registry.extend([bind(Capability.WRITE_FILE, writer_b)])

    assert extended is not registry
    assert extended.resolve(Capability.WRITE_FILE) is writer_b
    assert registry.resolve(Capability.WRITE_FILE) is writer_a


def test_repeated_lookups_are_identical():
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer_a)])

    first = registry.resolve(Capability.WRITE_FILE)
    for _ in range(5):
        assert registry.resolve(Capability.WRITE_FILE) is first


def test_registry_has_no_mutators():
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer_a)])

    with pytest.raises(TypeError):
        registry._resolved[Capability.WRITE_FILE] = writer_b
    assert registry.resolve(Capability.WRITE_FILE) is writer_a


def test_bind_normalizes_identifier():
    binding = bind("now", 42)
    assert binding.identifier is Capability.NOW
    with pytest.raises(ValueError):
        bind("no_such_capability", 42)
