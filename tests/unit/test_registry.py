"""Tests for the plugin registry."""

from conduit.plugins import (
    Option,
    PluginDescriptor,
    PluginRegistry,
    Transport,
    default_registry,
    plugin,
    reset_registry,
)


def test_registry_starts_empty():
    """Test a new registry has no entries."""
    registry = PluginRegistry()
    assert len(registry) == 0
    assert registry.lookup("ssh") is None


def test_register_and_lookup():
    """Test a registered descriptor can be found by name."""
    registry = PluginRegistry()
    descriptor = PluginDescriptor(name="ssh", transport_class=Transport)
    registry.register(descriptor)

    assert registry.lookup("ssh") is descriptor
    assert "ssh" in registry
    assert registry.names() == ["ssh"]


def test_lookup_is_case_sensitive():
    """Test names must match exactly."""
    registry = PluginRegistry()
    registry.register(PluginDescriptor(name="ssh", transport_class=Transport))
    assert registry.lookup("SSH") is None


def test_last_registration_wins():
    """Test re-registering a name replaces the entry."""
    registry = PluginRegistry()
    first = PluginDescriptor(name="x", transport_class=Transport)
    second = PluginDescriptor(name="x", transport_class=Transport)
    registry.register(first)
    registry.register(second)

    assert registry.lookup("x") is second
    assert len(registry) == 1


def test_reset():
    """Test reset forgets every plugin."""
    registry = PluginRegistry()
    registry.register(PluginDescriptor(name="x", transport_class=Transport))
    registry.reset()
    assert registry.names() == []


def test_class_definition_registers_in_default_registry():
    """Test naming a plugin class registers it."""

    class Existing(plugin(1), name="existing"):
        pass

    descriptor = default_registry().lookup("existing")
    assert descriptor.transport_class is Existing

    reset_registry()
    assert default_registry().lookup("existing") is None


def test_class_keyword_registry():
    """Test plugins can register into an explicit registry."""
    registry = PluginRegistry()

    class Scoped(plugin(1), name="scoped", registry=registry):
        options = {"one": Option(required=True, default=123)}

    assert registry.lookup("scoped").transport_class is Scoped
    assert default_registry().lookup("scoped") is None
    assert registry.lookup("scoped").option_schema() == {
        "one": {"required": True, "default": 123}
    }
