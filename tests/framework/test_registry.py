"""
Tests for netspine.framework.registry module.

Tests cover:
- Operator registration by instance and via decorator
- Operator lookup by name
- Listing registered operators
- Registry clearing
- Error handling for missing and duplicate operators
- Default registry construction from settings
"""

import pytest

from netspine.core.errors import ErrorCategory, OperatorNotFoundError
from netspine.core.settings import NetspineSettings
from netspine.framework.expr import Response
from netspine.framework.operators import IpsOperator, Operator
from netspine.framework.registry import OperatorRegistry, build_default_registry


class EchoOperator(Operator):
    name = "echo"

    def __init__(self):
        self.setup_calls = 0

    def setup(self) -> None:
        self.setup_calls += 1

    def run(self, ev, args):
        return Response.replace(str(args[0]))


class TestRegister:
    """Tests for OperatorRegistry.register."""

    def test_register_instance(self):
        registry = OperatorRegistry()
        op = EchoOperator()
        assert registry.register("echo", op) is op
        assert registry.get("echo") is op

    def test_register_runs_setup_once(self):
        registry = OperatorRegistry()
        op = registry.register("echo", EchoOperator())
        assert op.setup_calls == 1

    def test_register_decorator_returns_class(self):
        registry = OperatorRegistry()

        @registry.register("echo")
        class Decorated(EchoOperator):
            custom_attr = "value"

        assert Decorated.custom_attr == "value"
        assert isinstance(registry.get("echo"), Decorated)

    def test_register_duplicate_raises_error(self):
        registry = OperatorRegistry()
        registry.register("echo", EchoOperator())
        with pytest.raises(ValueError, match="already registered"):
            registry.register("echo", EchoOperator())

    def test_same_instance_under_two_names(self):
        registry = OperatorRegistry()
        op = IpsOperator()
        registry.register("ips", op)
        registry.register("addresses", op)
        assert registry.get("addresses") is registry.get("ips")


class TestLookup:
    def test_get_missing(self):
        registry = OperatorRegistry()
        registry.register("echo", EchoOperator())
        with pytest.raises(OperatorNotFoundError, match="Operator 'nope' not found. Available: echo") as exc_info:
            registry.get("nope")
        assert exc_info.value.operator_name == "nope"
        assert exc_info.value.category is ErrorCategory.CONFIG

    def test_get_missing_from_empty(self):
        with pytest.raises(OperatorNotFoundError, match="Available: none"):
            OperatorRegistry().get("ips")

    def test_names_sorted(self):
        registry = OperatorRegistry()
        registry.register("zeta", EchoOperator())
        registry.register("alpha", EchoOperator())
        assert registry.names() == ["alpha", "zeta"]

    def test_contains_and_len(self):
        registry = OperatorRegistry()
        registry.register("echo", EchoOperator())
        assert "echo" in registry
        assert "ips" not in registry
        assert len(registry) == 1

    def test_clear(self):
        registry = OperatorRegistry()
        registry.register("echo", EchoOperator())
        registry.clear()
        assert len(registry) == 0
        assert registry.names() == []


class TestDefaultRegistry:
    def test_contains_ips(self, registry):
        assert registry.names() == ["ips"]
        assert isinstance(registry.get("ips"), IpsOperator)

    def test_lenient_by_default(self, registry):
        assert registry.get("ips").strict is False

    def test_strict_from_environment(self, monkeypatch):
        monkeypatch.setenv("NETSPINE_STRICT_BARE_ADDRESS", "true")
        assert build_default_registry().get("ips").strict is True

    def test_explicit_settings(self):
        registry = build_default_registry(NetspineSettings(strict_bare_address=True))
        assert registry.get("ips").strict is True

    def test_independent_registries(self):
        first, second = build_default_registry(), build_default_registry()
        first.clear()
        assert "ips" in second
