"""Operator registration table.

Manifesto:
    The host decides which operators exist. It builds one registry at
    startup, hands it to its evaluator and never mutates it afterwards, so
    there is no module-level state for concurrent evaluations to trip over.

Tags:
    netspine, framework, registry, operator-discovery, lookup

Doc-Types:
    api-reference
"""

from collections.abc import Callable

from netspine.core.errors import OperatorNotFoundError
from netspine.core.logging import get_logger
from netspine.core.settings import NetspineSettings, get_settings
from netspine.framework.operators import IpsOperator, Operator

logger = get_logger(__name__)


class OperatorRegistry:
    """Name to operator instance lookup owned by the host."""

    def __init__(self) -> None:
        self._operators: dict[str, Operator] = {}

    def register(
        self, name: str, operator: Operator | None = None
    ) -> Operator | Callable[[type[Operator]], type[Operator]]:
        """
        Register ``operator`` under ``name``.

        Without an instance, returns a class decorator that registers a
        default-constructed instance of the decorated class.

        Raises:
            ValueError: if ``name`` is already registered
        """
        if operator is not None:
            self._add(name, operator)
            return operator

        def decorator(cls: type[Operator]) -> type[Operator]:
            self._add(name, cls())
            return cls

        return decorator

    def _add(self, name: str, operator: Operator) -> None:
        if name in self._operators:
            raise ValueError(f"Operator '{name}' is already registered")
        operator.setup()
        self._operators[name] = operator
        logger.debug(
            "operator_registered",
            name=name,
            cls=type(operator).__name__,
            phase=operator.phase().value,
        )

    def get(self, name: str) -> Operator:
        """Get an operator by name."""
        if name not in self._operators:
            raise OperatorNotFoundError(name, self.names())
        return self._operators[name]

    def names(self) -> list[str]:
        """List all registered operator names."""
        return sorted(self._operators)

    def clear(self) -> None:
        """Clear registry (for testing)."""
        self._operators.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._operators

    def __len__(self) -> int:
        return len(self._operators)


def build_default_registry(settings: NetspineSettings | None = None) -> OperatorRegistry:
    """Build a registry holding the built-in operators, configured from ``settings``."""
    settings = settings or get_settings()
    registry = OperatorRegistry()
    registry.register("ips", IpsOperator(strict=settings.strict_bare_address))
    logger.debug("operator_registry_loaded", registered=len(registry))
    return registry
