"""Positional argument specification for operators.

Manifesto:
    Operators must validate inputs before computing anything. This module
    provides declarative argument schemas so arity checks, scalar checks and
    conversions are consistent, produce errors that name the offending
    argument, and double as help text.

Tags:
    netspine, framework, params, validation, schema

Doc-Types:
    api-reference
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from netspine.core.errors import ArgumentCountError, ArgumentTypeError, NetspineError
from netspine.core.values import ValueKind, classify, coerce_int

_ORDINALS = ["one", "two", "three", "four", "five", "six"]


@dataclass
class ArgumentDef:
    """Definition of a positional operator argument."""

    name: str
    description: str
    required: bool = True
    converter: Callable[[Any, str], Any] | None = None

    def convert(self, value: Any, index: int) -> Any:
        """
        Check that ``value`` is a scalar and run the converter on it.

        Raises:
            ArgumentTypeError: if ``value`` is a list or a map
            NetspineError: whatever the converter raises, tagged with the
                argument position and value
        """
        kind = classify(value)
        if kind is not ValueKind.SCALAR:
            raise ArgumentTypeError(
                f"{self.name} must be a scalar value, not a {kind.value}"
            ).with_context(argument_index=index, argument_value=value)

        if self.converter is None:
            return value
        try:
            return self.converter(value, self.name)
        except NetspineError as e:
            e.with_context(argument_index=index, argument_value=value)
            raise


class ArgumentSpec:
    """Operator argument specification."""

    def __init__(
        self,
        arguments: list[ArgumentDef],
        description: str | None = None,
        examples: list[str] | None = None,
        notes: list[str] | None = None,
    ):
        self.arguments = arguments
        self.description = description
        self.examples = examples or []
        self.notes = notes or []

    @property
    def min_args(self) -> int:
        return sum(1 for arg in self.arguments if arg.required)

    @property
    def max_args(self) -> int:
        return len(self.arguments)

    def check_count(self, received: int, operator: str) -> None:
        """
        Validate the number of arguments a call-site passed.

        Raises:
            ArgumentCountError: if fewer than min_args or more than max_args
        """
        listing = " and ".join(
            f"{i}) {arg.description}" for i, arg in enumerate(self.arguments[: self.min_args], start=1)
        )
        if received < self.min_args:
            raise ArgumentCountError(
                f"{operator} requires at least {_spell(self.min_args)} arguments: {listing}",
                expected=(self.min_args, self.max_args),
                received=received,
            ).with_context(operator=operator)
        if received > self.max_args:
            raise ArgumentCountError(
                f"{operator} accepts at most {_spell(self.max_args)} arguments, got {received}",
                expected=(self.min_args, self.max_args),
                received=received,
            ).with_context(operator=operator)

    def bind(self, values: list[Any]) -> dict[str, Any]:
        """Convert resolved values positionally, keyed by argument name.

        Optional arguments that were not supplied are absent from the result.
        """
        return {
            arg.name: arg.convert(value, index)
            for index, (arg, value) in enumerate(zip(self.arguments, values, strict=False))
        }

    def get_help_text(self) -> str:
        """Generate help text for this operator."""
        lines = []

        if self.description:
            lines.append(self.description)
            lines.append("")

        lines.append("Arguments:")
        for i, arg in enumerate(self.arguments, start=1):
            optional = "" if arg.required else " [optional]"
            lines.append(f"  {i}. {arg.name}: {arg.description}{optional}")
        lines.append("")

        if self.examples:
            lines.append("Examples:")
            for example in self.examples:
                lines.append(f"  {example}")
            lines.append("")

        if self.notes:
            lines.append("Notes:")
            for note in self.notes:
                lines.append(f"  - {note}")

        return "\n".join(lines)


def _spell(n: int) -> str:
    return _ORDINALS[n - 1] if 0 < n <= len(_ORDINALS) else str(n)


# =============================================================================
# Built-in Converters
# =============================================================================


def text(value: Any, name: str = "value") -> str:
    """Require a string value."""
    if not isinstance(value, str):
        raise ArgumentTypeError(f"{name} must be a string, got {type(value).__name__} {value!r}")
    return value


def integer(value: Any, name: str = "value") -> int:
    """Coerce an integer-shaped value."""
    return coerce_int(value, name=name)
