"""Base operator interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from netspine.core.cursor import Cursor
from netspine.core.errors import ArgumentTypeError, ReferenceResolutionError
from netspine.core.logging import get_logger
from netspine.framework.evaluator import EvaluationContext
from netspine.framework.expr import Expr, ExprType, Response

if TYPE_CHECKING:
    from netspine.framework.params import ArgumentSpec

log = get_logger(__name__)


class OperatorPhase(str, Enum):
    """Evaluation phase an operator runs in."""

    MERGE = "merge"
    PARAM = "param"
    EVAL = "eval"


@dataclass(frozen=True)
class OperatorCapability:
    """Static declaration of what an operator accepts and when it runs."""

    name: str
    phase: OperatorPhase
    min_args: int
    max_args: int
    accepts: tuple[ExprType, ...] = (ExprType.LITERAL, ExprType.REFERENCE)
    description: str = ""


class Operator(ABC):
    """Base class for all operators.

    Operators are stateless: one instance serves every call-site, possibly
    from several threads at once.
    """

    # Operator metadata
    name: str = ""
    description: str = ""
    spec: "ArgumentSpec | None" = None  # Argument specification

    def setup(self) -> None:  # noqa: B027
        """One-time hook called when the operator is registered."""
        pass

    def phase(self) -> OperatorPhase:
        return OperatorPhase.EVAL

    @property
    def capability(self) -> OperatorCapability:
        min_args = self.spec.min_args if self.spec else 0
        max_args = self.spec.max_args if self.spec else 0
        return OperatorCapability(
            name=self.name,
            phase=self.phase(),
            min_args=min_args,
            max_args=max_args,
            description=self.description,
        )

    def dependencies(
        self,
        ev: EvaluationContext | None,
        args: list[Expr],
        locs: list[Cursor],
        auto: list[Cursor],
    ) -> list[Cursor]:
        """Locations that must be evaluated before this call-site. Defaults to ``auto``."""
        return list(auto)

    @abstractmethod
    def run(self, ev: EvaluationContext, args: list[Expr]) -> Response:
        """Evaluate the call-site. Must be implemented by subclasses."""
        ...

    def resolve_arguments(self, ev: EvaluationContext, args: list[Expr]) -> list[Any]:
        """
        Turn each argument into a concrete value.

        Literals pass through; references go through the context's resolver.

        Raises:
            ArgumentTypeError: for anything that is neither a literal nor a reference
            ReferenceResolutionError: if the resolver fails
        """
        values = []
        for i, arg in enumerate(args):
            arg_type = arg.type if isinstance(arg, Expr) else None
            if arg_type is ExprType.LITERAL:
                log.debug("operator.arg.literal", index=i, value=arg.literal)
                values.append(arg.literal)
            elif arg_type is ExprType.REFERENCE:
                log.debug("operator.arg.reference", index=i, reference=str(arg.reference))
                try:
                    value = ev.resolve_reference(arg.reference)
                except ReferenceResolutionError as e:
                    log.debug("operator.arg.unresolved", index=i, error=str(e))
                    e.with_context(operator=self.name, argument_index=i)
                    raise
                values.append(value)
            else:
                raise ArgumentTypeError(
                    f"{self.name} operator only accepts literals and key reference arguments"
                ).with_context(operator=self.name, argument_index=i, argument_value=arg)
        return values

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
