"""
The ``ips`` operator: derive addresses from a block or a base address.

``(( ips FIRST INDEX [COUNT] ))`` resolves to one address, or to a list of
COUNT consecutive addresses, counted from FIRST.

FIRST is either a CIDR block (``10.0.0.0/24``) or a bare address
(``10.0.0.5``). The two behave differently:

* **Block:** the address is masked to its network address. INDEX must satisfy
  ``abs(INDEX) <= capacity``; a negative INDEX counts back from the end of
  the block (``-1`` is the last address). In range mode ``INDEX + COUNT``
  must not exceed the capacity.
* **Bare address:** INDEX is added as given, negative or not, with no bounds
  checks at all. Arithmetic wraps around the address space silently unless
  the operator was built with ``strict=True``.

Examples:
    >>> resolve_ips("10.0.0.0/24", 5).value
    '10.0.0.5'
    >>> resolve_ips("10.0.0.0/24", -1).value
    '10.0.0.255'
    >>> resolve_ips("10.0.0.0/24", 0, 3).value
    ['10.0.0.0', '10.0.0.1', '10.0.0.2']
    >>> resolve_ips("10.0.0.5", -1).value
    '10.0.0.4'

Tags:
    netspine, operators, ips, cidr, address-arithmetic, dependencies

Doc-Types:
    api-reference
"""

from __future__ import annotations

from netspine.core.address import parse_block_or_address
from netspine.core.cursor import Cursor
from netspine.core.errors import BoundsError, NetspineError
from netspine.core.logging import LogContext, get_logger
from netspine.framework.evaluator import EvaluationContext
from netspine.framework.expr import Expr, ExprType, Response
from netspine.framework.operators.base import Operator, OperatorPhase
from netspine.framework.params import ArgumentDef, ArgumentSpec, integer, text

log = get_logger(__name__)


def resolve_ips(first: str, index: int, count: int | None = None, *, strict: bool = False) -> Response:
    """
    Compute the address (or addresses) ``index`` steps from ``first``.

    Args:
        first: CIDR block or bare address
        index: offset from the network/base address; negative values count
            back from the end of a block
        count: when given, return this many consecutive addresses. Zero gives
            an empty list; a negative count is rejected rather than also
            yielding an empty list, as Spruce's ``ips`` does
        strict: reject bare-address results outside the address space
            instead of wrapping

    Raises:
        ParseError: ``first`` is neither a block nor an address
        BoundsError: index or index+count exceeds the block, or count is
            negative, or (strict only) a bare-address result overflows
    """
    base, block = parse_block_or_address(first)
    start = index

    if block is not None:
        size = block.capacity
        if abs(start) > size:
            raise BoundsError(f"Start index {start} exceeds size of subnet {first}").with_context(
                argument_index=1, argument_value=index, capacity=size
            )
        if start < 0:
            start += size

    checked = strict and block is None

    if count is None:
        return Response.replace(str(base.offset(start, checked=checked)))

    if count < 0:
        raise BoundsError(f"Count {count} must not be negative").with_context(
            argument_index=2, argument_value=count
        )
    if block is not None and start + count > block.capacity:
        raise BoundsError(
            f"Start index {start} and count {count} would exceed size of subnet {first}"
        ).with_context(argument_index=2, argument_value=count, capacity=block.capacity)

    return Response.replace([str(base.offset(i, checked=checked)) for i in range(start, start + count)])


def ips_dependencies(args: list[Expr], locs: list[Cursor], auto: list[Cursor]) -> list[Cursor]:
    """
    Locations that must be evaluated before an ``ips`` call-site.

    Every known location at or beneath a reference argument, in argument
    order then ``locs`` order, followed by ``auto`` verbatim. Duplicates are
    kept; deduplication is the host's business.
    """
    deps = []
    for arg in args:
        if not isinstance(arg, Expr) or arg.type is not ExprType.REFERENCE:
            continue
        deps.extend(other for other in locs if other.under(arg.reference))

    # operator-generated dependencies (reference-type arguments of nested calls)
    deps.extend(auto)
    return deps


class IpsOperator(Operator):
    """``(( ips FIRST INDEX [COUNT] ))``"""

    name = "ips"
    description = "Derive one or more IP addresses from a CIDR block or a base address"
    spec = ArgumentSpec(
        arguments=[
            ArgumentDef("first", "An IP or a CIDR", converter=text),
            ArgumentDef("index", "an index", converter=integer),
            ArgumentDef("count", "a count of addresses to return", required=False, converter=integer),
        ],
        description=description,
        examples=[
            "(( ips \"10.0.0.0/24\" 5 ))        -> 10.0.0.5",
            "(( ips \"10.0.0.0/24\" -1 ))       -> 10.0.0.255",
            "(( ips meta.net 0 3 ))             -> [10.0.0.0, 10.0.0.1, 10.0.0.2]",
        ],
        notes=[
            "Negative indexes wrap only for CIDR blocks",
            "Bare addresses are not bounds-checked unless NETSPINE_STRICT_BARE_ADDRESS is set",
        ],
    )

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def phase(self) -> OperatorPhase:
        return OperatorPhase.EVAL

    def dependencies(
        self,
        ev: EvaluationContext | None,
        args: list[Expr],
        locs: list[Cursor],
        auto: list[Cursor],
    ) -> list[Cursor]:
        return ips_dependencies(args, locs, auto)

    def run(self, ev: EvaluationContext, args: list[Expr]) -> Response:
        here = str(ev.here)
        with LogContext(operator=self.name, location=here):
            log.debug("operator.start", args=len(args))
            try:
                self.spec.check_count(len(args), self.name)
                bound = self.spec.bind(self.resolve_arguments(ev, args))
                response = resolve_ips(
                    bound["first"],
                    bound["index"],
                    bound.get("count"),
                    strict=self.strict,
                )
            except NetspineError as e:
                e.with_context(operator=self.name, location=here)
                log.debug("operator.failed", **e.to_dict())
                raise
            log.debug("operator.done", sequence=response.is_sequence)
            return response

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(strict={self.strict})"
