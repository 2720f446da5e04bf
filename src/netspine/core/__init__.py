"""netspine core -- address arithmetic, document cursors and shared plumbing.

Manifesto:
    Operators need the same small foundation: an address type that adds with
    carry, a path type that knows what is nested under what, typed errors,
    settings and structured logs. ``netspine.core`` holds exactly that and
    nothing that knows about any particular operator.

Architecture::

    Layer 1 -- Type System & Errors
        errors.py          Structured error hierarchy (NetspineError and kin)
        values.py          Value kinds (scalar / sequence / mapping), coercion

    Layer 2 -- Domain Primitives
        address.py         Fixed-width Address and Block arithmetic
        cursor.py          Cursor paths, ``under`` relation, tree lookup

    Layer 3 -- Ambient
        settings.py        pydantic-settings configuration (NETSPINE_*)
        logging.py         structlog configuration and context helpers
"""

from netspine.core.address import Address, Block, parse_block_or_address
from netspine.core.cursor import Cursor
from netspine.core.errors import (
    ArgumentCountError,
    ArgumentError,
    ArgumentTypeError,
    BoundsError,
    CoercionError,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    NetspineError,
    OperatorNotFoundError,
    ParseError,
    PathNotFoundError,
    ReferenceResolutionError,
)
from netspine.core.values import ValueKind, classify, coerce_int

__all__ = [
    # Address arithmetic
    "Address",
    "Block",
    "parse_block_or_address",
    # Cursors
    "Cursor",
    # Values
    "ValueKind",
    "classify",
    "coerce_int",
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "NetspineError",
    "ArgumentError",
    "ArgumentCountError",
    "ArgumentTypeError",
    "BoundsError",
    "CoercionError",
    "ConfigError",
    "OperatorNotFoundError",
    "ParseError",
    "PathNotFoundError",
    "ReferenceResolutionError",
]
