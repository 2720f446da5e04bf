"""
Resolved value classification and integer coercion.

A reference in the host document can resolve to anything the document holds:
a scalar, a list or a map. Operators consume scalars only, so this module
classifies values into a small sum type and coerces integer-shaped scalars.

Tags:
    netspine, core, values, coercion

Doc-Types:
    api-reference
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from netspine.core.errors import CoercionError

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class ValueKind(str, Enum):
    """Shape of a resolved document value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def classify(value: Any) -> ValueKind:
    """Classify ``value`` as a scalar, sequence or mapping.

    Strings and bytes are scalars even though they are sequences.
    """
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def coerce_int(value: Any, *, name: str = "value") -> int:
    """
    Coerce an integer-shaped value to ``int``.

    Native integers pass through. Text is accepted when it spells an integer
    (surrounding whitespace and a leading sign allowed), since literal tokens
    reach operators as text. Booleans, floats and everything else are rejected.

    Raises:
        CoercionError: if ``value`` is not integer-shaped.
    """
    if isinstance(value, bool):
        raise CoercionError(f"{name} must be an integer, got boolean {value!r}").with_context(
            argument_value=value
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        return int(value.strip())
    raise CoercionError(
        f"{name} must be an integer, got {type(value).__name__} {value!r}"
    ).with_context(argument_value=value)


__all__ = ["ValueKind", "classify", "coerce_int"]
