"""Operator arguments and responses.

Hosts hand operators a list of already tokenised arguments (Expr) and get
back a Response telling them what to put at the call-site.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from netspine.core.cursor import Cursor


class ExprType(str, Enum):
    """Kind of operator argument."""

    LITERAL = "literal"
    REFERENCE = "reference"


@dataclass(frozen=True)
class Expr:
    """A single operator argument: a literal value or a reference to a document location."""

    type: ExprType
    literal: Any = None
    reference: Cursor | None = None

    @classmethod
    def lit(cls, value: Any) -> Expr:
        return cls(ExprType.LITERAL, literal=value)

    @classmethod
    def ref(cls, path: str | Cursor) -> Expr:
        cursor = path if isinstance(path, Cursor) else Cursor.parse(path)
        return cls(ExprType.REFERENCE, reference=cursor)

    def __str__(self) -> str:
        if self.type is ExprType.REFERENCE:
            return str(self.reference)
        return repr(self.literal)


class ResponseType(str, Enum):
    """What the host should do with a Response value."""

    REPLACE = "replace"


@dataclass(frozen=True)
class Response:
    """Operator output: replace the call-site with ``value``."""

    type: ResponseType
    value: str | list[str]

    @classmethod
    def replace(cls, value: str | list[str]) -> Response:
        return cls(ResponseType.REPLACE, value)

    @property
    def is_sequence(self) -> bool:
        return isinstance(self.value, list)

    @property
    def is_scalar(self) -> bool:
        return not self.is_sequence


__all__ = ["Expr", "ExprType", "Response", "ResponseType"]
