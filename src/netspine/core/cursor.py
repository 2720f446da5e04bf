"""
Document locations.

A Cursor is a path into the host's hierarchical document: a tuple of node
names, where list elements are addressed by position or by the value of their
``name``/``key``/``id`` field. Operators use cursors for two things: matching
dependencies (the ``under`` relation) and, when the host supplies no resolver
of its own, reading referenced values out of a plain ``dict``/``list`` tree.

Examples:
    >>> Cursor.parse("$.meta.net").nodes
    ('meta', 'net')
    >>> Cursor.parse("jobs[0].ip") == Cursor.parse("jobs.0.ip")
    True
    >>> Cursor.parse("a.b.c").under(Cursor.parse("a.b"))
    True

Tags:
    netspine, core, cursor, path, document, dependencies

Doc-Types:
    api-reference
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from netspine.core.errors import PathNotFoundError

NAME_FIELDS = ("name", "key", "id")

_INDEX_RE = re.compile(r"\[([^\]]*)\]")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable path into a document."""

    nodes: tuple[str, ...] = ()

    @classmethod
    def parse(cls, path: str) -> Cursor:
        """
        Parse dotted path text.

        A leading ``$`` (root marker) is dropped, ``a[0]`` is shorthand for
        ``a.0``, and empty segments are ignored.
        """
        text = path.strip()
        if text.startswith("$"):
            text = text[1:]
        text = _INDEX_RE.sub(r".\1", text)
        return cls(tuple(node for node in text.split(".") if node))

    def under(self, other: Cursor) -> bool:
        """True when this cursor is ``other`` itself or nested beneath it."""
        if len(self.nodes) < len(other.nodes):
            return False
        return self.nodes[: len(other.nodes)] == other.nodes

    def child(self, node: str | int) -> Cursor:
        return Cursor((*self.nodes, str(node)))

    def parent(self) -> Cursor:
        return Cursor(self.nodes[:-1])

    def resolve(self, tree: Any) -> Any:
        """
        Walk ``tree`` along this cursor and return the value found there.

        Mappings are indexed by key. Sequences are indexed by integer
        position, or by matching a node against the ``name``, ``key`` or
        ``id`` field of their mapping elements.

        Raises:
            PathNotFoundError: if any segment of the path is missing.
        """
        current = tree
        for depth, node in enumerate(self.nodes):
            here = Cursor(self.nodes[: depth + 1])
            if isinstance(current, Mapping):
                if node not in current:
                    raise PathNotFoundError(str(self), f"`{here}` could not be found in the datastructure")
                current = current[node]
            elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
                current = _list_member(current, node, here, self)
            else:
                raise PathNotFoundError(
                    str(self),
                    f"`{here.parent()}` is a scalar and has no child `{node}`",
                )
        return current

    def __str__(self) -> str:
        return ".".join(self.nodes)


def _list_member(items: Sequence[Any], node: str, here: Cursor, full: Cursor) -> Any:
    if node.isdigit():
        index = int(node)
        if index >= len(items):
            raise PathNotFoundError(
                str(full), f"`{here}` is out of range (list has {len(items)} elements)"
            )
        return items[index]
    for field in NAME_FIELDS:
        for item in items:
            if isinstance(item, Mapping) and item.get(field) == node:
                return item
    raise PathNotFoundError(str(full), f"`{here}` could not be found in the datastructure")


__all__ = ["Cursor", "NAME_FIELDS"]
