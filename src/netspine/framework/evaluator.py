"""Evaluation context handed to operators by the host.

Manifesto:
    Operators never walk the document on their own authority. The host
    passes the document, the call-site location and a reference resolver;
    the operator asks the context, and the context turns any resolver
    failure into a ReferenceResolutionError that names the path.

Tags:
    netspine, framework, evaluator, references

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from netspine.core.cursor import Cursor
from netspine.core.errors import ReferenceResolutionError

ReferenceResolver = Callable[[Cursor], Any]


@dataclass
class EvaluationContext:
    """
    What an operator needs from the host for one call-site.

    Attributes:
        tree: The host document (plain dicts and lists)
        here: Location of the call-site being evaluated
        resolver: Host-supplied reference resolution capability; when
            omitted, references are looked up in ``tree`` with Cursor.resolve
    """

    tree: Any = field(default_factory=dict)
    here: Cursor = field(default_factory=Cursor)
    resolver: ReferenceResolver | None = None

    def resolve_reference(self, reference: Cursor) -> Any:
        """
        Resolve ``reference`` to a concrete value.

        Raises:
            ReferenceResolutionError: wrapping whatever the resolver raised,
                with the path and the original message.
        """
        try:
            if self.resolver is None:
                return reference.resolve(self.tree)
            return self.resolver(reference)
        except ReferenceResolutionError:
            raise
        except Exception as e:
            raise ReferenceResolutionError(str(reference), str(e), cause=e) from e


__all__ = ["EvaluationContext", "ReferenceResolver"]
