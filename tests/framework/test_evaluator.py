"""Tests for EvaluationContext reference resolution."""

import pytest

from netspine.core.cursor import Cursor
from netspine.core.errors import ErrorCategory, PathNotFoundError, ReferenceResolutionError
from netspine.framework.evaluator import EvaluationContext


class TestTreeResolution:
    def test_scalar(self, ev):
        assert ev.resolve_reference(Cursor.parse("meta.net")) == "10.0.0.0/24"

    def test_named_list_member(self, ev):
        assert ev.resolve_reference(Cursor.parse("networks.z2.range")) == "2001:db8::/64"

    def test_positional_list_member(self, ev):
        assert ev.resolve_reference(Cursor.parse("meta.ranges.1")) == "10.0.1.0/28"

    def test_non_scalar_returned_as_is(self, ev):
        assert ev.resolve_reference(Cursor.parse("meta.options")) == {"dns": "8.8.8.8"}

    def test_missing_path_wrapped(self, ev):
        with pytest.raises(ReferenceResolutionError) as exc_info:
            ev.resolve_reference(Cursor.parse("meta.missing"))
        error = exc_info.value
        assert str(error).startswith("Unable to resolve `meta.missing`: ")
        assert "could not be found in the datastructure" in str(error)
        assert isinstance(error.__cause__, PathNotFoundError)
        assert error.reference == "meta.missing"
        assert error.category is ErrorCategory.SOURCE

    def test_defaults(self):
        ev = EvaluationContext()
        assert ev.tree == {}
        assert str(ev.here) == ""


class TestHostResolver:
    def test_resolver_takes_precedence(self, sample_tree):
        seen = []

        def resolver(cursor):
            seen.append(cursor)
            return "192.0.2.0/24"

        ev = EvaluationContext(tree=sample_tree, resolver=resolver)
        assert ev.resolve_reference(Cursor.parse("meta.net")) == "192.0.2.0/24"
        assert seen == [Cursor.parse("meta.net")]

    def test_resolver_exception_wrapped(self):
        ev = EvaluationContext(resolver=lambda cursor: {}[str(cursor)])
        with pytest.raises(ReferenceResolutionError, match="Unable to resolve `a.b`") as exc_info:
            ev.resolve_reference(Cursor.parse("a.b"))
        assert isinstance(exc_info.value.cause, KeyError)

    def test_resolution_error_not_rewrapped(self):
        original = ReferenceResolutionError("a", "gone")

        def resolver(cursor):
            raise original

        with pytest.raises(ReferenceResolutionError) as exc_info:
            EvaluationContext(resolver=resolver).resolve_reference(Cursor.parse("a"))
        assert exc_info.value is original
