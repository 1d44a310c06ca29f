"""Tests for domain/exceptions/graph.py."""

import pytest

from archconform.domain.exceptions.base import ArchConformError
from archconform.domain.exceptions.graph import MalformedEdgeError, SelfReferenceError


class TestMalformedEdgeError:
    """Tests for MalformedEdgeError exception."""

    def test_is_archconform_error(self) -> None:
        assert issubclass(MalformedEdgeError, ArchConformError)

    def test_is_value_error(self) -> None:
        assert issubclass(MalformedEdgeError, ValueError)

    def test_has_structured_attributes(self) -> None:
        err = MalformedEdgeError("a.b→a.x", "target 'a.x' is not declared")
        assert err.identifier == "a.b→a.x"
        assert err.reason == "target 'a.x' is not declared"

    def test_message_format(self) -> None:
        err = MalformedEdgeError("a.b", "conflicting redeclaration")
        assert str(err) == "Malformed input at 'a.b': conflicting redeclaration"

    def test_empty_identifier_raises(self) -> None:
        with pytest.raises(ValueError, match="identifier must not be empty"):
            MalformedEdgeError("", "reason")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            MalformedEdgeError("a", "")


class TestSelfReferenceError:
    """Tests for SelfReferenceError exception."""

    def test_is_archconform_error(self) -> None:
        assert issubclass(SelfReferenceError, ArchConformError)

    def test_has_identifier(self) -> None:
        err = SelfReferenceError("a.b")
        assert err.identifier == "a.b"

    def test_message_names_node(self) -> None:
        assert "a.b → a.b" in str(SelfReferenceError("a.b"))

    def test_empty_identifier_raises(self) -> None:
        with pytest.raises(ValueError, match="identifier must not be empty"):
            SelfReferenceError("")
