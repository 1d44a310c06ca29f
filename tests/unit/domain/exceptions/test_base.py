"""Tests for domain/exceptions/base.py."""

import pytest

from archconform.domain.exceptions import (
    ArchConformError,
    ConformanceViolationError,
    InvalidPatternError,
    MalformedEdgeError,
    SelfReferenceError,
)


class TestArchConformError:
    """Tests for the root exception."""

    def test_is_exception(self) -> None:
        assert issubclass(ArchConformError, Exception)

    @pytest.mark.parametrize(
        "error_cls",
        [MalformedEdgeError, SelfReferenceError, InvalidPatternError, ConformanceViolationError],
    )
    def test_all_errors_inherit_root(self, error_cls: type[Exception]) -> None:
        assert issubclass(error_cls, ArchConformError)

    def test_can_catch_all_as_root(self) -> None:
        with pytest.raises(ArchConformError):
            raise SelfReferenceError("a.b")
