"""Tests for domain/model/violation.py."""

import pytest

from archconform.domain.model.enums import Evidence, Severity, ViolationKind, ViolationScope
from tests.factories import make_edge, make_violation


class TestViolationFailFirst:
    """FAIL-FIRST validation of member shapes."""

    def test_empty_members_raises(self) -> None:
        with pytest.raises(ValueError, match="members must not be empty"):
            make_violation(members=())

    def test_duplicate_members_raises(self) -> None:
        with pytest.raises(ValueError, match="members must be unique"):
            make_violation(members=("a.b", "a.b"))

    def test_cycle_needs_two_members(self) -> None:
        with pytest.raises(ValueError, match="cycle requires at least 2 members"):
            make_violation(kind=ViolationKind.CYCLE, members=("a.b",))

    def test_vertical_needs_two_members(self) -> None:
        with pytest.raises(ValueError, match="exactly 2 members"):
            make_violation(kind=ViolationKind.UPWARD_DEPENDENCY, members=("a.b", "a", "x"))

    def test_parent_has_code_needs_one_member(self) -> None:
        with pytest.raises(ValueError, match="exactly 1 member"):
            make_violation(kind=ViolationKind.PARENT_HAS_CODE, members=("a", "b"))


class TestViolationIdentity:
    """Equality ignores severity and evidence edges."""

    def test_equal_regardless_of_severity(self) -> None:
        assert make_violation(severity=Severity.HIGH) == make_violation()

    def test_equal_regardless_of_edges(self) -> None:
        edges = (make_edge("a.b", "a.c", evidence=Evidence.DATA_REFERENCE),)
        assert make_violation(edges=edges) == make_violation()
        assert hash(make_violation(edges=edges)) == hash(make_violation())

    def test_member_order_matters(self) -> None:
        assert make_violation(members=("a.b", "a.c")) != make_violation(members=("a.c", "a.b"))

    def test_scope_matters(self) -> None:
        assert make_violation(scope=ViolationScope.MODULE) != make_violation(
            scope=ViolationScope.PACKAGE
        )


class TestViolationClassification:
    """Severity assignment."""

    def test_unclassified_by_default(self) -> None:
        assert not make_violation().classified

    def test_with_severity_returns_copy(self) -> None:
        original = make_violation()
        classified = original.with_severity(Severity.MEDIUM)
        assert classified.severity is Severity.MEDIUM
        assert original.severity is None

    def test_sort_key_puts_high_first(self) -> None:
        high = make_violation(scope=ViolationScope.MODULE, severity=Severity.HIGH)
        medium = make_violation(severity=Severity.MEDIUM)
        assert sorted([medium, high], key=lambda v: v.sort_key()) == [high, medium]


class TestViolationStr:
    """Display format."""

    def test_cycle(self) -> None:
        text = str(make_violation(severity=Severity.MEDIUM))
        assert text == "[MEDIUM] Cyclic dependency (package scope): a.b → a.c"

    def test_unclassified(self) -> None:
        assert str(make_violation()).startswith("[UNCLASSIFIED]")

    def test_parent_has_code(self) -> None:
        violation = make_violation(kind=ViolationKind.PARENT_HAS_CODE, members=("p",))
        assert "Organizing package owns declarations" in str(violation)
