"""Structural predicates available to exception patterns.

The registry is closed: patterns can only name predicates defined here.
Each factory takes the pattern argument and the identifier separator
and returns a predicate over a whole violation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from archconform.application.exceptions_engine.globs import compile_glob
from archconform.domain.model.enums import Evidence
from archconform.domain.model.node import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from archconform.domain.model.violation import Violation

ViolationPredicate = Callable[["Violation"], bool]
PredicateFactory = Callable[[str | None, str], ViolationPredicate]


def member_contains(
    argument: str | None,
    separator: str = DEFAULT_SEPARATOR,
) -> ViolationPredicate:
    """Every member identifier contains a token.

    Typical token: an inner-unit separator such as "$".

    Raises:
        ValueError: If token is missing
    """
    if not argument:
        raise ValueError("member_contains requires a non-empty token")
    token = argument

    def predicate(violation: Violation) -> bool:
        return all(token in member for member in violation.members)

    return predicate


def shared_stem(
    argument: str | None,
    separator: str = DEFAULT_SEPARATOR,
) -> ViolationPredicate:
    """All members share one name before a separator marker.

    Every member must contain the marker; stripping the marker and
    everything after it must leave the same stem for all members.
    E.g. with "$": "a.Foo$Impl" and "a.Foo$Api" share stem "a.Foo".

    Raises:
        ValueError: If marker is missing
    """
    if not argument:
        raise ValueError("shared_stem requires a non-empty separator marker")
    marker = argument

    def predicate(violation: Violation) -> bool:
        stems: set[str] = set()
        for member in violation.members:
            stem, found, _ = member.partition(marker)
            if not found:
                return False
            stems.add(stem)
        return len(stems) == 1

    return predicate


def member_glob(
    argument: str | None,
    separator: str = DEFAULT_SEPARATOR,
) -> ViolationPredicate:
    """Every member identifier matches a glob over separator-split segments.

    Raises:
        ValueError: If glob is missing or invalid
    """
    if not argument:
        raise ValueError("member_glob requires a glob")
    glob = compile_glob(argument, separator)

    def predicate(violation: Violation) -> bool:
        return all(glob.match(member) for member in violation.members)

    return predicate


def data_reference(
    argument: str | None,
    separator: str = DEFAULT_SEPARATOR,
) -> ViolationPredicate:
    """Every edge of the violation is a data reference.

    Violations without edges (parents with code) never match.

    Raises:
        ValueError: If an argument is given
    """
    if argument is not None:
        raise ValueError(f"data_reference takes no argument, got {argument!r}")

    def predicate(violation: Violation) -> bool:
        return bool(violation.edges) and all(
            edge.evidence is Evidence.DATA_REFERENCE for edge in violation.edges
        )

    return predicate


PREDICATES: Mapping[str, PredicateFactory] = MappingProxyType(
    {
        "member_contains": member_contains,
        "shared_stem": shared_stem,
        "member_glob": member_glob,
        "data_reference": data_reference,
    }
)
