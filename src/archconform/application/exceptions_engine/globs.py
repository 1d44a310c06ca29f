"""Glob patterns over node identifiers.

Patterns are split on the identifier separator, so the same glob
syntax works for "a.b.c" and "a/b/c" identifiers.

Syntax (shown with "." as separator):
    *    one or more characters inside one segment
    ?    one character inside one segment
    **   whole segment: any number of segments

Special cases:
    foo.**    foo and everything below it
    **.foo    foo at any depth
    a.**.z    a.z, a.b.z, a.b.c.z, ...
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from archconform.domain.model.node import DEFAULT_SEPARATOR


@dataclass(frozen=True, slots=True)
class CompiledGlob:
    """Compiled identifier glob.

    Attributes:
        original: Original glob string
        separator: Identifier separator the glob was compiled for
        regex: Compiled regex for matching
    """

    original: str
    separator: str
    regex: re.Pattern[str]

    def match(self, identifier: str) -> bool:
        """Check if the whole identifier matches glob."""
        return self.regex.fullmatch(identifier) is not None

    def __str__(self) -> str:
        return self.original


def compile_glob(pattern: str, separator: str = DEFAULT_SEPARATOR) -> CompiledGlob:
    """Compile glob to regex for identifiers using separator.

    Args:
        pattern: Glob string
        separator: Identifier segment separator

    Returns:
        CompiledGlob with original and compiled regex

    Raises:
        ValueError: If pattern or separator is empty
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    if not separator:
        raise ValueError("separator must not be empty")

    sep = re.escape(separator)
    segments = pattern.split(separator)
    parts: list[str] = []
    # Literal segments after the first need a leading separator
    need_sep = False

    for index, segment in enumerate(segments):
        if segment != "**":
            parts.append((sep if need_sep else "") + _segment_regex(segment, sep))
            need_sep = True
        elif index == 0:
            parts.append(".*" if len(segments) == 1 else f"(?:.*{sep})?")
        else:
            parts.append(f"(?:{sep}.*)?")

    return CompiledGlob(original=pattern, separator=separator, regex=re.compile("".join(parts)))


def _segment_regex(segment: str, sep: str) -> str:
    inside = f"(?:(?!{sep}).)"
    out: list[str] = []
    for char in segment:
        if char == "*":
            out.append(f"{inside}+")
        elif char == "?":
            out.append(inside)
        else:
            out.append(re.escape(char))
    return "".join(out)
