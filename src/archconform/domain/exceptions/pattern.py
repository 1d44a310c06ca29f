"""Exception pattern exceptions."""

from archconform.domain.exceptions.base import ArchConformError


class InvalidPatternError(ArchConformError, ValueError):
    """Exception pattern cannot be evaluated.

    Raised when a pattern names a predicate the engine does not know,
    or supplies an argument the predicate rejects.

    Attributes:
        pattern_name: Name of invalid pattern (must not be empty)
        reason: Why pattern is invalid (must not be empty)
    """

    def __init__(self, pattern_name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not pattern_name:
            raise ValueError("pattern_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.pattern_name = pattern_name
        self.reason = reason
        super().__init__(f"Invalid exception pattern '{pattern_name}': {reason}")
