"""Base exceptions for archconform domain."""


class ArchConformError(Exception):
    """Root exception for all archconform errors.

    All domain exceptions inherit from this.
    Allows catching all archconform-specific errors.
    """
