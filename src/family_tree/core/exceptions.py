class FamilyTreeError(Exception):
    """Base exception for family tree failures."""


class ValidationError(FamilyTreeError):
    """Raised when a person or link fails validation."""


class InvalidReferenceError(ValidationError):
    """Raised when a parent or child reference is missing or already owned."""


class InvalidGenderError(ValidationError):
    """Raised when a gender code is outside the allowed set."""


class InvalidDateError(ValidationError):
    """Raised when a birth date does not match YYYY-MM-DD."""


class PipelineError(FamilyTreeError):
    """Raised when the build/print/teardown run fails."""
