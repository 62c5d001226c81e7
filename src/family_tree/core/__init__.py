"""
Orchestration layer: run context, pipeline and exception hierarchy.
"""

from family_tree.core.exceptions import (
    FamilyTreeError,
    InvalidDateError,
    InvalidGenderError,
    InvalidReferenceError,
    PipelineError,
    ValidationError,
)

__all__ = [
    "FamilyTreeError",
    "InvalidDateError",
    "InvalidGenderError",
    "InvalidReferenceError",
    "PipelineError",
    "ValidationError",
]
