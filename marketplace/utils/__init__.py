"""Utility functions and classes."""

from marketplace.utils.filters import JobFilter, TalentFilter
from marketplace.utils.validators import (
    ValidationResult,
    validate_resume_upload,
    validate_status_transition,
)

__all__ = [
    "JobFilter",
    "TalentFilter",
    "ValidationResult",
    "validate_resume_upload",
    "validate_status_transition",
]
