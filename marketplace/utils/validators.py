"""Validation logic for application status changes and uploads."""

from dataclasses import dataclass, field
from pathlib import PurePath

from marketplace.models.application import TERMINAL_STATUSES
from marketplace.schemas.applications import InterviewData

ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"shortlisted", "accepted", "rejected"}),
    "shortlisted": frozenset({"shortlisted", "accepted", "rejected"}),
    "accepted": frozenset(),
    "rejected": frozenset(),
}

RESUME_EXTENSIONS = ("pdf", "doc", "docx")


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


def validate_status_transition(
    current: str,
    requested: str,
    interview: InterviewData | None = None,
) -> ValidationResult:
    """Check an employer's status change against the application lifecycle."""
    if current in TERMINAL_STATUSES:
        return ValidationResult(
            is_valid=False,
            error=f"Application is already {current}",
        )

    if requested not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        return ValidationResult(
            is_valid=False,
            error=f"Transition {current} -> {requested} is not allowed",
        )

    if interview is not None and requested != "shortlisted":
        return ValidationResult(
            is_valid=False,
            error="Interviews can only be scheduled for shortlisted candidates",
        )

    if current == requested and interview is None:
        return ValidationResult(
            is_valid=False,
            error="Application is already shortlisted",
        )

    warnings = []
    if current == "shortlisted" and interview is not None:
        warnings.append("Interview will be rescheduled")

    return ValidationResult(is_valid=True, warnings=warnings)


def validate_resume_upload(
    filename: str | None,
    size: int,
    max_bytes: int,
) -> ValidationResult:
    """Validate an uploaded resume file."""
    if not filename:
        return ValidationResult(is_valid=False, error="Resume file name is missing")

    extension = PurePath(filename).suffix.lower().lstrip(".")
    if extension not in RESUME_EXTENSIONS:
        return ValidationResult(
            is_valid=False,
            error=f"Resume must be one of: {', '.join(RESUME_EXTENSIONS)}",
        )

    if size == 0:
        return ValidationResult(is_valid=False, error="Resume file is empty")

    if size > max_bytes:
        return ValidationResult(
            is_valid=False,
            error=f"Resume exceeds maximum size of {max_bytes} bytes",
        )

    return ValidationResult(is_valid=True)
