"""Job application model."""

import uuid
from datetime import UTC, date, datetime, time

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.core.storage import Base

APPLICATION_STATUSES = ("pending", "shortlisted", "accepted", "rejected")
TERMINAL_STATUSES = ("accepted", "rejected")


def _utc_now() -> datetime:
    """Return current UTC time as timezone-naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)


class JobApplication(Base):
    """A freelancer's submission to a job."""

    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("job_id", "freelancer_id", name="uq_application_job_freelancer"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    job_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("jobs.id"), nullable=False, index=True
    )
    freelancer_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)
    cover_letter: Mapped[str] = mapped_column(Text, nullable=False)
    proposed_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    # Storage key of the uploaded resume, resolved to a signed URL on read
    resume_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    interview_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    interview_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    interview_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utc_now, nullable=False, index=True
    )

    @staticmethod
    def interview_values(
        when: date | None = None, at: time | None = None, notes: str | None = None
    ) -> dict:
        """Column values for an interview slot; no arguments clear it."""
        return {
            "interview_date": when,
            "interview_time": at,
            "interview_notes": notes or None,
        }
