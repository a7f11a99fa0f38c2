"""Bearer session model."""

from datetime import UTC, datetime, timedelta

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.core.storage import Base


def _utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class AuthSession(Base):
    """Access token issued by the identity provider for one user."""

    __tablename__ = "auth_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    access_token: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    expires_in: Mapped[int] = mapped_column(Integer, nullable=False)
    obtained_at: Mapped[datetime] = mapped_column(DateTime, default=_utc_now)

    def is_expired(self, buffer_seconds: int = 30) -> bool:
        """Check if the session is expired (with buffer for clock skew)."""
        expiry = self.obtained_at + timedelta(seconds=self.expires_in - buffer_seconds)
        return _utc_now() > expiry
