"""Pytest configuration and fixtures."""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment variables before importing marketplace modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ["REALTIME_ENABLED"] = "false"
os.environ["RESEND_API_KEY"] = ""
os.environ["SIGNED_URL_SECRET"] = "test-secret"

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from marketplace.core.context import RequestContext  # noqa: E402
from marketplace.core.storage import init_models  # noqa: E402
from marketplace.models import AuthSession, Job, JobApplication, Profile  # noqa: E402


def _naive_utc(offset_minutes: int = 0) -> datetime:
    return datetime.now(UTC).replace(tzinfo=None) + timedelta(minutes=offset_minutes)


@pytest.fixture
async def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    """Database session bound to the in-memory engine."""
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest.fixture
async def employer(session):
    profile = Profile(
        id="employer-1",
        email="boss@example.com",
        full_name="Acme Hiring",
        role="employer",
        skills=[],
    )
    session.add(profile)
    await session.commit()
    return profile


@pytest.fixture
async def other_employer(session):
    profile = Profile(
        id="employer-2",
        email="rival@example.com",
        full_name="Rival Corp",
        role="employer",
        skills=[],
    )
    session.add(profile)
    await session.commit()
    return profile


@pytest.fixture
async def freelancer(session):
    profile = Profile(
        id="freelancer-1",
        email="dev@example.com",
        full_name="Jane Developer",
        role="freelancer",
        location="Berlin",
        hourly_rate=60.0,
        skills=["Python", "FastAPI"],
    )
    session.add(profile)
    await session.commit()
    return profile


@pytest.fixture
async def job(session, employer):
    job = Job(
        employer_id=employer.id,
        title="Backend Developer",
        description="Build REST APIs for our marketplace.",
        budget_min=1000,
        budget_max=3000,
        location="Remote",
        job_type="contract",
        experience_level="intermediate",
        skills_required=["Python", "PostgreSQL"],
        status="open",
        created_at=_naive_utc(-10),
    )
    session.add(job)
    await session.commit()
    return job


@pytest.fixture
async def application(session, job, freelancer):
    application = JobApplication(
        job_id=job.id,
        freelancer_id=freelancer.id,
        status="pending",
        cover_letter="I have built many APIs with FastAPI and SQLAlchemy.",
        proposed_rate=55.0,
        phone_number="+49 151 2345 6789",
    )
    session.add(application)
    await session.commit()
    return application


@pytest.fixture
async def auth_session(session, employer):
    record = AuthSession(
        access_token="employer-token",
        user_id=employer.id,
        expires_in=3600,
        obtained_at=_naive_utc(),
    )
    session.add(record)
    await session.commit()
    return record


@pytest.fixture
def employer_ctx():
    return RequestContext(
        user_id="employer-1",
        role="employer",
        email="boss@example.com",
        full_name="Acme Hiring",
    )


@pytest.fixture
def other_employer_ctx():
    return RequestContext(
        user_id="employer-2",
        role="employer",
        email="rival@example.com",
        full_name="Rival Corp",
    )


@pytest.fixture
def freelancer_ctx():
    return RequestContext(
        user_id="freelancer-1",
        role="freelancer",
        email="dev@example.com",
        full_name="Jane Developer",
    )


@pytest.fixture
def mock_email():
    """Mock email dispatcher for testing."""
    dispatcher = MagicMock()
    dispatcher.send_application_status = AsyncMock(return_value=True)
    dispatcher.send_interview = AsyncMock(return_value=True)
    dispatcher.send_contact = AsyncMock(return_value=True)
    return dispatcher


@pytest.fixture
def mock_feed():
    """Mock realtime feed for testing."""
    feed = MagicMock()
    feed.publish = AsyncMock(return_value=1)
    return feed


@pytest.fixture
def sample_application_form():
    from marketplace.schemas.applications import ApplicationForm

    return ApplicationForm(
        name="Jane Developer",
        email="dev@example.com",
        phone="+49 151 2345 6789",
        cover_letter="I have five years of experience building APIs.",
        proposed_rate=50,
    )
