"""Tests for job and talent filters."""

from marketplace.models.job import Job
from marketplace.models.profile import Profile
from marketplace.schemas.jobs import JobFilters
from marketplace.utils.filters import JobFilter, TalentFilter


def _job(**overrides) -> Job:
    values = {
        "employer_id": "employer-1",
        "title": "Senior Python Developer",
        "description": "Async services on FastAPI",
        "budget_min": 2000.0,
        "budget_max": 4000.0,
        "job_type": "full-time",
        "experience_level": "expert",
        "skills_required": ["Python", "Redis"],
    }
    values.update(overrides)
    return Job(**values)


class TestJobFilter:
    """Tests for JobFilter."""

    def test_no_filters_matches_everything(self):
        assert JobFilter(JobFilters()).matches(_job())

    def test_search_is_case_insensitive(self):
        """Search looks at title, description and skills."""
        assert JobFilter(JobFilters(search="PYTHON")).matches(_job())
        assert JobFilter(JobFilters(search="fastapi")).matches(_job())
        assert JobFilter(JobFilters(search="redis")).matches(_job())
        assert not JobFilter(JobFilters(search="golang")).matches(_job())

    def test_blank_search_ignored(self):
        assert JobFilter(JobFilters(search="   ")).matches(_job())

    def test_job_type_and_level(self):
        assert JobFilter(JobFilters(job_type="full-time")).matches(_job())
        assert not JobFilter(JobFilters(job_type="contract")).matches(_job())
        assert not JobFilter(JobFilters(experience_level="entry")).matches(_job())

    def test_budget_bounds(self):
        assert JobFilter(JobFilters(min_budget=2000)).matches(_job())
        assert not JobFilter(JobFilters(min_budget=2500)).matches(_job())
        assert JobFilter(JobFilters(max_budget=4000)).matches(_job())
        assert not JobFilter(JobFilters(max_budget=3500)).matches(_job())

    def test_missing_budget_fails_budget_filters(self):
        job = _job(budget_min=None, budget_max=None)
        assert not JobFilter(JobFilters(min_budget=0)).matches(job)
        assert not JobFilter(JobFilters(max_budget=10000)).matches(job)

    def test_apply_keeps_order(self):
        jobs = [
            _job(title="A Python"),
            _job(title="B", skills_required=[], description="x"),
            _job(title="C Python"),
        ]
        result = JobFilter(JobFilters(search="python")).apply(jobs)
        assert [job.title for job in result] == ["A Python", "C Python"]


class TestTalentFilter:
    def _profile(self, **overrides) -> Profile:
        values = {
            "id": "f-1",
            "email": "f@example.com",
            "full_name": "Ada Lovelace",
            "role": "freelancer",
            "location": "London",
            "skills": ["Mathematics", "Analytical Engine"],
        }
        values.update(overrides)
        return Profile(**values)

    def test_empty_search_matches(self):
        assert TalentFilter(None).matches(self._profile())
        assert TalentFilter("  ").matches(self._profile())

    def test_matches_name_location_skill(self):
        profile = self._profile()
        assert TalentFilter("ada").matches(profile)
        assert TalentFilter("london").matches(profile)
        assert TalentFilter("engine").matches(profile)
        assert not TalentFilter("paris").matches(profile)

    def test_handles_missing_fields(self):
        profile = self._profile(full_name=None, location=None, skills=[])
        assert not TalentFilter("ada").matches(profile)
