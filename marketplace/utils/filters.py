"""Browse filtering logic for jobs and talent."""

from marketplace.models.job import Job
from marketplace.models.profile import Profile
from marketplace.schemas.jobs import JobFilters


class JobFilter:
    """Filters for the job board; all criteria must match."""

    def __init__(self, filters: JobFilters):
        self.filters = filters

    def matches(self, job: Job) -> bool:
        """Determine if a job passes every active criterion."""
        f = self.filters

        if f.search and f.search.strip() and not self._matches_search(job):
            return False

        if f.job_type and job.job_type != f.job_type:
            return False

        if f.experience_level and job.experience_level != f.experience_level:
            return False

        if f.min_budget is not None:
            if job.budget_min is None or job.budget_min < f.min_budget:
                return False

        if f.max_budget is not None:
            if job.budget_max is None or job.budget_max > f.max_budget:
                return False

        return True

    def apply(self, jobs: list[Job]) -> list[Job]:
        return [job for job in jobs if self.matches(job)]

    def _matches_search(self, job: Job) -> bool:
        term = self.filters.search.strip().lower()
        if term in (job.title or "").lower():
            return True
        if term in (job.description or "").lower():
            return True
        return any(term in skill.lower() for skill in job.skills_required or [])


class TalentFilter:
    """Free-text filter over freelancer profiles."""

    def __init__(self, search: str | None):
        self.term = (search or "").strip().lower()

    def matches(self, profile: Profile) -> bool:
        if not self.term:
            return True
        if self.term in (profile.full_name or "").lower():
            return True
        if self.term in (profile.location or "").lower():
            return True
        return any(self.term in skill.lower() for skill in profile.skills or [])

    def apply(self, profiles: list[Profile]) -> list[Profile]:
        return [profile for profile in profiles if self.matches(profile)]
