"""Tests for job endpoints."""

from marketplace.core.exceptions import NotFoundError, PermissionDeniedError
from marketplace.schemas.jobs import EmployerJob, JobListing, JobResponse
from marketplace.services.dependencies import get_job_service


def _job(now, **overrides) -> dict:
    values = {
        "id": "job-1",
        "employer_id": "employer-1",
        "title": "Backend Developer",
        "description": "Build REST APIs.",
        "budget_min": 1000.0,
        "budget_max": 3000.0,
        "location": "Remote",
        "job_type": "contract",
        "experience_level": "intermediate",
        "skills_required": ["Python"],
        "status": "open",
        "created_at": now,
    }
    values.update(overrides)
    return values


class TestBrowseJobs:
    def test_filters_are_passed_through(self, test_client, override, now):
        """Browsing needs no authentication."""
        service = override(get_job_service)
        service.browse_jobs.return_value = [JobListing(**_job(now))]

        response = test_client.get("/jobs?search=python&job_type=contract&min_budget=500")

        assert response.status_code == 200
        assert response.json()[0]["employer"] == {"full_name": None, "email": None}
        filters = service.browse_jobs.await_args.args[0]
        assert filters.search == "python"
        assert filters.job_type == "contract"
        assert filters.min_budget == 500

    def test_invalid_job_type(self, test_client, override):
        override(get_job_service)
        assert test_client.get("/jobs?job_type=gig").status_code == 422


class TestPostJob:
    def test_post_job(self, test_client, as_user, override, employer_ctx, now):
        as_user(employer_ctx)
        service = override(get_job_service)
        service.post_job.return_value = JobResponse(**_job(now))

        response = test_client.post(
            "/jobs",
            json={"title": "Backend Developer", "description": "Build REST APIs."},
        )

        assert response.status_code == 201
        assert response.json()["status"] == "open"

    def test_budget_range_validated(self, test_client, as_user, override, employer_ctx):
        as_user(employer_ctx)
        service = override(get_job_service)

        response = test_client.post(
            "/jobs",
            json={"title": "Dev", "description": "d", "budget_min": 900, "budget_max": 100},
        )

        assert response.status_code == 422
        service.post_job.assert_not_awaited()

    def test_freelancer_forbidden(self, test_client, as_user, override, freelancer_ctx):
        as_user(freelancer_ctx)
        override(get_job_service)

        response = test_client.post("/jobs", json={"title": "Dev", "description": "d"})

        assert response.status_code == 403


class TestEmployerJobs:
    def test_my_jobs(self, test_client, as_user, override, employer_ctx, now):
        as_user(employer_ctx)
        service = override(get_job_service)
        service.employer_jobs.return_value = [EmployerJob(**_job(now), application_count=3)]

        response = test_client.get("/jobs/mine")

        assert response.status_code == 200
        assert response.json()[0]["application_count"] == 3

    def test_get_missing_job(self, test_client, override):
        service = override(get_job_service)
        service.get_job.side_effect = NotFoundError("Job", "nope")

        assert test_client.get("/jobs/nope").status_code == 404

    def test_close_other_employers_job(self, test_client, as_user, override, other_employer_ctx):
        as_user(other_employer_ctx)
        service = override(get_job_service)
        service.close_job.side_effect = PermissionDeniedError("You can only close your own jobs")

        assert test_client.post("/jobs/job-1/close").status_code == 403
