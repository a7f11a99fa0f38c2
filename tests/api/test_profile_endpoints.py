"""Tests for profile, talent and resume download endpoints."""

from marketplace.core.exceptions import EmailDispatchError
from marketplace.main import app
from marketplace.schemas.profiles import ContactResponse, ProfileResponse
from marketplace.services.dependencies import get_notification_service, get_profile_service
from marketplace.services.email_service import get_email_dispatcher
from marketplace.services.resume_store import ResumeStore, get_resume_store


class TestProfileEndpoints:
    def test_browse_talent(self, test_client, override, now):
        service = override(get_profile_service)
        service.browse_talent.return_value = [
            ProfileResponse(
                id="freelancer-1",
                email="dev@example.com",
                full_name="Jane Developer",
                role="freelancer",
                bio=None,
                location="Berlin",
                hourly_rate=60.0,
                skills=["Python"],
                created_at=now,
            )
        ]

        response = test_client.get("/talent?search=python")

        assert response.status_code == 200
        assert response.json()[0]["full_name"] == "Jane Developer"
        service.browse_talent.assert_awaited_once_with("python")

    def test_contact(self, test_client, as_user, override, employer_ctx, mock_email):
        as_user(employer_ctx)
        service = override(get_profile_service)
        override(get_notification_service)
        app.dependency_overrides[get_email_dispatcher] = lambda: mock_email
        service.contact_freelancer.return_value = ContactResponse(
            status="sent", message="Message sent successfully!"
        )

        response = test_client.post(
            "/talent/freelancer-1/contact", json={"message": "  Are you free?  "}
        )

        assert response.status_code == 200
        assert service.contact_freelancer.await_args.args[2] == "Are you free?"

    def test_contact_provider_failure(self, test_client, as_user, override, employer_ctx, mock_email):
        as_user(employer_ctx)
        service = override(get_profile_service)
        override(get_notification_service)
        app.dependency_overrides[get_email_dispatcher] = lambda: mock_email
        service.contact_freelancer.side_effect = EmailDispatchError("Resend", 500, "down")

        response = test_client.post("/talent/freelancer-1/contact", json={"message": "Hi"})

        assert response.status_code == 502

    def test_blank_message(self, test_client, as_user, override, employer_ctx, mock_email):
        as_user(employer_ctx)
        override(get_profile_service)
        override(get_notification_service)
        app.dependency_overrides[get_email_dispatcher] = lambda: mock_email

        response = test_client.post("/talent/freelancer-1/contact", json={"message": "   "})

        assert response.status_code == 422


class TestResumeDownload:
    def test_signed_download(self, test_client, tmp_path):
        store = ResumeStore(tmp_path, secret="s3cret", ttl_seconds=60)
        (tmp_path / "freelancer-1").mkdir()
        (tmp_path / "freelancer-1" / "cv.pdf").write_bytes(b"%PDF")
        app.dependency_overrides[get_resume_store] = lambda: store

        url, _ = store.signed_url("freelancer-1/cv.pdf")
        response = test_client.get(url)

        assert response.status_code == 200
        assert response.content == b"%PDF"

    def test_tampered_signature(self, test_client, tmp_path):
        store = ResumeStore(tmp_path, secret="s3cret", ttl_seconds=60)
        app.dependency_overrides[get_resume_store] = lambda: store

        url, _ = store.signed_url("freelancer-1/cv.pdf")
        response = test_client.get(url.replace("signature=", "signature=0"))

        assert response.status_code == 403

    def test_expired_link(self, test_client, tmp_path):
        store = ResumeStore(tmp_path, secret="s3cret", ttl_seconds=60)
        app.dependency_overrides[get_resume_store] = lambda: store

        url, _ = store.signed_url("freelancer-1/cv.pdf", now=1_000_000)

        assert test_client.get(url).status_code == 403

    def test_missing_file(self, test_client, tmp_path):
        store = ResumeStore(tmp_path, secret="s3cret", ttl_seconds=60)
        app.dependency_overrides[get_resume_store] = lambda: store

        url, _ = store.signed_url("freelancer-1/deleted.pdf")

        assert test_client.get(url).status_code == 404


class TestServiceInfo:
    def test_health(self, test_client):
        assert test_client.get("/health").json()["status"] == "healthy"

    def test_api_info(self, test_client):
        data = test_client.get("/api").json()
        assert data["realtime_enabled"] is False
        assert data["email_enabled"] is False

    def test_cors_preflight_from_configured_origin(self, test_client):
        response = test_client.options(
            "/jobs",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"
