"""Integration tests for the swipe deck and application routes."""

from datetime import datetime

import pytest
from sqlalchemy.exc import SQLAlchemyError

from jobmatch.models import Application, Swipe
from jobmatch.repositories.application_repository import SwipeRepository
from jobmatch.services.matching_service import NO_MORE_JOBS_MESSAGE


@pytest.fixture
def seeker(make_user):
    return make_user("seeker@example.com")


@pytest.fixture
def jobs(make_company, make_job):
    company = make_company(name="Acme")
    return [
        make_job(company, "Older", created_at=datetime(2024, 1, 1)),
        make_job(company, "Newer", created_at=datetime(2024, 2, 1)),
    ]


@pytest.mark.integration
def test_jobs_requires_sign_in(client):
    """Test that anonymous visitors are sent to the login page."""
    response = client.get("/api/v1/jobs")

    assert response.status_code == 303
    assert response.headers["location"] == "/auth/login"


@pytest.mark.integration
def test_deck_lists_newest_first(client, seeker, jobs, auth_headers):
    body = client.get("/api/v1/jobs", headers=auth_headers(seeker)).json()

    assert [job["title"] for job in body["items"]] == ["Newer", "Older"]
    assert body["items"][0]["company"]["name"] == "Acme"
    assert body["exhausted"] is False
    assert body["message"] is None


@pytest.mark.integration
def test_right_swipe_applies(client, db, seeker, jobs, auth_headers):
    """Test swipe right: 201, notification and a pending application."""
    headers = auth_headers(seeker)
    response = client.post(f"/api/v1/jobs/{jobs[1].id}/swipe", json={"direction": "right"}, headers=headers)

    assert response.status_code == 201
    body = response.json()
    assert body["recorded"] is True
    assert body["application_id"] is not None
    assert body["notification"]["title"] == "Application submitted!"

    applications = client.get("/api/v1/applications", headers=headers).json()
    assert applications["total"] == 1
    assert applications["items"][0]["status"] == "pending"
    assert applications["items"][0]["job"]["title"] == "Newer"


@pytest.mark.integration
def test_duplicate_swipe_is_conflict(client, seeker, jobs, auth_headers):
    headers = auth_headers(seeker)
    client.post(f"/api/v1/jobs/{jobs[0].id}/swipe", json={"direction": "left"}, headers=headers)
    response = client.post(f"/api/v1/jobs/{jobs[0].id}/swipe", json={"direction": "right"}, headers=headers)

    assert response.status_code == 409
    assert response.json()["detail"] == "You have already responded to this job."


@pytest.mark.integration
def test_deck_exhausted_message(client, seeker, jobs, auth_headers):
    """Test the terminal empty state after every job was swiped."""
    headers = auth_headers(seeker)
    for job in jobs:
        client.post(f"/api/v1/jobs/{job.id}/swipe", json={"direction": "left"}, headers=headers)

    body = client.get("/api/v1/jobs", headers=headers).json()
    assert body["items"] == []
    assert body["exhausted"] is True
    assert body["message"] == NO_MORE_JOBS_MESSAGE


@pytest.mark.integration
def test_short_drag_records_nothing(client, db, seeker, jobs, auth_headers):
    """Test that a drag under the threshold snaps back."""
    response = client.post(
        f"/api/v1/jobs/{jobs[0].id}/drag",
        json={"offset_x": 60, "offset_y": 10},
        headers=auth_headers(seeker),
    )

    assert response.status_code == 200
    assert response.json()["recorded"] is False
    assert db.query(Swipe).count() == 0


@pytest.mark.integration
def test_long_drag_swipes(client, db, seeker, jobs, auth_headers):
    response = client.post(
        f"/api/v1/jobs/{jobs[0].id}/drag",
        json={"offset_x": -180},
        headers=auth_headers(seeker),
    )

    assert response.json()["direction"] == "left"
    assert response.json()["recorded"] is True
    assert db.query(Application).count() == 0


@pytest.mark.integration
def test_swipe_unknown_job(client, seeker, auth_headers):
    response = client.post(
        "/api/v1/jobs/00000000-0000-0000-0000-000000000000/swipe",
        json={"direction": "right"},
        headers=auth_headers(seeker),
    )
    assert response.status_code == 404


@pytest.mark.integration
def test_swipe_invalid_direction(client, seeker, jobs, auth_headers):
    response = client.post(
        f"/api/v1/jobs/{jobs[0].id}/swipe",
        json={"direction": "up"},
        headers=auth_headers(seeker),
    )
    assert response.status_code == 422


@pytest.mark.integration
def test_applications_status_filter(client, seeker, jobs, auth_headers):
    """Test the status tabs on the applications page."""
    headers = auth_headers(seeker)
    client.post(f"/api/v1/jobs/{jobs[0].id}/swipe", json={"direction": "right"}, headers=headers)

    assert client.get("/api/v1/applications?status=pending", headers=headers).json()["total"] == 1
    assert client.get("/api/v1/applications?status=interview", headers=headers).json()["total"] == 0
    assert client.get("/api/v1/applications?status=bogus", headers=headers).status_code == 400


@pytest.mark.integration
def test_profile_views(client, seeker, jobs, auth_headers):
    """Test public/anonymous projection and recent applications on the profile page."""
    headers = auth_headers(seeker)
    client.put("/api/v1/profile", json={"full_name": "Sam Seeker", "anonymous_title": "Analyst"}, headers=headers)
    client.post(f"/api/v1/jobs/{jobs[0].id}/swipe", json={"direction": "right"}, headers=headers)

    public = client.get("/api/v1/profile?view=public", headers=headers).json()
    anonymous = client.get("/api/v1/profile?view=anonymous", headers=headers).json()

    assert public["view"]["name"] == "Sam Seeker"
    assert anonymous["view"]["name"].startswith("Anonymous")
    assert anonymous["view"]["title"] == "Analyst"
    assert len(public["applications"]) == 1


@pytest.mark.integration
def test_profile_update_cannot_change_anonymous_name(client, seeker, auth_headers):
    response = client.put("/api/v1/profile", json={"anonymous_name": "Anonymous1"}, headers=auth_headers(seeker))
    assert response.status_code == 422


@pytest.mark.integration
def test_profile_update_rejects_null_required_fields(client, seeker, auth_headers):
    """Test that required profile columns cannot be cleared with null."""
    headers = auth_headers(seeker)

    assert client.put("/api/v1/profile", json={"full_name": None}, headers=headers).status_code == 422
    assert client.put("/api/v1/profile", json={"is_actively_looking": None}, headers=headers).status_code == 422
    assert client.put("/api/v1/profile", json={"bio": None}, headers=headers).status_code == 200


@pytest.mark.integration
def test_swipe_database_error_reports_backend_message(client, monkeypatch, seeker, jobs, auth_headers):
    """Test that a failed swipe write surfaces the backend message as a notification."""
    def fail(self, swipe, application=None):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(SwipeRepository, "create_with_application", fail)
    response = client.post(
        f"/api/v1/jobs/{jobs[0].id}/swipe", json={"direction": "right"}, headers=auth_headers(seeker)
    )

    assert response.status_code == 500
    assert response.json()["title"] == "Error"
    assert response.json()["detail"].startswith("Failed to process your action.")
    assert "disk full" in response.json()["detail"]
