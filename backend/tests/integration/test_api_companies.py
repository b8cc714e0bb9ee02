"""Integration tests for the company directory and company dashboard."""

from datetime import datetime

import pytest

from jobmatch.services import company_service


COMPANY_DETAILS = {
    "name": "Acme Rockets",
    "website": "https://acme.example.com",
    "industry": "Aerospace",
    "size": "51-200",
    "location": "Berlin",
    "description": "We design and build small reusable rockets for research payloads.",
    "mission": "Make space access boring and cheap.",
    "culture": "Small teams, long-term ownership.",
    "logo_url": "https://acme.example.com/logo.png",
}


@pytest.fixture
def company_admin(make_user):
    return make_user("hr@acme.com")


@pytest.fixture
def company(make_company, company_admin):
    return make_company(name="Acme", industry="Manufacturing", admin_id=company_admin.id)


@pytest.mark.integration
def test_directory_search_keeps_all_industries(client, make_company):
    """Test that the industry list ignores the active search."""
    make_company(name="Bitwise", industry="Software", description="Developer tools")
    make_company(name="Acme", industry="Manufacturing", description="Anvils")

    body = client.get("/api/v1/companies?search=developer").json()

    assert [c["name"] for c in body["items"]] == ["Bitwise"]
    assert sorted(body["industries"]) == ["Manufacturing", "Software"]
    assert body["total"] == 1


@pytest.mark.integration
def test_directory_ordered_by_name(client, make_company):
    for name in ("Zeta", "Alpha", "Mid"):
        make_company(name=name)

    body = client.get("/api/v1/companies").json()
    assert [c["name"] for c in body["items"]] == ["Alpha", "Mid", "Zeta"]


@pytest.mark.integration
def test_company_detail_shows_active_jobs(client, company, make_job):
    make_job(company, "Open role", created_at=datetime(2024, 1, 1))
    make_job(company, "Closed role", is_active=False)

    body = client.get(f"/api/v1/companies/{company.id}").json()

    assert body["company"]["name"] == "Acme"
    assert [job["title"] for job in body["jobs"]] == ["Open role"]


@pytest.mark.integration
def test_company_detail_not_found(client):
    response = client.get("/api/v1/companies/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404
    assert response.json()["detail"] == "Company not found"


@pytest.mark.integration
def test_dashboard_requires_company_admin(client, make_user, auth_headers):
    """Test that other users are sent home."""
    response = client.get("/api/v1/company/dashboard", headers=auth_headers(make_user()))

    assert response.status_code == 303
    assert response.headers["location"] == "/"


@pytest.mark.integration
def test_update_company_invalidates_directory(client, monkeypatch, company, company_admin, auth_headers):
    """Test that saving company details drops the cached directory."""
    invalidated = []
    monkeypatch.setattr(company_service, "invalidate_companies", lambda: invalidated.append(True))

    response = client.put("/api/v1/company/dashboard", json=COMPANY_DETAILS, headers=auth_headers(company_admin))

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Rockets"
    assert response.json()["website"] == "https://acme.example.com"
    assert invalidated == [True]


@pytest.mark.integration
def test_update_company_urls_stored_as_entered(client, company, company_admin, auth_headers):
    details = dict(COMPANY_DETAILS, website="https://acme.com", logo_url="https://acme.com/logo.png")
    body = client.put("/api/v1/company/dashboard", json=details, headers=auth_headers(company_admin)).json()

    assert body["website"] == "https://acme.com"
    assert body["logo_url"] == "https://acme.com/logo.png"


@pytest.mark.integration
def test_update_company_with_blank_urls(client, company, company_admin, auth_headers):
    """Test that a company without website or logo can still save its details."""
    details = dict(COMPANY_DETAILS, website="", logo_url="")
    response = client.put("/api/v1/company/dashboard", json=details, headers=auth_headers(company_admin))

    assert response.status_code == 200
    assert response.json()["website"] == ""
    assert response.json()["logo_url"] == ""


@pytest.mark.integration
def test_update_company_without_urls(client, company, company_admin, auth_headers):
    """Test that omitted URL fields are optional and leave stored values alone."""
    headers = auth_headers(company_admin)
    client.put("/api/v1/company/dashboard", json=COMPANY_DETAILS, headers=headers)

    details = {k: v for k, v in COMPANY_DETAILS.items() if k not in ("website", "logo_url")}
    response = client.put("/api/v1/company/dashboard", json=dict(details, name="Acme Labs"), headers=headers)

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Labs"
    assert response.json()["website"] == COMPANY_DETAILS["website"]


@pytest.mark.integration
def test_update_company_validation(client, company, company_admin, auth_headers):
    details = dict(COMPANY_DETAILS, description="Too short", website="not a url")
    response = client.put("/api/v1/company/dashboard", json=details, headers=auth_headers(company_admin))
    assert response.status_code == 422


@pytest.mark.integration
def test_posted_job_reaches_the_deck(client, company, company_admin, make_user, auth_headers):
    """Test that a posted listing is active and shown to seekers."""
    response = client.post(
        "/api/v1/company/jobs",
        json={
            "title": "Rocket Engineer",
            "description": "Design engines for small launch vehicles.",
            "skills_required": ["CFD", "Python"],
            "application_deadline": "2030-01-31",
        },
        headers=auth_headers(company_admin),
    )
    assert response.status_code == 201
    assert response.json()["is_active"] is True

    deck = client.get("/api/v1/jobs", headers=auth_headers(make_user("seeker@example.com"))).json()
    assert [job["title"] for job in deck["items"]] == ["Rocket Engineer"]


@pytest.mark.integration
def test_deactivated_job_leaves_the_deck(client, company, company_admin, make_job, make_user, auth_headers):
    job = make_job(company)

    response = client.patch(
        f"/api/v1/company/jobs/{job.id}", json={"is_active": False}, headers=auth_headers(company_admin)
    )
    assert response.status_code == 200

    deck = client.get("/api/v1/jobs", headers=auth_headers(make_user("seeker@example.com"))).json()
    assert deck["exhausted"] is True


@pytest.mark.integration
def test_cannot_modify_other_company_job(client, company, make_company, make_job, make_user, auth_headers):
    other_admin = make_user("hr@other.com")
    make_company(name="Other", admin_id=other_admin.id)
    job = make_job(company)

    response = client.patch(
        f"/api/v1/company/jobs/{job.id}", json={"is_active": False}, headers=auth_headers(other_admin)
    )
    assert response.status_code == 404


@pytest.mark.integration
def test_review_applications(client, company, company_admin, make_job, make_user, auth_headers):
    """Test the company side of the application flow."""
    job = make_job(company)
    seeker = make_user("seeker@example.com", full_name="Sam Seeker")
    client.post(f"/api/v1/jobs/{job.id}/swipe", json={"direction": "right"}, headers=auth_headers(seeker))
    headers = auth_headers(company_admin)

    dashboard = client.get("/api/v1/company/dashboard", headers=headers).json()
    assert len(dashboard["applications"]) == 1
    application = dashboard["applications"][0]
    assert application["status"] == "pending"
    assert application["user"]["full_name"] == "Sam Seeker"

    url = f"/api/v1/company/applications/{application['id']}"
    moved = client.patch(url, json={"status": "interview", "notes": "Strong CFD background"}, headers=headers)
    assert moved.status_code == 200
    assert moved.json()["status"] == "interview"

    back = client.patch(url, json={"status": "pending"}, headers=headers)
    assert back.status_code == 400
    assert "Cannot change application status" in back.json()["detail"]

    seeker_view = client.get("/api/v1/applications?status=interview", headers=auth_headers(seeker)).json()
    assert seeker_view["total"] == 1
