import uuid

from sqlalchemy import text

from jobhunter.db.postgres import engine
from jobhunter.main import app
from jobhunter.services.profile_service import get_profile_repository


def test_profile_aggregate(client, applicant, applicant_headers):
    client.post(
        "/api/v1/user/profile/phone-numbers",
        json={"phone_number": "555-0100", "phone_type": "mobile", "is_primary": True},
        headers=applicant_headers,
    )
    client.post(
        "/api/v1/user/profile/education",
        json={"institution_name": "State University", "degree": "BSc", "start_date": "2016-09-01", "end_date": "2020-06-01"},
        headers=applicant_headers,
    )

    response = client.get("/api/v1/user/profile", headers=applicant_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == str(applicant.id)
    assert body["phone_numbers"][0]["phone_number"] == "555-0100"
    assert body["education"][0]["start_date"] == "2016-09-01"
    assert body["education"][0]["media"] == []
    assert body["projects"] == []


def test_profile_of_deleted_user_is_404(client, applicant, applicant_headers):
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM users WHERE id = :id"), {"id": str(applicant.id)})

    assert client.get("/api/v1/user/profile", headers=applicant_headers).status_code == 404


def test_child_crud_lifecycle(client, applicant_headers):
    created = client.post(
        "/api/v1/user/profile/projects",
        json={"project_name": "Portfolio", "is_ongoing": True},
        headers=applicant_headers,
    )
    assert created.status_code == 201
    project_id = created.json()["id"]

    updated = client.put(
        f"/api/v1/user/profile/projects/{project_id}",
        json={"project_name": "Portfolio v2", "project_url": "https://example.com"},
        headers=applicant_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["project_name"] == "Portfolio v2"
    assert updated.json()["is_ongoing"] is False

    deleted = client.delete(f"/api/v1/user/profile/projects/{project_id}", headers=applicant_headers)
    assert deleted.status_code == 204
    assert deleted.content == b""


def test_cannot_touch_another_users_rows(client, applicant_headers, other_applicant, headers_for):
    experience = client.post(
        "/api/v1/user/profile/experience",
        json={"company_name": "Initech", "position_title": "Dev", "employment_type": "part-time"},
        headers=applicant_headers,
    ).json()

    intruder = headers_for(other_applicant)
    url = f"/api/v1/user/profile/experience/{experience['id']}"
    assert client.delete(url, headers=intruder).status_code == 404
    assert client.put(
        url,
        json={"company_name": "Hacked", "position_title": "Dev", "employment_type": "part-time"},
        headers=intruder,
    ).status_code == 404

    profile = client.get("/api/v1/user/profile", headers=applicant_headers).json()
    assert profile["experience"][0]["company_name"] == "Initech"


def test_unknown_child_is_404(client, applicant_headers):
    response = client.delete(f"/api/v1/user/profile/certifications/{uuid.uuid4()}", headers=applicant_headers)
    assert response.status_code == 404


def test_invalid_enum_and_dates_are_400(client, applicant_headers):
    bad_phone = client.post(
        "/api/v1/user/profile/phone-numbers",
        json={"phone_number": "555-0100", "phone_type": "pager"},
        headers=applicant_headers,
    )
    bad_range = client.post(
        "/api/v1/user/profile/certifications",
        json={
            "certification_name": "CKA",
            "issuing_organization": "CNCF",
            "issue_date": "2023-01-01",
            "expiration_date": "2022-01-01",
        },
        headers=applicant_headers,
    )

    assert bad_phone.status_code == 400
    assert bad_range.status_code == 400


def test_skills_flow(client, applicant_headers, skills):
    search = client.get("/api/v1/skills", params={"q": "sql"})
    assert [s["name"] for s in search.json()] == ["PostgreSQL"]

    added = client.post(
        "/api/v1/user/profile/skills",
        json={"skill_ids": [skills["Python"], skills["PostgreSQL"]]},
        headers=applicant_headers,
    )
    assert added.status_code == 200
    assert [s["name"] for s in added.json()] == ["PostgreSQL", "Python"]

    removed = client.delete(f"/api/v1/user/profile/skills/{skills['Python']}", headers=applicant_headers)
    assert removed.status_code == 204

    profile = client.get("/api/v1/user/profile", headers=applicant_headers).json()
    assert [s["name"] for s in profile["skills"]] == ["PostgreSQL"]


def test_skill_search_without_query_is_400(client):
    response = client.get("/api/v1/skills")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_add_empty_skill_list_is_400(client, applicant_headers):
    response = client.post("/api/v1/user/profile/skills", json={"skill_ids": []}, headers=applicant_headers)
    assert response.status_code == 400


def test_add_unknown_skill_is_404(client, applicant_headers, skills):
    response = client.post("/api/v1/user/profile/skills", json={"skill_ids": [12345]}, headers=applicant_headers)
    assert response.status_code == 404


def test_list_own_skills(client, applicant_headers, skills):
    client.post("/api/v1/user/profile/skills", json={"skill_ids": [skills["Java"]]}, headers=applicant_headers)

    response = client.get("/api/v1/user/profile/skills", headers=applicant_headers)

    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["Java"]


def test_unexpected_failure_keeps_request_id(client, applicant_headers):
    class BrokenRepository:
        def get_user_profile(self, user_id):
            raise RuntimeError("boom")

    app.dependency_overrides[get_profile_repository] = BrokenRepository
    try:
        response = client.get(
            "/api/v1/user/profile",
            headers={**applicant_headers, "X-Request-ID": "req-500"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.headers["X-Request-ID"] == "req-500"
    body = response.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert body["request_id"] == "req-500"


def test_skill_search_wildcard_is_literal(client, skills):
    response = client.get("/api/v1/skills", params={"q": "_"})

    assert response.status_code == 200
    assert response.json() == []
