import uuid

from sqlalchemy import text

from jobhunter.db.postgres import engine


def test_create_company(client, admin_headers):
    response = client.post(
        "/api/v1/admin/company",
        json={"name": "Initech LLC", "description": "Software for banks"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Company created successfully"
    assert body["company"]["name"] == "Initech LLC"


def test_create_company_short_name_is_400(client, admin_headers):
    response = client.post(
        "/api/v1/admin/company", json={"name": "Abc", "description": "Software for banks"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert "name" in response.json()["error"]["detail"]


def test_partial_update_keeps_other_fields(client, admin_headers, company):
    with engine.begin() as conn:
        conn.execute(
            text("UPDATE companies SET updated_at = '2000-01-01 00:00:00' WHERE id = :id"),
            {"id": str(company.id)},
        )

    response = client.patch(
        f"/api/v1/admin/company/{company.id}",
        json={"description": "Now makes rockets"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    updated = response.json()["company"]
    assert updated["name"] == "Acme Corporation"
    assert updated["description"] == "Now makes rockets"
    assert not updated["updated_at"].startswith("2000-01-01")


def test_update_requires_a_field(client, admin_headers, company):
    response = client.patch(f"/api/v1/admin/company/{company.id}", json={}, headers=admin_headers)
    assert response.status_code == 400


def test_update_unknown_company_is_404(client, admin_headers):
    response = client.patch(
        f"/api/v1/admin/company/{uuid.uuid4()}", json={"name": "Nobody Inc"}, headers=admin_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_delete_company(client, admin_headers, company):
    response = client.delete(f"/api/v1/admin/company/{company.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Company deleted successfully"
    assert client.delete(f"/api/v1/admin/company/{company.id}", headers=admin_headers).status_code == 404


def test_malformed_company_id_is_400(client, admin_headers):
    response = client.delete("/api/v1/admin/company/not-a-uuid", headers=admin_headers)
    assert response.status_code == 400


def test_create_admin(client, admin_headers):
    response = client.post(
        "/api/v1/admin/create-admin",
        json={"email": "ada@example.com", "password": "secret123", "full_name": "Ada Admin", "admin_level": 2},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "admin"


def test_create_admin_level_out_of_range(client, admin_headers):
    response = client.post(
        "/api/v1/admin/create-admin",
        json={"email": "ada@example.com", "password": "secret123", "full_name": "Ada Admin", "admin_level": 6},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_create_recruiter_for_company(client, admin_headers, company):
    response = client.post(
        "/api/v1/admin/create-recruiter",
        json={
            "email": "rita@example.com",
            "password": "secret123",
            "full_name": "Rita Recruiter",
            "company_id": str(company.id),
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["message"] == "Recruiter created successfully"
    assert response.json()["user"]["role"] == "recruiter"


def test_create_recruiter_unknown_company_is_404(client, admin_headers):
    payload = {
        "email": "rita@example.com",
        "password": "secret123",
        "full_name": "Rita Recruiter",
        "company_id": str(uuid.uuid4()),
    }
    response = client.post("/api/v1/admin/create-recruiter", json=payload, headers=admin_headers)

    assert response.status_code == 404
    login = client.post("/api/v1/user/login", json={"email": payload["email"], "password": payload["password"]})
    assert login.status_code == 401


def test_created_recruiter_cannot_use_admin_routes(client, admin_headers):
    client.post(
        "/api/v1/admin/create-recruiter",
        json={"email": "rob@example.com", "password": "secret123", "full_name": "Rob Recruiter"},
        headers=admin_headers,
    )
    token = client.post(
        "/api/v1/user/login", json={"email": "rob@example.com", "password": "secret123"}
    ).json()["token"]

    response = client.post(
        "/api/v1/admin/company",
        json={"name": "Recruiter Co", "description": "Should not exist"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 403
