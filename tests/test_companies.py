"""
Tests for the /companies endpoints.
"""


COMPANIES_URL = "/api/v1/companies/"

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "logoUrl": "http://new.img",
    "description": "DescNew",
    "numEmployees": 10,
}


class TestCreateCompany:
    """Test POST /companies"""

    def test_create_as_admin(self, client, seed, admin_headers):
        response = client.post(COMPANIES_URL, json=NEW_COMPANY, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": NEW_COMPANY}

    def test_create_as_non_admin(self, client, seed, u1_headers):
        response = client.post(COMPANIES_URL, json=NEW_COMPANY, headers=u1_headers)
        assert response.status_code == 403

    def test_create_missing_fields(self, client, seed, admin_headers):
        response = client.post(COMPANIES_URL, json={"handle": "new"}, headers=admin_headers)
        assert response.status_code == 422

    def test_create_duplicate(self, client, seed, admin_headers):
        response = client.post(
            COMPANIES_URL,
            json={**NEW_COMPANY, "handle": "c1"},
            headers=admin_headers,
        )
        assert response.status_code == 400


class TestListCompanies:
    """Test GET /companies"""

    def test_list_all(self, client, seed):
        response = client.get(COMPANIES_URL)

        assert response.status_code == 200
        assert response.json()["companies"][0] == {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        }
        assert len(response.json()["companies"]) == 3

    def test_filters(self, client, seed):
        response = client.get(
            COMPANIES_URL,
            params={"nameLike": "c", "minEmployees": 2, "maxEmployees": 2},
        )
        assert [c["handle"] for c in response.json()["companies"]] == ["c2"]

    def test_min_greater_than_max(self, client, seed):
        response = client.get(COMPANIES_URL, params={"minEmployees": 3, "maxEmployees": 1})

        assert response.status_code == 400
        assert "maxEmployees" in response.json()["detail"]


class TestGetCompany:
    """Test GET /companies/{handle}"""

    def test_get_with_jobs(self, client, seed):
        response = client.get(f"{COMPANIES_URL}c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["handle"] == "c1"
        assert company["jobs"] == [
            {"id": seed["prompt engineer"], "title": "prompt engineer", "salary": 120000, "equity": "0.55"},
            {"id": seed["data analyst"], "title": "data analyst", "salary": 90000, "equity": "0"},
        ]

    def test_get_missing(self, client, seed):
        response = client.get(f"{COMPANIES_URL}nope")
        assert response.status_code == 404


class TestUpdateCompany:
    """Test PATCH /companies/{handle}"""

    def test_update_as_admin(self, client, seed, admin_headers):
        response = client.patch(
            f"{COMPANIES_URL}c1",
            json={"name": "C1-new", "numEmployees": 5},
            headers=admin_headers,
        )

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["name"] == "C1-new"
        assert company["numEmployees"] == 5

    def test_update_handle_rejected(self, client, seed, admin_headers):
        response = client.patch(f"{COMPANIES_URL}c1", json={"handle": "c9"}, headers=admin_headers)
        assert response.status_code == 422

    def test_update_anonymous(self, client, seed):
        response = client.patch(f"{COMPANIES_URL}c1", json={"name": "x"})
        assert response.status_code == 401

    def test_update_missing(self, client, seed, admin_headers):
        response = client.patch(f"{COMPANIES_URL}nope", json={"name": "x"}, headers=admin_headers)
        assert response.status_code == 404


class TestDeleteCompany:
    """Test DELETE /companies/{handle}"""

    def test_delete_removes_jobs(self, client, seed, admin_headers):
        response = client.delete(f"{COMPANIES_URL}c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}
        assert client.get(f"/api/v1/jobs/{seed['prompt engineer']}").status_code == 404

    def test_delete_as_non_admin(self, client, seed, u1_headers):
        response = client.delete(f"{COMPANIES_URL}c1", headers=u1_headers)
        assert response.status_code == 403
