"""
HTTP tests for the user endpoints.
"""


def create_user(client, name="Alice", email="alice@example.com"):
    return client.post("/api/users", json={"name": name, "email": email})


class TestUsersApi:

    def test_create_returns_201_with_location(self, client):
        response = create_user(client)

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Alice"
        assert body["createdAt"] is not None
        assert response.headers["location"].endswith(f"/api/users/{body['id']}")

    def test_duplicate_email_conflict(self, client):
        create_user(client, email="a@x.io")

        response = create_user(client, name="Other", email="A@x.io")

        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["error"] == "Conflict"
        assert "already exists" in body["message"]

    def test_invalid_email_is_400_with_field_message(self, client):
        response = create_user(client, email="nope")

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation errors"
        assert "email" in body["messages"]

    def test_email_case_preserved(self, client):
        response = create_user(client, email="Alice@Example.COM")

        assert response.status_code == 201
        user_id = response.json()["id"]
        assert response.json()["email"] == "Alice@Example.COM"
        assert client.get(f"/api/users/{user_id}").json()["email"] == "Alice@Example.COM"

    def test_get_missing_user_is_404(self, client):
        response = client.get("/api/users/999")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found: 999"

    def test_list_paginates(self, client):
        for i in range(3):
            create_user(client, name=f"U{i}", email=f"u{i}@example.com")

        response = client.get("/api/users", params={"page": 1, "size": 2})

        assert response.status_code == 200
        body = response.json()
        assert [u["name"] for u in body["content"]] == ["U0"]
        assert body["page"] == 1
        assert body["size"] == 2
        assert body["totalElements"] == 3
        assert body["totalPages"] == 2

    def test_negative_page_rejected(self, client):
        response = client.get("/api/users", params={"page": -1})

        assert response.status_code == 400
        assert "page" in response.json()["messages"]

    def test_large_page_size_accepted(self, client):
        create_user(client)

        response = client.get("/api/users", params={"size": 101})

        assert response.status_code == 200
        assert response.json()["size"] == 101
        assert len(response.json()["content"]) == 1

    def test_update_and_delete(self, client):
        user_id = create_user(client).json()["id"]

        updated = client.put(f"/api/users/{user_id}", json={"name": "Alicia", "email": "alicia@example.com"})
        assert updated.status_code == 200
        assert updated.json()["email"] == "alicia@example.com"

        assert client.delete(f"/api/users/{user_id}").status_code == 204
        assert client.get(f"/api/users/{user_id}").status_code == 404

    def test_delete_owner_with_projects_conflict(self, client):
        user_id = create_user(client).json()["id"]
        client.post("/api/projects", json={"name": "Apollo", "ownerId": user_id})

        response = client.delete(f"/api/users/{user_id}")

        assert response.status_code == 409
