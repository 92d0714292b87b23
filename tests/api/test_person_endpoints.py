"""
Tests for person API endpoints.
"""


def _payload(**overrides):
    payload = {
        "name": "María",
        "lastName": "García",
        "age": 34,
        "height": 1.68,
        "weight": 62.5,
        "birthDate": "1990-02-14",
    }
    payload.update(overrides)
    return payload


class TestPersonEndpoints:
    """Test cases for /api/persons."""

    base_url = "/api/persons"

    def test_list_starts_empty(self, client):
        response = client.get(self.base_url)

        assert response.status_code == 200
        assert response.json() == []

    def test_create_returns_camel_case_body_with_id(self, client):
        response = client.post(self.base_url, json=_payload(id=55))

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["lastName"] == "García"
        assert body["birthDate"] == "1990-02-14"

    def test_get_by_id(self, client):
        client.post(self.base_url, json=_payload())

        response = client.get(f"{self.base_url}/1")

        assert response.status_code == 200
        assert response.json()["name"] == "María"

    def test_get_missing_returns_404(self, client):
        response = client.get(f"{self.base_url}/99")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Not Found"
        assert "99" in body["message"]

    def test_validation_errors_are_reported_per_field(self, client):
        response = client.post(self.base_url, json=_payload(name="A", age=200))

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation Error"
        assert set(body["violations"]) == {"name", "age"}

    def test_future_birth_date_is_rejected(self, client):
        response = client.post(self.base_url, json=_payload(birthDate="2999-01-01"))

        assert response.status_code == 400
        assert "birthDate" in response.json()["violations"]

    def test_update_replaces_person(self, client):
        client.post(self.base_url, json=_payload())

        response = client.put(f"{self.base_url}/1", json=_payload(name="Elena", age=35))

        assert response.status_code == 200
        assert response.json()["id"] == 1
        assert client.get(f"{self.base_url}/1").json()["name"] == "Elena"

    def test_update_missing_returns_404(self, client):
        response = client.put(f"{self.base_url}/3", json=_payload())

        assert response.status_code == 404

    def test_delete(self, client):
        client.post(self.base_url, json=_payload())

        response = client.delete(f"{self.base_url}/1")

        assert response.status_code == 204
        assert client.get(f"{self.base_url}/1").status_code == 404
        assert client.delete(f"{self.base_url}/1").status_code == 404
