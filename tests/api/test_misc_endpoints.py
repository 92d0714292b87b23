"""
Tests for the greeting and load-generation endpoints.
"""
from catalog_api.app.core.config import settings


class TestGreetingEndpoints:

    def test_hello(self, client):
        response = client.get("/hello")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Hello from FastAPI"

    def test_custom_hello(self, client):
        response = client.get("/hello/hello/Lucía")

        assert response.status_code == 200
        assert response.text == f"{settings.greeting} Lucía, Hello from FastAPI"


class TestPerformanceEndpoints:

    def test_persons_with_explicit_count(self, client):
        response = client.get("/api/performance/persons", params={"count": 3})

        assert response.status_code == 200
        persons = response.json()
        assert len(persons) == 3
        assert {"name", "lastName", "age", "height", "weight", "birthDate"} <= set(persons[0])

    def test_persons_default_count(self, client):
        response = client.get("/api/performance/persons")

        assert len(response.json()) == 25

    def test_persons_non_positive_count_uses_default(self, client):
        response = client.get("/api/performance/persons", params={"count": 0})

        assert len(response.json()) == 25

    def test_persons_count_is_capped(self, client):
        response = client.get("/api/performance/persons", params={"count": 5000})

        assert len(response.json()) == 100

    def test_large_object(self, client):
        response = client.get("/api/performance/large-object")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"id", "timestamp", "data"}
        assert len(body["data"]) == 50
        assert isinstance(body["id"], int)
