"""
HTTP tests for the FastAPI application without running its lifespan
"""

import pytest
from fastapi.testclient import TestClient

from launchgate.api.app import app


@pytest.fixture
def client(fetcher, user_store, email_adapter):
    app.state.fetcher = fetcher
    app.state.user_store = user_store
    app.state.auth_adapter = email_adapter
    return TestClient(app)


class TestApp:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_graphql_anonymous(self, client):
        response = client.post("/graphql", json={"query": "{ me { id } launch(id: \"1\") { id } }"})

        assert response.status_code == 200
        assert response.json()["data"] == {"me": None, "launch": {"id": "1"}}

    def test_graphql_with_credential(self, client):
        response = client.post(
            "/graphql",
            json={"query": "{ me { email } }"},
            headers={"Authorization": "YXN0cm9uYXV0QGV4YW1wbGUuY29t"},
        )

        assert response.json()["data"] == {"me": {"email": "astronaut@example.com"}}

    def test_graphql_with_bad_credential_is_anonymous(self, client):
        response = client.post(
            "/graphql", json={"query": "{ me { email } }"}, headers={"Authorization": "???"}
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"me": None}

    def test_request_id_header(self, client):
        generated = client.get("/health")
        echoed = client.get("/health", headers={"X-Request-ID": "trace-42"})

        assert len(generated.headers["X-Request-ID"]) == 16
        assert echoed.headers["X-Request-ID"] == "trace-42"
