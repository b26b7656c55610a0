from fastapi.testclient import TestClient

from fakes import BrokenCounter, BrokenRegistry
from shortlink_app.dependencies import get_counter, get_link_registry


def create_link(client: TestClient, code: str, url: str) -> int:
    response = client.post("/api/v1/links", json={"code": code, "url": url})
    assert response.status_code == 201
    return response.json()["shortLinkId"]


class TestLinks:
    """Test link registration endpoints"""

    def test_create_link(self, client: TestClient):
        response = client.post("/api/v1/links", json={"code": "abc", "url": "https://example.com"})

        assert response.status_code == 201
        assert isinstance(response.json()["shortLinkId"], int)

    def test_duplicate_code(self, client: TestClient):
        """Creating the same code twice yields 201 then 400"""
        first = client.post("/api/v1/links", json={"code": "abc", "url": "https://example.com"})
        second = client.post("/api/v1/links", json={"code": "abc", "url": "https://other.example.com"})

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"message": "Duplicated code"}

    def test_invalid_url(self, client: TestClient):
        response = client.post("/api/v1/links", json={"code": "abc", "url": "not-a-valid-url"})
        assert response.status_code == 422  # Validation error

    def test_code_too_short(self, client: TestClient):
        response = client.post("/api/v1/links", json={"code": "ab", "url": "https://example.com"})
        assert response.status_code == 422

    def test_list_links_newest_first(self, client: TestClient):
        for code in ("one", "two", "three"):
            create_link(client, code, f"https://example.com/{code}")

        response = client.get("/api/v1/links")

        assert response.status_code == 200
        data = response.json()
        assert [link["code"] for link in data] == ["three", "two", "one"]
        assert data[0]["original_url"] == "https://example.com/three"
        assert "created_at" in data[0]

    def test_registry_failure_is_500(self, app, client: TestClient):
        app.dependency_overrides[get_link_registry] = lambda: BrokenRegistry()

        response = client.get("/api/v1/links")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

    def test_create_registry_failure_is_500(self, app, client: TestClient):
        app.dependency_overrides[get_link_registry] = lambda: BrokenRegistry()

        response = client.post("/api/v1/links", json={"code": "abc", "url": "https://example.com"})

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


class TestRedirect:
    """Test code resolution over HTTP"""

    def test_redirect_is_permanent_and_exact(self, client: TestClient):
        create_link(client, "abc", "https://example.com")

        response = client.get("/abc", follow_redirects=False)

        assert response.status_code == 301
        assert response.headers["location"] == "https://example.com"

    def test_unknown_code(self, client: TestClient):
        response = client.get("/nope", follow_redirects=False)

        assert response.status_code == 404
        assert response.json() == {"message": "Not found"}
        assert client.get("/api/v1/metrics").json() == []

    def test_code_too_short(self, client: TestClient):
        response = client.get("/ab", follow_redirects=False)
        assert response.status_code == 422

    def test_counter_outage_does_not_break_redirect(self, app, client: TestClient):
        create_link(client, "abc", "https://example.com")
        app.state.click_tracker.counter = BrokenCounter()

        response = client.get("/abc", follow_redirects=False)

        assert response.status_code == 301
        assert response.headers["location"] == "https://example.com"

    def test_registry_failure_is_500_not_404(self, app, client: TestClient):
        app.dependency_overrides[get_link_registry] = lambda: BrokenRegistry()

        response = client.get("/abc", follow_redirects=False)

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


class TestMetrics:
    """Test the click leaderboard"""

    def test_round_trip(self, client: TestClient):
        """Create, click three times, see the count on the leaderboard"""
        link_id = create_link(client, "abc", "https://example.com")
        other_id = create_link(client, "xyz", "https://example.org")

        response = client.get("/abc", follow_redirects=False)
        assert response.status_code == 301
        assert response.headers["location"] == "https://example.com"
        assert client.get("/api/v1/metrics").json() == [{"shortLinkId": link_id, "clicks": 1}]

        client.get("/abc", follow_redirects=False)
        client.get("/abc", follow_redirects=False)
        client.get("/xyz", follow_redirects=False)

        metrics = client.get("/api/v1/metrics")
        assert metrics.status_code == 200
        assert metrics.json() == [
            {"shortLinkId": link_id, "clicks": 3},
            {"shortLinkId": other_id, "clicks": 1},
        ]

    def test_limit_parameter(self, client: TestClient):
        for code in ("aaa", "bbb", "ccc"):
            create_link(client, code, "https://example.com")
            client.get(f"/{code}", follow_redirects=False)

        response = client.get("/api/v1/metrics", params={"limit": 2})

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_limit_above_maximum_is_clamped(self, app, client: TestClient):
        app.state.settings.leaderboard_max_limit = 2
        for code in ("aaa", "bbb", "ccc"):
            create_link(client, code, "https://example.com")
            client.get(f"/{code}", follow_redirects=False)

        response = client.get("/api/v1/metrics", params={"limit": 100})

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_invalid_limit(self, client: TestClient):
        response = client.get("/api/v1/metrics", params={"limit": 0})
        assert response.status_code == 422

    def test_repeated_reads_are_identical(self, client: TestClient):
        for code in ("aaa", "bbb"):
            create_link(client, code, "https://example.com")
            client.get(f"/{code}", follow_redirects=False)

        assert client.get("/api/v1/metrics").json() == client.get("/api/v1/metrics").json()

    def test_store_failure_is_500(self, app, client: TestClient):
        app.dependency_overrides[get_counter] = lambda: BrokenCounter()

        response = client.get("/api/v1/metrics")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


class TestHealth:

    def test_health(self, client: TestClient):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        assert data["counter_backend"] == "InMemoryClickCounter"

    def test_openapi_documents_error_bodies(self, client: TestClient):
        schema = client.get("/openapi.json").json()

        redirect_404 = schema["paths"]["/{code}"]["get"]["responses"]["404"]
        create_400 = schema["paths"]["/api/v1/links"]["post"]["responses"]["400"]
        metrics_500 = schema["paths"]["/api/v1/metrics"]["get"]["responses"]["500"]

        for response in (redirect_404, create_400, metrics_500):
            assert response["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
