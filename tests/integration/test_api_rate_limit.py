"""
Testes de integração do rate limiting (100 requisições / 15 minutos por cliente).
"""


def exhaust_quota(client, video_id, headers=None, count=100):
    for i in range(count):
        response = client.get(f"/api/captions/{video_id}", headers=headers)
        assert response.status_code == 200, f"request {i + 1} was rejected"


class TestRateLimit:
    """Quota por chave de cliente sob o prefixo /api."""

    def test_101st_request_is_rejected(self, client, video_id):
        exhaust_quota(client, video_id)

        response = client.get(f"/api/captions/{video_id}")

        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "TooManyRequests"
        assert body["message"] == "Too many requests, please try again later."
        assert isinstance(body["retryAfter"], int)
        assert 0 < body["retryAfter"] <= 15 * 60
        assert response.headers["Retry-After"] == str(body["retryAfter"])

    def test_health_is_never_limited(self, client, video_id):
        for _ in range(50):
            assert client.get("/api/health").status_code == 200

        exhaust_quota(client, video_id)
        assert client.get(f"/api/captions/{video_id}").status_code == 429

        for _ in range(5):
            assert client.get("/api/health").status_code == 200

    def test_quota_is_shared_across_api_routes(self, client, video_id):
        exhaust_quota(client, video_id, count=99)

        assert client.get("/api/captions").status_code == 400
        assert client.get(f"/api/captions/{video_id}").status_code == 429

    def test_clients_are_bucketed_by_forwarded_for(self, client, video_id):
        exhaust_quota(client, video_id, headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})

        limited = client.get(
            f"/api/captions/{video_id}",
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.2"}
        )
        other_client = client.get(
            f"/api/captions/{video_id}",
            headers={"X-Forwarded-For": "198.51.100.1"}
        )

        assert limited.status_code == 429
        assert other_client.status_code == 200

    def test_preflight_and_root_are_not_counted(self, client, video_id):
        exhaust_quota(client, video_id)

        preflight = client.options(
            f"/api/captions/{video_id}",
            headers={"Origin": "chrome-extension://abcdef", "Access-Control-Request-Method": "GET"}
        )

        assert preflight.status_code == 200
        assert client.get("/").status_code == 200

    def test_throttled_response_has_cors_headers(self, client, video_id):
        exhaust_quota(client, video_id)

        response = client.get(f"/api/captions/{video_id}", headers={"Origin": "https://www.youtube.com"})

        assert response.status_code == 429
        assert response.headers["access-control-allow-origin"] == "*"

    def test_unrouted_api_paths_count_toward_quota(self, client, video_id):
        for _ in range(100):
            assert client.get("/api/nope").status_code == 404

        response = client.get(f"/api/captions/{video_id}")

        assert response.status_code == 429
        assert response.json()["retryAfter"] > 0

    def test_health_with_trailing_slash_is_not_counted(self, client, video_id):
        for _ in range(10):
            client.get("/api/health/")

        exhaust_quota(client, video_id)
