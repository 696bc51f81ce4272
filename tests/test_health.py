"""Tests for the health module."""

from health import (
    HealthStatus,
    check_api_modules,
    check_cms_connectivity,
    get_detailed_health,
    get_public_health,
)


class TestChecks:
    def test_cms_reachable(self, client):
        result = check_cms_connectivity(client)
        assert result.status == "pass"
        assert result.details == {"url": "https://cms.example.org"}

    def test_cms_down(self, client, fake_cms):
        fake_cms.ping_status = 503
        result = check_cms_connectivity(client)
        assert result.status == "fail"
        assert "503" in result.message

    def test_api_modules(self):
        result = check_api_modules()
        assert result.status == "pass"
        assert result.details["content_api"]["endpoints"] == 1


class TestEntryPoints:
    def test_public_healthy(self, client):
        result = get_public_health(client)
        assert result["status"] == HealthStatus.HEALTHY.value
        assert set(result) == {"status", "timestamp"}

    def test_public_unhealthy(self, client, fake_cms):
        fake_cms.ping_status = 500
        assert get_public_health(client)["status"] == HealthStatus.UNHEALTHY.value

    def test_detailed(self, client, fake_cms):
        result = get_detailed_health(client)
        assert result["status"] == "healthy"
        assert set(result["checks"]) == {"cms", "api_modules"}

        fake_cms.ping_status = 500
        assert get_detailed_health(client)["status"] == "unhealthy"
