import pytest

from build_client import BuildClient, Endpoints, Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("BUILD_API_KEY", "env-key")
    monkeypatch.setenv("BUILD_API_URL", "https://build.example.com/v5/")
    monkeypatch.setenv("BUILD_REQUEST_TIMEOUT", "7.5")

    config = Settings()

    assert config.BUILD_API_KEY == "env-key"
    assert config.BUILD_REQUEST_TIMEOUT == 7.5
    assert Endpoints.from_settings(config).api_url == "https://build.example.com/v5/"


def test_endpoint_urls():
    endpoints = Endpoints()

    assert endpoints.model_url() == "https://build.electricimp.com/v4/models"
    assert endpoints.model_url("m1", endpoints.revisions, 3) == "https://build.electricimp.com/v4/models/m1/revisions/3"
    assert endpoints.device_url("d1", endpoints.restart) == "https://build.electricimp.com/v4/devices/d1/restart"
    assert endpoints.resolve_poll_url("/v4/devices/d1/logs/9") == "https://build.electricimp.com/v4/devices/d1/logs/9"


def test_client_from_settings():
    config = Settings(BUILD_API_KEY="k", BUILD_REQUEST_TIMEOUT=4.0)

    with BuildClient.from_settings(config) as client:
        assert client.transport.timeout == 4.0
        assert client.transport.session.headers["Authorization"] == "Basic aw=="


def test_endpoint_rejects_empty_segment():
    endpoints = Endpoints()

    with pytest.raises(ValueError):
        endpoints.model_url("")
