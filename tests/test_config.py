import pytest

from powtarget.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "VERBOSE",
        "TARGET_HEX_PREFIX",
        "DASHBOARD_HOST",
        "DASHBOARD_PORT",
        "ACCESS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings()
    assert s.ip == "0.0.0.0"
    assert s.dashboard_port == 8080
    assert s.log_level == "INFO"
    assert s.hex_prefix is False
    assert s.access_log_level is None
    assert s.api_url == "http://0.0.0.0:8080"


def test_log_level_from_env(clean_env):
    clean_env.setenv("LOG_LEVEL", "warning")
    clean_env.setenv("VERBOSE", "true")
    assert Settings().log_level == "WARNING"


def test_verbose_fallback(clean_env):
    clean_env.setenv("VERBOSE", "true")
    s = Settings()
    assert s.verbose is True
    assert s.log_level == "DEBUG"


def test_hex_prefix_and_dashboard(clean_env):
    clean_env.setenv("TARGET_HEX_PREFIX", "TRUE")
    clean_env.setenv("DASHBOARD_HOST", "127.0.0.1")
    clean_env.setenv("DASHBOARD_PORT", "9090")
    s = Settings()
    assert s.hex_prefix is True
    assert s.api_url == "http://127.0.0.1:9090"


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_invalid_port_falls_back(clean_env, port):
    clean_env.setenv("DASHBOARD_PORT", port)
    assert Settings().dashboard_port == 8080


def test_access_log_level_from_env(clean_env):
    clean_env.setenv("ACCESS_LOG_LEVEL", "info")
    assert Settings().access_log_level == "INFO"
