import importlib

import pytest

import phyphox_client.config as config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch, reload_config):
    for var in ("PHYPHOX_ADDRESS", "PHYPHOX_TIMEOUT_S", "PHYPHOX_POLL_INTERVAL_S", "PHYPHOX_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reload_config()
    assert config.PHYPHOX_ADDRESS == "127.0.0.1:8080"
    assert config.PHYPHOX_TIMEOUT_S == 10.0
    assert config.PHYPHOX_POLL_INTERVAL_S == 1.0
    assert config.PHYPHOX_LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("PHYPHOX_ADDRESS", "192.168.0.7:8080")
    monkeypatch.setenv("PHYPHOX_TIMEOUT_S", "2.5")
    monkeypatch.setenv("PHYPHOX_LOG_LEVEL", "debug")
    reload_config()
    assert config.PHYPHOX_ADDRESS == "192.168.0.7:8080"
    assert config.PHYPHOX_TIMEOUT_S == 2.5
    assert config.PHYPHOX_LOG_LEVEL == "DEBUG"
