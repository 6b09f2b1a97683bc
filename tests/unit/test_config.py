"""Settings defaults and environment overrides."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from batteries_api.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("PORT", "KUBECONFIG", "BATTERIES_API_PORT", "BATTERIES_API_KUBECONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = Settings()
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.kubeconfig is None
    assert settings.push_interval_seconds == 5.0
    assert settings.service_sample_limit == 5


def test_plain_port_and_kubeconfig_env(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("KUBECONFIG", "/etc/kube/config")
    settings = Settings()
    assert settings.port == 9000
    assert settings.kubeconfig == Path("/etc/kube/config")


def test_prefixed_env_wins(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("BATTERIES_API_PORT", "9100")
    monkeypatch.setenv("BATTERIES_API_PUSH_INTERVAL_SECONDS", "1.5")
    settings = Settings()
    assert settings.port == 9100
    assert settings.push_interval_seconds == 1.5


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("BATTERIES_API_SERVICE_SAMPLE_LIMIT=2\n", encoding="utf-8")
    assert Settings().service_sample_limit == 2


def test_rejects_invalid_interval(monkeypatch):
    monkeypatch.setenv("BATTERIES_API_PUSH_INTERVAL_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_service_sample_limit_capped_at_five(monkeypatch):
    monkeypatch.setenv("BATTERIES_API_SERVICE_SAMPLE_LIMIT", "5")
    assert Settings().service_sample_limit == 5
    monkeypatch.setenv("BATTERIES_API_SERVICE_SAMPLE_LIMIT", "6")
    with pytest.raises(ValidationError):
        Settings()
