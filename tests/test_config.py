"""Settings — defaults, env overrides, development flag."""

from backstage_app.config import Settings


def test_defaults(monkeypatch):
    for var in ("PORT", "HOST", "ENVIRONMENT", "SERVICE_NAME"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.environment == "production"
    assert settings.cors_origins == ["*"]
    assert not settings.is_development


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_development_flag_case_insensitive(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", " Development ")
    settings = Settings(_env_file=None)
    assert settings.environment == "development"
    assert settings.is_development


def test_pod_metadata_from_environment(monkeypatch):
    monkeypatch.setenv("POD_NAMESPACE", "platform")
    monkeypatch.setenv("GIT_COMMIT", "abc1234")
    settings = Settings(_env_file=None)
    assert settings.pod_namespace == "platform"
    assert settings.git_commit == "abc1234"
