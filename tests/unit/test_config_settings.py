import pytest

from fusionauth.config import settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove FusionAuth variables and point /run/secrets at an empty directory."""
    for var in (
        "FUSIONAUTH_URL",
        "FUSIONAUTH_API_KEY",
        "FUSIONAUTH_TENANT_ID",
        "FUSIONAUTH_CONNECT_TIMEOUT",
        "FUSIONAUTH_READ_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)

    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return tmp_path


def test_defaults(clean_env):
    cfg = settings.load_settings()
    assert cfg.base_url == "http://localhost:9011"
    assert cfg.api_key is None
    assert cfg.tenant_id is None
    assert cfg.connect_timeout == 1000
    assert cfg.read_timeout == 2000
    assert not cfg.has_api_key


def test_missing_api_key_is_logged(clean_env, caplog):
    with caplog.at_level("WARNING", logger="fusionauth.config.settings"):
        settings.load_settings()
    assert "No FusionAuth API key configured" in caplog.text


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("FUSIONAUTH_URL", "https://auth.example.com")
    monkeypatch.setenv("FUSIONAUTH_API_KEY", "env-key")
    monkeypatch.setenv("FUSIONAUTH_TENANT_ID", "tenant-1")
    monkeypatch.setenv("FUSIONAUTH_CONNECT_TIMEOUT", "250")
    monkeypatch.setenv("FUSIONAUTH_READ_TIMEOUT", "5000")

    cfg = settings.load_settings()
    assert cfg.base_url == "https://auth.example.com"
    assert cfg.api_key == "env-key"
    assert cfg.tenant_id == "tenant-1"
    assert cfg.connect_timeout == 250
    assert cfg.read_timeout == 5000


def test_api_key_prefers_run_secrets(clean_env, monkeypatch):
    (clean_env / "fusionauth_api_key").write_text("file-key\n")
    monkeypatch.setenv("FUSIONAUTH_API_KEY", "env-key")
    assert settings.load_settings().api_key == "file-key"


def test_empty_secret_file_falls_back_to_env(clean_env, monkeypatch):
    (clean_env / "fusionauth_api_key").write_text("  ")
    monkeypatch.setenv("FUSIONAUTH_API_KEY", "env-key")
    assert settings.load_settings().api_key == "env-key"


def test_blank_tenant_is_none(clean_env, monkeypatch):
    monkeypatch.setenv("FUSIONAUTH_TENANT_ID", "   ")
    assert settings.load_settings().tenant_id is None


@pytest.mark.parametrize("value", ["abc", "1.5", "0", "-10"])
def test_invalid_timeout_raises(clean_env, monkeypatch, value):
    monkeypatch.setenv("FUSIONAUTH_READ_TIMEOUT", value)
    with pytest.raises(RuntimeError, match="FUSIONAUTH_READ_TIMEOUT"):
        settings.load_settings()
