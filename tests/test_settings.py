"""Tests for YAML settings loading."""

from pathlib import Path

import pytest

from proto_store.settings import LoggingSettings, Settings, StorageSettings, get_settings


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_yaml(tmp_path: Path):
    path = _write(
        tmp_path,
        """
storage:
  bucket: " records "
  address: localhost:9000
  secure: true
  region: eu-west-1
  access_key: inline-key
logging:
  level: debug
  json_format: true
""",
    )
    settings = Settings.load(path)
    assert settings.storage.bucket == "records"
    assert settings.storage.secure is True
    assert settings.storage.resolved_access_key == "inline-key"
    assert settings.logging.level == "DEBUG"
    assert settings.logging.json_format is True


def test_logging_defaults(tmp_path: Path):
    settings = Settings.load(_write(tmp_path, "storage:\n  connection_url: http://k:s@host/b\n"))
    assert settings.logging == LoggingSettings()
    assert settings.storage.connection_url == "http://k:s@host/b"


def test_credentials_fall_back_to_named_environment_variables(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STORE_KEY", "k")
    monkeypatch.setenv("STORE_SECRET", "s")
    monkeypatch.setenv("STORE_TOKEN", "t")
    storage = StorageSettings(
        access_key_env="STORE_KEY",
        access_secret_env="STORE_SECRET",
        session_token_env="STORE_TOKEN",
    )
    assert (storage.resolved_access_key, storage.resolved_access_secret, storage.resolved_session_token) == (
        "k",
        "s",
        "t",
    )


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        Settings.load(tmp_path / "absent.yaml")


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = _write(tmp_path, "storage:\n  bucket: from-env\n")
    monkeypatch.setenv("PROTO_STORE_CONFIG", str(path))
    assert Settings.load().storage.bucket == "from-env"


def test_invalid_config_raises_value_error(tmp_path: Path):
    with pytest.raises(ValueError):
        Settings.load(_write(tmp_path, "logging:\n  level: INFO\n"))


def test_get_settings_is_cached(tmp_path: Path):
    path = str(_write(tmp_path, "storage:\n  bucket: cached\n"))
    get_settings.cache_clear()
    try:
        assert get_settings(path) is get_settings(path)
    finally:
        get_settings.cache_clear()


def test_default_config_file_loads():
    settings = Settings.load(Path(__file__).parent.parent / "config" / "default.yaml")
    assert settings.storage.bucket == "records"
