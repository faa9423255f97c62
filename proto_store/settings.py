from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, validator

# Load .env file from the working directory
_env_path = Path.cwd() / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


class StorageSettings(BaseModel):
    bucket: str = ""
    address: str = ""
    secure: bool = False
    region: str | None = None
    # Takes precedence over the explicit fields when set
    connection_url: str | None = None

    access_key: str | None = None
    access_secret: str | None = None
    session_token: str | None = None
    access_key_env: str = "AWS_ACCESS_KEY_ID"
    access_secret_env: str = "AWS_SECRET_ACCESS_KEY"
    session_token_env: str = "AWS_SESSION_TOKEN"

    @validator("bucket", "address", pre=True)
    def _strip(cls, value: Any) -> str:  # noqa: D401
        if value is None:
            return ""
        return str(value).strip()

    @property
    def resolved_access_key(self) -> str:
        return self.access_key or os.getenv(self.access_key_env, "")

    @property
    def resolved_access_secret(self) -> str:
        return self.access_secret or os.getenv(self.access_secret_env, "")

    @property
    def resolved_session_token(self) -> str:
        return self.session_token or os.getenv(self.session_token_env, "")


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    file: Path | None = None

    @validator("level", pre=True)
    def _upper_level(cls, value: Any) -> str:  # noqa: D401
        if value is None:
            return "INFO"
        return str(value).upper()


class Settings(BaseModel):
    storage: StorageSettings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.

        Args:
            path: Optional path to configuration file. If not provided, uses
                PROTO_STORE_CONFIG environment variable or defaults to config/default.yaml.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            FileNotFoundError: If configuration file does not exist.
            ValueError: If configuration is invalid.
        """
        config_path = path or Path(os.getenv("PROTO_STORE_CONFIG", "config/default.yaml"))
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with config_path.open("r", encoding="utf-8") as fp:
            payload = yaml.safe_load(fp) or {}
        try:
            return cls(**payload)
        except Exception as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "StorageSettings",
    "LoggingSettings",
    "get_settings",
]
