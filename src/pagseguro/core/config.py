"""Library configuration.

Responsibilities:
- Centralize environment variables (pydantic-settings) away from the resources.
- Give adapters (HTTP, logging) and the CLI one consistent view of credentials.
"""

from __future__ import annotations

import codecs
import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHARSET = "ISO-8859-1"


class Environment(str, Enum):
    """PagSeguro environments and the hosts that serve them."""

    PRODUCTION = "production"
    SANDBOX = "sandbox"

    @property
    def host(self) -> str:
        """Web-services host (API calls)."""

        if self is Environment.SANDBOX:
            return "https://ws.sandbox.pagseguro.uol.com.br"
        return "https://ws.pagseguro.uol.com.br"

    @property
    def approval_host(self) -> str:
        """Host of the pages a seller or buyer is redirected to."""

        if self is Environment.SANDBOX:
            return "https://sandbox.pagseguro.uol.com.br"
        return "https://pagseguro.uol.com.br"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pagseguro"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pagseguro"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pagseguro"
    return Path.home() / ".config" / "pagseguro"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# PagSeguro client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central configuration of the client.

    Values come from `PAGSEGURO_*` environment variables, the project `.env`
    and then the user `.env` written by `pagseguro doctor setup`.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAGSEGURO_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    environment: Environment = Field(
        default=Environment.SANDBOX,
        description="Target environment (production/sandbox).",
    )

    email: str | None = Field(
        default=None,
        description="Seller account email (pre-approval operations).",
    )
    token: str | None = Field(
        default=None,
        description="Seller account token (pre-approval operations).",
    )
    app_id: str | None = Field(
        default=None,
        description="Application id (authorization operations).",
    )
    app_key: str | None = Field(
        default=None,
        description="Application key (authorization operations).",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="pagseguro-python/0.1",
        min_length=1,
        description="User-Agent sent to the web services.",
    )
    charset: str = Field(
        default=DEFAULT_CHARSET,
        min_length=1,
        description="Charset declared for request bodies.",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum level for the default structlog sink.",
    )
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON instead of console text.",
    )

    @field_validator("charset")
    @classmethod
    def _known_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown charset: {value!r}") from exc
        return value

    @property
    def host(self) -> str:
        return self.environment.host

    @property
    def approval_host(self) -> str:
        return self.environment.approval_host

    def seller_credentials(self) -> dict[str, str]:
        """Query parameters identifying the seller account."""

        return _credentials(email=self.email, token=self.token)

    def application_credentials(self) -> dict[str, str]:
        """Query parameters identifying the application."""

        return _credentials(appId=self.app_id, appKey=self.app_key)


def _credentials(**values: str | None) -> dict[str, str]:
    return {key: value for key, value in values.items() if value}
