"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Adapters (process runner, cache store) read the same settings object.
"""

from __future__ import annotations

import os
import shlex
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "SCANDEV_"
APP_DIR_NAME = "scandev"


def get_user_config_dir() -> Path:
    """Per-user configuration directory: %APPDATA%, Application Support or XDG."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def env_key(field_name: str) -> str:
    """`cache_path` -> `SCANDEV_CACHE_PATH`; unknown settings raise `ValueError`."""

    if field_name not in AppSettings.model_fields:
        known = ", ".join(sorted(AppSettings.model_fields))
        raise ValueError(f"Unknown setting {field_name!r} (known: {known})")
    return f"{ENV_PREFIX}{field_name.upper()}"


def write_user_settings(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Set scandev settings in the user's .env, keeping every other line as is.

    Keys are setting names (`scanimage`, `cache_path`, ...). Existing
    `SCANDEV_*` assignments are replaced in place, new ones appended.
    """

    updates = {env_key(name): shlex.quote(str(value)) for name, value in values.items()}

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    lines = env_path.read_text(encoding="utf-8").splitlines() if env_path.exists() else ["# scandev user config"]

    pending = dict(updates)
    for index, line in enumerate(lines):
        key = line.split("=", 1)[0].strip()
        if key in pending:
            lines[index] = f"{key}={pending.pop(key)}"
    lines.extend(f"{key}={value}" for key, value in pending.items())

    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be set as `SCANDEV_<FIELD>` in the environment or in a
    `.env` file (project first, then the user config dir).
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    scanimage: str = Field(
        default="scanimage",
        min_length=1,
        description="scanimage executable (name on PATH or absolute path).",
    )
    listing_args: str = Field(
        default="-A",
        description="Arguments that make scanimage list every device option.",
    )
    cache_path: Path = Field(
        default_factory=lambda: get_user_config_dir() / "devices.json",
        description="JSON file holding the last known device.",
    )
    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for the listing command (seconds). None waits forever.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    def listing_command(self) -> str:
        """Command line that prints the capability listing."""

        return f"{shlex.quote(self.scanimage)} {self.listing_args}".strip()
