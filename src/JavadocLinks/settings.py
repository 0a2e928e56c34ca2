# === NAVMAP v1 ===
# {
#   "module": "JavadocLinks.settings",
#   "purpose": "Pydantic settings for link resolution, with file and environment layering.",
#   "sections": [
#     {
#       "id": "loglevel",
#       "name": "LogLevel",
#       "anchor": "class-loglevel",
#       "kind": "class"
#     },
#     {
#       "id": "logformat",
#       "name": "LogFormat",
#       "anchor": "class-logformat",
#       "kind": "class"
#     },
#     {
#       "id": "linkresolversettings",
#       "name": "LinkResolverSettings",
#       "anchor": "class-linkresolversettings",
#       "kind": "class"
#     },
#     {
#       "id": "read-settings-file",
#       "name": "read_settings_file",
#       "anchor": "function-read-settings-file",
#       "kind": "function"
#     },
#     {
#       "id": "load-settings",
#       "name": "load_settings",
#       "anchor": "function-load-settings",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Pydantic v2 settings for javadoc link resolution.

Values are layered with the precedence ``explicit overrides > environment
(JAVADOC_LINKS_*) > settings file > defaults``. Settings files may be YAML or
JSON; keys that do not correspond to a field are ignored.
"""

from __future__ import annotations

import json
from enum import Enum
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from JavadocLinks.errors import ConfigurationError

__all__ = [
    "DEFAULT_GENERIC_BASE_URL",
    "DEFAULT_USER_AGENT",
    "PACKAGE_VERSION",
    "LinkResolverSettings",
    "LogFormat",
    "LogLevel",
    "load_settings",
    "read_settings_file",
]

DEFAULT_GENERIC_BASE_URL = "https://www.javadoc.io/doc/"
try:  # pragma: no cover - metadata may be unavailable during development
    PACKAGE_VERSION = importlib_metadata.version("javadoc-links")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - local source tree
    PACKAGE_VERSION = "0.1.0"

DEFAULT_USER_AGENT = f"JavadocLinks/{PACKAGE_VERSION}"


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Supported log output formats."""

    CONSOLE = "console"
    JSON = "json"


class LinkResolverSettings(BaseSettings):
    """Runtime configuration for the link resolution engine."""

    model_config = SettingsConfigDict(
        env_prefix="JAVADOC_LINKS_",
        case_sensitive=False,
        extra="ignore",
    )

    generic_base_url: str = Field(
        DEFAULT_GENERIC_BASE_URL,
        description="Base of the generic javadoc hosting convention ({group}/{artifact}/{version}/ is appended)",
    )
    probe_timeout_s: float = Field(5.0, description="Read timeout for reachability probes", gt=0)
    connect_timeout_s: float = Field(5.0, description="Connect timeout for reachability probes", gt=0)
    max_workers: int = Field(8, description="Coordinates resolved in parallel (1 = sequential)", ge=1)
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent on probes")
    follow_redirects: bool = Field(True, description="Follow HTTP redirects while probing")
    verify_tls: bool = Field(True, description="Verify TLS certificates")
    log_level: LogLevel = Field(LogLevel.INFO, description="Package logging level")
    log_format: LogFormat = Field(LogFormat.CONSOLE, description="Console text or structured JSON")

    @field_validator("generic_base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Require an http(s) URL and guarantee a trailing slash."""
        value = v.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"generic_base_url must be an http(s) URL, got {v!r}")
        if not value.endswith("/"):
            value += "/"
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


def read_settings_file(path: Path) -> Dict[str, Any]:
    """Read settings overrides from a YAML or JSON file."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read settings file {path}: {exc}", source=str(path)) from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to parse settings file {path}: {exc}", source=str(path)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file {path} must contain a mapping, got {type(data).__name__}",
            source=str(path),
        )
    return data


def load_settings(
    path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> LinkResolverSettings:
    """Build :class:`LinkResolverSettings` from a file, the environment and overrides.

    Args:
        path: Optional YAML/JSON settings file.
        **overrides: Field values that win over every other source.

    Returns:
        LinkResolverSettings: Validated settings.

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid.
    """

    file_values: Dict[str, Any] = read_settings_file(Path(path)) if path is not None else {}
    try:
        env_values = LinkResolverSettings().model_dump(exclude_unset=True)
        merged = {**file_values, **env_values, **overrides}
        return LinkResolverSettings(**merged)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid link resolver settings: {exc}",
            source=str(path) if path is not None else None,
        ) from exc
