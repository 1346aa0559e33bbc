"""
Configuration management (SSOT).

This module defines ALL configuration for the Firefly III tools.
All config keys are defined here; no other module should invent config keys.

Key invariants:
- Credentials are resolved exactly once, when a client is constructed
- A resolved base URL never ends with a trailing slash
- Direct url+token always wins over a credentials file
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import yaml

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when no usable Firefly III credentials can be resolved."""

    pass


class InvalidCredentialsFileError(ConfigurationError):
    """Credentials file exists but cannot provide a url and token."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid credentials file {path}: {reason}")


@dataclass
class FireflyConfig:
    """Firefly III connection configuration.

    Either url+token or credentials_path must be set:
    - url/token: used directly when both are present
    - credentials_path: JSON file with "url" and "token" keys (supports ~/)
    - timeout: request timeout in seconds; None waits indefinitely
    """

    url: str | None = None
    token: str | None = None
    credentials_path: str | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class Credentials:
    """Validated Firefly III credentials.

    base_url never carries a trailing slash.
    """

    base_url: str
    token: str

    def __post_init__(self) -> None:
        if not self.base_url or not self.token:
            raise ConfigurationError("Firefly III credentials require a non-empty url and token")

        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"Firefly III url must be an absolute http(s) URL, got '{self.base_url}'"
            )

        # Exactly one trailing slash is dropped
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url[:-1])


def expand_path(path: str) -> Path:
    """Expand a leading ~/ to the home directory and make the path absolute."""
    if path.startswith("~/"):
        return (Path.home() / path[2:]).resolve()
    return Path(path).resolve()


def load_credentials_file(path: str) -> Credentials:
    """
    Read credentials from a JSON file.

    Args:
        path: File path, optionally starting with ~/

    Returns:
        Credentials from the file's "url" and "token" keys

    Raises:
        InvalidCredentialsFileError: If the file cannot be read or parsed,
            or is missing url or token
    """
    expanded = expand_path(path)
    logger.debug("Loading Firefly credentials from %s", expanded)

    try:
        content = expanded.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidCredentialsFileError(expanded, f"cannot read file ({e})") from e

    try:
        creds = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidCredentialsFileError(expanded, f"not valid JSON ({e})") from e

    if not isinstance(creds, dict):
        raise InvalidCredentialsFileError(expanded, "expected a JSON object")

    if not creds.get("url") or not creds.get("token"):
        raise InvalidCredentialsFileError(expanded, "missing url or token")

    if not isinstance(creds["url"], str) or not isinstance(creds["token"], str):
        raise InvalidCredentialsFileError(expanded, "url and token must be strings")

    return Credentials(base_url=creds["url"], token=creds["token"])


def resolve_credentials(config: FireflyConfig) -> Credentials:
    """
    Turn a configuration object into validated credentials.

    Precedence:
    1. url + token (both present)
    2. credentials_path
    3. ConfigurationError

    Raises:
        ConfigurationError: If nothing usable is configured
        InvalidCredentialsFileError: If the credentials file is unusable
    """
    if config.url and config.token:
        return Credentials(base_url=config.url, token=config.token)

    if config.credentials_path:
        return load_credentials_file(config.credentials_path)

    raise ConfigurationError(
        "Firefly III not configured. Provide url+token or credentials_path."
    )


def load_config(config_path: Path) -> FireflyConfig:
    """
    Load configuration from YAML file.

    Environment variables can override config values:
    - FIREFLY_URL
    - FIREFLY_TOKEN
    - FIREFLY_CREDENTIALS_PATH
    - FIREFLY_TIMEOUT (request timeout in seconds)
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    firefly_data = data.get("firefly") or {}

    timeout = os.environ.get("FIREFLY_TIMEOUT", firefly_data.get("timeout_seconds"))

    return FireflyConfig(
        url=os.environ.get("FIREFLY_URL", firefly_data.get("url")),
        token=os.environ.get("FIREFLY_TOKEN", firefly_data.get("token")),
        credentials_path=os.environ.get(
            "FIREFLY_CREDENTIALS_PATH", firefly_data.get("credentials_path")
        ),
        timeout=float(timeout) if timeout not in (None, "") else None,
    )


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Firefly III Tools Configuration
#
# Credentials (SSOT):
# - url + token: used directly when both are set
# - credentials_path: JSON file {"url": "...", "token": "..."} (supports ~/)
#
# Environment variables FIREFLY_URL, FIREFLY_TOKEN, FIREFLY_CREDENTIALS_PATH
# and FIREFLY_TIMEOUT override the values below.

firefly:
  url: "http://localhost:8080"
  token: "YOUR_FIREFLY_TOKEN"
  credentials_path: null
  timeout_seconds: null                   # null waits indefinitely
"""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(default_config)
