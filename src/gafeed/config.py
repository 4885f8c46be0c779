"""Configuration loading with XDG paths and precedence resolution.

This module builds the immutable :class:`~gafeed.models.ClientConfig`
handed to :class:`~gafeed.client.engine.RequestEngine`:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.gafeed/`` on macOS and Windows. See :func:`get_config_dir`.
* **Precedence resolution** -- :func:`load_config` merges explicit
  overrides, ``GAFEED_*`` environment variables, and a JSON config file on
  top of the model defaults.
* **Credential resolution** -- :func:`resolve_credential` reads secrets
  from env vars or files, so tokens never need to live in the config file.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from gafeed.exceptions import ConfigError
from gafeed.models import ClientConfig

logger = logging.getLogger(__name__)

_APP_NAME = "gafeed"
_CONFIG_FILENAME = "config.json"

ENV_VARS: dict[str, str] = {
    "GAFEED_API_KEY": "api_key",
    "GAFEED_PROXY_ADDRESS": "proxy_address",
    "GAFEED_PROXY_PORT": "proxy_port",
    "GAFEED_OPEN_TIMEOUT": "open_timeout",
    "GAFEED_READ_TIMEOUT": "read_timeout",
    "GAFEED_USE_COOPERATIVE": "use_cooperative",
    "GAFEED_VERIFY_SSL": "verify_ssl",
}
"""Environment variable to :class:`~gafeed.models.ClientConfig` field."""


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_config_dir() -> Path:
    """Return the configuration directory.

    On Linux/BSD: ``$XDG_CONFIG_HOME/gafeed/`` (default ``~/.config/gafeed/``).
    On macOS/Windows: ``~/.gafeed/``.

    The directory is not created; gafeed only ever reads from it.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_CONFIG_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".config"
        return base / _APP_NAME
    return Path.home() / f".{_APP_NAME}"


# --- Config file ---


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    logger.debug("Loaded config file %s", path)
    return data


def _env_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for var, field_name in ENV_VARS.items():
        value = os.environ.get(var)
        if value is not None and value != "":
            values[field_name] = value
    return values


# --- Precedence resolution ---


def load_config(path: Optional[str | Path] = None, **overrides: Any) -> ClientConfig:
    """Resolve a :class:`~gafeed.models.ClientConfig` with full precedence chain.

    Precedence (high to low):
        1. Keyword *overrides* (``load_config(api_key="K")``)
        2. Environment variables (see :data:`ENV_VARS`)
        3. JSON config file: *path* when given, else
           ``<config dir>/config.json`` if it exists
        4. Model defaults

    Args:
        path: Explicit config file. Unlike the default location it must
            exist.
        **overrides: Field values that win over every other source.
            ``log_sink`` can only be supplied this way.

    Returns:
        The frozen configuration.

    Raises:
        ConfigError: If the config file is missing (explicit *path* only),
            unreadable, not a JSON object, or any value fails validation.
    """
    merged: dict[str, Any] = {}

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        merged.update(_read_config_file(config_path))
    else:
        default_path = get_config_dir() / _CONFIG_FILENAME
        if default_path.is_file():
            merged.update(_read_config_file(default_path))

    merged.update(_env_values())
    merged.update(overrides)

    try:
        return ClientConfig(**merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace

    Args:
        source: The source descriptor string.

    Returns:
        The resolved credential string.

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    raise ConfigError(
        f"Unsupported credential source: '{source}'. "
        "Expected env:VAR or file:/path"
    )
