"""Publisher configuration: defaults < ``notepub.toml`` < environment.

Example ``notepub.toml``::

    [notepub]
    notes_path        = "~/vault"
    public_by_default = false
    home_note_slug    = "Index"
    log_level         = "INFO"
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_TRUE = {"1", "t", "true", "yes", "on"}
_FALSE = {"0", "f", "false", "no", "off"}

#: Environment variable -> config field
ENV_VARS = {
    "NOTEPUB_PATH": "notes_path",
    "PUBLIC_BY_DEFAULT": "public_by_default",
    "HOME_NOTE_SLUG": "home_note_slug",
    "LOG_LEVEL": "log_level",
}


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


@dataclass(frozen=True)
class PublishConfig:
    notes_path: Path = Path(".")
    public_by_default: bool = False
    home_note_slug: str = "Index"
    log_level: str = "INFO"


def _parse_bool(name: str, raw: Any, current: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    logger.warning("Invalid boolean for %s: %r, keeping %s", name, raw, current)
    return current


def _apply(config: PublishConfig, values: Mapping[str, Any]) -> PublishConfig:
    changes: dict[str, Any] = {}
    for key, raw in values.items():
        if key == "notes_path":
            changes[key] = Path(str(raw)).expanduser()
        elif key == "public_by_default":
            changes[key] = _parse_bool(key, raw, config.public_by_default)
        elif key in ("home_note_slug", "log_level"):
            changes[key] = str(raw)
        else:
            logger.warning("Unknown config key ignored: %s", key)
    return replace(config, **changes)


def _read_toml(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, "rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot load config file {config_path}: {exc}") from exc
    section = data.get("notepub", data)
    if not isinstance(section, dict):
        raise ConfigError(f"[notepub] in {config_path} must be a table")
    return section


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PublishConfig:
    """Build a :class:`PublishConfig` from an optional TOML file and the environment."""
    environ = os.environ if environ is None else environ
    config = PublishConfig()

    if config_path is not None:
        config = _apply(config, _read_toml(Path(config_path)))

    env_values = {field: environ[var] for var, field in ENV_VARS.items() if environ.get(var)}
    config = _apply(config, env_values)

    if not config.notes_path.exists():
        logger.warning("Notes path %s does not exist, using current directory", config.notes_path)
        config = replace(config, notes_path=Path("."))

    logger.debug("Configuration loaded: %s", config)
    return config
