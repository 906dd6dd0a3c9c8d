from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

# re-export for contract/tests
__all__ = [
    "AppConfig",
    "ConfigError",
    "HashingConfig",
    "LoggingConfig",
    "load_config",
]


_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _expand_env_in_str(value: str, *, path: str) -> str:
    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in os.environ or os.environ[key] == "":
            raise ConfigError(f"environment variable {key!r} is not set", path=path)
        return os.environ[key]

    return _ENV_PATTERN.sub(repl, value)


def _expand_env(obj: Any, *, path: str) -> Any:
    if isinstance(obj, str):
        return _expand_env_in_str(obj, path=path)
    if isinstance(obj, list):
        return [_expand_env(v, path=path) for v in obj]
    if isinstance(obj, dict):
        return {k: _expand_env(v, path=f"{path}.{k}" if path else str(k)) for k, v in obj.items()}
    return obj


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("must be a mapping", path=key)
    return value


def _str_field(section: dict[str, Any], key: str, default: str, *, path: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError("must be a non-empty string", path=f"{path}.{key}")
    return value


@dataclass(frozen=True)
class HashingConfig:
    marker: str = "E"
    single_algorithm: str = "sha256"
    iterative_algorithm: str = "md5"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    hashing: HashingConfig = field(default_factory=HashingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None) -> AppConfig:
    """Load YAML config and expand ${ENV_VAR}.

    `None` means "no config file": every section takes its defaults.
    """

    # Local dev: allow injecting overrides from .env (do not commit it).
    load_dotenv(find_dotenv(usecwd=True), override=False)

    if path is None:
        return AppConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("config file does not exist", path=str(config_path))

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse YAML: {e}", path=str(config_path)) from e

    if not isinstance(raw, dict):
        raise ConfigError("top level must be a YAML mapping (dict)", path=str(config_path))

    expanded = _expand_env(raw, path="")

    hashing_raw = _section(expanded, "hashing")
    hashing = HashingConfig(
        marker=_str_field(hashing_raw, "marker", HashingConfig.marker, path="hashing"),
        single_algorithm=_str_field(
            hashing_raw, "single_algorithm", HashingConfig.single_algorithm, path="hashing"
        ).lower(),
        iterative_algorithm=_str_field(
            hashing_raw, "iterative_algorithm", HashingConfig.iterative_algorithm, path="hashing"
        ).lower(),
    )

    logging_raw = _section(expanded, "logging")
    level = _str_field(logging_raw, "level", LoggingConfig.level, path="logging").upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"unknown log level: {level!r}", path="logging.level")

    return AppConfig(hashing=hashing, logging=LoggingConfig(level=level))
