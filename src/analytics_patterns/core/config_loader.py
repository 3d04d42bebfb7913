"""Engine and logging settings loaded from config/*.yaml.

Resolution order for every setting:

    environment variable  >  YAML file  >  dataclass default

A missing file is not an error: the defaults apply. Malformed YAML and
unusable values for the numeric limits that reach generated SQL are.
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore

logger = logging.getLogger(__name__)

ENGINE_ENV_VARS: dict[str, str] = {
    "PATTERN_ROW_LIMIT": "row_limit",
    "PATTERN_STRICT_PLACEHOLDERS": "strict_placeholders",
    "PATTERN_DEFAULT_TIMEFRAME": "default_timeframe",
    "PATTERN_MAX_ESTIMATE_MS": "max_estimate_ms",
    "PATTERN_PER_GEOGRAPHY_MS": "per_geography_ms",
}

_TRUTHY = ("true", "1", "yes", "on")


def get_project_root() -> Path:
    """
    Locate the checkout root (the directory holding config/).

    Layout: <root>/src/analytics_patterns/core/config_loader.py

    Raises:
        ValueError: If <root>/config is missing, e.g. when running from an installed wheel
    """
    root = Path(__file__).resolve().parents[3]
    if not (root / "config").is_dir():
        raise ValueError(f"No config/ directory under {root}; pass an explicit config_path instead")
    return root


def _default_config_path(filename: str) -> Path | None:
    try:
        return get_project_root() / "config" / filename
    except ValueError as e:
        logger.debug(f"Falling back to built-in defaults: {e}")
        return None


def _coerce_type(value: Any, target_type: type) -> Any:
    """
    Convert a YAML or environment value to the type of its default.

    Strings are parsed: "on"/"yes"/"1"/"true" are truthy booleans and
    "250.0" is accepted for an int setting.

    Raises:
        ValueError: If a numeric string cannot be parsed
    """
    if value is None or isinstance(value, target_type):
        return value
    if target_type is bool:
        return value.lower() in _TRUTHY if isinstance(value, str) else bool(value)
    if target_type is int:
        return int(float(value)) if isinstance(value, str) else int(value)
    if target_type in (float, str):
        return target_type(value)
    return value


def _is_critical_config(key: str) -> bool:
    """row_limit and the *_ms estimate settings fail loudly instead of falling back."""
    return key == "row_limit" or key.endswith("_ms")


def _coerce_setting(config: dict[str, Any], key: str, raw: Any, source: str) -> None:
    """Coerce raw into config[key] in place, keeping the current value if a non-critical key fails."""
    target_type = type(config[key])
    try:
        config[key] = _coerce_type(raw, target_type)
    except (ValueError, TypeError) as e:
        if _is_critical_config(key):
            raise ValueError(
                f"Type coercion failed for critical config {key}={raw!r} from {source}: "
                f"expected {target_type.__name__}. Error: {e}"
            ) from e
        logger.warning(f"Ignoring {key}={raw!r} from {source}: not a valid {target_type.__name__}")


def _apply_env_overrides(config: dict[str, Any], env_mapping: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Return a copy of config with environment overrides applied.

    Each key can be set through its entry in env_mapping (e.g.
    PATTERN_ROW_LIMIT) or, when it has none, through its own name upper-cased
    (e.g. INDEX_HINT_NAME).
    """
    result = dict(config)
    env_mapping = env_mapping or {}
    sources = list(env_mapping.items())
    sources += [(key.upper(), key) for key in config if key not in env_mapping.values()]

    for env_key, config_key in sources:
        raw = os.getenv(env_key)
        if raw is not None and config_key in result:
            _coerce_setting(result, config_key, raw, f"${env_key}")

    return result


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {config_path}, got {type(data).__name__}")
    return data


@dataclass
class EngineConfigDefaults:
    """Built-in engine settings."""

    row_limit: int = 1000
    strict_placeholders: bool = True
    default_timeframe: str = "2023"
    max_estimate_ms: int = 2000
    per_geography_ms: int = 10
    index_hint_table: str = "demographics"
    index_hint_name: str = "idx_demographics_geography"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_engine_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Load pattern engine settings.

    Args:
        config_path: YAML file to read (default: config/engine.yaml in the checkout)

    Returns:
        Dict with the EngineConfigDefaults keys, values coerced to the default types

    Raises:
        ValueError: On malformed YAML, an unusable critical value, or a non-positive row_limit
    """
    config = EngineConfigDefaults().to_dict()
    config_path = config_path if config_path is not None else _default_config_path("engine.yaml")

    if config_path is not None and config_path.exists():
        for key, value in _read_yaml(config_path).items():
            if key not in config:
                logger.warning(f"Unknown engine config key {key} in {config_path}, ignoring")
                continue
            _coerce_setting(config, key, value, str(config_path))
    else:
        logger.debug(f"No engine config at {config_path}, using defaults")

    config = _apply_env_overrides(config, ENGINE_ENV_VARS)

    if config["row_limit"] <= 0:
        raise ValueError(f"row_limit must be positive, got {config['row_limit']}")
    return config


@dataclass
class LoggingConfigDefaults:
    """Built-in logging settings."""

    root_level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    module_levels: dict[str, str] = field(
        default_factory=lambda: {
            "analytics_patterns.core.registry": "INFO",
            "analytics_patterns.core.library": "INFO",
            "analytics_patterns.core.domain": "INFO",
        }
    )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_logging_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Load logging settings; module_levels from YAML are merged over the defaults.

    LOG_LEVEL, when set, replaces root_level.
    """
    config = LoggingConfigDefaults().to_dict()
    config_path = config_path if config_path is not None else _default_config_path("logging.yaml")

    if config_path is not None and config_path.exists():
        data = _read_yaml(config_path)
        if isinstance(data.get("module_levels"), dict):
            config["module_levels"].update(data["module_levels"])
        config.update({k: v for k, v in data.items() if k in ("root_level", "format")})

    if level := os.getenv("LOG_LEVEL"):
        config["root_level"] = level.upper()
    return config
