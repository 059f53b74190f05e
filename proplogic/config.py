"""
Engine configuration.

Resolution order for the file: explicit path, then ``$PROPLOGIC_CONFIG``,
then ``config/engine.yaml`` at the project root. With no file at all the
built-in defaults apply. ``$PROPLOGIC_MAX_VARIABLES`` overrides the
variable ceiling whatever the source.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .assignments import DEFAULT_MAX_VARIABLES
from .errors import ConfigError
from .truthtab import OUTPUT_STYLES

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PROPLOGIC_CONFIG"
MAX_VARIABLES_ENV_VAR = "PROPLOGIC_MAX_VARIABLES"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "engine.yaml"

# Ceiling for max_variables whatever the configuration says.
HARD_MAX_VARIABLES = 20


@dataclass(frozen=True)
class EngineConfig:
    """Tunable limits and presentation defaults."""

    max_variables: int = DEFAULT_MAX_VARIABLES
    output_style: str = "TF"
    show_steps: bool = False

    def validate(self) -> None:
        if not isinstance(self.max_variables, int) or isinstance(self.max_variables, bool):
            raise ConfigError(f"max_variables must be an integer, got {self.max_variables!r}")
        if not 1 <= self.max_variables <= HARD_MAX_VARIABLES:
            raise ConfigError(
                f"max_variables must be within [1, {HARD_MAX_VARIABLES}], got {self.max_variables}"
            )
        if self.output_style not in OUTPUT_STYLES:
            raise ConfigError(
                f"output_style must be one of {sorted(OUTPUT_STYLES)}, got {self.output_style!r}"
            )
        if not isinstance(self.show_steps, bool):
            raise ConfigError(f"show_steps must be a boolean, got {self.show_steps!r}")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "EngineConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
        config = cls(**data)
        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _resolve_path(path: Optional[Union[str, Path]]) -> Optional[Path]:
    if path is not None:
        candidate = Path(path)
        if not candidate.exists():
            raise ConfigError(f"config file not found: {candidate}")
        return candidate
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        if not candidate.exists():
            raise ConfigError(f"{CONFIG_ENV_VAR} points to a missing file: {candidate}")
        return candidate
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    config_path = _resolve_path(path)
    data: Dict[str, Any] = {}
    if config_path is not None:
        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigError(f"error parsing YAML file: {config_path}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"malformed config file: top level must be a mapping in {config_path}")
        section = loaded.get("engine", loaded)
        if not isinstance(section, dict):
            raise ConfigError(f"malformed config file: 'engine' must be a mapping in {config_path}")
        data = dict(section)
        logger.debug("loaded engine config from %s", config_path)

    override = os.getenv(MAX_VARIABLES_ENV_VAR)
    if override:
        try:
            data["max_variables"] = int(override)
        except ValueError as exc:
            raise ConfigError(f"{MAX_VARIABLES_ENV_VAR} must be an integer, got {override!r}") from exc

    return EngineConfig.from_mapping(data)


__all__ = [
    "CONFIG_ENV_VAR",
    "MAX_VARIABLES_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "HARD_MAX_VARIABLES",
    "EngineConfig",
    "load_config",
]
