"""Load renderer configuration from YAML and environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from identicon.models.mode_model import Mode, mode_from_name

ENV_PREFIX = "IDENTICON_"

# Default config lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


def _load_yaml(path: Path, required: bool = False) -> dict[str, Any]:
    """Read a YAML mapping from `path`.

    Raises:
        FileNotFoundError: if `required` and the file does not exist.
        ValueError: if the top level of the document is not a mapping.
    """
    if not path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


class Config(BaseSettings):
    """Renderer config: YAML file, then IDENTICON_* env vars on top."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    size: int = Field(default=420, gt=0)
    mode: Literal["github", "identiconjs"] = "github"
    saturation: float = 0.7
    brightness: float = 0.5
    hash_algorithm: str = "md5"
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "Config":
        if config_path:
            yaml_data = _load_yaml(Path(config_path), required=True)
        else:
            yaml_data = _load_yaml(_DEFAULT_CONFIG_PATH)
        # init kwargs beat env in pydantic-settings, so drop keys the env sets
        yaml_data = {
            key: value
            for key, value in yaml_data.items()
            if f"{ENV_PREFIX}{str(key).upper()}" not in os.environ
        }
        return cls(**yaml_data)

    def to_mode(self) -> Mode:
        return mode_from_name(self.mode, saturation=self.saturation, brightness=self.brightness)


def get_config(config_path: str | Path | None = None) -> Config:
    return Config.load(config_path)
