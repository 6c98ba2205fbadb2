"""Configuration loading and validation using Pydantic."""

import codecs
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from serialmonitor.domain import BaudRate, LineEnding
from serialmonitor.infrastructure.config import DEFAULT_CONFIG_PATH, YAMLConfigLoader


class SerialConfig(BaseModel):
    """Serial link configuration."""

    port: str = ""
    baud_rate: BaudRate = BaudRate.default()
    encoding: str = "utf-8"
    append_line_ending: bool = True
    poll_interval: float = Field(default=0.01, gt=0, le=1.0)
    reconnect_interval: float = Field(default=1.0, gt=0, le=60.0)

    @field_validator("baud_rate", mode="before")
    @classmethod
    def validate_baud_rate(cls, v: Any) -> BaudRate:
        """Accept only the supported baud rates."""
        if isinstance(v, BaudRate):
            return v
        return BaudRate.from_value(v)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate the codec is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}") from None
        return v


class DisplayConfig(BaseModel):
    """Monitor display configuration."""

    timestamp: bool = False
    autoscroll: bool = True
    line_ending: LineEnding = LineEnding.default()
    view_height: int = Field(default=30, ge=5, le=500)

    @field_validator("line_ending", mode="before")
    @classmethod
    def validate_line_ending(cls, v: Any) -> LineEnding:
        """Resolve line endings by name, alias or label."""
        if isinstance(v, LineEnding):
            return v
        if not isinstance(v, str):
            raise ValueError(f"Line ending must be a name, got {v!r}")
        return LineEnding.from_name(v)


class Config(BaseModel):
    """Application configuration."""

    serial: SerialConfig = Field(default_factory=SerialConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def merge_overrides(data: dict[str, Any], overrides: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """Overlay per-section values (e.g. from the command line) on loaded data.

    ``None`` values are skipped so unset flags keep the file's value.
    """
    merged = {
        section: dict(values) if isinstance(values, dict) else values
        for section, values in data.items()
    }
    for section, values in overrides.items():
        target = merged.get(section)
        if not isinstance(target, dict):
            target = merged[section] = {}
        target.update({key: value for key, value in values.items() if value is not None})
    return merged


def load_config(
    config_path: Path | str = DEFAULT_CONFIG_PATH,
    overrides: dict[str, dict[str, Any]] | None = None,
) -> Config:
    """Load configuration from YAML file.

    Raises:
        pydantic.ValidationError: If a value is out of range or unsupported.
    """
    data = YAMLConfigLoader(config_path).load()
    if overrides:
        data = merge_overrides(data, overrides)
    return Config.model_validate(data)
