"""Pydantic configuration models for the laboratory CLI."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from lab.session import DEFAULT_BASE_URL

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Log level and renderer."""

    level: str = "WARNING"
    json_mode: bool = False
    file: Optional[Path] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(VALID_LOG_LEVELS)}")
        return v


class ShareConfig(BaseModel):
    """Where shareable links point."""

    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://", "file://")):
            raise ValueError(f"base_url must be an http(s) or file URL, got {v!r}")
        return v.split("#", 1)[0]


class ShuffleConfig(BaseModel):
    """Randomised assignment settings."""

    seed: Optional[int] = None


class DisplayConfig(BaseModel):
    """Table rendering options."""

    show_details: bool = False
    concern_width: int = 60

    @field_validator("concern_width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        if v < 20:
            raise ValueError(f"concern_width must be at least 20, got {v}")
        return v


class LabConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    share: ShareConfig = Field(default_factory=ShareConfig)
    shuffle: ShuffleConfig = Field(default_factory=ShuffleConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "LabConfig":
        return cls.model_validate(data or {})

    def to_dict(self) -> dict:
        return self.model_dump()
