"""Settings and configuration management using Pydantic."""

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

CONFIG_FILE = Path("config.yaml")

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Loads settings from a ``config.yaml`` in the working directory."""

    def _load(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}
        encoding = self.config.get("env_file_encoding")
        content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ValueError(f"{CONFIG_FILE} must contain a mapping")
        return content

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        return {
            name: value
            for name, value in self._load().items()
            if name in self.settings_cls.model_fields
        }


class Settings(BaseSettings):
    """Wedge Clock configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="WEDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Viewport
    width: int = Field(default=400, ge=1, description="Clock surface width in pixels")
    height: int = Field(default=400, ge=1, description="Clock surface height in pixels")

    # Face
    tick_length: float = Field(
        default=10.0,
        ge=0,
        description="Tick mark length, measured inwards from the border",
    )
    tick_stroke_width: float = Field(
        default=2.0,
        gt=0,
        description="Tick mark stroke width",
    )
    background_color: str = Field(default="#000000", description="Background color")
    wedge_color: str = Field(default="#FFFFFF", description="Wedge fill color")
    tick_color: str = Field(default="#FFFFFF", description="Color of ticks outside the wedge")
    covered_tick_color: str = Field(
        default="#000000",
        description="Color of ticks covered by the wedge",
    )

    # Redraw service
    update_interval: float = Field(
        default=1.0,
        gt=0,
        description="Redraw interval in seconds",
    )
    error_backoff: float = Field(
        default=5.0,
        ge=0,
        description="Pause after a failed redraw in seconds",
    )
    output_path: Path = Field(
        default=Path("/tmp/wedge_clock.svg"),
        description="Path to save the generated clock SVG",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    # Development
    debug: bool = Field(default=False, description="Enable debug mode")

    @field_validator(
        "background_color", "wedge_color", "tick_color", "covered_tick_color"
    )
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate colors are #RRGGBB."""
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Color must be in #RRGGBB format, got {v!r}")
        return v.upper()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("output_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """Expand environment variables and user paths."""
        if isinstance(v, str):
            v = Path(os.path.expandvars(os.path.expanduser(v)))
        return v

    def ensure_directories(self) -> None:
        """Ensure output and log directories exist."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
