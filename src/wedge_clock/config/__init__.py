"""Configuration for Wedge Clock."""

from wedge_clock.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
