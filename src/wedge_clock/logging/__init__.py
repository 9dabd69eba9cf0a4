"""Logging helpers for Wedge Clock."""

from wedge_clock.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
