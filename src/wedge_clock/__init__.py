"""Wedge Clock - analog clock face drawn as a single wedge on a rectangular viewport."""

__version__ = "0.1.0"
