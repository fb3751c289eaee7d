"""Fetch rule and prompt presets and write them out for AI coding agents."""

__version__ = "0.5.0"