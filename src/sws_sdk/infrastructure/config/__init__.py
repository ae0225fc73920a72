"""Configuration management utilities."""

from .settings import SdkSettings, get_settings

__all__ = ["SdkSettings", "get_settings"]
