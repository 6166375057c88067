"""
Configuration management for barcodeid.
"""

from barcodeid.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
