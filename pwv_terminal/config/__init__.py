"""Configuration module -- exports Settings, load_config, and a module-level singleton."""

from pwv_terminal.config.loader import load_config
from pwv_terminal.config.settings import Settings

settings = Settings()

__all__ = ["Settings", "load_config", "settings"]
