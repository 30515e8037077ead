"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  -- static defaults checked into the repo
  2. .env file           -- local developer overrides (not committed)
  3. Environment vars    -- set per machine

``load_config()`` reads the YAML file first, then deep-merges the values
resolved by :class:`Settings` on top of it.  Keys that only exist in YAML
(the terminal banner, prompt string, history size) pass through untouched.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from pwv_terminal.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Environment variables (via Settings) override YAML values where keys overlap.

    Args:
        path: Path to the YAML configuration file.
        settings: Pre-built settings; a fresh ``Settings()`` is used when omitted.

    Returns:
        Fully resolved configuration dictionary.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()
    env_overrides = {
        "app": {
            "env": settings.app_env,
        },
        "data": {
            "corpus_path": settings.corpus_path,
            "portfolio_path": settings.portfolio_path,
            "team_path": settings.team_path,
        },
        "terminal": {
            "box_width": settings.box_width,
            "site_base_url": settings.site_base_url,
            "auto_open_posts": settings.auto_open_posts,
            "auto_open_delay": settings.auto_open_delay,
        },
        "extraction": {
            "provider": settings.ai_provider,
            "available_providers": settings.get_available_llm_providers(),
            "posts_dir": settings.posts_dir,
            "records_dir": settings.records_dir,
            "output": settings.extraction_output,
            "delay": settings.extraction_delay,
            "max_chars": settings.extraction_max_chars,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
