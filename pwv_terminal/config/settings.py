"""Application settings loaded from environment variables via pydantic-settings.

Values are read from two sources, in priority order:

  1. **Environment variables**, e.g. ``PWV_CORPUS_PATH=data/entities.json``
     (highest priority, always wins)
  2. **.env file** in the working directory (local development)

Field ``corpus_path`` maps to env var ``CORPUS_PATH``; pydantic-settings
upper-cases the field name when matching.  Defaults below are used when
neither source provides a value.

Secrets (``OPENAI_API_KEY``, ``FAL_KEY``, ``LM_API_TOKEN``) only matter to
the offline extraction CLI; the interactive terminal never reads them.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PWV terminal settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Corpus data ===
    corpus_path: str = "data/entities.json"
    portfolio_path: str = "data/portfolio.yaml"
    team_path: str = "data/team.yaml"

    # === Terminal presentation ===
    box_width: int = Field(default=64, ge=20, le=200)
    site_base_url: str = "https://pwv.com"
    auto_open_posts: bool = True
    auto_open_delay: float = 0.5

    # === Offline entity extraction ===
    # ai_provider selects the LLM backend used by ``pwv-extract``.
    ai_provider: str = "lmstudio"
    lm_studio_url: str = "http://localhost:1234"
    lm_studio_model: str = "liquid/lfm2.5-1.2b"
    lm_api_token: str = ""
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    fal_key: str = ""
    fal_model: str = "meta-llama/llama-3.1-70b-instruct"
    posts_dir: str = "content/posts"
    records_dir: str = "data/entities"
    extraction_output: str = "data/entities.json"
    extraction_delay: float = 1.0
    extraction_max_chars: int = 3500
    extraction_temperature: float = 0.1
    extraction_max_tokens: int = 2000

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    def get_available_llm_providers(self) -> list[str]:
        """Return the LLM backends usable with the current credentials.

        LM Studio runs locally and needs no key, so it is always listed.
        """
        providers: list[str] = ["lmstudio"]
        if self.openai_api_key:
            providers.append("openai")
        if self.fal_key:
            providers.append("fal")
        return providers
