"""LLM provider adapters used by the offline entity extractor."""

from pwv_terminal.config.settings import Settings
from pwv_terminal.interfaces.llm_provider import ILLMProvider
from pwv_terminal.providers.llm.fal_provider import FalLLMProvider
from pwv_terminal.providers.llm.openai_provider import OpenAILLMProvider
from pwv_terminal.utils.errors import ConfigurationError


def build_llm_provider(settings: Settings, provider: str | None = None) -> ILLMProvider:
    """Return the adapter for *provider* (defaults to ``settings.ai_provider``)."""
    name = (provider or settings.ai_provider).lower()
    if name == "fal":
        return FalLLMProvider(settings)
    if name in ("openai", "lmstudio"):
        return OpenAILLMProvider(settings, backend=name)
    raise ConfigurationError(
        message=f"Unknown AI provider '{name}'. Expected lmstudio, openai or fal.",
        provider_name=name,
    )


__all__ = ["FalLLMProvider", "OpenAILLMProvider", "build_llm_provider"]
