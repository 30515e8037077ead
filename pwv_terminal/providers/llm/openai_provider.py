"""OpenAI-compatible LLM provider adapter.

Wraps the ``openai`` async client to implement :class:`ILLMProvider` for two
backends that speak the same chat-completions protocol:

- ``openai``   -- api.openai.com, authenticated with ``OPENAI_API_KEY``;
  supports ``response_format={"type": "json_object"}``.
- ``lmstudio`` -- a local LM Studio server at ``LM_STUDIO_URL`` exposing an
  OpenAI-compatible ``/v1`` API, optionally guarded by ``LM_API_TOKEN``.
  Small local models do not support JSON mode, so it is never requested.
"""

from __future__ import annotations

import httpx
import openai
import structlog

from pwv_terminal.config.settings import Settings
from pwv_terminal.interfaces.llm_provider import ILLMProvider
from pwv_terminal.utils.errors import ConfigurationError, LLMError

logger = structlog.get_logger(logger_name=__name__)

_BACKENDS = ("openai", "lmstudio")


class OpenAILLMProvider(ILLMProvider):
    """LLM provider backed by OpenAI or an LM Studio server."""

    def __init__(self, settings: Settings, backend: str = "openai") -> None:
        if backend not in _BACKENDS:
            raise ConfigurationError(
                message=f"Unknown OpenAI-compatible backend: {backend}",
                provider_name=backend,
            )
        self._settings = settings
        self._backend = backend

        if backend == "lmstudio":
            self._base_url = settings.lm_studio_url.rstrip("/")
            # The SDK refuses an empty key; LM Studio ignores it unless a
            # token is configured.
            self._api_key = settings.lm_api_token or "lm-studio"
            self._model = settings.lm_studio_model
            self._client = openai.AsyncOpenAI(
                base_url=f"{self._base_url}/v1",
                api_key=self._api_key,
                timeout=openai.Timeout(120.0, connect=5.0),
            )
        else:
            self._base_url = ""
            self._api_key = settings.openai_api_key
            self._model = settings.openai_model
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key or "not-configured",
                timeout=openai.Timeout(60.0, connect=5.0),
            )

    # ------------------------------------------------------------------
    # ILLMProvider implementation
    # ------------------------------------------------------------------

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.1,
        max_tokens: int = 2000,
        json_mode: bool = False,
    ) -> str:
        """Generate a text completion via the chat-completions API."""
        kwargs: dict = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if json_mode and self._backend == "openai":
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except openai.APITimeoutError as exc:
            raise LLMError(
                message=f"{self._backend} request timed out",
                provider_name=self.get_provider_name(),
            ) from exc
        except openai.APIError as exc:
            raise LLMError(
                message=f"{self._backend} API error: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMError(
                message=f"{self._backend} returned empty response",
                provider_name=self.get_provider_name(),
            )
        logger.info(
            "llm_completion",
            model=self._model,
            provider=self._backend,
            tokens=response.usage.total_tokens if response.usage else None,
        )
        return content

    def is_available(self) -> bool:
        """OpenAI needs a key; LM Studio only needs a URL."""
        if self._backend == "lmstudio":
            return bool(self._base_url)
        return bool(self._api_key)

    async def validate_credentials(self) -> bool:
        """List models to confirm the key works or the local server is up."""
        if not self.is_available():
            return False
        try:
            await self._client.models.list()
            return True
        except (openai.APIError, httpx.HTTPError):
            return False

    def get_provider_name(self) -> str:
        return self._backend

    @property
    def model(self) -> str:
        return self._model
