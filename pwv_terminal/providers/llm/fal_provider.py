"""FAL any-llm provider adapter.

FAL exposes many hosted models behind one queue endpoint that takes a
single ``prompt`` string rather than a message list, so the system prompt
is prepended to the user prompt.  Responses look like
``{"output": "...", "partial": false, "error": null}``.
"""

from __future__ import annotations

import httpx
import structlog

from pwv_terminal.config.settings import Settings
from pwv_terminal.interfaces.llm_provider import ILLMProvider
from pwv_terminal.utils.errors import LLMError

logger = structlog.get_logger(logger_name=__name__)

FAL_ANY_LLM_URL = "https://queue.fal.run/fal-ai/any-llm"


class FalLLMProvider(ILLMProvider):
    """LLM provider backed by the FAL any-llm endpoint."""

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = settings.fal_key
        self._model = settings.fal_model
        self._http_client = http_client

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.1,
        max_tokens: int = 2000,
        json_mode: bool = False,
    ) -> str:
        """POST the combined prompt to FAL and return ``output``."""
        if not self._api_key:
            raise LLMError(
                message="FAL_KEY environment variable not set",
                provider_name=self.get_provider_name(),
            )

        payload = {
            "prompt": f"{system_prompt}\n\n{user_prompt}",
            "model": self._model,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "priority": "throughput",
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Key {self._api_key}",
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    FAL_ANY_LLM_URL, json=payload, headers=headers
                )
            else:
                async with httpx.AsyncClient(timeout=120.0) as client:
                    response = await client.post(FAL_ANY_LLM_URL, json=payload, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise LLMError(
                message=f"FAL API error: {exc.response.status_code} {exc.response.text[:200]}",
                provider_name=self.get_provider_name(),
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise LLMError(
                message=f"FAL request failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if data.get("error"):
            raise LLMError(
                message=f"FAL API error: {data['error']}",
                provider_name=self.get_provider_name(),
            )
        output = data.get("output")
        if not output:
            logger.warning("fal_unexpected_response", keys=sorted(data))
            raise LLMError(
                message="FAL API returned unexpected response format. Expected data.output",
                provider_name=self.get_provider_name(),
            )

        logger.info("llm_completion", model=self._model, provider="fal")
        return output

    def is_available(self) -> bool:
        return bool(self._api_key)

    async def validate_credentials(self) -> bool:
        """FAL has no free listing endpoint; a configured key is the best check."""
        return self.is_available()

    def get_provider_name(self) -> str:
        return "fal"

    @property
    def model(self) -> str:
        return self._model
