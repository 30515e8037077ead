"""Abstract base class for LLM service providers.

Defines the contract for any large-language-model backend used by the
offline entity-extraction step.  Implementations wrap OpenAI, an LM Studio
server speaking the OpenAI protocol, or the FAL any-llm queue.  The
adapter pattern keeps the extractor provider-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# Concrete implementations: OpenAILLMProvider, FalLLMProvider
# Located in: pwv_terminal/providers/llm/
class ILLMProvider(ABC):
    """Contract for LLM services used by :class:`EntityExtractor`."""

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.1,
        max_tokens: int = 2000,
        json_mode: bool = False,
    ) -> str:
        """Generate a text completion from the model.

        Parameters
        ----------
        system_prompt:
            The system/instruction message that sets the model's behaviour.
        user_prompt:
            The user-facing prompt containing the post to analyse.
        temperature:
            Sampling temperature (0.0 = deterministic, 1.0 = creative).
        max_tokens:
            Upper bound on the number of tokens in the response.
        json_mode:
            Ask the backend to constrain output to a JSON object where it
            supports doing so.  Backends without such a mode ignore it.

        Returns
        -------
        str
            The model's text response.

        Raises
        ------
        pwv_terminal.utils.errors.LLMError
            If the API call fails or returns an empty response.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this LLM provider.

        Example return values: ``"openai"``, ``"lmstudio"``, ``"fal"``.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is configured.

        Implementations check that credentials are present without making
        a network call.
        """

    @abstractmethod
    async def validate_credentials(self) -> bool:
        """Perform a lightweight API call to confirm the backend answers.

        Returns
        -------
        bool
            ``True`` if the provider accepted the request; ``False``
            otherwise.  Unlike :meth:`is_available`, this method actively
            contacts the remote service.
        """
