"""Abstract provider interfaces.

- **corpus_provider** -- loads the immutable entity corpus.
- **llm_provider** -- text completion backends for the offline extractor.
"""

from pwv_terminal.interfaces.corpus_provider import ICorpusProvider
from pwv_terminal.interfaces.llm_provider import ILLMProvider

__all__ = ["ICorpusProvider", "ILLMProvider"]
