"""Corpus source adapters."""

from pwv_terminal.providers.corpus.json_corpus_provider import JsonCorpusProvider

__all__ = ["JsonCorpusProvider"]
