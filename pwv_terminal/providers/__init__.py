"""Concrete adapters for the provider interfaces.

- ``providers.corpus`` -- corpus loading from JSON and YAML listings.
- ``providers.llm`` -- OpenAI / LM Studio and FAL completion backends.
"""
