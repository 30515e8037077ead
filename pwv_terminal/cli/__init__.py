"""Command-line entry points.

- ``pwv-terminal`` (``python -m pwv_terminal.cli``): the interactive
  discovery terminal over the extracted corpus.
- ``pwv-extract``: the offline producer that builds ``data/entities.json``
  from Markdown posts with an LLM.
"""
