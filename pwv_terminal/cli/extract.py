# =============================================================================
# pwv_terminal/cli/extract.py — Offline Entity Extraction
# =============================================================================
#
# Builds data/entities.json, the corpus the interactive terminal loads, from
# a directory of Markdown/MDX blog posts:
#
#   1. Each post is sent to an LLM (LM Studio, OpenAI or FAL) and the reply
#      is normalised into one JSON record under records_dir.
#   2. Posts that already have a record are skipped unless --force is given,
#      so an interrupted run picks up where it stopped.
#   3. All records are aggregated into the single corpus document.
#
# Typical usage:
#   pwv-extract                         # every pending post, default provider
#   pwv-extract --limit 10              # first ten posts only
#   pwv-extract --provider openai --force
# =============================================================================

"""CLI entry point for the offline corpus builder."""

from __future__ import annotations

import argparse
import asyncio
import sys

from pwv_terminal.config.settings import Settings
from pwv_terminal.interfaces.llm_provider import ILLMProvider
from pwv_terminal.providers.llm import build_llm_provider
from pwv_terminal.services.corpus_builder import CorpusBuilder
from pwv_terminal.services.entity_extractor import EntityExtractor
from pwv_terminal.utils.errors import TerminalError
from pwv_terminal.utils.logging import configure_logging

_PROVIDERS = ("lmstudio", "openai", "fal")

_MISSING_KEY_HINTS = {
    "openai": "OPENAI_API_KEY not set. Add it to .env or export it.",
    "fal": "FAL_KEY not set. Add it to .env or export it.",
}


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwv-extract",
        description="Extract companies, people, facts and quotes from blog posts with an LLM.",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Only process the first N posts (sorted by file name).",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Re-extract posts that already have a record.",
    )
    parser.add_argument("--posts-dir", default=None, help="Directory of .md/.mdx posts.")
    parser.add_argument("--output", default=None, help="Path of the aggregated corpus JSON.")
    parser.add_argument(
        "--provider",
        choices=_PROVIDERS,
        default=None,
        help="LLM backend (defaults to AI_PROVIDER).",
    )
    return parser


async def _check_provider(provider: ILLMProvider) -> str | None:
    """Return an error message when *provider* cannot be used, else None."""
    name = provider.get_provider_name()
    if name == "lmstudio":
        if not await provider.validate_credentials():
            return (
                "Cannot reach LM Studio. Start its local server and load a model, "
                "or set LM_STUDIO_URL."
            )
        return None
    if not provider.is_available():
        return _MISSING_KEY_HINTS.get(name, f"{name} is not configured.")
    return None


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    try:
        provider = build_llm_provider(settings, args.provider)
    except TerminalError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    problem = await _check_provider(provider)
    if problem:
        print(f"Error: {problem}", file=sys.stderr)
        return 1

    extractor = EntityExtractor(
        provider,
        max_chars=settings.extraction_max_chars,
        temperature=settings.extraction_temperature,
        max_tokens=settings.extraction_max_tokens,
    )
    builder = CorpusBuilder(
        extractor,
        posts_dir=args.posts_dir or settings.posts_dir,
        records_dir=settings.records_dir,
        output_path=args.output or settings.extraction_output,
        delay=settings.extraction_delay,
    )

    try:
        corpus = await builder.run(limit=args.limit, force=args.force)
    except TerminalError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    print(
        f"Extracted {len(corpus.posts)} posts: "
        f"{len(corpus.entities.companies)} companies, "
        f"{len(corpus.entities.investors)} investors, "
        f"{len(corpus.entities.people)} people, "
        f"{len(corpus.entities.topics)} topics, "
        f"{len(corpus.entities.quotes)} quotes."
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the corpus build; returns the exit status."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(log_level="INFO", stream=sys.stderr)
    return asyncio.run(_run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
