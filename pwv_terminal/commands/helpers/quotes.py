"""Random quote and bork pickers shared by the fortune-style commands."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from pwv_terminal.models.corpus import Corpus

FORTUNE_FALLBACK = '"We invest to help make the future possible."\n— PWV'

PWV_SPEAKERS = ("Tom Preston-Werner", "David Price", "David Thyresson", "PWV")

BORK_VARIATIONS = (
    "Bork bork börk!",
    "Bork! Börk! Bork!",
    "Der bork bork börk!",
    "Yorn desh born, der ritt de gitt der gue,\n"
    "Orn desh, dee börn desh, de umn börk! börk! börk!",
    "Börk börk börk!\nDer Swedish Chef is in der hoose!",
    "Bork börk bork!\n*throws random kitchen utensils*",
    "Bork bork! Der terminal is yöörking!",
)


@dataclass(frozen=True)
class Fortune:
    """Rendered fortune text plus its shareable link, when it has one."""

    text: str
    showcase_url: str | None = None


def showcase_url(corpus: Corpus, index: int) -> str:
    return f"/showcase/quotes/{corpus.quote_id(index)}/"


def random_fortune(
    corpus: Corpus,
    rng: random.Random,
    speakers: Sequence[str] = (),
) -> Fortune:
    """Pick a quote uniformly, optionally restricted to *speakers*.

    A speaker matches when one of *speakers* appears, case-insensitively,
    inside the quote's speaker field.  An empty match falls back to all
    quotes, and an empty corpus to :data:`FORTUNE_FALLBACK`.  The share
    link always uses the quote's position in the full sequence.
    """
    quotes = corpus.quotes
    pool = list(range(len(quotes)))
    if speakers:
        wanted = [speaker.lower() for speaker in speakers]
        filtered = [i for i in pool if any(w in quotes[i].speaker.lower() for w in wanted)]
        pool = filtered or pool

    if not pool:
        return Fortune(FORTUNE_FALLBACK)

    index = rng.choice(pool)
    quote = quotes[index]
    return Fortune(
        text=f'"{quote.quote}"\n— {quote.speaker}',
        showcase_url=showcase_url(corpus, index),
    )


def random_bork(rng: random.Random) -> str:
    return rng.choice(BORK_VARIATIONS)
