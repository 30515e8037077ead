"""LLM-based entity extraction for blog posts.

Sends a post's title, front matter and plain-text body to an LLM provider
with a structured extraction prompt, then parses and normalises the JSON
reply into a :class:`~pwv_terminal.models.corpus.Post` record.

Architecture: LLM-as-Parser with Two-Pass Retry
-------------------------------------------------
Posts range from long essays to a title and three tags.  The prompt is
deliberately pragmatic: it tells the model to use every scrap of metadata
(tags are the best topic source, the author field is a person, a title
like "Acme Closes $10M Seed" yields a company, a figure and a fact).

  - **Pass 1** sends the detailed prompt.
  - **Pass 2** (only when Pass 1 is unparseable) sends a minimal prompt at
    a lower temperature.  If that also fails, :class:`EntityExtractionError`
    is raised and the corpus builder skips the post for this run.

Normalisation is forgiving: anything malformed is dropped item by item
rather than failing the whole post.
"""

from __future__ import annotations

import datetime
import json
import re
from typing import Any

from pwv_terminal.interfaces.llm_provider import ILLMProvider
from pwv_terminal.models.corpus import FactCategory, Post
from pwv_terminal.utils.errors import EntityExtractionError
from pwv_terminal.utils.logging import get_logger

# Markdown code fences (```json ... ``` or ``` ... ```) wrapped around JSON.
_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_MD_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_MD_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_MD_HEADING_RE = re.compile(r"^\s{0,3}#{1,6}\s*", re.MULTILINE)
_MD_EMPHASIS_RE = re.compile(r"(\*\*|__|\*|_|`+)")
_MD_IMPORT_RE = re.compile(r"^(import|export)\s.*$", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"[ \t]+")

# Bodies shorter than this carry too little text on their own, so the
# metadata block replaces them instead of being prepended.
MIN_BODY_CHARS = 100

_FACT_CATEGORIES = [category.value for category in FactCategory]

SYSTEM_PROMPT = (
    "You are an expert at extracting structured information from text, "
    "including titles, descriptions, and content. You are pragmatic and work "
    "with whatever information is available. You always respond with valid "
    "JSON only, with no additional text or explanation."
)

SEPARATOR = "─" * 60


def markdown_to_text(markdown: str) -> str:
    """Reduce Markdown/MDX to plain text for prompting."""
    text = _MD_IMPORT_RE.sub("", markdown)
    text = _MD_IMAGE_RE.sub(r"\1", text)
    text = _MD_LINK_RE.sub(r"\1", text)
    text = _HTML_TAG_RE.sub(" ", text)
    text = _MD_HEADING_RE.sub("", text)
    text = _MD_EMPHASIS_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def frontmatter_date(value: Any) -> str | None:
    """ISO ``YYYY-MM-DD`` for a front matter date, whatever YAML made of it."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return str(value).strip().strip("'\"")[:10] or None


def frontmatter_tags(value: Any) -> list[str]:
    if isinstance(value, list):
        return [str(tag).strip() for tag in value if str(tag).strip()]
    if isinstance(value, str) and value.strip():
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return []


class EntityExtractor:
    """Extracts companies, people, facts and more from one post via an LLM.

    Parameters
    ----------
    llm_provider:
        The LLM backend used for text completion.
    max_chars:
        Upper bound on the prompt context (metadata plus body).
    temperature:
        Sampling temperature of the primary pass.
    max_tokens:
        Response token budget of both passes.
    """

    def __init__(
        self,
        llm_provider: ILLMProvider,
        max_chars: int = 3500,
        temperature: float = 0.1,
        max_tokens: int = 2000,
    ) -> None:
        self._llm = llm_provider
        self._max_chars = max_chars
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def extract(
        self,
        slug: str,
        title: str,
        body: str,
        frontmatter: dict[str, Any] | None = None,
    ) -> Post:
        """Extract one post record.

        Parameters
        ----------
        slug:
            Post identifier (file name without extension).
        title:
            Display title.
        body:
            Raw Markdown/MDX body.
        frontmatter:
            Parsed front matter; ``description``, ``author``, ``tags``,
            ``url`` and ``pubDate`` are used when present.

        Returns
        -------
        Post
            The post with its front matter fields and extracted entities.

        Raises
        ------
        EntityExtractionError
            If the LLM returns unparseable JSON on both attempts.
        LLMError
            If the provider call itself fails.
        """
        frontmatter = frontmatter or {}
        context = self.build_context(title, body, frontmatter)
        provider_name = self._llm.get_provider_name()
        self._logger.info(
            "entity_extraction_start",
            slug=slug,
            context_chars=len(context),
            llm_provider=provider_name,
        )

        # ----- Pass 1: detailed prompt -----
        try:
            response = await self._llm.complete(
                system_prompt=SYSTEM_PROMPT,
                user_prompt=self._build_extraction_prompt(context),
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                json_mode=True,
            )
            parsed = self.parse_llm_response(response)
        except (json.JSONDecodeError, ValueError) as exc:
            self._logger.warning(
                "primary_extraction_failed",
                slug=slug,
                error=str(exc),
                provider=provider_name,
            )
            parsed = None

        # ----- Pass 2: minimal prompt -----
        if parsed is None:
            self._logger.info("retrying_with_simple_prompt", slug=slug, provider=provider_name)
            try:
                response = await self._llm.complete(
                    system_prompt="You extract data from text and return valid JSON.",
                    user_prompt=self._build_simple_prompt(context),
                    temperature=0.0,
                    max_tokens=self._max_tokens,
                    json_mode=True,
                )
                parsed = self.parse_llm_response(response)
            except (json.JSONDecodeError, ValueError) as exc:
                self._logger.error(
                    "retry_extraction_failed",
                    slug=slug,
                    error=str(exc),
                    provider=provider_name,
                )
                raise EntityExtractionError(
                    message=f"LLM returned unparseable JSON for {slug} after retry: {exc}",
                    provider_name=provider_name,
                ) from exc

        entities = self.normalize(parsed)
        post = Post(
            slug=slug,
            title=title,
            pub_date=frontmatter_date(frontmatter.get("pubDate")),
            author=str(frontmatter.get("author") or "").strip("'\" ") or None,
            url=str(frontmatter.get("url") or "") or None,
            tags=frontmatter_tags(frontmatter.get("tags")),
            **entities,
        )
        self._logger.info(
            "entity_extraction_complete",
            slug=slug,
            companies=len(post.companies),
            people=len(post.people),
            facts=len(post.facts),
        )
        return post

    # ------------------------------------------------------------------
    # Prompt construction
    # ------------------------------------------------------------------

    def build_context(self, title: str, body: str, frontmatter: dict[str, Any]) -> str:
        """Metadata block plus plain-text body, capped at ``max_chars``."""
        parts = [f"Title: {title}"]
        if frontmatter.get("description"):
            parts.append(f"Description: {frontmatter['description']}")
        if frontmatter.get("author"):
            parts.append(f"Author: {frontmatter['author']}")
        tags = frontmatter_tags(frontmatter.get("tags"))
        if tags:
            parts.append(f"Tags: {', '.join(tags)}")
        if frontmatter.get("url"):
            parts.append(f"Source: {frontmatter['url']}")
        metadata = "\n\n".join(parts)

        text = markdown_to_text(body)
        if len(text) < MIN_BODY_CHARS:
            context = metadata
        else:
            context = f"{metadata}\n\n---\n\nContent:\n{text}"
        return context[: self._max_chars]

    @staticmethod
    def _build_extraction_prompt(context: str) -> str:
        """Build the primary, detailed extraction prompt."""
        return (
            "Extract structured information from this blog post. Use ALL available "
            "information including title, description, tags, author, and content. "
            "Be pragmatic - extract what you can find.\n"
            "\n"
            "AVAILABLE INFORMATION:\n"
            f"{context}\n"
            "\n"
            f"{SEPARATOR}\n"
            "\n"
            "1. COMPANIES\n"
            "   • Business organizations, startups, or corporations mentioned\n"
            "   • Exclude: open-source projects (Git, Linux), programming languages, frameworks\n"
            '   • If the title mentions a company (e.g., "Aalo Closes $100M"), extract it!\n'
            "\n"
            "2. INVESTORS\n"
            "   • Venture firms, funds, and angel investors mentioned as investing\n"
            "\n"
            "3. PEOPLE\n"
            "   • People mentioned by name, with their role/title if mentioned\n"
            '   • Example: {"name": "Tom Preston-Werner", "role": "Co-founder"}\n'
            '   • The Author field is a person with role "Author"\n'
            "\n"
            "4. FACTS\n"
            "   • Key statements, insights, or announcements\n"
            f"   • Categories: {', '.join(_FACT_CATEGORIES)}\n"
            "\n"
            "5. FIGURES\n"
            "   • Numbers with context: funding amounts, metrics, percentages\n"
            '   • Format: {"value": "100M", "context": "Series B funding", "unit": "USD"}\n'
            "\n"
            "6. TOPICS\n"
            "   • Main themes; use the Tags field as the primary source\n"
            "\n"
            "7. QUOTES\n"
            "   • Direct quotations with the speaker's name\n"
            "\n"
            f"{SEPARATOR}\n"
            "\n"
            "Empty arrays are fine for categories with no information.\n"
            "\n"
            "Return ONLY valid JSON with this exact structure:\n"
            "{\n"
            '  "companies": ["Company 1", ...],\n'
            '  "investors": ["Investor 1", ...],\n'
            '  "people": [{"name": "First Last", "role": "Their Role"}, ...],\n'
            '  "facts": [{"text": "A fact", "category": "insight"}, ...],\n'
            '  "figures": [{"value": "100M", "context": "What it means", "unit": "USD"}, ...],\n'
            '  "topics": ["Topic 1", ...],\n'
            '  "quotes": [{"quote": "Exact words", "speaker": "Name", "context": "Where"}, ...]\n'
            "}"
        )

    @staticmethod
    def _build_simple_prompt(context: str) -> str:
        """Build a minimal fallback prompt for the retry attempt."""
        return (
            "Extract entities from this blog post and return valid JSON.\n"
            "\n"
            "Keys: companies (list of strings), investors (list of strings), "
            "people (list of {name, role}), facts (list of {text, category}), "
            "figures (list of {value, context, unit}), topics (list of strings), "
            "quotes (list of {quote, speaker, context}).\n"
            "\n"
            f"Text:\n{context}"
        )

    # ------------------------------------------------------------------
    # Response parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_llm_response(response: str) -> dict[str, Any]:
        """Extract the JSON object from an LLM response string.

        Raises
        ------
        json.JSONDecodeError
            If no valid JSON can be extracted.
        ValueError
            If the JSON is not an object.
        """
        text = response.strip()

        fence_match = _JSON_FENCE_RE.search(text)
        if fence_match:
            text = fence_match.group(1).strip()

        # Preamble such as "Here is the data: {...}".
        if not text.startswith("{"):
            brace_start = text.find("{")
            brace_end = text.rfind("}")
            if brace_start != -1 and brace_end > brace_start:
                text = text[brace_start : brace_end + 1]

        parsed = json.loads(text)
        if not isinstance(parsed, dict):
            raise ValueError("LLM response is not a JSON object")
        return parsed

    @staticmethod
    def normalize(parsed: dict[str, Any]) -> dict[str, list]:
        """Keep only well-formed items, in the post record's shape."""

        def strings(key: str) -> list[str]:
            values = parsed.get(key)
            if not isinstance(values, list):
                return []
            return [v.strip() for v in values if isinstance(v, str) and v.strip()]

        def objects(key: str) -> list[dict[str, Any]]:
            values = parsed.get(key)
            if not isinstance(values, list):
                return []
            return [v for v in values if isinstance(v, dict)]

        people = []
        for person in objects("people"):
            name = str(person.get("name") or "").strip()
            if name:
                people.append({"name": name, "role": str(person.get("role") or "Unknown").strip()})

        facts = []
        for fact in objects("facts"):
            fact_text = str(fact.get("text") or "").strip()
            if not fact_text:
                continue
            category = str(fact.get("category") or "").strip().lower()
            entry = {
                "text": fact_text,
                "category": category if category in _FACT_CATEGORIES else FactCategory.INSIGHT.value,
            }
            if fact.get("date"):
                entry["date"] = str(fact["date"])
            facts.append(entry)

        figures = []
        for figure in objects("figures"):
            value = str(figure.get("value") or "").strip()
            context = str(figure.get("context") or "").strip()
            if value and context:
                figures.append(
                    {"value": value, "context": context, "unit": str(figure.get("unit") or "").strip()}
                )

        quotes = []
        for quote in objects("quotes"):
            words = str(quote.get("quote") or "").strip()
            speaker = str(quote.get("speaker") or "").strip()
            if words and speaker:
                entry = {"quote": words, "speaker": speaker}
                if quote.get("context"):
                    entry["context"] = str(quote["context"]).strip()
                quotes.append(entry)

        return {
            "companies": strings("companies"),
            "investors": strings("investors"),
            "people": people,
            "facts": facts,
            "figures": figures,
            "topics": strings("topics"),
            "quotes": quotes,
        }
