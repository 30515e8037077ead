"""Unit tests for the team profile link commands."""

from __future__ import annotations

import pytest

from pwv_terminal.commands.utility import (
    BlueskyCommand,
    GithubCommand,
    LinkedinCommand,
    SocialsCommand,
    TwitterCommand,
    WwwCommand,
)
from pwv_terminal.commands.utility.team_links import bio_highlights
from pwv_terminal.models.corpus import Corpus


class TestArguments:
    def test_missing_target_shows_usage(self, corpus: Corpus) -> None:
        result = GithubCommand(corpus).execute("github", [])
        assert result.is_error
        assert result.content.startswith("Usage: github <tom|dp|dt>")
        assert "  github tom   - Tom Preston-Werner" in result.content

    def test_unknown_target(self, corpus: Corpus) -> None:
        result = GithubCommand(corpus).execute("github xyz", ["xyz"])
        assert result.is_error
        assert result.content.startswith('Unknown target: "xyz"')
        assert "Available options:" in result.content

    def test_target_is_case_insensitive(self, corpus: Corpus) -> None:
        result = GithubCommand(corpus).execute("github TOM", ["TOM"])
        assert result.data["url"] == "https://github.com/mojombo"


class TestServiceProfiles:
    def test_github(self, corpus: Corpus) -> None:
        result = GithubCommand(corpus).execute("github tom", ["tom"])

        assert not result.is_error
        assert "  USERNAME: mojombo" in result.content
        assert "  • Creator of Jekyll, TOML, and SemVer" in result.content
        assert "  • General Partner at PWV" in result.content

    def test_github_missing_handle(self, corpus: Corpus) -> None:
        result = GithubCommand(corpus).execute("github dp", ["dp"])
        assert result.is_error
        assert result.content == 'GitHub profile not found for "dp"'

    def test_twitter_via_x_alias(self, corpus: Corpus) -> None:
        command = TwitterCommand(corpus)
        assert command.matches("x tom")

        result = command.execute("x tom", ["tom"])
        assert "  HANDLE: @mojombo" in result.content
        assert result.data["url"] == "https://x.com/mojombo"

    def test_bluesky(self, corpus: Corpus) -> None:
        result = BlueskyCommand(corpus).execute("bsky dt", ["dt"])
        assert result.data["url"] == "https://bsky.app/profile/dthyresson.com"
        assert "  • RedwoodJS core team member. Writes about AI." in result.content

    def test_linkedin_company_page(self, corpus: Corpus) -> None:
        result = LinkedinCommand(corpus).execute("linkedin pwv", ["pwv"])
        assert result.data["url"] == LinkedinCommand.COMPANY_PAGE
        assert "  NAME: PWV (Preston-Werner Ventures)" in result.content

    def test_linkedin_member(self, corpus: Corpus) -> None:
        result = LinkedinCommand(corpus).execute("li dp", ["dp"])
        assert result.data["url"] == "https://www.linkedin.com/in/david-price/"
        assert "  • Operator turned investor." in result.content

    def test_no_team_listing(self, empty_corpus: Corpus) -> None:
        result = TwitterCommand(empty_corpus).execute("twitter tom", ["tom"])
        assert result.content == 'Twitter profile not found for "tom"'


class TestWww:
    def test_personal_site(self, corpus: Corpus) -> None:
        result = WwwCommand(corpus).execute("www dt", ["dt"])
        assert result.data["url"] == "https://dthyresson.com"
        assert ">> PERSONAL WEBSITE" in result.content

    def test_only_tom_and_dt(self, corpus: Corpus) -> None:
        result = WwwCommand(corpus).execute("www dp", ["dp"])
        assert result.is_error
        assert result.content.startswith('Unknown person: "dp"')

    def test_usage(self, corpus: Corpus) -> None:
        assert WwwCommand(corpus).execute("www", []).content.startswith("Usage: www <tom|dt>")


class TestSocials:
    def test_lists_every_link(self, corpus: Corpus) -> None:
        content = SocialsCommand(corpus).execute("socials dt", ["dt"]).content

        assert "  • Website: https://dthyresson.com" in content
        assert "  • GitHub: https://github.com/dthyresson" in content
        assert "  • Bluesky: https://bsky.app/profile/dthyresson.com" in content
        assert "Twitter/X" not in content

    def test_member_missing_from_listing(self, empty_corpus: Corpus) -> None:
        result = SocialsCommand(empty_corpus).execute("social tom", ["tom"])
        assert result.content == 'Team member not found for "tom"'


class TestBioHighlights:
    @pytest.mark.parametrize(
        ("bio", "expected"),
        [
            ("", []),
            ("Builder.", ["Builder."]),
            ("One. Two. Three.", ["One. Two."]),
        ],
    )
    def test_first_two_sentences(self, corpus: Corpus, bio: str, expected: list[str]) -> None:
        member = corpus.team[1].model_copy(update={"bio": bio})
        assert bio_highlights(member) == expected
