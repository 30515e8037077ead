"""Team profile link commands: socials, github, twitter, linkedin, bluesky, www.

Every command takes one short target (``tom``, ``dp``, ``dt``) that maps
to a team member slug in the static team listing, then renders that
member's profile on one service.  Results carry ``data.url`` so the shell
can offer to open it.
"""

from __future__ import annotations

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.helpers.box_builder import (
    BoxSection,
    build_box,
    divider,
    empty,
    header,
    key_value,
    text,
)
from pwv_terminal.models.portfolio import TeamMember
from pwv_terminal.models.terminal import CommandCategory, CommandResult

TEAM_SLUGS = {
    "tom": "tom-preston-werner",
    "dp": "david-price",
    "dt": "david-thyresson",
}

TARGET_NAMES = {
    "pwv": "PWV company page",
    "tom": "Tom Preston-Werner",
    "dp": "David Price",
    "dt": "David Thyresson",
}


def bio_highlights(member: TeamMember) -> list[str]:
    """First two sentences of the bio plus the partner badge."""
    highlights = []
    sentences = [s for s in member.bio.split(". ")[:2] if s]
    if sentences:
        summary = ". ".join(sentences)
        if len(sentences) > 1 and not summary.endswith("."):
            summary += "."
        highlights.append(summary)
    if member.is_general_partner:
        highlights.append("General Partner at PWV")
    return highlights


def link_panel(title: str, fields: dict[str, str], highlights: list[str], url: str) -> CommandResult:
    sections: list[BoxSection] = [
        header(title),
        key_value(fields),
        divider(),
        text("HIGHLIGHTS:"),
        empty(),
    ]
    sections += [text(f"  • {highlight}") for highlight in highlights]
    sections += [
        divider(),
        text(f"Visit: {url}"),
        empty(),
        text("Click the link above to visit."),
    ]
    return CommandResult.text(build_box(sections), url=url)


class TeamCommand(BaseCommand):
    """Argument parsing and team lookup shared by the link commands."""

    targets: tuple[str, ...] = ("tom", "dp", "dt")
    target_word = "target"

    @property
    def category(self) -> CommandCategory:
        return CommandCategory.OTHER

    @property
    def usage(self) -> str:
        return f"{self.name} <{'|'.join(self.targets)}>"

    def usage_error(self) -> CommandResult:
        examples = "\n".join(
            f"  {f'{self.name} {target}'.ljust(len(self.name) + 7)}- {TARGET_NAMES[target]}"
            for target in self.targets
        )
        return CommandResult.error(f"Usage: {self.usage}\n\nExamples:\n{examples}")

    def unknown_target(self, target: str) -> CommandResult:
        options = "\n".join(
            f"  {candidate.ljust(7)}- {TARGET_NAMES[candidate]}" for candidate in self.targets
        )
        return CommandResult.error(
            f'Unknown {self.target_word}: "{target}"\n\nAvailable options:\n{options}'
        )

    def find_member(self, target: str) -> TeamMember | None:
        slug = TEAM_SLUGS.get(target)
        return next((member for member in self._corpus.team if member.slug == slug), None)

    def execute(self, raw_input: str, args: list[str]) -> CommandResult:
        if not args:
            return self.usage_error()
        target = args[0].lower()
        special = self.special_target(target)
        if special is not None:
            return special
        if target not in self.targets or target not in TEAM_SLUGS:
            return self.unknown_target(target)
        return self.render(target, self.find_member(target))

    def special_target(self, target: str) -> CommandResult | None:
        """Hook for targets that are not team members (``linkedin pwv``)."""
        return None

    def render(self, target: str, member: TeamMember | None) -> CommandResult:
        raise NotImplementedError


class ServiceProfileCommand(TeamCommand):
    """One service's profile of a team member, e.g. GitHub or Bluesky."""

    service: str
    panel_title: str
    handle_attr: str
    handle_label: str | None = None
    default_highlights: tuple[str, ...] = ()

    @property
    def description(self) -> str:
        return f"View {self.service} profiles"

    def profile_url(self, handle: str) -> str:
        raise NotImplementedError

    def display_handle(self, handle: str) -> str:
        return handle

    def highlights(self, target: str, member: TeamMember) -> list[str]:
        return bio_highlights(member) or list(self.default_highlights)

    def render(self, target: str, member: TeamMember | None) -> CommandResult:
        handle = getattr(member, self.handle_attr, None) if member else None
        if member is None or not handle:
            return CommandResult.error(f'{self.service} profile not found for "{target}"')

        url = self.profile_url(handle)
        fields = {"NAME": member.name}
        if self.handle_label:
            fields[self.handle_label] = self.display_handle(handle)
        fields["TITLE"] = member.title
        fields["PROFILE"] = url
        return link_panel(self.panel_title, fields, self.highlights(target, member), url)


class GithubCommand(ServiceProfileCommand):
    service = "GitHub"
    panel_title = "GITHUB PROFILE"
    handle_attr = "github"
    handle_label = "USERNAME"
    default_highlights = ("Open source projects", "Code contributions")

    _CUSTOM = {
        "tom": ["Co-founder of GitHub", "Creator of Jekyll, TOML, and SemVer", "Open source pioneer"],
        "dt": [
            "Core team member of RedwoodJS",
            "Full-stack development expertise",
            "Open source contributor",
        ],
    }

    @property
    def name(self) -> str:
        return "github"

    @property
    def aliases(self) -> list[str]:
        return ["github", "gh"]

    def profile_url(self, handle: str) -> str:
        return f"https://github.com/{handle}"

    def highlights(self, target: str, member: TeamMember) -> list[str]:
        if target not in self._CUSTOM:
            return super().highlights(target, member)
        highlights = list(self._CUSTOM[target])
        if member.is_general_partner:
            highlights.append("General Partner at PWV")
        return highlights


class TwitterCommand(ServiceProfileCommand):
    service = "Twitter"
    panel_title = "TWITTER / X PROFILE"
    handle_attr = "twitter"
    handle_label = "HANDLE"
    default_highlights = ("Technology insights and updates", "Industry perspectives")

    @property
    def name(self) -> str:
        return "twitter"

    @property
    def aliases(self) -> list[str]:
        return ["twitter", "x"]

    def profile_url(self, handle: str) -> str:
        return f"https://x.com/{handle}"

    def display_handle(self, handle: str) -> str:
        return f"@{handle}"


class BlueskyCommand(ServiceProfileCommand):
    service = "Bluesky"
    panel_title = "BLUESKY PROFILE"
    handle_attr = "bluesky"
    handle_label = "HANDLE"
    default_highlights = ("Technology insights and updates", "Industry perspectives")

    @property
    def name(self) -> str:
        return "bluesky"

    @property
    def aliases(self) -> list[str]:
        return ["bluesky", "bsky"]

    def profile_url(self, handle: str) -> str:
        return f"https://bsky.app/profile/{handle}"


class LinkedinCommand(ServiceProfileCommand):
    """LinkedIn profiles, plus the PWV company page for ``linkedin pwv``."""

    service = "LinkedIn"
    panel_title = "LINKEDIN PROFILE"
    handle_attr = "linkedin"
    targets = ("pwv", "tom", "dp", "dt")
    default_highlights = (
        "Professional background and experience",
        "Investment insights and perspectives",
    )

    COMPANY_PAGE = "https://www.linkedin.com/company/pwventures/"

    @property
    def name(self) -> str:
        return "linkedin"

    @property
    def aliases(self) -> list[str]:
        return ["linkedin", "li"]

    def profile_url(self, handle: str) -> str:
        return f"https://www.linkedin.com/in/{handle}/"

    def special_target(self, target: str) -> CommandResult | None:
        if target != "pwv":
            return None
        fields = {
            "NAME": "PWV (Preston-Werner Ventures)",
            "TITLE": "Early-stage venture capital firm",
            "PROFILE": self.COMPANY_PAGE,
        }
        highlights = [
            "Company updates and announcements",
            "Portfolio company news",
            "Team insights and perspectives",
            "Industry thought leadership",
        ]
        return link_panel(self.panel_title, fields, highlights, self.COMPANY_PAGE)

    def highlights(self, target: str, member: TeamMember) -> list[str]:
        highlights = bio_highlights(member)
        if member.website:
            highlights.append("Personal website available")
        return highlights or list(self.default_highlights)


class WwwCommand(TeamCommand):
    """Personal websites; only Tom and David T. have one."""

    targets = ("tom", "dt")
    target_word = "person"

    _HIGHLIGHTS = {
        "tom": [
            "Blog posts on software & entrepreneurship",
            "Open source projects (Jekyll, TOML, Semantic Versioning)",
            "Talks and media appearances",
        ],
        "dt": [
            "Latest writings on AI, startups, and technology",
            "Personal reflections and perspectives",
            "Background and experience",
        ],
    }

    @property
    def name(self) -> str:
        return "www"

    @property
    def aliases(self) -> list[str]:
        return ["www"]

    @property
    def description(self) -> str:
        return "Visit personal websites"

    def usage_error(self) -> CommandResult:
        return CommandResult.error(
            "Usage: www <tom|dt>\n\nExamples:\n"
            "  www tom    - Tom Preston-Werner's website\n"
            "  www dt     - David Thyresson's website"
        )

    def render(self, target: str, member: TeamMember | None) -> CommandResult:
        if member is None or not member.website:
            return CommandResult.error(f'Website not found for "{target}"')
        fields = {"NAME": member.name, "TITLE": member.title, "WEBSITE": member.website}
        return link_panel("PERSONAL WEBSITE", fields, self._HIGHLIGHTS[target], member.website)


class SocialsCommand(TeamCommand):
    """Every link a team member has, in one panel."""

    @property
    def name(self) -> str:
        return "socials"

    @property
    def aliases(self) -> list[str]:
        return ["socials", "social"]

    @property
    def description(self) -> str:
        return "View all social links"

    def usage_error(self) -> CommandResult:
        return CommandResult.error(
            "Usage: socials <tom|dp|dt>\n\nExamples:\n"
            "  socials tom   - All social links for Tom Preston-Werner\n"
            "  socials dp    - All social links for David Price\n"
            "  socials dt    - All social links for David Thyresson"
        )

    def render(self, target: str, member: TeamMember | None) -> CommandResult:
        if member is None:
            return CommandResult.error(f'Team member not found for "{target}"')

        links = []
        if member.website:
            links.append(("Website", member.website))
        if member.linkedin:
            links.append(("LinkedIn", f"https://www.linkedin.com/in/{member.linkedin}/"))
        if member.twitter:
            links.append(("Twitter/X", f"https://x.com/{member.twitter}"))
        if member.github:
            links.append(("GitHub", f"https://github.com/{member.github}"))
        if member.bluesky:
            links.append(("Bluesky", f"https://bsky.app/profile/{member.bluesky}"))

        sections: list[BoxSection] = [
            header("SOCIAL LINKS"),
            key_value({"NAME": member.name, "TITLE": member.title}),
            divider(),
            text("AVAILABLE LINKS:"),
            empty(),
        ]
        sections += [text(f"  • {label}: {url}") for label, url in links]
        if not links:
            sections.append(text("  No social links available."))
        sections += [divider(), text("Click any link above to visit.")]
        return CommandResult.text(build_box(sections))
