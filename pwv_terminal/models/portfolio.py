"""Portfolio and team listing models.

These come from static listings kept alongside the corpus rather than from
the extraction step.  A portfolio company may or may not also exist as a
company aggregate in the corpus; the two are joined only by a
case-insensitive name match at render time.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FundBucket(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """The four fixed portfolio buckets, valued by their display label."""

    REPRESENTATIVE = "Representative"
    FUND_ONE = "Fund I"
    ROLLING_FUND = "Rolling Fund"
    ANGEL = "Angel"


class PortfolioCompany(BaseModel):
    """One company in the static portfolio listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    url: str = ""
    slug: str = ""
    tags: list[str] = Field(default_factory=list)
    formerly: str | None = None
    acquired_by: str | None = Field(default=None, alias="acquiredBy")


class PortfolioEntry(BaseModel):
    """A portfolio company tagged with the bucket it was listed under."""

    model_config = ConfigDict(frozen=True)

    company: PortfolioCompany
    fund: FundBucket

    @property
    def name(self) -> str:
        return self.company.name


class PortfolioListing(BaseModel):
    """The portfolio grouped into its four buckets."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    representative: list[PortfolioCompany] = Field(default_factory=list)
    fund_one: list[PortfolioCompany] = Field(default_factory=list, alias="fundOne")
    rolling_fund: list[PortfolioCompany] = Field(default_factory=list, alias="rollingFund")
    angel: list[PortfolioCompany] = Field(default_factory=list)

    def bucket(self, fund: FundBucket) -> list[PortfolioCompany]:
        return {
            FundBucket.REPRESENTATIVE: self.representative,
            FundBucket.FUND_ONE: self.fund_one,
            FundBucket.ROLLING_FUND: self.rolling_fund,
            FundBucket.ANGEL: self.angel,
        }[fund]

    def entries(self) -> list[PortfolioEntry]:
        """Every bucket flattened and sorted by name, ignoring case."""
        merged = [
            PortfolioEntry(company=company, fund=fund)
            for fund in FundBucket
            for company in self.bucket(fund)
        ]
        return sorted(merged, key=lambda entry: entry.name.casefold())

    def count(self) -> int:
        """Total number of companies across all buckets."""
        return sum(len(self.bucket(fund)) for fund in FundBucket)


class TeamMember(BaseModel):
    """A PWV team member and their public profile handles."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    title: str = ""
    bio: str = ""
    slug: str
    linkedin: str | None = None
    twitter: str | None = None
    github: str | None = None
    bluesky: str | None = None
    website: str | None = None
    is_general_partner: bool = Field(default=False, alias="isGeneralPartner")
