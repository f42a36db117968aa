"""ghclient types - the two upstream shapes and the normalized item model"""

from __future__ import annotations

import re
from enum import Enum
from typing import TextIO
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, Field, field_validator

# Whole-string signed decimal, ASCII digits only
_STARS_PATTERN = re.compile(r"[+-]?[0-9]+")
# A percent sign not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class DataSource(str, Enum):
    """Upstream service an item was fetched from"""

    OFFICIAL_API = "OfficialAPI"
    TRENDING_API = "TrendingAPI"


# =============================================================================
# Upstream shapes
# =============================================================================


class OfficialRepository(BaseModel):
    """A repository entry from the GitHub search API"""

    id: int | None = None
    name: str | None = None
    full_name: str | None = None
    html_url: str | None = None
    clone_url: str | None = None
    description: str | None = None
    stargazers_count: int | None = None
    watchers: int | None = None
    topics: list[str] | None = None
    language: str | None = None
    default_branch: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TrendingRepository(BaseModel):
    """A repository entry from the trending service"""

    name: str | None = None
    repo_link: str | None = None
    desc: str | None = None
    stars: str | None = None  # formatted, e.g. "1,234"
    lang: str | None = None

    @field_validator("stars", mode="before")
    @classmethod
    def _stars_as_text(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class OfficialSearchPage(BaseModel):
    """Envelope of a search API response"""

    items: list[OfficialRepository] | None = None


class TrendingPage(BaseModel):
    """Envelope of a trending service response"""

    items: list[TrendingRepository] | None = None


# =============================================================================
# Normalized model
# =============================================================================


class Item(BaseModel):
    """A single repository, normalized from either upstream.

    Both field sets are kept: official entries fill ``full_name``,
    ``html_url``, ``description``, ``stargazers_count`` and ``language``;
    trending entries fill ``url``, ``desc``, ``stars`` and ``lang``. The
    ``get_*`` accessors pick whichever side is populated.
    """

    id: int = 0
    name: str = ""
    full_name: str = ""
    url: str = ""
    html_url: str = ""
    clone_url: str = ""
    description: str = ""
    desc: str = ""
    stargazers_count: int = 0
    stars: str = ""
    watchers: int = 0
    topics: list[str] = Field(default_factory=list)
    language: str = ""
    lang: str = ""
    default_branch: str = ""
    created_at: str = ""
    updated_at: str = ""
    data_source: DataSource | None = None

    def get_repository_name(self) -> str:
        """Return ``owner/repo``, derived from the URL when ``full_name`` is empty.

        The URL path is percent-decoded. A URL that cannot be parsed, or whose
        path holds a malformed escape, gives ``""``.
        """
        if self.full_name:
            return self.full_name
        try:
            path = urlsplit(self.url).path
        except ValueError:
            return ""
        if _BAD_ESCAPE.search(path):
            return ""
        try:
            path = unquote(path, errors="strict")
        except UnicodeDecodeError:
            return ""
        return path.removeprefix("/")

    def get_stars(self) -> int:
        """Return the star count.

        The formatted ``stars`` text wins when it is a plain decimal (commas
        allowed) with a non-zero value, otherwise ``stargazers_count`` is used.
        A trending entry that really has zero stars therefore also falls back.
        """
        text = self.stars.replace(",", "")
        stars = int(text) if _STARS_PATTERN.fullmatch(text) else 0
        if stars == 0:
            return self.stargazers_count
        return stars

    def get_repository_url(self) -> str:
        return self.html_url or self.url

    def get_description(self) -> str:
        return self.description or self.desc

    def get_language(self) -> str:
        return self.language or self.lang

    def get_clone_url(self) -> str:
        url = self.get_repository_url()
        if not url.endswith(".git"):
            return url + ".git"
        return url

    def __str__(self) -> str:
        from ghclient.render import render_item

        return render_item(self)


class Readme(BaseModel):
    """Metadata and raw content of a repository readme"""

    name: str = ""
    path: str = ""
    html_url: str = ""
    download_url: str = ""
    content: str = ""  # as delivered, usually base64

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class Result(BaseModel):
    """One page of repositories"""

    items: list[Item] = Field(default_factory=list)

    def draw(self, writer: TextIO | None = None) -> None:
        """Write a one-line summary per item to ``writer`` (stdout by default)."""
        from ghclient.render import draw

        draw(self, writer)


# =============================================================================
# Mapping
# =============================================================================


def item_from_official(repo: OfficialRepository) -> Item:
    """Normalize a search API entry."""
    return Item(
        id=repo.id or 0,
        name=repo.name or "",
        full_name=repo.full_name or "",
        html_url=repo.html_url or "",
        clone_url=repo.clone_url or "",
        description=repo.description or "",
        stargazers_count=repo.stargazers_count or 0,
        watchers=repo.watchers or 0,
        topics=list(repo.topics or []),
        language=repo.language or "",
        default_branch=repo.default_branch or "",
        created_at=repo.created_at or "",
        updated_at=repo.updated_at or "",
        data_source=DataSource.OFFICIAL_API,
    )


def item_from_trending(repo: TrendingRepository) -> Item:
    """Normalize a trending service entry."""
    return Item(
        name=repo.name or "",
        url=repo.repo_link or "",
        desc=repo.desc or "",
        stars=repo.stars or "",
        lang=repo.lang or "",
        data_source=DataSource.TRENDING_API,
    )
