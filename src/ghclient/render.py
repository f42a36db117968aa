"""Text rendering for items and result pages"""

from __future__ import annotations

import sys
from typing import TextIO

from ghclient.types import DataSource, Item, Result

STAR = "⭐️"
GREEN = "\033[32m"
RESET = "\033[0m"
STAR_LABEL_WIDTH = 10

_OFFICIAL_TEMPLATE = """
\tName       : {name}
\tURL        : {url}
\tStar       : {star} {stars}
\tClone URL  : {clone_url}
\tDescription: {description}
\tWatchers   : {watchers}
\tTopics     : {topics}
\tLanguage   : {language}
\tCreatedAt  : {created_at}
\tUpdatedAt  : {updated_at}
\t"""

_TRENDING_TEMPLATE = """
\tName       : {name}
\tURL        : {url}
\tStar       : {star} {stars}
\tClone URL  : {clone_url}
\tDescription: {description}
\tLanguage   : {language}
\t"""


def _format_topics(topics: list[str]) -> str:
    return "[" + " ".join(topics) + "]"


def render_item(item: Item) -> str:
    """Render the detail block for one item.

    Items from the search API get the full layout with the raw official
    fields; anything else gets the compact layout built from the resolved
    accessors.
    """
    if item.data_source == DataSource.OFFICIAL_API:
        return _OFFICIAL_TEMPLATE.format(
            name=item.get_repository_name(),
            url=item.get_repository_url(),
            star=STAR,
            stars=item.stargazers_count,
            clone_url=item.get_clone_url(),
            description=item.description,
            watchers=item.watchers,
            topics=_format_topics(item.topics),
            language=item.language,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
    return _TRENDING_TEMPLATE.format(
        name=item.get_repository_name(),
        url=item.get_repository_url(),
        star=STAR,
        stars=item.get_stars(),
        clone_url=item.get_clone_url(),
        description=item.get_description(),
        language=item.get_language(),
    )


def star_label(item: Item) -> str:
    """Star count label padded or truncated to a fixed width."""
    text = f" {STAR} {item.get_stars()}"
    return f"{text:<{STAR_LABEL_WIDTH}.{STAR_LABEL_WIDTH}}"


def draw(result: Result, writer: TextIO | None = None) -> None:
    """Write one colored summary line per item."""
    out = writer if writer is not None else sys.stdout
    for item in result.items:
        out.write(f"{star_label(item)}{GREEN}{item.get_repository_name()}{RESET}\n")
