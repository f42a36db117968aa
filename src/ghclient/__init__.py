"""
ghclient - search GitHub repositories and list trending ones.

    from ghclient import GitHubClient

    with GitHubClient() as client:
        result = client.search_repository("language:go")
        result.draw()
        print(result.items[0])

Both upstreams are normalized into the same Item model; item.data_source
records which one produced it.
"""

from ghclient._version import __version__
from ghclient.client import GitHubClient
from ghclient.config import ClientConfig, load_config

# Exceptions
from ghclient.exceptions import DecodeError, GitHubClientError, TransportError
from ghclient.render import draw, render_item
from ghclient.types import (
    DataSource,
    Item,
    OfficialRepository,
    Readme,
    Result,
    TrendingRepository,
    item_from_official,
    item_from_trending,
)

__all__ = [
    # Client
    "GitHubClient",
    "ClientConfig",
    "load_config",
    # Types
    "DataSource",
    "Item",
    "OfficialRepository",
    "Readme",
    "Result",
    "TrendingRepository",
    "item_from_official",
    "item_from_trending",
    # Rendering
    "draw",
    "render_item",
    # Exceptions
    "GitHubClientError",
    "TransportError",
    "DecodeError",
    # Version
    "__version__",
]
