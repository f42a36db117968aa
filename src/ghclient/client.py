"""ghclient HTTP client"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ghclient._version import __version__
from ghclient.config import DEFAULT_OFFICIAL_URL, DEFAULT_TIMEOUT, DEFAULT_TRENDING_URL, ClientConfig
from ghclient.exceptions import DecodeError, TransportError
from ghclient.types import (
    Item,
    OfficialSearchPage,
    Readme,
    Result,
    TrendingPage,
    item_from_official,
    item_from_trending,
)

logger = logging.getLogger(__name__)

# Preview media type that includes repository topics in search results
ACCEPT_MEDIA_TYPE = "application/vnd.github.mercy-preview+json"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _join_url(base: str, *segments: str) -> str:
    """Append path segments to base, dropping empty ones."""
    parts = [segment.strip("/") for segment in segments]
    return "/".join([base, *(part for part in parts if part)])


class GitHubClient:
    """Sync client for the GitHub search API and the trending service"""

    def __init__(
        self,
        official_url: str = DEFAULT_OFFICIAL_URL,
        trending_url: str = DEFAULT_TRENDING_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            official_url: Root of the GitHub REST API
            trending_url: Endpoint of the trending repositories service
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.official_url = official_url.rstrip("/")
        self.trending_url = trending_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    @classmethod
    def from_config(cls, config: ClientConfig, transport: httpx.BaseTransport | None = None) -> "GitHubClient":
        return cls(
            official_url=config.official_url,
            trending_url=config.trending_url,
            timeout=config.timeout,
            transport=transport,
        )

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            headers = {
                "Accept": ACCEPT_MEDIA_TYPE,
                "User-Agent": f"ghclient/{__version__}",
            }
            self._client = httpx.Client(
                headers=headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def _get(self, url: str, model: type[ModelT]) -> ModelT:
        """GET url and decode the body into model.

        The status code is not checked: an error body is decoded like any
        other, which usually leaves an empty model or fails to decode.
        """
        client = self._get_client()
        try:
            request = client.build_request("GET", url)
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid request URL {url!r}: {e}", url=url) from e

        logger.debug(f"GET {request.url}")
        try:
            response = client.send(request, stream=True)
        except httpx.RequestError as e:
            raise TransportError(f"GET {request.url} failed: {e}", url=str(request.url)) from e

        try:
            body = response.read()
        except httpx.HTTPError as e:
            raise DecodeError(f"Failed to read response body: {e}", status_code=response.status_code) from e
        finally:
            response.close()

        if not response.is_success:
            logger.warning(f"GET {request.url} returned {response.status_code}")

        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Failed to decode {model.__name__} from response: {e}",
                status_code=response.status_code,
            ) from e

    def search_repository(self, query: str) -> Result:
        """Search repositories on the GitHub API.

        The query is placed into the URL as written, so search qualifiers
        such as ``language:go+stars:>100`` pass through untouched.
        """
        url = f"{_join_url(self.official_url, 'search', 'repositories')}?q={query}"
        page = self._get(url, OfficialSearchPage)
        items = [item_from_official(entry) for entry in page.items or []]
        logger.debug(f"Search {query!r} returned {len(items)} items")
        return Result(items=items)

    def get_readme(self, item: Item) -> Readme:
        """Fetch readme metadata for the item's repository."""
        url = _join_url(self.official_url, "repos", item.get_repository_name(), "readme")
        return self._get(url, Readme)

    def get_trending_repository(self, language: str = "", since: str = "") -> Result:
        """List trending repositories, optionally filtered by language and period.

        ``lang`` and ``since`` are added to any query already present in the
        trending URL.
        """
        params: dict[str, str] = {}
        if language:
            params["lang"] = language
        if since:
            params["since"] = since
        url = self.trending_url
        if params:
            try:
                url = str(httpx.URL(url).copy_merge_params(params))
            except httpx.InvalidURL as e:
                raise TransportError(f"Invalid request URL {url!r}: {e}", url=url) from e
        page = self._get(url, TrendingPage)
        items = [item_from_trending(entry) for entry in page.items or []]
        logger.debug(f"Trending lang={language!r} since={since!r} returned {len(items)} items")
        return Result(items=items)
