"""Command-line entry point: ghclient search|trending|show|readme."""

from __future__ import annotations

import argparse
import logging
import sys

from ghclient.client import GitHubClient
from ghclient.config import load_config
from ghclient.exceptions import GitHubClientError
from ghclient.types import Item

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghclient",
        description="Search GitHub repositories and list trending ones.",
        epilog="""
Examples:
  ghclient search "language:go+stars:>1000"
  ghclient trending --lang python --since weekly
  ghclient show httpx --index 0
  ghclient readme encode/httpx
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subcommands = parser.add_subparsers(dest="command", required=True)

    search = subcommands.add_parser("search", help="List repositories matching a search query")
    search.add_argument("query", help="GitHub search query, passed through as written")

    trending = subcommands.add_parser("trending", help="List trending repositories")
    trending.add_argument("--lang", default="", help="Programming language filter")
    trending.add_argument("--since", default="", help="Period: daily, weekly or monthly")

    show = subcommands.add_parser("show", help="Show details of one search hit")
    show.add_argument("query", help="GitHub search query")
    show.add_argument("--index", type=int, default=0, help="Position of the hit to show (default: 0)")

    readme = subcommands.add_parser("readme", help="Show readme metadata of a repository")
    readme.add_argument("repository", help="Repository as owner/name")

    return parser


def _run(client: GitHubClient, args: argparse.Namespace) -> int:
    if args.command == "search":
        client.search_repository(args.query).draw(sys.stdout)
        return 0

    if args.command == "trending":
        client.get_trending_repository(args.lang, args.since).draw(sys.stdout)
        return 0

    if args.command == "show":
        result = client.search_repository(args.query)
        if not 0 <= args.index < len(result.items):
            print(f"No result at index {args.index} ({len(result.items)} found)", file=sys.stderr)
            return 1
        print(result.items[args.index])
        return 0

    readme = client.get_readme(Item(full_name=args.repository))
    print(f"Name        : {readme.name}")
    print(f"Path        : {readme.path}")
    print(f"URL         : {readme.html_url}")
    print(f"Download URL: {readme.download_url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or config.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    with GitHubClient.from_config(config) as client:
        try:
            return _run(client, args)
        except GitHubClientError as e:
            logger.debug("Request failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return 1
