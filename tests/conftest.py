"""Pytest configuration and shared fixtures for ghclient tests."""

import pytest

# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def official_repo_data():
    """A search API entry with the fields the client reads."""
    return {
        "id": 65600975,
        "name": "httpx",
        "full_name": "encode/httpx",
        "html_url": "https://github.com/encode/httpx",
        "clone_url": "https://github.com/encode/httpx.git",
        "description": "A next generation HTTP client for Python.",
        "stargazers_count": 13200,
        "watchers": 13200,
        "topics": ["http", "python", "asyncio"],
        "language": "Python",
        "default_branch": "master",
        "created_at": "2016-04-18T10:44:11Z",
        "updated_at": "2024-05-01T08:00:00Z",
        "forks_count": 850,
        "owner": {"login": "encode"},
    }


@pytest.fixture
def trending_repo_data():
    """A trending service entry."""
    return {
        "name": "fastapi",
        "repo_link": "https://github.com/tiangolo/fastapi",
        "desc": "FastAPI framework, high performance, easy to learn",
        "stars": "71,512",
        "lang": "Python",
        "added_stars": "312 stars today",
    }


@pytest.fixture
def readme_data():
    """A readme API response."""
    return {
        "name": "README.md",
        "path": "README.md",
        "sha": "a1b2c3",
        "html_url": "https://github.com/encode/httpx/blob/master/README.md",
        "download_url": "https://raw.githubusercontent.com/encode/httpx/master/README.md",
        "content": "IyBIVFRQWAo=\n",
        "encoding": "base64",
    }
