"""ghclient exceptions"""


class GitHubClientError(Exception):
    """Base exception for ghclient"""

    pass


class TransportError(GitHubClientError):
    """Request could not be built or sent"""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class DecodeError(GitHubClientError):
    """Response body could not be read or decoded"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
