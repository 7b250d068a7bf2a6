"""HTTP fetcher for the GitHub users API."""

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from ghuser.exceptions import FetchError, ParseError


DEFAULT_HEADERS = {
    "Accept": "application/vnd.github+json",
    "User-Agent": "ghuser-cli",
}


@dataclass
class FetchResult:
    """Result of a fetch operation."""

    content: bytes
    status_code: int
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def build_user_url(identifier: str, base_url: str) -> str:
    """Build the users endpoint URL with the identifier path-encoded."""
    return f"{base_url.rstrip('/')}/users/{quote(identifier, safe='')}"


def fetch_user(client: httpx.Client, identifier: str, base_url: str) -> FetchResult:
    """
    Fetch the raw users API response for an identifier.

    The HTTP status is reported but never treated as a failure; only
    transport-level and content-decoding problems raise.

    Args:
        client: Open httpx client
        identifier: GitHub username
        base_url: API base URL (e.g. "https://api.github.com")

    Returns:
        FetchResult with the response body and status

    Raises:
        FetchError: On DNS, connection, timeout or redirect failures
        ParseError: If the body cannot be content-decoded
    """
    url = build_user_url(identifier, base_url)

    try:
        response = client.get(url, headers=DEFAULT_HEADERS)
    except httpx.DecodingError as e:
        raise ParseError(str(e) or e.__class__.__name__) from e
    except httpx.RequestError as e:
        raise FetchError(str(e) or e.__class__.__name__) from e

    try:
        return FetchResult(
            content=response.content,
            status_code=response.status_code,
            url=url,
        )
    finally:
        response.close()
