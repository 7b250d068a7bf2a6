"""Custom exception hierarchy for ghuser."""


class GhUserError(Exception):
    """Base exception for all ghuser errors."""


class FetchError(GhUserError):
    """Failed to reach the API (DNS, connection, timeout)."""


class ParseError(GhUserError):
    """Failed to decode the API response into a profile."""
