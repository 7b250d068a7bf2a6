"""User lookup pipeline - coordinates fetching, decoding and printing."""

import httpx
from rich.console import Console

from ghuser.config import LookupConfig
from ghuser.core.fetcher import fetch_user
from ghuser.core.formatter import format_profile
from ghuser.core.parser import parse_profile
from ghuser.exceptions import FetchError, ParseError
from ghuser.logging import configure_logging, get_logger
from ghuser.models.profile import Profile


class UserLookup:
    """
    Looks up a single GitHub user and prints the profile summary.

    Example:
        lookup = UserLookup()
        lookup.get_user("facebook")
    """

    def __init__(
        self,
        config: LookupConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ):
        """
        Initialize lookup with optional configuration.

        Args:
            config: LookupConfig instance, uses defaults if None
            transport: httpx transport override, used to stub the API
            console: Console receiving the profile output
            err_console: Console receiving error messages
        """
        self.config = config or LookupConfig()
        self._transport = transport
        self._console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        self._err_console = err_console or Console(
            stderr=True, highlight=False, emoji=False, soft_wrap=True
        )
        configure_logging(self.config)
        self._log = get_logger("lookup")

    def _client(self) -> httpx.Client:
        return httpx.Client(transport=self._transport, follow_redirects=True)

    def lookup(self, identifier: str) -> Profile:
        """
        Fetch and decode a profile.

        Args:
            identifier: GitHub username

        Returns:
            Decoded Profile

        Raises:
            FetchError: On transport failure
            ParseError: If the body cannot be decoded
        """
        self._log.info("lookup_start", user=identifier)

        with self._client() as client:
            result = fetch_user(client, identifier, self.config.api_base_url)

        if not result.ok:
            # Decoded anyway; the API still answers with a JSON object.
            self._log.warning(
                "unexpected_status",
                user=identifier,
                status_code=result.status_code,
                url=result.url,
            )

        profile = parse_profile(result.content)
        self._log.info("lookup_complete", user=identifier, status_code=result.status_code)
        return profile

    def get_user(self, identifier: str) -> Profile | None:
        """
        Look up a user and print the four-line summary.

        Transport and decode failures are reported and swallowed.

        Returns:
            The Profile, or None when the lookup failed
        """
        try:
            profile = self.lookup(identifier)
        except FetchError as e:
            self._log.info("fetch_failed", user=identifier, error=str(e))
            self._err_console.print(f"Erro ao buscar o usuário: {e}", markup=False)
            return None
        except ParseError as e:
            self._log.info("parse_failed", user=identifier, error=str(e))
            self._err_console.print(f"Erro ao decodificar resposta: {e}", markup=False)
            return None

        self._console.print(format_profile(profile), markup=False)
        return profile
