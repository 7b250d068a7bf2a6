"""
Integration tests - live lookups against the real GitHub API.

These tests require internet and are deselected by default; unauthenticated
requests are rate limited by GitHub.

Run with: pytest -m integration
"""

import pytest

from ghuser.cli import run
from ghuser.core.lookup import UserLookup

# Mark all tests in this module as integration tests (slow, requires internet)
pytestmark = pytest.mark.integration


class TestLiveLookup:
    """Live requests against api.github.com."""

    def test_known_user(self):
        profile = UserLookup().lookup("facebook")
        assert profile.login.lower() == "facebook"
        assert profile.followers >= 0

    def test_cli_output_shape(self, capsys):
        assert run(["--user", "facebook"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split(":")[0] for line in lines] == [
            "Usuário",
            "Nome",
            "Seguidores",
            "Seguindo",
        ]
