"""Refresh test fixtures from the live GitHub users API."""

import json
from datetime import datetime
from pathlib import Path

import httpx

from ghuser.config import LookupConfig
from ghuser.core.fetcher import fetch_user
from ghuser.core.formatter import format_profile
from ghuser.core.parser import parse_profile
from ghuser.exceptions import GhUserError

# Fixture accounts
USERNAMES = [
    "facebook",
]

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def refresh_account(client: httpx.Client, username: str, base_url: str) -> dict:
    """Fetch one account, save its body as a fixture and report it."""
    print(f"\n{'='*60}")
    print(f"Fetching {username}...")
    print(f"{'='*60}")

    start = datetime.now()
    try:
        result = fetch_user(client, username, base_url)
        profile = parse_profile(result.content)
    except GhUserError as e:
        print(f"❌ {e.__class__.__name__}: {e}")
        return {"username": username, "success": False, "error": str(e)}

    duration_ms = (datetime.now() - start).total_seconds() * 1000
    print(f"✓ HTTP {result.status_code} in {duration_ms:.0f}ms ({len(result.content)} bytes)")
    print(format_profile(profile))

    if result.ok:
        FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
        fixture_path = FIXTURES_DIR / f"{username}.json"
        fixture_path.write_text(
            json.dumps(json.loads(result.content), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        print(f"✓ Saved fixture: {fixture_path}")

    return {"username": username, "success": result.ok, "duration_ms": duration_ms}


def main():
    config = LookupConfig()
    with httpx.Client(follow_redirects=True) as client:
        results = [refresh_account(client, u, config.api_base_url) for u in USERNAMES]

    success_count = sum(1 for r in results if r.get("success"))
    print(f"\nRefreshed {success_count}/{len(results)} fixtures in tests/fixtures/")


if __name__ == "__main__":
    main()
