"""Unit tests for the Profile model."""

import pytest
from pydantic import ValidationError

from ghuser.models.profile import Profile


class TestProfileDefaults:
    """Missing fields fall back to zero values."""

    def test_empty_object(self):
        profile = Profile.model_validate({})
        assert profile.login == ""
        assert profile.name == ""
        assert profile.followers == 0
        assert profile.following == 0

    def test_nulls_become_zero_values(self):
        profile = Profile.model_validate(
            {"login": "ghost", "name": None, "followers": None, "following": None}
        )
        assert profile.login == "ghost"
        assert profile.name == ""
        assert profile.followers == 0
        assert profile.following == 0

    def test_unknown_fields_ignored(self):
        profile = Profile.model_validate({"login": "facebook", "public_repos": 150})
        assert profile.login == "facebook"
        assert not hasattr(profile, "public_repos")


class TestProfileImmutability:
    """Profiles are never mutated."""

    def test_frozen(self):
        profile = Profile(login="facebook")
        with pytest.raises(ValidationError):
            profile.login = "other"


class TestProfileStrictCounts:
    """Counts accept integers only."""

    @pytest.mark.parametrize("value", ["12", 3.5])
    def test_non_integer_counts_rejected(self, value):
        with pytest.raises(ValidationError):
            Profile.model_validate({"followers": value})

    def test_none_document(self):
        assert Profile.model_validate(None) == Profile()
