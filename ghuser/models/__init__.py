"""Pydantic models for ghuser."""

from ghuser.models.profile import Profile

__all__ = [
    "Profile",
]
