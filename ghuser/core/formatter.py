"""Text rendering of profiles."""

from ghuser.models.profile import Profile


def format_profile(profile: Profile) -> str:
    """Render the four-line profile summary."""
    return (
        f"Usuário: {profile.login}\n"
        f"Nome: {profile.name}\n"
        f"Seguidores: {profile.followers}\n"
        f"Seguindo: {profile.following}"
    )
