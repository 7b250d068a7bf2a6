"""JSON decoding of users API responses."""

from pydantic import ValidationError

from ghuser.exceptions import ParseError
from ghuser.models.profile import Profile


def parse_profile(content: bytes | str) -> Profile:
    """
    Decode a users API JSON body into a Profile.

    Missing and null fields fall back to their zero values; unknown
    fields are ignored.

    Raises:
        ParseError: If the body is not a JSON object of the expected shape
    """
    try:
        return Profile.model_validate_json(content)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        reason = errors[0]["msg"] if errors else str(e)
        raise ParseError(reason) from e
