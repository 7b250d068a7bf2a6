"""Profile data model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Profile(BaseModel):
    """Represents a GitHub user profile as returned by the users API."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = ""
    name: str = ""
    followers: int = Field(default=0, strict=True)
    following: int = Field(default=0, strict=True)

    @model_validator(mode="before")
    @classmethod
    def _null_document(cls, data):
        # A JSON null body decodes to an empty profile.
        return {} if data is None else data

    @field_validator("login", "name", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("followers", "following", mode="before")
    @classmethod
    def _null_to_zero(cls, value):
        return 0 if value is None else value
