"""Validated user profile handed to the recommendation engine."""

from pydantic import BaseModel, Field, field_validator


class UserProfile(BaseModel):
    """What a user told us about themselves.

    Interests and skills are treated as sets for scoring: duplicates collapse
    and order does not change any score. The first-seen order is kept only to
    list matched tags in match reasons. ``education_level`` stays a raw string
    so unrecognized levels reach the engine, which ranks them below every
    requirement.
    """
    education_level: str = Field(alias="educationLevel")
    interests: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    preferred_industry: str = Field(alias="preferredIndustry")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("interests", "skills")
    @classmethod
    def _dedupe_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(tags))
