from typing import Any

from pydantic import BaseModel, Field, field_validator

from models.schemas.user_profile import UserProfile


class RecommendRequest(BaseModel):
    """Raw profile form as posted by the client.

    Every field is optional at the schema level; the router checks presence
    itself so each missing field gets its own user-facing message. Values are
    not length-limited: unknown levels and tags simply never match.
    """
    education_level: str | None = Field(None, alias="educationLevel")
    interests: list[str] | None = None
    skills: list[str] | None = None
    preferred_industry: str | None = Field(None, alias="preferredIndustry")

    model_config = {"populate_by_name": True}

    @field_validator("interests", "skills", mode="before")
    @classmethod
    def _non_list_as_missing(cls, value: Any) -> Any:
        # A non-list selection is reported like an empty one
        if not isinstance(value, list):
            return None
        return value

    def to_profile(self) -> UserProfile:
        return UserProfile(
            education_level=self.education_level or "",
            interests=self.interests or (),
            skills=self.skills or (),
            preferred_industry=self.preferred_industry or "",
        )
