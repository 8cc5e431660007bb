"""Static catalog entry describing one career."""

from pydantic import BaseModel, Field, field_validator

from models.schemas.education import EducationLevel


class CareerRecord(BaseModel):
    """Read-only reference data, loaded once from the catalog file.

    ``interests`` and ``skills`` keep the order the catalog declares them in
    (used to order labels in match reasons) with duplicates removed.
    """
    id: str
    title: str
    description: str = ""
    industry: str
    education: EducationLevel  # minimum requirement
    interests: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    growth_outlook: str = Field("", alias="growthOutlook")
    salary_range: str = Field("", alias="salaryRange")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("interests", "skills")
    @classmethod
    def _dedupe_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(tags))
