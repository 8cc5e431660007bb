"""Per-industry weighting of the four scoring dimensions."""

from pydantic import BaseModel, Field


class WeightProfile(BaseModel):
    """Four non-negative weights that are expected to sum to 1.0.

    The sum is not enforced here; with a sum of 1.0 and 0-100 sub-scores the
    weighted match stays within 0-100.
    """
    edu: float = Field(ge=0.0)
    industry: float = Field(ge=0.0)
    interests: float = Field(ge=0.0)
    skills: float = Field(ge=0.0)

    model_config = {"frozen": True}

    @property
    def total(self) -> float:
        return self.edu + self.industry + self.interests + self.skills
