from pydantic import BaseModel, Field

from models.schemas.weight_profile import WeightProfile


class ScoredCareer(BaseModel):
    id: str
    title: str
    description: str = ""
    match_percent: int = Field(0, ge=0, le=100, alias="matchPercent")
    reason: str = ""
    growth_outlook: str = Field("", alias="growthOutlook")
    salary_range: str = Field("", alias="salaryRange")

    model_config = {"populate_by_name": True}


class RecommendResponse(BaseModel):
    careers: list[ScoredCareer] = []
    message: str | None = None  # only set when careers is empty


class SubScores(BaseModel):
    education: int = 0  # 0-100
    industry: int = 0  # 0 or 100
    interests: int = 0  # 0-100
    skills: int = 0  # 0-100


class ScoreBreakdown(BaseModel):
    """How a single career's match percentage was put together."""
    career_id: str = Field(alias="careerId")
    eligible: bool = False
    education_gap: int = Field(0, alias="educationGap")  # user rank - required rank
    sub_scores: SubScores = Field(SubScores(), alias="subScores")
    weights: WeightProfile
    match_percent: int = Field(0, ge=0, le=100, alias="matchPercent")
    matched_interests: list[str] = Field([], alias="matchedInterests")
    matched_skills: list[str] = Field([], alias="matchedSkills")

    model_config = {"populate_by_name": True}


class FormOption(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    education_levels: list[FormOption] = Field([], alias="educationLevels")
    industries: list[FormOption] = []
    interests: list[FormOption] = []
    skills: list[FormOption] = []

    model_config = {"populate_by_name": True}
