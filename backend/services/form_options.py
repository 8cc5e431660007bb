"""Selectable values for the profile form.

Values are the slugs the catalog uses; labels are display text.
"""

from models.responses import FormOption, OptionsResponse
from models.schemas.education import EducationLevel

EDUCATION_LABELS: dict[str, str] = {
    EducationLevel.HIGHSCHOOL.value: "High School Diploma",
    EducationLevel.ASSOCIATE.value: "Associate Degree",
    EducationLevel.BACHELOR.value: "Bachelor's Degree",
    EducationLevel.MASTER.value: "Master's Degree",
    EducationLevel.DOCTORATE.value: "Doctorate / PhD",
}

INDUSTRY_LABELS: dict[str, str] = {
    "it": "Information Technology",
    "healthcare": "Healthcare",
    "finance": "Finance & Economics",
    "engineering": "Engineering",
    "education": "Education",
    "media": "Media & Design",
    "environment": "Environment & Sustainability",
    "government": "Government & Public Service",
}

INTEREST_LABELS: dict[str, str] = {
    "technology": "Technology",
    "science": "Science",
    "design": "Design",
    "business": "Business",
    "finance": "Finance",
    "healthcare": "Healthcare",
    "education": "Education",
    "research": "Research",
    "communication": "Communication",
    "writing": "Writing",
    "leadership": "Leadership",
    "problem-solving": "Problem Solving",
    "innovation": "Innovation",
    "environment": "Environment",
    "engineering": "Engineering",
}

SKILL_LABELS: dict[str, str] = {
    "programming": "Programming",
    "mathematics": "Mathematics",
    "analytical-thinking": "Analytical Thinking",
    "communication": "Communication",
    "creativity": "Creativity",
    "leadership": "Leadership",
    "writing": "Writing",
    "logic": "Logic",
    "empathy": "Empathy",
    "laboratory-skills": "Laboratory Skills",
    "project-management": "Project Management",
}


def _options(labels: dict[str, str]) -> list[FormOption]:
    return [FormOption(value=value, label=label) for value, label in labels.items()]


def get_form_options() -> OptionsResponse:
    return OptionsResponse(
        education_levels=_options(EDUCATION_LABELS),
        industries=_options(INDUSTRY_LABELS),
        interests=_options(INTEREST_LABELS),
        skills=_options(SKILL_LABELS),
    )
