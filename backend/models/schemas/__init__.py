"""Domain contracts for the recommendation engine."""

from models.schemas.career_record import CareerRecord
from models.schemas.education import EducationLevel, education_rank
from models.schemas.user_profile import UserProfile
from models.schemas.weight_profile import WeightProfile

__all__ = [
    "CareerRecord",
    "EducationLevel",
    "UserProfile",
    "WeightProfile",
    "education_rank",
]
