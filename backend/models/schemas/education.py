"""Ordinal education levels shared by user profiles and career requirements."""

from enum import Enum
from types import MappingProxyType


class EducationLevel(str, Enum):
    HIGHSCHOOL = "highschool"
    ASSOCIATE = "associate"
    BACHELOR = "bachelor"
    MASTER = "master"
    DOCTORATE = "doctorate"


# highschool=0 ... doctorate=4, in declaration order
EDUCATION_RANK = MappingProxyType(
    {level.value: rank for rank, level in enumerate(EducationLevel)}
)

UNKNOWN_RANK = -1


def education_rank(level: str) -> int:
    """Return the ordinal rank of an education level, -1 if unrecognized."""
    return EDUCATION_RANK.get(level, UNKNOWN_RANK)
