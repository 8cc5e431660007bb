"""Dimension scorers.

Each scorer returns an integer sub-score between 0 and 100. All logic is
deterministic and side-effect free.
"""

import math
from collections.abc import Collection, Iterable

from models.schemas.weight_profile import WeightProfile
from services.recommender.constants import (
    EDUCATION_GAP_SCORES,
    EDUCATION_OVERQUALIFIED_FLOOR,
    EMPTY_TAGS_SCORE,
    INDUSTRY_MATCH_SCORE,
    INDUSTRY_MISMATCH_SCORE,
    INTEREST_BREADTH_BONUS,
    INTEREST_BREADTH_THRESHOLD,
    INTEREST_DEPTH_BONUS,
    MAX_SCORE,
    OVERLAP_RATIO_SCALE,
    SKILL_PERFECT_BONUS,
    SKILL_VARIETY_BONUS,
    SKILL_VARIETY_THRESHOLD,
)


def round_half_up(value: float) -> int:
    """Round x.5 upwards instead of to the nearest even integer."""
    return math.floor(value + 0.5)


def matched_tags(user_tags: Iterable[str], career_tags: Collection[str]) -> list[str]:
    """User tags the career also declares, in the order the user selected them."""
    career_set = set(career_tags)
    return [tag for tag in user_tags if tag in career_set]


def education_score(user_rank: int, required_rank: int) -> int:
    """Score how well the user's education fits the requirement.

    Callers gate on eligibility first; a negative gap still scores 0.
    """
    gap = user_rank - required_rank
    if gap < 0:
        return 0
    return EDUCATION_GAP_SCORES.get(gap, EDUCATION_OVERQUALIFIED_FLOOR)


def industry_score(career_industry: str, preferred_industry: str) -> int:
    if career_industry == preferred_industry:
        return INDUSTRY_MATCH_SCORE
    return INDUSTRY_MISMATCH_SCORE


def _overlap_score(
    user_tags: Collection[str],
    career_tags: Collection[str],
    breadth_threshold: int,
    breadth_bonus: int,
    full_match_bonus: int,
) -> int:
    if not career_tags:
        return EMPTY_TAGS_SCORE
    career_set = set(career_tags)
    matched = career_set.intersection(user_tags)
    # Denominator is the career's tag count, not the user's
    ratio = len(matched) / len(career_set)

    bonus = 0
    if len(set(user_tags)) > breadth_threshold:
        bonus += breadth_bonus
    if matched == career_set:
        bonus += full_match_bonus

    return min(round_half_up(ratio * OVERLAP_RATIO_SCALE + bonus), MAX_SCORE)


def interest_score(user_interests: Collection[str], career_interests: Collection[str]) -> int:
    """Overlap ratio plus breadth (many interests) and depth (all matched) bonuses."""
    return _overlap_score(
        user_interests,
        career_interests,
        INTEREST_BREADTH_THRESHOLD,
        INTEREST_BREADTH_BONUS,
        INTEREST_DEPTH_BONUS,
    )


def skill_score(user_skills: Collection[str], career_skills: Collection[str]) -> int:
    """Overlap ratio plus variety (many skills) and perfect-match bonuses."""
    return _overlap_score(
        user_skills,
        career_skills,
        SKILL_VARIETY_THRESHOLD,
        SKILL_VARIETY_BONUS,
        SKILL_PERFECT_BONUS,
    )


def weighted_match(
    edu_sub: int,
    industry_sub: int,
    interest_sub: int,
    skill_sub: int,
    weights: WeightProfile,
) -> int:
    """Combine four 0-100 sub-scores into a 0-100 match percentage."""
    weighted = (
        edu_sub * weights.edu
        + industry_sub * weights.industry
        + interest_sub * weights.interests
        + skill_sub * weights.skills
    )
    return min(round_half_up(weighted), MAX_SCORE)
