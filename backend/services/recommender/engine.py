"""Recommendation engine: scores every catalog career against a profile.

Pipeline per call:
    for each career (catalog order)
      ├─ eligibility gate (user education rank >= required rank)
      ├─ education / industry / interest / skill sub-scores (0-100 each)
      └─ weighted combination by the career's industry profile -> match %
    keep match % > 0 → sort descending, ties by catalog order → top N
      └─ attach a match reason to each survivor

The engine holds only read-only reference data, so one instance can serve
concurrent requests.
"""

import logging
from collections.abc import Mapping, Sequence

from config import settings
from models.responses import ScoreBreakdown, ScoredCareer, SubScores
from models.schemas.career_record import CareerRecord
from models.schemas.education import education_rank
from models.schemas.user_profile import UserProfile
from models.schemas.weight_profile import WeightProfile
from services.catalog import get_catalog
from services.recommender.constants import (
    DEFAULT_WEIGHTS,
    MAX_RECOMMENDATIONS,
    WEIGHT_PROFILES,
)
from services.recommender.reason import build_match_reason
from services.recommender.scorers import (
    education_score,
    industry_score,
    interest_score,
    matched_tags,
    skill_score,
    weighted_match,
)

logger = logging.getLogger(__name__)

_engine: "RecommendationEngine | None" = None


class RecommendationEngine:
    def __init__(
        self,
        catalog: Sequence[CareerRecord],
        weight_profiles: Mapping[str, WeightProfile] = WEIGHT_PROFILES,
        default_weights: WeightProfile = DEFAULT_WEIGHTS,
        max_results: int = MAX_RECOMMENDATIONS,
    ) -> None:
        self.catalog = tuple(catalog)
        self.weight_profiles = weight_profiles
        self.default_weights = default_weights
        self.max_results = max_results
        self._by_id = {career.id: career for career in self.catalog}

    def weights_for(self, industry: str) -> WeightProfile:
        return self.weight_profiles.get(industry, self.default_weights)

    def breakdown(self, profile: UserProfile, career: CareerRecord) -> ScoreBreakdown:
        """Score one career, keeping every intermediate value."""
        weights = self.weights_for(career.industry)
        user_rank = education_rank(profile.education_level)
        required_rank = education_rank(career.education.value)
        gap = user_rank - required_rank

        # Hard gate: underqualified careers are not matches at all
        if gap < 0:
            return ScoreBreakdown(
                career_id=career.id,
                eligible=False,
                education_gap=gap,
                weights=weights,
            )

        sub_scores = SubScores(
            education=education_score(user_rank, required_rank),
            industry=industry_score(career.industry, profile.preferred_industry),
            interests=interest_score(profile.interests, career.interests),
            skills=skill_score(profile.skills, career.skills),
        )
        match_percent = weighted_match(
            sub_scores.education,
            sub_scores.industry,
            sub_scores.interests,
            sub_scores.skills,
            weights,
        )
        return ScoreBreakdown(
            career_id=career.id,
            eligible=True,
            education_gap=gap,
            sub_scores=sub_scores,
            weights=weights,
            match_percent=match_percent,
            matched_interests=matched_tags(profile.interests, career.interests),
            matched_skills=matched_tags(profile.skills, career.skills),
        )

    def score_career(self, profile: UserProfile, career_id: str) -> ScoreBreakdown:
        """Detailed scoring for one catalog entry. Raises KeyError if unknown."""
        return self.breakdown(profile, self._by_id[career_id])

    def recommend(self, profile: UserProfile) -> list[ScoredCareer]:
        """Return up to ``max_results`` careers, best match first."""
        ranked: list[tuple[int, int, CareerRecord]] = []
        for position, career in enumerate(self.catalog):
            match_percent = self.breakdown(profile, career).match_percent
            if match_percent > 0:
                ranked.append((match_percent, position, career))

        # Highest match first; equal matches keep catalog order
        ranked.sort(key=lambda item: (-item[0], item[1]))
        top = ranked[: self.max_results]

        logger.debug(
            "Scored %d careers: %d matched, returning %d",
            len(self.catalog), len(ranked), len(top),
        )
        return [self._to_scored(career, match_percent, profile) for match_percent, _, career in top]

    def _to_scored(
        self, career: CareerRecord, match_percent: int, profile: UserProfile
    ) -> ScoredCareer:
        reason = build_match_reason(
            matched_tags(profile.interests, career.interests),
            matched_tags(profile.skills, career.skills),
            career.industry,
        )
        return ScoredCareer(
            id=career.id,
            title=career.title,
            description=career.description,
            match_percent=match_percent,
            reason=reason,
            growth_outlook=career.growth_outlook,
            salary_range=career.salary_range,
        )


def get_engine() -> RecommendationEngine:
    """Return the process-wide engine over the bundled catalog."""
    global _engine
    if _engine is None:
        _engine = RecommendationEngine(get_catalog(), max_results=settings.max_results)
    return _engine


def clear() -> None:
    """Drop the cached engine. Useful for testing."""
    global _engine
    _engine = None
