"""Scoring engine constants.

Weight tables, sub-score bands and ranking limits. All values are static and
read-only after import.
"""

from types import MappingProxyType

from models.schemas.weight_profile import WeightProfile

# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

# Different careers emphasise different factors:
#   healthcare/government -> education matters most
#   media/environment     -> interests carry more weight
#   engineering/it        -> skills carry the most weight
#   finance               -> skills + industry alignment
WEIGHT_PROFILES: MappingProxyType = MappingProxyType({
    "it": WeightProfile(edu=0.15, industry=0.25, interests=0.28, skills=0.32),
    "healthcare": WeightProfile(edu=0.30, industry=0.20, interests=0.22, skills=0.28),
    "finance": WeightProfile(edu=0.18, industry=0.27, interests=0.22, skills=0.33),
    "engineering": WeightProfile(edu=0.18, industry=0.22, interests=0.22, skills=0.38),
    "education": WeightProfile(edu=0.25, industry=0.25, interests=0.32, skills=0.18),
    "media": WeightProfile(edu=0.10, industry=0.18, interests=0.38, skills=0.34),
    "environment": WeightProfile(edu=0.18, industry=0.22, interests=0.36, skills=0.24),
    "government": WeightProfile(edu=0.28, industry=0.30, interests=0.22, skills=0.20),
})

# Used for any industry without its own profile
DEFAULT_WEIGHTS = WeightProfile(edu=0.20, industry=0.25, interests=0.27, skills=0.28)

# =============================================================================
# SUB-SCORE BANDS
# =============================================================================

# Education: keyed by (user rank - required rank), gap >= 3 falls to the floor
EDUCATION_GAP_SCORES: MappingProxyType = MappingProxyType({0: 100, 1: 82, 2: 64})
EDUCATION_OVERQUALIFIED_FLOOR = 48

INDUSTRY_MATCH_SCORE = 100
INDUSTRY_MISMATCH_SCORE = 0

# Tag overlap (interests and skills share the same shape)
OVERLAP_RATIO_SCALE = 82
EMPTY_TAGS_SCORE = 50  # career declares no tags of this kind

INTEREST_BREADTH_THRESHOLD = 4  # more than this many interests earns the bonus
INTEREST_BREADTH_BONUS = 8
INTEREST_DEPTH_BONUS = 10  # every career interest matched

SKILL_VARIETY_THRESHOLD = 3
SKILL_VARIETY_BONUS = 6
SKILL_PERFECT_BONUS = 12

MAX_SCORE = 100

# =============================================================================
# RANKING / OUTPUT
# =============================================================================

MAX_RECOMMENDATIONS = 5

NO_MATCH_MESSAGE = "No close matches found. Try broadening your interests or skills."
