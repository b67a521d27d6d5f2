"""Difficulty policy: maps a running score to a tier and a point value."""
from enum import Enum


class DifficultyTier(str, Enum):
    """Puzzle difficulty, ordered from easiest to hardest."""
    BEGINNER = "beginner"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


# (exclusive upper score bound, tier); scores past the last bound are expert
TIER_THRESHOLDS = (
    (50, DifficultyTier.BEGINNER),
    (100, DifficultyTier.EASY),
    (200, DifficultyTier.MEDIUM),
    (300, DifficultyTier.HARD),
)

DEFAULT_BASE_POINTS = 10


def tier_for_score(score: int) -> DifficultyTier:
    """Return the tier for a cumulative session score.

    beginner < 50 <= easy < 100 <= medium < 200 <= hard < 300 <= expert
    """
    for upper_bound, tier in TIER_THRESHOLDS:
        if score < upper_bound:
            return tier
    return DifficultyTier.EXPERT


def base_points(tier) -> int:
    """Points awarded for a correct answer at the given tier, before speed bonus.

    Anything that is not a known tier gets DEFAULT_BASE_POINTS.
    """
    try:
        tier = DifficultyTier(tier)
    except ValueError:
        return DEFAULT_BASE_POINTS

    if tier is DifficultyTier.BEGINNER:
        return 5
    if tier is DifficultyTier.EASY:
        return 10
    if tier is DifficultyTier.MEDIUM:
        return 15
    if tier is DifficultyTier.HARD:
        return 25
    if tier is DifficultyTier.EXPERT:
        return 40
    return DEFAULT_BASE_POINTS


def base_points_for_score(score: int) -> int:
    """Base points for a correct answer when the session stands at ``score``."""
    return base_points(tier_for_score(score))
