"""Tests for the difficulty policy."""
import pytest

from backend.app.difficulty import (
    DEFAULT_BASE_POINTS,
    DifficultyTier,
    base_points,
    base_points_for_score,
    tier_for_score,
)


@pytest.mark.parametrize(
    "score,expected",
    [
        (0, DifficultyTier.BEGINNER),
        (49, DifficultyTier.BEGINNER),
        (50, DifficultyTier.EASY),
        (99, DifficultyTier.EASY),
        (100, DifficultyTier.MEDIUM),
        (199, DifficultyTier.MEDIUM),
        (200, DifficultyTier.HARD),
        (299, DifficultyTier.HARD),
        (300, DifficultyTier.EXPERT),
        (10_000, DifficultyTier.EXPERT),
    ],
)
def test_tier_boundaries_are_exact(score, expected):
    assert tier_for_score(score) is expected


def test_negative_score_is_beginner():
    assert tier_for_score(-5) is DifficultyTier.BEGINNER


def test_tier_is_monotonic_in_score():
    order = list(DifficultyTier)
    ranks = [order.index(tier_for_score(s)) for s in range(-10, 400)]
    assert ranks == sorted(ranks)


def test_base_points_table():
    assert base_points(DifficultyTier.BEGINNER) == 5
    assert base_points(DifficultyTier.EASY) == 10
    assert base_points(DifficultyTier.MEDIUM) == 15
    assert base_points(DifficultyTier.HARD) == 25
    assert base_points(DifficultyTier.EXPERT) == 40


def test_base_points_accepts_tier_names():
    assert base_points("expert") == 40


@pytest.mark.parametrize("unknown", ["legendary", None, 3])
def test_unknown_tier_gets_default_points(unknown):
    assert base_points(unknown) == DEFAULT_BASE_POINTS == 10


def test_base_points_for_score():
    assert base_points_for_score(0) == 5
    assert base_points_for_score(150) == 15
    assert base_points_for_score(300) == 40
