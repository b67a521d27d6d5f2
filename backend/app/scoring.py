"""Answer checking and point calculation."""
import math
from dataclasses import dataclass

from .difficulty import base_points_for_score
from .normalizer import normalize_answer

# Answers given within this many seconds earn a speed bonus
SPEED_BONUS_WINDOW_SEC = 30


@dataclass(frozen=True)
class ScoreResult:
    is_correct: bool
    correct_answer: str
    points_earned: int


def speed_bonus(elapsed_seconds: float) -> int:
    """
    Bonus for answering quickly: half of the seconds left in the window.

    Halves round up (elapsed=1 -> 14.5 -> 15).  Nothing below zero, and no
    cap for negative elapsed times reported by a skewed client clock.
    """
    remaining = (SPEED_BONUS_WINDOW_SEC - elapsed_seconds) / 2
    return max(0, math.floor(remaining + 0.5))


def score_answer(
    puzzle,
    user_answer: str,
    elapsed_seconds: float,
    current_session_score: int,
) -> ScoreResult:
    """
    Score one submission.

    The tier for points comes from the session score before this submission,
    which may differ from the tier the puzzle was drawn at.
    """
    correct_answer = puzzle.answer
    is_correct = normalize_answer(user_answer) == normalize_answer(correct_answer)

    points_earned = 0
    if is_correct:
        points_earned = (
            base_points_for_score(current_session_score) + speed_bonus(elapsed_seconds)
        )

    return ScoreResult(
        is_correct=is_correct,
        correct_answer=correct_answer,
        points_earned=points_earned,
    )
