"""Folding scored submissions into game sessions and user statistics."""
import json
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from .models import GameSession, PuzzleResult, UserStats
from .schemas import GameSessionResponse, PuzzleCategory, UserStatsResponse
from .scoring import ScoreResult
from .settings import HISTORY_LIMIT

logger = logging.getLogger(__name__)

# Unauthenticated play uses this session id and is never persisted
GUEST_SESSION_ID = 0
GUEST_USER_ID = "guest"

# Per-category solved counter on UserStats
SOLVED_COUNTER = {
    PuzzleCategory.MATH: "math_puzzles_solved",
    PuzzleCategory.SCIENCE: "science_puzzles_solved",
    PuzzleCategory.WORDPLAY: "puzzle_puzzles_solved",
}


class SessionNotFound(LookupError):
    """The game session does not exist or belongs to someone else."""

    def __init__(self, session_id: int):
        super().__init__(f"Game session {session_id} not found")
        self.session_id = session_id


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def guest_session() -> GameSessionResponse:
    """Ephemeral session handed to players without an identity."""
    now = utc_now()
    return GameSessionResponse(
        id=GUEST_SESSION_ID,
        user_id=GUEST_USER_ID,
        total_score=0,
        puzzles_solved=0,
        puzzles_attempted=0,
        session_duration_seconds=0,
        created_at=now,
        updated_at=now,
    )


def is_guest_session(user_id: Optional[str], session_id: int) -> bool:
    return user_id is None or session_id == GUEST_SESSION_ID


def start_session(db: Session, user_id: str) -> GameSession:
    """Create a zeroed game session for an authenticated user."""
    now = utc_now()
    game_session = GameSession(
        user_id=user_id,
        total_score=0,
        puzzles_solved=0,
        puzzles_attempted=0,
        session_duration_seconds=0,
        created_at=now,
        updated_at=now,
    )
    db.add(game_session)
    db.commit()
    db.refresh(game_session)
    logger.info("Started game session %s for user %s", game_session.id, user_id)
    return game_session


def _get_owned_session(db: Session, user_id: str, session_id: int) -> GameSession:
    game_session = db.query(GameSession).filter(
        GameSession.id == session_id,
        GameSession.user_id == user_id,
    ).first()
    if game_session is None:
        raise SessionNotFound(session_id)
    return game_session


def current_session_score(db: Session, user_id: Optional[str], session_id: int) -> int:
    """Session total before the submission being scored.  Guests are always at 0."""
    if is_guest_session(user_id, session_id):
        return 0
    return _get_owned_session(db, user_id, session_id).total_score


def apply_attempt_to_stats(
    stats: UserStats,
    category: PuzzleCategory,
    result: ScoreResult,
    elapsed_seconds: float,
    session_total: int,
    now: str,
) -> UserStats:
    """
    Fold one attempt into a user's running statistics.

    - average time is a running mean over every attempt, right or wrong,
      computed with the attempt count from before this attempt
    - best session score never goes down
    - exactly one category counter moves, and only on a correct answer
    """
    attempts = stats.total_puzzles_attempted or 0
    average = stats.average_time_per_puzzle or 0.0
    stats.average_time_per_puzzle = (average * attempts + elapsed_seconds) / (attempts + 1)

    stats.total_score = (stats.total_score or 0) + result.points_earned
    stats.total_puzzles_attempted = attempts + 1
    stats.best_session_score = max(stats.best_session_score or 0, session_total)

    if result.is_correct:
        stats.total_puzzles_solved = (stats.total_puzzles_solved or 0) + 1
        counter = SOLVED_COUNTER[category]
        setattr(stats, counter, (getattr(stats, counter) or 0) + 1)

    stats.updated_at = now
    return stats


def record_submission(
    db: Session,
    user_id: Optional[str],
    session_id: int,
    puzzle,
    user_answer: str,
    elapsed_seconds: float,
    result: ScoreResult,
) -> Optional[PuzzleResult]:
    """Persist a scored submission.

    Appends a PuzzleResult, bumps the GameSession counters and upserts the
    user's UserStats row.  Guest sessions are not recorded at all and return
    None.
    """
    if is_guest_session(user_id, session_id):
        logger.debug("Guest submission on session %s not recorded", session_id)
        return None

    category = PuzzleCategory.parse(puzzle.type)
    game_session = _get_owned_session(db, user_id, session_id)
    now = utc_now()

    puzzle_result = PuzzleResult(
        game_session_id=session_id,
        user_id=user_id,
        puzzle_type=category.value,
        puzzle_data=json.dumps(
            puzzle.model_dump(by_alias=True, exclude_none=True),
            ensure_ascii=False,
        ),
        user_answer=user_answer,
        correct_answer=result.correct_answer,
        is_correct=result.is_correct,
        time_taken_seconds=elapsed_seconds,
        points_earned=result.points_earned,
        created_at=now,
    )
    db.add(puzzle_result)

    game_session.total_score += result.points_earned
    game_session.puzzles_solved += 1 if result.is_correct else 0
    game_session.puzzles_attempted += 1
    game_session.updated_at = now

    stats = db.query(UserStats).filter(UserStats.user_id == user_id).first()
    if stats is None:
        stats = UserStats(
            user_id=user_id,
            total_score=0,
            total_puzzles_solved=0,
            total_puzzles_attempted=0,
            best_session_score=0,
            average_time_per_puzzle=0.0,
            math_puzzles_solved=0,
            science_puzzles_solved=0,
            puzzle_puzzles_solved=0,
            created_at=now,
            updated_at=now,
        )
        db.add(stats)

    apply_attempt_to_stats(
        stats,
        category,
        result,
        elapsed_seconds,
        session_total=game_session.total_score,
        now=now,
    )

    db.commit()
    db.refresh(puzzle_result)
    logger.debug(
        "Recorded result %s on session %s: correct=%s points=%s",
        puzzle_result.id, session_id, result.is_correct, result.points_earned,
    )
    return puzzle_result


def get_user_stats(db: Session, user_id: str):
    """Stored stats for the user, or a zeroed default if they have never played."""
    stats = db.query(UserStats).filter(UserStats.user_id == user_id).first()
    if stats is not None:
        return stats

    now = utc_now()
    return UserStatsResponse(
        id=0,
        user_id=user_id,
        total_score=0,
        total_puzzles_solved=0,
        total_puzzles_attempted=0,
        best_session_score=0,
        average_time_per_puzzle=0.0,
        math_puzzles_solved=0,
        science_puzzles_solved=0,
        puzzle_puzzles_solved=0,
        created_at=now,
        updated_at=now,
    )


def get_history(db: Session, user_id: str, limit: int = HISTORY_LIMIT) -> List[GameSession]:
    """Most recent game sessions for the user, newest first."""
    return (
        db.query(GameSession)
        .filter(GameSession.user_id == user_id)
        .order_by(GameSession.created_at.desc(), GameSession.id.desc())
        .limit(limit)
        .all()
    )
