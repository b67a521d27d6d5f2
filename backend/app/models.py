"""SQLAlchemy ORM models."""
from sqlalchemy import Column, Integer, String, Boolean, Float, Text

from .db import Base


class GameSession(Base):
    """One row per game started by an authenticated user."""
    __tablename__ = "game_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, index=True, nullable=False)
    total_score = Column(Integer, nullable=False, default=0)
    puzzles_solved = Column(Integer, nullable=False, default=0)
    puzzles_attempted = Column(Integer, nullable=False, default=0)
    session_duration_seconds = Column(Integer, nullable=False, default=0)
    created_at = Column(String, index=True, nullable=False)
    updated_at = Column(String, nullable=False)


class PuzzleResult(Base):
    """Append-only record of a single scored submission."""
    __tablename__ = "puzzle_results"

    id = Column(Integer, primary_key=True, index=True)
    game_session_id = Column(Integer, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    puzzle_type = Column(String, nullable=False)  # "math", "science" or "puzzle"
    puzzle_data = Column(Text, nullable=False)  # JSON-serialized puzzle
    user_answer = Column(Text, nullable=True)
    correct_answer = Column(Text, nullable=False)
    is_correct = Column(Boolean, nullable=False)
    time_taken_seconds = Column(Float, nullable=False)
    points_earned = Column(Integer, nullable=False)
    created_at = Column(String, nullable=False)


class UserStats(Base):
    """Cross-session aggregate, at most one row per user."""
    __tablename__ = "user_stats"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, unique=True, index=True, nullable=False)
    total_score = Column(Integer, nullable=False, default=0)
    total_puzzles_solved = Column(Integer, nullable=False, default=0)
    total_puzzles_attempted = Column(Integer, nullable=False, default=0)
    best_session_score = Column(Integer, nullable=False, default=0)
    average_time_per_puzzle = Column(Float, nullable=False, default=0.0)
    math_puzzles_solved = Column(Integer, nullable=False, default=0)
    science_puzzles_solved = Column(Integer, nullable=False, default=0)
    puzzle_puzzles_solved = Column(Integer, nullable=False, default=0)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
