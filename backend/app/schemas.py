"""Pydantic schemas for request/response validation."""
import math
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class PuzzleCategory(str, Enum):
    """Puzzle categories.  The wordplay category travels as "puzzle" on the wire."""
    MATH = "math"
    SCIENCE = "science"
    WORDPLAY = "puzzle"

    @classmethod
    def parse(cls, value: str) -> "PuzzleCategory":
        """Parse a category name, accepting "wordplay" as an alias of "puzzle".

        Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if value == "wordplay":
            return cls.WORDPLAY
        return cls(value)


class Locale(str, Enum):
    EN = "en"
    AR = "ar"


class CamelModel(BaseModel):
    """Base model serialising to camelCase while accepting snake_case too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Puzzles

class MathPuzzle(CamelModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["math"] = "math"
    question: str
    answer: str


class SciencePuzzle(CamelModel):
    type: Literal["science"] = "science"
    question: str
    options: List[str] = Field(..., min_length=4, max_length=4)
    answer: str

    @model_validator(mode="after")
    def answer_is_an_option(self):
        if self.answer not in self.options:
            raise ValueError("answer must be one of the options")
        return self


class WordplayPuzzle(CamelModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["puzzle"] = "puzzle"
    question: str
    answer: str
    hint: Optional[str] = None


Puzzle = Annotated[
    Union[MathPuzzle, SciencePuzzle, WordplayPuzzle],
    Field(discriminator="type"),
]


# Game requests / responses

# Elapsed times past a day either way are rejected; points must fit the store
MAX_ELAPSED_SECONDS = 86_400


class SubmitAnswerRequest(CamelModel):
    """Body of POST /api/game/submit.

    Types are strict: "5" is not a session id and 10 is not an answer.
    """
    game_session_id: StrictInt = Field(..., ge=0)
    puzzle: Puzzle
    user_answer: StrictStr
    elapsed_seconds: Union[StrictInt, StrictFloat] = Field(
        ...,
        validation_alias=AliasChoices(
            "elapsedSeconds", "timeTakenSeconds", "elapsed_seconds"
        ),
    )

    @field_validator("elapsed_seconds")
    @classmethod
    def elapsed_is_finite(cls, value):
        if not math.isfinite(value):
            raise ValueError("elapsed time must be a finite number")
        if abs(value) > MAX_ELAPSED_SECONDS:
            raise ValueError(f"elapsed time must be within {MAX_ELAPSED_SECONDS} seconds")
        return value


class SubmitAnswerResponse(CamelModel):
    is_correct: bool
    correct_answer: str
    points_earned: int
    # Id of the recorded PuzzleResult; None for guests
    result_id: Optional[int] = None


class GameSessionResponse(CamelModel):
    """Response schema for a game session."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    total_score: int
    puzzles_solved: int
    puzzles_attempted: int
    session_duration_seconds: int
    created_at: str
    updated_at: str


class UserStatsResponse(CamelModel):
    """Response schema for cross-session user statistics."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    total_score: int
    total_puzzles_solved: int
    total_puzzles_attempted: int
    best_session_score: int
    average_time_per_puzzle: float
    math_puzzles_solved: int
    science_puzzles_solved: int
    puzzle_puzzles_solved: int
    created_at: str
    updated_at: str


# Identity

class User(BaseModel):
    """Identity as reported by the identity provider.  Only ``id`` is relied on."""
    model_config = ConfigDict(extra="allow")

    id: str
    email: Optional[str] = None


class CreateSessionRequest(BaseModel):
    code: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool


class RedirectUrlResponse(CamelModel):
    redirect_url: str


class HealthResponse(BaseModel):
    status: str
