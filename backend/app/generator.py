"""Puzzle generation: pick a puzzle from the bank for the player's current score."""
import logging
import random
from typing import Optional, Union

from .difficulty import tier_for_score
from .puzzle_bank import BankEntry, get_pool
from .schemas import (
    Locale,
    MathPuzzle,
    PuzzleCategory,
    SciencePuzzle,
    WordplayPuzzle,
)

logger = logging.getLogger(__name__)

_rng = random.Random()


class PuzzleGenerationError(ValueError):
    """Base class for puzzle requests that can never be satisfied."""


class InvalidCategory(PuzzleGenerationError):
    def __init__(self, category):
        super().__init__(f"Unknown puzzle category: {category!r}")
        self.category = category


class InvalidLocale(PuzzleGenerationError):
    def __init__(self, locale):
        super().__init__(f"Unsupported locale: {locale!r}")
        self.locale = locale


def _build_puzzle(category: PuzzleCategory, entry: BankEntry):
    if category is PuzzleCategory.MATH:
        return MathPuzzle(question=entry.question, answer=entry.answer)
    if category is PuzzleCategory.SCIENCE:
        return SciencePuzzle(
            question=entry.question,
            options=list(entry.options),
            answer=entry.answer,
        )
    if category is PuzzleCategory.WORDPLAY:
        return WordplayPuzzle(question=entry.question, answer=entry.answer, hint=entry.hint)
    raise InvalidCategory(category)


def generate_puzzle(
    category: Union[PuzzleCategory, str],
    score: int,
    locale: Union[Locale, str] = Locale.EN,
    rng: Optional[random.Random] = None,
):
    """Draw one puzzle for ``category`` at the tier matching ``score``.

    Every draw is independent; the same puzzle may come up twice in a row.
    Raises InvalidCategory or InvalidLocale for values outside the bank.
    """
    try:
        category = PuzzleCategory.parse(category)
    except ValueError:
        raise InvalidCategory(category) from None
    try:
        locale = Locale(locale)
    except ValueError:
        raise InvalidLocale(locale) from None

    tier = tier_for_score(score)
    pool = get_pool(category, locale, tier)
    entry = (rng or _rng).choice(pool)

    logger.debug(
        "Drew %s puzzle (locale=%s, tier=%s, score=%s)",
        category.value, locale.value, tier.value, score,
    )
    return _build_puzzle(category, entry)
