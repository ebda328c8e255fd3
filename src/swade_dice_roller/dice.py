from __future__ import annotations

import logging
import random
import time

from .errors import DiceError
from .models import RandomSource, ResultNode
from .parser import parse_notation


logger = logging.getLogger(__name__)


def new_random_source() -> random.Random:
    """A fresh, time-seeded source. Build one per roll request; never share it."""
    return random.Random(time.time_ns())


def format_roll(notation_text: str, result: ResultNode) -> str:
    return f"The roll for {notation_text}:\n  {result.render()} = {result.value()}"


def roll_from_text(
    text: str,
    rng: RandomSource | None = None,
    *,
    max_dice: int | None = None,
) -> str:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    if not text or not text.strip():
        raise DiceError(
            "[MISSING_NOTATION] The roll command must have a 'notation' value. Example: 'd8 + d6'."
        )

    notation = parse_notation(text)

    if max_dice is not None and notation.dice_count() > max_dice:
        raise DiceError(
            f"[TOO_MANY_DICE] '{text}' rolls {notation.dice_count()} dice; at most {max_dice} are allowed."
        )

    if rng is None:
        rng = new_random_source()

    result = notation.roll(rng)
    logger.info("Rolled %s: %s = %d", notation, result.render(), result.value())
    return format_roll(text, result)
