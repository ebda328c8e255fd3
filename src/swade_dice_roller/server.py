from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .config import load_settings
from .dice import roll_from_text
from .errors import DiceError
from .logging_config import setup_logging


logger = logging.getLogger(__name__)

settings = load_settings()
mcp = FastMCP(settings.server_name)


@mcp.tool()
def roll(notation: str) -> str:
    """Roll dice for a trait roll in Savage Worlds. The dice ace and the best of roll is chosen.

    Input: notation (string), e.g. 'd8 + d6', '2d10 + 1' or 'd8d6'
    Output: the rendered roll and its total

    Invalid notation is answered with the error message instead of a roll.
    """

    try:
        return roll_from_text(notation, max_dice=settings.max_dice)
    except DiceError as e:
        logger.info("Bad roll notation %r: %s", notation, e)
        return str(e)


def run() -> None:
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting %s", settings.server_name)
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
