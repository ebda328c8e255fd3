from __future__ import annotations

import re

from .errors import ParseError
from .models import Addend, Constant, DiceGroup, RollNotation


_CONSTANT_RE = re.compile(r"[+-]?[0-9]+")
_NATURAL_RE = re.compile(r"[0-9]+")

_EXAMPLE = "Example: 'd8 + d6', '2d10 + 1' or 'd8d6'."


def _parse_natural(token: str) -> int | None:
    if not _NATURAL_RE.fullmatch(token):
        return None
    try:
        value = int(token)
    except ValueError:
        # Too many digits for int().
        return None
    return value if value > 0 else None


def _parse_dice_group(piece: str, parts: list[str]) -> DiceGroup:
    count_str, sides_strs = parts[0], parts[1:]

    count = 1
    if count_str != "":
        parsed = _parse_natural(count_str)
        if parsed is None:
            raise ParseError(
                f"[INVALID_COUNT] Failed to parse d notation for '{piece}': expected num_dice to be a "
                f"positive integer in [num_dice]d{{num_sides}} notation, got '{count_str}'. {_EXAMPLE}"
            )
        count = parsed

    sides: list[int] = []
    for sides_str in sides_strs:
        parsed = _parse_natural(sides_str)
        if parsed is None:
            raise ParseError(
                f"[INVALID_SIDES] Failed to parse d notation for '{piece}': expected num_sides to be a "
                f"positive integer in [num_dice]d{{num_sides}} notation, got '{sides_str}'. {_EXAMPLE}"
            )
        sides.append(parsed)

    return DiceGroup(count=count, sides=tuple(sides))


def _parse_addend(piece: str) -> Addend:
    parts = piece.split("d")

    if len(parts) == 1:
        if not _CONSTANT_RE.fullmatch(parts[0]):
            raise ParseError(
                f"[INVALID_CONSTANT] Expected an integer constant or [num_dice]d{{num_sides}}[d{{num_sides}}...] "
                f"notation, got '{parts[0]}'. {_EXAMPLE}"
            )
        try:
            return Constant(value=int(parts[0]))
        except ValueError:
            raise ParseError(
                f"[INVALID_CONSTANT] Integer constant '{parts[0][:20]}...' has too many digits. {_EXAMPLE}"
            ) from None

    if len(parts) > 1:
        return _parse_dice_group(piece, parts)

    # str.split never returns an empty list; kept so a bad piece can't slip through.
    raise ParseError(f"[UNPARSEABLE_INPUT] Could not understand '{piece}'. {_EXAMPLE}")


def parse_notation(text: str) -> RollNotation:
    """Parse `addend ("+" addend)*` into a RollNotation.

    Whitespace is trimmed around each addend only, so '2 d 6' is rejected.
    Empty input gives a notation with no addends; callers that need at least
    one addend must check for that themselves.
    """

    if not text or not text.strip():
        return RollNotation()

    addends: list[Addend] = []
    for piece in text.split("+"):
        addends.append(_parse_addend(piece.strip()))

    return RollNotation(addends=tuple(addends))
