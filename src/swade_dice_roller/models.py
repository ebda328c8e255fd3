from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, TypeAlias


logger = logging.getLogger(__name__)

INTERNAL_ERROR_PLACEHOLDER = "{ (internal error) no die results }"


@dataclass(frozen=True)
class Constant:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DiceGroup:
    """`count` sets of dice, one die per entry in `sides`; the best die is kept."""

    count: int
    sides: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"dice group count must be at least 1, got {self.count}")
        if not self.sides:
            raise ValueError("dice group needs at least one die")
        if any(s < 1 for s in self.sides):
            raise ValueError(f"dice sides must be at least 1, got {list(self.sides)}")

    def __str__(self) -> str:
        dice = "".join(f"d{s}" for s in self.sides)
        return f"{self.count}{dice}" if self.count != 1 else dice


Addend: TypeAlias = Constant | DiceGroup


@dataclass(frozen=True)
class RollNotation:
    addends: tuple[Addend, ...] = ()

    def roll(self, rng: RandomSource) -> SumResult:
        return SumResult(tuple(roll_addend(addend, rng) for addend in self.addends))

    def dice_count(self) -> int:
        return sum(a.count * len(a.sides) for a in self.addends if isinstance(a, DiceGroup))

    def __str__(self) -> str:
        return " + ".join(str(a) for a in self.addends)


# Result tree. Every node knows its value and how to render itself; `wrapped`
# asks a subtree to bracket itself when it is nested inside another aggregate.


@dataclass(frozen=True)
class DieResult:
    face: int

    def value(self) -> int:
        return self.face

    def render(self, wrapped: bool = False) -> str:
        return str(self.face)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class AcedResult:
    """One exploding chain: every maximum face adds another draw."""

    rolls: tuple[DieResult, ...]

    def value(self) -> int:
        if not self.rolls:
            logger.error("AcedResult.value() has an empty rolls list")
        return sum(r.value() for r in self.rolls)

    def render(self, wrapped: bool = False) -> str:
        if not self.rolls:
            logger.error("AcedResult.render(wrapped=%s) has an empty rolls list", wrapped)
            return INTERNAL_ERROR_PLACEHOLDER
        if len(self.rolls) == 1:
            return self.rolls[0].render(wrapped)

        joined = " + ".join(r.render(wrapped=True) for r in self.rolls)
        return f"[{joined}]" if wrapped else joined

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class BestOfResult:
    results: tuple[ResultNode, ...]

    def value(self) -> int:
        if not self.results:
            # Sentinel: an empty set counts as 1.
            logger.error("BestOfResult.value() has an empty results list")
            return 1
        return max(r.value() for r in self.results)

    def render(self, wrapped: bool = False) -> str:
        if not self.results:
            logger.error("BestOfResult.render(wrapped=%s) has an empty results list", wrapped)
            return INTERNAL_ERROR_PLACEHOLDER
        if len(self.results) == 1:
            return self.results[0].render(wrapped)

        joined = ", ".join(r.render(wrapped=False) for r in self.results)
        return f"[{joined}] {self.value()}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class SumResult:
    results: tuple[ResultNode, ...]

    def value(self) -> int:
        if not self.results:
            logger.error("SumResult.value() has an empty results list")
        return sum(r.value() for r in self.results)

    def render(self, wrapped: bool = False) -> str:
        if not self.results:
            logger.error("SumResult.render(wrapped=%s) has an empty results list", wrapped)
            return INTERNAL_ERROR_PLACEHOLDER
        if len(self.results) == 1:
            return self.results[0].render(wrapped)

        return " + ".join(r.render(wrapped=True) for r in self.results)

    def __str__(self) -> str:
        return self.render()


ResultNode: TypeAlias = DieResult | AcedResult | BestOfResult | SumResult


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def roll_aced(sides: int, rng: RandomSource) -> AcedResult:
    """Roll one die and keep rolling while it shows its maximum face."""

    draw = rng.randint(1, sides)
    rolls = [DieResult(draw)]
    # A d1 always shows its maximum face and would never stop acing.
    while sides > 1 and draw == sides:
        draw = rng.randint(1, sides)
        rolls.append(DieResult(draw))
    return AcedResult(tuple(rolls))


def roll_dice_group(group: DiceGroup, rng: RandomSource) -> BestOfResult:
    results: list[ResultNode] = []
    for _ in range(group.count):
        for sides in group.sides:
            results.append(roll_aced(sides, rng))
    return BestOfResult(tuple(results))


def roll_addend(addend: Addend, rng: RandomSource) -> ResultNode:
    if isinstance(addend, Constant):
        return DieResult(addend.value)
    if isinstance(addend, DiceGroup):
        return roll_dice_group(addend, rng)
    raise TypeError(f"Unsupported addend: {addend!r}")
