"""Evaluates a parsed DieCode.

Factors joined by ``x`` multiply: ``d6xd6`` rolling 3 then 6 is 18.
"""

from __future__ import annotations

import logging

from .models import D66_SIDES, EXPLODING_SIDES, DieCode, Factor
from .roller import RandomRoller, Roller
from .spew import NullSpew, Spew


logger = logging.getLogger(__name__)


def _to_int16(value: int) -> int:
    """Wrap to the signed 16-bit range, like a two's-complement cast."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class Executor:
    def __init__(
        self,
        code: DieCode,
        explode: bool = False,
        force_standard_66: bool = False,
        spew: Spew | None = None,
    ) -> None:
        self.code = code
        self.explode = explode or code.directives.explode
        self.force_standard_66 = force_standard_66
        self.spew = spew if spew is not None else NullSpew()

    def execute(self, roller: Roller) -> int:
        product = 1
        for factor in self.code.factors:
            product *= self.execute_factor(factor, roller)

        result = _to_int16(product)
        if result != product:
            logger.warning("result %d does not fit in 16 bits, wrapped to %d", product, result)
        return result

    def execute_factor(self, factor: Factor, roller: Roller) -> int:
        total = sum(self.roll(factor.sides, self.explode, roller) for _ in range(factor.repeat.number))
        return factor.modifier.apply(total)

    def roll(self, sides: int, explode: bool, roller: Roller) -> int:
        """Roll one die position, following explosions on a d6."""

        if sides == D66_SIDES and not self.force_standard_66:
            return self.roll_d66(roller)

        die = self._roll_die(sides, roller)
        total = die
        while explode and sides == EXPLODING_SIDES and die == EXPLODING_SIDES:
            die = self._roll_die(sides, roller)
            total += die
        return total

    def roll_d66(self, roller: Roller) -> int:
        # d66 never explodes.
        tens = self.roll(6, False, roller)
        units = self.roll(6, False, roller)
        return tens * 10 + units

    def _roll_die(self, sides: int, roller: Roller) -> int:
        die = roller.roll(sides)
        if not 1 <= die <= sides:
            raise AssertionError(f"roller returned {die} for a d{sides}")
        self.spew.verbose(f"Rolled: {die}")
        return die


def evaluate(
    code: DieCode,
    explode: bool = False,
    force_standard_66: bool = False,
    roller: Roller | None = None,
    spew: Spew | None = None,
) -> int:
    """Roll a parsed code and return its signed 16-bit total.

    ``explode`` turns on exploding sixes for every factor (the code's own
    trailing ``E`` does the same). ``force_standard_66`` makes ``d66`` a real
    66-sided die instead of two d6 read as tens and units.
    """

    if roller is None:
        roller = RandomRoller()
    return Executor(code, explode=explode, force_standard_66=force_standard_66, spew=spew).execute(roller)

