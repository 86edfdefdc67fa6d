"""Sources of die faces.

The executor only ever calls ``roll(sides)``, so production randomness and the
scripted rollers used by the tests are interchangeable.
"""

from __future__ import annotations

import random
import secrets
from collections.abc import Iterable, Iterator
from typing import Protocol

from .errors import RollerExhaustedError


class Roller(Protocol):
    def roll(self, sides: int) -> int:
        """Return a value in ``[1, sides]``."""
        ...


class RandomRoller:
    """Uniform rolls from ``secrets.SystemRandom`` unless another RNG is given."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def roll(self, sides: int) -> int:
        return self.rng.randint(1, sides)


class ConstantRoller:
    def __init__(self, value: int) -> None:
        self.value = value

    def roll(self, sides: int) -> int:
        return self.value


class SequenceRoller:
    """Hands out pre-scripted values in order, ignoring ``sides``.

    Accepts lists as well as infinite iterators (``itertools.repeat(2)``).
    Running dry means the test supplied too few values, so it raises.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(values)
        self.consumed = 0

    def roll(self, sides: int) -> int:
        try:
            value = next(self._values)
        except StopIteration:
            raise RollerExhaustedError(
                f"scripted roller exhausted after {self.consumed} values (asked for a d{sides})"
            ) from None
        self.consumed += 1
        return value


class RecordingRoller:
    """Wraps another roller and remembers every ``(sides, value)`` it produced."""

    def __init__(self, inner: Roller) -> None:
        self.inner = inner
        self.rolls: list[tuple[int, int]] = []

    def roll(self, sides: int) -> int:
        value = self.inner.roll(sides)
        self.rolls.append((sides, value))
        return value
