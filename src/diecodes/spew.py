"""Leveled, user-facing output.

A Spew writes a line only when the message's level is at or below the
configured threshold, so ``quiet()`` lines always show, ``spew()`` lines show
at STANDARD and above, and ``verbose()`` lines only at VERBOSE.
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class SpewLevel(IntEnum):
    QUIET = 0
    STANDARD = 1
    VERBOSE = 2

    @classmethod
    def parse(cls, name: str) -> SpewLevel:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown output level {name!r}. Use one of: quiet, standard, verbose."
            ) from None


class Spew:
    def __init__(self, level: SpewLevel = SpewLevel.STANDARD, stream: TextIO | None = None) -> None:
        self.level = level
        self.stream = stream

    def emit(self, level: SpewLevel, message: str) -> None:
        if level > self.level:
            return
        # Resolved late so pytest's capsys sees the output.
        stream = self.stream if self.stream is not None else sys.stdout
        print(message, file=stream)

    def quiet(self, message: str) -> None:
        self.emit(SpewLevel.QUIET, message)

    def spew(self, message: str) -> None:
        self.emit(SpewLevel.STANDARD, message)

    def verbose(self, message: str) -> None:
        self.emit(SpewLevel.VERBOSE, message)


class NullSpew(Spew):
    """Discards everything."""

    def emit(self, level: SpewLevel, message: str) -> None:
        return None
