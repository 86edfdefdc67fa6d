from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias


# Every number in a dice code is an 8-bit unsigned value.
MAX_NUMBER: int = 255

D66_SIDES: int = 66
EXPLODING_SIDES: int = 6

Opcode: TypeAlias = Literal["none", "plus", "minus"]


@dataclass(frozen=True)
class Repeat:
    number: int = 1


@dataclass(frozen=True)
class Modifier:
    op: Opcode = "none"
    operand: int = 0

    @classmethod
    def none(cls) -> Modifier:
        return cls()

    @classmethod
    def plus(cls, operand: int) -> Modifier:
        return cls(op="plus", operand=operand)

    @classmethod
    def minus(cls, operand: int) -> Modifier:
        return cls(op="minus", operand=operand)

    def apply(self, value: int) -> int:
        if self.op == "plus":
            return value + self.operand
        if self.op == "minus":
            return value - self.operand
        return value


@dataclass(frozen=True)
class Factor:
    """One ``repeat`` x ``sides`` +/- ``modifier`` term. Defaults to ``d6``."""

    repeat: Repeat = field(default_factory=Repeat)
    sides: int = 6
    modifier: Modifier = field(default_factory=Modifier)


@dataclass(frozen=True)
class Directives:
    explode: bool = False


@dataclass(frozen=True)
class DieCode:
    factors: tuple[Factor, ...]
    directives: Directives = field(default_factory=Directives)
