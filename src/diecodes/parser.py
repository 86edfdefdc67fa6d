"""Recursive-descent parser for dice codes.

Grammar::

    diecode    --> factor codetail directives
    codetail   --> 'x' factor codetail
               -->
    factor     --> repeat 'd' sides modifier
    repeat     --> number
               -->
    sides      --> number                       (never 0 or 1)
    modifier   --> '+' number
               --> '-' number
               -->
    directives --> 'E'
               -->
    number     --> [0-9]+                       (0..255)

Each ``_parse_*`` helper takes the unconsumed input and returns the parsed
value together with whatever input is left over.
"""

from __future__ import annotations

import logging
import re

from .errors import (
    NumberParseError,
    UnexpectedCharError,
    UnexpectedEndOfStringError,
    UnexpectedTrailingInputError,
    ZeroOrOneSideError,
    ZeroRepeatsError,
)
from .models import MAX_NUMBER, DieCode, Directives, Factor, Modifier, Repeat


logger = logging.getLogger(__name__)

# ASCII only: str.isdigit() would also accept things like '²' or '٣'.
_DIGITS_RE = re.compile(r"[0-9]*")


def parse_diecode(text: str) -> DieCode:
    """Parse a dice code such as ``2d6+1xd3E``. Raises DiceError on bad input."""

    s = text.strip()

    factor, rest = _parse_factor(s)
    factors = [factor]

    rest = _parse_codetail(rest, factors)
    directives, rest = _parse_directives(rest)

    if rest:
        raise UnexpectedTrailingInputError(rest)

    code = DieCode(factors=tuple(factors), directives=directives)
    logger.debug("parsed %r as %r", text, code)
    return code


def _parse_codetail(s: str, factors: list[Factor]) -> str:
    while s.startswith("x"):
        factor, s = _parse_factor(s[1:])
        factors.append(factor)
    return s


def _parse_factor(s: str) -> tuple[Factor, str]:
    repeat, rest = _parse_repeat(s)

    if not rest:
        raise UnexpectedEndOfStringError(s)
    if rest[0] != "d":
        raise UnexpectedCharError("d", rest)

    sides, rest = _parse_sides(rest[1:])
    modifier, rest = _parse_modifier(rest)

    return Factor(repeat=repeat, sides=sides, modifier=modifier), rest


def _parse_repeat(s: str) -> tuple[Repeat, str]:
    # A missing repeat is the same as a '1'.
    if not s or s[0] not in "0123456789":
        return Repeat(), s

    number, rest = _parse_number(s)
    if number == 0:
        raise ZeroRepeatsError()
    return Repeat(number=number), rest


def _parse_sides(s: str) -> tuple[int, str]:
    sides, rest = _parse_number(s)
    if sides in (0, 1):
        raise ZeroOrOneSideError()
    return sides, rest


def _parse_modifier(s: str) -> tuple[Modifier, str]:
    if s.startswith("+"):
        operand, rest = _parse_number(s[1:])
        return Modifier.plus(operand), rest
    if s.startswith("-"):
        operand, rest = _parse_number(s[1:])
        return Modifier.minus(operand), rest
    return Modifier.none(), s


def _parse_directives(s: str) -> tuple[Directives, str]:
    # Only one 'E' is consumed; a second one is left as trailing input.
    if s.startswith("E"):
        return Directives(explode=True), s[1:]
    return Directives(), s


def _parse_number(s: str) -> tuple[int, str]:
    digits = _DIGITS_RE.match(s).group(0)
    if not digits:
        raise NumberParseError("")
    # Rejected before int() so huge runs never reach the int conversion limit.
    if len(digits.lstrip("0")) > len(str(MAX_NUMBER)):
        raise NumberParseError(digits)

    value = int(digits)
    if value > MAX_NUMBER:
        raise NumberParseError(digits)
    return value, s[len(digits):]


def format_diecode(code: DieCode) -> str:
    """Render a DieCode back to its canonical text, e.g. ``d6x2d6+1E``."""

    chunks: list[str] = []
    for factor in code.factors:
        chunk = f"d{factor.sides}"
        if factor.repeat.number != 1:
            chunk = f"{factor.repeat.number}{chunk}"
        if factor.modifier.op == "plus":
            chunk += f"+{factor.modifier.operand}"
        elif factor.modifier.op == "minus":
            chunk += f"-{factor.modifier.operand}"
        chunks.append(chunk)

    expr = "x".join(chunks)
    if code.directives.explode:
        expr += "E"
    return expr
