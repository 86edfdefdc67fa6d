from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from .executor import evaluate
from .parser import format_diecode, parse_diecode
from .roller import RandomRoller, RecordingRoller, Roller
from .spew import Spew


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def roll(
    code: str,
    explode: bool = False,
    force_standard_66: bool = False,
    *,
    roller: Roller | None = None,
    spew: Spew | None = None,
) -> int:
    """Parse then roll a dice code. Raises DiceError for invalid input."""

    parsed = parse_diecode(code)
    return evaluate(parsed, explode=explode, force_standard_66=force_standard_66, roller=roller, spew=spew)


def roll_from_text(
    text: str,
    explode: bool = False,
    force_standard_66: bool = False,
    *,
    roller: Roller | None = None,
) -> dict[str, Any]:
    """Parse, validate, then roll, returning an audit record of every die drawn."""

    parsed = parse_diecode(text)

    inner = roller if roller is not None else RandomRoller()
    recorder = RecordingRoller(inner)
    total = evaluate(parsed, explode=explode, force_standard_66=force_standard_66, roller=recorder)

    rolls = [{"sides": sides, "value": value} for sides, value in recorder.rolls]
    normalized = format_diecode(parsed)

    if rolls:
        faces = ", ".join(str(r["value"]) for r in rolls)
        explanation = f"{normalized}: rolls [{faces}] => {total}"
    else:
        explanation = f"{normalized} => {total}"

    if isinstance(inner, RandomRoller):
        source = type(inner.rng).__module__ + "." + type(inner.rng).__name__
    else:
        source = type(inner).__name__

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "normalized_expression": normalized,
        "explode": explode or parsed.directives.explode,
        "force_standard_66": force_standard_66,
        "rng": {
            "source": source,
            "nonce": str(uuid.uuid4()),
        },
        "rolls": rolls,
        "total": total,
        "explanation": explanation,
    }
