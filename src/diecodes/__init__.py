from .dice import roll, roll_from_text
from .errors import (
    DiceError,
    NumberParseError,
    RollerExhaustedError,
    UnexpectedCharError,
    UnexpectedEndOfStringError,
    UnexpectedTrailingInputError,
    ZeroOrOneSideError,
    ZeroRepeatsError,
)
from .executor import Executor, evaluate
from .models import DieCode, Directives, Factor, Modifier, Repeat
from .parser import format_diecode, parse_diecode
from .roller import ConstantRoller, RandomRoller, RecordingRoller, Roller, SequenceRoller
from .spew import NullSpew, Spew, SpewLevel

__all__ = [
    "ConstantRoller",
    "DiceError",
    "DieCode",
    "Directives",
    "Executor",
    "Factor",
    "Modifier",
    "NullSpew",
    "NumberParseError",
    "RandomRoller",
    "RecordingRoller",
    "Repeat",
    "Roller",
    "RollerExhaustedError",
    "SequenceRoller",
    "Spew",
    "SpewLevel",
    "UnexpectedCharError",
    "UnexpectedEndOfStringError",
    "UnexpectedTrailingInputError",
    "ZeroOrOneSideError",
    "ZeroRepeatsError",
    "evaluate",
    "format_diecode",
    "parse_diecode",
    "roll",
    "roll_from_text",
]
