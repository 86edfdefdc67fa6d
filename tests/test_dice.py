import re

import pytest

from diecodes import DiceError, roll, roll_from_text
from diecodes.roller import SequenceRoller
from diecodes.spew import Spew, SpewLevel


def test_roll_parses_then_evaluates():
    assert roll("d6x2d6+1", roller=SequenceRoller([3, 4, 5])) == 3 * 10


def test_roll_global_explode_flag():
    assert roll("d6", True, roller=SequenceRoller([6, 6, 3])) == 15
    assert roll("d6", False, roller=SequenceRoller([6, 6, 3])) == 6


def test_roll_force_standard_66():
    assert roll("d66", roller=SequenceRoller([3, 4])) == 34
    assert roll("d66", force_standard_66=True, roller=SequenceRoller([40])) == 40


def test_roll_with_production_roller():
    for _ in range(50):
        assert 4 <= roll("d6+3") <= 9


def test_roll_rejects_bad_code_before_rolling():
    roller = SequenceRoller([])
    with pytest.raises(DiceError):
        roll("2d6+", roller=roller)
    assert roller.consumed == 0


def test_roll_passes_spew_through(capsys):
    roll("2d6", roller=SequenceRoller([1, 2]), spew=Spew(SpewLevel.VERBOSE))
    assert capsys.readouterr().out == "Rolled: 1\nRolled: 2\n"


def test_roll_from_text_report():
    result = roll_from_text(" d6xd66E ", roller=SequenceRoller([6, 2, 3, 4]))

    assert result["input"] == " d6xd66E "
    assert result["normalized_expression"] == "d6xd66E"
    assert result["explode"] is True
    assert result["force_standard_66"] is False
    assert result["rolls"] == [
        {"sides": 6, "value": 6},
        {"sides": 6, "value": 2},
        {"sides": 6, "value": 3},
        {"sides": 6, "value": 4},
    ]
    assert result["total"] == 8 * 34
    assert result["explanation"] == "d6xd66E: rolls [6, 2, 3, 4] => 272"
    assert result["rng"]["source"] == "SequenceRoller"
    assert re.fullmatch(r"[0-9a-f]{32}", result["request_id"])
    assert result["timestamp"].endswith("Z")


def test_roll_from_text_default_rng_source():
    result = roll_from_text("d20")
    assert result["rng"]["source"] == "random.SystemRandom"
    assert 1 <= result["total"] <= 20
    assert len(result["rolls"]) == 1


def test_roll_from_text_request_ids_are_unique():
    a = roll_from_text("d6")
    b = roll_from_text("d6")
    assert a["request_id"] != b["request_id"]
    assert a["rng"]["nonce"] != b["rng"]["nonce"]
