import pytest

from diecodes.models import DieCode, Directives, Factor, Modifier, Repeat
from diecodes.parser import format_diecode, parse_diecode


@pytest.mark.parametrize(
    ("text", "normalized_expression", "code"),
    [
        ("d6", "d6", DieCode(factors=(Factor(),))),
        ("2d6", "2d6", DieCode(factors=(Factor(repeat=Repeat(2)),))),
        ("d6+1", "d6+1", DieCode(factors=(Factor(modifier=Modifier.plus(1)),))),
        ("d6-2", "d6-2", DieCode(factors=(Factor(modifier=Modifier.minus(2)),))),
        ("d3", "d3", DieCode(factors=(Factor(sides=3),))),
        ("d66", "d66", DieCode(factors=(Factor(sides=66),))),
        ("255d255+255", "255d255+255", DieCode(factors=(Factor(Repeat(255), 255, Modifier.plus(255)),))),
        ("  2d10+3  ", "2d10+3", DieCode(factors=(Factor(Repeat(2), 10, Modifier.plus(3)),))),
        ("1d6", "d6", DieCode(factors=(Factor(),))),
        ("d6E", "d6E", DieCode(factors=(Factor(),), directives=Directives(explode=True))),
        (
            "3d12-3E",
            "3d12-3E",
            DieCode(factors=(Factor(Repeat(3), 12, Modifier.minus(3)),), directives=Directives(explode=True)),
        ),
        (
            "d6x2d6+1xd3-2E",
            "d6x2d6+1xd3-2E",
            DieCode(
                factors=(
                    Factor(),
                    Factor(repeat=Repeat(2), modifier=Modifier.plus(1)),
                    Factor(sides=3, modifier=Modifier.minus(2)),
                ),
                directives=Directives(explode=True),
            ),
        ),
    ],
)
def test_parse_acceptance(text, normalized_expression, code):
    parsed = parse_diecode(text)
    assert parsed == code
    assert format_diecode(parsed) == normalized_expression


def test_factor_chain_keeps_order():
    parsed = parse_diecode("d6xd6xd6")
    assert parsed.factors == (Factor(), Factor(), Factor())
    assert parsed.directives.explode is False

    parsed = parse_diecode("d4x2d8xd20+1")
    assert [f.sides for f in parsed.factors] == [4, 8, 20]
    assert [f.repeat.number for f in parsed.factors] == [1, 2, 1]


def test_missing_repeat_means_one():
    parsed = parse_diecode("d8")
    assert parsed.factors[0].repeat == Repeat(number=1)


def test_multi_digit_operand():
    parsed = parse_diecode("d6+123")
    assert parsed.factors[0].modifier == Modifier.plus(123)
