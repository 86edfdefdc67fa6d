import io

import pytest

from diecodes.spew import NullSpew, Spew, SpewLevel


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (SpewLevel.QUIET, ["q"]),
        (SpewLevel.STANDARD, ["q", "s"]),
        (SpewLevel.VERBOSE, ["q", "s", "v"]),
    ],
)
def test_threshold(level, expected):
    stream = io.StringIO()
    spew = Spew(level, stream)
    spew.quiet("q")
    spew.spew("s")
    spew.verbose("v")
    assert stream.getvalue().splitlines() == expected


def test_null_spew_writes_nothing(capsys):
    spew = NullSpew(SpewLevel.VERBOSE)
    spew.quiet("q")
    spew.verbose("v")
    assert capsys.readouterr().out == ""


def test_parse_level():
    assert SpewLevel.parse("Verbose") is SpewLevel.VERBOSE
    assert SpewLevel.parse(" quiet ") is SpewLevel.QUIET
    with pytest.raises(ValueError):
        SpewLevel.parse("loud")
