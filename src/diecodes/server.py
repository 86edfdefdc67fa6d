from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .dice import roll_from_text
from .errors import DiceError


mcp = FastMCP("diecodes")


@mcp.tool()
def roll_dice(code: str, explode: bool = False, force_standard_66: bool = False):
    """Roll a dice code such as '2d6+3', 'd6xd6', 'd66' or '3d12-3E'.

    Input: code (string); explode makes sixes on a d6 roll again and add;
    force_standard_66 treats d66 as a real 66-sided die.
    Output: structured JSON with every die drawn + explanation

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_text(code, explode=explode, force_standard_66=force_standard_66)
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
