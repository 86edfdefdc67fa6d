from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, nothing is rolled).

    Every message starts with a stable bracketed code, e.g. ``[ZERO_REPEATS]``.
    """

    code: str = "UNPARSEABLE_INPUT"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"[{self.code}] {detail}")


class UnexpectedCharError(DiceError):
    code = "UNEXPECTED_CHAR"

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected '{expected}' but found '{found}'.")


class UnexpectedEndOfStringError(DiceError):
    code = "UNEXPECTED_END"

    def __init__(self, context: str) -> None:
        self.context = context
        super().__init__(f"Unexpected end of input while parsing '{context}'.")


class UnexpectedTrailingInputError(DiceError):
    code = "TRAILING_INPUT"

    def __init__(self, remainder: str) -> None:
        self.remainder = remainder
        super().__init__(f"Unexpected input after the dice code: '{remainder}'.")


class NumberParseError(DiceError):
    code = "BAD_NUMBER"

    def __init__(self, text: str) -> None:
        self.text = text
        if text:
            detail = f"'{text}' is not a number between 0 and 255."
        else:
            detail = "Expected a number but found none."
        super().__init__(detail)


class ZeroOrOneSideError(DiceError):
    code = "ZERO_OR_ONE_SIDE"

    def __init__(self) -> None:
        super().__init__("Dice cannot have zero sides or one side.")


class ZeroRepeatsError(DiceError):
    code = "ZERO_REPEATS"

    def __init__(self) -> None:
        super().__init__("Repeating zero times is not allowed.")


class RollerExhaustedError(RuntimeError):
    """A scripted roller ran out of values before the evaluation finished."""
