from typing import Optional

from sansu.token import Token, TokenType


class SansuError(Exception):
    def __init__(self, expression: str, location: int, message: str, width: int = 1):
        super().__init__(message)
        self.expression = expression
        self.location = location
        self.message = message
        self.width = width

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.location})"


class UnrecognizedCharacter(SansuError):
    def __init__(self, expression: str, location: int, char: str):
        super().__init__(expression, location, f"unrecognized character {char!r}")
        self.char = char


class UnterminatedStringLiteral(SansuError):
    def __init__(self, expression: str, location: int):
        super().__init__(expression, location, "unterminated string literal")


def describe_token(token: Token) -> str:
    if token.kind == TokenType.EOF:
        return "end of input"
    return f"{token.kind.name} {token.text!r}"


class UnexpectedToken(SansuError):
    def __init__(
        self,
        expression: str,
        token: Token,
        expected_kind: TokenType,
        expected_text: Optional[str] = None,
    ):
        expected = (
            f"{expected_text!r}" if expected_text is not None else expected_kind.name
        )
        super().__init__(
            expression,
            token.location,
            f"expected {expected} but found {describe_token(token)}",
            token.length,
        )
        self.token = token
        self.expected_kind = expected_kind
        self.expected_text = expected_text


class TrailingInput(SansuError):
    def __init__(self, expression: str, token: Token):
        super().__init__(
            expression,
            token.location,
            f"unexpected {describe_token(token)} after expression",
            token.length,
        )
        self.token = token


class DivisionByZero(SansuError, ZeroDivisionError):
    def __init__(self, expression: str, token: Token):
        super().__init__(expression, token.location, "division by zero")
        self.token = token


class NestingTooDeep(SansuError):
    def __init__(self, expression: str, token: Token):
        super().__init__(expression, token.location, "expression nested too deeply")
        self.token = token
