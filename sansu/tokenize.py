import string
from typing import Optional, Self

from sansu.errors import UnrecognizedCharacter, UnterminatedStringLiteral
from sansu.token import Token, TokenType, new_eof_token, new_token

STRING_QUOTES = "'\""
PUNCTUATORS = "+-/*&|()"
DOUBLE_PUNCTUATORS = "&|"


class TextScanner:
    def __init__(self, expression: str) -> None:
        self._expression = expression
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def get_char(self) -> Optional[str]:
        index = self._position
        self._position += 1
        if index >= len(self._expression):
            return None
        return self._expression[index]

    def retreat(self) -> None:
        self._position = max(self._position - 1, 0)


class Scanner:
    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._text = TextScanner(expression)
        self._finished = False

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        return self.next_token()

    def next_token(self) -> Token:
        while True:
            start = self._text.position
            char = self._text.get_char()
            if char is None:
                self._text.retreat()
                self._finished = True
                return new_eof_token(start)
            if char == " ":
                continue
            if char in STRING_QUOTES:
                return self.read_string_literal(char, start)
            if char in PUNCTUATORS:
                return self.read_punctuator(char, start)
            if char in string.digits:
                return self.read_number(start)
            raise UnrecognizedCharacter(self.expression, start, char)

    def read_string_literal(self, quote: str, start: int) -> Token:
        while True:
            char = self._text.get_char()
            if char is None:
                self._text.retreat()
                raise UnterminatedStringLiteral(self.expression, start)
            if char == quote:
                break
        end = self._text.position
        return Token(
            TokenType.StringLiteral,
            self.expression[start + 1 : end - 1],
            start,
            end - start,
        )

    def read_punctuator(self, current: str, start: int) -> Token:
        char = self._text.get_char()
        if current not in DOUBLE_PUNCTUATORS or char != current:
            self._text.retreat()
        return new_token(
            TokenType.Punctuator, self.expression, start, self._text.position
        )

    def read_number(self, start: int) -> Token:
        char = self._text.get_char()
        while char is not None and char in string.digits:
            char = self._text.get_char()
        self._text.retreat()
        return new_token(TokenType.Numeric, self.expression, start, self._text.position)


def tokenize(expression: str) -> list[Token]:
    return list(Scanner(expression))
