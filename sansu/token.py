from dataclasses import dataclass
from enum import IntEnum

DIGIT_CHUNK = 4000


class TokenType(IntEnum):
    Keyword = 1
    Identifier = 2
    Punctuator = 3
    StringLiteral = 4
    Numeric = 5
    EOF = 6


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: str = ""
    location: int = 0
    length: int = 0

    @property
    def value(self) -> int:
        # int() refuses strings past sys.get_int_max_str_digits()
        value = 0
        for index in range(0, len(self.text), DIGIT_CHUNK):
            chunk = self.text[index : index + DIGIT_CHUNK]
            value = value * 10 ** len(chunk) + int(chunk)
        return value



def new_token(token_type: TokenType, expression: str, start: int, end: int) -> Token:
    return Token(token_type, expression[start:end], start, end - start)


def new_eof_token(location: int) -> Token:
    return Token(TokenType.EOF, "", location, 0)


def equal(token: Token, kind: TokenType, text: str) -> bool:
    return token.kind == kind and token.text == text


def is_punctuator(token: Token, text: str) -> bool:
    return equal(token, TokenType.Punctuator, text)
