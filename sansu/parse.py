# exp    := term { ("+" | "-") term }
# term   := factor { ("*" | "/") factor }
# factor := "(" exp ")" | NUMBER

from typing import Optional

from sansu.errors import (
    DivisionByZero,
    NestingTooDeep,
    TrailingInput,
    UnexpectedToken,
)
from sansu.token import Token, TokenType, is_punctuator
from sansu.tokenize import Scanner


def truncate_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


class Parse:
    scanner: Scanner
    token: Token

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.scanner = Scanner(expression)
        self.token = self.scanner.next_token()

    def match(self, kind: TokenType, text: Optional[str] = None) -> Token:
        token = self.token
        if token.kind != kind or (text is not None and token.text != text):
            raise UnexpectedToken(self.expression, token, kind, text)
        self.token = self.scanner.next_token()
        return token

    def parse(self) -> int:
        try:
            result = self.parse_expression()
        except RecursionError:
            raise NestingTooDeep(self.expression, self.token) from None
        if self.token.kind != TokenType.EOF:
            raise TrailingInput(self.expression, self.token)
        return result

    def parse_expression(self) -> int:
        result = self.parse_term()
        while True:
            if is_punctuator(self.token, "+"):
                self.match(TokenType.Punctuator, "+")
                result += self.parse_term()
                continue
            if is_punctuator(self.token, "-"):
                self.match(TokenType.Punctuator, "-")
                result -= self.parse_term()
                continue
            return result

    def parse_term(self) -> int:
        result = self.parse_factor()
        while True:
            if is_punctuator(self.token, "*"):
                self.match(TokenType.Punctuator, "*")
                result *= self.parse_factor()
                continue
            if is_punctuator(self.token, "/"):
                operator = self.match(TokenType.Punctuator, "/")
                divisor = self.parse_factor()
                if divisor == 0:
                    raise DivisionByZero(self.expression, operator)
                result = truncate_divide(result, divisor)
                continue
            return result

    def parse_factor(self) -> int:
        if is_punctuator(self.token, "("):
            self.match(TokenType.Punctuator, "(")
            result = self.parse_expression()
            self.match(TokenType.Punctuator, ")")
            return result
        return self.match(TokenType.Numeric).value


def evaluate(expression: str) -> int:
    return Parse(expression).parse()
