from sansu.errors import SansuError
from sansu.token import DIGIT_CHUNK

CHUNK_BASE = 10**DIGIT_CHUNK


def error_message(expression: str, location: int, message: str, width: int = 1) -> str:
    marker = "^" * max(width, 1)
    messages = [f"{expression}\n", f"{' ' * location}{marker} {message}\n"]
    return "".join(messages)


def describe_error(error: SansuError) -> str:
    return error_message(error.expression, error.location, error.message, error.width)


def format_number(value: int) -> str:
    # str() refuses ints past sys.get_int_max_str_digits()
    if value < 0:
        return "-" + format_number(-value)
    chunks = []
    while value >= CHUNK_BASE:
        value, chunk = divmod(value, CHUNK_BASE)
        chunks.append(f"{chunk:0{DIGIT_CHUNK}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))
