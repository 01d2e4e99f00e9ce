import enum
from dataclasses import dataclass

ERROR_CONTEXT_CHARS = 10


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - ERROR_CONTEXT_CHARS)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + ERROR_CONTEXT_CHARS)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _is_digit(s: str) -> bool:
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return "0" <= s <= "9"


def tokenize(code: str, strict: bool = False) -> list[Token]:
    """Split code into number, operator and bracket tokens.

    Any non-digit ends a number in progress, so "1 2" is two numbers.
    Unrecognized characters are then dropped. With strict=True anything other
    than whitespace that is not a digit, operator or bracket raises
    TokenizerError.
    """
    tokens: list[Token] = []
    digits: list[str] = []
    for i, char in enumerate(code):
        if _is_digit(char):
            digits.append(char)
            continue

        if digits:
            tokens.append(Token(type=TokenType.NUMBER, lexeme="".join(digits)))
            digits = []

        if char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char))
        elif strict and not char.isspace():
            raise TokenizerError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)

    if digits:
        tokens.append(Token(type=TokenType.NUMBER, lexeme="".join(digits)))

    return tokens


def untokenize(tokens: list[Token]) -> str:
    return " ".join(t.lexeme for t in tokens)
