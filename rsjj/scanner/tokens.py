"""Scanner tokens."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final

from rsjj.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Single-character punctuation
    # -------------------------
    LEFT_PAREN = 1  # (
    RIGHT_PAREN = 2  # )
    LEFT_BRACE = 3  # {
    RIGHT_BRACE = 4  # }
    COMMA = 5  # ,
    DOT = 6  # .
    MINUS = 7  # -
    PLUS = 8  # +
    SEMICOLON = 9  # ;
    SLASH = 10  # /
    STAR = 11  # *

    # -------------------------
    # One or two character operators
    # -------------------------
    BANG = 20  # !
    BANG_EQUAL = 21  # !=
    EQUAL = 22  # =
    EQUAL_EQUAL = 23  # ==
    GREATER = 24  # >
    GREATER_EQUAL = 25  # >=
    LESS = 26  # <
    LESS_EQUAL = 27  # <=

    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = 30
    STRING = 31  # lexeme keeps the quotes
    NUMBER = 32

    # -------------------------
    # Reserved words
    # -------------------------
    AND = 40
    CLASS = 41
    ELSE = 42
    FALSE = 43
    FOR = 44
    FUN = 45
    IF = 46
    NIL = 47
    OR = 48
    PRINT = 49
    RETURN = 50
    SUPER = 51
    THIS = 52
    TRUE = 53
    LET = 54
    WHILE = 55

    # -------------------------
    # Sentinel
    # -------------------------
    EOF = 99

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_KINDS

    @property
    def is_literal(self) -> bool:
        return self in (
            TokenKind.IDENTIFIER,
            TokenKind.STRING,
            TokenKind.NUMBER,
        )


KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "let": TokenKind.LET,
        "while": TokenKind.WHILE,
    }
)
"""Reserved words, matched case-sensitively against whole identifiers."""

_KEYWORD_KINDS: Final[frozenset[TokenKind]] = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        ";": TokenKind.SEMICOLON,
        "*": TokenKind.STAR,
    }
)

# lead character -> (kind alone, kind when followed by "=")
EQUAL_SUFFIX_TOKENS: Final[Mapping[str, tuple[TokenKind, TokenKind]]] = MappingProxyType(
    {
        "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
        "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
        "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
        ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `lexeme` is the exact source text of the token (a STRING lexeme includes
    its quotes) and is empty for EOF. `line` is the line the token started on.
    `range` holds the character offsets the lexeme was sliced from.
    """

    kind: TokenKind
    lexeme: str
    line: int
    range: TextRange

    @property
    def literal(self) -> float | str | None:
        """Python value of a NUMBER or STRING token, otherwise None."""
        if self.kind == TokenKind.NUMBER:
            return float(self.lexeme)
        if self.kind == TokenKind.STRING:
            if len(self.lexeme) >= 2 and self.lexeme.endswith('"'):
                return self.lexeme[1:-1]
            # unterminated: everything after the opening quote
            return self.lexeme[1:]
        return None

    def __str__(self) -> str:
        return f"{self.kind.name} {self.lexeme}"
