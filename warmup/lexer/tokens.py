"""
Token definitions for the warmup computation lexer.

This module defines every token the language has:
- Keywords (``computation``, ``var``)
- Arithmetic operators and the ``<-`` assignment arrow
- Literals (32-bit integers) and identifiers
- Punctuation, including the ``.`` end-of-computation marker

Tokens deliberately carry no source position; diagnostics compute one
from the lexer cursor when something goes wrong.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


# Target integer width for number literals (signed 32-bit)
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class TokenType(Enum):
    """
    Enumeration of all token types in the language.

    The set is closed: a parser matching on it must handle every member.
    """

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    IDENTIFIER = auto()             # x, total, a1
    NUMBER = auto()                 # 0, 42, 2147483647

    # ========================================================================
    # Keywords
    # ========================================================================
    COMPUTATION = auto()            # computation
    VARIABLE = auto()               # var

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    TIMES = auto()                  # *
    DIVIDE = auto()                 # /
    REMAINDER = auto()              # %
    ASSIGNMENT = auto()             # <-

    # ========================================================================
    # Punctuation
    # ========================================================================
    OPENPAR = auto()                # (
    CLOSEPAR = auto()               # )
    SEMICOLON = auto()              # ;
    EOC = auto()                    # . (end of computation)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Only used for error reporting; tokens themselves are position-free.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``value`` holds the identifier name for IDENTIFIER, the parsed int for
    NUMBER, and is None for every other token type.
    """
    type: TokenType
    value: Any = None

    def __str__(self) -> str:
        if self.type in PAYLOAD_TYPES:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    @classmethod
    def identifier(cls, name: str) -> "Token":
        """Build an IDENTIFIER token."""
        return cls(TokenType.IDENTIFIER, name)

    @classmethod
    def number(cls, value: int) -> "Token":
        """Build a NUMBER token, checking the 32-bit range."""
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f"{value} does not fit a signed 32-bit integer")
        return cls(TokenType.NUMBER, value)

    @classmethod
    def of(cls, token_type: TokenType) -> "Token":
        """Build a token that carries no payload."""
        if token_type in PAYLOAD_TYPES:
            raise ValueError(f"{token_type.name} tokens need a value")
        return cls(token_type)

    @property
    def lexeme(self) -> str:
        """The source text this token stands for."""
        if self.type in PAYLOAD_TYPES:
            return str(self.value)
        return TOKEN_LEXEMES[self.type]

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.NUMBER

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    @property
    def is_eoc(self) -> bool:
        return self.type == TokenType.EOC


# Lookup tables used by the lexer for keyword/symbol recognition

KEYWORDS = {
    "computation": TokenType.COMPUTATION,
    "var": TokenType.VARIABLE,
}

# Single-character tokens. '<' is absent on purpose: it only ever starts '<-'.
SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.DIVIDE,
    "%": TokenType.REMAINDER,
    "(": TokenType.OPENPAR,
    ")": TokenType.CLOSEPAR,
    ";": TokenType.SEMICOLON,
    ".": TokenType.EOC,
}

ASSIGNMENT_LEXEME = "<-"

PAYLOAD_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.NUMBER})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.TIMES,
    TokenType.DIVIDE, TokenType.REMAINDER, TokenType.ASSIGNMENT,
})

TOKEN_LEXEMES = {
    **{token_type: text for text, token_type in KEYWORDS.items()},
    **{token_type: text for text, token_type in SYMBOLS.items()},
    TokenType.ASSIGNMENT: ASSIGNMENT_LEXEME,
}


def keyword_or_identifier(text: str) -> Token:
    """Classify a scanned alphanumeric run."""
    token_type: Optional[TokenType] = KEYWORDS.get(text)
    if token_type is None:
        return Token.identifier(text)
    return Token.of(token_type)
