"""
Warmup Lexer Package

Implements the lexical analyzer (tokenizer) for computation programs:

    computation c; var x; x <- 3 + 4 * 2; c <- x.

Key Features:
- Single-byte ASCII input with one scan cursor
- Maximal-munch identifiers and 32-bit integer literals
- Exact keyword recognition ('computation', 'var')
- One token of cached lookahead via peek_token()
- Fatal, typed lexical errors with source locations
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS, INT_MIN, INT_MAX
from .lexer import Lexer, Tokenizer, LexResult, tokenize_string, tokenize_file
from .errors import (
    LexerError,
    UnexpectedCharacterError,
    MalformedAssignmentError,
    NumberOverflowError,
    UnexpectedEndOfInputError,
)

__all__ = [
    "Lexer",
    "Tokenizer",
    "LexResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "SYMBOLS",
    "INT_MIN",
    "INT_MAX",
    "tokenize_string",
    "tokenize_file",
    "LexerError",
    "UnexpectedCharacterError",
    "MalformedAssignmentError",
    "NumberOverflowError",
    "UnexpectedEndOfInputError",
]
