"""
Warmup Computation Language Package

Front end for the warmup computation language. Only the lexical
analysis stage lives here so far.

Architecture:
    warmup/
    └── lexer/           # Tokenization and lexical analysis

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Tokenizer, Token, TokenType, LexerError

__all__ = [
    # Core classes
    "Lexer",
    "Tokenizer",
    "Token",
    "TokenType",
    "LexerError",

    # Version info
    "__version__",
    "__license__",
]
