"""
Warmup lexer - turns computation source text into tokens

Scans a single-byte source one character at a time with a single cursor.
Tokens are pulled on demand with next_token(); peek_token() gives one
token of lookahead without moving the cursor.
"""

import logging
import string
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from .tokens import (
    Token, TokenType, SourceLocation, SYMBOLS, INT_MAX, keyword_or_identifier
)
from .errors import (
    LexerError, create_unexpected_character_error, create_malformed_assignment_error,
    create_number_overflow_error, create_unexpected_end_error
)

logger = logging.getLogger(__name__)

# ASCII-only byte classes
_LETTERS = frozenset(string.ascii_letters.encode("ascii"))
_DIGITS = frozenset(string.digits.encode("ascii"))
_ALPHANUMERIC = _LETTERS | _DIGITS
_WHITESPACE = frozenset(b" \t\n\r\x0c")

_INT_MAX_DIGITS = len(str(INT_MAX))


@dataclass(frozen=True)
class LexResult:
    """Outcome of a single scan: either a token or the error that stopped it."""
    token: Optional[Token] = None
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Token:
        """Return the token, re-raising the error if the scan failed."""
        if self.error is not None:
            raise self.error
        return self.token


class Lexer:
    """
    Lexical analyzer for computation programs.

    Owns the input as immutable bytes plus one cursor. The cursor only
    moves forward, and a failed scan leaves it where it was.
    Instances are not safe to share between threads.
    """

    def __init__(self, source: Union[str, bytes, bytearray], filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text. A str is UTF-8 encoded; bytes are used as-is.
                Any byte outside ASCII fails only when a scan reaches it.
            filename: Name of source file for error reporting
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        self.source = bytes(source)
        self.filename = filename
        self._pos = 0

        # (start cursor, token, end cursor) of the last peeked token
        self._lookahead: Optional[Tuple[int, Token, int]] = None

        logger.debug("Lexer created for %s (%d bytes)", filename, len(self.source))

    @property
    def position(self) -> int:
        """Current cursor (byte offset into the source)."""
        return self._pos

    def next_token(self) -> Token:
        """
        Consume and return the next token.

        Raises:
            LexerError: If no valid token starts at the cursor
        """
        cached = self._lookahead
        self._lookahead = None
        if cached is not None and cached[0] == self._pos:
            self._pos = cached[2]
            return cached[1]

        start_pos = self._pos
        try:
            return self._scan_token()
        except Exception:
            self._pos = start_pos
            raise

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.

        The following next_token() call returns the same token and ends at
        the same cursor it would have reached without the peek.
        """
        cached = self._lookahead
        if cached is not None and cached[0] == self._pos:
            return cached[1]

        start_pos = self._pos
        try:
            token = self._scan_token()
            self._lookahead = (start_pos, token, self._pos)
        finally:
            self._pos = start_pos
        return token

    def try_next_token(self) -> LexResult:
        """Like next_token(), but report a lexical error as a value."""
        try:
            return LexResult(token=self.next_token())
        except LexerError as e:
            return LexResult(error=e)

    def tokenize(self) -> List[Token]:
        """
        Tokenize from the cursor through the end of the computation.

        Returns:
            List of tokens ending with the EOC token
        """
        tokens = list(self)
        logger.debug("Tokenized %s: %d tokens", self.filename, len(tokens))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOC:
                return

    def at_end(self) -> bool:
        """Check if only whitespace remains after the cursor."""
        pos = self._pos
        while pos < len(self.source) and self.source[pos] in _WHITESPACE:
            pos += 1
        return pos >= len(self.source)

    def _scan_token(self) -> Token:
        self._skip_whitespace()

        if self._pos >= len(self.source):
            raise self._fail(create_unexpected_end_error("a token", self._location(self._pos)))

        current = self.source[self._pos]

        if current in _LETTERS:
            return self._scan_identifier()
        if current in _DIGITS:
            return self._scan_number()
        if current == ord("<"):
            return self._scan_assignment()

        token_type = SYMBOLS.get(chr(current))
        if token_type is None:
            raise self._fail(create_unexpected_character_error(chr(current), self._location(self._pos)))

        self._pos += 1
        return Token.of(token_type)

    def _scan_identifier(self) -> Token:
        """Scan a maximal alphanumeric run and classify it."""
        start_pos = self._pos
        self._consume_while(_ALPHANUMERIC)
        return keyword_or_identifier(self.source[start_pos:self._pos].decode("ascii"))

    def _scan_number(self) -> Token:
        """Scan a maximal digit run into a 32-bit NUMBER token."""
        start_pos = self._pos
        self._consume_while(_DIGITS)
        lexeme = self.source[start_pos:self._pos].decode("ascii")

        # Leading zeros never change the value; compare lengths before int()
        digits = lexeme.lstrip("0") or "0"
        if len(digits) > _INT_MAX_DIGITS or int(digits) > INT_MAX:
            raise self._fail(create_number_overflow_error(lexeme, self._location(start_pos)))

        return Token.number(int(digits))

    def _scan_assignment(self) -> Token:
        start_pos = self._pos
        self._pos += 1  # Skip '<'

        if self._pos >= len(self.source):
            raise self._fail(create_unexpected_end_error("'-' after '<'", self._location(start_pos)))

        following = self.source[self._pos]
        if following != ord("-"):
            raise self._fail(create_malformed_assignment_error(chr(following), self._location(start_pos)))

        self._pos += 1
        return Token.of(TokenType.ASSIGNMENT)

    def _skip_whitespace(self):
        self._consume_while(_WHITESPACE)

    def _consume_while(self, allowed: frozenset):
        """Advance past every byte in `allowed`, stopping at end of input."""
        while self._pos < len(self.source) and self.source[self._pos] in allowed:
            self._pos += 1

    def _location(self, offset: int) -> SourceLocation:
        """Derive line/column for a byte offset."""
        line = self.source.count(b"\n", 0, offset) + 1
        column = offset - (self.source.rfind(b"\n", 0, offset) + 1) + 1
        return SourceLocation(self.filename, line, column, offset)

    def _fail(self, error: LexerError) -> LexerError:
        logger.debug("Lexical error in %s: %s", self.filename, error.diagnostic.message)
        return error


# The scanning engine is also known by its role name
Tokenizer = Lexer


def tokenize_string(source: Union[str, bytes], filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOC

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens ending with EOC

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'rb') as f:
        source = f.read()

    return tokenize_string(source, filepath)
