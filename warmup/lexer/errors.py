"""
Error handling for the warmup lexer.

Every lexical error is fatal for the scan that raised it: the lexer never
skips input or hands back an error token. Errors still carry a full
diagnostic (location, code, help text) so the caller can report them.
"""

from typing import Optional, List
from dataclasses import dataclass, field
from .tokens import SourceLocation, INT_MAX


@dataclass(frozen=True)
class Diagnostic:
    """What stopped the scan, where, and how to fix the source."""
    message: str
    location: SourceLocation
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"ERROR: {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """
    Base class for lexical errors.

    Catch this to handle every condition the lexer can raise.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def offset(self) -> int:
        """Byte offset of the offending input."""
        return self.diagnostic.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharacterError(LexerError):
    """A character that does not start any token."""


class MalformedAssignmentError(LexerError):
    """'<' not immediately followed by '-'."""


class NumberOverflowError(LexerError):
    """A digit run that does not fit a signed 32-bit integer."""


class UnexpectedEndOfInputError(LexerError):
    """Input ran out where a character was required."""


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Malformed assignment",
    "L003": "Number literal overflow",
    "L004": "Unexpected end of input",
}


def _describe(char: str) -> str:
    if char.isprintable() and ord(char) < 0x80:
        return repr(char)
    return f"byte 0x{ord(char):02X}"


def _shorten(lexeme: str, limit: int = 24) -> str:
    if len(lexeme) <= limit:
        return lexeme
    return f"{lexeme[:limit]}... ({len(lexeme)} digits)"


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character that starts no token."""
    if ord(char) >= 0x80:
        help_text = "Source text is restricted to single-byte ASCII characters."
    else:
        help_text = "Valid tokens are identifiers, numbers, 'computation', 'var', '<-' and + - * / % ( ) ; ."

    return UnexpectedCharacterError(Diagnostic(
        message=f"Unexpected character: {_describe(char)}",
        location=location,
        code="L001",
        help_text=help_text
    ))


def create_malformed_assignment_error(found: str, location: SourceLocation) -> MalformedAssignmentError:
    """Create an error for a '<' that is not part of '<-'."""
    return MalformedAssignmentError(Diagnostic(
        message=f"Assignment error: expected '-' after '<', found {_describe(found)}",
        location=location,
        code="L002",
        help_text="'<' is only valid as the first half of the assignment arrow '<-'.",
        suggestions=["Write the assignment as '<-'"]
    ))


def create_number_overflow_error(lexeme: str, location: SourceLocation) -> NumberOverflowError:
    """Create an error for an integer literal that is out of range."""
    return NumberOverflowError(Diagnostic(
        message=f"Number literal overflow: '{_shorten(lexeme)}'",
        location=location,
        code="L003",
        help_text=f"Integer literals must not exceed {INT_MAX}."
    ))


def create_unexpected_end_error(expected: str, location: SourceLocation) -> UnexpectedEndOfInputError:
    """Create an error for running off the end of the input."""
    return UnexpectedEndOfInputError(Diagnostic(
        message=f"Unexpected end of input, expected {expected}",
        location=location,
        code="L004",
        help_text="A computation must be terminated with '.'."
    ))
