"""
Token definitions for the Poem lexer.

This module defines all token types supported by Poem:
- Keywords (fn, let, use, rail, on, success, error, print)
- Operators and punctuation (|>, :, =, +, /, parentheses)
- Literals (strings, 64-bit integers)
- Identifiers
- Newlines, which are significant in Poem

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Poem.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Structural Tokens
    # ========================================================================
    NEWLINE = auto()               # \n or \r\n (statement separator)

    # ========================================================================
    # Literals
    # ========================================================================
    STRING = auto()                # "hello"
    INTEGER = auto()               # 42

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    IDENTIFIER = auto()            # sum, value, _tmp1

    FN = auto()                    # fn (function)
    LET = auto()                   # let (binding)
    USE = auto()                   # use (import)
    RAIL = auto()                  # rail (pipeline block)
    ON = auto()                    # on (branch handler)
    SUCCESS = auto()               # success
    ERROR = auto()                 # error
    PRINT = auto()                 # print

    # ========================================================================
    # Operators and Punctuation
    # ========================================================================
    PIPE = auto()                  # |>
    COLON = auto()                 # :
    EQUALS = auto()                # =
    PLUS = auto()                  # +
    SLASH = auto()                 # /
    LEFT_PAREN = auto()            # (
    RIGHT_PAREN = auto()           # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Poem language.

    Two tokens are equal when their type and semantic value are equal.
    The raw lexeme and the source location ride along for diagnostics
    but never take part in comparison.
    """
    type: TokenType
    value: Any = None               # Decoded value (str for STRING/IDENTIFIER, int for INTEGER)
    lexeme: str = field(default="", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.value!r}, "
                f"{self.lexeme!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.STRING, TokenType.INTEGER)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


@dataclass(frozen=True)
class SkippedSpan:
    """
    A maximal run of source text that matched no lexical rule.

    Produced alongside tokens by ``Lexer.scan_results`` so callers can
    see what the default scan silently drops.
    """
    text: str
    location: SourceLocation
    code: str = "L001"
    reason: str = "Invalid character"

    def __str__(self) -> str:
        return f"{self.location}: {self.reason}: {self.text!r}"


# Lookup tables for token recognition. The rule table in rules.py is
# built from these.

KEYWORDS = {
    "fn": TokenType.FN,
    "let": TokenType.LET,
    "use": TokenType.USE,
    "rail": TokenType.RAIL,
    "on": TokenType.ON,
    "success": TokenType.SUCCESS,
    "error": TokenType.ERROR,
    "print": TokenType.PRINT,
}

OPERATORS = {
    "|>": TokenType.PIPE,
    ":": TokenType.COLON,
    "=": TokenType.EQUALS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())
OPERATOR_TYPES = frozenset(OPERATORS.values())

# Integer literals must fit a signed 64-bit integer
INT64_MAX = 2 ** 63 - 1
