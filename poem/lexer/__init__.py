"""
Poem Lexer Package

Implements the lexical analyzer (tokenizer) for the Poem language.

Key Features:
- Maximal munch over a declarative rule table with tie-break priorities
- Significant newlines (LF and CRLF) for line-oriented statements
- Keyword/identifier disambiguation (fname is one identifier, fn a keyword)
- Configurable handling of unrecognized input and string escapes
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, SkippedSpan
from .config import LexerConfig, SkipPolicy, EscapeMode
from .lexer import Lexer, scan, tokenize_string, tokenize_file, read_source
from .errors import LexerError, LexerWarning

__all__ = [
    "Lexer",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "read_source",
    "Token",
    "TokenType",
    "SourceLocation",
    "SkippedSpan",
    "LexerConfig",
    "SkipPolicy",
    "EscapeMode",
    "LexerError",
    "LexerWarning",
]
