"""
Poem Lexer - turns source text into tokens

Maximal munch over the rule table in rules.py: at every position each
rule is tried, the longest span wins and priorities break ties. Input
that no rule accepts is skipped; the skip policy decides whether that
is silent, recorded, or fatal.

xwest
"""

import logging
from typing import Iterator, List, Optional, Union

from .config import LexerConfig, SkipPolicy, DEFAULT_CONFIG
from .errors import (
    LexerError, LexerWarning, create_integer_overflow_error,
    error_for_span, warning_for_span
)
from .rules import LexRule, best_match
from .tokens import Token, SkippedSpan, SourceLocation

logger = logging.getLogger(__name__)

ScanResult = Union[Token, SkippedSpan]


class Lexer:
    """
    Poem lexical analyzer.

    Converts source code text into a list of tokens. Skipped input is
    available through ``scan_results`` and, depending on the configured
    skip policy, through ``warnings`` or a raised ``LexerError``.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            config: Skip policy and escape handling (defaults to silent, raw)
        """
        self.source = source
        self.filename = filename
        self.config = config or DEFAULT_CONFIG
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens in source order

        Raises:
            LexerError: On integer overflow, or on skipped input in strict mode
        """
        tokens = [result for result in self.scan_results() if isinstance(result, Token)]
        self.tokens = tokens
        return tokens

    def scan_results(self) -> Iterator[ScanResult]:
        """
        Lazily scan the source, yielding tokens and skipped spans in order.

        Restarts from the beginning of the source on every call.
        """
        self._reset()
        skipped = 0
        emitted = 0

        while self.pos < len(self.source):
            self._skip_whitespace()

            if self.pos >= len(self.source):
                break

            match = best_match(self.source, self.pos)
            if match is None:
                span = self._skip_unrecognized()
                self._report_skipped(span)
                skipped += 1
                yield span
                continue

            rule, length = match
            emitted += 1
            yield self._make_token(rule, length)

        logger.debug("Tokenized %s: %d tokens, %d skipped spans",
                     self.filename, emitted, skipped)

    def _reset(self):
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors.clear()
        self.warnings.clear()

    def _make_token(self, rule: LexRule, length: int) -> Token:
        """Build the token for a matched span and move past it."""
        location = self._location()
        lexeme = self.source[self.pos:self.pos + length]

        value = None
        if rule.convert is not None:
            try:
                value = rule.convert(lexeme, self.config)
            except OverflowError:
                error = create_integer_overflow_error(lexeme, location)
                self.errors.append(error)
                raise error

        self._advance_by(length)
        return Token(rule.token_type, value, lexeme, location)

    def _skip_unrecognized(self) -> SkippedSpan:
        """
        Consume a maximal run of input that no rule accepts.

        A double quote that starts no string literal is reported on its
        own as an unterminated string; scanning resumes right after it.
        """
        location = self._location()
        start_pos = self.pos

        if self.source[self.pos] == '"':
            self._advance()
            return SkippedSpan('"', location, "L002", "Unterminated string literal")

        self._advance()
        while (self.pos < len(self.source)
               and not self.source[self.pos].isspace()
               and self.source[self.pos] != '"'
               and best_match(self.source, self.pos) is None):
            self._advance()

        return SkippedSpan(self.source[start_pos:self.pos], location)

    def _report_skipped(self, span: SkippedSpan):
        policy = self.config.skip_policy
        logger.debug("Skipping unrecognized input at %s: %r", span.location, span.text)

        if policy is SkipPolicy.STRICT:
            error = error_for_span(span)
            self.errors.append(error)
            raise error
        if policy is SkipPolicy.COLLECT:
            self.warnings.append(warning_for_span(span))

    def _skip_whitespace(self):
        """Skip whitespace, stopping at line breaks (they are tokens)."""
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == '\n' or not char.isspace():
                break
            if char == '\r' and self._peek() == '\n':
                break
            self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def scan(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Tokenize Poem source text.

    Pure function of its input: unrecognized spans are dropped under the
    default config, and integer overflow raises ``LexerError``.
    """
    return tokenize_string(source, config=config)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Lexer options

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename, config).tokenize()


def read_source(filepath: str) -> str:
    """Read a UTF-8 source file, keeping CRLF line endings intact."""
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    logger.debug("Read %d characters from %s", len(source), filepath)
    return source


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        config: Lexer options

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    source = read_source(filepath)
    return tokenize_string(source, str(filepath), config)
