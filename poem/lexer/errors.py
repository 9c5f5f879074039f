"""
Error handling for the Poem lexer.

Provides error reporting with source location information, correction
suggestions, and diagnostics that tools can print as-is.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, SkippedSpan


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix = f"{severity_prefix}[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Suggestion helpers used when building diagnostics for skipped input.
    """

    @staticmethod
    def suggest_operator_corrections(invalid_text: str) -> List[str]:
        """Suggest operators that the invalid text was probably meant to be."""
        from .tokens import OPERATORS

        suggestions = []
        for operator in OPERATORS.keys():
            if len(operator) < 2:
                continue
            if operator.startswith(invalid_text) or (
                len(operator) == len(invalid_text)
                and ErrorRecovery._edit_distance(invalid_text, operator) <= 1
            ):
                suggestions.append(operator)

        return suggestions[:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L007": "Integer literal overflow",
}


def render_text(text: str) -> str:
    """Spell out non-printable characters as U+XXXX."""
    return "".join(
        char if char.isprintable() else f"U+{ord(char):04X}" for char in text
    )


def describe_invalid_text(text: str) -> str:
    """Help text for a run of characters no rule accepts."""
    if not any(char.isprintable() for char in text):
        noun = "character" if len(text) == 1 else "characters"
        return f"Non-printable {noun} ({render_text(text)}) not allowed."
    return f"'{render_text(text)}' is not valid in Poem source code."


def create_invalid_character_error(text: str, location: SourceLocation) -> LexerError:
    """Create an error for unrecognized input."""
    suggestions = ErrorRecovery.suggest_operator_corrections(text)
    help_text = None

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    else:
        help_text = describe_invalid_text(text)

    return LexerError(
        message=f"Invalid character: '{render_text(text)}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for an unterminated string literal."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote', "Check for unescaped quotes in the string"]
    )


def create_integer_overflow_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for an integer literal outside the 64-bit range."""
    if len(lexeme) > 24:
        lexeme = f"{lexeme[:20]}... ({len(lexeme)} digits)"
    return LexerError(
        message=f"Integer literal overflow: '{lexeme}'",
        location=location,
        code="L007",
        help_text="Integer literals must fit in a signed 64-bit integer (max 9223372036854775807).",
    )


def error_for_span(span: SkippedSpan) -> LexerError:
    """Build the fatal error reported for a skipped span in strict mode."""
    if span.code == "L002":
        return create_unterminated_string_error(span.location)
    return create_invalid_character_error(span.text, span.location)


def warning_for_span(span: SkippedSpan) -> LexerWarning:
    """Build the warning recorded for a skipped span in collect mode."""
    error = error_for_span(span)
    diagnostic = error.diagnostic
    return LexerWarning(
        message=f"Skipped {diagnostic.message[0].lower()}{diagnostic.message[1:]}",
        location=diagnostic.location,
        code=diagnostic.code,
        help_text=diagnostic.help_text,
        suggestions=diagnostic.suggestions
    )
