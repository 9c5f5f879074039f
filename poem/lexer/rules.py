"""
Lexical rule table for Poem.

Every rule is tried at each scan position. The lexer keeps the longest
match and breaks ties with the rule priority, so the table order only
matters between rules that match the same span with the same priority
(which never happens with the rules below).

Priorities:
    NEWLINE_PRIORITY  newline wins every tie
    FIXED_PRIORITY    keywords and punctuation beat the identifier pattern
    PATTERN_PRIORITY  strings, integers, identifiers
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .config import EscapeMode, LexerConfig
from .tokens import TokenType, KEYWORDS, OPERATORS, INT64_MAX

NEWLINE_PRIORITY = 10
FIXED_PRIORITY = 2
PATTERN_PRIORITY = 1

STRING_PATTERN = re.compile(r'"(?:[^"\\]|\\.)*"')
INTEGER_PATTERN = re.compile(r'[0-9]+')
IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
NEWLINE_PATTERN = re.compile(r'\r?\n')

ESCAPE_SEQUENCES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
    '"': '"',
    "'": "'",
    '0': '\0',
}

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


@dataclass(frozen=True)
class LexRule:
    """
    One entry of the rule table.

    ``match`` returns the length of the span the rule accepts at a
    position (0 for no match). ``convert`` turns the matched lexeme into
    the token value; rules without a converter produce valueless tokens.
    """
    name: str
    token_type: TokenType
    priority: int
    match: Callable[[str, int], int]
    convert: Optional[Callable[[str, LexerConfig], Any]] = None


def fixed_text(text: str) -> Callable[[str, int], int]:
    """Matcher for a rule whose text is spelled out exactly."""
    length = len(text)

    def match(source: str, pos: int) -> int:
        return length if source.startswith(text, pos) else 0

    return match


def pattern(regex: re.Pattern) -> Callable[[str, int], int]:
    """Matcher for a rule described by a compiled regular expression."""

    def match(source: str, pos: int) -> int:
        found = regex.match(source, pos)
        return found.end() - pos if found else 0

    return match


def decode_escapes(body: str) -> str:
    """Translate backslash escapes in a string literal body."""
    parts = []
    i = 0
    while i < len(body):
        char = body[i]
        if char != '\\' or i + 1 >= len(body):
            parts.append(char)
            i += 1
            continue

        escape_char = body[i + 1]
        i += 2
        if escape_char in ESCAPE_SEQUENCES:
            parts.append(ESCAPE_SEQUENCES[escape_char])
        elif escape_char in ('x', 'u'):
            width = 2 if escape_char == 'x' else 4
            hex_digits = body[i:i + width]
            if len(hex_digits) == width and all(c in HEX_DIGITS for c in hex_digits):
                parts.append(chr(int(hex_digits, 16)))
                i += width
            else:
                parts.append(escape_char)
        else:
            # Unknown escape - keep the character itself
            parts.append(escape_char)

    return ''.join(parts)


def convert_string(lexeme: str, config: LexerConfig) -> str:
    body = lexeme[1:-1]
    if config.escape_mode is EscapeMode.DECODE:
        return decode_escapes(body)
    return body


def convert_integer(lexeme: str, config: LexerConfig) -> int:
    """Parse a decimal literal; raises OverflowError outside the int64 range."""
    # Checking the length first keeps int() under its str-digits limit
    digits = lexeme.lstrip("0") or "0"
    if len(digits) > len(str(INT64_MAX)):
        raise OverflowError(lexeme)
    value = int(digits)
    if value > INT64_MAX:
        raise OverflowError(lexeme)
    return value


def convert_identifier(lexeme: str, config: LexerConfig) -> str:
    return lexeme


def _build_rules() -> Tuple[LexRule, ...]:
    rules = []

    for word, token_type in KEYWORDS.items():
        rules.append(LexRule(f"keyword {word!r}", token_type, FIXED_PRIORITY, fixed_text(word)))

    for text, token_type in OPERATORS.items():
        rules.append(LexRule(f"operator {text!r}", token_type, FIXED_PRIORITY, fixed_text(text)))

    rules.extend([
        LexRule("string", TokenType.STRING, PATTERN_PRIORITY,
                pattern(STRING_PATTERN), convert_string),
        LexRule("integer", TokenType.INTEGER, PATTERN_PRIORITY,
                pattern(INTEGER_PATTERN), convert_integer),
        LexRule("identifier", TokenType.IDENTIFIER, PATTERN_PRIORITY,
                pattern(IDENTIFIER_PATTERN), convert_identifier),
        LexRule("newline", TokenType.NEWLINE, NEWLINE_PRIORITY,
                pattern(NEWLINE_PATTERN)),
    ])

    return tuple(rules)


RULES = _build_rules()


def best_match(source: str, pos: int, rules: Tuple[LexRule, ...] = RULES) -> Optional[Tuple[LexRule, int]]:
    """
    Pick the winning rule at ``pos``: longest span first, then priority.

    Returns ``(rule, length)`` or None when no rule matches.
    """
    best: Optional[Tuple[LexRule, int]] = None
    for rule in rules:
        length = rule.match(source, pos)
        if length == 0:
            continue
        if best is None or (length, rule.priority) > (best[1], best[0].priority):
            best = (rule, length)
    return best
