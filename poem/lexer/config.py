"""
Lexer configuration.

Controls how the lexer reports input it cannot tokenize and how string
literal escapes end up in token values.
"""

from dataclasses import dataclass
from enum import Enum, auto


class SkipPolicy(Enum):
    """What to do with spans that match no lexical rule"""
    SILENT = auto()     # Drop them (legacy behavior)
    COLLECT = auto()    # Drop them, but record a warning for each
    STRICT = auto()     # Raise LexerError on the first one


class EscapeMode(Enum):
    """How backslash escapes in string literals are stored in the token value"""
    RAW = auto()        # Keep the backslash pair verbatim
    DECODE = auto()     # Translate \n, \t, \xHH, ... into characters


@dataclass(frozen=True)
class LexerConfig:
    """Options for a single lexer run"""
    skip_policy: SkipPolicy = SkipPolicy.SILENT
    escape_mode: EscapeMode = EscapeMode.RAW

    @classmethod
    def strict(cls, escape_mode: EscapeMode = EscapeMode.RAW) -> "LexerConfig":
        return cls(skip_policy=SkipPolicy.STRICT, escape_mode=escape_mode)


DEFAULT_CONFIG = LexerConfig()
