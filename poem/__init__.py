"""
Poem Compiler Package

Front end for Poem, a small line-oriented language built around
functions and rail (pipeline) blocks with success/error handlers.

Architecture:
    poem/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # poemc command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@poem-lang.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, scan

__all__ = [
    # Core API
    "Lexer",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
