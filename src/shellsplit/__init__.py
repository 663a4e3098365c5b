"""
shellsplit - Shell-style lexical analysis.

Splits text into words with POSIX-shell-like quoting, escaping and comments,
quotes words back for the shell, and splits kernel command lines.
"""

from __future__ import annotations

__version__ = "0.1.0"

from shellsplit.core.bash import bash_join, bash_quote
from shellsplit.core.classifier import Classifier, RuneClass
from shellsplit.core.cmdline import (
    CommandLineError,
    UnbalancedQuotingError,
    UnexpectedQuotingError,
    command_line_split,
)
from shellsplit.core.lexer import (
    Lexer,
    LexError,
    Token,
    TokenKind,
    Tokenizer,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
    split,
)

__all__ = [
    "Classifier",
    "CommandLineError",
    "LexError",
    "Lexer",
    "RuneClass",
    "Token",
    "TokenKind",
    "Tokenizer",
    "UnbalancedQuotingError",
    "UnexpectedQuotingError",
    "UnterminatedEscapeError",
    "UnterminatedQuoteError",
    "__version__",
    "bash_join",
    "bash_quote",
    "command_line_split",
    "split",
]
