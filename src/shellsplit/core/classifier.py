"""
Character classification for the shell tokenizer.

Maps each input character to the class that drives the tokenizer state
machine. Anything outside the configured sets is plain word content.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class RuneClass(Enum):
    """Token class of a single input character."""

    WORD = "word"
    SPACE = "space"
    ESCAPING_QUOTE = "escaping_quote"
    NON_ESCAPING_QUOTE = "non_escaping_quote"
    ESCAPE = "escape"
    COMMENT = "comment"
    EOF = "eof"


SPACE_CHARS = " \t\r\n"
ESCAPING_QUOTE_CHARS = '"'
NON_ESCAPING_QUOTE_CHARS = "'"
ESCAPE_CHARS = "\\"
COMMENT_CHARS = "#"


@dataclass(frozen=True)
class Classifier:
    """Character sets for each token class.

    Sets are checked in field order, so a character listed in more than
    one set takes the first matching class.
    """

    whitespace: str = SPACE_CHARS
    escaping_quotes: str = ESCAPING_QUOTE_CHARS
    non_escaping_quotes: str = NON_ESCAPING_QUOTE_CHARS
    escapes: str = ESCAPE_CHARS
    comments: str = COMMENT_CHARS

    def classify(self, ch: str) -> RuneClass:
        """Classify one character. The empty string means end of input."""
        if not ch:
            return RuneClass.EOF
        if ch in self.whitespace:
            return RuneClass.SPACE
        if ch in self.escaping_quotes:
            return RuneClass.ESCAPING_QUOTE
        if ch in self.non_escaping_quotes:
            return RuneClass.NON_ESCAPING_QUOTE
        if ch in self.escapes:
            return RuneClass.ESCAPE
        if ch in self.comments:
            return RuneClass.COMMENT
        return RuneClass.WORD

    def replace(self, **changes: str) -> Classifier:
        """Return a copy with some character sets swapped out."""
        return dataclasses.replace(self, **changes)


DEFAULT_CLASSIFIER = Classifier()
