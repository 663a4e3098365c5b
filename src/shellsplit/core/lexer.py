"""
Shell-style tokenizer and lexer.

Single-pass state machine over a character stream. Each call to
Tokenizer.next() reads characters until a token boundary and returns one
word or comment token. Quoting is not nestable, so a flat state plus one
buffer covers every case.
"""

from __future__ import annotations

import codecs
import io
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from shellsplit.core.classifier import DEFAULT_CLASSIFIER, Classifier, RuneClass
from shellsplit.core.i18n import DEFAULT_TRANSLATOR, Translator


class LexError(ValueError):
    """Malformed shell input."""


class UnterminatedEscapeError(LexError):
    """Input ended right after an escape character."""


class UnterminatedQuoteError(LexError):
    """Input ended inside a quoted run."""


class TokenKind(Enum):
    WORD = "word"
    COMMENT = "comment"


@dataclass(frozen=True)
class Token:
    """A word or comment read from the input."""

    kind: TokenKind
    value: str

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.value!r})"


class State(Enum):
    START = "start"
    IN_WORD = "in_word"
    ESCAPING = "escaping"
    ESCAPING_QUOTED = "escaping_quoted"
    QUOTED_ESCAPE = "quoted_escape"
    NON_ESCAPING_QUOTED = "non_escaping_quoted"
    COMMENT = "comment"


class Action(Enum):
    SKIP = "skip"  # drop the character
    APPEND = "append"  # add the character to the buffer
    EMIT = "emit"  # token complete
    END = "end"  # end of input, no token
    ESCAPE_EOF = "escape_eof"
    QUOTE_EOF = "quote_eof"


class Source(Protocol):
    def read(self, size: int = -1, /) -> str | bytes: ...


# Characters that open a quoted or escaped run; each run closes back to IN_WORD
_OPENERS = {
    RuneClass.ESCAPING_QUOTE: State.ESCAPING_QUOTED,
    RuneClass.NON_ESCAPING_QUOTE: State.NON_ESCAPING_QUOTED,
    RuneClass.ESCAPE: State.ESCAPING,
}


def _transition(state: State, cls: RuneClass, ch: str) -> tuple[State, Action]:
    """Next state and buffer action for one classified character."""
    if state is State.START:
        if cls is RuneClass.EOF:
            return state, Action.END
        if cls is RuneClass.SPACE:
            return state, Action.SKIP
        if cls is RuneClass.COMMENT:
            return State.COMMENT, Action.SKIP
        if cls in _OPENERS:
            return _OPENERS[cls], Action.SKIP
        return State.IN_WORD, Action.APPEND

    if state is State.IN_WORD:
        if cls is RuneClass.EOF or cls is RuneClass.SPACE:
            return State.START, Action.EMIT
        if cls in _OPENERS:
            return _OPENERS[cls], Action.SKIP
        # '#' inside a word is literal
        return state, Action.APPEND

    if state is State.ESCAPING:
        if cls is RuneClass.EOF:
            return state, Action.ESCAPE_EOF
        return State.IN_WORD, Action.APPEND

    if state is State.ESCAPING_QUOTED:
        if cls is RuneClass.EOF:
            return state, Action.QUOTE_EOF
        if cls is RuneClass.ESCAPING_QUOTE:
            return State.IN_WORD, Action.SKIP
        if cls is RuneClass.ESCAPE:
            return State.QUOTED_ESCAPE, Action.SKIP
        return state, Action.APPEND

    if state is State.QUOTED_ESCAPE:
        if cls is RuneClass.EOF:
            return state, Action.ESCAPE_EOF
        return State.ESCAPING_QUOTED, Action.APPEND

    if state is State.NON_ESCAPING_QUOTED:
        if cls is RuneClass.EOF:
            return state, Action.QUOTE_EOF
        if cls is RuneClass.NON_ESCAPING_QUOTE:
            return State.IN_WORD, Action.SKIP
        return state, Action.APPEND

    if state is State.COMMENT:
        if cls is RuneClass.EOF or ch == "\n":
            return State.START, Action.EMIT
        return state, Action.APPEND

    raise AssertionError(f"unexpected tokenizer state: {state}")


class _CharReader:
    """One character per read() from a stream that may yield bytes.

    Bytes are decoded as UTF-8 incrementally, so a multi-byte character
    read one byte at a time comes out whole. The wrapped stream is never
    closed.
    """

    def __init__(self, stream: Source):
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")()

    def read(self, size: int = 1, /) -> str:
        while True:
            chunk = self._stream.read(1)
            if isinstance(chunk, str):
                return chunk
            if not chunk:
                return self._decoder.decode(b"", final=True)
            ch = self._decoder.decode(chunk)
            if ch:
                return ch


def _as_source(source: str | bytes | Source) -> Source:
    if isinstance(source, bytes):
        source = source.decode("utf-8")
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, io.TextIOBase):
        return source
    return _CharReader(source)


class Tokenizer:
    """Turns a character stream into word and comment tokens.

    Args:
        source: a string, UTF-8 bytes, or any object with read(n) that
            returns str or UTF-8 bytes, empty at end of input (text files,
            io.BytesIO, sys.stdin.buffer). Errors raised by read()
            propagate unchanged.
        classifier: character classes, defaults to POSIX-ish shell rules.
        translator: used for error messages.
    """

    def __init__(
        self,
        source: str | bytes | Source,
        classifier: Classifier | None = None,
        translator: Translator | None = None,
    ):
        self._source = _as_source(source)
        self._classifier = classifier or DEFAULT_CLASSIFIER
        self._tr = translator or DEFAULT_TRANSLATOR

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    def next(self) -> Token | None:
        """Read the next token. Returns None at end of input."""
        state = State.START
        kind = TokenKind.WORD
        value: list[str] = []

        while True:
            ch = self._source.read(1)
            cls = self._classifier.classify(ch)
            if state is State.START and cls is RuneClass.COMMENT:
                kind = TokenKind.COMMENT
            state, action = _transition(state, cls, ch)

            if action is Action.APPEND:
                value.append(ch)
            elif action is Action.EMIT:
                return Token(kind, "".join(value))
            elif action is Action.END:
                return None
            elif action is Action.ESCAPE_EOF:
                raise UnterminatedEscapeError(
                    self._tr.g("EOF found after escape character")
                )
            elif action is Action.QUOTE_EOF:
                raise UnterminatedQuoteError(
                    self._tr.g("EOF found when expecting closing quote")
                )


class Lexer:
    """Word-only view of a Tokenizer. Comments are dropped."""

    def __init__(
        self,
        source: str | bytes | Source,
        classifier: Classifier | None = None,
        translator: Translator | None = None,
    ):
        self._tokenizer = Tokenizer(source, classifier, translator)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        word = self.next()
        if word is None:
            raise StopIteration
        return word

    def next(self) -> str | None:
        """Return the next word, or None at end of input."""
        while True:
            token = self._tokenizer.next()
            if token is None:
                return None
            if token.kind is TokenKind.WORD:
                return token.value


def split(
    s: str | bytes | Source,
    *,
    classifier: Classifier | None = None,
    translator: Translator | None = None,
) -> list[str]:
    """Split a string into words using shell-like quoting rules.

    Raises LexError on unterminated quotes or a trailing escape; no
    partial result is returned.
    """
    return list(Lexer(s, classifier, translator))
