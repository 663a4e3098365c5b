"""
Kernel command line splitting.

Arguments look like `name`, `name=value` or `name="quoted value"`. Quotes
are only allowed around the whole value and are kept in the output, so
`foo="a b"` stays a single argument `foo="a b"`. There are no comments and
no escapes.
"""

from __future__ import annotations

from enum import Enum

from shellsplit.core.i18n import DEFAULT_TRANSLATOR, Translator


class CommandLineError(ValueError):
    """Malformed kernel command line."""


class UnbalancedQuotingError(CommandLineError):
    """Line ended inside a quoted value."""


class UnexpectedQuotingError(CommandLineError):
    """Quote outside the value of a name=value argument."""


class _Arg(Enum):
    NONE = "none"  # between arguments
    NAME = "name"
    ASSIGN = "assign"  # just read '='
    VALUE = "value"
    QUOTE_START = "quote_start"
    QUOTED = "quoted"
    QUOTE_END = "quote_end"


def command_line_split(line: str, *, translator: Translator | None = None) -> list[str]:
    """Split a kernel command line into arguments.

    Raises UnbalancedQuotingError if the line ends inside quotes and
    UnexpectedQuotingError for a quote anywhere but around a value.
    """
    tr = translator or DEFAULT_TRANSLATOR
    out: list[str] = []
    current: list[str] = []
    state = _Arg.NONE

    def unexpected() -> UnexpectedQuotingError:
        return UnexpectedQuotingError(tr.g("unexpected quoting"))

    for ch in line:
        boundary = False

        if state is _Arg.NONE:
            if ch == '"':
                raise unexpected()
            if not ch.isspace():
                state = _Arg.NAME
                current.append(ch)

        elif state is _Arg.NAME:
            if ch == '"':
                # foo"bar" or ="bar"
                raise unexpected()
            if ch.isspace():
                boundary = True
            else:
                if ch == "=":
                    state = _Arg.ASSIGN
                current.append(ch)

        elif state is _Arg.ASSIGN:
            if ch.isspace():
                # foo=
                boundary = True
            elif ch == '"':
                state = _Arg.QUOTE_START
                current.append(ch)
            else:
                state = _Arg.VALUE
                current.append(ch)

        elif state is _Arg.VALUE:
            if ch == '"':
                # foo=bar"
                raise unexpected()
            if ch.isspace():
                boundary = True
            else:
                current.append(ch)

        elif state in (_Arg.QUOTE_START, _Arg.QUOTED):
            state = _Arg.QUOTE_END if ch == '"' else _Arg.QUOTED
            current.append(ch)

        elif state is _Arg.QUOTE_END:
            if not ch.isspace():
                # foo="bar"" or foo="bar"baz
                raise unexpected()
            boundary = True

        if boundary:
            state = _Arg.NONE
            out.append("".join(current))
            current = []

    if state in (_Arg.QUOTE_START, _Arg.QUOTED):
        raise UnbalancedQuotingError(tr.g("unbalanced quoting"))
    if current:
        out.append("".join(current))
    return out
