"""Bash quoting utilities for command reconstruction."""

from __future__ import annotations

import re
from collections.abc import Iterable

import bashlex

# Anything outside this set forces quoting
_UNSAFE = re.compile(r"[^A-Za-z0-9@%_+=:,./-]")


def bash_quote(s: str) -> str:
    """Quote a string for safe use in bash.

    Uses single quotes (safest), with escape handling for embedded single quotes.
    Returns '' for empty strings. Returns unquoted if no special chars.
    """
    if not s:
        return "''"
    if not _UNSAFE.search(s):
        return s
    # Single-quote, escaping embedded single quotes as '"'"'
    return "'" + s.replace("'", "'\"'\"'") + "'"


def bash_join(tokens: Iterable[str] | None) -> str:
    """Join tokens into a bash command string with proper quoting."""
    if not tokens:
        return ""
    return " ".join(bash_quote(t) for t in tokens)


def _bash_words(command: str) -> list[str] | None:
    """Source text of each word bash sees in a simple command.

    Returns None unless bashlex parses the command as exactly one simple
    command. Slices come from each node's pos, so quoting is left intact.
    """
    try:
        parts = bashlex.parse(command)
    except bashlex.errors.ParsingError:
        return None
    if len(parts) != 1 or parts[0].kind != "command":
        return None
    # Leading NAME=value words parse as assignments
    return [
        command[p.pos[0] : p.pos[1]]
        for p in parts[0].parts
        if p.kind in ("word", "assignment")
    ]


def verify_join(tokens: list[str]) -> bool:
    """Check that bash splits bash_join(tokens) back into one word per token.

    Uses bashlex as an independent parser and compares word boundaries:
    each word bash sees must span exactly one quoted token. Returns False
    if the joined string does not parse to a single simple command.
    """
    command = bash_join(tokens)
    if not command:
        return not tokens
    return _bash_words(command) == [bash_quote(t) for t in tokens]
