#!/usr/bin/env python3
"""
Debug helper for comparing shellsplit tokens with the bashlex AST.

Usage:
    python bin/shellsplit-dump.py 'command to tokenize'

Prints the token stream produced by shellsplit, then the words bashlex
sees for the same input. Useful when a quoting rule behaves unexpectedly.
"""

import sys

import bashlex

from shellsplit.core.lexer import LexError, Tokenizer


def dump_tokens(command):
    """Print each shellsplit token with its kind."""
    try:
        for token in Tokenizer(command):
            print(f"  {token.kind.value:8} {token.value!r}")
    except LexError as e:
        print(f"  error: {e}")


def dump_node(node, indent=0):
    """Recursively dump a bashlex AST node."""
    prefix = "  " * indent

    if hasattr(node, "kind"):
        print(f"{prefix}kind: {node.kind}")

    if hasattr(node, "word"):
        print(f"{prefix}word: {node.word!r}")

    if hasattr(node, "parts"):
        for part in node.parts:
            dump_node(part, indent + 1)

    if hasattr(node, "list"):
        for item in node.list:
            dump_node(item, indent + 1)


def main():
    if len(sys.argv) < 2:
        print("Usage: shellsplit-dump.py 'command'")
        print("Example: shellsplit-dump.py 'echo \"a b\" # note'")
        sys.exit(1)

    command = sys.argv[1]
    print(f"Input: {command!r}")
    print("-" * 40)
    print("shellsplit:")
    dump_tokens(command)
    print()
    print("bashlex:")

    try:
        for part in bashlex.parse(command):
            dump_node(part, 1)
    except bashlex.errors.ParsingError as e:
        print(f"  parse error: {e}")


if __name__ == "__main__":
    main()
