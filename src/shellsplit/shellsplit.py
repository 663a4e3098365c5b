"""Command line interface for shellsplit.

Every subcommand prints a single JSON object on stdout:

┌──────────────────────┬──────────────────────────────────────────────────┐
│ Subcommand           │ Output                                           │
├──────────────────────┼──────────────────────────────────────────────────┤
│ split [TEXT]         │ {"words": [...]}                                 │
│ tokens [TEXT]        │ {"tokens": [{"kind": ..., "value": ...}, ...]}   │
│ join WORD...         │ {"command": "..."} (+ "verified" with --verify)  │
│ quote TEXT           │ {"quoted": "..."}                                │
│ cmdline [TEXT]       │ {"args": [...]} (--proc reads /proc/cmdline)     │
│ uuid                 │ {"uuid": "..."}                                  │
└──────────────────────┴──────────────────────────────────────────────────┘

TEXT defaults to stdin. Malformed input prints {"error": ..., "kind": ...}
and exits with status 1. Error text is translated through the "shellsplit"
gettext domain, read from the configured locale-dir when one is set.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from shellsplit import __version__
from shellsplit.core.bash import bash_join, bash_quote, verify_join
from shellsplit.core.cmdline import command_line_split
from shellsplit.core.config import Config, configure_logging, load_config, log_event
from shellsplit.core.i18n import Translator
from shellsplit.core.kernel import kernel_command_line, random_kernel_uuid
from shellsplit.core.lexer import Tokenizer, split


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def cmd_split(args: argparse.Namespace, config: Config, translator: Translator) -> dict:
    text = _read_text(args)
    words = split(text, classifier=config.classifier(), translator=translator)
    log_event("split", text=text, words=len(words))
    return {"words": words}


def cmd_tokens(args: argparse.Namespace, config: Config, translator: Translator) -> dict:
    text = _read_text(args)
    tokens = [
        {"kind": t.kind.value, "value": t.value}
        for t in Tokenizer(text, classifier=config.classifier(), translator=translator)
    ]
    log_event("tokens", text=text, tokens=len(tokens))
    return {"tokens": tokens}


def cmd_join(args: argparse.Namespace, config: Config, translator: Translator) -> dict:
    command = bash_join(args.words)
    result: dict = {"command": command}
    if args.verify:
        result["verified"] = verify_join(args.words)
    log_event("join", text=command, words=len(args.words))
    return result


def cmd_quote(args: argparse.Namespace, config: Config, translator: Translator) -> dict:
    log_event("quote", text=args.text)
    return {"quoted": bash_quote(args.text)}


def cmd_cmdline(args: argparse.Namespace, config: Config, translator: Translator) -> dict:
    if args.proc:
        cmdline = kernel_command_line(translator=translator)
        log_event("cmdline", source="proc", args=len(cmdline))
        return {"args": cmdline}
    text = _read_text(args)
    cmdline = command_line_split(text, translator=translator)
    log_event("cmdline", text=text, args=len(cmdline))
    return {"args": cmdline}


def cmd_uuid(args: argparse.Namespace, config: Config, translator: Translator) -> dict:
    uuid = random_kernel_uuid()
    log_event("uuid", level="debug", uuid=uuid)
    return {"uuid": uuid}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shellsplit", description="Shell-style word splitting and quoting"
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split", help="Split text into words")
    split_parser.add_argument("text", nargs="?", help="Text to split (default: stdin)")
    split_parser.set_defaults(func=cmd_split)

    tokens_parser = subparsers.add_parser("tokens", help="Show words and comments")
    tokens_parser.add_argument("text", nargs="?", help="Text to tokenize (default: stdin)")
    tokens_parser.set_defaults(func=cmd_tokens)

    join_parser = subparsers.add_parser("join", help="Quote and join words")
    join_parser.add_argument("words", nargs="*", help="Words to join")
    join_parser.add_argument(
        "--verify", action="store_true", help="Check the result with bashlex"
    )
    join_parser.set_defaults(func=cmd_join)

    quote_parser = subparsers.add_parser("quote", help="Quote a single string")
    quote_parser.add_argument("text", help="String to quote")
    quote_parser.set_defaults(func=cmd_quote)

    cmdline_parser = subparsers.add_parser("cmdline", help="Split a kernel command line")
    cmdline_parser.add_argument("text", nargs="?", help="Command line (default: stdin)")
    cmdline_parser.add_argument(
        "--proc", action="store_true", help="Read the running kernel's /proc/cmdline"
    )
    cmdline_parser.set_defaults(func=cmd_cmdline)

    uuid_parser = subparsers.add_parser("uuid", help="Print a kernel-generated UUID")
    uuid_parser.set_defaults(func=cmd_uuid)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(Path.cwd())
    except ValueError as e:
        print(f"shellsplit: config error: {e}", file=sys.stderr)
        return 2
    configure_logging(config)
    translator = Translator.for_domain(
        "shellsplit", localedir=str(config.locale_dir) if config.locale_dir else None
    )

    try:
        result = args.func(args, config, translator)
    except (ValueError, OSError) as e:
        log_event("error", level="error", command=args.command, kind=type(e).__name__, error=str(e))
        print(json.dumps({"error": str(e), "kind": type(e).__name__}))
        return 1

    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
