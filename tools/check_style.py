#!/usr/bin/env python3
"""Check for banned Python constructions in shellsplit source.

Banned constructions:

    Construction          Reason                               Use instead
    --------------------  -----------------------------------  -----------------------
    import shlex          shellsplit is its own parsing        shellsplit.core.lexer
    from shlex import     authority, stdlib rules differ       shellsplit.core.bash
    except:               hides read failures from callers     catch a named exception
"""

import ast
import sys
from pathlib import Path

BANNED_MODULES = frozenset({"shlex"})


def check_file(path):
    """Return (lineno, description) for each banned construction in path."""
    tree = ast.parse(path.read_text(), str(path))
    errors = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name in BANNED_MODULES:
                    errors.append((node.lineno, f"import {alias.name}: banned, use shellsplit.core.lexer"))

        elif isinstance(node, ast.ImportFrom) and node.module in BANNED_MODULES:
            errors.append((node.lineno, f"from {node.module} import: banned, use shellsplit.core.lexer"))

        elif isinstance(node, ast.ExceptHandler) and node.type is None:
            errors.append((node.lineno, "bare except: banned, name the exception"))

    return errors


def main():
    src_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "src")

    if not src_dir.is_dir():
        print(f"Directory not found: {src_dir}")
        sys.exit(1)

    files = sorted(src_dir.rglob("*.py"))
    if not files:
        print(f"No Python files found in: {src_dir}")
        sys.exit(1)

    all_errors = []
    for path in files:
        try:
            all_errors.extend((path, lineno, desc) for lineno, desc in check_file(path))
        except SyntaxError as e:
            print(f"Syntax error in {path}: {e}")
            sys.exit(1)

    if not all_errors:
        sys.exit(0)

    print(f"Found {len(all_errors)} banned construction(s):")
    for path, lineno, description in sorted(all_errors):
        print(f"  {path}:{lineno}: {description}")
    sys.exit(1)


if __name__ == "__main__":
    main()
