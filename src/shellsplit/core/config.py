"""shellsplit configuration and logging."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TextIO

import structlog

from shellsplit.core.classifier import DEFAULT_CLASSIFIER, Classifier
from shellsplit.core.lexer import split

USER_CONFIG = Path.home() / ".shellsplit" / "config"
PROJECT_CONFIG_NAME = ".shellsplit"
ENV_CONFIG = "SHELLSPLIT_CONFIG"

BOOL_SETTINGS = ("log_full", "verbose")
CHARS_SETTINGS = ("comment_chars", "escape_chars")
PATH_SETTINGS = ("log", "locale_dir")


@dataclass
class Config:
    """Parsed configuration."""

    log: Path | None = None  # None = no logging
    log_full: bool = False  # log input text (requires log path)
    verbose: bool = False
    comment_chars: str | None = None  # None = default '#'
    escape_chars: str | None = None  # None = default '\'
    locale_dir: Path | None = None  # None = system gettext catalogs
    source: str | None = None  # last file that contributed settings

    def classifier(self) -> Classifier:
        """Tokenizer character classes with the configured overrides."""
        changes = {}
        if self.comment_chars is not None:
            changes["comments"] = self.comment_chars
        if self.escape_chars is not None:
            changes["escapes"] = self.escape_chars
        if not changes:
            return DEFAULT_CLASSIFIER
        return DEFAULT_CLASSIFIER.replace(**changes)


# === Config Loading ===


def _find_project_config(cwd: Path) -> Path | None:
    """Walk up from cwd to find .shellsplit file."""
    current = cwd.resolve()
    while True:
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:  # reached root
            return None
        current = parent


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Settings set in overlay win."""
    return replace(
        base,
        log=overlay.log if overlay.log is not None else base.log,
        log_full=overlay.log_full if overlay.log_full else base.log_full,
        verbose=overlay.verbose if overlay.verbose else base.verbose,
        comment_chars=overlay.comment_chars
        if overlay.comment_chars is not None
        else base.comment_chars,
        escape_chars=overlay.escape_chars
        if overlay.escape_chars is not None
        else base.escape_chars,
        locale_dir=overlay.locale_dir if overlay.locale_dir is not None else base.locale_dir,
        source=overlay.source or base.source,
    )


def load_config(
    cwd: Path,
    user_config: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load config from ~/.shellsplit/config, .shellsplit, and $SHELLSPLIT_CONFIG.

    Later files override earlier ones.
    """
    if user_config is None:
        user_config = USER_CONFIG
    if environ is None:
        environ = os.environ
    paths = [user_config, _find_project_config(cwd)]
    env_path = environ.get(ENV_CONFIG)
    if env_path:
        paths.append(Path(env_path).expanduser())

    config = Config()
    for path in paths:
        if path is None or not path.is_file():
            continue
        overlay = replace(parse_config(path.read_text()), source=str(path))
        config = _merge_configs(config, overlay)
    return config


def parse_config(text: str) -> Config:
    """Parse config text into Config object. Raises ValueError on syntax errors."""
    settings: dict[str, bool | str | Path] = {}

    for lineno, raw_line in enumerate(text.splitlines(), 1):
        try:
            words = split(raw_line)
            if not words:
                continue
            directive = words[0].lower()
            if directive == "set":
                _apply_setting(settings, words[1:])
            else:
                raise ValueError(f"unknown directive '{directive}'")
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

    return Config(**settings)


def _apply_setting(settings: dict[str, bool | str | Path], args: list[str]) -> None:
    """Parse and apply a 'set' directive. Raises ValueError on invalid setting."""
    if not args:
        raise ValueError("'set' requires a setting name")

    key = args[0].lower()
    values = args[1:]
    if len(values) > 1:
        raise ValueError(f"'{key}' takes at most one value")
    value = values[0] if values else None
    key_normalized = key.replace("-", "_")

    if key_normalized in BOOL_SETTINGS:
        if value is not None:
            raise ValueError(f"'{key}' takes no value")
        settings[key_normalized] = True

    elif key_normalized in CHARS_SETTINGS:
        if value is None:
            raise ValueError(f"'{key}' requires a value")
        settings[key_normalized] = value

    elif key_normalized in PATH_SETTINGS:
        if value is None:
            raise ValueError(f"'{key}' requires a path")
        settings[key_normalized] = Path(value).expanduser()

    else:
        raise ValueError(f"unknown setting '{key}'")


# === Logging ===

_logger: structlog.typing.FilteringBoundLogger | None = None
_log_full = False
_log_file: TextIO | None = None


def _close_log_file() -> None:
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings.

    Safe to call again; the file opened by the previous call is closed.
    """
    global _logger, _log_full, _log_file
    _close_log_file()
    if config.log is None:
        _logger = None
        _log_full = False
        return

    config.log.parent.mkdir(parents=True, exist_ok=True)
    level = logging.DEBUG if config.verbose else logging.INFO
    _log_file = config.log.open("a")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    _logger = structlog.get_logger()
    _log_full = config.log_full


def log_event(event: str, *, text: str | None = None, level: str = "info", **fields) -> None:
    """Log one event. No-op if logging not configured.

    The input text is only recorded when log-full is set.
    """
    if _logger is None:
        return
    if _log_full and text is not None:
        fields["input"] = text
    getattr(_logger, level)(event, **fields)
