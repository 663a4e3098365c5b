"""Message translation for user-facing error text."""

from __future__ import annotations

import gettext
from collections.abc import Callable
from dataclasses import dataclass


def g_default(msgid: str) -> str:
    """Return the message untranslated."""
    return msgid


def ng_default(msgid: str, msgid_plural: str, n: int) -> str:
    """Pick the singular form for n == 1, the plural form otherwise."""
    if n == 1:
        return msgid
    return msgid_plural


@dataclass(frozen=True)
class Translator:
    """Pair of translation functions handed to components that emit messages.

    Components take a Translator at construction time instead of reading a
    process-wide hook, so tests can swap translations per call.
    """

    g: Callable[[str], str] = g_default
    ng: Callable[[str, str, int], str] = ng_default

    @classmethod
    def for_domain(
        cls,
        domain: str,
        localedir: str | None = None,
        languages: list[str] | None = None,
    ) -> Translator:
        """Build a translator from a gettext catalog.

        Falls back to the untranslated defaults when no catalog is found.
        """
        catalog = gettext.translation(
            domain, localedir=localedir, languages=languages, fallback=True
        )
        if type(catalog) is gettext.NullTranslations:
            return cls()
        return cls(g=catalog.gettext, ng=catalog.ngettext)


DEFAULT_TRANSLATOR = Translator()
