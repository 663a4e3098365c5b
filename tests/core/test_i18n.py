"""Tests for message translation."""

from shellsplit.core.i18n import DEFAULT_TRANSLATOR, Translator, g_default, ng_default


class TestDefaults:
    def test_default_translator_uses_defaults(self):
        assert DEFAULT_TRANSLATOR.g is g_default
        assert DEFAULT_TRANSLATOR.ng is ng_default

    def test_g_unchanged(self):
        assert DEFAULT_TRANSLATOR.g("Hello") == "Hello"

    def test_ng_plural_forms(self):
        assert DEFAULT_TRANSLATOR.ng("Hello", "Hellos", 0) == "Hellos"
        assert DEFAULT_TRANSLATOR.ng("Hello", "Hellos", 1) == "Hello"
        assert DEFAULT_TRANSLATOR.ng("Hello", "Hellos", 2) == "Hellos"


class TestOverrides:
    def test_custom_functions(self):
        translator = Translator(
            g=lambda msgid: "something",
            ng=lambda msgid, msgid_plural, n: f"something{n}",
        )
        assert translator.g("Hello") == "something"
        assert translator.ng("Hello", "Hellos", 0) == "something0"

    def test_override_does_not_leak(self):
        Translator(g=lambda msgid: "something")
        assert DEFAULT_TRANSLATOR.g("Hello") == "Hello"

    def test_missing_catalog_falls_back(self, tmp_path):
        translator = Translator.for_domain("shellsplit", localedir=str(tmp_path), languages=["xx"])
        assert translator == Translator()
