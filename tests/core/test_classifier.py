"""Tests for character classification."""

import pytest

from shellsplit.core.classifier import DEFAULT_CLASSIFIER, Classifier, RuneClass


@pytest.mark.parametrize(
    "ch,expected",
    [
        (" ", RuneClass.SPACE),
        ("\t", RuneClass.SPACE),
        ("\n", RuneClass.SPACE),
        ("\r", RuneClass.SPACE),
        ('"', RuneClass.ESCAPING_QUOTE),
        ("'", RuneClass.NON_ESCAPING_QUOTE),
        ("\\", RuneClass.ESCAPE),
        ("#", RuneClass.COMMENT),
        ("a", RuneClass.WORD),
        ("=", RuneClass.WORD),
        ("$", RuneClass.WORD),
        ("é", RuneClass.WORD),
        ("", RuneClass.EOF),
    ],
)
def test_default_classes(ch, expected):
    assert DEFAULT_CLASSIFIER.classify(ch) is expected


class TestCustomClassifier:
    def test_replace_keeps_other_sets(self):
        classifier = DEFAULT_CLASSIFIER.replace(comments=";")
        assert classifier.classify(";") is RuneClass.COMMENT
        assert classifier.classify("#") is RuneClass.WORD
        assert classifier.classify('"') is RuneClass.ESCAPING_QUOTE

    def test_replace_does_not_mutate_default(self):
        DEFAULT_CLASSIFIER.replace(whitespace=",")
        assert DEFAULT_CLASSIFIER.classify(",") is RuneClass.WORD

    def test_empty_set_disables_class(self):
        assert Classifier(comments="").classify("#") is RuneClass.WORD
