"""Tests for bash quoting utilities."""

import pytest

from shellsplit.core.bash import _bash_words, bash_join, bash_quote, verify_join
from shellsplit.core.lexer import split


class TestBashQuote:
    def test_empty_string(self):
        assert bash_quote("") == "''"

    def test_simple_word(self):
        assert bash_quote("hello") == "hello"

    def test_with_spaces(self):
        assert bash_quote("hello world") == "'hello world'"

    def test_with_single_quote(self):
        assert bash_quote("it's") == "'it'\"'\"'s'"

    def test_safe_chars(self):
        assert bash_quote("foo-bar_baz.txt") == "foo-bar_baz.txt"
        assert bash_quote("/path/to/file") == "/path/to/file"
        assert bash_quote("key=value") == "key=value"
        assert bash_quote("user@host:50%+1,2") == "user@host:50%+1,2"

    def test_special_chars(self):
        assert bash_quote("$HOME") == "'$HOME'"
        assert bash_quote("a*b") == "'a*b'"
        assert bash_quote("a;b") == "'a;b'"
        assert bash_quote("#x") == "'#x'"

    def test_non_ascii_is_quoted(self):
        assert bash_quote("café") == "'café'"


class TestBashJoin:
    def test_simple(self):
        assert bash_join(["echo", "hello"]) == "echo hello"

    def test_with_spaces(self):
        assert bash_join(["echo", "hello world"]) == "echo 'hello world'"

    def test_empty_arg(self):
        assert bash_join(["echo", ""]) == "echo ''"

    def test_empty_list(self):
        assert bash_join([]) == ""

    def test_none(self):
        assert bash_join(None) == ""


ROUND_TRIP = [
    [],
    ["ls", "-la"],
    ["echo", "it's"],
    ["", "a b", ""],
    ["$HOME", "`id`", "a;b|c"],
    ['say "hi"', "back\\slash", "#hash"],
    ["tab\there", "'''"],
]


@pytest.mark.parametrize("words", ROUND_TRIP)
def test_split_reverses_join(words):
    assert split(bash_join(words)) == words


class TestVerifyJoin:
    """bashlex agrees with the quoting."""

    def test_plain_words(self):
        assert verify_join(["git", "log", "--oneline"])

    def test_quoted_words(self):
        assert verify_join(["grep", "pattern with spaces", "file.txt"])

    def test_empty(self):
        assert verify_join([])

    def test_embedded_single_quote(self):
        assert verify_join(["it's"])
        assert verify_join(["echo", "it's", "don't"])

    def test_empty_words(self):
        assert verify_join(["echo", "", "x"])

    def test_leading_assignment(self):
        assert verify_join(["FOO=bar", "env"])

    def test_metacharacters(self):
        assert verify_join(["echo", "$HOME", "a;b|c", "#x"])


class TestBashWords:
    def test_slices_keep_quoting(self):
        assert _bash_words("echo 'it'\"'\"'s' x") == ["echo", "'it'\"'\"'s'", "x"]

    def test_boundaries(self):
        assert _bash_words("grep 'a b' c") == ["grep", "'a b'", "c"]

    def test_pipeline_is_not_a_simple_command(self):
        assert _bash_words("a | b") is None

    def test_unparseable(self):
        assert _bash_words("echo 'open") is None
