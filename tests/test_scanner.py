"""
Token scanner tests for both delimiter rules.
"""

import re

import pytest

from locale_tokens.errors import ConfigError
from locale_tokens.scanner import (
    DEFAULT_STOP,
    Bounded,
    Token,
    Unbounded,
    iter_tokens,
    next_token,
    rule_from,
)

DEFAULT = Unbounded("R.")
BRACES = Bounded("{{", re.compile(r"\}\}"))


class TestUnbounded:
    def test_token_ends_before_stop_character(self):
        assert next_token("R.greeting, world", 0, DEFAULT) == Token(0, 10, "greeting")

    def test_dots_and_hyphens_belong_to_the_key(self):
        token = next_token("say R.menu.top-item_1!", 0, DEFAULT)
        assert token.key == "menu.top-item_1"
        assert token.start == 4

    def test_token_runs_to_end_of_text(self):
        assert next_token("x R.tail", 0, DEFAULT) == Token(2, 8, "tail")

    def test_stop_right_after_prefix_gives_empty_key(self):
        token = next_token("R. rest", 0, DEFAULT)
        assert token == Token(0, 2, "")
        assert len(token) == len("R.")

    def test_stop_character_inside_prefix_is_ignored(self):
        rule = Unbounded("{", re.compile(r"[^\w]"))
        assert next_token("a {name} b", 0, rule) == Token(2, 7, "name")

    def test_no_prefix(self):
        assert next_token("nothing here", 0, DEFAULT) is None

    def test_search_starts_at_offset(self):
        assert next_token("R.a R.b", 3, DEFAULT) == Token(4, 7, "b")


class TestBounded:
    def test_key_between_prefix_and_suffix(self):
        assert next_token("Hi {{user.name}}!", 0, BRACES) == Token(3, 16, "user.name")

    def test_adjacent_tokens(self):
        keys = [t.key for t in iter_tokens("{{a}}{{b}}", BRACES)]
        assert keys == ["a", "b"]

    def test_unterminated_token_ends_scan(self):
        assert next_token("{{open but never closed", 0, BRACES) is None

    def test_suffix_pattern(self):
        rule = Bounded("<%", re.compile(r"\s*%>"))
        assert next_token("<%title  %>", 0, rule).key == "title"


class TestIterTokens:
    def test_left_to_right_non_overlapping(self):
        text = "R.one and R.two, R.three"
        tokens = list(iter_tokens(text, DEFAULT))
        assert [t.key for t in tokens] == ["one", "two", "three"]
        for prev, cur in zip(tokens, tokens[1:]):
            assert prev.end <= cur.start

    def test_empty_text(self):
        assert list(iter_tokens("", DEFAULT)) == []


class TestRuleFrom:
    def test_default_is_unbounded(self):
        assert rule_from() == Unbounded("R.", DEFAULT_STOP)

    def test_suffix_string_is_compiled(self):
        rule = rule_from("{{", suffix=r"\}\}")
        assert isinstance(rule, Bounded)
        assert rule.suffix.pattern == r"\}\}"

    def test_stop_condition(self):
        rule = rule_from("$", stop=r"\s")
        assert isinstance(rule, Unbounded)
        assert next_token("$a.b-c d", 0, rule).key == "a.b-c"

    def test_both_suffix_and_stop(self):
        with pytest.raises(ConfigError):
            rule_from("{{", suffix="}}", stop=r"\s")

    def test_empty_prefix(self):
        with pytest.raises(ConfigError):
            rule_from("")

    def test_invalid_pattern(self):
        with pytest.raises(ConfigError):
            rule_from("{{", suffix="(")
