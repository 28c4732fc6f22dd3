"""
Placeholder token scanning.

A token starts with a literal prefix and ends either at an explicit
suffix (``Bounded``) or right before the first character matching a stop
pattern (``Unbounded``). With the default rule, ``R.menu.title,`` holds
the token ``R.menu.title`` whose key is ``menu.title``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .errors import ConfigError

DEFAULT_PREFIX = "R."
# first character that is not a letter, digit, underscore, hyphen or dot
DEFAULT_STOP = re.compile(r"[^.\w\-]")


@dataclass(frozen=True)
class Bounded:
    prefix: str
    suffix: re.Pattern


@dataclass(frozen=True)
class Unbounded:
    prefix: str
    stop: re.Pattern = DEFAULT_STOP


DelimiterRule = Union[Bounded, Unbounded]


@dataclass(frozen=True)
class Token:
    start: int
    end: int
    key: str

    def __len__(self) -> int:
        return self.end - self.start


def _compile(pattern: Union[str, re.Pattern]) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"Invalid delimiter pattern {pattern!r}: {exc}") from exc


def rule_from(
    prefix: str = DEFAULT_PREFIX,
    suffix: Union[str, re.Pattern, None] = None,
    stop: Union[str, re.Pattern, None] = None,
) -> DelimiterRule:
    if not prefix:
        raise ConfigError("Delimiter prefix must not be empty")
    if suffix is not None and stop is not None:
        raise ConfigError("Delimiter takes either a suffix or a stop condition, not both")
    if suffix is not None:
        return Bounded(prefix, _compile(suffix))
    if stop is not None:
        return Unbounded(prefix, _compile(stop))
    return Unbounded(prefix)


def next_token(text: str, start: int, rule: DelimiterRule) -> Optional[Token]:
    """Find the first token at or after ``start``; None when there is none left."""
    begin = text.find(rule.prefix, start)
    if begin == -1:
        return None
    key_start = begin + len(rule.prefix)

    if isinstance(rule, Bounded):
        match = rule.suffix.search(text, key_start)
        if match is None:
            # unterminated token: nothing more to replace
            return None
        return Token(begin, match.end(), text[key_start : match.start()])

    match = rule.stop.search(text, key_start)
    end = len(text) if match is None else match.start()
    return Token(begin, end, text[key_start:end])


def iter_tokens(text: str, rule: DelimiterRule) -> Iterator[Token]:
    position = 0
    while True:
        token = next_token(text, position, rule)
        if token is None:
            return
        yield token
        position = token.end
