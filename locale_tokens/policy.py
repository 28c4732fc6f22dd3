"""
Per-file and per-language switches.

Options such as ``whitelist``, ``warn`` or ``dryRun`` accept a boolean, a
substring, a regular expression or a list of those. Each value is coerced
once into a Policy and evaluated against a haystack (a language id or a
file path) with :func:`matches`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .errors import ConfigError


@dataclass(frozen=True)
class Always:
    pass


@dataclass(frozen=True)
class Never:
    pass


@dataclass(frozen=True)
class Contains:
    text: str


@dataclass(frozen=True)
class Matches:
    pattern: re.Pattern


@dataclass(frozen=True)
class AnyOf:
    policies: Tuple["Policy", ...]


Policy = Union[Always, Never, Contains, Matches, AnyOf]

ALWAYS = Always()
NEVER = Never()

_POLICY_TYPES = (Always, Never, Contains, Matches, AnyOf)


def matches(policy: Policy, haystack: str) -> bool:
    if isinstance(policy, Always):
        return True
    if isinstance(policy, Never):
        return False
    if isinstance(policy, Contains):
        return policy.text in haystack
    if isinstance(policy, Matches):
        return policy.pattern.search(haystack) is not None
    if isinstance(policy, AnyOf):
        return any(matches(p, haystack) for p in policy.policies)
    raise TypeError(f"Not a policy: {policy!r}")


def as_policy(value: Any) -> Policy:
    """Coerce an option value (bool, str, pattern or list of those)."""
    if isinstance(value, _POLICY_TYPES):
        return value
    # bool before anything else: True is also an int
    if value is True:
        return ALWAYS
    if value is False or value is None:
        return NEVER
    if isinstance(value, str):
        return Contains(value)
    if isinstance(value, re.Pattern):
        return Matches(value)
    if isinstance(value, (list, tuple)):
        return AnyOf(tuple(as_policy(v) for v in value))
    raise ConfigError(f"Cannot use {value!r} as a switch; expected bool, string, pattern or list")
