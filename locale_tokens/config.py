"""
Run options.

Options come from a JSON config file, keyword arguments or the command
line. Names may be written in snake_case or camelCase
(``ignore_errors`` or ``ignoreErrors``, ``root_lang`` or ``rootLang``). In a config
file a string of the form ``/pattern/flags`` is a regular expression.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .errors import ConfigError
from .policy import ALWAYS, NEVER, Policy, as_policy
from .scanner import DEFAULT_PREFIX, Bounded, DelimiterRule, Unbounded, rule_from

DEFAULT_FILENAME = "${path}/${name}-${lang}.${ext}"

_ALIASES = {
    "ignoreErrors": "ignore_errors",
    "dryRun": "dry_run",
    "includeOriginal": "include_original",
    "ignoreTokens": "ignore_tokens",
    "encodeEntities": "encode_entities",
    "rootLang": "root_lang",
}

_POLICY_FIELDS = frozenset({
    "whitelist", "blacklist", "warn", "ignore_errors", "dry_run",
    "include_original", "ignore_tokens", "encode_entities",
})

_REGEX_LITERAL = re.compile(r"^/(.+)/([imsx]*)$", re.DOTALL)
_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


@dataclass(frozen=True)
class Options:
    locales: str = "./locales"
    delimiter: DelimiterRule = field(default_factory=lambda: Unbounded(DEFAULT_PREFIX))
    filename: str = DEFAULT_FILENAME
    whitelist: Policy = ALWAYS
    blacklist: Policy = NEVER
    warn: Policy = ALWAYS
    cache: bool = True
    ignore_errors: Policy = NEVER
    dry_run: Policy = NEVER
    include_original: Policy = NEVER
    ignore_tokens: Policy = NEVER
    encode_entities: Policy = ALWAYS
    verbose: bool = False
    root_lang: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Options":
        return cls().merge(data)

    def merge(self, data: Mapping[str, Any]) -> "Options":
        """Return a copy with the given (raw, uncoerced) values applied."""
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise ConfigError(f"Unknown option: {raw_key}")
            changes[key] = _coerce(key, value)
        return replace(self, **changes)


def regex_literal(value: Any) -> Any:
    """Turn ``"/pat/i"`` into a compiled pattern; other values pass through."""
    if isinstance(value, list):
        return [regex_literal(v) for v in value]
    if not isinstance(value, str):
        return value
    m = _REGEX_LITERAL.match(value)
    if not m:
        return value
    flags = 0
    for flag in m.group(2):
        flags |= _FLAGS[flag]
    try:
        return re.compile(m.group(1), flags)
    except re.error as exc:
        raise ConfigError(f"Invalid regular expression {value!r}: {exc}") from exc


def _delimiter(value: Any) -> DelimiterRule:
    if isinstance(value, (Bounded, Unbounded)):
        return value
    if not isinstance(value, Mapping):
        raise ConfigError("delimiter must be an object with prefix and suffix or stopCondition")
    unknown = set(value) - {"prefix", "suffix", "stopCondition", "stop_condition"}
    if unknown:
        raise ConfigError(f"Unknown delimiter option(s): {', '.join(sorted(unknown))}")
    stop = value.get("stopCondition", value.get("stop_condition"))
    return rule_from(
        value.get("prefix", DEFAULT_PREFIX),
        suffix=regex_literal(value.get("suffix")),
        stop=regex_literal(stop),
    )


def _coerce(key: str, value: Any) -> Any:
    if key in _POLICY_FIELDS:
        return as_policy(regex_literal(value))
    if key == "delimiter":
        return _delimiter(value)
    if key in ("cache", "verbose"):
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be true or false")
        return value
    if key in ("locales", "filename", "root_lang"):
        if isinstance(value, Path):
            return str(value)
        if not isinstance(value, str):
            raise ConfigError(f"{key} must be a string")
        return value
    return value


def load_options(path: Union[str, Path], **overrides: Any) -> Options:
    """Read a JSON config file; keyword overrides win over file values."""
    config_path = Path(path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain an object")
    data.update(overrides)
    return Options.from_mapping(data)
