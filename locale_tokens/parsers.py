"""
Dictionary file readers.

Every parser takes the decoded file text and returns a flat mapping
``dotted.key -> value``. Structured formats (JSON, YAML) are flattened,
INI sections become the first key segment, and CSV rows are
``key1,key2,...,value``.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import yaml

from .errors import DictionaryParseError

Dictionary = Dict[str, str]


# ── Flattening ─────────────────────────────────────────────────────────────────

def _leaf(value: Any) -> str:
    if isinstance(value, str):
        return value
    # numbers, booleans and null keep their JSON spelling
    return json.dumps(value, ensure_ascii=False)


def flatten(data: Any, prefix: str = "") -> Dictionary:
    """
    Collapse nested mappings and lists into dotted keys.

    ``{"a": {"b": "x"}, "c": ["y"]}`` becomes ``{"a.b": "x", "c.0": "y"}``.
    A mapping that is already flat comes back unchanged.
    """
    result: Dictionary = {}
    if isinstance(data, dict):
        items = ((str(k), v) for k, v in data.items())
    elif isinstance(data, (list, tuple)):
        items = ((str(i), v) for i, v in enumerate(data))
    else:
        result[prefix] = _leaf(data)
        return result

    for key, value in items:
        full = f"{prefix}.{key}" if prefix else key
        if isinstance(value, (dict, list, tuple)):
            result.update(flatten(value, full))
        else:
            result[full] = _leaf(value)
    return result


def _require_mapping(data: Any, fmt: str) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DictionaryParseError(f"{fmt} dictionary must contain an object at the top level")
    return data


# ── Structured formats ─────────────────────────────────────────────────────────

def parse_json(text: str) -> Dictionary:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DictionaryParseError(f"Invalid JSON: {exc}") from exc
    return flatten(_require_mapping(data, "JSON"))


def parse_yaml(text: str) -> Dictionary:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DictionaryParseError(f"Invalid YAML: {exc}") from exc
    return flatten(_require_mapping(data, "YAML"))


# ── INI ────────────────────────────────────────────────────────────────────────

def split_ini_line(line: str) -> List[str]:
    """Split on the first '=' only; later '=' belong to the value."""
    separator = line.find("=")
    if separator == -1:
        return [line]
    return [line[:separator], line[separator + 1 :]]


def parse_ini(text: str) -> Dictionary:
    result: Dictionary = {}
    section: Optional[str] = None
    for line in text.split("\n"):
        fields = [f.strip() for f in split_ini_line(line)]
        head = fields[0]
        if not head:
            continue
        if head.startswith("[") and head.endswith("]") and len(fields) == 1:
            section = head[1:-1].strip()
            continue
        if len(fields) < 2:
            # no '=' on this line
            continue
        key = f"{section}.{head}" if section else head
        result[key] = fields[1]
    return result


# ── CSV ────────────────────────────────────────────────────────────────────────

def split_csv_line(line: str) -> List[str]:
    """
    Split a CSV record on unquoted commas.

    Empty fields are dropped, except the last one which is always kept as
    the value. Quote characters stay part of the field text; a quote
    preceded by a backslash does not open or close a quoted run.
    """
    if not line.strip():
        return []
    fields: List[str] = []
    in_quotes = False
    separator = 0
    for i, ch in enumerate(line):
        if ch == '"':
            if i == 0 or line[i - 1] != "\\":
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            if separator < i:
                field = line[separator:i].strip()
                if field:
                    fields.append(field)
            separator = i + 1
    fields.append(line[separator:].strip())
    return fields


def parse_csv(text: str) -> Dictionary:
    result: Dictionary = {}
    for line in text.split("\n"):
        fields = split_csv_line(line)
        if not any(fields):
            continue
        key = ".".join(f for f in fields[:-1] if f)
        result[key] = fields[-1]
    return result


Parser = Callable[[str], Dictionary]

PARSERS: Dict[str, Parser] = {
    ".json": parse_json,
    ".yaml": parse_yaml,
    ".yml": parse_yaml,
    ".ini": parse_ini,
    ".csv": parse_csv,
}
