"""
Option defaults, coercion and config file loading.
"""

import json
import re

import pytest

from locale_tokens.config import DEFAULT_FILENAME, Options, load_options, regex_literal
from locale_tokens.errors import ConfigError
from locale_tokens.policy import ALWAYS, NEVER, AnyOf, Contains, Matches
from locale_tokens.scanner import DEFAULT_STOP, Bounded, Unbounded


class TestDefaults:
    def test_defaults(self):
        options = Options()
        assert options.locales == "./locales"
        assert options.delimiter == Unbounded("R.", DEFAULT_STOP)
        assert options.filename == DEFAULT_FILENAME == "${path}/${name}-${lang}.${ext}"
        assert options.whitelist == ALWAYS
        assert options.blacklist == NEVER
        assert options.warn == ALWAYS
        assert options.cache is True
        assert options.ignore_errors == options.dry_run == options.include_original == NEVER
        assert options.ignore_tokens == NEVER
        assert options.encode_entities == ALWAYS
        assert options.verbose is False
        assert options.root_lang == ""


class TestFromMapping:
    def test_camel_case_aliases(self):
        options = Options.from_mapping({"ignoreErrors": True, "rootLang": "en", "dryRun": "docs/"})
        assert options.ignore_errors == ALWAYS
        assert options.root_lang == "en"
        assert options.dry_run == Contains("docs/")

    def test_regex_literals(self):
        options = Options.from_mapping({"whitelist": ["/^en/i", "fr"]})
        assert options.whitelist == AnyOf((Matches(re.compile("^en", re.IGNORECASE)), Contains("fr")))

    def test_delimiter_with_suffix(self):
        options = Options.from_mapping({"delimiter": {"prefix": "${", "suffix": "}"}})
        assert isinstance(options.delimiter, Bounded)
        assert options.delimiter.prefix == "${"

    def test_delimiter_with_stop_condition(self):
        options = Options.from_mapping({"delimiter": {"prefix": "@", "stopCondition": "/\\s/"}})
        assert options.delimiter == Unbounded("@", re.compile(r"\s"))

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="Unknown option: colour"):
            Options.from_mapping({"colour": "blue"})

    def test_unknown_delimiter_option(self):
        with pytest.raises(ConfigError):
            Options.from_mapping({"delimiter": {"prefix": "@", "end": ";"}})

    def test_wrong_types(self):
        with pytest.raises(ConfigError):
            Options.from_mapping({"cache": "yes"})
        with pytest.raises(ConfigError):
            Options.from_mapping({"filename": 3})
        with pytest.raises(ConfigError):
            Options.from_mapping({"warn": 3})

    def test_merge_keeps_other_values(self):
        base = Options.from_mapping({"rootLang": "en"})
        merged = base.merge({"verbose": True})
        assert merged.root_lang == "en"
        assert merged.verbose is True
        assert base.verbose is False


class TestRegexLiteral:
    def test_plain_string_passes(self):
        assert regex_literal("docs/") == "docs/"

    def test_flags(self):
        assert regex_literal("/a.b/s").flags & re.DOTALL

    def test_invalid(self):
        with pytest.raises(ConfigError):
            regex_literal("/(/")


class TestLoadOptions:
    def test_file_and_overrides(self, tmp_path):
        path = tmp_path / "i18n.json"
        path.write_text(json.dumps({"locales": "lang", "rootLang": "en", "verbose": True}), encoding="utf-8")
        options = load_options(path, verbose=False)
        assert options.locales == "lang"
        assert options.root_lang == "en"
        assert options.verbose is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_options(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_options(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_options(path)
