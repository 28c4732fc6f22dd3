"""Placeholder-token translation of text files, one output per language."""

from .config import Options, load_options
from .dictionaries import DictionarySet, DictionaryStore
from .engine import TranslationEngine, is_binary
from .errors import (
    ConfigError,
    DictionaryLoadError,
    DictionaryParseError,
    LocaleTokensError,
    NoActiveLanguagesError,
    NoDictionariesError,
)
from .naming import FileMetadata, output_path
from .pipeline import FileResult, OutputFile, Pipeline, SourceFile
from .scanner import Bounded, Token, Unbounded, next_token, rule_from

__all__ = [
    "Bounded",
    "ConfigError",
    "DictionaryLoadError",
    "DictionaryParseError",
    "DictionarySet",
    "DictionaryStore",
    "FileMetadata",
    "FileResult",
    "LocaleTokensError",
    "NoActiveLanguagesError",
    "NoDictionariesError",
    "Options",
    "OutputFile",
    "Pipeline",
    "SourceFile",
    "Token",
    "TranslationEngine",
    "Unbounded",
    "is_binary",
    "load_options",
    "next_token",
    "output_path",
    "rule_from",
]
