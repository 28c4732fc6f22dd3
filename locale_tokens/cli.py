#!/usr/bin/env python3
"""
locale-tokens command line.

Translates every file under SOURCE into OUTPUT, one copy per language
found in the locales directory.

Usage:
    locale-tokens src build                          # default options
    locale-tokens src build --config i18n.json       # options from a JSON file
    locale-tokens src build --locales lang --root-lang en
    locale-tokens src build --prefix '{{' --suffix '}}'
    locale-tokens src build --dry-run                # copy originals only
"""

import argparse
import dataclasses
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Options, load_options, regex_literal
from .errors import LocaleTokensError
from .pipeline import Pipeline
from .report import Reporter
from .scanner import DelimiterRule, rule_from


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="locale-tokens",
        description="Replace placeholder tokens with dictionary values, one output file per language.",
    )
    parser.add_argument("source", type=Path, help="Directory with the files to translate.")
    parser.add_argument("output", type=Path, help="Directory receiving the translated files.")
    parser.add_argument("--config", type=Path, metavar="FILE", help="JSON file with options.")
    parser.add_argument("--locales", metavar="DIR", help="Directory with dictionary files (default ./locales).")
    parser.add_argument("--pattern", default="**/*", help="Glob selecting source files (default **/*).")
    parser.add_argument("--prefix", help="Token prefix (default R.).")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--suffix", metavar="REGEX", help="Pattern closing a token.")
    group.add_argument("--stop", metavar="REGEX", help="Pattern matching the first character after a token.")
    parser.add_argument("--filename", metavar="TEMPLATE", help="Output name template, e.g. ${path}/${lang}/${name}.${ext}.")
    parser.add_argument("--root-lang", metavar="LANG", help="Language written without a language suffix.")
    parser.add_argument("--only", action="append", metavar="LANG", help="Translate only these languages (repeatable).")
    parser.add_argument("--skip", action="append", metavar="LANG", help="Do not translate these languages (repeatable).")
    parser.add_argument("--dry-run", action="store_true", help="Pass original files through without translating.")
    parser.add_argument("--include-original", action="store_true", help="Also copy the untranslated file.")
    parser.add_argument("--ignore-errors", action="store_true", help="Silently drop files that fail.")
    parser.add_argument("--no-warn", action="store_true", help="Do not report missing translations.")
    parser.add_argument("--no-entities", action="store_true", help="Insert values without HTML entity encoding.")
    parser.add_argument("--no-cache", action="store_true", help="Do not reuse loaded dictionaries.")
    parser.add_argument("--verbose", action="store_true", help="Print every step.")
    return parser.parse_args(argv)


def _delimiter_from_args(args: argparse.Namespace, current: DelimiterRule) -> DelimiterRule:
    """Apply the delimiter flags on top of the configured rule; unset parts are kept."""
    prefix = args.prefix or current.prefix
    if args.suffix:
        return rule_from(prefix, suffix=regex_literal(args.suffix))
    if args.stop:
        return rule_from(prefix, stop=regex_literal(args.stop))
    return dataclasses.replace(current, prefix=prefix)


def options_from_args(args: argparse.Namespace) -> Options:
    overrides: Dict[str, Any] = {}
    if args.locales:
        overrides["locales"] = args.locales
    base = load_options(args.config) if args.config else Options()
    if args.prefix or args.suffix or args.stop:
        overrides["delimiter"] = _delimiter_from_args(args, base.delimiter)
    if args.filename:
        overrides["filename"] = args.filename
    if args.root_lang is not None:
        overrides["root_lang"] = args.root_lang
    # language switches match whole identifiers
    if args.only:
        overrides["whitelist"] = [f"/^{re.escape(lang)}$/" for lang in args.only]
    if args.skip:
        overrides["blacklist"] = [f"/^{re.escape(lang)}$/" for lang in args.skip]
    for flag in ("dry_run", "include_original", "ignore_errors", "verbose"):
        if getattr(args, flag):
            overrides[flag] = True
    if args.no_warn:
        overrides["warn"] = False
    if args.no_entities:
        overrides["encode_entities"] = False
    if args.no_cache:
        overrides["cache"] = False

    return base.merge(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        options = options_from_args(args)
        reporter = Reporter(options.verbose)
        pipeline = Pipeline(options, reporter=reporter)
        summary = pipeline.run(args.source, args.output, args.pattern)
    except LocaleTokensError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(
        f"\nDone. {summary.processed} file(s) processed, "
        f"{summary.written} file(s) written, "
        f"{summary.errors} error(s)."
    )
    return 2 if summary.errors else 0


if __name__ == "__main__":
    sys.exit(main())
