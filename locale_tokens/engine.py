"""
Token replacement across all active languages.

One pass over the input finds every token; each language buffer receives
the untouched text between tokens and that language's value for the
token key. Text outside tokens is never altered or reordered.
"""

from __future__ import annotations

import codecs
from typing import Dict, List, Optional, Union

from . import entities
from .config import Options
from .dictionaries import DictionarySet
from .errors import NoActiveLanguagesError
from .policy import matches
from .report import Reporter
from .scanner import iter_tokens

BINARY_SNIFF_BYTES = 24


def is_binary(data: Union[bytes, str]) -> bool:
    """
    Heuristic: look at the first 24 bytes as UTF-8. A replacement
    character or a control code <= 8 marks the content as binary. A
    multi-byte character cut off at the end of the window does not count.
    """
    if isinstance(data, str):
        chunk = data[:BINARY_SNIFF_BYTES]
    else:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        chunk = decoder.decode(data[:BINARY_SNIFF_BYTES], final=False)
    return any(ch == "\ufffd" or ord(ch) <= 8 for ch in chunk)


class TranslationEngine:
    def __init__(
        self,
        dictionaries: DictionarySet,
        options: Optional[Options] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.dictionaries = dictionaries
        self.options = options or Options()
        self.reporter = reporter or Reporter(self.options.verbose)

    def active_languages(self) -> List[str]:
        opts = self.options
        langs = [
            lang
            for lang in self.dictionaries
            if matches(opts.whitelist, lang) and not matches(opts.blacklist, lang)
        ]
        if not langs:
            raise NoActiveLanguagesError()
        return langs

    def translate(self, contents: bytes, path: str = "") -> Dict[str, bytes]:
        """Return ``{language: translated bytes}`` for one file."""
        langs = self.active_languages()
        log = self.reporter
        log.debug("Starting translation for", len(langs), "languages")

        if matches(self.options.ignore_tokens, path):
            log.debug("Ignoring file", path, "because of ignoreTokens option")
            return {lang: contents for lang in langs}
        if is_binary(contents):
            log.debug("Ignoring file", path, "because file is binary")
            return {lang: contents for lang in langs}

        # surrogateescape keeps stray invalid bytes intact on the way back
        text = contents.decode("utf-8", errors="surrogateescape")
        processed = self._substitute(text, langs, path)
        return {
            lang: contents if result is None else result.encode("utf-8", errors="surrogateescape")
            for lang, result in processed.items()
        }

    def translate_text(self, text: str, path: str = "") -> Dict[str, str]:
        langs = self.active_languages()
        if matches(self.options.ignore_tokens, path) or is_binary(text):
            return {lang: text for lang in langs}
        processed = self._substitute(text, langs, path)
        return {lang: text if result is None else result for lang, result in processed.items()}

    def _substitute(self, text: str, langs: List[str], path: str) -> Dict[str, Optional[str]]:
        """
        Build every language buffer. A language whose buffer ends up empty
        maps to None so the caller hands out the original content instead.
        """
        opts = self.options
        encode = matches(opts.encode_entities, path)
        report_missing = opts.verbose or matches(opts.warn, path)
        parts: Dict[str, List[str]] = {lang: [] for lang in langs}

        copied = 0
        for token in iter_tokens(text, opts.delimiter):
            literal = text[copied : token.start]
            for lang in langs:
                parts[lang].append(literal)
                value = self.dictionaries[lang].get(token.key)
                if value is not None:
                    parts[lang].append(entities.encode(value) if encode else value)
                elif report_missing:
                    self.reporter.warn(
                        "Missing translation of language", lang,
                        "for key", token.key, "in file", path,
                    )
            copied = token.end

        tail = text[copied:]
        result: Dict[str, Optional[str]] = {}
        for lang in langs:
            parts[lang].append(tail)
            joined = "".join(parts[lang])
            if not joined:
                self.reporter.debug(
                    "Copying original content to target language", lang,
                    "because no replacements have happened",
                )
            result[lang] = joined or None
        return result
