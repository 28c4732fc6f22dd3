"""
Loading of a locales directory.

Each file directly inside the directory is one language: ``fr.json`` is
the dictionary for ``fr``. The store caches whole directory snapshots by
absolute path; a directory is either served entirely from cache or read
entirely from disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from .errors import DictionaryLoadError, DictionaryParseError, NoDictionariesError
from .parsers import PARSERS, Dictionary
from .report import Reporter

DictionarySet = Dict[str, Dictionary]


class DictionaryStore:
    def __init__(self, reporter: Optional[Reporter] = None) -> None:
        self._cache: Dict[Path, DictionarySet] = {}
        self._reporter = reporter or Reporter()

    def cached(self, directory: Union[str, Path]) -> bool:
        return Path(directory).resolve() in self._cache

    def clear(self) -> None:
        self._cache.clear()

    def load(self, directory: Union[str, Path], use_cache: bool = True) -> DictionarySet:
        root = Path(directory).resolve()
        log = self._reporter

        if use_cache and root in self._cache:
            log.debug("[cache] Skip loading cached translations from", root)
            return self._cache[root]

        log.debug("Loading translations from", root)
        try:
            files = sorted(p for p in root.iterdir() if p.is_file())
        except OSError as exc:
            raise NoDictionariesError(str(root)) from exc

        dictionaries: DictionarySet = {}
        for path in files:
            parser = PARSERS.get(path.suffix.lower())
            if parser is None:
                log.debug("Ignored file", path.name)
                continue
            try:
                text = path.read_text(encoding="utf-8-sig")
                dictionaries[path.stem] = parser(text)
            except (OSError, UnicodeDecodeError, DictionaryParseError) as exc:
                raise DictionaryLoadError(f"Cannot load dictionary {path.name}: {exc}") from exc
            log.debug("Added translations from", path.name)

        log.debug("Loaded", len(dictionaries), "translations from", root)
        if use_cache:
            log.debug("[cache] Caching translations from", root)
            self._cache[root] = dictionaries
        return dictionaries
