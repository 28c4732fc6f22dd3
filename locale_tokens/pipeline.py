"""
File-level processing.

A Pipeline loads the dictionaries once, then turns each source file into
one output file per active language (plus the original when asked to).
Failures while processing one file are reported and never stop the run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config import Options
from .dictionaries import DictionaryStore
from .engine import TranslationEngine
from .errors import LocaleTokensError
from .naming import metadata_for, output_path
from .policy import matches
from .report import Reporter


@dataclass
class SourceFile:
    path: Path
    base: Path
    contents: Optional[bytes]

    @classmethod
    def read(cls, path: Path, base: Path) -> "SourceFile":
        return cls(path=path, base=base, contents=path.read_bytes())


@dataclass
class OutputFile:
    path: Path
    base: Path
    contents: bytes

    @property
    def relative(self) -> Path:
        return self.path.relative_to(self.base)


@dataclass
class FileResult:
    source: SourceFile
    outputs: List[OutputFile] = field(default_factory=list)
    error: Optional[Exception] = None


@dataclass
class RunSummary:
    processed: int = 0
    written: int = 0
    errors: int = 0


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_bytes(path: Path, data: bytes) -> None:
    ensure_parent(path)
    path.write_bytes(data)


class Pipeline:
    def __init__(
        self,
        options: Optional[Options] = None,
        store: Optional[DictionaryStore] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.options = options or Options()
        self.reporter = reporter or Reporter(self.options.verbose)
        self.store = store or DictionaryStore(self.reporter)
        # load failures are fatal for the whole run
        dictionaries = self.store.load(self.options.locales, use_cache=self.options.cache)
        self.engine = TranslationEngine(dictionaries, self.options, self.reporter)

    def translate(self, source: SourceFile) -> List[OutputFile]:
        """Translated copies of one file, named by the filename template."""
        opts = self.options
        processed = self.engine.translate(source.contents, source.path.as_posix())
        files: List[OutputFile] = []
        for lang, contents in processed.items():
            meta = metadata_for(source.path, source.base, lang)
            target = output_path(opts.filename, meta, source.base, opts.root_lang)
            if Path(os.path.normpath(source.base)) not in target.parents:
                raise LocaleTokensError(f"Output path {target} is outside of {source.base}")
            files.append(OutputFile(path=target, base=source.base, contents=contents))
        return files

    def process(self, source: SourceFile) -> FileResult:
        opts = self.options
        log = self.reporter
        file_path = source.path.as_posix()
        original = OutputFile(path=source.path, base=source.base, contents=source.contents or b"")

        if source.contents is None:
            return FileResult(source, [original])

        try:
            files = self.translate(source)
        except Exception as exc:
            if matches(opts.ignore_errors, file_path):
                log.debug("Dropping", file_path, "after error:", exc)
                return FileResult(source)
            log.error(f"{file_path}: {exc}")
            return FileResult(source, error=exc)

        if matches(opts.dry_run, file_path):
            log.debug('Ignoring all translations and passing on original file because "dryRun" was set')
            return FileResult(source, [original])

        outputs: List[OutputFile] = []
        if matches(opts.include_original, file_path):
            log.debug('Passing on original file because "includeOriginal" was set')
            outputs.append(original)
        for f in files:
            log.debug("Passing on translated file", f.path)
        outputs.extend(files)
        return FileResult(source, outputs)

    def sources(self, source_dir: Path, pattern: str = "**/*", exclude: Iterable[Path] = ()) -> List[Path]:
        """Files to translate; the locales directory and ``exclude`` trees are left out."""
        skipped = [Path(self.options.locales).resolve()] + [Path(p).resolve() for p in exclude]
        found: List[Path] = []
        for path in sorted(source_dir.glob(pattern)):
            if not path.is_file():
                continue
            parents = path.resolve().parents
            if any(root in parents for root in skipped):
                continue
            found.append(path)
        return found

    def run(
        self,
        source_dir: Union[str, Path],
        output_dir: Union[str, Path],
        pattern: str = "**/*",
    ) -> RunSummary:
        source_root = Path(source_dir).resolve()
        output_root = Path(output_dir).resolve()
        summary = RunSummary()
        log = self.reporter

        if not source_root.is_dir():
            raise LocaleTokensError(f"Source directory does not exist: {source_root}")

        for path in self.sources(source_root, pattern, exclude=[output_root]):
            rel = path.relative_to(source_root)
            log.debug(f"Processing: {rel}")
            try:
                source = SourceFile.read(path, source_root)
            except OSError as exc:
                log.error(f"{rel}: {exc}")
                summary.errors += 1
                continue

            result = self.process(source)
            summary.processed += 1
            if result.error is not None:
                summary.errors += 1
                continue
            for out in result.outputs:
                try:
                    write_bytes(output_root / out.relative, out.contents)
                except OSError as exc:
                    log.error(f"{out.relative}: {exc}")
                    summary.errors += 1
                    continue
                summary.written += 1
        return summary
