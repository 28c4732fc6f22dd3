"""
Output file naming.

The template ``${path}/${name}-${lang}.${ext}`` turns ``docs/hello.txt``
translated to ``fr`` into ``docs/hello-fr.txt``. Any field whose value
equals the root language renders as an empty string, so with
``root_lang="en"`` the English copy becomes ``docs/hello-.txt``; pick a
template such as ``${path}/${lang}/${name}.${ext}`` to avoid the dangling
separator.
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Union

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


@dataclass(frozen=True)
class FileMetadata:
    ext: str
    name: str
    path: str
    lang: str


def metadata_for(path: Union[str, Path], base: Union[str, Path], lang: str) -> FileMetadata:
    source = Path(path)
    rel_dir = os.path.relpath(source.parent, base)
    rel_dir = "" if rel_dir == os.curdir else Path(rel_dir).as_posix()
    return FileMetadata(
        ext=source.suffix[1:],
        name=source.stem,
        path=rel_dir,
        lang=lang,
    )


def render(template: str, metadata: FileMetadata, root_lang: str = "") -> str:
    """Substitute ``${field}`` placeholders in one pass; unknown ones stay as written."""
    values = asdict(metadata)

    def sub(m: re.Match) -> str:
        field = m.group(1)
        if field not in values:
            return m.group(0)
        value = values[field]
        return "" if value == root_lang else value

    return _PLACEHOLDER.sub(sub, template)


def output_path(
    template: str,
    metadata: FileMetadata,
    base: Union[str, Path],
    root_lang: str = "",
) -> Path:
    rendered = render(template, metadata, root_lang).lstrip("/\\")
    return Path(os.path.normpath(os.path.join(base, rendered)))
