"""File discovery — enumerate source files and locale documents."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from resw_audit.core.config import DEFAULT_IGNORE_FILES, DEFAULT_LOCALE_EXTENSION, normalize_extension


def _in_ignored_dir(path: Path, root: Path, ignore_dirs: frozenset[str]) -> bool:
    return any(part in ignore_dirs for part in path.relative_to(root).parts[:-1])


def iter_source_files(
    folders: Iterable[Path],
    extensions: Iterable[str],
    *,
    ignore_files: Iterable[str] = DEFAULT_IGNORE_FILES,
    ignore_dirs: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield every file under *folders* whose extension is allowed.

    Files named in *ignore_files* are skipped.  Directories are only skipped
    when their basename is listed in *ignore_dirs* (exact, case-sensitive
    match); nothing is excluded by default.  A file reachable from two
    overlapping folders is yielded once.
    """
    allowed = {normalize_extension(e) for e in extensions}
    ignored = frozenset(ignore_files)
    skip_dirs = frozenset(ignore_dirs)
    seen: set[Path] = set()

    for folder in folders:
        if not folder.is_dir():
            continue
        for p in sorted(folder.rglob("*")):
            if p.suffix.lower() not in allowed:
                continue
            if p.name in ignored:
                continue
            if not p.is_file():
                continue
            if skip_dirs and _in_ignored_dir(p, folder, skip_dirs):
                continue
            resolved = p.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            yield p


def iter_locale_files(
    lines_folder: Path,
    reference_file: Path,
    *,
    extension: str = DEFAULT_LOCALE_EXTENSION,
) -> Iterator[Path]:
    """Yield every locale document under *lines_folder* except the reference."""
    ext = normalize_extension(extension)
    reference = reference_file.resolve()
    for p in sorted(lines_folder.rglob("*")):
        if p.suffix.lower() != ext or not p.is_file():
            continue
        if p.resolve() == reference:
            continue
        yield p
