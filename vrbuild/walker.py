"""Recursive file listing with name-based exclusions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Iterator, List


class DirectoryWalker:
    """Lists every file under a root, skipping excluded names at any depth.

    Entries are visited depth first in sorted name order so the result is
    stable for a given tree. Excluded directories are never entered.
    Symlink cycles are not detected.
    """

    def walk(self, root: Path | str, exclude: AbstractSet[str] = frozenset()) -> List[Path]:
        root_path = Path(root)
        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root}")
        if not root_path.is_dir():
            return [root_path]
        return list(self._iter_files(root_path, exclude))

    def _iter_files(self, directory: Path, exclude: AbstractSet[str]) -> Iterator[Path]:
        with os.scandir(directory) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
        for entry in ordered:
            if entry.name in exclude:
                continue
            path = directory / entry.name
            if entry.is_dir():
                yield from self._iter_files(path, exclude)
            else:
                yield path


__all__ = ["DirectoryWalker"]
