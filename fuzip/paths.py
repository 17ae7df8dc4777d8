from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .log import timed

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FuzipPath:
    """A file matched on its stem, e.g. `track01` for `track01.flac`."""

    path: Path

    def get(self) -> Path:
        return self.path

    def key(self) -> bytes:
        stem = self.path.stem
        if not stem:
            raise ValueError(f"FuzipPath with no stem: {self.path}")
        return os.fsencode(stem)

    def display(self) -> str:
        return str(self.path)


def list_files(directory: Path) -> List[FuzipPath]:
    """
    List the regular files directly inside `directory`.

    Symlinks count when they resolve to a regular file. Subdirectories,
    broken links and special files are left out. Sorted by name.
    """
    values: List[FuzipPath] = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_file(follow_symlinks=True):
                values.append(FuzipPath(Path(entry.path)))
            else:
                logger.debug("skipping non-file entry %s", entry.path)
    values.sort(key=lambda value: value.path.name)
    return values


def prep_paths(directories: Iterable[Path]) -> List[List[FuzipPath]]:
    with timed("prep_paths"):
        return [list_files(Path(directory)) for directory in directories]
