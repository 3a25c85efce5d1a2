"""Checking game files against their expected size and hash."""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class IntegrityFile:
    """A game file with the size and MD5 hash it is expected to have."""

    path: Path
    md5: str
    size: int
    base_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def verify(self, game_path: PathLike) -> bool:
        """Compare the file's size and, if it matches, its MD5 hash."""
        file_path = Path(game_path) / self.path
        try:
            if file_path.stat().st_size != self.size:
                return False
            digest = hashlib.md5(file_path.read_bytes()).hexdigest()
        except OSError:
            return False
        return digest.lower() == self.md5.lower()

    def fast_verify(self, game_path: PathLike) -> bool:
        """Compare only the file's size; much faster than ``verify``."""
        try:
            return (Path(game_path) / self.path).stat().st_size == self.size
        except OSError:
            return False


def _list_files(path: Path, skip_names: Sequence[str]) -> List[Path]:
    files: List[Path] = []
    with os.scandir(path) as entries:
        for entry in entries:
            if any(skip in entry.name for skip in skip_names):
                continue
            entry_path = path / entry.name
            if entry.is_dir(follow_symlinks=False):
                files.extend(_list_files(entry_path, skip_names))
            else:
                files.append(entry_path)
    return files


def get_unused_files(
    game_dir: PathLike,
    used_files: Iterable[PathLike],
    skip_names: Iterable[str] = (),
) -> List[Path]:
    """Return files inside ``game_dir`` that are not listed in ``used_files``.

    ``used_files`` may hold paths either absolute or relative to ``game_dir``.
    Entries whose name contains any of ``skip_names`` are ignored, and
    directories named so are not descended into.
    """
    game_dir = Path(game_dir)
    used = {Path(path) for path in used_files}
    skips = list(skip_names)

    def is_unused(path: Path) -> bool:
        if path in used:
            return False
        try:
            return path.relative_to(game_dir) not in used
        except ValueError:
            return True

    return [path for path in _list_files(game_dir, skips) if is_unused(path)]