"""Keeping a local git repository in sync with a remote one."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

# Length of an abbreviated commit hash plus the following space.
_HASH_PREFIX = 8


@dataclass
class RemoteGitSync:
    """A local git repository folder that mirrors some remote."""

    folder: Path

    def __post_init__(self) -> None:
        self.folder = Path(self.folder)

    def _git(self, *args: str, capture: bool = False, in_folder: bool = True) -> bytes:
        result = subprocess.run(
            ["git", *args],
            cwd=str(self.folder) if in_folder else None,
            stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return result.stdout or b""

    def is_sync(self, remotes: Iterable[str]) -> Optional[str]:
        """Return the first remote the folder is synced with, or None."""
        logger.debug("Checking local repository sync state: %s", self.folder)
        if not self.folder.exists():
            logger.warning("Given local repository folder doesn't exist")
            return None
        for remote in remotes:
            if self.is_sync_with(remote):
                return remote
        return None

    def is_sync_with(self, remote: str) -> bool:
        """Check whether the local HEAD matches the HEAD of ``remote``."""
        logger.debug("Checking sync state of %s with %s", self.folder, remote)
        if not self.folder.exists():
            logger.warning("Given local repository folder doesn't exist")
            return False
        head = self._git("rev-parse", "HEAD", capture=True)
        self._git("remote", "set-url", "origin", remote)
        self._git("fetch", "origin")
        remote_head = self._git("rev-parse", "origin/HEAD", capture=True)
        return head == remote_head

    def sync(self, remote: str) -> List[str]:
        """Fetch updates from ``remote`` and return the new commit subjects."""
        logger.debug("Syncing local repository with remote")
        if self.folder.exists():
            head_commit = self._git("rev-parse", "HEAD", capture=True).decode("utf-8").rstrip()
            self._git("remote", "set-url", "origin", remote)
            self._git("fetch", "origin")
            self._git("reset", "--hard", "origin/HEAD")
            changes = self._git("--no-pager", "log", "--oneline", f"{head_commit}..HEAD", capture=True)
        else:
            self._git("clone", remote, str(self.folder), in_folder=False)
            changes = self._git("--no-pager", "log", "--oneline", capture=True)
        return [line[_HASH_PREFIX:] for line in changes.decode("utf-8").rstrip().splitlines()]