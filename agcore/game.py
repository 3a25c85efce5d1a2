"""The common interface of an installed game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from agcore.version import Version


class GameExt(ABC):
    """A game installed at some path, in some edition."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """Folder the game is installed in."""

    @property
    @abstractmethod
    def edition(self) -> Any:
        """Game edition."""

    def is_installed(self) -> bool:
        """Check whether the game folder exists."""
        return Path(self.path).exists()

    @classmethod
    @abstractmethod
    def get_latest_version(cls, edition: Any) -> Version:
        """Return the latest available version for an edition."""

    @abstractmethod
    def get_version(self) -> Version:
        """Return the installed version."""