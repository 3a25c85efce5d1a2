"""The common interface of a difference between two game versions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from agcore.version import Version


class VersionDiffExt(ABC):
    """A difference between the installed and the latest version."""

    @property
    @abstractmethod
    def edition(self) -> Any:
        """Game edition this difference belongs to."""

    @property
    @abstractmethod
    def current(self) -> Optional[Version]:
        """Installed version, or None if nothing is installed."""

    @property
    @abstractmethod
    def latest(self) -> Version:
        """Latest available version."""

    @property
    @abstractmethod
    def downloaded_size(self) -> Optional[int]:
        """Bytes to download, if known."""

    @property
    @abstractmethod
    def unpacked_size(self) -> Optional[int]:
        """Bytes once unpacked, if known."""

    @property
    @abstractmethod
    def installation_path(self) -> Optional[Path]:
        """Where the difference is installed to, if known."""

    @property
    @abstractmethod
    def downloading_uri(self) -> Optional[str]:
        """URI to download the difference from, if provided."""

    def file_name(self) -> Optional[str]:
        """Return the last path segment of the downloading URI.

        An empty segment, or a URI without any slash, gives ``index.html``.
        """
        uri = self.downloading_uri
        if uri is None:
            return None
        index = uri.replace("\\", "/").rfind("/")
        if index == -1:
            return "index.html"
        return uri[index + 1:] or "index.html"