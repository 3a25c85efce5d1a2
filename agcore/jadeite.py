"""The jadeite patch: installed version, latest release and metadata."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import requests

from agcore.jadeite_metadata import JadeiteMetadata
from agcore.version import Version

logger = logging.getLogger(__name__)

REPO_API_URI = "https://codeberg.org/api/v1/repos/mkrsym1/jadeite/releases/latest"

METADATA_URIS = (
    # Primary
    "https://codeberg.org/mkrsym1/jadeite/raw/branch/master/metadata.json",
    # Mirror
    "https://notabug.org/mkrsym1/jadeite-mirror/raw/master/metadata.json",
)

PathLike = Union[str, "os.PathLike[str]"]


class JadeiteError(RuntimeError):
    """Raised when patch information cannot be obtained."""


@dataclass(frozen=True)
class JadeiteLatest:
    """The latest released patch version and where to download it."""

    version: Version
    download_uri: str


def is_installed(folder: PathLike) -> bool:
    """Check whether the patch is installed in ``folder``."""
    return (Path(folder) / ".version").exists()


def get_version(folder: PathLike) -> Version:
    """Read the installed patch version from ``folder``."""
    data = (Path(folder) / ".version").read_bytes()
    if len(data) < 3:
        raise ValueError(f"version file holds {len(data)} bytes, expected 3")
    return Version(data[0], data[1], data[2])


@functools.lru_cache(maxsize=None)
def get_latest() -> JadeiteLatest:
    """Request the latest patch release."""
    response = requests.get(REPO_API_URI).json()
    data = response if isinstance(response, dict) else {}

    tag = data.get("tag_name")
    version = Version.from_str(tag.removeprefix("v")) if isinstance(tag, str) else None
    if version is None:
        raise JadeiteError("Failed to request latest patch version")

    assets = data.get("assets")
    asset = assets[0] if isinstance(assets, list) and assets else None
    download_uri = asset.get("browser_download_url") if isinstance(asset, dict) else None
    if not isinstance(download_uri, str):
        raise JadeiteError("Failed to request patch downloading URI")

    return JadeiteLatest(version=version, download_uri=download_uri)


@functools.lru_cache(maxsize=None)
def get_metadata() -> JadeiteMetadata:
    """Fetch patch metadata from the first mirror that answers with JSON."""
    for uri in METADATA_URIS:
        try:
            response = requests.get(uri)
        except requests.RequestException:
            logger.warning("Could not reach '%s'. Attempting to use next fallback", uri)
            continue
        try:
            document = response.json()
        except ValueError:
            logger.warning("Got invalid response from '%s'. Attempting to use next fallback", uri)
            continue
        return JadeiteMetadata.from_json(document)
    raise JadeiteError("Could not get metadata from any of the mirrors")