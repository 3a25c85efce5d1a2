"""Checks for Windows runtime libraries installed into a wine prefix."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_MFC140_DLL = Path("drive_c/windows/system32/mfc140.dll")


def mfc140_is_installed(wine_prefix: PathLike) -> bool:
    """Check whether the MFC 14.0 libraries are in the prefix."""
    return (Path(wine_prefix) / _MFC140_DLL).exists()


def vcrun2015_is_installed(wine_prefix: PathLike) -> bool:
    """Check whether the VC++ 2015 runtime is in the prefix.

    The runtime installer also places mfc140.dll, which serves as the marker.
    """
    return (Path(wine_prefix) / _MFC140_DLL).exists()