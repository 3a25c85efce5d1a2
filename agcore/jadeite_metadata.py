"""Metadata describing the state of the jadeite patch for each game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from agcore.version import Version


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _parse_version(value: Any) -> Optional[Version]:
    return Version.from_str(value) if isinstance(value, str) else None


class PatchStatusVariant(enum.Enum):
    """The state a patch is known to be in."""

    VERIFIED = "verified"
    UNVERIFIED = "unverified"
    BROKEN = "broken"
    UNSAFE = "unsafe"
    CONCERNING = "concerning"

    @classmethod
    def parse(cls, value: str) -> "PatchStatusVariant":
        """Parse a status name; unknown names count as unverified."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNVERIFIED

    @property
    def _rank(self) -> int:
        return list(PatchStatusVariant).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PatchStatusVariant):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PatchStatusVariant):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PatchStatusVariant):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PatchStatusVariant):
            return NotImplemented
        return self._rank >= other._rank


@dataclass(frozen=True, order=True)
class PatchStatus:
    """The patch status reported for one game version."""

    status: PatchStatusVariant = PatchStatusVariant.UNVERIFIED
    version: Version = field(default_factory=Version)

    @classmethod
    def from_json(cls, value: Any) -> "PatchStatus":
        data = _as_mapping(value)
        status = data.get("status")
        version = _parse_version(data.get("version"))
        return cls(
            status=PatchStatusVariant.parse(status) if isinstance(status, str) else PatchStatusVariant.UNVERIFIED,
            version=version if version is not None else Version(),
        )

    def get_status(self, game_version: Version) -> PatchStatusVariant:
        """Predict the patch status for the given game version."""
        if self.version < game_version:
            # The game was updated since the status was recorded.
            if self.status is PatchStatusVariant.VERIFIED:
                return PatchStatusVariant.UNVERIFIED
            return self.status
        if self.version == game_version:
            return self.status
        return PatchStatusVariant.UNVERIFIED


def _status(data: Mapping[str, Any], key: str) -> PatchStatus:
    return PatchStatus.from_json(data[key]) if key in data else PatchStatus()


@dataclass(frozen=True, order=True)
class Hi3rdMetadata:
    """Patch statuses for each Honkai Impact 3rd edition."""

    global_: PatchStatus = field(default_factory=PatchStatus)
    sea: PatchStatus = field(default_factory=PatchStatus)
    china: PatchStatus = field(default_factory=PatchStatus)
    taiwan: PatchStatus = field(default_factory=PatchStatus)
    korea: PatchStatus = field(default_factory=PatchStatus)
    japan: PatchStatus = field(default_factory=PatchStatus)

    @classmethod
    def from_json(cls, value: Any) -> "Hi3rdMetadata":
        data = _as_mapping(value)
        return cls(
            global_=_status(data, "global"),
            sea=_status(data, "sea"),
            china=_status(data, "china"),
            taiwan=_status(data, "taiwan"),
            korea=_status(data, "korea"),
            japan=_status(data, "japan"),
        )


@dataclass(frozen=True, order=True)
class HsrMetadata:
    """Patch statuses for each Honkai: Star Rail edition."""

    global_: PatchStatus = field(default_factory=PatchStatus)
    china: PatchStatus = field(default_factory=PatchStatus)

    @classmethod
    def from_json(cls, value: Any) -> "HsrMetadata":
        data = _as_mapping(value)
        return cls(global_=_status(data, "global"), china=_status(data, "china"))


@dataclass(frozen=True, order=True)
class GamesMetadata:
    """Patch statuses grouped by game."""

    hi3rd: Hi3rdMetadata = field(default_factory=Hi3rdMetadata)
    hsr: HsrMetadata = field(default_factory=HsrMetadata)

    @classmethod
    def from_json(cls, value: Any) -> "GamesMetadata":
        data = _as_mapping(value)
        return cls(
            hi3rd=Hi3rdMetadata.from_json(data["hi3rd"]) if "hi3rd" in data else Hi3rdMetadata(),
            hsr=HsrMetadata.from_json(data["hsr"]) if "hsr" in data else HsrMetadata(),
        )


@dataclass(frozen=True, order=True)
class PatchMetadata:
    """Information about the patch itself."""

    version: Version = field(default_factory=Version)

    @classmethod
    def from_json(cls, value: Any) -> "PatchMetadata":
        version = _parse_version(_as_mapping(value).get("version"))
        return cls(version=version if version is not None else Version())


@dataclass(frozen=True, order=True)
class JadeiteMetadata:
    """The whole jadeite metadata document."""

    jadeite: PatchMetadata = field(default_factory=PatchMetadata)
    games: GamesMetadata = field(default_factory=GamesMetadata)

    @classmethod
    def from_json(cls, value: Any) -> "JadeiteMetadata":
        data = _as_mapping(value)
        return cls(
            jadeite=PatchMetadata.from_json(data["jadeite"]) if "jadeite" in data else PatchMetadata(),
            games=GamesMetadata.from_json(data["games"]) if "games" in data else GamesMetadata(),
        )