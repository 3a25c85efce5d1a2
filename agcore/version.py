"""Three-component game and patch versions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

_COMPONENT = re.compile(r"\+?[0-9]+")
_MAX_COMPONENT = 255


@dataclass(frozen=True, eq=False)
class Version:
    """A version made of three components in the range 0..=255.

    Versions compare with each other numerically. They also compare with
    strings, in which case the dotted text form is compared as text.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for value in self.components:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"version component must be an int, got {value!r}")
            if not 0 <= value <= _MAX_COMPONENT:
                raise ValueError(
                    f"version component must be within 0..={_MAX_COMPONENT}, got {value}"
                )

    @property
    def components(self) -> Tuple[int, int, int]:
        """The three components as a tuple."""
        return (self.major, self.minor, self.patch)

    @classmethod
    def from_str(cls, text: str) -> Optional["Version"]:
        """Parse a string like ``"1.10.2"``; return None if it is not a version."""
        parts = text.split(".")
        if len(parts) != 3:
            return None
        if not all(_COMPONENT.fullmatch(part) for part in parts):
            return None
        values = [int(part) for part in parts]
        if any(value > _MAX_COMPONENT for value in values):
            return None
        return cls(*values)

    def to_plain_string(self) -> str:
        """Return the components joined without separators, e.g. ``"123"``."""
        return "".join(str(value) for value in self.components)

    def __str__(self) -> str:
        return ".".join(str(value) for value in self.components)

    def __hash__(self) -> int:
        # Equal to a string of the same text form, so the hashes must agree.
        return hash(str(self))

    def _operands(self, other: object) -> Optional[Tuple[Union[tuple, str], Union[tuple, str]]]:
        if isinstance(other, Version):
            return self.components, other.components
        if isinstance(other, str):
            return str(self), other
        return None

    def __eq__(self, other: object) -> bool:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        left, right = operands
        return left == right

    def __lt__(self, other: object) -> bool:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        left, right = operands
        return left < right

    def __le__(self, other: object) -> bool:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        left, right = operands
        return left <= right

    def __gt__(self, other: object) -> bool:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        left, right = operands
        return left > right

    def __ge__(self, other: object) -> bool:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        left, right = operands
        return left >= right