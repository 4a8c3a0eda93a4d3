"""Byte-pattern search and relative-address resolution over memory images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, Union

__all__ = ["Pattern", "find_pattern", "resolve_relative"]

_WILDCARDS = {"?", "??"}


@dataclass(frozen=True)
class Pattern:
    """A byte signature where ``None`` elements match any byte."""

    elements: tuple[Optional[int], ...]

    def __post_init__(self) -> None:
        if not self.elements:
            raise ValueError("a pattern needs at least one element")
        for element in self.elements:
            if element is not None and not 0 <= element <= 0xFF:
                raise ValueError(f"byte out of range: {element!r}")

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Parse a signature such as ``"8B 0D ? ? ? ? 55"``."""
        elements: list[Optional[int]] = []
        for token in text.split():
            if token in _WILDCARDS:
                elements.append(None)
            elif len(token) == 2:
                try:
                    elements.append(int(token, 16))
                except ValueError:
                    raise ValueError(f"invalid byte in pattern: {token!r}") from None
            else:
                raise ValueError(f"invalid byte in pattern: {token!r}")
        return cls(tuple(elements))

    def __len__(self) -> int:
        return len(self.elements)

    @cached_property
    def _regex(self) -> re.Pattern[bytes]:
        parts = (b"." if e is None else re.escape(bytes([e])) for e in self.elements)
        return re.compile(b"".join(parts), re.DOTALL)

    def search(self, data: bytes) -> Optional[int]:
        """Return the index of the first match in ``data``, or None."""
        match = self._regex.search(bytes(data))
        return match.start() if match else None


def find_pattern(
    data: bytes,
    pattern: Union[Pattern, str],
    start: int = 0,
    offset: int = 0,
) -> Optional[int]:
    """Find ``pattern`` in ``data`` loaded at address ``start``.

    Returns the address of the first match plus ``offset``, or None.
    """
    if isinstance(pattern, str):
        pattern = Pattern.parse(pattern)
    index = pattern.search(data)
    if index is None:
        return None
    return start + index + offset


def resolve_relative(data: bytes, position: int) -> int:
    """Resolve the little-endian 32-bit relative operand at ``position``.

    The result is the position just past the operand plus its signed value.
    """
    if position < 0 or position + 4 > len(data):
        raise ValueError(f"no 4-byte operand at position {position}")
    relative = int.from_bytes(bytes(data[position : position + 4]), "little", signed=True)
    return position + relative + 4