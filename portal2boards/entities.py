"""Records returned by the leaderboard service, built from decoded JSON."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

__all__ = [
    "EntryScoreData",
    "EntryUserData",
    "AggregatedData",
    "Aggregated",
    "ChamberEntryScoreData",
    "ChamberEntry",
    "Chamber",
]

_T = TypeVar("_T")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _field(data: Any, key: str) -> Any:
    """Return ``data[key]``, treating a missing object or key as null."""
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data.get(key)


def _integer(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a JSON number, got {value!r}")
    return int(value)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"expected a JSON string, got {value!r}")
    return value


def _leading_int(value: Any) -> int:
    """Read the integer a numeric string starts with; 0 when there is none."""
    match = _LEADING_INT.match(_text(value))
    return int(match.group(1)) if match else 0


def _keyed(data: Any, parse: Callable[[Any], _T]) -> dict[int, _T]:
    """Parse an object keyed by numeric strings into a dict ordered by key."""
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return dict(sorted((int(key), parse(value)) for key, value in data.items()))


@dataclass
class EntryScoreData:
    """Score and rank of one board entry."""

    score: int = 0
    player_rank: int = 0
    score_rank: int = 0

    @classmethod
    def from_json(cls, data: Any) -> EntryScoreData:
        return cls(
            score=_integer(_field(data, "score")),
            player_rank=_integer(_field(data, "playerRank")),
            score_rank=_integer(_field(data, "scoreRank")),
        )


@dataclass
class EntryUserData:
    """The player behind a board entry."""

    board_name: str = ""
    avatar: str = ""

    @classmethod
    def from_json(cls, data: Any) -> EntryUserData:
        return cls(
            board_name=_text(_field(data, "boardname")),
            avatar=_text(_field(data, "avatar")),
        )


@dataclass
class AggregatedData:
    """One player's line in an aggregated ranking."""

    user_data: EntryUserData = field(default_factory=EntryUserData)
    score_data: EntryScoreData = field(default_factory=EntryScoreData)

    @classmethod
    def from_json(cls, data: Any) -> AggregatedData:
        return cls(
            user_data=EntryUserData.from_json(_field(data, "userData")),
            score_data=EntryScoreData.from_json(_field(data, "scoreData")),
        )


@dataclass
class Aggregated:
    """Aggregated rankings by points and by times, keyed by player id."""

    points: dict[int, AggregatedData] = field(default_factory=dict)
    times: dict[int, AggregatedData] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> Aggregated:
        return cls(
            points=_keyed(_field(data, "Points"), AggregatedData.from_json),
            times=_keyed(_field(data, "Times"), AggregatedData.from_json),
        )


@dataclass
class ChamberEntryScoreData(EntryScoreData):
    """Score data of a chamber entry, where numbers arrive as strings."""

    note: str = ""
    submission: str = ""
    changelog_id: int = 0
    date: str = ""
    has_demo: str = ""
    youtube_id: str = ""

    @classmethod
    def from_json(cls, data: Any) -> ChamberEntryScoreData:
        return cls(
            score=_leading_int(_field(data, "score")),
            player_rank=_leading_int(_field(data, "playerRank")),
            score_rank=_leading_int(_field(data, "scoreRank")),
            note=_text(_field(data, "note")),
            submission=_text(_field(data, "submission")),
            changelog_id=_leading_int(_field(data, "changelogId")),
            date=_text(_field(data, "date")),
            has_demo=_text(_field(data, "hasDemo")),
            youtube_id=_text(_field(data, "youtubeID")),
        )


@dataclass
class ChamberEntry:
    """A player's entry on a chamber board."""

    score: ChamberEntryScoreData = field(default_factory=ChamberEntryScoreData)
    user: EntryUserData = field(default_factory=EntryUserData)

    @classmethod
    def from_json(cls, data: Any) -> ChamberEntry:
        return cls(
            score=ChamberEntryScoreData.from_json(_field(data, "scoreData")),
            user=EntryUserData.from_json(_field(data, "userData")),
        )


@dataclass
class Chamber:
    """A chamber board: its id and the entries keyed by player id."""

    id: int = 0
    entries: dict[int, ChamberEntry] = field(default_factory=dict)

    @classmethod
    def from_json(cls, chamber_id: int, data: Any) -> Chamber:
        return cls(id=chamber_id, entries=_keyed(data, ChamberEntry.from_json))