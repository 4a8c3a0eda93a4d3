# portal2boards

A small Python library for working with the Portal 2 leaderboards. It has four
modules:

- `portal2boards.maps` holds the map tables for Portal 2, Aperture Tag and
  Portal Stories: Mel. Each entry gives the level name, chamber name, map type,
  leaderboard ids and chapter.
- `portal2boards.entities` holds dataclasses that are built from the board's
  decoded JSON. They cover aggregated rankings and single chambers.
- `portal2boards.client` fetches aggregated rankings and chamber boards over
  HTTP, using `requests`.
- `portal2boards.memory` searches a byte buffer for signatures written as hex
  bytes, such as `"8B 0D ? ? ? ? 85 C9"`. It also follows 32-bit relative
  offsets.

## Installation

```
pip install portal2boards
```

## Map lookup

```python
from portal2boards.maps import PORTAL2, APERTURE_TAG, PORTAL_STORIES, MapType, get_map_by_name

level = get_map_by_name("sp_a1_intro3")
print(level.chamber_name)                  # Portal Gun
print(level.type is MapType.SINGLE_PLAYER) # True
print(level.best_time_id, level.best_portals_id, level.chapter_id)
print(level.has_leaderboard())             # True
```

`get_map_by_name(level_name, campaign=PORTAL2)` returns the first `Map` in the
campaign whose level name matches exactly. It returns `None` when no map
matches. Pass `APERTURE_TAG`, `PORTAL_STORIES` or any other iterable of `Map` to
search a different campaign.

`Map` is a frozen dataclass. `has_leaderboard()` is true when the map has a
non-zero `best_time_id`. `MapType` lists these types: `UNKNOWN`,
`SINGLE_PLAYER`, `COOPERATIVE`, `EXTRAS`, `WORKSHOP_SINGLE_PLAYER`,
`WORKSHOP_COOPERATIVE` and `CUSTOM`.

## Fetching leaderboards

```python
from portal2boards.client import Client, AggregatedMode, BoardsError

with Client("MyTool/0.1") as client:
    try:
        overall = client.get_aggregated(AggregatedMode.OVERALL)
        chamber = client.get_chamber(47458)
    except BoardsError as exc:
        print("request failed:", exc, exc.status_code)
    else:
        for profile_id, entry in chamber.entries.items():
            print(profile_id, entry.user.board_name, entry.score.score)
```

- The client sends requests to `https://board.iverb.me`. Its user agent is
  `Portal2Boards.py/1.0`. If you give a user agent, the client puts it in front
  of its own.
- `get_aggregated(mode)` fetches `/aggregated/<mode>/json` for
  `AggregatedMode.OVERALL`, `SINGLE_PLAYER` or `COOPERATIVE`.
  `AggregatedMode.CHAPTER` is not supported and raises `ValueError`.
- `get_chamber(best_time_id)` fetches `/chamber/<id>/json`.
- `BoardsError` is raised for three kinds of failure: a network error, a status
  other than 200, and a body that is not valid JSON. When the failure came with
  a status, it is kept in `status_code`.
- `close()`, or leaving the `with` block, closes the underlying session.
- Each request is logged at debug level on the `portal2boards.client` logger.

## Entities

You can also build the entities yourself from decoded JSON:

```python
from portal2boards.entities import Aggregated, Chamber

aggregated = Aggregated.from_json({"Points": {...}, "Times": {...}})
chamber = Chamber.from_json(47458, {...})
```

- `Aggregated.points` and `Aggregated.times` map a player id to an
  `AggregatedData`. Each `AggregatedData` holds `user_data` and `score_data`.
- `Chamber.entries` maps a player id to a `ChamberEntry`. Each `ChamberEntry`
  holds `score` and `user`.
- Dicts are ordered by player id.
- A missing or null field becomes `0` or `""`.
- In chamber score data, numbers come as strings. Each is read as the integer
  the string starts with, or `0` if it does not start with one.
- A value of the wrong JSON type raises `TypeError`.

## Pattern scanning

```python
from portal2boards.memory import Pattern, find_pattern, resolve_relative

pattern = Pattern.parse("E8 ? ? ? ? 84 C0")
position = find_pattern(data, pattern)
if position is not None:
    target = resolve_relative(data, position + 1)
```

- `Pattern.parse` reads two-digit hex bytes. `?` or `??` stands for any byte.
  A malformed token raises `ValueError`.
- `find_pattern(data, pattern, start=0, offset=0)` returns `start + index + offset`
  for the first match, or `None`. Here `start` is the address where `data` is
  loaded. The pattern can also be given as a string.
- `resolve_relative(data, position)` reads a signed 32-bit little-endian value
  at `position`. It returns the position just past that value, plus the value.
  If there are not four bytes at that position, it raises `ValueError`.

## What this package does not do

The package has no command-line tool. It also does not read the memory of a
running process or find loaded modules. The pattern helpers work only on byte
buffers that you supply.

## Running the tests

```
pip install -e .[test]
pytest
```