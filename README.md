# crucibletools

Data models, enumerations and statistics helpers for working with Destiny 2
Crucible (PvP) activity data. The package has no dependencies beyond the
standard library.

## Installation

```
pip install crucibletools
```

To run the tests:

```
pip install "crucibletools[test]"
pytest
```

## What is included

### Enumerations (`crucibletools.enums`)

- `mode.Mode`: activity mode types with their numeric ids, display names and
  command-line names. `Mode.from_id(84)` raises `UnknownEnumValueError` for an
  unknown id; `Mode.from_str("control")` raises `ValueError` for an unknown
  name. `is_crucible()`, `is_private()`, `is_gambit()`, `is_rumble()` and
  `is_nightfall()` classify a mode.
- `platform.Platform`: account platforms; `from_id` maps unknown ids to
  `Platform.UNKNOWN`, `from_str` parses names case-insensitively.
- `standing.Standing`: victory, defeat or unknown, with `from_value` and
  `from_mode` (in Rumble a placing in the top three counts as a victory).
- `completionreason.CompletionReason`: how an activity ended.
- `character`: `CharacterClass` (including `from_hash` for manifest class
  hashes), `CharacterGender`, `CharacterRace` and `CharacterClassSelection`.
  Class, gender and race honour format widths, e.g. `f"{cls:10}"`.
- `itemtype`: `ItemType` and `ItemSubType` (with readable names such as
  "Hand Cannon").
- `medaltier.MedalTier`: medal tiers, with `order()` giving a sort weight.
- `weaponsort.WeaponSort`: the sort orders for weapon listings.
- `moment`: `Moment`, named points in time (daily, weekend and weekly resets,
  relative days, weeks and months, and season start dates), and
  `DateTimePeriod`, a time range that raises `DateTimePeriodOrderError` when
  its start is after its end. `Moment.CUSTOM` has no date of its own and
  raises `ValueError` from `get_date_time()`.

### Models and statistics

- `crucibletools.characters`: `CharacterData`, `PlayerInfo` and
  `Characters`, a character list sorted by last play date with
  `get_by_class()` and `get_last_active()`.
- `crucibletools.emblem.Emblem`: an emblem and its image paths.
- `crucibletools.cruciblestats`: `calculate_efficiency`,
  `calculate_kills_deaths_ratio`, `calculate_kills_deaths_assists`, and a
  `CrucibleStats` dataclass whose instances can be summed with `+`.
- `crucibletools.crucible`: per-activity models (`Player`, `CrucibleStats`
  with `generate_status()`, `Team`, `CrucibleActivity`, `ActivityDetail`,
  weapon and medal stats) and
  `AggregateCruciblePerformances.with_performances`, which totals results,
  finds highs, win and loss streaks, and merges weapon and medal stats.

## Examples

```python
from crucibletools.enums.mode import Mode
from crucibletools.enums.moment import Moment
from crucibletools.enums.platform import Platform

mode = Mode.from_str("trials_of_osiris")
print(mode, mode.to_id(), mode.is_crucible())   # Trials Of Osiris 84 True
print(Platform.from_id(3))                       # Steam
print(Moment.from_str("season_of_the_hunt").get_date_time())
# 2020-11-10 18:00:00+00:00
```

```python
from crucibletools.crucible import (
    AggregateCruciblePerformances,
    CruciblePlayerPerformance,
    CrucibleStats,
    Player,
)
from crucibletools.enums.character import CharacterClass
from crucibletools.enums.platform import Platform
from crucibletools.enums.standing import Standing

player = Player("1", "2", Platform.STEAM, "Guardian", 1350, CharacterClass.HUNTER)
games = [
    CruciblePlayerPerformance(player, CrucibleStats(kills=10, deaths=5, standing=Standing.VICTORY)),
    CruciblePlayerPerformance(player, CrucibleStats(kills=4, deaths=8, standing=Standing.DEFEAT)),
]
summary = AggregateCruciblePerformances.with_performances(games)
print(summary.wins, summary.losses, summary.win_rate)   # 1 1 50.0
```

## What it does not do

This package only models and aggregates data you already have. It does not
fetch anything from the game's web API, keep a local store of activity
history, or provide a command-line tool; building the model objects from API
responses or a database is left to the caller.