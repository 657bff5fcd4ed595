# techrot

The data model for a post-apocalyptic, text-based role-playing game. It covers
items, weapons, a weapon catalogue, character stats, a player character with
experience and levels, and a printable character sheet.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
techrot
```

This prints the character sheet of a new player. The sheet shows the primary
stats, health, stamina, level and experience on the left and the twelve
secondary stats on the right. The command takes no options other than `-h`.

## Modules

### `techrot.item`

`Item` is a dataclass with `id`, `weight`, `value` and `name`. It is the base
for everything a character can carry.

### `techrot.weapons`

- `GunData`, `MeleeData` and `ThrowData` are frozen dataclasses that describe a
  type of weapon: id, weight, value, name, accuracy, damage and `fire_rate`
  (seconds per shot or swing). Guns and throwables also have `capacity` and
  `reload_time`.
- `Gun(data)` is an `Item` built from a `GunData`. It has `current_mag` and a
  reserve of spare `ammo`, and both start at 0. `dps` is damage divided by
  `fire_rate`. `reload()` refills the magazine. When the reserve holds at least
  a full magazine, only the rounds that were fired come out of it. Otherwise
  whatever is left in the reserve goes into the magazine and the reserve is
  emptied.
- `Melee(data)` is an `Item` built from a `MeleeData`, with the same `dps`.

### `techrot.catalog`

The catalogue holds each weapon configuration as a module constant, for example
`ENVOY_7`, `MX57`, `MACHETE` and `FRAG_GRENADE`. The read-only mappings `GUNS`,
`MELEE` and `THROWABLES` are keyed by item id.
`find_weapon_data(item_id)` returns the configuration with that id and raises
`KeyError` when no weapon has it.

| Id range | Kind |
|----------|------|
| 111xx | pistols |
| 112xx | submachine guns |
| 113xx | rifles |
| 114xx | shotguns |
| 12xxx | melee |
| 131xx | explosives |
| 132xx | throwing knives |

### `techrot.stats`

- `PrimaryStats` holds seven attributes, each 3 by default: strength,
  perception, endurance, charisma, intelligence, agility and luck.
- `SecondaryStats` holds twelve skills, each 10 by default: close combat,
  cybernetic overdrive, gunslinger, recon, fitness, synaptic tolerance,
  negotiation, deception, hacking, engineering, stealth and kinetic drift.

Both can be indexed by position (`stats[0]`) or by name. Primary names are
lower case, as in `stats["strength"]`. Secondary names are camel case, as in
`stats["closeCombat"]`. An unknown name raises `KeyError` and a position out of
range raises `IndexError`. Assignment through an index works the same way.
`render()` returns the stats as a bordered table. `print_stats()` prints that
table and returns the text it wrote. `NAMES` holds the display names in order.

### `techrot.player`

`Player` is a dataclass with `health` (200), `stamina` (50),
`carrying_capacity` (50), `experience`, `level` (1), `primary_stats` and
`secondary_stats`.

- `add_experience(xp)` adds experience and gains one level when the total
  reaches the threshold in `NEXT_LEVEL` for the current level. For example,
  500 experience reaches level 2. No levels are gained past level 20.
- `level_up()` adds one level.
- `full_stats_table()` returns the combined character sheet.
  `print_full_stats()` prints it.
- `print_primary_stats()` and `print_secondary_stats()` print one stats table
  followed by a blank line.

All of the print methods also return the text they wrote.

### `techrot.npc`

`NPC` is a dataclass with `hp` (100.0) and an optional equipped `gun`.

## Example

```python
from techrot.catalog import find_weapon_data
from techrot.weapons import Gun
from techrot.player import Player

pistol = Gun(find_weapon_data(11101))
pistol.ammo = 20
pistol.reload()
print(pistol.name, pistol.dps, pistol.current_mag, pistol.ammo)  # Envoy-7 20.0 8 12

hero = Player()
hero.add_experience(500)
print(hero.level)          # 2
print(hero.full_stats_table())
```

## What it does not do

This package is a model, not a playable game. It has no game loop, menus or
story. It has no inventory, and ammunition is kept on each gun. It has no
combat between the player and NPCs, and no class for throwable weapons beyond
their `ThrowData` records. Leveling up raises only the level number, not the
stats. Nothing is saved to disk.