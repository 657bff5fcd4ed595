"""The catalogue of weapon configurations, keyed by item identifier."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from techrot.weapons import GunData, MeleeData, ThrowData

WeaponData = Union[GunData, MeleeData, ThrowData]

# [111xx] Pistols
ENVOY_7 = GunData(11101, 3.0, 100, "Envoy-7", 0.80, 10.0, 0.5, 8, 2.0)
XTEC = GunData(11102, 3.0, 130, "XTec", 0.90, 8.5, 0.333, 7, 2.0)

# [112xx] Submachine guns
SG_01 = GunData(11201, 7.5, 200, "SG-01", 0.75, 7.0, 0.1, 25, 2.0)
ARCLINK = GunData(11202, 9.0, 280, "ArcLink", 0.75, 5.5, 0.08, 20, 2.3)

# [113xx] Rifles
MX57 = GunData(11301, 12.0, 350, "MX57", 0.8, 15.0, 0.125, 30, 2.5)
RELOCK = GunData(11302, 13.5, 400, "Relock", 0.9, 20.0, 0.333, 15, 2.5)

# [114xx] Shotguns
HARVARD = GunData(11401, 14.0, 400, "Harvard", 0.75, 30.0, 0.75, 6, 6.0)

# [12xxx] Melee
MACHETE = MeleeData(12001, 7.0, 80, "Machete", 0.95, 40.0, 1.0)
COMBAT_KNIFE = MeleeData(12002, 1.0, 80, "Combat Knife", 0.95, 20.0, 0.5)

# [131xx] Explosives
FRAG_GRENADE = ThrowData(13101, 1.0, 100, "Fragmentation Grenade", 0.75, 100.0, 2.0, 1, 3.0)

# [132xx] Knives
THROWING_KNIFE = ThrowData(13201, 0.25, 60, "Throwing Knife", 0.75, 33.333, 0.5, 3, 2.0)

GUNS: Mapping[int, GunData] = MappingProxyType(
    {g.id: g for g in (ENVOY_7, XTEC, SG_01, ARCLINK, MX57, RELOCK, HARVARD)}
)
MELEE: Mapping[int, MeleeData] = MappingProxyType(
    {m.id: m for m in (MACHETE, COMBAT_KNIFE)}
)
THROWABLES: Mapping[int, ThrowData] = MappingProxyType(
    {t.id: t for t in (FRAG_GRENADE, THROWING_KNIFE)}
)


def find_weapon_data(item_id: int) -> WeaponData:
    """Return the configuration with the given identifier.

    Raises KeyError when no weapon has that identifier.
    """
    for table in (GUNS, MELEE, THROWABLES):
        if item_id in table:
            return table[item_id]
    raise KeyError(f"no weapon with id {item_id}")