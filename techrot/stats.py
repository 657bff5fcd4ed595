"""Character attribute blocks: the primary and secondary stats."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

StatKey = Union[int, str]


def _attr_for(keys: Tuple[Tuple[str, str, str], ...], key: StatKey, owner: str) -> str:
    if isinstance(key, str):
        for lookup, _, attr in keys:
            if lookup == key:
                return attr
        raise KeyError(f"Invalid {owner} index: {key!r}")
    if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(keys):
        return keys[key][2]
    raise IndexError(f"Invalid {owner} index: {key!r}")


def _render(keys: Tuple[Tuple[str, str, str], ...], values, name_width: int) -> str:
    border = f"+{'-' * (name_width + 2)}+--------+"
    rows = [
        f"| {label:<{name_width}} | {value:>6} |"
        for (_, label, _), value in zip(keys, values)
    ]
    return "\n".join([border, *rows, border])


def _emit(text: str) -> str:
    out = text + "\n"
    sys.stdout.write(out)
    return out


@dataclass
class PrimaryStats:
    """The seven primary attributes, addressable by position or by name."""

    # (lookup key, display name, attribute)
    _KEYS: ClassVar[Tuple[Tuple[str, str, str], ...]] = (
        ("strength", "Strength", "strength"),
        ("perception", "Perception", "perception"),
        ("endurance", "Endurance", "endurance"),
        ("charisma", "Charisma", "charisma"),
        ("intelligence", "Intelligence", "intelligence"),
        ("agility", "Agility", "agility"),
        ("luck", "Luck", "luck"),
    )
    NAMES: ClassVar[Tuple[str, ...]] = tuple(label for _, label, _ in _KEYS)

    strength: int = 3
    perception: int = 3
    endurance: int = 3
    charisma: int = 3
    intelligence: int = 3
    agility: int = 3
    luck: int = 3

    def __getitem__(self, key: StatKey) -> int:
        return getattr(self, _attr_for(self._KEYS, key, "PrimaryStats"))

    def __setitem__(self, key: StatKey, value: int) -> None:
        setattr(self, _attr_for(self._KEYS, key, "PrimaryStats"), value)

    def render(self) -> str:
        """Return the stats as a bordered table."""
        values = (getattr(self, attr) for _, _, attr in self._KEYS)
        return _render(self._KEYS, values, 14)

    def print_stats(self) -> str:
        """Print the stats table and return what was written."""
        return _emit(self.render())


@dataclass
class SecondaryStats:
    """The twelve skills, addressable by position or by name."""

    _KEYS: ClassVar[Tuple[Tuple[str, str, str], ...]] = (
        ("closeCombat", "CloseCombat", "close_combat"),
        ("cyberneticOverdrive", "CyberneticOverdrive", "cybernetic_overdrive"),
        ("gunslinger", "Gunslinger", "gunslinger"),
        ("recon", "Recon", "recon"),
        ("fitness", "Fitness", "fitness"),
        ("synapticTolerance", "SynapticTolerance", "synaptic_tolerance"),
        ("negotiation", "Negotiation", "negotiation"),
        ("deception", "Deception", "deception"),
        ("hacking", "Hacking", "hacking"),
        ("engineering", "Engineering", "engineering"),
        ("stealth", "Stealth", "stealth"),
        ("kineticDrift", "KineticDrift", "kinetic_drift"),
    )
    NAMES: ClassVar[Tuple[str, ...]] = tuple(label for _, label, _ in _KEYS)

    close_combat: int = 10
    cybernetic_overdrive: int = 10
    gunslinger: int = 10
    recon: int = 10
    fitness: int = 10
    synaptic_tolerance: int = 10
    negotiation: int = 10
    deception: int = 10
    hacking: int = 10
    engineering: int = 10
    stealth: int = 10
    kinetic_drift: int = 10

    def __getitem__(self, key: StatKey) -> int:
        return getattr(self, _attr_for(self._KEYS, key, "SecondaryStats"))

    def __setitem__(self, key: StatKey, value: int) -> None:
        setattr(self, _attr_for(self._KEYS, key, "SecondaryStats"), value)

    def render(self) -> str:
        """Return the stats as a bordered table."""
        values = (getattr(self, attr) for _, _, attr in self._KEYS)
        return _render(self._KEYS, values, 22)

    def print_stats(self) -> str:
        """Print the stats table and return what was written."""
        return _emit(self.render())