"""Weapon configurations and the weapon items built from them."""

from __future__ import annotations

from dataclasses import dataclass

from techrot.item import Item


@dataclass(frozen=True)
class GunData:
    """Configuration for a type of gun. ``fire_rate`` is seconds per shot."""

    id: int
    weight: float
    value: int
    name: str
    accuracy: float
    damage: float
    fire_rate: float
    capacity: int
    reload_time: float


@dataclass(frozen=True)
class MeleeData:
    """Configuration for a type of melee weapon. ``fire_rate`` is seconds per swing."""

    id: int
    weight: float
    value: int
    name: str
    accuracy: float
    damage: float
    fire_rate: float


@dataclass(frozen=True)
class ThrowData:
    """Configuration for a type of throwable weapon."""

    id: int
    weight: float
    value: int
    name: str
    accuracy: float
    damage: float
    fire_rate: float
    capacity: int
    reload_time: float


class Gun(Item):
    """A gun with a magazine and a reserve of spare ammunition."""

    def __init__(self, data: GunData) -> None:
        super().__init__(data.id, data.weight, data.value, data.name)
        self.accuracy = data.accuracy
        self.damage = data.damage
        self.fire_rate = data.fire_rate
        self.capacity = data.capacity
        self.reload_time = data.reload_time
        self.current_mag = 0
        self.ammo = 0

    @property
    def dps(self) -> float:
        """Damage per second."""
        return self.damage / self.fire_rate

    def reload(self) -> None:
        """Refill the magazine from the spare ammunition.

        With at least a full magazine in reserve, only the rounds fired are
        taken from it. Otherwise the magazine is loaded with whatever is left
        in reserve and the reserve is emptied.
        """
        if self.ammo >= self.capacity:
            used = self.capacity - self.current_mag
            self.current_mag = self.capacity
            self.ammo -= used
        else:
            self.current_mag = self.ammo
            self.ammo = 0


class Melee(Item):
    """A close-combat weapon."""

    def __init__(self, data: MeleeData) -> None:
        super().__init__(data.id, data.weight, data.value, data.name)
        self.accuracy = data.accuracy
        self.damage = data.damage
        self.fire_rate = data.fire_rate

    @property
    def dps(self) -> float:
        """Damage per second."""
        return self.damage / self.fire_rate