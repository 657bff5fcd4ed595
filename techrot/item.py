"""Base type for everything a character can carry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A carried object with an identifier, a weight, a value and a name."""

    id: int
    weight: float
    value: int
    name: str