"""Non-player characters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from techrot.weapons import Gun


@dataclass
class NPC:
    """A non-player character with hit points and an optional equipped gun."""

    hp: float = 100.0
    gun: Optional[Gun] = None