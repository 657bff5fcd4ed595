"""The player character: vitals, stats and experience."""

from __future__ import annotations

import sys
from dataclasses import astuple, dataclass, field
from typing import ClassVar, Optional, Tuple

from techrot.stats import PrimaryStats, SecondaryStats

_BORDER = "+-----------------------+-----------------------------+"
_HEADER = "|    PRIMARY STATS      |   SECONDARY STATS           |"
_LEFT_DIVIDER = "+-----------------------+"


def _emit(text: str) -> str:
    sys.stdout.write(text)
    return text


@dataclass
class Player:
    """The player character."""

    # Experience needed to move past each level; index 1 is the total for level 2.
    NEXT_LEVEL: ClassVar[Tuple[int, ...]] = (
        0, 500, 1000, 1500, 2000, 3500, 4000, 4500, 5000, 5500,
        6000, 7000, 8000, 9000, 10000, 12000, 14000, 16000, 18000, 20000,
    )

    health: float = 200.0
    stamina: float = 50.0
    carrying_capacity: float = 50.0
    experience: int = 0
    level: int = 1
    primary_stats: PrimaryStats = field(default_factory=PrimaryStats)
    secondary_stats: SecondaryStats = field(default_factory=SecondaryStats)

    def print_primary_stats(self) -> str:
        """Print the primary stats table and a blank line; return what was written."""
        return _emit(self.primary_stats.render() + "\n\n")

    def print_secondary_stats(self) -> str:
        """Print the secondary stats table and a blank line; return what was written."""
        return _emit(self.secondary_stats.render() + "\n\n")

    def full_stats_table(self) -> str:
        """Return primary stats, vitals and secondary stats side by side."""
        left: list[Optional[Tuple[str, int]]] = list(
            zip(PrimaryStats.NAMES, astuple(self.primary_stats))
        )
        left.append(None)
        left.extend(
            [
                ("Health", int(self.health)),
                ("Stamina", int(self.stamina)),
                ("Level", self.level),
                ("Experience", self.experience),
            ]
        )
        right = zip(SecondaryStats.NAMES, astuple(self.secondary_stats))

        lines = [_BORDER, _HEADER, _BORDER]
        for left_cell, (skill, skill_value) in zip(left, right):
            if left_cell is None:
                prefix = _LEFT_DIVIDER
            else:
                label, value = left_cell
                prefix = f"| {label + ':':<17}{value:>3}  |"
            lines.append(f"{prefix} {skill + ':':<23}{skill_value:>3}  |")
        lines.append(_BORDER)
        return "\n".join(lines)

    def print_full_stats(self) -> str:
        """Print the combined stats table and return what was written."""
        return _emit(self.full_stats_table() + "\n")

    def add_experience(self, xp: int) -> None:
        """Add experience, gaining a level when the next threshold is reached."""
        self.experience += xp
        if self.level < len(self.NEXT_LEVEL) and self.experience >= self.NEXT_LEVEL[self.level]:
            self.level_up()

    def level_up(self) -> None:
        """Advance one level."""
        self.level += 1