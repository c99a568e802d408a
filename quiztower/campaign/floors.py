"""
quiztower/campaign/floors.py

Floor number → topology. Floors come in blocks of eleven: ten regular floors,
then a mini-boss. Regular floors walk the category catalogue in order, once per
tier, across three tiers (easy, medium, hard). Past the third tier the
catalogue keeps cycling at hard.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

from quiztower.categories import CATEGORIES
from quiztower.errors import InvalidFloorError

BOSS_INTERVAL = 10                 # regular floors per block
BLOCK_SIZE = BOSS_INTERVAL + 1
BOSS_CATEGORY = "Guardian's Challenge"

TIERS = {
    1: {"name": "The Lower Archives", "difficulty": "easy"},
    2: {"name": "The Middle Stacks",  "difficulty": "medium"},
    3: {"name": "The Upper Sanctum",  "difficulty": "hard"},
}
BOSS_DIFFICULTY = {"easy": "medium", "medium": "hard", "hard": "hard"}


@dataclass(frozen=True)
class FloorTopology:
    floor_number: int
    is_mini_boss: bool
    category: str
    difficulty: str
    tier: int
    boss_categories: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def categories(self) -> Tuple[str, ...]:
        """Categories the floor's questions are drawn from."""
        return self.boss_categories if self.is_mini_boss else (self.category,)

    def to_dict(self) -> Dict:
        return {
            "floor_number":    self.floor_number,
            "is_mini_boss":    self.is_mini_boss,
            "category":        self.category,
            "difficulty":      self.difficulty,
            "tier":            self.tier,
            "tier_name":       TIERS[self.tier]["name"],
            "boss_categories": list(self.boss_categories) if self.is_mini_boss else None,
        }


def _check_floor(floor_number) -> int:
    if isinstance(floor_number, bool) or not isinstance(floor_number, int) or floor_number < 1:
        raise InvalidFloorError(f"Invalid floor number: {floor_number!r}")
    return floor_number


def is_mini_boss(floor_number: int) -> bool:
    return floor_number > 0 and floor_number % BLOCK_SIZE == 0


def regular_count(floor_number: int) -> int:
    """Regular floors at or below ``floor_number``."""
    return floor_number - floor_number // BLOCK_SIZE


def floor_for_regular(index: int) -> int:
    """Floor number of the ``index``-th regular floor (1-based)."""
    if index < 1:
        raise InvalidFloorError(f"Invalid regular floor index: {index!r}")
    return index + (index - 1) // BOSS_INTERVAL


def tier_for_regular(index: int, categories: Sequence[str] = CATEGORIES) -> int:
    return min(3, (index - 1) // len(categories) + 1)


def category_for_regular(index: int, categories: Sequence[str] = CATEGORIES) -> str:
    return categories[(index - 1) % len(categories)]


def total_floors(categories: Sequence[str] = CATEGORIES) -> int:
    """Floor number of the last regular floor of the hard tier."""
    return floor_for_regular(3 * len(categories))


def resolve_floor(floor_number: int, categories: Sequence[str] = CATEGORIES) -> FloorTopology:
    """Topology of one floor. Pure and total for every floor_number >= 1."""
    _check_floor(floor_number)
    count = regular_count(floor_number)

    if not is_mini_boss(floor_number):
        tier = tier_for_regular(count, categories)
        return FloorTopology(
            floor_number=floor_number,
            is_mini_boss=False,
            category=category_for_regular(count, categories),
            difficulty=TIERS[tier]["difficulty"],
            tier=tier,
        )

    # The boss closes its block: the ten regular floors below it are exactly
    # regular indices count-9 .. count.
    boss_categories = tuple(
        category_for_regular(index, categories)
        for index in range(count - BOSS_INTERVAL + 1, count + 1)
    )
    tier = tier_for_regular(count, categories)
    return FloorTopology(
        floor_number=floor_number,
        is_mini_boss=True,
        category=BOSS_CATEGORY,
        difficulty=BOSS_DIFFICULTY[TIERS[tier]["difficulty"]],
        tier=tier,
        boss_categories=boss_categories,
    )
