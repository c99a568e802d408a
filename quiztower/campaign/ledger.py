"""
quiztower/campaign/ledger.py

Per-user campaign ledger and the transition applied for one floor attempt.
The transition is pure; persisting it (with the optimistic version check)
lives in campaign/service.py.

``highest_floor`` is the highest unlocked floor: it starts at 1 and passing
floor n with n >= highest_floor moves it to n + 1. Replaying an older floor
never moves it.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence

from quiztower.campaign.floors import FloorTopology


@dataclass(frozen=True)
class CategoryStat:
    attempts: int = 0
    correct: int = 0
    perfect: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"attempts": self.attempts, "correct": self.correct, "perfect": self.perfect}


@dataclass(frozen=True)
class LedgerState:
    current_floor: int = 1
    highest_floor: int = 1
    floor_attempts: Mapping[int, int] = field(default_factory=dict)
    total_questions: int = 0
    total_correct: int = 0
    perfect_floors: FrozenSet[int] = frozenset()
    category_stats: Mapping[str, CategoryStat] = field(default_factory=dict)

    def attempts_on(self, floor_number: int) -> int:
        return self.floor_attempts.get(floor_number, 0)

    @property
    def accuracy(self) -> float:
        if not self.total_questions:
            return 0.0
        return round(self.total_correct / self.total_questions * 100, 1)

    # JSON columns store floor numbers as string keys and the perfect set as a
    # sorted list.
    def to_columns(self) -> Dict:
        return {
            "current_floor":   self.current_floor,
            "highest_floor":   self.highest_floor,
            "floor_attempts":  {str(k): v for k, v in sorted(self.floor_attempts.items())},
            "total_questions": self.total_questions,
            "total_correct":   self.total_correct,
            "perfect_floors":  sorted(self.perfect_floors),
            "category_stats":  {k: v.to_dict() for k, v in self.category_stats.items()},
        }

    @classmethod
    def from_columns(cls, row) -> "LedgerState":
        return cls(
            current_floor=row.current_floor,
            highest_floor=row.highest_floor,
            floor_attempts={int(k): int(v) for k, v in (row.floor_attempts or {}).items()},
            total_questions=row.total_questions,
            total_correct=row.total_correct,
            perfect_floors=frozenset(int(f) for f in (row.perfect_floors or [])),
            category_stats={
                name: CategoryStat(
                    attempts=int(s.get("attempts", 0)),
                    correct=int(s.get("correct", 0)),
                    perfect=int(s.get("perfect", 0)),
                )
                for name, s in (row.category_stats or {}).items()
            },
        )


@dataclass(frozen=True)
class LedgerUpdate:
    before: LedgerState
    after: LedgerState

    @property
    def next_floor_unlocked(self) -> bool:
        return self.after.highest_floor > self.before.highest_floor


def split_evenly(total: int, buckets: int) -> List[int]:
    """
    ``total`` spread over ``buckets``: integer share each, remainder handed out
    one at a time from the first bucket, so the parts always sum to ``total``.
    """
    share, remainder = divmod(total, buckets)
    return [share + (1 if i < remainder else 0) for i in range(buckets)]


def _bump(stats: Dict[str, CategoryStat], category: str, attempts: int, correct: int, perfect: int = 0):
    old = stats.get(category, CategoryStat())
    stats[category] = CategoryStat(
        attempts=old.attempts + attempts,
        correct=old.correct + correct,
        perfect=old.perfect + perfect,
    )


def apply_attempt(
    ledger: Optional[LedgerState],
    floor: FloorTopology,
    correct_count: int,
    total_questions: int,
    passed: bool,
    is_perfect: bool,
) -> LedgerUpdate:
    """Next ledger state after one attempt on ``floor``. ``ledger=None`` is a first-time user."""
    before = ledger or LedgerState()
    number = floor.floor_number

    highest = before.highest_floor
    if passed and number >= before.highest_floor:
        highest = number + 1

    floor_attempts = dict(before.floor_attempts)
    floor_attempts[number] = floor_attempts.get(number, 0) + 1

    perfect_floors = before.perfect_floors | {number} if is_perfect else before.perfect_floors

    stats = dict(before.category_stats)
    if floor.is_mini_boss and floor.boss_categories:
        # Per-category perfects are not credited from a boss floor.
        shares = zip(
            floor.boss_categories,
            split_evenly(total_questions, len(floor.boss_categories)),
            split_evenly(correct_count, len(floor.boss_categories)),
        )
        for category, questions, correct in shares:
            _bump(stats, category, questions, correct)
    else:
        _bump(stats, floor.category, total_questions, correct_count, 1 if is_perfect else 0)

    after = replace(
        before,
        current_floor=number + 1 if passed else number,
        highest_floor=max(highest, before.highest_floor),
        floor_attempts=floor_attempts,
        total_questions=before.total_questions + total_questions,
        total_correct=before.total_correct + correct_count,
        perfect_floors=frozenset(perfect_floors),
        category_stats=stats,
    )
    return LedgerUpdate(before=before, after=after)


def has_consecutive_run(floors: Sequence[int], length: int) -> bool:
    """True when ``length`` floor numbers in a row (no gaps) are present."""
    ordered = sorted(set(floors))
    for i in range(len(ordered) - length + 1):
        if ordered[i + length - 1] - ordered[i] == length - 1:
            return True
    return False
