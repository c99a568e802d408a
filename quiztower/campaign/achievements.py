"""
quiztower/campaign/achievements.py

Achievement catalogue and rule registry. Each achievement is one
``AchievementRule`` whose predicate looks only at the committed ledger, the
attempt just recorded and a precomputed ``History``. Adding an achievement is
adding one entry to ``RULES``.

Awarding (the idempotent write) is done by campaign/service.py.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set

from quiztower.campaign.floors import FloorTopology, resolve_floor
from quiztower.campaign.ledger import LedgerState, apply_attempt, has_consecutive_run
from quiztower.campaign.scoring import PASSING_SCORE

logger = logging.getLogger(__name__)

MARATHON_WINDOW = timedelta(hours=2)
SPRINT_WINDOW = timedelta(minutes=15)
TIME_WINDOWS = (MARATHON_WINDOW, SPRINT_WINDOW)
NIGHT_OWL_HOURS = range(0, 4)          # UTC
HISTORY_LIMIT = 100                    # newest attempts scanned for streaks
ALL_DIFFICULTIES = frozenset({"easy", "medium", "hard"})

FAMILIES = ("milestone", "performance", "mastery", "special", "lifetime")


@dataclass(frozen=True)
class AttemptFacts:
    floor_number: int
    category: str
    difficulty: str
    is_mini_boss: bool
    score: int
    passed: bool
    is_perfect: bool
    floor_attempt_count: int
    created_at: datetime


@dataclass(frozen=True)
class History:
    pass_streak: int = 0
    passes_within: Mapping[timedelta, int] = field(default_factory=dict)
    perfect_by_category: Mapping[str, frozenset] = field(default_factory=dict)
    clutch_passes: int = 0
    lifetime_correct: int = 0

    @property
    def specialist_count(self) -> int:
        return sum(1 for diffs in self.perfect_by_category.values() if ALL_DIFFICULTIES <= diffs)

    @property
    def perfect_category_count(self) -> int:
        return len(self.perfect_by_category)


Predicate = Callable[[LedgerState, AttemptFacts, History], bool]


@dataclass(frozen=True)
class AchievementRule:
    id: str
    name: str
    description: str
    family: str
    tier: str
    predicate: Predicate
    hidden: bool = False

    def to_dict(self) -> Dict:
        return {
            "id":          self.id,
            "name":        self.name,
            "description": self.description,
            "category":    self.family,
            "tier":        self.tier,
            "is_hidden":   self.hidden,
        }


# ── Predicate factories ───────────────────────────────────────────────────────

def _highest_floor_at_least(threshold: int) -> Predicate:
    return lambda ledger, attempt, history: attempt.passed and ledger.highest_floor >= threshold


def _perfect_floor_count_at_least(count: int) -> Predicate:
    return lambda ledger, attempt, history: attempt.is_perfect and len(ledger.perfect_floors) >= count


def _pass_streak_at_least(count: int) -> Predicate:
    return lambda ledger, attempt, history: attempt.passed and history.pass_streak >= count


def _specialists_at_least(count: int) -> Predicate:
    return lambda ledger, attempt, history: attempt.is_perfect and history.specialist_count >= count


def _perfect_categories_at_least(count: int) -> Predicate:
    return lambda ledger, attempt, history: attempt.is_perfect and history.perfect_category_count >= count


def _passes_within(window: timedelta, count: int) -> Predicate:
    return lambda ledger, attempt, history: (
        attempt.passed and history.passes_within.get(window, 0) >= count
    )


def _lifetime_correct_at_least(count: int) -> Predicate:
    return lambda ledger, attempt, history: history.lifetime_correct >= count


def _rule(id, name, description, family, tier, predicate, hidden=False) -> AchievementRule:
    return AchievementRule(id, name, description, family, tier, predicate, hidden)


RULES: Sequence[AchievementRule] = (
    # ── Milestone ─────────────────────────────────────────────────────────────
    _rule("first_steps", "First Steps", "Clear floor 1.", "milestone", "bronze",
          lambda ledger, attempt, history: attempt.passed and attempt.floor_number == 1),
    _rule("apprentice", "Apprentice", "Reach floor 25.", "milestone", "bronze",
          _highest_floor_at_least(25)),
    _rule("scholar", "Scholar", "Reach floor 100.", "milestone", "silver",
          _highest_floor_at_least(100)),
    _rule("archivist", "Archivist", "Reach floor 300.", "milestone", "gold",
          _highest_floor_at_least(300)),
    _rule("signal_bearer", "Signal Bearer", "Reach floor 600.", "milestone", "gold",
          _highest_floor_at_least(600)),
    _rule("tower_master", "Tower Master", "Reach floor 900.", "milestone", "platinum",
          _highest_floor_at_least(900)),
    _rule("wizards_chosen", "Wizard's Chosen", "Reach floor 1008.", "milestone", "diamond",
          _highest_floor_at_least(1008)),

    # ── Performance ───────────────────────────────────────────────────────────
    _rule("perfect_signal", "Perfect Signal", "Score 5/5 on any floor.", "performance", "bronze",
          lambda ledger, attempt, history: attempt.is_perfect),
    _rule("clarity", "Clarity", "Score 5/5 on 10 different floors.", "performance", "silver",
          _perfect_floor_count_at_least(10)),
    _rule("precision", "Precision", "Score 5/5 on 50 different floors.", "performance", "gold",
          _perfect_floor_count_at_least(50)),
    _rule("calibrator", "Calibrator", "Score 5/5 on 5 consecutive floors.", "performance", "silver",
          lambda ledger, attempt, history: attempt.is_perfect and has_consecutive_run(ledger.perfect_floors, 5)),
    _rule("streak_keeper", "Streak Keeper", "Pass 25 floors in a row without a failure.",
          "performance", "silver", _pass_streak_at_least(25)),
    _rule("unshakeable", "Unshakeable", "Pass 50 floors in a row without a failure.",
          "performance", "gold", _pass_streak_at_least(50)),

    # ── Category mastery ──────────────────────────────────────────────────────
    _rule("specialist", "Specialist", "Score 5/5 in one category at easy, medium and hard.",
          "mastery", "silver", _specialists_at_least(1)),
    _rule("triple_crown", "Triple Crown", "Become a specialist in 3 categories.",
          "mastery", "gold", _specialists_at_least(3)),
    _rule("polymath", "Polymath", "Score 5/5 in 25 different categories.",
          "mastery", "silver", _perfect_categories_at_least(25)),
    _rule("renaissance", "Renaissance Mind", "Score 5/5 in 50 different categories.",
          "mastery", "gold", _perfect_categories_at_least(50)),
    _rule("universal", "Universal Maintainer", "Score 5/5 in 100 different categories.",
          "mastery", "platinum", _perfect_categories_at_least(100)),

    # ── Special condition ─────────────────────────────────────────────────────
    _rule("night_owl", "Night Owl", "Clear a floor between midnight and 4am.", "special", "bronze",
          lambda ledger, attempt, history: attempt.passed and attempt.created_at.hour in NIGHT_OWL_HOURS,
          hidden=True),
    _rule("marathon", "Marathon", "Clear 10 floors within two hours.", "special", "silver",
          _passes_within(MARATHON_WINDOW, 10)),
    _rule("sprint", "Sprint", "Clear 10 floors within fifteen minutes.", "special", "gold",
          _passes_within(SPRINT_WINDOW, 10)),
    _rule("persistence", "Persistence", "Clear a floor after 5 or more failed attempts.",
          "special", "bronze",
          lambda ledger, attempt, history: attempt.passed and attempt.floor_attempt_count >= 6),
    _rule("clutch", "Clutch", "Clear 10 floors with exactly the passing score.", "special", "silver",
          lambda ledger, attempt, history: (
              attempt.passed and attempt.score == PASSING_SCORE and history.clutch_passes >= 10
          ),
          hidden=True),

    # ── Lifetime (all game modes) ─────────────────────────────────────────────
    _rule("pattern_seeker", "Pattern Seeker", "Answer 1,000 questions correctly in any mode.",
          "lifetime", "gold", _lifetime_correct_at_least(1000)),
    _rule("fog_dispeller", "Fog Dispeller", "Answer 5,000 questions correctly in any mode.",
          "lifetime", "diamond", _lifetime_correct_at_least(5000)),
)

RULES_BY_ID: Dict[str, AchievementRule] = {r.id: r for r in RULES}


# ── Evaluation ────────────────────────────────────────────────────────────────

def evaluate(
    ledger: LedgerState,
    attempt: AttemptFacts,
    history: History,
    already_earned: Iterable[str] = (),
    rules: Sequence[AchievementRule] = RULES,
) -> List[str]:
    """
    Ids of the rules that hold and are not yet earned, in registry order.
    A rule that raises is logged and skipped; the others still run.
    """
    earned = set(already_earned)
    hits = []
    for rule in rules:
        if rule.id in earned:
            continue
        try:
            if rule.predicate(ledger, attempt, history):
                hits.append(rule.id)
        except Exception:
            logger.exception("Achievement rule %s failed to evaluate", rule.id)
    return hits


# ── History from an in-memory attempt list ────────────────────────────────────

def history_from_attempts(
    attempts: Sequence[AttemptFacts],
    now: datetime,
    lifetime_correct: int = 0,
) -> History:
    """
    ``attempts`` newest first, the current one included. Used by the replay
    below and by tests; live submissions build the same History from queries.
    """
    streak = 0
    for a in attempts[:HISTORY_LIMIT]:
        if not a.passed:
            break
        streak += 1

    perfect_by_category: Dict[str, Set[str]] = defaultdict(set)
    for a in attempts:
        if a.is_perfect and not a.is_mini_boss:
            perfect_by_category[a.category].add(a.difficulty)

    return History(
        pass_streak=streak,
        passes_within={
            window: sum(1 for a in attempts if a.passed and a.created_at >= now - window)
            for window in TIME_WINDOWS
        },
        perfect_by_category={k: frozenset(v) for k, v in perfect_by_category.items()},
        clutch_passes=sum(1 for a in attempts if a.passed and a.score == PASSING_SCORE),
        lifetime_correct=lifetime_correct,
    )


@dataclass
class ReplayedAttempt:
    floor_number: int
    score: int
    total_questions: int
    created_at: datetime


def replay(
    attempts: Sequence[ReplayedAttempt],
    lifetime_correct: int = 0,
    passing_score: int = PASSING_SCORE,
) -> Dict[str, int]:
    """
    Walk a user's attempts oldest first through the ledger transition and the
    registry. Returns {achievement_id: floor it first held on}.
    """
    ledger: Optional[LedgerState] = None
    seen: List[AttemptFacts] = []
    found: Dict[str, int] = {}

    for raw in attempts:
        floor: FloorTopology = resolve_floor(raw.floor_number)
        passed = raw.score >= passing_score
        is_perfect = raw.total_questions > 0 and raw.score == raw.total_questions
        ledger = apply_attempt(ledger, floor, raw.score, raw.total_questions, passed, is_perfect).after

        facts = AttemptFacts(
            floor_number=floor.floor_number,
            category=floor.category,
            difficulty=floor.difficulty,
            is_mini_boss=floor.is_mini_boss,
            score=raw.score,
            passed=passed,
            is_perfect=is_perfect,
            floor_attempt_count=ledger.attempts_on(floor.floor_number),
            created_at=raw.created_at,
        )
        seen.insert(0, facts)
        history = history_from_attempts(seen, raw.created_at, lifetime_correct)
        for rule_id in evaluate(ledger, facts, history, already_earned=found):
            found[rule_id] = floor.floor_number

    return found
