"""
quiztower/campaign/service.py

Store-facing side of the campaign: floor submission (score → ledger → attempt
record → achievements), progress and achievement views, and the retroactive
achievement sync.

The ledger row carries a version counter (see TowerProgress); a submission
that loses a race re-reads the row and recomputes, up to LEDGER_MAX_RETRIES
times. Achievements are evaluated only after the ledger commit, against the
committed state.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from quiztower import db
from quiztower.campaign.achievements import (
    FAMILIES, HISTORY_LIMIT, RULES, TIME_WINDOWS, AttemptFacts, History, ReplayedAttempt,
    evaluate, replay,
)
from quiztower.campaign.floors import TIERS, FloorTopology, resolve_floor, total_floors
from quiztower.campaign.ledger import LedgerState, apply_attempt
from quiztower.campaign.scoring import PASSING_SCORE, QUESTIONS_PER_FLOOR, score_attempt
from quiztower.categories import CATEGORY_COUNT
from quiztower.errors import FloorLockedError, ProgressConflictError
from quiztower.models import (
    FloorAttempt, QuizSession, TowerProgress, UserAchievement, as_utc,
)
from quiztower.quiz import utils as quiz_utils


def _now(now: Optional[datetime] = None) -> datetime:
    return as_utc(now) if now else datetime.now(timezone.utc)


# ── Reads ─────────────────────────────────────────────────────────────────────

def get_progress(user_id: str) -> Optional[TowerProgress]:
    return TowerProgress.query.filter_by(user_id=user_id).first()


def get_ledger(user_id: str) -> Optional[LedgerState]:
    row = get_progress(user_id)
    return LedgerState.from_columns(row) if row else None


def find_attempt(user_id: str, quiz_id: str) -> Optional[FloorAttempt]:
    return FloorAttempt.query.filter_by(user_id=user_id, quiz_id=quiz_id).first()


def earned_achievement_ids(user_id: str) -> set:
    rows = UserAchievement.query.filter_by(user_id=user_id).all()
    return {r.achievement_id for r in rows}


def lifetime_correct(user_id: str) -> int:
    total = (
        db.session.query(func.coalesce(func.sum(QuizSession.correct_answers), 0))
        .filter(QuizSession.user_id == user_id)
        .scalar()
    )
    return int(total or 0)


def best_score(user_id: str, floor_number: int) -> int:
    best = (
        db.session.query(func.max(FloorAttempt.score))
        .filter(FloorAttempt.user_id == user_id, FloorAttempt.floor_number == floor_number)
        .scalar()
    )
    return int(best or 0)


def recent_attempts(user_id: str, limit: int = HISTORY_LIMIT) -> List[FloorAttempt]:
    """Newest first."""
    return (
        FloorAttempt.query
        .filter_by(user_id=user_id)
        .order_by(FloorAttempt.created_at.desc(), FloorAttempt.id.desc())
        .limit(limit)
        .all()
    )


def count_passed_since(user_id: str, since: datetime) -> int:
    return FloorAttempt.query.filter(
        FloorAttempt.user_id == user_id,
        FloorAttempt.passed.is_(True),
        FloorAttempt.created_at >= since,
    ).count()


def count_clutch_passes(user_id: str) -> int:
    return FloorAttempt.query.filter(
        FloorAttempt.user_id == user_id,
        FloorAttempt.passed.is_(True),
        FloorAttempt.score == PASSING_SCORE,
    ).count()


def perfect_attempts(user_id: str) -> Dict[str, frozenset]:
    """{category: difficulties scored 5/5 at}. Mini-boss floors don't count."""
    rows = (
        db.session.query(FloorAttempt.category, FloorAttempt.difficulty)
        .filter(
            FloorAttempt.user_id == user_id,
            FloorAttempt.is_perfect.is_(True),
            FloorAttempt.is_mini_boss.is_(False),
        )
        .distinct()
        .all()
    )
    by_category: Dict[str, set] = {}
    for category, difficulty in rows:
        by_category.setdefault(category, set()).add(difficulty)
    return {k: frozenset(v) for k, v in by_category.items()}


def build_history(user_id: str, now: datetime) -> History:
    streak = 0
    for attempt in recent_attempts(user_id):
        if not attempt.passed:
            break
        streak += 1

    return History(
        pass_streak=streak,
        passes_within={w: count_passed_since(user_id, now - w) for w in TIME_WINDOWS},
        perfect_by_category=perfect_attempts(user_id),
        clutch_passes=count_clutch_passes(user_id),
        lifetime_correct=lifetime_correct(user_id),
    )


# ── Writes ────────────────────────────────────────────────────────────────────

def award(user_id: str, achievement_id: str, floor_earned: Optional[int] = None,
          now: Optional[datetime] = None) -> bool:
    """
    Idempotent insert keyed by (user_id, achievement_id). True only when this
    call created the row; an existing row is left untouched.
    """
    if UserAchievement.query.filter_by(user_id=user_id, achievement_id=achievement_id).first():
        return False
    try:
        with db.session.begin_nested():
            db.session.add(UserAchievement(
                user_id=user_id,
                achievement_id=achievement_id,
                floor_earned=floor_earned,
                earned_at=_now(now),
            ))
        db.session.commit()
    except IntegrityError:
        # Another request got there first.
        db.session.rollback()
        return False
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error("Failed to award %s to %s: %s", achievement_id, user_id, exc)
        return False
    return True


def _commit_attempt(user_id, floor: FloorTopology, quiz_id, score, time_taken, now):
    """
    Ledger update + attempt row + campaign QuizSession in one transaction.
    Returns (LedgerUpdate, FloorAttempt), or (None, existing attempt) when the
    quiz was already submitted.
    """
    max_retries = current_app.config.get("LEDGER_MAX_RETRIES", 3)

    for attempt_no in range(max_retries + 1):
        try:
            row = get_progress(user_id)
            update = apply_attempt(
                LedgerState.from_columns(row) if row else None,
                floor,
                score.correct_count,
                score.total_questions,
                score.passed,
                score.is_perfect,
            )
            if row is None:
                row = TowerProgress(user_id=user_id)
                db.session.add(row)
            for column, value in update.after.to_columns().items():
                setattr(row, column, value)

            attempt = FloorAttempt(
                user_id=user_id,
                quiz_id=quiz_id,
                floor_number=floor.floor_number,
                category=floor.category,
                difficulty=floor.difficulty,
                is_mini_boss=floor.is_mini_boss,
                score=score.correct_count,
                total_questions=score.total_questions,
                passed=score.passed,
                is_perfect=score.is_perfect,
                questions=score.results,
                attempt_duration=time_taken,
                created_at=now,
            )
            db.session.add(attempt)
            db.session.flush()

            quiz_utils.record_session(
                user_id,
                num_questions=score.total_questions,
                correct_answers=score.correct_count,
                game_mode="campaign",
                quiz_id=quiz_id,
                category=floor.category,
                difficulty=floor.difficulty,
                time_taken=time_taken,
                tower_attempt_id=attempt.id,
                now=now,
            )
            db.session.commit()
            return update, attempt

        except StaleDataError:
            db.session.rollback()
            current_app.logger.warning(
                "Ledger for %s changed underneath submission (try %d)", user_id, attempt_no + 1
            )
        except IntegrityError:
            db.session.rollback()
            existing = find_attempt(user_id, quiz_id)
            if existing is not None:
                return None, existing
            # Lost the race to create the ledger row; go again as an update.
            current_app.logger.warning("Ledger row for %s created concurrently (try %d)",
                                       user_id, attempt_no + 1)

    current_app.logger.error("Ledger retries exhausted for %s", user_id)
    raise ProgressConflictError("Progress was updated concurrently; retry the submission")


def _progress_summary(ledger: LedgerState) -> Dict:
    return {
        "current_floor":   ledger.current_floor,
        "highest_floor":   ledger.highest_floor,
        "total_questions": ledger.total_questions,
        "total_correct":   ledger.total_correct,
        "perfect_floors":  len(ledger.perfect_floors),
    }


def _submission_response(attempt: FloorAttempt, ledger: LedgerState, next_floor_unlocked: bool,
                         newly_earned: List[str], duplicate: bool = False) -> Dict:
    return {
        "passed":                    attempt.passed,
        "score":                     attempt.score,
        "total_questions":           attempt.total_questions,
        "is_perfect":                attempt.is_perfect,
        "results":                   attempt.questions or [],
        "best_score":                best_score(attempt.user_id, attempt.floor_number),
        "attempt_count":             ledger.attempts_on(attempt.floor_number),
        "attempt_id":                attempt.id,
        "floor_number":              attempt.floor_number,
        "category":                  attempt.category,
        "difficulty":                attempt.difficulty,
        "is_mini_boss":              attempt.is_mini_boss,
        "progress":                  _progress_summary(ledger),
        "next_floor_unlocked":       next_floor_unlocked,
        "newly_earned_achievements": newly_earned,
        "duplicate":                 duplicate,
    }


def _award_new(user_id, ledger, facts, now) -> List[str]:
    history = build_history(user_id, now)
    candidates = evaluate(ledger, facts, history, already_earned=earned_achievement_ids(user_id))
    return [a for a in candidates if award(user_id, a, facts.floor_number, now)]


def submit_floor(user_id: str, floor_number: int, quiz_id: str, answers,
                 questions=None, time_taken=None, now: Optional[datetime] = None) -> Dict:
    """Score a floor, commit the ledger, award achievements; the full response dict."""
    now = _now(now)
    floor = resolve_floor(floor_number)

    existing = find_attempt(user_id, quiz_id)
    if existing is not None:
        current_app.logger.info("Replaying stored result for %s / quiz %s", user_id, quiz_id)
        return _submission_response(existing, get_ledger(user_id) or LedgerState(), False, [], True)

    check_floor_access(user_id, floor.floor_number)
    answer_key = quiz_utils.load_answer_key(quiz_id, now, game_mode="campaign",
                                            floor_number=floor.floor_number)
    score = score_attempt(answer_key, answers, questions, total_questions=QUESTIONS_PER_FLOOR)

    update, attempt = _commit_attempt(user_id, floor, quiz_id, score, time_taken, now)
    if update is None:
        return _submission_response(attempt, get_ledger(user_id) or LedgerState(), False, [], True)

    ledger = update.after
    facts = AttemptFacts(
        floor_number=floor.floor_number,
        category=floor.category,
        difficulty=floor.difficulty,
        is_mini_boss=floor.is_mini_boss,
        score=score.correct_count,
        passed=score.passed,
        is_perfect=score.is_perfect,
        floor_attempt_count=ledger.attempts_on(floor.floor_number),
        created_at=now,
    )
    try:
        newly = _award_new(user_id, ledger, facts, now)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Achievement evaluation failed for %s", user_id)
        newly = []

    return _submission_response(attempt, ledger, update.next_floor_unlocked, newly)


def check_floor_access(user_id: str, floor_number: int) -> LedgerState:
    ledger = get_ledger(user_id) or LedgerState()
    if floor_number > ledger.highest_floor:
        raise FloorLockedError(
            f"You can only attempt floors up to {ledger.highest_floor}.",
            highest_floor=ledger.highest_floor,
            current_floor=ledger.current_floor,
        )
    return ledger


# ── Views ─────────────────────────────────────────────────────────────────────

def floor_stats(user_id: str) -> Dict[int, Dict]:
    stats: Dict[int, Dict] = {}
    for attempt in FloorAttempt.query.filter_by(user_id=user_id).all():
        entry = stats.setdefault(attempt.floor_number, {"attempts": 0, "best_score": 0, "passed": False})
        entry["attempts"] += 1
        entry["best_score"] = max(entry["best_score"], attempt.score)
        entry["passed"] = entry["passed"] or attempt.passed
    return stats


def progress_view(user_id: str) -> Dict:
    ledger = get_ledger(user_id)
    has_started = ledger is not None
    ledger = ledger or LedgerState()
    floor = resolve_floor(ledger.current_floor)
    return {
        "current_floor":    ledger.current_floor,
        "highest_floor":    ledger.highest_floor,
        "tier":             floor.tier,
        "tier_name":        TIERS[floor.tier]["name"],
        "difficulty":       floor.difficulty,
        "category":         floor.category,
        "is_mini_boss":     floor.is_mini_boss,
        "total_floors":     total_floors(),
        "total_categories": CATEGORY_COUNT,
        "perfect_floors":   len(ledger.perfect_floors),
        "total_questions":  ledger.total_questions,
        "total_correct":    ledger.total_correct,
        "accuracy":         ledger.accuracy,
        "category_stats":   {k: v.to_dict() for k, v in ledger.category_stats.items()},
        "floor_stats":      floor_stats(user_id) if has_started else {},
        "has_started":      has_started,
    }


def achievements_view(user_id: Optional[str] = None) -> Dict:
    earned = {}
    if user_id:
        for row in UserAchievement.query.filter_by(user_id=user_id).all():
            earned[row.achievement_id] = row

    achievements = []
    for order, rule in enumerate(RULES):
        row = earned.get(rule.id)
        if rule.hidden and row is None:
            continue
        achievements.append(dict(
            rule.to_dict(),
            sort_order=order,
            unlocked=row is not None,
            earned_at=as_utc(row.earned_at).isoformat() if row else None,
            floor_earned=row.floor_earned if row else None,
        ))

    by_family: Dict[str, List[Dict]] = {family: [] for family in FAMILIES}
    for a in achievements:
        by_family[a["category"]].append(a)

    return {
        "achievements":   achievements,
        "by_category":    by_family,
        "unlocked_count": len(earned),
        "total_count":    len(RULES),
        "visible_count":  len(achievements),
    }


def sync_achievements(user_id: str, now: Optional[datetime] = None) -> Dict:
    """
    Replay every stored attempt through the rule registry and award whatever
    is missing. Safe to run any number of times.
    """
    now = _now(now)
    attempts = (
        FloorAttempt.query
        .filter_by(user_id=user_id)
        .order_by(FloorAttempt.created_at.asc(), FloorAttempt.id.asc())
        .all()
    )
    found = replay(
        [ReplayedAttempt(a.floor_number, a.score, a.total_questions, as_utc(a.created_at))
         for a in attempts],
        lifetime_correct=lifetime_correct(user_id),
    )
    already = earned_achievement_ids(user_id)
    newly = []
    for achievement_id, floor_number in found.items():
        if achievement_id in already:
            continue
        if award(user_id, achievement_id, floor_number, now):
            newly.append(achievement_id)

    return {
        "earned_achievements": newly,
        "attempts_replayed":   len(attempts),
    }
