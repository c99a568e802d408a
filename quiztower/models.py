from datetime import datetime, timezone

from quiztower import db


def utcnow():
    return datetime.now(timezone.utc)


def as_utc(value):
    """SQLite hands datetimes back naive; everything stored is UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AnswerKey(db.Model):
    """
    Server-side answers for one generated quiz.
    answers: [{question_id, answer, type, explanation}]
    floor_number is set only for campaign keys.
    """
    __tablename__ = 'quiz_answer_key'

    id           = db.Column(db.Integer, primary_key=True)
    quiz_id      = db.Column(db.String(64), unique=True, nullable=False, index=True)
    game_mode    = db.Column(db.String(20), nullable=False, default='freeplay')
    floor_number = db.Column(db.Integer, nullable=True)
    answers      = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    expires_at = db.Column(db.DateTime(timezone=True), nullable=False)

    def is_expired(self, now=None):
        return as_utc(self.expires_at) <= (now or utcnow())

    def __repr__(self):
        return f"AnswerKey(quiz={self.quiz_id}, n={len(self.answers or [])})"


class QuizSession(db.Model):
    """
    One scored quiz in any game mode. The lifetime correct-answer total is
    summed from this table, not from the campaign ledger.
    game_mode: 'campaign' | 'freeplay' | 'daily'
    """
    __tablename__ = 'quiz_session'

    id               = db.Column(db.Integer, primary_key=True)
    user_id          = db.Column(db.String(64), nullable=False, index=True)
    quiz_id          = db.Column(db.String(64), nullable=True)
    game_mode        = db.Column(db.String(20), nullable=False, default='freeplay')
    category         = db.Column(db.String(120), nullable=True)
    difficulty       = db.Column(db.String(10), nullable=True)
    num_questions    = db.Column(db.Integer, nullable=False)
    correct_answers  = db.Column(db.Integer, nullable=False, default=0)
    time_taken       = db.Column(db.Integer, nullable=True)
    tower_attempt_id = db.Column(db.Integer, db.ForeignKey('tower_floor_attempt.id'), nullable=True)
    created_at       = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'quiz_id', name='uq_user_quiz_session'),
    )

    def __repr__(self):
        return f"QuizSession(user={self.user_id}, mode={self.game_mode}, {self.correct_answers}/{self.num_questions})"


class TowerProgress(db.Model):
    """
    The campaign ledger, one row per user. ``version`` is bumped on every
    flush and checked in the UPDATE's WHERE clause, so a concurrent writer
    fails with StaleDataError instead of overwriting.
    """
    __tablename__ = 'tower_progress'

    id              = db.Column(db.Integer, primary_key=True)
    user_id         = db.Column(db.String(64), unique=True, nullable=False)
    current_floor   = db.Column(db.Integer, nullable=False, default=1)
    highest_floor   = db.Column(db.Integer, nullable=False, default=1)
    floor_attempts  = db.Column(db.JSON, nullable=False, default=dict)
    total_questions = db.Column(db.Integer, nullable=False, default=0)
    total_correct   = db.Column(db.Integer, nullable=False, default=0)
    perfect_floors  = db.Column(db.JSON, nullable=False, default=list)
    category_stats  = db.Column(db.JSON, nullable=False, default=dict)
    version         = db.Column(db.Integer, nullable=False)
    created_at      = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at      = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"TowerProgress(user={self.user_id}, current={self.current_floor}, highest={self.highest_floor})"


class FloorAttempt(db.Model):
    """
    Append-only record of one floor submission. (user_id, quiz_id) is unique:
    a resubmitted quiz is a replay, not a second attempt.
    """
    __tablename__ = 'tower_floor_attempt'

    id               = db.Column(db.Integer, primary_key=True)
    user_id          = db.Column(db.String(64), nullable=False, index=True)
    quiz_id          = db.Column(db.String(64), nullable=False)
    floor_number     = db.Column(db.Integer, nullable=False)
    category         = db.Column(db.String(120), nullable=False)
    difficulty       = db.Column(db.String(10), nullable=False)
    is_mini_boss     = db.Column(db.Boolean, nullable=False, default=False)
    score            = db.Column(db.Integer, nullable=False)
    total_questions  = db.Column(db.Integer, nullable=False)
    passed           = db.Column(db.Boolean, nullable=False)
    is_perfect       = db.Column(db.Boolean, nullable=False, default=False)
    questions        = db.Column(db.JSON, nullable=False, default=list)
    attempt_duration = db.Column(db.Integer, nullable=True)
    created_at       = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'quiz_id', name='uq_user_quiz_attempt'),
        db.Index('ix_attempt_user_created', 'user_id', 'created_at'),
    )

    def to_dict(self):
        return {
            "id":               self.id,
            "floor_number":     self.floor_number,
            "category":         self.category,
            "difficulty":       self.difficulty,
            "is_mini_boss":     self.is_mini_boss,
            "score":            self.score,
            "total_questions":  self.total_questions,
            "passed":           self.passed,
            "is_perfect":       self.is_perfect,
            "results":          self.questions or [],
            "attempt_duration": self.attempt_duration,
            "created_at":       as_utc(self.created_at).isoformat(),
        }

    def __repr__(self):
        return f"FloorAttempt(user={self.user_id}, floor={self.floor_number}, score={self.score})"


class UserAchievement(db.Model):
    """earned_at and floor_earned are written once and never updated."""
    __tablename__ = 'user_tower_achievement'

    id             = db.Column(db.Integer, primary_key=True)
    user_id        = db.Column(db.String(64), nullable=False, index=True)
    achievement_id = db.Column(db.String(40), nullable=False)
    floor_earned   = db.Column(db.Integer, nullable=True)
    earned_at      = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'achievement_id', name='uq_user_achievement'),
    )

    def __repr__(self):
        return f"UserAchievement(user={self.user_id}, id={self.achievement_id})"
