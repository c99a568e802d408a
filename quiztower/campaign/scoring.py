"""
quiztower/campaign/scoring.py

Grades a submission against a stored answer key. Pure: the key is only read.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

QUESTIONS_PER_FLOOR = 5
PASSING_SCORE = 3        # 3/5 to pass


@dataclass
class ScoreResult:
    results: List[Dict] = field(default_factory=list)
    correct_count: int = 0
    total_questions: int = 0
    passing_score: int = PASSING_SCORE

    @property
    def is_perfect(self) -> bool:
        return self.total_questions > 0 and self.correct_count == self.total_questions

    @property
    def passed(self) -> bool:
        return self.correct_count >= self.passing_score


def normalize_answer(text) -> str:
    if text is None:
        return ""
    return " ".join(str(text).lower().strip().split())


def score_attempt(
    answer_key: Iterable[Mapping],
    answers: Iterable[Mapping],
    questions: Optional[Iterable[Mapping]] = None,
    total_questions: Optional[int] = None,
    passing_score: int = PASSING_SCORE,
) -> ScoreResult:
    """
    ``answer_key``: [{question_id, answer, type?, explanation?}]
    ``answers``:    [{question_id, user_answer}]
    ``questions``:  optional [{id, prompt, choices?}] echoed into the results

    A submitted question id the key does not know is scored wrong, never raised.
    Repeated answers to one question only count the first time.
    """
    key_by_id = {str(k["question_id"]): k for k in answer_key}
    question_by_id = {str(q.get("id")): q for q in (questions or [])}

    result = ScoreResult(
        total_questions=total_questions if total_questions is not None else len(key_by_id),
        passing_score=passing_score,
    )
    seen: set[str] = set()

    for answer in answers:
        qid = str(answer.get("question_id", ""))
        chosen = answer.get("user_answer", "")
        if qid in seen:
            logger.warning("Duplicate answer for question %s ignored", qid)
            continue
        seen.add(qid)

        key = key_by_id.get(qid)
        if key is None:
            logger.warning("No answer key entry for question %s; scored as incorrect", qid)
        is_correct = key is not None and normalize_answer(chosen) == normalize_answer(key.get("answer"))
        if is_correct:
            result.correct_count += 1

        question = question_by_id.get(qid, {})
        result.results.append({
            "question_id":    qid,
            "prompt":         question.get("prompt", ""),
            "choices":        question.get("choices", []),
            "user_answer":    chosen,
            "correct_answer": key.get("answer", "") if key else "",
            "is_correct":     is_correct,
            "explanation":    key.get("explanation", "") if key else "",
        })

    return result
