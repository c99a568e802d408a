import json
import uuid
from datetime import timedelta

from flask import current_app
from groq import Groq

from quiztower import db
from quiztower.campaign.floors import FloorTopology
from quiztower.campaign.scoring import QUESTIONS_PER_FLOOR
from quiztower.errors import GenerationError, QuizExpiredError, QuizMismatchError
from quiztower.models import AnswerKey, QuizSession, utcnow
from quiztower.recipes.recipe import Recipe, MIXED, recipe_constraints

VALID_TYPES = {"multiple_choice", "true_false", "fill_blank"}
VALID_DIFFICULTIES = {"easy", "medium", "hard"}
CHOICE_IDS = ["A", "B", "C", "D"]

SYSTEM_PROMPT = """You are a professional trivia author. Return ONLY valid JSON. No markdown, no prose.
Schema: {"title":"...","description":"...","questions":[{"id":"q1","type":"multiple_choice","difficulty":"easy","category":"...","prompt":"...","choices":[{"id":"A","text":"..."},{"id":"B","text":"..."},{"id":"C","text":"..."},{"id":"D","text":"..."}],"answer":"A","explanation":"..."}]}
Rules:
- multiple_choice: exactly 4 choices with ids A, B, C, D in order, exactly one correct; answer is the choice id
- true_false: no choices; answer is "true" or "false"
- fill_blank: no choices; answer is the missing word or short phrase
- never put the answer in the prompt; avoid double negatives and opinion questions
- explanation is 1-2 sentences"""


# ── Answer keys ───────────────────────────────────────────────────────────────

def generate_quiz_id() -> str:
    return uuid.uuid4().hex


def store_answer_key(quiz_id, questions, now=None, game_mode="freeplay", floor_number=None):
    """Keep the answers server-side until ANSWER_KEY_TTL_HOURS from now."""
    now = now or utcnow()
    ttl = timedelta(hours=current_app.config.get("ANSWER_KEY_TTL_HOURS", 24))
    answers = [
        {
            "question_id": str(q["id"]),
            "answer":      q["answer"],
            "type":        q.get("type", "multiple_choice"),
            "explanation": q.get("explanation", ""),
        }
        for q in questions
    ]
    row = AnswerKey.query.filter_by(quiz_id=quiz_id).first()
    if row is None:
        row = AnswerKey(quiz_id=quiz_id)
        db.session.add(row)
    row.answers = answers
    row.game_mode = game_mode
    row.floor_number = floor_number
    row.created_at = now
    row.expires_at = now + ttl
    db.session.commit()
    return row


def load_answer_key(quiz_id, now=None, game_mode=None, floor_number=None):
    """
    Stored answers for ``quiz_id``. With ``game_mode`` (and ``floor_number``
    for campaign keys) the key must have been generated for exactly that.
    """
    row = AnswerKey.query.filter_by(quiz_id=quiz_id).first() if quiz_id else None
    if row is None or row.is_expired(now):
        raise QuizExpiredError("Quiz not found or expired", quiz_id=quiz_id)
    if game_mode is not None and row.game_mode != game_mode:
        raise QuizMismatchError(f"Quiz was not generated for {game_mode} play", quiz_id=quiz_id)
    if floor_number is not None and row.floor_number != floor_number:
        raise QuizMismatchError(f"Quiz was not generated for floor {floor_number}",
                                quiz_id=quiz_id, quiz_floor=row.floor_number)
    return list(row.answers or [])


def find_session(user_id, quiz_id):
    return QuizSession.query.filter_by(user_id=user_id, quiz_id=quiz_id).first()


def record_session(user_id, num_questions, correct_answers, game_mode="freeplay",
                   quiz_id=None, category=None, difficulty=None, time_taken=None,
                   tower_attempt_id=None, now=None):
    """Adds (does not commit) one QuizSession row."""
    session_row = QuizSession(
        user_id=user_id,
        quiz_id=quiz_id,
        game_mode=game_mode,
        category=category,
        difficulty=difficulty,
        num_questions=num_questions,
        correct_answers=correct_answers,
        time_taken=time_taken,
        tower_attempt_id=tower_attempt_id,
        created_at=now or utcnow(),
    )
    db.session.add(session_row)
    return session_row


def strip_answers(questions):
    """Client copy of the questions: answers and explanations blanked."""
    return [dict(q, answer="", explanation="") for q in questions]


# ── Prompts ───────────────────────────────────────────────────────────────────

def build_recipe_prompt(recipe: Recipe, difficulty: str = MIXED) -> str:
    c = recipe_constraints(recipe, difficulty)
    labels = ", ".join(f'"{d}"' for d in c["difficulty_labels"])
    return f"""RECIPE:
- num_questions: {c["num_questions"]}
- difficulty_curve: [{", ".join(f"{v:.2f}" for v in c["difficulty_curve"])}]
- difficulty_labels: [{labels}]
- category_mix: {", ".join(c["category_mix"])}
- question_types: {", ".join(c["question_types"])}
- tone: {c["tone"]}
- era: {c["era"]}
- region: {c["region"]}
- distractor_styles: {", ".join(c["distractor_styles"])}
- explanation_style: {c["explanation_style"]}

INSTRUCTIONS:
- Create exactly {c["num_questions"]} questions, question i at difficulty_labels[i]
- Within a label, make later questions harder where difficulty_curve rises
- Spread category_mix across the questions; avoid the same category twice in a row
- Only use these question types: {", ".join(c["question_types"])}
- Write in a {c["tone"]} tone, explanations in the {c["explanation_style"]} style
- Lean toward the {c["era"]} era and {c["region"]} region when relevant
- Generate a creative title and description for the quiz"""


def build_floor_prompt(floor: FloorTopology) -> str:
    if floor.is_mini_boss:
        subject = "a mix of these categories, one question each from different ones: " + \
                  ", ".join(floor.categories)
    else:
        subject = f'"{floor.category}"'
    return f"""Generate {QUESTIONS_PER_FLOOR} multiple choice trivia questions about {subject}.
Floor: {floor.floor_number}
Difficulty: ALL questions must be {floor.difficulty.upper()}
- Exactly {QUESTIONS_PER_FLOOR} multiple_choice questions with 4 options (A, B, C, D)
- Make each question distinct and original"""


# ── Groq ──────────────────────────────────────────────────────────────────────

def _strip_fences(raw: str) -> str:
    return raw.replace("```json", "").replace("```", "").strip()


def _complete_json(client, prompt, temperature):
    """One chat completion parsed as JSON; a single repair round on bad JSON."""
    model = current_app.config.get("GROQ_MODEL", "llama-3.3-70b-versatile")
    resp = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user",   "content": prompt},
        ],
        temperature=temperature,
        max_tokens=4000,
    )
    raw = _strip_fences(resp.choices[0].message.content or "")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        current_app.logger.warning("Generator returned invalid JSON, repairing: %s", exc)

    repair = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": "You fix invalid JSON. Return ONLY the corrected JSON."},
            {"role": "user",   "content": f"Fix this JSON:\n\n{raw}"},
        ],
        temperature=0,
        max_tokens=4000,
    )
    try:
        return json.loads(_strip_fences(repair.choices[0].message.content or ""))
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Generator returned invalid JSON: {exc}") from exc


def _normalise_questions(data, expected, allowed_types=VALID_TYPES):
    questions = data.get("questions") if isinstance(data, dict) else None
    if not isinstance(questions, list) or len(questions) < expected:
        got = len(questions) if isinstance(questions, list) else 0
        raise GenerationError(f"Expected {expected} questions, got {got}")

    out = []
    for q in questions[:expected]:
        if not q.get("prompt") or not q.get("answer"):
            raise GenerationError("Question missing prompt or answer")
        qtype = q.get("type", "multiple_choice")
        if qtype not in allowed_types:
            raise GenerationError(f"Bad question type: {qtype}")
        if q.get("difficulty") not in VALID_DIFFICULTIES:
            raise GenerationError(f"Bad difficulty: {q.get('difficulty')}")
        question = {
            "id":          generate_quiz_id()[:12],
            "type":        qtype,
            "difficulty":  q["difficulty"],
            "category":    q.get("category", ""),
            "prompt":      q["prompt"],
            "answer":      str(q["answer"]).strip(),
            "explanation": q.get("explanation", ""),
        }
        if qtype == "multiple_choice":
            choices = sorted(q.get("choices") or [], key=lambda c: str(c.get("id")))
            if [c.get("id") for c in choices] != CHOICE_IDS:
                raise GenerationError("multiple_choice needs choices A, B, C, D")
            if question["answer"] not in CHOICE_IDS:
                raise GenerationError(f"Bad answer: {question['answer']}")
            question["choices"] = choices
        out.append(question)
    return out


def _client():
    return Groq(api_key=current_app.config["GROQ_API_KEY"])


def generate_recipe_quiz(recipe: Recipe, difficulty: str = MIXED):
    """Questions for a recipe. Returns the full quiz, answers included."""
    data = _complete_json(_client(), build_recipe_prompt(recipe, difficulty), temperature=0.8)
    questions = _normalise_questions(data, recipe.num_questions, set(recipe.question_types))
    return {
        "quiz_id":     generate_quiz_id(),
        "title":       data.get("title", "Trivia Quiz"),
        "description": data.get("description", ""),
        "category":    recipe.category_mix[0],
        "questions":   questions,
    }


def generate_floor_quiz(floor: FloorTopology):
    """Five questions for a campaign floor, category and difficulty forced to the floor's."""
    data = _complete_json(_client(), build_floor_prompt(floor), temperature=1.0)
    questions = _normalise_questions(data, QUESTIONS_PER_FLOOR, {"multiple_choice"})
    for q in questions:
        q["difficulty"] = floor.difficulty
        if q["category"] not in floor.categories:
            q["category"] = floor.category
    return {
        "quiz_id":   generate_quiz_id(),
        "category":  floor.category,
        "questions": questions,
    }
