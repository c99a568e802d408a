from dataclasses import replace

from flask import current_app, jsonify, request
from sqlalchemy.exc import IntegrityError

from quiztower import db
from quiztower.campaign.scoring import score_attempt
from quiztower.errors import GenerationError
from quiztower.quiz import quiz
from quiztower.quiz.utils import (
    find_session,
    generate_recipe_quiz,
    load_answer_key,
    record_session,
    store_answer_key,
    strip_answers,
)
from quiztower.recipes.rand import generate_seed
from quiztower.recipes.recipe import MIXED, build_recipe, daily_recipe
from quiztower.recipes.routes import int_field, parse_date_key, parse_recipe_options

GAME_MODES = ("freeplay", "daily")


def generation_disabled():
    if not current_app.config.get("GROQ_API_KEY"):
        return jsonify({"error": "Question generation is not configured"}), 503
    return None


def _replayed(session_row):
    return jsonify({
        "score":           session_row.correct_answers,
        "total_questions": session_row.num_questions,
        "is_perfect":      session_row.correct_answers == session_row.num_questions,
        "results":         [],
        "duplicate":       True,
    })


@quiz.route('/generate', methods=['POST'])
def generate():
    """
    Generate a freeplay quiz from a seed (fresh when omitted), or the day's
    quiz with {"mode": "daily", "date"?}. Answers stay on the server.
    """
    disabled = generation_disabled()
    if disabled:
        return disabled

    data = request.get_json(silent=True) or {}
    mode = data.get("mode", "freeplay")
    if mode not in GAME_MODES:
        return jsonify({"error": f"mode must be one of {list(GAME_MODES)}"}), 400

    fixed, difficulty, error = parse_recipe_options(data)
    if error:
        return jsonify({"error": error}), 400

    if mode == "daily":
        date_key = parse_date_key(data.get("date"))
        if date_key is None:
            return jsonify({"error": "date must be YYYY-MM-DD"}), 400
        challenge = daily_recipe(date_key, current_app.config.get("DAILY_SECRET") or None)
        seed = challenge["seed"]
        built = replace(challenge["recipe"], category_mix=(challenge["category"],))
        difficulty = MIXED
    else:
        seed = data["seed"] if "seed" in data else generate_seed()
        built = build_recipe(seed, fixed_num_questions=fixed)   # InvalidSeedError → 400

    try:
        generated = generate_recipe_quiz(built, difficulty)
    except GenerationError as e:
        current_app.logger.error("Quiz generation failed for seed %s: %s", seed, e.message)
        raise
    except Exception as e:
        current_app.logger.error("Groq error: %s", e)
        raise GenerationError(f"Groq error: {e}") from e

    store_answer_key(generated["quiz_id"], generated["questions"], game_mode=mode)

    return jsonify({
        "quiz_id":     generated["quiz_id"],
        "seed":        seed,
        "mode":        mode,
        "title":       generated["title"],
        "description": generated["description"],
        "category":    generated["category"],
        "difficulty":  difficulty,
        "recipe":      built.to_dict(),
        "questions":   strip_answers(generated["questions"]),
    })


@quiz.route('/submit', methods=['POST'])
def submit():
    """
    Score a freeplay/daily quiz and record the session.
    Body: {user_id, quiz_id, answers: [{question_id, user_answer}], questions?,
           mode?, category?, difficulty?, time_taken?}
    """
    data = request.get_json(silent=True) or {}
    user_id = data.get("user_id")
    quiz_id = data.get("quiz_id")
    answers = data.get("answers")
    mode = data.get("mode", "freeplay")

    if not user_id or not quiz_id:
        return jsonify({"error": "user_id and quiz_id are required"}), 400
    if not isinstance(answers, list):
        return jsonify({"error": "answers must be a list"}), 400
    if mode not in GAME_MODES:
        return jsonify({"error": f"mode must be one of {list(GAME_MODES)}"}), 400

    existing = find_session(str(user_id), quiz_id)
    if existing is not None:
        return _replayed(existing)

    answer_key = load_answer_key(quiz_id, game_mode=mode)    # QuizExpiredError → 404
    score = score_attempt(answer_key, answers, data.get("questions"))

    record_session(
        str(user_id),
        num_questions=score.total_questions,
        correct_answers=score.correct_count,
        game_mode=mode,
        quiz_id=quiz_id,
        category=data.get("category"),
        difficulty=data.get("difficulty"),
        time_taken=int_field(data, "time_taken"),
    )
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        existing = find_session(str(user_id), quiz_id)
        if existing is None:
            raise
        current_app.logger.info("Concurrent resubmission of quiz %s by %s", quiz_id, user_id)
        return _replayed(existing)

    return jsonify({
        "score":           score.correct_count,
        "total_questions": score.total_questions,
        "is_perfect":      score.is_perfect,
        "results":         score.results,
        "duplicate":       False,
    })
