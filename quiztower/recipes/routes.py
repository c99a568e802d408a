from datetime import datetime, timezone

from flask import current_app, jsonify, request

from quiztower.recipes import recipes
from quiztower.recipes.rand import generate_seed
from quiztower.recipes.recipe import (
    DIFFICULTIES, MIXED, QUESTION_COUNTS, build_recipe, daily_recipe,
    difficulty_plan, recipe_constraints,
)


def parse_date_key(raw):
    """``YYYY-MM-DD`` or None; today's UTC date when ``raw`` is empty."""
    if not raw:
        return datetime.now(timezone.utc).strftime("%Y-%m-%d")
    try:
        return datetime.strptime(raw, "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        return None


def int_field(data, name):
    """``data[name]`` when it is a real int (bools excluded), else None."""
    value = data.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def parse_recipe_options(data):
    """(fixed_num_questions, difficulty, error message)"""
    fixed = data.get("fixed_num_questions")
    if fixed is not None and (not isinstance(fixed, int) or fixed not in QUESTION_COUNTS):
        return None, None, f"fixed_num_questions must be one of {list(QUESTION_COUNTS)}"
    difficulty = data.get("difficulty") or MIXED
    if difficulty != MIXED and difficulty not in DIFFICULTIES:
        return None, None, f"difficulty must be one of {list(DIFFICULTIES) + [MIXED]}"
    return fixed, difficulty, None


@recipes.route('/recipe', methods=['POST'])
def recipe():
    """
    Build the recipe for a seed (a fresh one when none is given).
    Body: {seed?, fixed_num_questions?, difficulty?}
    """
    data = request.get_json(silent=True) or {}
    fixed, difficulty, error = parse_recipe_options(data)
    if error:
        return jsonify({"error": error}), 400

    seed = data["seed"] if "seed" in data else generate_seed()
    built = build_recipe(seed, fixed_num_questions=fixed)   # InvalidSeedError → 400
    return jsonify({
        "seed":        seed,
        "recipe":      built.to_dict(),
        "plan":        difficulty_plan(built, difficulty),
        "constraints": recipe_constraints(built, difficulty),
    })


@recipes.route('/daily', methods=['GET'])
def daily():
    date_key = parse_date_key(request.args.get("date"))
    if date_key is None:
        return jsonify({"error": "date must be YYYY-MM-DD"}), 400

    challenge = daily_recipe(date_key, current_app.config.get("DAILY_SECRET") or None)
    built = challenge.pop("recipe")
    challenge.update(
        recipe=built.to_dict(),
        plan=difficulty_plan(built),
        num_questions=built.num_questions,
        difficulty=MIXED,
    )
    return jsonify(challenge)
