"""
quiztower/recipes/recipe.py

Seed → Recipe. A recipe is the full set of content constraints handed to the
question generator: how many questions, which difficulty curve, which
categories and question types, and the stylistic knobs (tone, era, region,
distractor styles, explanation style).

Every field comes from its own labelled roll, so pinning the question count
leaves every other field exactly as the unpinned build would produce it.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Sequence, Tuple

from quiztower.categories import CATEGORIES
from quiztower.recipes.rand import (
    daily_seed, roll_from, roll_index, roll_number_in_range,
    sample_without_replacement, validate_seed,
)

# ─────────────────────────────────────────────────────────────────────────────
# LABEL SETS
# Index order matters: rolls pick by position.
# ─────────────────────────────────────────────────────────────────────────────
QUESTION_TYPES = ("multiple_choice", "true_false", "fill_blank")
TONES = ("scholarly", "playful", "cinematic", "pub_quiz", "deadpan", "sports_banter")
ERAS = ("ancient", "medieval", "early_modern", "modern", "contemporary", "timeless")
REGIONS = ("global", "north_america", "europe", "asia", "africa",
           "latin_america", "oceania", "middle_east")
DISTRACTOR_STYLES = ("near_miss", "common_misconception", "same_category", "plausible_date")
EXPLANATION_STYLES = ("one_line_fact", "compare_contrast", "mini_story", "why_wrong")

QUESTION_COUNTS = (5, 10)
CATEGORY_MIX_RANGE = (4, 6)
QUESTION_TYPE_RANGE = (2, 3)
DISTRACTOR_STYLE_COUNT = 2
DAILY_NUM_QUESTIONS = 5

# ─────────────────────────────────────────────────────────────────────────────
# DIFFICULTY CURVES
# Tunable: the shapes and the label thresholds below carry no derivation.
# Each curve must cover the largest question count.
# ─────────────────────────────────────────────────────────────────────────────
CURVE_LIBRARY_VERSION = 1
CURVE_NAMES = ("ramp", "wave", "valley")
DIFFICULTY_CURVES: Tuple[Tuple[float, ...], ...] = (
    (0.2, 0.35, 0.45, 0.6, 0.75, 0.85, 0.9, 0.95, 1.0, 0.9),   # ramp
    (0.5, 0.4, 0.6, 0.35, 0.7, 0.45, 0.8, 0.55, 0.9, 1.0),     # wave
    (0.8, 0.7, 0.6, 0.5, 0.4, 0.45, 0.55, 0.65, 0.8, 0.9),     # valley
)

EASY_BELOW = 0.4
MEDIUM_BELOW = 0.7

DIFFICULTIES = ("easy", "medium", "hard")
MIXED = "mixed"


@dataclass(frozen=True)
class Recipe:
    seed: str
    num_questions: int
    difficulty_curve_id: int
    category_mix: Tuple[str, ...]
    question_types: Tuple[str, ...]
    tone: str
    era: str
    region: str
    distractor_styles: Tuple[str, ...]
    explanation_style: str

    @property
    def curve(self) -> Tuple[float, ...]:
        return curve_prefix(self.difficulty_curve_id, self.num_questions)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["category_mix"] = list(self.category_mix)
        data["question_types"] = list(self.question_types)
        data["distractor_styles"] = list(self.distractor_styles)
        data["difficulty_curve"] = CURVE_NAMES[self.difficulty_curve_id]
        data["curve_version"] = CURVE_LIBRARY_VERSION
        return data


# ── Curves ────────────────────────────────────────────────────────────────────

def curve_prefix(curve_id: int, num_questions: int) -> Tuple[float, ...]:
    curve = DIFFICULTY_CURVES[curve_id]
    if num_questions > len(curve):
        raise ValueError(
            f"Curve {CURVE_NAMES[curve_id]} covers {len(curve)} questions, asked for {num_questions}"
        )
    return curve[:num_questions]


def difficulty_label(value: float) -> str:
    if value < EASY_BELOW:
        return "easy"
    if value < MEDIUM_BELOW:
        return "medium"
    return "hard"


def difficulty_plan(recipe: Recipe, difficulty: str = MIXED) -> List[Dict]:
    """
    One entry per question position: the curve value and the label the
    generator should aim for. A pinned ``difficulty`` overrides every label but
    keeps the curve values, which still set the pacing inside that label.
    """
    if difficulty != MIXED and difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {difficulty}")
    plan = []
    for position, value in enumerate(recipe.curve, start=1):
        plan.append({
            "position":   position,
            "curve":      value,
            "difficulty": difficulty_label(value) if difficulty == MIXED else difficulty,
        })
    return plan


# ── Builder ───────────────────────────────────────────────────────────────────

def build_recipe(seed: str, fixed_num_questions: Optional[int] = None) -> Recipe:
    """Deterministic recipe for ``seed``; same input, same recipe, always."""
    validate_seed(seed)
    if fixed_num_questions is not None and fixed_num_questions not in QUESTION_COUNTS:
        raise ValueError(f"fixed_num_questions must be one of {QUESTION_COUNTS}")

    if fixed_num_questions is not None:
        num_questions = fixed_num_questions
    else:
        num_questions = 10 if roll_index(seed, "numQuestions", 2) == 0 else 5

    category_count = roll_number_in_range(seed, "categoryCount", *CATEGORY_MIX_RANGE)
    type_count = roll_number_in_range(seed, "questionTypeCount", *QUESTION_TYPE_RANGE)

    return Recipe(
        seed=seed,
        num_questions=num_questions,
        difficulty_curve_id=roll_index(seed, "curve", len(DIFFICULTY_CURVES)),
        category_mix=tuple(sample_without_replacement(seed, "categoryMix", CATEGORIES, category_count)),
        question_types=tuple(sample_without_replacement(seed, "questionTypes", QUESTION_TYPES, type_count)),
        tone=roll_from(seed, "tone", TONES),
        era=roll_from(seed, "era", ERAS),
        region=roll_from(seed, "region", REGIONS),
        distractor_styles=tuple(
            sample_without_replacement(seed, "distractors", DISTRACTOR_STYLES, DISTRACTOR_STYLE_COUNT)
        ),
        explanation_style=roll_from(seed, "explanation", EXPLANATION_STYLES),
    )


def recipe_constraints(recipe: Recipe, difficulty: str = MIXED) -> Dict:
    """Recipe flattened into the labelled constraints the generator consumes."""
    plan = difficulty_plan(recipe, difficulty)
    return {
        "num_questions":      recipe.num_questions,
        "difficulty_curve":   [round(p["curve"], 2) for p in plan],
        "difficulty_labels":  [p["difficulty"] for p in plan],
        "category_mix":       list(recipe.category_mix),
        "question_types":     list(recipe.question_types),
        "tone":               recipe.tone,
        "era":                recipe.era,
        "region":             recipe.region,
        "distractor_styles":  list(recipe.distractor_styles),
        "explanation_style":  recipe.explanation_style,
    }


# ── Daily challenge ───────────────────────────────────────────────────────────

def daily_category(date_key: str, categories: Sequence[str] = CATEGORIES) -> str:
    """The day's category. Consecutive days walk the catalogue pseudo-randomly."""
    digest = hashlib.sha256(f"daily-quiz-{date_key}".encode("utf-8")).hexdigest()
    return categories[int(digest, 16) % len(categories)]


def daily_recipe(date_key: str, secret: Optional[str] = None) -> Dict:
    category = daily_category(date_key)
    seed = daily_seed(date_key, category, secret)
    recipe = build_recipe(seed, fixed_num_questions=DAILY_NUM_QUESTIONS)
    return {
        "date":     date_key,
        "category": category,
        "title":    f"Today's Challenge: {category}",
        "seed":     seed,
        "recipe":   recipe,
    }
