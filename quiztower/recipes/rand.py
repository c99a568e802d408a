"""
quiztower/recipes/rand.py

Seed-driven rolls. Every decision made from a seed hashes ``"<seed>:<label>"``
with SHA-256 and reduces the digest, so distinct labels give independent,
reproducible outcomes without any stored state.

The label strings are part of the recipe format: renaming one changes every
recipe ever derived from an existing seed.
"""
from __future__ import annotations

import hashlib
import re
import secrets
from typing import List, Optional, Sequence, TypeVar

from quiztower.errors import InvalidSeedError, SamplerExhaustedError

T = TypeVar("T")

SEED_BYTES = 32
SEED_PATTERN = re.compile(r"^[0-9a-f]{64}$")


# ── Seeds ─────────────────────────────────────────────────────────────────────

def generate_seed() -> str:
    """Fresh freeplay seed: 32 random bytes → 64 hex chars."""
    return secrets.token_hex(SEED_BYTES)


def validate_seed(seed) -> str:
    """Return ``seed`` unchanged, or raise InvalidSeedError. Never repairs."""
    if not isinstance(seed, str) or not SEED_PATTERN.match(seed):
        raise InvalidSeedError(
            "Seed must be a 64-character lowercase hex string",
            seed_length=len(seed) if isinstance(seed, str) else None,
        )
    return seed


def daily_seed(date_key: str, category: str, secret: Optional[str] = None) -> str:
    """Stable seed for one day's challenge in one category."""
    material = f"daily:{date_key}:{category}"
    if secret:
        material = f"{material}|{secret}"
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


# ── Rolls ─────────────────────────────────────────────────────────────────────

def hash_roll(seed: str, label: str) -> int:
    digest = hashlib.sha256(f"{seed}:{label}".encode("utf-8")).hexdigest()
    return int(digest, 16)


def roll_index(seed: str, label: str, max_value: int) -> int:
    """Integer in ``[0, max_value)`` for this (seed, label)."""
    if max_value <= 0:
        raise ValueError(f"roll_index max must be > 0, got {max_value}")
    return hash_roll(seed, label) % max_value


def roll_from(seed: str, label: str, items: Sequence[T]) -> T:
    return items[roll_index(seed, label, len(items))]


def roll_number_in_range(seed: str, label: str, low: int, high: int, step: int = 1) -> int:
    """One of ``low, low+step, … ≤ high``, inclusive on both ends."""
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}")
    span = (high - low) // step + 1
    return low + roll_index(seed, label, span) * step


# ── Sampling ──────────────────────────────────────────────────────────────────

def max_sample_attempts(population: int) -> int:
    return max(64, 32 * population)


def sample_without_replacement(seed: str, label: str, items: Sequence[T], k: int) -> List[T]:
    """
    ``k`` distinct elements of ``items``. Each draw rolls ``label#0``,
    ``label#1``, … and skips indices already taken.

    k <= 0 gives [], k >= len(items) gives a copy of ``items`` in order.
    """
    if k <= 0:
        return []
    if k >= len(items):
        return list(items)

    picked: set[int] = set()
    out: List[T] = []
    limit = max_sample_attempts(len(items))
    attempt = 0
    while len(out) < k:
        if attempt >= limit:
            raise SamplerExhaustedError(
                f"Sampler gave up after {attempt} draws for label {label!r}",
                label=label, wanted=k, population=len(items), collected=len(out),
            )
        idx = roll_index(seed, f"{label}#{attempt}", len(items))
        attempt += 1
        if idx not in picked:
            picked.add(idx)
            out.append(items[idx])
    return out
