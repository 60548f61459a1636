"""
Text normalization for summaries and bullet points.

Three stateless transforms:
- extract_sentences(): pull long sentence-like fragments out of free text
- enhance_bullet(): rewrite one bullet to open with an action verb
- normalize_summary(): tidy a summary and pad short ones with a closing clause

Starter verb selection is a pluggable strategy so callers (and tests) decide
whether rewriting is varied or reproducible.
"""

import random
import re
from typing import Callable, List, Optional, Sequence


# ============================================================================
# Constants
# ============================================================================

STARTERS = ("Delivered", "Led", "Built", "Optimized", "Launched", "Improved")

SUMMARY_MIN_LENGTH = 80
SUMMARY_CLOSING = "Known for cross-functional collaboration and measurable impact."

SENTENCE_MIN_LENGTH = 40

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
BULLET_MARKER_RE = re.compile(r"^[-•]\s*")
WHITESPACE_RE = re.compile(r"\s+")
DIGIT_RE = re.compile(r"\d")

StarterPicker = Callable[[Sequence[str]], str]


# ============================================================================
# Starter selection strategies
# ============================================================================

def pick_first(starters: Sequence[str]) -> str:
    """Always the first starter. Deterministic default."""
    return starters[0]


class RandomStarterPicker:
    """Random starter per call. Pass a seed for reproducible output."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def __call__(self, starters: Sequence[str]) -> str:
        return self._rng.choice(list(starters))


class RoundRobinStarterPicker:
    """Cycle through the starters in order."""

    def __init__(self, offset: int = 0):
        self._next = offset

    def __call__(self, starters: Sequence[str]) -> str:
        pick = starters[self._next % len(starters)]
        self._next += 1
        return pick


def build_starter_picker(strategy: str, seed: Optional[int] = None) -> StarterPicker:
    if strategy == "round_robin":
        return RoundRobinStarterPicker()
    if strategy == "random":
        return RandomStarterPicker(seed)
    raise ValueError(f"Unknown starter strategy: {strategy}")


# ============================================================================
# Transforms
# ============================================================================

def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text or "").strip()


def extract_sentences(text: str, limit: int = 3) -> List[str]:
    """
    Return up to `limit` sentence-like fragments longer than 40 characters.

    Fragments end in `.`, `!` or `?`. Text without any sentence punctuation is
    split into lines instead.
    """
    if not text or limit <= 0:
        return []
    normalized = collapse_whitespace(text)
    fragments = SENTENCE_RE.findall(normalized)
    if not fragments:
        fragments = [collapse_whitespace(line) for line in text.splitlines()]
    sentences = [f.strip() for f in fragments if len(f.strip()) > SENTENCE_MIN_LENGTH]
    return sentences[:limit]


def _starts_with_starter(text: str) -> bool:
    first = text.split(" ", 1)[0]
    return first in STARTERS


def enhance_bullet(line: str, pick: StarterPicker = pick_first) -> str:
    """
    Rewrite a bullet to open with an action verb.

    Examples (with pick_first):
    - "- shipped the billing service"  -> "Delivered shipped the billing service."
    - "Cut latency by 40%"             -> "Delivered cut latency by 40%"
    - "Delivered the billing service." -> unchanged

    Bullets with a number keep their own punctuation; the others end with a
    period. Text that already opens with a starter only gets the punctuation
    rule, so the rewrite is stable when applied twice.
    """
    if not line:
        return ""
    trimmed = line.strip()
    if not trimmed:
        return ""
    normalized = BULLET_MARKER_RE.sub("", trimmed)
    if not normalized:
        return ""

    has_number = bool(DIGIT_RE.search(normalized))

    if _starts_with_starter(normalized):
        if has_number or normalized.endswith("."):
            return normalized
        return f"{normalized}."

    starter = pick(STARTERS)
    if has_number:
        return f"{starter} {normalized[0].lower()}{normalized[1:]}"
    return f"{starter} {normalized}{'' if normalized.endswith('.') else '.'}"


def normalize_summary(summary: str) -> str:
    """Collapse whitespace; summaries under 80 characters get a closing clause."""
    cleaned = collapse_whitespace(summary)
    if not cleaned:
        return ""
    if len(cleaned) < SUMMARY_MIN_LENGTH and not cleaned.endswith(SUMMARY_CLOSING):
        return f"{cleaned} {SUMMARY_CLOSING}"
    return cleaned
