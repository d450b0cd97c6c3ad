# persona_core/insights.py
from __future__ import annotations
from typing import List, Tuple
from .config import NEUTRAL_SCORE
from .types import Insight, TraitScores

# (trait, score attribute, first-pole label, second-pole label), in report order
_TRAITS: Tuple[Tuple[str, str, str, str], ...] = (
    ("Extraversion", "extraversion", "Introversion", "Extraversion"),
    ("Sensing", "sensing", "Intuition", "Observant"),
    ("Thinking", "thinking", "Feeling", "Thinking"),
    ("Judging", "judging", "Prospecting", "Judging"),
)

def _pole(value: int, left: str, right: str) -> str:
    return right if value > NEUTRAL_SCORE else left

def dominant_vector(scores: TraitScores) -> Insight:
    """Insight on the trait furthest from neutral; earlier traits win ties."""
    best = _TRAITS[0]
    best_dist = abs(getattr(scores, best[1]) - NEUTRAL_SCORE)
    for trait in _TRAITS[1:]:
        dist = abs(getattr(scores, trait[1]) - NEUTRAL_SCORE)
        if dist > best_dist:
            best, best_dist = trait, dist
    _, attr, left, right = best
    pole = _pole(getattr(scores, attr), left, right)
    return Insight(
        title=f"Dominant Vector: {pole}",
        content=f"Your high preference for {pole} is the primary filter through which you view the world.",
    )

def dynamic_insights(scores: TraitScores) -> List[Insight]:
    return [dominant_vector(scores)]
