from __future__ import annotations

import json

import pytest

from persona_core.question_bank import DIMENSIONS
from persona_core.types import Question


def build_synthetic_bank(
    *,
    dimensions: list[str] | None = None,
    per_dimension: int = 4,
    reverse_every: int = 2,
) -> list[Question]:
    """Create a deterministic synthetic bank, interleaved by dimension like the real one.

    Every `reverse_every`-th item of a dimension is reverse-keyed (0 disables).
    """

    items: list[Question] = []
    target = dimensions or list(DIMENSIONS)
    qid = 1
    for idx in range(per_dimension):
        for dim in target:
            reverse = bool(reverse_every) and (idx % reverse_every == reverse_every - 1)
            items.append(
                Question(
                    id=qid,
                    text=f"{dim} statement #{idx}",
                    dimension=dim,  # type: ignore[arg-type]
                    reverse=reverse,
                )
            )
            qid += 1
    return items


def generated_payload(type_name: str = "The Test Pattern") -> dict:
    """A complete generator reply in the wire schema."""

    detail = {
        "summary": "Steady and deliberate.",
        "strengths": ["Focus"],
        "challenges": ["Patience"],
        "actionableTip": "Schedule breaks.",
    }
    return {
        "typeName": type_name,
        "summary": "A generated summary.",
        "strengths": ["Clarity", "Drive"],
        "weaknesses": ["Impatience"],
        "psychology": {
            "subconscious": "Seeks order.",
            "paradox": "Independent yet loyal.",
            "motivations": ["Mastery"],
            "fears": ["Chaos"],
        },
        "career": {"title": "Planner", "description": "Builds systems.", "roles": ["Architect"]},
        "lifestyle": {"hobbies": ["Chess"], "environment": "Quiet", "stressRelief": "Long walks"},
        "cognitiveFunctions": {
            "dominant": "Introverted Intuition",
            "auxiliary": "Extraverted Thinking",
            "tertiary": "Introverted Feeling",
            "inferior": "Extraverted Sensing",
            "explanation": "Generated explanation.",
        },
        "lifeInsights": {
            "work": detail,
            "friendships": detail,
            "relationships": detail,
            "stress": detail,
            "growth": "Practice presence.",
            "unhealthy": "Withdrawal.",
        },
    }


def generator_returning(text: str):
    async def _gen(scores, type_code):
        return text

    return _gen


def generator_raising(exc: Exception):
    async def _gen(scores, type_code):
        raise exc

    return _gen


@pytest.fixture
def synthetic_bank() -> list[Question]:
    return build_synthetic_bank()


@pytest.fixture
def payload_text() -> str:
    return json.dumps(generated_payload())
