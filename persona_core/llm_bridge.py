from __future__ import annotations
import json, logging, time
from typing import Awaitable, Callable, Optional
from . import config
from .azure_cfg import client as azure_client, settings as azure_settings
from .types import TraitScores

log = logging.getLogger(__name__)

# (scores, type code) -> raw reply text
ReportGenerator = Callable[[TraitScores, str], Awaitable[str]]

_SYSTEM = ("You are a careful, empathetic psychometric analyst. "
           "Reply with ONLY one JSON object matching the requested schema. No prose, no markdown.")

_SCHEMA_HINT = {
    "typeName": "string, descriptive archetype name",
    "summary": "string",
    "strengths": ["string"],
    "weaknesses": ["string"],
    "psychology": {"subconscious": "string", "paradox": "string", "motivations": ["string"], "fears": ["string"]},
    "career": {"title": "string", "description": "string", "roles": ["string"]},
    "lifestyle": {"hobbies": ["string"], "environment": "string", "stressRelief": "string"},
    "cognitiveFunctions": {"dominant": "string", "auxiliary": "string", "tertiary": "string",
                           "inferior": "string", "explanation": "string"},
    "lifeInsights": {
        "work": {"summary": "string", "strengths": ["string"], "challenges": ["string"], "actionableTip": "string"},
        "friendships": "same shape as work",
        "relationships": "same shape as work",
        "stress": "same shape as work",
        "growth": "string",
        "unhealthy": "string",
    },
}


def backend_in_use() -> str:
    b = config.get_backend(config.load_config())
    return b or "none"


def build_prompt(scores: TraitScores, type_code: str) -> str:
    payload = {"scores": scores.to_dict(), "typeCode": type_code}
    return (
        "Perform a comprehensive psychometric analysis for a user with this profile:\n"
        f"{json.dumps(payload)}\n"
        "Scores run 0-100 and give the dominance of the second trait in each pair "
        "(Extraversion over Introversion, Sensing over Intuition, Thinking over Feeling, "
        "Judging over Perceiving).\n"
        "Be professional, psychologically insightful and empathetic, and reflect the nuances "
        "of this specific score distribution. Every field is required and must be non-empty.\n"
        f"Schema:\n{json.dumps(_SCHEMA_HINT, indent=1)}"
    )


async def _generate_azure(scores: TraitScores, type_code: str) -> str:
    s = azure_settings()
    t0 = time.time()
    async with azure_client(s) as cli:
        resp = await cli.chat.completions.create(
            model=s.deployment,
            messages=[{"role":"system","content":_SYSTEM},{"role":"user","content":build_prompt(scores, type_code)}],
            temperature=config.LLM_TEMPERATURE, max_tokens=config.LLM_MAX_TOKENS,
            response_format={"type": "json_object"},
        )
    log.info("generator reply for %s in %d ms", type_code, int((time.time()-t0)*1000))
    return resp.choices[0].message.content or ""


def default_generator(backend: str | None = None) -> Optional[ReportGenerator]:
    """Generator for the configured backend, or None when reports come from the static table."""
    b = backend if backend is not None else backend_in_use()
    if b == "azure":
        return _generate_azure
    return None
