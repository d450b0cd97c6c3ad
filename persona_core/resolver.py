"""Report resolution: one attempt at the generator, then the static table.

The generator is called at most once per resolution. There are no retries;
a slow or failing generator costs one timeout and the caller gets the static
report straight after.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

from . import config
from .llm_bridge import ReportGenerator
from .profiles import static_report
from .types import Report, TraitScores
from .validators import ReportSchemaError, parse_report_payload

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    value: Report


@dataclass(frozen=True)
class Err:
    reason: str
    detail: str = ""


GenerationResult = Union[Ok, Err]


async def attempt_generation(
    scores: TraitScores,
    type_code: str,
    generator: Optional[ReportGenerator],
    timeout: Optional[float] = None,
) -> GenerationResult:
    """Run the generator once and classify the outcome; never raises."""
    if generator is None:
        return Err("disabled")
    limit = config.timeout_sec(config.load_config()) if timeout is None else timeout
    try:
        raw = await asyncio.wait_for(generator(scores, type_code), timeout=limit)
    except asyncio.TimeoutError:
        return Err("timeout", f"no reply within {limit:.1f}s")
    except Exception as e:
        return Err("request_failed", f"{type(e).__name__}: {e}")
    try:
        return Ok(parse_report_payload(raw, type_code))
    except ReportSchemaError as e:
        return Err(e.reason, str(e))


@dataclass(frozen=True)
class Resolution:
    report: Report
    fallback_reason: Optional[str] = None


async def resolve_with_reason(
    scores: TraitScores,
    type_code: str,
    generator: Optional[ReportGenerator] = None,
    timeout: Optional[float] = None,
) -> Resolution:
    outcome = await attempt_generation(scores, type_code, generator, timeout)
    if isinstance(outcome, Ok):
        return Resolution(outcome.value)
    if outcome.reason != "disabled":
        log.warning("report generation failed for %s (%s) %s; using static report",
                    type_code, outcome.reason, outcome.detail)
    return Resolution(static_report(type_code), fallback_reason=outcome.reason)


async def resolve(
    scores: TraitScores,
    type_code: str,
    generator: Optional[ReportGenerator] = None,
    timeout: Optional[float] = None,
) -> Report:
    """Report for (scores, type_code); always returns a complete report."""
    return (await resolve_with_reason(scores, type_code, generator, timeout)).report
