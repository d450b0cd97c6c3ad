# persona_core/session.py
from __future__ import annotations
import asyncio, logging
from typing import Dict, Iterable, List, Optional

from .config import FALLBACK_DELAY_SEC, LIKERT_MAX, LIKERT_MIN, QUESTIONS_PER_PAGE
from .cognitive import derive_stack
from .insights import dynamic_insights
from .llm_bridge import ReportGenerator, default_generator
from .question_bank import index_bank, load_bank
from .resolver import resolve_with_reason
from .scoring import ResponseSet, aggregate, round_half_up
from .typecode import classify
from .types import AssessmentResult, CognitiveStack, Question, Report, SessionPhase, TraitScores

log = logging.getLogger(__name__)

_DEFAULT = object()


class SessionStateError(RuntimeError):
    """Operation not allowed in the session's current phase."""


class AssessmentSession:
    """
    One respondent's assessment, as a small state machine:

        collecting --submit--> resolving --> complete
        any phase  --reset---> reset --answer--> collecting

    Scores and the type code are computed before the report is requested, and
    answers are refused while a report is resolving. reset() bumps a generation
    stamp; a resolution that finishes under an older stamp is dropped.
    """

    def __init__(self, bank: Optional[Iterable[Question]] = None, generator: object = _DEFAULT):
        self.questions: List[Question] = list(bank) if bank is not None else load_bank()
        self._id_to_question: Dict[int, Question] = index_bank(self.questions)
        self.generator: Optional[ReportGenerator] = (
            default_generator() if generator is _DEFAULT else generator  # type: ignore[assignment]
        )
        self.responses = ResponseSet()
        self.phase: SessionPhase = "collecting"
        self.generation = 0
        self.scores: Optional[TraitScores] = None
        self.type_code: Optional[str] = None
        self.stack: Optional[CognitiveStack] = None
        self.report: Optional[Report] = None
        self.result: Optional[AssessmentResult] = None

    # ---- paging ----
    @property
    def total_pages(self) -> int:
        return -(-len(self.questions) // QUESTIONS_PER_PAGE)

    def page(self, n: int) -> List[Question]:
        if n < 0 or n >= max(1, self.total_pages):
            raise IndexError(f"page {n} out of range (0..{self.total_pages - 1})")
        return self.questions[n * QUESTIONS_PER_PAGE:(n + 1) * QUESTIONS_PER_PAGE]

    def page_complete(self, n: int) -> bool:
        return all(q.id in self.responses for q in self.page(n))

    def progress(self) -> int:
        """Percent of questions answered."""
        if not self.questions:
            return 0
        return round_half_up(100 * len(self.responses), len(self.questions))

    @property
    def is_complete(self) -> bool:
        return all(q.id in self.responses for q in self.questions)

    # ---- collection ----
    def answer(self, question_id: int, value: int) -> None:
        if self.phase in ("resolving", "complete"):
            raise SessionStateError(f"cannot answer while {self.phase}")
        if question_id not in self._id_to_question:
            raise ValueError(f"unknown question id {question_id}")
        v = int(value)
        if not LIKERT_MIN <= v <= LIKERT_MAX:
            raise ValueError(f"value {v} outside [{LIKERT_MIN}, {LIKERT_MAX}]")
        self.responses.record(question_id, v)
        self.phase = "collecting"

    # ---- resolution ----
    async def submit(self) -> Optional[AssessmentResult]:
        """
        Score, classify and resolve the report. Returns None when the session
        was reset while the report was resolving.
        """
        if self.phase in ("resolving", "complete"):
            raise SessionStateError(f"cannot submit while {self.phase}")
        scores = aggregate(self.responses, self.questions)
        code = classify(scores)
        stack = derive_stack(code)
        self.scores, self.type_code, self.stack = scores, code, stack
        self.phase = "resolving"
        stamp = self.generation

        resolution = await resolve_with_reason(scores, code, self.generator)
        if resolution.fallback_reason not in (None, "disabled") and FALLBACK_DELAY_SEC > 0:
            await asyncio.sleep(FALLBACK_DELAY_SEC)

        if stamp != self.generation:
            log.info("dropping stale report for %s (generation %d, now %d)", code, stamp, self.generation)
            return None
        result = AssessmentResult(
            scores=scores,
            type_code=code,
            stack=stack,
            report=resolution.report,
            insights=dynamic_insights(scores),
            fallback_reason=resolution.fallback_reason,
        )
        self.report = resolution.report
        self.result = result
        self.phase = "complete"
        return result

    def reset(self) -> None:
        self.generation += 1
        self.responses.clear()
        self.scores = self.type_code = self.stack = None
        self.report = None
        self.result = None
        self.phase = "reset"

    def status(self) -> Dict[str, object]:
        return {
            "phase": self.phase,
            "generation": self.generation,
            "answered": len(self.responses),
            "total": len(self.questions),
            "progress": self.progress(),
            "complete": self.is_complete,
        }
