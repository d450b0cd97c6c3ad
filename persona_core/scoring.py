from __future__ import annotations
from typing import Dict, Iterable, Iterator, Mapping, Union
from .config import LIKERT_MIN, LIKERT_MAX, NEUTRAL_SCORE
from .question_bank import DIMENSIONS, index_bank
from .types import Question, Response, TraitScores


def _clamp_likert(value: int) -> int:
    v = int(value)
    if v < LIKERT_MIN: return LIKERT_MIN
    if v > LIKERT_MAX: return LIKERT_MAX
    return v


def _effective(question: Question, value: int) -> int:
    v = _clamp_likert(value)
    return -v if question.reverse else v


def contribution(question: Question, value: int) -> float:
    """
    Per-response share of the second pole, in [0, 100].
    Agreement (-3) maps to 100 and disagreement (+3) to 0, after reverse keying.
    """
    return ((LIKERT_MAX - _effective(question, value)) / (LIKERT_MAX - LIKERT_MIN)) * 100


def round_half_up(numerator: int, denominator: int) -> int:
    return (2 * numerator + denominator) // (2 * denominator)


class ResponseSet:
    """Responses keyed by question id; recording an id twice overwrites the first value."""

    def __init__(self, responses: Iterable[Response] = ()):
        self._values: Dict[int, int] = {}
        for r in responses:
            self.record(r.question_id, r.value)

    def record(self, question_id: int, value: int) -> None:
        self._values[int(question_id)] = int(value)

    def get(self, question_id: int) -> int | None:
        return self._values.get(int(question_id))

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Response]:
        for qid, value in self._values.items():
            yield Response(question_id=qid, value=value)

    def as_dict(self) -> Dict[int, int]:
        return dict(self._values)


ResponsesLike = Union[ResponseSet, Mapping[int, int], Iterable[Response]]


def _as_value_map(responses: ResponsesLike) -> Dict[int, int]:
    if isinstance(responses, ResponseSet):
        return responses.as_dict()
    if isinstance(responses, Mapping):
        return {int(k): int(v) for k, v in responses.items()}
    return ResponseSet(responses).as_dict()


def aggregate(responses: ResponsesLike, question_bank: Iterable[Question]) -> TraitScores:
    """
    Fold responses into the four trait scores.
    Responses citing unknown question ids are dropped. A dimension with no
    responses scores NEUTRAL_SCORE. Means are rounded half-up; the sums are kept
    as integer scale steps so the rounding is exact.
    """
    by_id = index_bank(question_bank)
    span = LIKERT_MAX - LIKERT_MIN
    steps = {d: 0 for d in DIMENSIONS}
    counts = {d: 0 for d in DIMENSIONS}
    for qid, value in _as_value_map(responses).items():
        q = by_id.get(qid)
        if q is None or q.dimension not in steps:
            continue
        steps[q.dimension] += LIKERT_MAX - _effective(q, value)
        counts[q.dimension] += 1

    out: Dict[str, int] = {}
    for d in DIMENSIONS:
        n = counts[d]
        out[d] = round_half_up(100 * steps[d], span * n) if n else NEUTRAL_SCORE
    return TraitScores(extraversion=out["EI"], sensing=out["SN"], thinking=out["TF"], judging=out["JP"])
