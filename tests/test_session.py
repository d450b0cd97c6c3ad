from __future__ import annotations

import asyncio
import json

import pytest

import persona_core.session as session_mod
from persona_core.question_bank import load_bank
from persona_core.session import AssessmentSession, SessionStateError
from tests.conftest import build_synthetic_bank, generated_payload, generator_returning


def _answer_all(sess: AssessmentSession, value: int) -> None:
    for q in sess.questions:
        sess.answer(q.id, value)


def test_full_bank_neutral_run_is_infp():
    sess = AssessmentSession(generator=None)
    assert len(sess.questions) == 120
    _answer_all(sess, 0)
    res = asyncio.run(sess.submit())
    assert res.type_code == "INFP"
    assert res.scores.to_dict() == {"Extraversion": 50, "Sensing": 50, "Thinking": 50, "Judging": 50}
    assert res.stack.labels() == ["Fi", "Ne", "Si", "Te"]
    assert res.report.type_code == "INFP"
    assert res.fallback_reason == "disabled"
    assert sess.phase == "complete"


def test_extravert_answers_flip_first_letter():
    bank = load_bank()
    sess = AssessmentSession(bank=bank, generator=None)
    for q in bank:
        if q.dimension == "EI":
            sess.answer(q.id, 3 if q.reverse else -3)
        else:
            sess.answer(q.id, 0)
    res = asyncio.run(sess.submit())
    assert res.scores.extraversion == 100
    assert res.type_code == "ENFP"


def test_forward_ei_agreement_gives_extravert():
    sess = AssessmentSession(bank=build_synthetic_bank(reverse_every=0), generator=None)
    for q in sess.questions:
        if q.dimension == "EI":
            sess.answer(q.id, -3)
    res = asyncio.run(sess.submit())
    assert res.scores.extraversion == 100
    assert res.type_code[0] == "E"


def test_answer_upserts():
    sess = AssessmentSession(bank=build_synthetic_bank(), generator=None)
    q = sess.questions[0]
    sess.answer(q.id, -3)
    sess.answer(q.id, 3)
    assert len(sess.responses) == 1
    assert sess.responses.get(q.id) == 3


def test_answer_validation():
    sess = AssessmentSession(bank=build_synthetic_bank(), generator=None)
    with pytest.raises(ValueError):
        sess.answer(9999, 0)
    with pytest.raises(ValueError):
        sess.answer(sess.questions[0].id, 4)


def test_no_answers_or_resubmit_while_complete():
    sess = AssessmentSession(bank=build_synthetic_bank(), generator=None)
    asyncio.run(sess.submit())
    with pytest.raises(SessionStateError):
        sess.answer(sess.questions[0].id, 1)
    with pytest.raises(SessionStateError):
        asyncio.run(sess.submit())


def test_reset_clears_and_reopens():
    sess = AssessmentSession(bank=build_synthetic_bank(), generator=None)
    _answer_all(sess, -3)
    asyncio.run(sess.submit())
    sess.reset()
    assert sess.phase == "reset"
    assert len(sess.responses) == 0
    assert sess.result is None and sess.report is None and sess.type_code is None
    sess.answer(sess.questions[0].id, 0)
    assert sess.phase == "collecting"


def test_reset_during_resolution_drops_stale_report():
    async def scenario():
        gate = asyncio.Event()

        async def slow(scores, code):
            await gate.wait()
            return json.dumps(generated_payload())

        sess = AssessmentSession(bank=build_synthetic_bank(), generator=slow)
        _answer_all(sess, 0)
        task = asyncio.create_task(sess.submit())
        await asyncio.sleep(0)
        assert sess.phase == "resolving"
        with pytest.raises(SessionStateError):
            sess.answer(sess.questions[0].id, 1)
        sess.reset()
        gate.set()
        return sess, await task

    sess, res = asyncio.run(scenario())
    assert res is None
    assert sess.phase == "reset"
    assert sess.report is None


def test_generated_report_used_when_generator_works():
    gen = generator_returning(json.dumps(generated_payload("Generated")))
    sess = AssessmentSession(bank=build_synthetic_bank(), generator=gen)
    res = asyncio.run(sess.submit())
    assert res.report.source == "generated"
    assert res.report.type_name == "Generated"
    assert res.fallback_reason is None


def test_fallback_delay_applies_only_on_failure(monkeypatch):
    slept = []

    async def fake_sleep(sec):
        slept.append(sec)

    monkeypatch.setattr(session_mod, "FALLBACK_DELAY_SEC", 1.5)
    monkeypatch.setattr(session_mod.asyncio, "sleep", fake_sleep)

    sess = AssessmentSession(bank=build_synthetic_bank(), generator=None)
    asyncio.run(sess.submit())
    assert slept == []

    sess = AssessmentSession(bank=build_synthetic_bank(), generator=generator_returning("nope"))
    res = asyncio.run(sess.submit())
    assert res.fallback_reason == "invalid_json"
    assert slept == [1.5]


def test_paging_and_progress(monkeypatch):
    monkeypatch.setattr(session_mod, "QUESTIONS_PER_PAGE", 5)
    sess = AssessmentSession(bank=build_synthetic_bank(per_dimension=3), generator=None)
    assert len(sess.questions) == 12
    assert sess.total_pages == 3
    assert len(sess.page(0)) == 5
    assert len(sess.page(2)) == 2
    with pytest.raises(IndexError):
        sess.page(3)

    for q in sess.page(0):
        sess.answer(q.id, 1)
    assert sess.page_complete(0)
    assert not sess.page_complete(1)
    assert sess.progress() == 42  # 5/12 = 41.67
    assert not sess.is_complete
    for q in sess.questions:
        sess.answer(q.id, 1)
    assert sess.progress() == 100
    assert sess.is_complete


def test_result_wire_form():
    sess = AssessmentSession(bank=build_synthetic_bank(), generator=None)
    d = asyncio.run(sess.submit()).to_dict()
    assert set(d) == {"scores", "typeCode", "stack", "report", "insights", "fallbackReason"}
    assert d["insights"][0]["title"].startswith("Dominant Vector: ")
