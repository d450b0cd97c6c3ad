from __future__ import annotations

import asyncio
import dataclasses

import pytest

from persona_core.cognitive import FUNCTION_NAMES, derive_stack
from persona_core.profiles import PROFILES, generic_report, static_report
from persona_core.session import AssessmentSession
from persona_core.typecode import ALL_TYPE_CODES


def test_table_covers_every_code():
    assert set(PROFILES) == set(ALL_TYPE_CODES)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PROFILES["INTJ"] = PROFILES["ENFP"]  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        PROFILES["INTJ"].type_name = "changed"  # type: ignore[misc]


@pytest.mark.parametrize("code", ALL_TYPE_CODES)
def test_static_report_is_complete(code):
    r = static_report(code)
    assert r.type_code == code
    assert r.source == "static"
    assert r.type_name and r.summary
    assert r.strengths and r.weaknesses
    assert r.psychology.motivations and r.psychology.fears
    assert r.career.roles
    assert r.lifestyle.hobbies and r.lifestyle.stress_relief
    for d in (r.life_insights.work, r.life_insights.friendships,
              r.life_insights.relationships, r.life_insights.stress):
        assert d.summary and d.strengths and d.challenges and d.actionable_tip
    assert r.life_insights.growth and r.life_insights.unhealthy


@pytest.mark.parametrize("code", ALL_TYPE_CODES)
def test_report_functions_match_derived_stack(code):
    st = derive_stack(code)
    cf = static_report(code).cognitive_functions
    assert cf.dominant == FUNCTION_NAMES[st.dominant]
    assert cf.auxiliary == FUNCTION_NAMES[st.auxiliary]
    assert cf.tertiary == FUNCTION_NAMES[st.tertiary]
    assert cf.inferior == FUNCTION_NAMES[st.inferior]


def test_generic_template_follows_letters():
    r = generic_report("ESTJ")
    assert r.source == "template"
    assert r.type_name == "The Dynamic (ESTJ)"
    assert "Analytical Rigor" in r.strengths
    assert "Rigidity" in r.weaknesses
    p = generic_report("INFP")
    assert "Empathy" in p.strengths
    assert "Indecision" in p.weaknesses


def test_missing_code_falls_back_to_template(monkeypatch):
    import persona_core.profiles as profiles

    monkeypatch.setattr(profiles, "PROFILES", {})
    r = profiles.static_report("INTJ")
    assert r.source == "template"
    assert r.type_code == "INTJ"


def test_wire_form_is_camel_case():
    d = static_report("INTJ").to_dict()
    assert d["typeCode"] == "INTJ"
    assert "stressRelief" in d["lifestyle"]
    assert "actionableTip" in d["lifeInsights"]["work"]
    assert d["cognitiveFunctions"]["dominant"] == "Introverted Intuition"


def test_resolved_report_cannot_change_the_table():
    before = static_report("INFP").to_dict()
    res = asyncio.run(AssessmentSession(generator=None).submit())
    assert res.report.type_code == "INFP"

    r = res.report
    for seq in (r.strengths, r.weaknesses, r.psychology.motivations, r.psychology.fears,
                r.career.roles, r.lifestyle.hobbies,
                r.life_insights.work.strengths, r.life_insights.work.challenges):
        with pytest.raises(AttributeError):
            seq.append("INJECTED")  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            seq.clear()  # type: ignore[attr-defined]

    assert static_report("INFP").to_dict() == before
    assert "INJECTED" not in static_report("INFP").strengths


def test_wire_form_lists_are_copies():
    d = static_report("ENTJ").to_dict()
    d["strengths"].append("INJECTED")
    d["career"]["roles"].clear()
    assert "INJECTED" not in static_report("ENTJ").strengths
    assert static_report("ENTJ").career.roles
