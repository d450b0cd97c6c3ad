from __future__ import annotations

import asyncio
import json

import pytest

import autoplay
from persona_core.reporting import format_result, to_basic
from persona_core.session import AssessmentSession
from persona_core.typecode import ALL_TYPE_CODES


@pytest.mark.parametrize("code", ALL_TYPE_CODES)
def test_autoplay_reaches_target_type(code):
    out = autoplay.run(code, seed=1, backend="none")
    assert out["typeCode"] == code
    assert out["report"]["typeCode"] == code


def test_autoplay_neutral_and_random_are_json_safe():
    assert autoplay.run("neutral", seed=1, backend="none")["typeCode"] == "INFP"
    out = autoplay.run("random", seed=7, backend="none")
    assert out["typeCode"] in ALL_TYPE_CODES
    json.dumps(out)


def test_format_result_mentions_stack_and_type():
    sess = AssessmentSession(generator=None)
    res = asyncio.run(sess.submit())
    text = format_result(res)
    assert text.startswith("INFP: ")
    assert "Introverted Feeling" in text
    assert "Dominant Vector" in text
    assert to_basic(res)["typeCode"] == "INFP"
