from __future__ import annotations

import importlib
import sys

from fastapi.testclient import TestClient


def _reload_app(monkeypatch):
    monkeypatch.delenv("LLM_BACKEND", raising=False)
    if "api.app" in sys.modules:
        importlib.reload(sys.modules["api.app"])
    else:
        import api.app  # noqa: F401
    return sys.modules["api.app"]


def _start(client) -> str:
    r = client.post("/session/start", json={"llm": "none"})
    assert r.status_code == 200
    return r.json()["session_id"]


def test_health_and_questions(monkeypatch):
    app_module = _reload_app(monkeypatch)
    client = TestClient(app_module.app)

    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json()["llm_backend"] == "none"

    body = client.get("/questions").json()
    assert len(body["questions"]) == 120
    assert "reverse" not in body["questions"][0]
    assert body["scale"]["-3"] == "Strongly agree"


def test_full_flow_neutral(monkeypatch):
    app_module = _reload_app(monkeypatch)
    client = TestClient(app_module.app)
    sid = _start(client)

    first = client.get(f"/session/{sid}/page/0").json()
    assert len(first["questions"]) == 10
    assert first["complete"] is False

    for q in client.get("/questions").json()["questions"]:
        r = client.post(f"/session/{sid}/answer", json={"question_id": q["id"], "value": 0})
        assert r.status_code == 200
    assert client.get(f"/session/{sid}/page/0").json()["progress"] == 100

    res = client.post(f"/session/{sid}/submit").json()
    assert res["typeCode"] == "INFP"
    assert res["scores"]["Extraversion"] == 50
    assert res["stack"]["dominant"] == "Fi"
    assert res["report"]["source"] == "static"
    assert res["fallbackReason"] == "disabled"

    assert client.get(f"/session/{sid}/result").json()["typeCode"] == "INFP"

    # complete sessions refuse answers until reset
    r = client.post(f"/session/{sid}/answer", json={"question_id": 1, "value": 1})
    assert r.status_code == 409
    assert client.post(f"/session/{sid}/reset").json()["status"]["phase"] == "reset"
    assert client.get(f"/session/{sid}/result").status_code == 409


def test_answer_validation(monkeypatch):
    app_module = _reload_app(monkeypatch)
    client = TestClient(app_module.app)
    sid = _start(client)

    assert client.post(f"/session/{sid}/answer", json={"question_id": 1, "value": 7}).status_code == 422
    assert client.post(f"/session/{sid}/answer", json={"question_id": 999, "value": 0}).status_code == 422
    assert client.post("/session/nope/answer", json={"question_id": 1, "value": 0}).status_code == 404
    assert client.get(f"/session/{sid}/page/99").status_code == 404


def test_type_stack_endpoint(monkeypatch):
    app_module = _reload_app(monkeypatch)
    client = TestClient(app_module.app)

    body = client.get("/types/intj/stack").json()
    assert body["typeCode"] == "INTJ"
    assert [body["dominant"], body["auxiliary"], body["tertiary"], body["inferior"]] == ["Ni", "Te", "Fi", "Se"]
    assert body["names"]["Ni"] == "Introverted Intuition"
    assert client.get("/types/XXXX/stack").status_code == 404


def test_azure_requested_without_settings(monkeypatch, tmp_path):
    app_module = _reload_app(monkeypatch)
    monkeypatch.chdir(tmp_path)
    for k in ("AZURE_OPENAI_ENDPOINT", "AZURE_OPENAI_API_KEY", "AZURE_OPENAI_API_VERSION", "AZURE_OPENAI_DEPLOYMENT"):
        monkeypatch.delenv(k, raising=False)
    client = TestClient(app_module.app)
    assert client.post("/session/start", json={"llm": "azure"}).status_code == 500
    assert client.post("/session/start", json={"llm": "ollama"}).status_code == 422
