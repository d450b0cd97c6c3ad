from __future__ import annotations

from pathlib import Path

import persona_core.audit_bank as audit_bank
from persona_core import config
from persona_core.question_bank import load_bank
from persona_core.types import Question
from tests.conftest import build_synthetic_bank


def test_shipped_bank_is_clean():
    summary = audit_bank.audit_items(load_bank())
    assert summary["warnings"] == []
    assert summary["totals"]["items"] == 120
    for dim in ("EI", "SN", "TF", "JP"):
        assert summary["coverage"][dim]["items"] == 30


def test_audit_flags_sparse_dimensions(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "BANK_MIN_PER_DIMENSION", 5, raising=False)

    bank = build_synthetic_bank(dimensions=["EI", "SN"], per_dimension=6)

    summary = audit_bank.audit_items(bank)
    joined = "\n".join(summary["warnings"])
    assert "TF has 0 items" in joined
    assert "JP has 0 items" in joined
    assert "EI has" not in joined

    outfile = tmp_path / "bank_audit.json"
    text = audit_bank.write_summary(summary, path=outfile)
    assert outfile.read_text(encoding="utf-8").strip() == text


def test_audit_flags_reverse_share(monkeypatch):
    monkeypatch.setattr(config, "BANK_MIN_PER_DIMENSION", 0, raising=False)
    bank = build_synthetic_bank(dimensions=["EI"], per_dimension=4, reverse_every=0)
    summary = audit_bank.audit_items(bank)
    assert any("EI reverse-keyed share 0.00" in w for w in summary["warnings"])


def test_audit_flags_duplicates_and_unknown_dimension(monkeypatch):
    monkeypatch.setattr(config, "BANK_MIN_PER_DIMENSION", 0, raising=False)
    items = [
        Question(id=1, text="a", dimension="EI"),
        Question(id=1, text="b", dimension="EI", reverse=True),
        Question(id=2, text="c", dimension="XY"),  # type: ignore[arg-type]
    ]
    summary = audit_bank.audit_items(items)
    assert any("duplicate question ids: [1]" in w for w in summary["warnings"])
    assert any("unknown dimension: [2]" in w for w in summary["warnings"])


def test_main_returns_warning_exit(monkeypatch, capsys):
    monkeypatch.setattr(config, "BANK_MIN_PER_DIMENSION", 10, raising=False)

    bank = build_synthetic_bank(dimensions=["EI"], per_dimension=2)
    monkeypatch.setattr(audit_bank, "load_bank", lambda: bank)

    exit_code = audit_bank.main([])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "EI" in captured.out
    assert Path("/tmp/bank_audit.json").exists()
