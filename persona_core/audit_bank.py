from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Iterable

from . import config
from .question_bank import DIMENSIONS, load_bank
from .types import Question


def _blank_dimension() -> dict[str, int]:
    return {"items": 0, "reverse": 0}


def audit_items(items: Iterable[Question]) -> dict[str, object]:
    coverage: dict[str, dict[str, int]] = {dim: _blank_dimension() for dim in DIMENSIONS}
    ids: Counter[int] = Counter()
    unknown: list[int] = []
    empty_text: list[int] = []

    for q in items:
        ids[q.id] += 1
        if not (q.text or "").strip():
            empty_text.append(q.id)
        if q.dimension not in coverage:
            unknown.append(q.id)
            continue
        coverage[q.dimension]["items"] += 1
        if q.reverse:
            coverage[q.dimension]["reverse"] += 1

    warnings: list[str] = []
    duplicates = sorted(qid for qid, n in ids.items() if n > 1)
    if duplicates:
        warnings.append(f"duplicate question ids: {duplicates}")
    if unknown:
        warnings.append(f"questions with unknown dimension: {sorted(unknown)}")
    if empty_text:
        warnings.append(f"questions with empty text: {sorted(empty_text)}")

    for dim, data in coverage.items():
        n = data["items"]
        if n < config.BANK_MIN_PER_DIMENSION:
            warnings.append(f"{dim} has {n} items (<{config.BANK_MIN_PER_DIMENSION})")
        if n:
            share = data["reverse"] / n
            if share < config.BANK_MIN_REVERSE_SHARE or share > config.BANK_MAX_REVERSE_SHARE:
                warnings.append(
                    f"{dim} reverse-keyed share {share:.2f} outside "
                    f"[{config.BANK_MIN_REVERSE_SHARE:.2f}, {config.BANK_MAX_REVERSE_SHARE:.2f}]"
                )

    totals = {"items": sum(ids.values()), "reverse": sum(d["reverse"] for d in coverage.values())}
    return {"coverage": coverage, "warnings": warnings, "totals": totals}


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[str, int]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Bank Coverage ===")
    for dim in DIMENSIONS:
        data = coverage[dim]
        print(f"  {dim}: items={data['items']:3d} reverse={data['reverse']:3d}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    print("\nTotals:", summary["totals"])


def write_summary(summary: dict[str, object], path: Path = Path("/tmp/bank_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(_argv: list[str] | None = None) -> int:
    items = load_bank()
    summary = audit_items(items)
    print_report(summary)
    write_summary(summary)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
