# persona_core/reporting.py
from __future__ import annotations
from typing import Any, Dict, List

from .cognitive import FUNCTION_NAMES
from .question_bank import DIMENSION_POLES
from .types import AssessmentResult

# -------- utils: make any object JSON-safe ----------
def to_basic(x: Any) -> Any:
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, dict):
        return {str(k): to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set)):
        return [to_basic(v) for v in x]
    if hasattr(x, "to_dict"):
        return to_basic(x.to_dict())
    if hasattr(x, "__dict__"):
        return to_basic(vars(x))
    return str(x)

# -------- plain-text rendering for terminals ----------
def _bar(value: int, width: int = 20) -> str:
    filled = int(round(value / 100 * width))
    return "#" * filled + "." * (width - filled)

def _bullets(items: List[str]) -> str:
    return "\n".join(f"  - {s}" for s in items)

def format_result(result: AssessmentResult) -> str:
    r = result.report
    lines: List[str] = [f"{result.type_code}: {r.type_name}", "", r.summary, ""]
    by_dim: Dict[str, int] = result.scores.by_dimension()
    for dim, (left, right) in DIMENSION_POLES.items():
        v = by_dim[dim]
        lines.append(f"  {left:>12} [{_bar(v)}] {right:<12} {v:3d}")
    st = result.stack
    lines += ["", "Cognitive stack:"]
    for slot, label in zip(("dominant", "auxiliary", "tertiary", "inferior"), st.labels()):
        lines.append(f"  {slot:<9} {label}  {FUNCTION_NAMES[label]}")
    lines += ["", st.explanation, "", "Strengths:", _bullets(r.strengths), "Weaknesses:", _bullets(r.weaknesses)]
    lines += ["", f"Career: {r.career.title} ({', '.join(r.career.roles)})", r.career.description]
    for ins in result.insights:
        lines += ["", f"{ins.title}", ins.content]
    if result.fallback_reason and result.fallback_reason != "disabled":
        lines += ["", f"(static report used: generator {result.fallback_reason})"]
    return "\n".join(lines)
