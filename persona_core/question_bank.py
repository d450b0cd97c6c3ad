from __future__ import annotations
import json, importlib.resources as ir
from typing import Dict, Iterable, List
from .types import Question
DIMENSIONS = ["EI","SN","TF","JP"]
# (first pole, second pole); scores measure the second pole.
DIMENSION_POLES: Dict[str, tuple[str, str]] = {
    "EI": ("Introversion", "Extraversion"),
    "SN": ("Intuition", "Sensing"),
    "TF": ("Feeling", "Thinking"),
    "JP": ("Perceiving", "Judging"),
}
LIKERT_LABELS: Dict[int, str] = {
    -3: "Strongly agree", -2: "Agree", -1: "Slightly agree", 0: "Neutral",
    1: "Slightly disagree", 2: "Disagree", 3: "Strongly disagree",
}
def load_bank() -> List[Question]:
    data = ir.files(__package__).joinpath("data/bank.json").read_text(encoding="utf-8")
    raw = json.loads(data)
    return [Question(**r) for r in raw]
def index_bank(bank: Iterable[Question]) -> Dict[int, Question]:
    return {q.id: q for q in bank}
