from __future__ import annotations
from dataclasses import dataclass
from itertools import product
from typing import Tuple
from .config import TYPE_THRESHOLD
from .types import TraitScores

# (second pole, first pole) letters per dimension, in code order.
_LETTERS: Tuple[Tuple[str, str], ...] = (("E","I"), ("S","N"), ("T","F"), ("J","P"))

ALL_TYPE_CODES: Tuple[str, ...] = tuple("".join(p) for p in product("EI", "SN", "TF", "JP"))


@dataclass(frozen=True)
class TypeFlags:
    is_e: bool; is_s: bool; is_t: bool; is_j: bool


def _letter(score: int, pair: Tuple[str, str]) -> str:
    # exactly on the threshold resolves to the first pole
    return pair[0] if score > TYPE_THRESHOLD else pair[1]


def classify(scores: TraitScores) -> str:
    values = (scores.extraversion, scores.sensing, scores.thinking, scores.judging)
    return "".join(_letter(v, pair) for v, pair in zip(values, _LETTERS))


def is_valid_code(code: object) -> bool:
    if not isinstance(code, str) or len(code) != 4:
        return False
    return all(ch in pair for ch, pair in zip(code, _LETTERS))


def decompose(code: str) -> TypeFlags:
    if not is_valid_code(code):
        raise ValueError(f"not a type code: {code!r}")
    return TypeFlags(is_e=code[0] == "E", is_s=code[1] == "S", is_t=code[2] == "T", is_j=code[3] == "J")
