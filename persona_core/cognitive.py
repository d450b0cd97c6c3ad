"""Jungian function stack for a type code.

The J/P letter names the attitude of the extraverted function: a J type
extraverts its judging function (T/F) and introverts its perceiving one,
a P type the other way round. Extraverts lead with the extraverted
function, introverts with the introverted one; the lower half of the stack
mirrors the upper half through OPPOSITES.
"""
from __future__ import annotations
from typing import Dict, Tuple
from .types import CognitiveStack, CognitiveSummary
from .typecode import decompose

FUNCTION_NAMES: Dict[str, str] = {
    "Te": "Extraverted Thinking", "Ti": "Introverted Thinking",
    "Fe": "Extraverted Feeling", "Fi": "Introverted Feeling",
    "Se": "Extraverted Sensing", "Si": "Introverted Sensing",
    "Ne": "Extraverted Intuition", "Ni": "Introverted Intuition",
}

OPPOSITES: Dict[str, str] = {
    "Te": "Fi", "Ti": "Fe", "Fe": "Ti", "Fi": "Te",
    "Se": "Ni", "Si": "Ne", "Ne": "Si", "Ni": "Se",
}


def opposite(label: str) -> str:
    return OPPOSITES[label]


def is_introverted(label: str) -> bool:
    return label.endswith("i")


def _slot_functions(code: str) -> Tuple[str, str]:
    f = decompose(code)
    judging = ("T" if f.is_t else "F") + ("e" if f.is_j else "i")
    perceiving = ("S" if f.is_s else "N") + ("i" if f.is_j else "e")
    return judging, perceiving


def _explain(dom: str, aux: str) -> str:
    lens = "internal reflection" if is_introverted(dom) else "external action"
    return (f"Your mental hierarchy is governed by {FUNCTION_NAMES[dom]}, leading you to process "
            f"reality through a lens of {lens}. This is balanced by {FUNCTION_NAMES[aux]}, "
            f"providing you with a reliable secondary perspective.")


def derive_stack(code: str) -> CognitiveStack:
    """Dominant, auxiliary, tertiary and inferior functions for `code`.

    Raises ValueError when `code` is not one of the 16 type codes.
    """
    judging, perceiving = _slot_functions(code)
    f = decompose(code)
    if f.is_e == f.is_j:
        # EJ and IP lead with the judging function
        dom, aux = judging, perceiving
    else:
        dom, aux = perceiving, judging
    return CognitiveStack(
        dominant=dom,  # type: ignore[arg-type]
        auxiliary=aux,  # type: ignore[arg-type]
        tertiary=opposite(aux),  # type: ignore[arg-type]
        inferior=opposite(dom),  # type: ignore[arg-type]
        explanation=_explain(dom, aux),
    )


def summarize(stack: CognitiveStack) -> CognitiveSummary:
    return CognitiveSummary(
        dominant=FUNCTION_NAMES[stack.dominant],
        auxiliary=FUNCTION_NAMES[stack.auxiliary],
        tertiary=FUNCTION_NAMES[stack.tertiary],
        inferior=FUNCTION_NAMES[stack.inferior],
        explanation=stack.explanation,
    )
