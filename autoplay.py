# autoplay.py
from __future__ import annotations
import argparse, asyncio, json, logging, os, random
from typing import Optional
from persona_core.reporting import to_basic
from persona_core.session import AssessmentSession
from persona_core.typecode import decompose, is_valid_code
from persona_core.types import Question

# dimension -> TypeFlags attribute that means "second pole"
_FLAG_FOR = {"EI": "is_e", "SN": "is_s", "TF": "is_t", "JP": "is_j"}

def _value_for(q: Question, profile: str, rng: random.Random) -> int:
    if profile == "neutral":
        return 0
    if profile == "random":
        return rng.randint(-3, 3)
    flags = decompose(profile)
    # -3 (strongly agree) pushes toward the second pole on a forward-keyed item
    eff = -3 if getattr(flags, _FLAG_FOR[q.dimension]) else 3
    return -eff if q.reverse else eff

def _check_profile(profile: str) -> str:
    p = profile.strip()
    if p.lower() in ("neutral", "random"):
        return p.lower()
    if is_valid_code(p.upper()):
        return p.upper()
    raise argparse.ArgumentTypeError(f"profile must be neutral, random or a type code, got {profile!r}")

def run(profile: str, seed: Optional[int], backend: str) -> dict:
    rng = random.Random(seed or 1234)
    sess = AssessmentSession(generator=None) if backend == "none" else AssessmentSession()

    answered = 0
    for p in range(sess.total_pages):
        for q in sess.page(p):
            sess.answer(q.id, _value_for(q, profile, rng)); answered += 1
    if answered <= 0: raise RuntimeError("Driver answered 0 questions.")

    res = asyncio.run(sess.submit())
    if res is None: raise RuntimeError("Session reset while resolving.")
    return to_basic(res)

def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    ap = argparse.ArgumentParser()
    ap.add_argument("--profile", type=_check_profile, default="neutral",
                    help="neutral | random | a type code such as INTJ")
    ap.add_argument("--seed", type=int, default=1337)
    ap.add_argument("--llm", choices=["none", "azure"], default="none")
    a = ap.parse_args()
    if a.llm != "none":
        os.environ["LLM_BACKEND"] = a.llm
    print(json.dumps(run(a.profile, a.seed, backend=a.llm), indent=2))

if __name__ == "__main__":
    main()
