from __future__ import annotations
import asyncio, datetime, json, logging, os
from persona_core.question_bank import LIKERT_LABELS
from persona_core.reporting import format_result, to_basic
from persona_core.session import AssessmentSession
def ask(prompt: str) -> int:
    print(prompt)
    for k, label in LIKERT_LABELS.items(): print(f"  [{k:+d}] {label}")
    while True:
        v = input("Your choice (-3..3): ").strip()
        try: n = int(v)
        except ValueError: n = None
        if n is not None and -3 <= n <= 3: return n
        print("Enter a whole number from -3 to 3.")
def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    print("Personality Assessment")
    session = AssessmentSession()
    for p in range(session.total_pages):
        print(f"\n--- Page {p + 1}/{session.total_pages} ({session.progress()}% done) ---")
        for q in session.page(p):
            session.answer(q.id, ask(f"\n{q.text}"))
    res = asyncio.run(session.submit())
    print("\n" + format_result(res))
    os.makedirs("reports", exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join("reports", f"assessment_{res.type_code}_{ts}.json")
    with open(path, "w", encoding="utf-8") as f: json.dump(to_basic(res), f, indent=2)
    print(f"\nDone. Result saved to: {path}")
if __name__ == "__main__": main()
