from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import logging, uuid, typing as t

from persona_core.azure_cfg import is_configured as azure_configured
from persona_core.cognitive import FUNCTION_NAMES, derive_stack
from persona_core.config import LIKERT_MAX, LIKERT_MIN, QUESTIONS_PER_PAGE
from persona_core.llm_bridge import backend_in_use, default_generator
from persona_core.question_bank import LIKERT_LABELS, load_bank
from persona_core.session import AssessmentSession, SessionStateError
from persona_core.typecode import is_valid_code
from persona_core.types import Question

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
log = logging.getLogger(__name__)

SESS: dict[str, AssessmentSession] = {}

app = FastAPI(title="Persona Assessment API")

@app.get("/")
def root():
    return {"status": "ok", "service": "persona-assessment-api"}

ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class StartReq(BaseModel):
    llm: str | None = None   # "none" | "azure"; None follows server config

class AnswerReq(BaseModel):
    question_id: int
    value: int = Field(ge=LIKERT_MIN, le=LIKERT_MAX)

# ---- Helpers ----
def _serialize_question(q: Question) -> dict[str, t.Any]:
    # reverse keying stays server-side
    return {"id": q.id, "text": q.text, "dimension": q.dimension}

def _get(sid: str) -> AssessmentSession:
    sess = SESS.get(sid)
    if not sess:
        raise HTTPException(404, "session not found")
    return sess

# ---- Health ----
@app.get("/health")
def health():
    return {
        "llm_backend": backend_in_use(),
        "azure_config_present": azure_configured(),
        "active_sessions": len(SESS),
    }

@app.get("/questions")
def questions():
    bank = load_bank()
    return {
        "questions": [_serialize_question(q) for q in bank],
        "scale": {str(k): v for k, v in LIKERT_LABELS.items()},
        "per_page": QUESTIONS_PER_PAGE,
    }

# ---- Session endpoints ----
@app.post("/session/start")
def start(req: StartReq | None = None):
    llm = (req.llm if req else None)
    if llm is None:
        sess = AssessmentSession()
    elif llm == "none":
        sess = AssessmentSession(generator=None)
    elif llm == "azure":
        if not azure_configured():
            raise HTTPException(500, "Azure generator requested but AZURE_* settings are missing on the server.")
        sess = AssessmentSession(generator=default_generator("azure"))
    else:
        raise HTTPException(422, f"unknown llm backend {llm!r}")
    sid = str(uuid.uuid4())
    SESS[sid] = sess
    log.info("session %s started (%d questions, generator=%s)", sid, len(sess.questions), sess.generator is not None)
    return {"session_id": sid, "total_pages": sess.total_pages, "status": sess.status()}

@app.get("/session/{sid}/page/{n}")
def page(sid: str, n: int):
    sess = _get(sid)
    try:
        items = sess.page(n)
    except IndexError as e:
        raise HTTPException(404, str(e))
    return {
        "page": n,
        "total_pages": sess.total_pages,
        "questions": [_serialize_question(q) for q in items],
        "answers": {str(q.id): sess.responses.get(q.id) for q in items if q.id in sess.responses},
        "complete": sess.page_complete(n),
        "progress": sess.progress(),
    }

@app.post("/session/{sid}/answer")
def answer(sid: str, req: AnswerReq):
    sess = _get(sid)
    try:
        sess.answer(req.question_id, req.value)
    except SessionStateError as e:
        raise HTTPException(409, str(e))
    except ValueError as e:
        raise HTTPException(422, str(e))
    return {"ok": True, "status": sess.status()}

@app.post("/session/{sid}/submit")
async def submit(sid: str):
    sess = _get(sid)
    try:
        res = await sess.submit()
    except SessionStateError as e:
        raise HTTPException(409, str(e))
    if res is None:
        raise HTTPException(409, "session was reset while the report was resolving")
    return res.to_dict()

@app.get("/session/{sid}/result")
def result(sid: str):
    sess = _get(sid)
    if sess.result is None:
        raise HTTPException(409, f"no result yet (phase: {sess.phase})")
    return sess.result.to_dict()

@app.post("/session/{sid}/reset")
def reset(sid: str):
    sess = _get(sid)
    sess.reset()
    return {"ok": True, "status": sess.status()}

@app.get("/types/{code}/stack")
def type_stack(code: str):
    code = code.upper()
    if not is_valid_code(code):
        raise HTTPException(404, f"unknown type code {code!r}")
    st = derive_stack(code)
    return {
        "typeCode": code,
        **st.to_dict(),
        "names": {label: FUNCTION_NAMES[label] for label in st.labels()},
    }
