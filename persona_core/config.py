from __future__ import annotations
import os, json, pathlib


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


LIKERT_MIN: int = -3
LIKERT_MAX: int = 3

NEUTRAL_SCORE: int = 50
TYPE_THRESHOLD: int = 50

QUESTIONS_PER_PAGE: int = 10

LLM_BACKEND: str = "none"
LLM_TIMEOUT_SEC: float = 45.0
LLM_TEMPERATURE: float = 0.8
LLM_MAX_TOKENS: int = 4000

FALLBACK_DELAY_SEC: float = 0.0

BANK_MIN_PER_DIMENSION: int = 30
BANK_MAX_REVERSE_SHARE: float = 0.60
BANK_MIN_REVERSE_SHARE: float = 0.20

# // env overrides for staging/ops; defaults keep the generator off.
LLM_BACKEND = (os.getenv("LLM_BACKEND") or LLM_BACKEND).strip().lower()
LLM_TIMEOUT_SEC = _env_float("LLM_TIMEOUT_SEC", LLM_TIMEOUT_SEC)
LLM_TEMPERATURE = _env_float("LLM_TEMPERATURE", LLM_TEMPERATURE)
LLM_MAX_TOKENS = _env_int("LLM_MAX_TOKENS", LLM_MAX_TOKENS)
QUESTIONS_PER_PAGE = max(1, _env_int("QUESTIONS_PER_PAGE", QUESTIONS_PER_PAGE))
FALLBACK_DELAY_SEC = max(0.0, _env_float("FALLBACK_DELAY_SEC", FALLBACK_DELAY_SEC))
BANK_MIN_PER_DIMENSION = _env_int("BANK_MIN_PER_DIMENSION", BANK_MIN_PER_DIMENSION)


def _env_true(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1","true","yes","on")


def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    e = os.environ
    if e.get("USE_LLM_REPORT"): cfg["USE_LLM_REPORT"] = _env_true("USE_LLM_REPORT")
    if e.get("LLM_BACKEND"): cfg["LLM_BACKEND"] = e.get("LLM_BACKEND")
    for k in ("AZURE_OPENAI_ENDPOINT","AZURE_OPENAI_API_VERSION","AZURE_OPENAI_API_KEY","AZURE_OPENAI_DEPLOYMENT"):
        if e.get(k): cfg[k] = e.get(k)
    if e.get("LLM_TIMEOUT_SEC"): cfg["LLM_TIMEOUT_SEC"] = _env_float("LLM_TIMEOUT_SEC", LLM_TIMEOUT_SEC)
    return cfg


def get_backend(cfg: dict) -> str|None:
    """Backend used for generated reports, or None when the static table is primary."""
    if "USE_LLM_REPORT" in cfg and not cfg.get("USE_LLM_REPORT"):
        return None
    b = (cfg.get("LLM_BACKEND") or LLM_BACKEND or "").lower().strip()
    return b if b == "azure" else None


def timeout_sec(cfg: dict) -> float:
    """Generator timeout: `config.json`/env value when set, else LLM_TIMEOUT_SEC."""
    try:
        return float(cfg.get("LLM_TIMEOUT_SEC", LLM_TIMEOUT_SEC))
    except (TypeError, ValueError):
        return LLM_TIMEOUT_SEC
