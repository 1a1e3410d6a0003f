# api/main.py — the reading service: forwards card/question context to the LLM
from __future__ import annotations

import os

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tarotka import llm, tarot_core
from tarotka.logging_config import setup_logging
from tarotka.prompts import SYSTEM_PROMPT, build_prompt
from tarotka.schemas import HealthResponse, ReadingAnswer, ReadingError, ReadingRequest

setup_logging()
logger = structlog.get_logger(__name__)

# User-facing fallback messages (returned as `answer` next to `error`)
NO_CARDS_ANSWER = "Omlouvám se, ale ty karty nevidím jasně. Zkusíš to znovu?"
UNAVAILABLE_ANSWER = "Spojení se na moment rozostřilo. Zkusíme to vyložit znovu?"

# ---------- FastAPI app ----------
app = FastAPI(title="Tarotka Reading API", version="0.2.0")

# CORS (mobile and web clients call from other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"], allow_credentials=False
)


def _error(status: int, error: str, answer: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ReadingError(error=error, answer=answer).model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="ok",
        version=app.version,
        has_gemini_token=bool(os.getenv("GEMINI_TOKEN") or llm.GEMINI_TOKEN)
    )


@app.get("/v1/spreads")
def list_spreads():
    return {
        "spreads": [
            {"id": s.id, "name": s.name, "labels": list(s.labels), "mode": s.mode}
            for s in tarot_core.list_spreads()
        ]
    }


@app.post("/api/chat", response_model=ReadingAnswer, responses={400: {"model": ReadingError},
                                                               500: {"model": ReadingError},
                                                               502: {"model": ReadingError}})
def chat(req: ReadingRequest):
    logger.info("reading_request", mode=req.mode, spread=req.spreadName, cards=len(req.cards))
    if not req.cards:
        return _error(400, "No cards in request", NO_CARDS_ANSWER)

    prompt = build_prompt(
        spread_name=req.spreadName,
        cards=req.cards,
        question=req.question,
        mode=req.mode,
        moon_context=req.moonPhase,
    )
    try:
        answer = llm.chat(prompt=prompt, system=SYSTEM_PROMPT)
    except llm.ConfigurationError as e:
        logger.error("llm_not_configured", error=str(e))
        return _error(500, str(e), UNAVAILABLE_ANSWER)
    except Exception as e:  # upstream SDK raises a wide range of error types
        logger.exception("llm_request_failed")
        return _error(502, f"{type(e).__name__}: {e}", UNAVAILABLE_ANSWER)

    if not answer.strip():
        return _error(502, "Empty answer from the model", UNAVAILABLE_ANSWER)
    return ReadingAnswer(answer=answer)
