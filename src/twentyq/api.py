# Area: HTTP
"""
twentyq.api — FastAPI application
=================================

Routes (each also mounted under ``/api``):

    POST /ask           question for today's (date, mode) session
    POST /score         record a finished game
    GET  /leaderboard   top 10 for a date and mode
    GET  /status        read-only view of today's session
    GET  /health        collaborator availability

Usage:
    from twentyq.api import create_app
    app = create_app(load_config())
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ._game import AnswerCatalog, EvictionTask, SessionOrchestrator, SessionStore
from ._game.session import MAX_QUESTIONS
from ._services import (
    AnthropicOracle,
    ScoreLedger,
    WikipediaEnricher,
    get_engine,
    get_session_factory,
    init_database,
)
from ._shared.logging_config import log_service_error
from .config import DEFAULT_CONFIG
from .errors import InvalidInputError, TwentyQError
from .schemas import AskRequest, ScoreRequest
from .types import ErrorPayload, ScoreResponse

logger = logging.getLogger("twentyq.api")

router = APIRouter()


# ══════════════════════════════════════════════════════════════
# COLLABORATOR WIRING
# ══════════════════════════════════════════════════════════════

def build_orchestrator(config: Dict[str, Any]) -> SessionOrchestrator:
    catalog = AnswerCatalog.load(config["answers_file"])
    store = SessionStore(catalog, max_age_seconds=config["session_max_age_seconds"])
    oracle = AnthropicOracle(
        api_key=config.get("oracle_api_key"),
        model=config["oracle_model"],
        timeout_seconds=config["oracle_timeout_seconds"],
    )
    enricher = WikipediaEnricher(timeout_seconds=config["enricher_timeout_seconds"])
    return SessionOrchestrator(
        store,
        oracle,
        enricher,
        oracle_timeout_seconds=config["oracle_timeout_seconds"],
    )


def build_ledger(config: Dict[str, Any], create_tables: bool = True) -> ScoreLedger:
    url = config.get("ledger_url")
    if not url:
        logger.error("LEDGER_DATABASE_URL missing; score endpoints disabled")
        return ScoreLedger(None)
    try:
        engine = get_engine(url)
        if create_tables:
            init_database(engine)
    except (SQLAlchemyError, ImportError) as e:
        # ImportError: database driver for the URL is not installed
        logger.error(f"Failed to initialize ledger database: {e}")
        return ScoreLedger(None)
    return ScoreLedger(get_session_factory(engine))


def create_app(
    config: Optional[Dict[str, Any]] = None,
    *,
    orchestrator: Optional[SessionOrchestrator] = None,
    ledger: Optional[ScoreLedger] = None,
    scheduler: Optional[AsyncIOScheduler] = None,
) -> FastAPI:
    """
    Build the application.

    Collaborators passed explicitly win over those built from config,
    which is how the tests inject fakes.
    """
    config = {**DEFAULT_CONFIG, **(config or {})}
    orchestrator = orchestrator or build_orchestrator(config)
    ledger = ledger or build_ledger(config)
    eviction = EvictionTask(orchestrator.store, config["eviction_interval_minutes"])

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sched = scheduler or AsyncIOScheduler()
        eviction.attach(sched)
        sched.start()
        logger.info("Server started")
        try:
            yield
        finally:
            sched.shutdown(wait=False)
            logger.info("Stop Server")

    app = FastAPI(title="Daily 20 Questions API", version="1.0.0", lifespan=lifespan)
    app.state.orchestrator = orchestrator
    app.state.ledger = ledger
    app.state.eviction = eviction

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        if request.url.path.endswith("/score"):
            return JSONResponse(
                status_code=400,
                content=score_body(False, "Invalid score data provided."),
            )
        return JSONResponse(status_code=400, content={"error": "Invalid request body."})

    app.include_router(router)
    app.include_router(router, prefix="/api")
    return app


# ══════════════════════════════════════════════════════════════
# RESPONSE BODIES
# ══════════════════════════════════════════════════════════════

def error_body(error: TwentyQError) -> ErrorPayload:
    return {"error": error.user_message}


def score_body(success: bool, message: str) -> ScoreResponse:
    return {"success": success, "message": message}


# ══════════════════════════════════════════════════════════════
# ROUTES
# ══════════════════════════════════════════════════════════════

@router.post("/ask")
async def ask(payload: AskRequest, request: Request):
    orchestrator: SessionOrchestrator = request.app.state.orchestrator
    try:
        reply = await orchestrator.submit_question(
            orchestrator.today(), payload.mode, payload.question
        )
    except TwentyQError as e:
        log_service_error(e)
        return JSONResponse(status_code=e.status_code, content=error_body(e))
    return reply.to_payload()


@router.get("/status")
async def status(request: Request, mode: Optional[str] = None):
    orchestrator: SessionOrchestrator = request.app.state.orchestrator
    try:
        reply = orchestrator.session_status(orchestrator.today(), mode)
    except InvalidInputError as e:
        return JSONResponse(status_code=400, content=error_body(e))
    if reply is None:
        return {
            "reply": "No questions asked yet today.",
            "questionsRemaining": MAX_QUESTIONS,
            "gameOver": False,
        }
    return reply.to_payload()


@router.post("/score")
def submit_score(payload: ScoreRequest, request: Request):
    ledger: ScoreLedger = request.app.state.ledger
    try:
        ledger.submit(payload.to_submission())
    except TwentyQError as e:
        log_service_error(e)
        return JSONResponse(
            status_code=e.status_code,
            content=score_body(False, e.user_message),
        )
    return score_body(True, "Score saved successfully!")


@router.get("/leaderboard")
def leaderboard(request: Request, date: Optional[str] = None, mode: Optional[str] = None):
    ledger: ScoreLedger = request.app.state.ledger
    try:
        return ledger.top_scores(date, mode)
    except TwentyQError as e:
        log_service_error(e)
        return JSONResponse(status_code=e.status_code, content=[])


@router.get("/health")
def health(request: Request):
    orchestrator: SessionOrchestrator = request.app.state.orchestrator
    ledger: ScoreLedger = request.app.state.ledger
    oracle_ok = orchestrator.oracle_available()
    ledger_ok = ledger.is_available()
    return {
        "status": "ok" if oracle_ok and ledger_ok else "degraded",
        "oracle": oracle_ok,
        "ledger": ledger_ok,
        "activeSessions": len(orchestrator.store),
    }
