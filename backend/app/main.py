"""FastAPI application for the timed puzzle game."""
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Depends, HTTPException, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .aggregator import (
    SessionNotFound,
    current_session_score,
    get_history,
    get_user_stats,
    guest_session,
    record_submission,
    start_session,
)
from .db import ensure_schema, get_db
from .generator import PuzzleGenerationError, generate_puzzle
from .identity import (
    IdentityClient,
    IdentityError,
    get_identity_client,
    get_optional_user,
    get_session_token,
    require_user,
)
from .schemas import (
    CreateSessionRequest,
    GameSessionResponse,
    HealthResponse,
    Puzzle,
    RedirectUrlResponse,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SuccessResponse,
    User,
    UserStatsResponse,
)
from .scoring import score_answer
from .settings import ALLOWED_ORIGINS, LOG_LEVEL, SESSION_COOKIE_MAX_AGE, SESSION_COOKIE_NAME

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_schema()
    yield


app = FastAPI(title="Puzzle Sprint API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


# Error mapping

@app.exception_handler(RequestValidationError)
def validation_error(request: Request, exc: RequestValidationError):
    # Rejected inputs are not echoed back; NaN and Infinity are not valid JSON
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


@app.exception_handler(PuzzleGenerationError)
def puzzle_generation_error(request: Request, exc: PuzzleGenerationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(SessionNotFound)
def session_not_found(request: Request, exc: SessionNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(IdentityError)
def identity_error(request: Request, exc: IdentityError):
    logger.warning("Identity provider error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": "Identity provider unavailable"})


@app.exception_handler(SQLAlchemyError)
def store_unavailable(request: Request, exc: SQLAlchemyError):
    logger.exception("Store failure on %s", request.url.path)
    return JSONResponse(status_code=503, content={"detail": "Store unavailable"})


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# Auth endpoints

@app.get("/api/oauth/google/redirect_url", response_model=RedirectUrlResponse)
def get_redirect_url(client: IdentityClient = Depends(get_identity_client)):
    return RedirectUrlResponse(redirect_url=client.get_oauth_redirect_url("google"))


@app.post("/api/sessions", response_model=SuccessResponse)
def create_session(
    body: CreateSessionRequest,
    response: Response,
    client: IdentityClient = Depends(get_identity_client),
):
    """Exchange an OAuth code for a session token and store it in a cookie."""
    if not body.code:
        raise HTTPException(status_code=400, detail="No authorization code provided")

    session_token = client.exchange_code_for_session_token(body.code)
    response.set_cookie(
        SESSION_COOKIE_NAME,
        session_token,
        max_age=SESSION_COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        secure=True,
        samesite="none",
    )
    return {"success": True}


@app.get("/api/users/me", response_model=User)
def get_me(user: User = Depends(require_user)):
    return user


@app.get("/api/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    session_token: Optional[str] = Depends(get_session_token),
    client: IdentityClient = Depends(get_identity_client),
):
    if session_token:
        client.delete_session(session_token)
    response.delete_cookie(
        SESSION_COOKIE_NAME, path="/", httponly=True, secure=True, samesite="none"
    )
    return {"success": True}


# Game endpoints

@app.post("/api/game/start", response_model=GameSessionResponse)
def start_game(
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_optional_user),
):
    """Start a game.  Guests get an ephemeral session with id 0."""
    if user is None:
        return guest_session()
    return start_session(db, user.id)


@app.get(
    "/api/game/puzzle/{category}",
    response_model=Puzzle,
    response_model_exclude_none=True,
)
def get_puzzle(
    category: str,
    score: int = Query(0, ge=0),
    locale: Optional[str] = None,
    language: Optional[str] = None,
):
    """Draw a puzzle of the given category at the difficulty for ``score``.

    ``language`` is accepted in place of ``locale``; ``locale`` wins when both
    are given.
    """
    return generate_puzzle(category, score, locale or language or "en")


@app.post("/api/game/submit", response_model=SubmitAnswerResponse)
def submit_answer(
    body: SubmitAnswerRequest,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_optional_user),
):
    """Score an answer and, for signed-in players, record it."""
    user_id = user.id if user else None

    current_score = current_session_score(db, user_id, body.game_session_id)
    result = score_answer(
        body.puzzle, body.user_answer, body.elapsed_seconds, current_score
    )
    puzzle_result = record_submission(
        db,
        user_id,
        body.game_session_id,
        body.puzzle,
        body.user_answer,
        body.elapsed_seconds,
        result,
    )

    return SubmitAnswerResponse(
        is_correct=result.is_correct,
        correct_answer=result.correct_answer,
        points_earned=result.points_earned,
        result_id=puzzle_result.id if puzzle_result else None,
    )


@app.get("/api/game/stats", response_model=UserStatsResponse)
def get_stats(db: Session = Depends(get_db), user: User = Depends(require_user)):
    """Cross-session stats for the signed-in player (zeroed if none yet)."""
    return get_user_stats(db, user.id)


@app.get("/api/game/history", response_model=List[GameSessionResponse])
def get_game_history(db: Session = Depends(get_db), user: User = Depends(require_user)):
    """The player's most recent game sessions, newest first."""
    return get_history(db, user.id)
