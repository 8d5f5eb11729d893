"""
FastAPI Application - JSON transport for a presentation layer.

Endpoints:
    POST   /api/v1/sessions                     Create game session
    GET    /api/v1/sessions                     List sessions
    GET    /api/v1/sessions/{id}                Get session and board
    DELETE /api/v1/sessions/{id}                End session
    GET    /api/v1/sessions/{id}/state          Get game state
    POST   /api/v1/sessions/{id}/select         Click a board or space cell
    POST   /api/v1/sessions/{id}/spend          Spend a player-space card
    POST   /api/v1/sessions/{id}/end-turn       End the current turn
    POST   /api/v1/sessions/{id}/restart        Deal a new match
    GET    /api/v1/health                       Health check

Rejected commands answer 409 with an ErrorResponse whose `game_state`
is what the client should render next (some rejections clear the
selection). Unknown sessions answer 404.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import os

from ..utils.logging_config import get_logger, setup_logging

# Environment configuration
SWITCHEROO_ENV = os.getenv("SWITCHEROO_ENV", "development")
SWITCHEROO_LOG_LEVEL = os.getenv("SWITCHEROO_LOG_LEVEL", "DEBUG" if SWITCHEROO_ENV == "development" else "INFO")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = get_logger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from .service import APIService
    from .schemas import (
        # Request models
        CreateSessionRequest,
        SelectRequest,
        SpendRequest,
        # Response models
        CommandResponse,
        EndSessionResponse,
        ErrorResponse,
        GameStateResponse,
        HealthResponse,
        SessionListResponse,
        SessionResponse,
        # Enums
        ErrorCode,
    )

    setup_logging(SWITCHEROO_LOG_LEVEL)

    app = FastAPI(
        title="Switcheroo Engine API",
        description="""
Rule engine for Switcheroo, a two-player tile-and-card duel.

## Turn Flow

1. `POST /select` a board cell to arm it
2. `POST /select` a second board cell to swap (one move), or an empty
   cell of your own space in the same column to pull an edge-row card
   into your space (one move)
3. `POST /spend` cards from your space at any time on your turn (free)
4. `POST /end-turn` to hand over

## Rejection Codes

| Code | Description |
|------|-------------|
| `GAME_OVER` | Match finished, only restart is accepted |
| `NO_MOVES_LEFT` | Move budget used up this turn |
| `WRONG_PLAYER` | Not your turn / not your space |
| `BARRIER_NOT_SELECTABLE` | Barriers cannot be picked up |
| `BARRIER_NOT_SWAPPABLE` | Barriers cannot be swapped with |
| `WRONG_COLUMN` | Extraction must stay in the same column |
| `NOT_EDGE_ROW` | Only the edge row can be extracted |
| `COLUMN_FULL` | No room in that space column |
| `ATTACK_RESTRICTED` | Attacks are locked in the opening turns |
| `UNSPENDABLE` | This card kind has no spend effect |
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def error_json(response: ErrorResponse) -> JSONResponse:
        """Unknown sessions are 404, engine rejections 409."""
        status_code = 404 if response.error_code == ErrorCode.SESSION_NOT_FOUND else 409
        return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))

    def command_result(response: Union[CommandResponse, ErrorResponse]):
        if isinstance(response, ErrorResponse):
            return error_json(response)
        return response

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(body: Optional[CreateSessionRequest] = None) -> SessionResponse:
        """Deal a new match. Pass `seed` for a reproducible deal."""
        return api_service.create_session(body or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str):
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return error_json(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get the current game state",
    )
    async def get_game_state(session_id: str):
        response = api_service.get_game_state(session_id)
        if isinstance(response, ErrorResponse):
            return error_json(response)
        return response

    # =========================================================================
    # Command Endpoints
    # =========================================================================

    command_responses = {
        404: {"model": ErrorResponse, "description": "Session not found"},
        409: {"model": ErrorResponse, "description": "Command rejected"},
    }

    @app.post(
        "/api/v1/sessions/{session_id}/select",
        response_model=CommandResponse,
        responses=command_responses,
        tags=["Game"],
        summary="Click a board cell or a player-space cell",
    )
    async def select(session_id: str, body: SelectRequest):
        """
        **Request Body:**
        ```json
        {"area": "board", "row": 3, "col": 1}
        {"area": "space", "player": 0, "row": 1, "col": 1}
        ```
        """
        return command_result(api_service.select(session_id, body))

    @app.post(
        "/api/v1/sessions/{session_id}/spend",
        response_model=CommandResponse,
        responses=command_responses,
        tags=["Game"],
        summary="Spend a card from a player space",
    )
    async def spend(session_id: str, body: SpendRequest):
        return command_result(api_service.spend(session_id, body))

    @app.post(
        "/api/v1/sessions/{session_id}/end-turn",
        response_model=CommandResponse,
        responses=command_responses,
        tags=["Game"],
        summary="End the current turn",
    )
    async def end_turn(session_id: str):
        return command_result(api_service.end_turn(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/restart",
        response_model=CommandResponse,
        responses=command_responses,
        tags=["Game"],
        summary="Deal a new match in this session",
    )
    async def restart(session_id: str):
        return command_result(api_service.restart(session_id))

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="switcheroo-engine",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Switcheroo Engine API",
            "version": __version__,
            "environment": SWITCHEROO_ENV,
            "docs": "/api/docs",
            "health": "/api/v1/health",
        }

    logger.info("Switcheroo API ready (%s)", SWITCHEROO_ENV)
    return app


# For running directly: uvicorn switcheroo.api.app:app
app = None
try:
    app = create_app()
except ImportError:
    # FastAPI not installed
    pass
