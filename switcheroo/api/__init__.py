"""
API Module - JSON interface for a presentation layer.

Exposes the engine via REST so any client can drive a match:
1. Creates game sessions
2. Forwards clicks, spends and end-turn commands
3. Returns a render snapshot after every command

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    SelectRequest,
    SpendRequest,
    # Responses
    CommandResponse,
    EndSessionResponse,
    ErrorResponse,
    GameStateResponse,
    HealthResponse,
    SessionListResponse,
    SessionResponse,
    # Shared
    CardInfo,
    CellInfo,
    LegendEntry,
    SpaceCellInfo,
    # Enums
    ErrorCode,
    SessionStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "SelectRequest",
    "SpendRequest",
    # Responses
    "CommandResponse",
    "EndSessionResponse",
    "ErrorResponse",
    "GameStateResponse",
    "HealthResponse",
    "SessionListResponse",
    "SessionResponse",
    # Shared
    "CardInfo",
    "CellInfo",
    "LegendEntry",
    "SpaceCellInfo",
    # Enums
    "ErrorCode",
    "SessionStatus",
    # Service
    "APIService",
    "create_app",
]
