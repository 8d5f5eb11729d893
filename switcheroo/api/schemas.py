"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a presentation layer
(browser board, desktop client) and the engine.

Error Codes:
- Every engine RejectionCode is passed through unchanged
  (COLUMN_FULL, NOT_EDGE_ROW, ATTACK_RESTRICTED, ...)
- SESSION_NOT_FOUND: Session does not exist or has ended
"""

from enum import Enum
from typing import Optional, Any, Literal
from pydantic import BaseModel, Field, model_validator

from ..engine_core.action import RejectionCode


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    # Engine rejections
    GAME_OVER = RejectionCode.GAME_OVER.value
    NO_MOVES_LEFT = RejectionCode.NO_MOVES_LEFT.value
    OUT_OF_BOUNDS = RejectionCode.OUT_OF_BOUNDS.value
    WRONG_PLAYER = RejectionCode.WRONG_PLAYER.value
    BARRIER_NOT_SELECTABLE = RejectionCode.BARRIER_NOT_SELECTABLE.value
    BARRIER_NOT_SWAPPABLE = RejectionCode.BARRIER_NOT_SWAPPABLE.value
    WRONG_COLUMN = RejectionCode.WRONG_COLUMN.value
    NOT_EDGE_ROW = RejectionCode.NOT_EDGE_ROW.value
    COLUMN_FULL = RejectionCode.COLUMN_FULL.value
    EMPTY_CELL = RejectionCode.EMPTY_CELL.value
    UNSPENDABLE = RejectionCode.UNSPENDABLE.value
    ATTACK_RESTRICTED = RejectionCode.ATTACK_RESTRICTED.value
    IGNORED_TARGET = RejectionCode.IGNORED_TARGET.value
    UNKNOWN_ACTION = RejectionCode.UNKNOWN_ACTION.value

    # Transport errors
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    kind: str = Field(description="attack, instant, shield, special, barrier, boost")
    value: int
    label: str = Field(description="Symbol drawn on the tile")
    spendable: bool = False

    model_config = {"from_attributes": True}


class CellInfo(BaseModel):
    """A board cell reference."""
    row: int
    col: int


class SpaceCellInfo(BaseModel):
    """A player-space cell reference."""
    player: int
    row: int
    col: int


class LegendEntry(BaseModel):
    label: str
    description: str


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    seed: Optional[int] = Field(None, description="Seed for reproducible games")


class SelectRequest(BaseModel):
    """
    A click on the table.

    area=board needs row/col; area=space also needs the owning player.
    """
    area: Literal["board", "space"] = Field(..., description="Which grid was clicked")
    row: int = Field(..., description="Row within that grid")
    col: int = Field(..., description="Column within that grid")
    player: Optional[int] = Field(None, ge=0, le=1, description="Owner of the clicked space")

    @model_validator(mode="after")
    def _player_for_space(self) -> "SelectRequest":
        if self.area == "space" and self.player is None:
            raise ValueError("player is required when area is 'space'")
        return self


class SpendRequest(BaseModel):
    """Request to spend a card from a player space."""
    player: int = Field(..., ge=0, le=1)
    row: int
    col: int


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """Complete render state for one session."""
    session_id: str
    status: SessionStatus
    board: list[list[Optional[CardInfo]]]
    player_spaces: list[list[list[Optional[CardInfo]]]]
    hearts: list[int]
    max_hearts: int
    current_player: int
    moves_left: int
    turn_count: list[int]
    selection: Optional[CellInfo] = None
    extraction_targets: list[SpaceCellInfo] = Field(default_factory=list)
    game_over: bool = False
    winner: Optional[int] = None
    turn_banner: str = ""
    result_banner: Optional[str] = None
    deck_remaining: int = 0
    api_version: str = "v1"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    game_state: Optional[GameStateResponse] = Field(
        None, description="State to render after a rejected command"
    )
    api_version: str = Field("v1", description="API version")


class CommandResponse(BaseModel):
    """Response after an accepted command."""
    session_id: str
    success: bool = True
    changes: list[str] = Field(default_factory=list, description="Messages to flash on screen")
    game_state: GameStateResponse
    api_version: str = "v1"


class SessionResponse(BaseModel):
    """Response containing session information."""
    session_id: str
    status: SessionStatus
    created_at: float = 0.0
    game_state: GameStateResponse
    legend: list[LegendEntry] = Field(default_factory=list)
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
