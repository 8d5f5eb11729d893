"""
Tests for API request/response schemas.
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    CardInfo,
    ErrorCode,
    ErrorResponse,
    SelectRequest,
    SpendRequest,
)
from ..engine_core.action import RejectionCode
from ..engine_core.snapshot import CardView
from .conftest import SP


class TestRequests:
    """Request validation."""

    def test_board_select(self):
        request = SelectRequest(area="board", row=1, col=2)
        assert request.player is None

    def test_space_select_needs_player(self):
        with pytest.raises(ValidationError):
            SelectRequest(area="space", row=1, col=2)

    def test_unknown_area(self):
        with pytest.raises(ValidationError):
            SelectRequest(area="table", row=0, col=0)

    def test_player_range(self):
        with pytest.raises(ValidationError):
            SpendRequest(player=2, row=0, col=0)


class TestResponses:
    """Response models."""

    def test_every_rejection_has_error_code(self):
        for code in RejectionCode:
            assert ErrorCode(code.value).value == code.value

    def test_error_codes_are_rejections_plus_not_found(self):
        expected = {code.value for code in RejectionCode} | {"SESSION_NOT_FOUND"}
        assert {code.value for code in ErrorCode} == expected

    def test_card_info_from_view(self):
        info = CardInfo.model_validate(CardView.of(SP))

        assert info.kind == "special"
        assert info.label == "+M"
        assert info.spendable

    def test_error_response_serializes(self):
        response = ErrorResponse(error="Column is full!", error_code=ErrorCode.COLUMN_FULL)
        data = response.model_dump(mode="json")

        assert data["error_code"] == "COLUMN_FULL"
        assert data["game_state"] is None
        assert data["api_version"] == "v1"
