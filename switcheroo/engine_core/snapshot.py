"""
Snapshot - Read-only view of a GameState for rendering.

The presentation layer only ever sees snapshots. They are frozen and
share nothing mutable with the engine, and they carry the few derived
values a renderer needs (labels, highlight targets, the turn banner).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .board import BoardCoord, Grid, PlayerSpaceCoord
from .cards import (
    Card,
    CardKind,
    DeckEntry,
    CARD_DESCRIPTIONS,
    DEFAULT_DISTRIBUTION,
    card_label,
)
from .economy import is_spendable
from .state import GameState


@dataclass(frozen=True)
class CardView:
    kind: str
    value: int
    label: str
    spendable: bool

    @classmethod
    def of(cls, card: Card | None) -> CardView | None:
        if card is None:
            return None
        return cls(
            kind=card.kind.value,
            value=card.value,
            label=card.label,
            spendable=is_spendable(card),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.value, "label": self.label, "spendable": self.spendable}


CellRows = tuple[tuple[CardView | None, ...], ...]


def _view_rows(grid: Grid) -> CellRows:
    return tuple(tuple(CardView.of(card) for card in row) for row in grid.rows)


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs after a command."""
    game_id: str
    board: CellRows
    player_spaces: tuple[CellRows, CellRows]
    hearts: tuple[int, int]
    max_hearts: int
    current_player: int
    moves_left: int
    turn_count: tuple[int, int]
    selection: BoardCoord | None
    game_over: bool
    winner: int | None
    extraction_targets: tuple[PlayerSpaceCoord, ...]
    deck_remaining: int

    @classmethod
    def from_state(cls, state: GameState) -> Snapshot:
        return cls(
            game_id=state.game_id,
            board=_view_rows(state.board),
            player_spaces=(
                _view_rows(state.player_space(0)),
                _view_rows(state.player_space(1)),
            ),
            hearts=state.hearts,
            max_hearts=state.config.max_hearts,
            current_player=state.current_player,
            moves_left=state.moves_left,
            turn_count=state.turn_count,
            selection=state.selection.coord if state.selection.is_armed else None,
            game_over=state.game_over,
            winner=state.winner,
            extraction_targets=extraction_targets(state),
            deck_remaining=state.deck.count,
        )

    @property
    def turn_banner(self) -> str:
        """Announcement text shown when a turn starts."""
        return f"Player {self.current_player + 1}'s Turn"

    @property
    def result_banner(self) -> str | None:
        if not self.game_over or self.winner is None:
            return None
        return f"Game Over! Player {self.winner + 1} Wins!"

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible dict."""
        def rows(cells: CellRows) -> list[list[dict[str, Any] | None]]:
            return [[c.to_dict() if c else None for c in row] for row in cells]

        return {
            "game_id": self.game_id,
            "board": rows(self.board),
            "player_spaces": [rows(space) for space in self.player_spaces],
            "hearts": list(self.hearts),
            "max_hearts": self.max_hearts,
            "current_player": self.current_player,
            "moves_left": self.moves_left,
            "turn_count": list(self.turn_count),
            "selection": (
                {"row": self.selection.row, "col": self.selection.col}
                if self.selection else None
            ),
            "game_over": self.game_over,
            "winner": self.winner,
            "extraction_targets": [
                {"player": t.player, "row": t.row, "col": t.col}
                for t in self.extraction_targets
            ],
            "deck_remaining": self.deck_remaining,
            "turn_banner": self.turn_banner,
            "result_banner": self.result_banner,
        }


def extraction_targets(state: GameState) -> tuple[PlayerSpaceCoord, ...]:
    """
    Player-space cells that would accept the armed card.

    Only non-empty when the selection sits on the current player's edge
    row; every empty cell in the matching column is a valid click.
    """
    if state.game_over or not state.selection.is_armed:
        return ()
    coord = state.selection.coord
    player = state.current_player
    if coord.row != state.board.edge_row(player):
        return ()
    space = state.player_space(player)
    return tuple(
        PlayerSpaceCoord(player, row, coord.col)
        for row in range(space.height)
        if space.is_empty(row, coord.col)
    )


def legend(distribution: tuple[DeckEntry, ...] = DEFAULT_DISTRIBUTION) -> list[tuple[str, str]]:
    """(label, description) pairs for every card kind, labels as dealt."""
    labels: dict[CardKind, str] = {}
    for entry in distribution:
        labels.setdefault(entry.kind, card_label(entry.kind, entry.value))
    return [
        (labels.get(kind, card_label(kind, 0)), text)
        for kind, text in CARD_DESCRIPTIONS.items()
    ]


def render_text(snapshot: Snapshot) -> str:
    """
    Plain-text picture of the table, the second player on top.

    Empty cells print as '.', the armed cell is wrapped in brackets.
    """
    def cell(view: CardView | None, armed: bool = False) -> str:
        text = view.label if view else "."
        return f"[{text}]".center(6) if armed else text.center(6)

    def hearts(player: int) -> str:
        full = snapshot.hearts[player]
        return "♥" * full + "♡" * (snapshot.max_hearts - full)

    lines: list[str] = []
    lines.append(f"Player 2  {hearts(1)}")
    for r, row in enumerate(snapshot.player_spaces[1]):
        lines.append(f"{r} | " + "".join(cell(v) for v in row) + " |")
    lines.append("  +" + "-" * (6 * len(snapshot.board[0]) + 2) + "+")
    for r, row in enumerate(snapshot.board):
        cells = "".join(
            cell(v, armed=snapshot.selection == BoardCoord(r, c))
            for c, v in enumerate(row)
        )
        lines.append(f"{r} | {cells} |")
    lines.append("  +" + "-" * (6 * len(snapshot.board[0]) + 2) + "+")
    for r, row in enumerate(snapshot.player_spaces[0]):
        lines.append(f"{r} | " + "".join(cell(v) for v in row) + " |")
    lines.append(f"Player 1  {hearts(0)}")
    if snapshot.game_over:
        lines.append(snapshot.result_banner or "")
    else:
        lines.append(f"{snapshot.turn_banner} - moves left: {snapshot.moves_left}")
    return "\n".join(lines)
