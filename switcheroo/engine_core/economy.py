"""
Card Economy - Effects of cards played from a player space.

Spendable kinds:
- ATTACK:  opponent loses `value` hearts (locked during the opening turns)
- SHIELD:  spender regains `value` hearts
- SPECIAL: one extra move this turn

INSTANT cards never rest in a player space: their heal is applied the
moment extraction lands them there (see apply_instant).

BOOST, BARRIER and INSTANT have no spend effect and are refused.
Spending never costs a move.
"""

from __future__ import annotations
from typing import Callable

from .action import ActionResult, RejectionCode
from .cards import Card, CardKind
from .lifecycle import evaluate_winner
from .state import GameState

SpendHandler = Callable[[GameState, int, int, int, Card], ActionResult]


def resolve_spend(state: GameState, player: int, row: int, col: int) -> ActionResult:
    """
    Spend the card at (row, col) of `player`'s space.

    Turn ownership and game-over are checked by the reducer; this
    validates the cell and dispatches on card kind.
    """
    space = state.player_space(player)
    if not space.in_bounds(row, col):
        return ActionResult.failure(
            f"No player-space cell at ({row}, {col})",
            error_code=RejectionCode.OUT_OF_BOUNDS,
        )

    card = space.at(row, col)
    if card is None:
        return ActionResult.failure("Nothing to spend there", error_code=RejectionCode.EMPTY_CELL)

    handler = SPEND_HANDLERS[card.kind]
    return handler(state, player, row, col, card)


def _clear(state: GameState, player: int, row: int, col: int) -> GameState:
    space = state.player_space(player)
    return state.with_player_space(player, space.with_cell(row, col, None))


def _spend_attack(state: GameState, player: int, row: int, col: int, card: Card) -> ActionResult:
    limit = state.config.no_attack_turns
    if state.turn_count[player] < limit:
        return ActionResult.failure(
            f"No attacks allowed in first {limit} turns!",
            error_code=RejectionCode.ATTACK_RESTRICTED,
        )

    target = state.opponent_of(player)
    new_state = _clear(state, player, row, col)
    new_state = new_state.with_hearts(target, state.hearts[target] - card.value)
    new_state = evaluate_winner(new_state)

    changes = [f"Player {player + 1} attacks for {card.value}"]
    if new_state.game_over:
        changes.append(f"Player {new_state.winner + 1} wins!")
    return ActionResult.success_with_state(new_state, changes=changes)


def _spend_shield(state: GameState, player: int, row: int, col: int, card: Card) -> ActionResult:
    new_state = _clear(state, player, row, col)
    new_state = new_state.with_hearts(player, state.hearts[player] + card.value)
    return ActionResult.success_with_state(new_state, changes=[f"+{card.value}♥ Shield"])


def _spend_special(state: GameState, player: int, row: int, col: int, card: Card) -> ActionResult:
    new_state = _clear(state, player, row, col)
    new_state = new_state._copy_with(moves_left=state.moves_left + 1)
    return ActionResult.success_with_state(new_state, changes=["+1 Move!"])


def _not_spendable(state: GameState, player: int, row: int, col: int, card: Card) -> ActionResult:
    return ActionResult.failure(
        f"{card.kind.value.capitalize()} cards cannot be spent",
        error_code=RejectionCode.UNSPENDABLE,
    )


# One entry per CardKind
SPEND_HANDLERS: dict[CardKind, SpendHandler] = {
    CardKind.ATTACK: _spend_attack,
    CardKind.SHIELD: _spend_shield,
    CardKind.SPECIAL: _spend_special,
    CardKind.BOOST: _not_spendable,  # No effect defined for boosts
    CardKind.BARRIER: _not_spendable,
    CardKind.INSTANT: _not_spendable,
}


def is_spendable(card: Card) -> bool:
    return SPEND_HANDLERS[card.kind] is not _not_spendable


def apply_instant(state: GameState, player: int, card: Card) -> tuple[GameState, list[str]]:
    """Heal the player by the instant card's value (capped)."""
    new_state = state.with_hearts(player, state.hearts[player] + card.value)
    return new_state, [f"+{card.value}♥ Instant Heal!"]
