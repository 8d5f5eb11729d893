"""
Switcheroo CLI - Command-line interface for the engine.

Usage:
    switcheroo play [--seed N]     Hot-seat game in the terminal
    switcheroo deck                Print the deck distribution table

In-game commands (always for the player whose turn it is):
    b <row> <col>        click a board cell
    s <row> <col>        click a cell of your own space
    spend <row> <col>    spend a card from your space
    end                  end your turn
    restart              deal a new match
    help                 show this list
    quit                 leave
"""

import argparse
import sys

from .engine_core.action import ActionResult
from .engine_core.board import BoardCoord, PlayerSpaceCoord
from .engine_core.cards import CARD_DESCRIPTIONS, card_label
from .engine_core.config import DEFAULT_CONFIG
from .engine_core.snapshot import render_text
from .session import Session
from .utils.logging_config import setup_logging

PLAY_HELP = """Commands:
  b <row> <col>       click a board cell
  s <row> <col>       click a cell of your own space
  spend <row> <col>   spend a card from your space
  end                 end your turn
  restart             deal a new match
  quit                leave"""


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Switcheroo - two-player tile-and-card duel",
        prog="switcheroo",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Start a hot-seat game")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")

    # Deck command
    subparsers.add_parser("deck", help="Print the deck distribution")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "deck":
        cmd_deck(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_deck(args):
    """Print the deck distribution table."""
    distribution = DEFAULT_CONFIG.deck_distribution
    print(f"{'Card':<8}{'Count':>6}  Effect")
    for entry in distribution:
        label = card_label(entry.kind, entry.value)
        print(f"{label:<8}{entry.count:>6}  {CARD_DESCRIPTIONS[entry.kind]}")
    print(f"{'Total':<8}{DEFAULT_CONFIG.deck_size:>6}")


def cmd_play(args):
    """Run a hot-seat match until someone quits."""
    session = Session.start(seed=args.seed)
    print(render_text(session.snapshot()))
    print("Type 'help' for commands.")

    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        keep_going, output = handle_line(session, line)
        if output:
            print(output)
        if not keep_going:
            break


def handle_line(session: Session, line: str) -> tuple[bool, str]:
    """
    Run one line of player input against the session.

    Returns (keep_going, text to print).
    """
    words = line.strip().lower().split()
    if not words:
        return True, ""
    command, rest = words[0], words[1:]

    if command in ("quit", "exit", "q"):
        return False, "Bye."
    if command == "help":
        return True, PLAY_HELP

    if command in ("b", "s", "spend"):
        if len(rest) != 2 or not all(w.lstrip("-").isdigit() for w in rest):
            return True, f"Usage: {command} <row> <col>"
        row, col = int(rest[0]), int(rest[1])
        player = session.game_state.current_player
        if command == "b":
            result = session.select_or_act(BoardCoord(row, col))
        elif command == "s":
            result = session.select_or_act(PlayerSpaceCoord(player, row, col))
        else:
            result = session.spend_card(player, row, col)
    elif command == "end":
        result = session.end_turn()
    elif command == "restart":
        result = session.restart()
    else:
        return True, f"Unknown command: {command} (try 'help')"

    return True, _describe(result)


def _describe(result: ActionResult) -> str:
    lines = []
    if result.success:
        lines.extend(result.state_changes)
    else:
        lines.append(f"! {result.error}")
    lines.append(render_text(result.snapshot))
    return "\n".join(lines)


if __name__ == "__main__":
    main()
