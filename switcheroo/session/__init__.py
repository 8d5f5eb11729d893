"""
Session Module - Owns running matches.

A session represents one table:
- Created when the presentation layer starts a game
- Holds the only reference to the current GameState
- Turns commands into actions and adopts the resulting state
- Destroyed when the players leave

Sessions are EPHEMERAL: nothing is saved.
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
