"""
Switcheroo - Two-Player Tile-and-Card Duel Engine

A deterministic, rules-driven engine for a hot-seat card duel played on a
small shared board. The engine provides:
- Immutable game state and a single reducer for every command
- Column shifting, spawning and extraction into player spaces
- Card spending, hearts and win detection
- In-memory sessions and a JSON API for presentation layers
"""

__version__ = "0.1.0"
