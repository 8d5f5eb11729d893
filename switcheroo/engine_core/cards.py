"""
Cards - Card kinds, card values and the draw deck.

Cards are plain immutable values: two cards with the same kind and
value are interchangeable. The deck behaves like an endless supply:
whenever a draw finds it empty, a fresh deck is built from the
distribution table and shuffled before the draw proceeds.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import random


class CardKind(Enum):
    """Closed set of card kinds."""
    ATTACK = "attack"  # Damage the opponent when spent
    INSTANT = "instant"  # Heals on arrival in a player space
    SHIELD = "shield"  # Heal when spent
    SPECIAL = "special"  # Extra move when spent
    BARRIER = "barrier"  # Immovable wall on the board
    BOOST = "boost"  # Dealt and shown, but has no spend effect


@dataclass(frozen=True)
class Card:
    """A single card. Equality is by kind and value."""
    kind: CardKind
    value: int = 0

    @property
    def label(self) -> str:
        """Short symbol drawn on the tile (presentation only)."""
        return card_label(self.kind, self.value)

    @property
    def is_barrier(self) -> bool:
        return self.kind == CardKind.BARRIER

    def __str__(self) -> str:
        return f"{self.kind.value}({self.label})"


_LABEL_FORMATS: dict[CardKind, str] = {
    CardKind.ATTACK: "-{value}",
    CardKind.INSTANT: "+{value}♥",
    CardKind.SHIELD: "+{value}♥",
    CardKind.SPECIAL: "+M",
    CardKind.BARRIER: "⊗",
    CardKind.BOOST: "+{value}",
}


def card_label(kind: CardKind, value: int) -> str:
    return _LABEL_FORMATS[kind].format(value=value)


# Legend text shown next to the board
CARD_DESCRIPTIONS: dict[CardKind, str] = {
    CardKind.ATTACK: "Attack: spend to remove hearts from your opponent",
    CardKind.INSTANT: "Instant: +1 heart the moment it reaches your space",
    CardKind.SHIELD: "Shield: spend to regain hearts",
    CardKind.SPECIAL: "Special: spend for an extra move",
    CardKind.BOOST: "Boost: attack boost (no effect yet)",
    CardKind.BARRIER: "Barrier: blocks swaps and column shifts",
}


@dataclass(frozen=True)
class DeckEntry:
    """One row of the deck distribution table."""
    kind: CardKind
    value: int
    count: int


DEFAULT_DISTRIBUTION: tuple[DeckEntry, ...] = (
    DeckEntry(CardKind.ATTACK, 1, 15),
    DeckEntry(CardKind.ATTACK, 2, 8),
    DeckEntry(CardKind.SHIELD, 1, 10),
    DeckEntry(CardKind.SPECIAL, 0, 8),
    DeckEntry(CardKind.BARRIER, 0, 6),
    DeckEntry(CardKind.BOOST, 1, 5),
    DeckEntry(CardKind.INSTANT, 1, 8),
)


@dataclass(frozen=True)
class Deck:
    """
    Draw pile. The end of the tuple is the top of the pile.

    Immutable: draw() returns the card and the remaining deck.
    """
    cards: tuple[Card, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def draw(
        self,
        rng: random.Random,
        distribution: tuple[DeckEntry, ...] = DEFAULT_DISTRIBUTION,
    ) -> tuple[Card, Deck]:
        """
        Return (top card, remaining deck).

        An empty deck is rebuilt and reshuffled first, so a draw
        always succeeds.
        """
        deck = self
        if deck.is_empty:
            deck = build_deck(rng, distribution)
        return deck.cards[-1], Deck(cards=deck.cards[:-1])


def build_deck(
    rng: random.Random,
    distribution: tuple[DeckEntry, ...] = DEFAULT_DISTRIBUTION,
) -> Deck:
    """Build a full deck from the distribution table and shuffle it."""
    cards: list[Card] = []
    for entry in distribution:
        cards.extend(Card(kind=entry.kind, value=entry.value) for _ in range(entry.count))
    # random.shuffle is a Fisher-Yates permutation
    rng.shuffle(cards)
    return Deck(cards=tuple(cards))
