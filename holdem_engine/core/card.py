"""
Playing card value type.
"""

from dataclasses import dataclass
from typing import Iterable, List

from .enums import Suit, Rank


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Cards compare equal by value and hash by (rank, suit), so they can be
    placed in sets and used as dict keys.
    """
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")

    def to_str(self) -> str:
        """Short form, e.g. ``"As"`` or ``"Td"``."""
        return str(self.rank) + str(self.suit)

    def to_display_str(self) -> str:
        """Form with the suit symbol, e.g. ``"A♠"``."""
        return str(self.rank) + self.suit.symbol

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Parse a card from its short form.

        Both ``"Ts"`` and ``"10s"`` are accepted, and the suit may be given
        as a symbol (``"A♠"``).
        """
        card_str = card_str.strip()
        if len(card_str) < 2:
            raise ValueError(f"Malformed card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        try:
            return cls(Rank.from_str(rank_str), Suit.from_str(suit_str))
        except (ValueError, KeyError) as e:
            raise ValueError(f"Cannot parse card {card_str!r}: {e}")

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


def parse_cards(text: str) -> List[Card]:
    """Parse a whitespace separated list such as ``"As Kd 7h"``."""
    return [Card.from_str(token) for token in text.split()]


def cards_to_str(cards: Iterable[Card]) -> List[str]:
    return [card.to_str() for card in cards]
