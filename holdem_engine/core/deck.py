"""
The 52-card deck.

Shuffling goes through an injectable random source so that deal order is
reproducible under a fixed seed.
"""

import random
from typing import List, Optional

from .card import Card
from .enums import Suit, Rank
from .exceptions import DeckExhaustedError


class Deck:
    """
    Ordered collection of the 52 distinct cards.

    Cards are dealt from the end of the internal list.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Args:
            seed: seed for a private random source
            rng: shared random source; takes precedence over ``seed``
        """
        self._cards: List[Card] = []
        self._random = rng if rng is not None else random.Random(seed)
        self.reset()

    def reset(self) -> 'Deck':
        """Rebuild the full, unshuffled deck."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        return self

    def shuffle(self) -> 'Deck':
        """Shuffle in place (``random.shuffle`` is a Fisher-Yates shuffle)."""
        self._random.shuffle(self._cards)
        return self

    def deal(self) -> Card:
        """
        Remove and return the last card.

        Raises:
            DeckExhaustedError: when the deck is empty
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot deal from an empty deck")
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError(f"Card count must be non-negative: {count}")
        if count > len(self._cards):
            raise DeckExhaustedError(
                f"Cannot deal {count} cards, only {len(self._cards)} remaining"
            )
        return [self.deal() for _ in range(count)]

    def burn(self) -> None:
        """Discard the top card."""
        self.deal()

    @property
    def remaining_count(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> List[Card]:
        """Copy of the remaining cards, last element is dealt next."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
