"""
Shared table state: community cards and the collected pot.
"""

from typing import Iterable, List

from .card import Card
from .exceptions import GameStateError

MAX_COMMUNITY_CARDS = 5


class Table:
    """Community cards and the pot of collected bets."""

    def __init__(self):
        self.community_cards: List[Card] = []
        self.pot = 0

    def reset(self) -> 'Table':
        self.community_cards = []
        self.pot = 0
        return self

    def add_to_pot(self, amount: int) -> int:
        """
        Add collected chips to the pot.

        Returns:
            the new pot size
        """
        if amount < 0:
            raise GameStateError(f"Cannot add a negative amount to the pot: {amount}")
        self.pot += amount
        return self.pot

    def take_pot(self) -> int:
        """Empty the pot and return what it held."""
        amount = self.pot
        self.pot = 0
        return amount

    def add_community_card(self, card: Card) -> None:
        if card is None:
            raise GameStateError("Attempted to add a missing card to the board")
        if len(self.community_cards) >= MAX_COMMUNITY_CARDS:
            raise GameStateError("The board already holds five cards")
        self.community_cards.append(card)

    def add_community_cards(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.add_community_card(card)

    def __repr__(self) -> str:
        board = " ".join(card.to_str() for card in self.community_cards)
        return f"Table(board=[{board}], pot={self.pot})"
