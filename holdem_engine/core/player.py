"""
Per-seat player state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .card import Card, cards_to_str


@dataclass
class Player:
    """
    Mutable state of one seated player.

    ``bet`` is the amount committed on the current street, ``total_bet`` the
    amount committed over the whole round (blinds included). Street-scoped
    fields are cleared by ``reset_for_new_street``, round-scoped ones by
    ``reset_for_new_round``.
    """
    player_id: int
    name: str
    chips: int = 1000
    hand: List[Card] = field(default_factory=list)
    bet: int = 0
    total_bet: int = 0
    folded: bool = False
    is_all_in: bool = False
    is_dealer: bool = False
    is_small_blind: bool = False
    is_big_blind: bool = False

    def __post_init__(self):
        if self.chips < 0:
            raise ValueError(f"Chip count cannot be negative: {self.chips}")
        if self.bet < 0 or self.total_bet < 0:
            raise ValueError("Bets cannot be negative")
        if len(self.hand) > 2:
            raise ValueError(f"A hand holds at most 2 cards, got {len(self.hand)}")

    def __hash__(self) -> int:
        return hash(self.player_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return False
        return self.player_id == other.player_id

    @property
    def is_actionable(self) -> bool:
        """True when the player can still put chips in on this street."""
        return not self.folded and not self.is_all_in and self.chips > 0

    def receive_card(self, card: Card) -> None:
        if len(self.hand) >= 2:
            raise ValueError(f"{self.name} already holds two cards")
        self.hand.append(card)

    def place_bet(self, amount: int) -> int:
        """
        Move up to ``amount`` chips from the stack into the current bet.

        The amount is capped at the remaining stack; emptying the stack marks
        the player all-in.

        Returns:
            the number of chips actually moved
        """
        if amount < 0:
            raise ValueError(f"Bet amount cannot be negative: {amount}")

        actual = min(amount, self.chips)
        self.chips -= actual
        self.bet += actual
        self.total_bet += actual

        if self.chips == 0:
            self.is_all_in = True

        return actual

    def fold(self) -> None:
        self.folded = True

    def add_chips(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot award a negative amount: {amount}")
        self.chips += amount

    def reset_for_new_round(self) -> None:
        """Clear hand, bets, fold/all-in state and position flags."""
        self.hand = []
        self.bet = 0
        self.total_bet = 0
        self.folded = False
        self.is_all_in = False
        self.is_dealer = False
        self.is_small_blind = False
        self.is_big_blind = False

    def reset_for_new_street(self) -> None:
        self.bet = 0

    @property
    def position_label(self) -> str:
        if self.is_dealer and self.is_small_blind:
            return "D/SB"
        if self.is_dealer:
            return "D"
        if self.is_small_blind:
            return "SB"
        if self.is_big_blind:
            return "BB"
        return ""

    def to_dict(self, reveal_hand: bool = True) -> Dict[str, Any]:
        return {
            'id': self.player_id,
            'name': self.name,
            'chips': self.chips,
            'bet': self.bet,
            'total_bet': self.total_bet,
            'folded': self.folded,
            'is_all_in': self.is_all_in,
            'is_dealer': self.is_dealer,
            'is_small_blind': self.is_small_blind,
            'is_big_blind': self.is_big_blind,
            'hand': cards_to_str(self.hand) if reveal_hand else None,
        }

    def __str__(self) -> str:
        position = f" [{self.position_label}]" if self.position_label else ""
        return f"{self.name}{position} ({self.chips} chips)"
