"""
Basic enumerations for the hold'em engine.

Suits, ranks, round phases and decision types.
"""

from enum import Enum, IntEnum


class Suit(Enum):
    """Card suit, valued by its one-letter code."""
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Return the unicode suit symbol."""
        symbols = {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]

    @classmethod
    def from_str(cls, suit_str: str) -> 'Suit':
        """Parse a suit from its code (``"s"``) or symbol (``"♠"``)."""
        for suit in cls:
            if suit_str.lower() == suit.value or suit_str == suit.symbol:
                return suit
        raise ValueError(f"Unknown suit: {suit_str!r}")


class Rank(IntEnum):
    """Card rank; the integer value is used directly for comparisons and kicker packing."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 9:
            return str(self.value)
        return {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """Parse ``"2"``..``"9"``, ``"T"``/``"10"``, ``"J"``, ``"Q"``, ``"K"``, ``"A"``."""
        if rank_str.isdigit():
            return cls(int(rank_str))

        rank_map = {
            "T": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
            "A": cls.ACE,
        }
        return rank_map[rank_str.upper()]


class GamePhase(Enum):
    """Lifecycle of a single round."""
    WAITING = "WAITING"
    BLINDS = "BLINDS"
    PREFLOP = "PREFLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"
    SHOWDOWN = "SHOWDOWN"

    def __str__(self) -> str:
        return self.value


class ActionType(Enum):
    """Decision types a player may take on a betting street."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> 'ActionType':
        """Accept an ``ActionType`` or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value.strip().upper())
        raise ValueError(f"Unknown action type: {value!r}")
