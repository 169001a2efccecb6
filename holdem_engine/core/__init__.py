#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Core building blocks: enums, cards, deck, player, table, configuration and
exceptions.
"""

from .enums import Suit, Rank, GamePhase, ActionType
from .actions import AvailableAction, Decision
from .card import Card, parse_cards
from .deck import Deck
from .player import Player
from .table import Table
from .config import GameConfig, BlindSchedule
from .exceptions import (
    PokerGameError, DeckExhaustedError, IllegalActionError,
    DealerResolutionError, GameStateError, GameConfigError
)

__all__ = [
    # enums
    'Suit', 'Rank', 'GamePhase', 'ActionType',

    # actions
    'AvailableAction', 'Decision',

    # cards and table
    'Card', 'parse_cards', 'Deck', 'Player', 'Table',

    # configuration
    'GameConfig', 'BlindSchedule',

    # exceptions
    'PokerGameError', 'DeckExhaustedError', 'IllegalActionError',
    'DealerResolutionError', 'GameStateError', 'GameConfigError',
]
