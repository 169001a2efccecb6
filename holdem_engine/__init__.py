#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
No-Limit Texas Hold'em engine for automated players.

Bots are seated on a ``Game``, which runs rounds with blinds, four betting
streets, side pots and a showdown.
"""

from .core import (
    Suit, Rank, GamePhase, ActionType, AvailableAction, Decision,
    Card, Deck, Player, Table, GameConfig, BlindSchedule,
    PokerGameError, DeckExhaustedError, IllegalActionError,
    DealerResolutionError, GameStateError, GameConfigError,
)
from .evaluator import HandCategory, HandEvaluator, evaluate_hand
from .betting import SidePot, PotAward, calculate_side_pots
from .game import Game, GameResult, GameState, BotView, Recorder, HistoryRecorder
from .bots import Bot, RandomBot

__version__ = "0.1.0"

__all__ = [
    # core
    'Suit', 'Rank', 'GamePhase', 'ActionType', 'AvailableAction', 'Decision',
    'Card', 'Deck', 'Player', 'Table', 'GameConfig', 'BlindSchedule',

    # exceptions
    'PokerGameError', 'DeckExhaustedError', 'IllegalActionError',
    'DealerResolutionError', 'GameStateError', 'GameConfigError',

    # evaluation and pots
    'HandCategory', 'HandEvaluator', 'evaluate_hand',
    'SidePot', 'PotAward', 'calculate_side_pots',

    # game
    'Game', 'GameResult', 'GameState', 'BotView', 'Recorder', 'HistoryRecorder',

    # bots
    'Bot', 'RandomBot',
]
