#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Round state, orchestration, bot views and history recording
"""

from .game_state import GameState
from .snapshot import BotView, PlayerView
from .recorder import Recorder, HistoryRecorder, ActionRecord
from .game import Game, GameResult

__all__ = [
    # state
    'GameState',

    # bot views
    'BotView', 'PlayerView',

    # recording
    'Recorder', 'HistoryRecorder', 'ActionRecord',

    # orchestration
    'Game', 'GameResult',
]
