"""
pytest configuration: markers and shared fixtures.
"""

import pytest

from holdem_engine.core.card import parse_cards
from holdem_engine.game.recorder import HistoryRecorder


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "property_test: property based tests")
    config.addinivalue_line("markers", "integration: full game runs")


@pytest.fixture
def cards():
    """Parse ``"As Kd"`` style strings into cards."""
    return parse_cards


@pytest.fixture
def history_recorder():
    return HistoryRecorder(game_id="test_game")
