"""
Game configuration.

Plain dataclasses validated in ``__post_init__``.
"""

from dataclasses import dataclass, field
from typing import Optional

from .exceptions import GameConfigError


@dataclass
class BlindSchedule:
    """
    Blind increase schedule.

    Every ``increase_every`` completed rounds, up to ``max_increases`` times,
    both blinds are multiplied by ``increase_factor`` and floored.
    ``increase_every=0`` disables increases.
    """
    increase_every: int = 5
    increase_factor: float = 2
    max_increases: int = 10

    def __post_init__(self):
        if self.increase_every < 0:
            raise GameConfigError(f"increase_every cannot be negative: {self.increase_every}")
        if self.increase_factor < 1:
            raise GameConfigError(f"increase_factor must be at least 1: {self.increase_factor}")
        if self.max_increases < 0:
            raise GameConfigError(f"max_increases cannot be negative: {self.max_increases}")

    def is_due(self, round_number: int, increases_so_far: int) -> bool:
        """Whether the blinds go up at the start of ``round_number``."""
        return (
            self.increase_every > 0
            and round_number > 1
            and (round_number - 1) % self.increase_every == 0
            and increases_so_far < self.max_increases
        )


@dataclass
class GameConfig:
    """
    Settings for one game.

    ``random_seed`` seeds the shared random source used for shuffling and
    the first dealer choice.
    """
    starting_chips: int = 1000
    small_blind: int = 5
    big_blind: int = 10
    min_players: int = 2
    max_players: int = 10
    max_betting_iterations: int = 100
    random_seed: Optional[int] = None
    blind_schedule: BlindSchedule = field(default_factory=BlindSchedule)

    def __post_init__(self):
        self._validate_stakes()
        self._validate_table_size()

    def _validate_stakes(self):
        if self.starting_chips <= 0:
            raise GameConfigError(f"Starting chips must be positive: {self.starting_chips}")

        if self.small_blind <= 0:
            raise GameConfigError(f"Small blind must be positive: {self.small_blind}")

        if self.big_blind <= self.small_blind:
            raise GameConfigError(
                f"Big blind ({self.big_blind}) must exceed small blind ({self.small_blind})"
            )

    def _validate_table_size(self):
        if self.min_players < 2:
            raise GameConfigError(f"At least two players are required: {self.min_players}")

        if self.max_players < self.min_players:
            raise GameConfigError(
                f"max_players ({self.max_players}) is below min_players ({self.min_players})"
            )

        # 52 cards: 2 per player plus 5 board and 3 burns
        if self.max_players * 2 + 8 > 52:
            raise GameConfigError(f"Too many seats for one deck: {self.max_players}")

        if self.max_betting_iterations <= 0:
            raise GameConfigError(
                f"max_betting_iterations must be positive: {self.max_betting_iterations}"
            )
