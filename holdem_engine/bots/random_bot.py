"""
RandomBot - uniformly random decisions.

Picks any legal action with equal probability. Used as a baseline opponent
and to push the engine through unusual lines in tests.
"""

import logging
import random
from typing import List, Optional

from ..core.actions import AvailableAction, Decision
from ..core.enums import ActionType
from .base import Bot

logger = logging.getLogger(__name__)


class RandomBot(Bot):
    """Chooses uniformly among the legal actions; raises to a uniform target."""

    def __init__(self, bot_id: int, name: Optional[str] = None,
                 seed: Optional[int] = None, rng: Optional[random.Random] = None):
        super().__init__(bot_id, name)
        self._random = rng if rng is not None else random.Random(seed)

    async def decide(self, view, available_actions: List[AvailableAction]) -> Decision:
        if not available_actions:
            return Decision(ActionType.FOLD, explanation="no legal action offered")

        choice = self._random.choice(available_actions)
        logger.debug(f"{self.name} picks {choice}")

        if choice.action_type is ActionType.RAISE:
            target = self._random.randint(choice.min_amount, choice.max_amount)
            return Decision(ActionType.RAISE, target, f"random raise to {target}")

        if choice.action_type is ActionType.CALL:
            return Decision(ActionType.CALL, choice.value, "random call")

        return Decision(choice.action_type, 0, f"random {choice.action_type.value.lower()}")
