"""
Decision source interface.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from ..core.actions import AvailableAction, Decision

if TYPE_CHECKING:
    from ..game.snapshot import BotView


class Bot(ABC):
    """
    A seat's decision maker.

    The game awaits ``decide`` whenever the bot's player has to act and
    never retries: whatever comes back is validated and applied, or the game
    aborts with ``IllegalActionError``.
    """

    def __init__(self, bot_id: int, name: Optional[str] = None):
        self.bot_id = bot_id
        self.name = name or f"Bot {bot_id}"

    @abstractmethod
    async def decide(self, view: 'BotView',
                     available_actions: List[AvailableAction]) -> Decision:
        """
        Choose an action.

        Args:
            view: what the player can see, own hole cards included
            available_actions: the legal options; a RAISE carries its
                ``min_amount``/``max_amount`` as total street bets

        Returns:
            the decision; for RAISE ``value`` is the total street bet
        """

    def reset(self) -> None:
        """Forget anything remembered; called when a game starts."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bot_id={self.bot_id}, name={self.name!r})"


__all__ = ['Bot', 'Decision']
