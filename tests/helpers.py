"""
Test helpers: scripted bots and a game factory.
"""

import asyncio
from typing import Callable, Iterable, List, Optional, Union

from holdem_engine.bots.base import Bot
from holdem_engine.core.actions import Decision
from holdem_engine.core.config import BlindSchedule, GameConfig
from holdem_engine.core.enums import ActionType
from holdem_engine.game.game import Game
from holdem_engine.game.recorder import Recorder


class ScriptedBot(Bot):
    """
    Plays a fixed list of decisions, then falls back to ``default``.

    ``default`` may be a Decision or a callable ``(view, actions) -> Decision``.
    Every view and option list it was shown is kept for assertions.
    """

    def __init__(self, bot_id: int, script: Iterable = (), default=None, name: Optional[str] = None):
        super().__init__(bot_id, name)
        self.script = list(script)
        self.default = default
        self.views = []
        self.offers = []
        self.resets = 0

    async def decide(self, view, available_actions):
        self.views.append(view)
        self.offers.append(list(available_actions))
        if self.script:
            return self.script.pop(0)
        if callable(self.default):
            return self.default(view, available_actions)
        if self.default is not None:
            return self.default
        return check_or_call(view, available_actions)

    def reset(self):
        self.resets += 1


def check_or_call(view, available_actions) -> Decision:
    """Passive policy: check when possible, otherwise call."""
    types = {a.action_type for a in available_actions}
    if ActionType.CHECK in types:
        return Decision(ActionType.CHECK)
    if ActionType.CALL in types:
        return Decision(ActionType.CALL)
    return Decision(ActionType.FOLD)


def always_fold(view, available_actions) -> Decision:
    types = {a.action_type for a in available_actions}
    if ActionType.CHECK in types:
        return Decision(ActionType.CHECK)
    return Decision(ActionType.FOLD)


def make_game(chips: Union[int, List[int]] = 1000, players: int = 3, seed: int = 7,
              recorder: Optional[Recorder] = None, small_blind: int = 5,
              big_blind: int = 10, increase_every: int = 0,
              policy: Callable = check_or_call, evaluate=None) -> Game:
    """Build a game with scripted bots; a list for ``chips`` sets each stack."""
    stacks = chips if isinstance(chips, list) else [chips] * players
    config = GameConfig(
        starting_chips=max(stacks),
        small_blind=small_blind,
        big_blind=big_blind,
        random_seed=seed,
        blind_schedule=BlindSchedule(increase_every=increase_every),
    )
    kwargs = {} if evaluate is None else {'evaluate': evaluate}
    game = Game(config, recorder=recorder, **kwargs)
    for index, stack in enumerate(stacks, start=1):
        player = game.add_bot(ScriptedBot(index, default=policy, name=f"P{index}"))
        player.chips = stack
    return game


def run(coro):
    return asyncio.run(coro)
