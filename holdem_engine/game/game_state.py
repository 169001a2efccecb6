"""
Round state: seating, turn order, blind levels and legal actions.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..core.actions import AvailableAction
from ..core.enums import ActionType, GamePhase
from ..core.exceptions import DealerResolutionError, GameConfigError
from ..core.player import Player

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Authority over turn order, blind levels and the betting line.

    ``active_players`` are the players who had chips when the current round
    started; ``dealer_index`` and ``current_player_index`` index into that
    list.
    """
    players: List[Player] = field(default_factory=list)
    active_players: List[Player] = field(default_factory=list)
    dealer_index: int = -1
    current_player_index: int = -1
    phase: GamePhase = GamePhase.WAITING

    small_blind: int = 5
    big_blind: int = 10
    current_bet: int = 0
    min_raise: int = 10

    rng: random.Random = field(default_factory=random.Random, repr=False)
    _dealer_id: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.small_blind <= 0:
            raise GameConfigError(f"Small blind must be positive: {self.small_blind}")
        if self.big_blind <= self.small_blind:
            raise GameConfigError(
                f"Big blind ({self.big_blind}) must exceed small blind ({self.small_blind})"
            )
        self.min_raise = max(self.min_raise, self.big_blind)

    # -- seating --

    def add_player(self, player: Player) -> None:
        if self.get_player(player.player_id) is not None:
            raise GameConfigError(f"Duplicate player id: {player.player_id}")
        self.players.append(player)
        self.active_players.append(player)

    def get_player(self, player_id: int) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    @property
    def dealer(self) -> Optional[Player]:
        if 0 <= self.dealer_index < len(self.active_players):
            return self.active_players[self.dealer_index]
        return None

    @property
    def current_player(self) -> Optional[Player]:
        if 0 <= self.current_player_index < len(self.active_players):
            return self.active_players[self.current_player_index]
        return None

    def contenders(self) -> List[Player]:
        """Active players who have not folded."""
        return [p for p in self.active_players if not p.folded]

    def actionable_players(self) -> List[Player]:
        """Active players who can still act (not folded, not all-in)."""
        return [p for p in self.active_players if not p.folded and not p.is_all_in]

    # -- rotation --

    def next_dealer(self) -> int:
        """
        Move the button and return the new dealer index.

        The first round picks a random active seat; later rounds move to the
        next active seat after the previous dealer, skipping busted players.

        Raises:
            DealerResolutionError: no active seat can take the button
        """
        if not self.active_players:
            raise DealerResolutionError("No active players to deal")

        active_ids = [p.player_id for p in self.active_players]

        if self._dealer_id is None:
            self.dealer_index = self.rng.randrange(len(self.active_players))
        elif self._dealer_id in active_ids:
            self.dealer_index = (active_ids.index(self._dealer_id) + 1) % len(active_ids)
        else:
            self.dealer_index = self._seat_after_busted_dealer(active_ids)

        self._dealer_id = self.active_players[self.dealer_index].player_id
        logger.debug(f"Button moves to {self.active_players[self.dealer_index].name}")
        return self.dealer_index

    def _seat_after_busted_dealer(self, active_ids: List[int]) -> int:
        seat_ids = [p.player_id for p in self.players]
        if self._dealer_id not in seat_ids:
            raise DealerResolutionError(f"Previous dealer {self._dealer_id} is not seated")

        start = seat_ids.index(self._dealer_id)
        for offset in range(1, len(seat_ids) + 1):
            candidate = seat_ids[(start + offset) % len(seat_ids)]
            if candidate in active_ids:
                return active_ids.index(candidate)

        raise DealerResolutionError("Cannot locate a dealer among active players")

    def assign_positions(self, dealer_index: int) -> Tuple[int, int]:
        """
        Flag dealer and blinds and choose the first preflop actor.

        Heads-up the dealer posts the small blind and acts first preflop.

        Returns:
            ``(small_blind_index, big_blind_index)``
        """
        count = len(self.active_players)
        if not 0 <= dealer_index < count:
            raise DealerResolutionError(f"Dealer index {dealer_index} out of range")

        if count == 2:
            sb_index = dealer_index
        else:
            sb_index = (dealer_index + 1) % count
        bb_index = (sb_index + 1) % count

        for index, player in enumerate(self.active_players):
            player.is_dealer = index == dealer_index
            player.is_small_blind = index == sb_index
            player.is_big_blind = index == bb_index

        if count == 2:
            self.current_player_index = sb_index
        else:
            self.current_player_index = (bb_index + 1) % count

        return sb_index, bb_index

    def next_player(self) -> Optional[Player]:
        """
        Advance to the next player who can act.

        Seats are scanned circularly starting after the current one, with the
        current seat itself checked last.

        Returns:
            the new current player, or None if nobody can act
        """
        count = len(self.active_players)
        if count == 0:
            return None

        start = self.current_player_index
        for offset in range(1, count + 1):
            index = (start + offset) % count
            player = self.active_players[index]
            if player.is_actionable:
                self.current_player_index = index
                return player
        return None

    def first_to_act_after_dealer(self) -> Optional[Player]:
        """Point the turn at the first actionable seat left of the button."""
        self.current_player_index = self.dealer_index
        return self.next_player()

    # -- resets --

    def reset_for_new_round(self) -> None:
        self.active_players = [p for p in self.players if p.chips > 0]
        for player in self.active_players:
            player.reset_for_new_round()
        self.phase = GamePhase.BLINDS
        self.current_bet = 0
        self.min_raise = self.big_blind

    def reset_for_new_phase(self) -> None:
        for player in self.active_players:
            player.reset_for_new_street()
        self.current_bet = 0
        self.min_raise = self.big_blind

    def set_blinds(self, small_blind: int, big_blind: int) -> None:
        if small_blind <= 0 or big_blind <= small_blind:
            raise GameConfigError(f"Invalid blind levels: {small_blind}/{big_blind}")
        self.small_blind = small_blind
        self.big_blind = big_blind
        self.min_raise = big_blind

    # -- legality --

    def get_available_actions(self, player: Player) -> List[AvailableAction]:
        """
        Legal options for ``player`` against the current betting line.

        FOLD is always offered. CHECK needs nothing to call. CALL carries the
        chips needed, capped at the stack. RAISE bounds are total street
        bets; a stack that cannot reach the normal minimum may still raise
        all-in.
        """
        actions = [AvailableAction(ActionType.FOLD)]
        to_call = self.current_bet - player.bet

        if self.current_bet == 0 or self.current_bet == player.bet:
            actions.append(AvailableAction(ActionType.CHECK))

        if self.current_bet > player.bet:
            call_value = min(to_call, player.chips)
            if call_value > 0:
                actions.append(AvailableAction(ActionType.CALL, value=call_value))

        if player.chips > to_call:
            min_target = max(self.current_bet + self.min_raise, self.big_blind, player.bet + 1)
            max_target = player.bet + player.chips
            min_target = min(min_target, max_target)

            if min_target <= max_target and min_target > player.bet:
                actions.append(AvailableAction(
                    ActionType.RAISE, min_amount=min_target, max_amount=max_target
                ))

        return actions

    def to_dict(self, viewer_id: Optional[int] = None) -> Dict[str, Any]:
        """Serialisable view; hole cards of other players are hidden when ``viewer_id`` is set."""
        return {
            'phase': self.phase.value,
            'dealer_index': self.dealer_index,
            'current_player_index': self.current_player_index,
            'small_blind': self.small_blind,
            'big_blind': self.big_blind,
            'current_bet': self.current_bet,
            'min_raise': self.min_raise,
            'players': [
                p.to_dict(reveal_hand=viewer_id is None or p.player_id == viewer_id)
                for p in self.active_players
            ],
        }
