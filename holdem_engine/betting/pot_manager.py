"""
Pot distribution at showdown.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..core.card import Card, cards_to_str
from ..core.player import Player
from ..evaluator.hand_evaluator import HandEvaluator
from .side_pot import SidePot

logger = logging.getLogger(__name__)

Evaluate = Callable[[Sequence[Card], Sequence[Card]], int]


@dataclass(frozen=True)
class PotAward:
    """Chips paid to one player out of one pot."""
    player_id: int
    player_name: str
    amount: int
    pot_index: int = 0
    hand: Tuple[Card, ...] = ()
    strength: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'player_id': self.player_id,
            'player_name': self.player_name,
            'amount': self.amount,
            'pot_index': self.pot_index,
            'hand': cards_to_str(self.hand),
            'strength': self.strength,
        }


def _describe(strength: int) -> str:
    # injected evaluators may score outside the built-in category bands
    try:
        return HandEvaluator.describe(strength)
    except ValueError:
        return f"strength {strength}"


def split_amount(amount: int, shares: int) -> List[int]:
    """
    Split ``amount`` into ``shares`` integer parts.

    The odd chips all go to the first share, e.g. ``split_amount(10, 3)``
    gives ``[4, 3, 3]``.
    """
    if shares <= 0:
        raise ValueError(f"Cannot split a pot between {shares} players")
    base, remainder = divmod(amount, shares)
    parts = [base] * shares
    parts[0] += remainder
    return parts


class PotDistributor:
    """
    Awards a list of pots to the best eligible hands.

    The evaluator is injectable so tests can count or script evaluations.
    """

    def __init__(self, evaluate: Evaluate = HandEvaluator.evaluate_hand):
        self._evaluate = evaluate

    def distribute(self, pots: Sequence[SidePot], contenders: Sequence[Player],
                   community: Sequence[Card]) -> List[PotAward]:
        """
        Pay out every pot.

        Args:
            pots: pots from ``calculate_side_pots``
            contenders: non-folded players in seat order
            community: the board

        Returns:
            one award per winner per pot, in pot order
        """
        awards: List[PotAward] = []

        for pot_index, pot in enumerate(pots):
            eligible = [p for p in contenders if p.player_id in pot.eligible_players]

            if not eligible:
                logger.warning(
                    f"Pot #{pot_index} ({pot.amount}) has no eligible player, "
                    f"splitting it among all {len(contenders)} contenders"
                )
                awards.extend(self._pay(pot.amount, list(contenders), pot_index, {}))
                continue

            strengths: Dict[int, int] = {
                p.player_id: self._evaluate(p.hand, community) for p in eligible
            }
            for p in eligible:
                logger.debug(
                    f"{p.name} shows {' '.join(cards_to_str(p.hand))}: "
                    f"{_describe(strengths[p.player_id])}"
                )

            best = max(strengths.values())
            winners = [p for p in eligible if strengths[p.player_id] == best]
            logger.info(
                f"Pot #{pot_index} ({pot.amount}) won by "
                f"{', '.join(w.name for w in winners)} with {_describe(best)}"
            )
            awards.extend(self._pay(pot.amount, winners, pot_index, strengths))

        return awards

    @staticmethod
    def _pay(amount: int, winners: List[Player], pot_index: int,
             strengths: Dict[int, int]) -> List[PotAward]:
        awards = []
        for winner, share in zip(winners, split_amount(amount, len(winners))):
            winner.add_chips(share)
            awards.append(PotAward(
                player_id=winner.player_id,
                player_name=winner.name,
                amount=share,
                pot_index=pot_index,
                hand=tuple(winner.hand),
                strength=strengths.get(winner.player_id),
            ))
        return awards


def summarize_awards(awards: Sequence[PotAward]) -> Dict[int, int]:
    """Total chips won per player id."""
    totals: Dict[int, int] = {}
    for award in awards:
        totals[award.player_id] = totals.get(award.player_id, 0) + award.amount
    return totals
