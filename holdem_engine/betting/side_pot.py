"""
Side pot construction.

Pots are layered by contribution tier: each distinct ``total_bet`` level
among the players still contesting the hand closes one pot, eligible to
every contender who reached that level.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List


@dataclass
class SidePot:
    """
    One pot and the ids of the players who can win it.

    ``eligible_players`` keeps seat order, which decides who receives an odd
    chip when the pot is split.
    """
    amount: int
    eligible_players: List[int] = field(default_factory=list)

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Pot amount cannot be negative: {self.amount}")

        if len(self.eligible_players) != len(set(self.eligible_players)):
            raise ValueError("Duplicate player in pot eligibility")

    def to_dict(self) -> dict:
        return {'amount': self.amount, 'eligible_players': list(self.eligible_players)}

    def __str__(self) -> str:
        players = ", ".join(map(str, self.eligible_players))
        return f"Pot({self.amount} chips, players: {players})"


def calculate_side_pots(contributions: Dict[int, int], contenders: Iterable[int]) -> List[SidePot]:
    """
    Build the main pot and side pots.

    Args:
        contributions: ``{player_id: total_bet}`` for every player who put
            chips in this round, folded players included, in seat order
        contenders: ids of the players who have not folded

    Returns:
        pots in tier order ``[main, side 1, side 2, ...]``; their amounts
        add up to the sum of ``contributions``

    Algorithm:
        1. Sort the distinct contribution levels of the contenders ascending.
        2. For each level above the previous one, the pot takes from every
           player the part of their contribution between the two levels.
           Folded players pay into the tiers they reached but are never
           eligible.
        3. Anything contributed above the top contender level (only possible
           from folded players) goes into the last pot.

    Example:
        contributions ``{A: 100, B: 250, C: 250}``, nobody folded:
        main pot 100 x 3 = 300 for A, B, C; side pot 150 x 2 = 300 for B, C.
    """
    contender_set = set(contenders)
    contender_ids = [pid for pid in contributions if pid in contender_set]
    levels = sorted({contributions[pid] for pid in contender_ids if contributions[pid] > 0})

    pots: List[SidePot] = []
    prev = 0

    for level in levels:
        amount = sum(
            min(max(contrib - prev, 0), level - prev)
            for contrib in contributions.values()
        )
        eligible = [pid for pid in contender_ids if contributions[pid] >= level]
        pots.append(SidePot(amount, eligible))
        prev = level

    overflow = sum(max(contrib - prev, 0) for contrib in contributions.values())
    if overflow > 0:
        if pots:
            pots[-1].amount += overflow
        else:
            pots.append(SidePot(overflow, list(contender_ids)))

    return pots


def total_in_pots(pots: Iterable[SidePot]) -> int:
    return sum(pot.amount for pot in pots)
