"""
Hand strength evaluation.

Maps two hole cards plus up to five community cards to a single integer.
A larger integer always means a stronger hand and equal hands produce equal
integers, so showdown only has to compare numbers.

Layout of the integer::

    strength = category.base_offset * CATEGORY_SCALE + payload

The payload packs ranks in base 15, most significant card first, so a
higher kicker outweighs any combination of lower ones. The detectors scan
the whole multiset of cards at once instead of enumerating 5-card subsets.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..core.card import Card
from ..core.enums import Suit
from .hand_category import HandCategory, CATEGORY_SCALE, KICKER_BASE

WHEEL_HIGH = 5
ACE = 14


def _pack(ranks: Sequence[int], width: int) -> int:
    """Base-15 positional packing; missing trailing ranks count as zero."""
    value = 0
    for i in range(width):
        rank = ranks[i] if i < len(ranks) else 0
        value += rank * KICKER_BASE ** (width - 1 - i)
    return value


def _straight_high(ranks: Sequence[int]) -> int:
    """
    Return the high card of the best 5-long run in ``ranks``, or 0.

    The ace also plays low, but only to complete A-2-3-4-5.
    """
    present = set(ranks)
    if ACE in present:
        present.add(1)

    for high in range(ACE, WHEEL_HIGH - 1, -1):
        if all(r in present for r in range(high - 4, high + 1)):
            return high
    return 0


class HandEvaluator:
    """
    Stateless hand evaluator.

    Examples:
        >>> from holdem_engine.core.card import parse_cards
        >>> strength = HandEvaluator.evaluate_hand(parse_cards("Ad 2c"), parse_cards("3h 4s 5d"))
        >>> HandEvaluator.category_of(strength)
        <HandCategory.STRAIGHT: 4>
    """

    @classmethod
    def evaluate_hand(cls, hole: Sequence[Card], community: Sequence[Card] = ()) -> int:
        """
        Evaluate the best hand available from ``hole`` and ``community``.

        Args:
            hole: exactly two hole cards
            community: zero to five board cards

        Returns:
            integer strength, comparable across all hands

        Raises:
            ValueError: wrong card counts or duplicated cards
        """
        cards = cls._validate(hole, community)
        ranks = sorted((card.rank.value for card in cards), reverse=True)
        counts = Counter(ranks)

        flush_ranks = cls._flush_ranks(cards)

        if flush_ranks is not None:
            straight_flush_high = _straight_high(flush_ranks)
            if straight_flush_high == ACE:
                return cls._strength(HandCategory.ROYAL_FLUSH, 0)
            if straight_flush_high:
                return cls._strength(HandCategory.STRAIGHT_FLUSH, straight_flush_high)

        quads = [rank for rank, count in counts.items() if count == 4]
        if quads:
            quad = max(quads)
            kicker = max((r for r in ranks if r != quad), default=0)
            return cls._strength(HandCategory.FOUR_OF_A_KIND, quad * KICKER_BASE + kicker)

        trips = sorted((rank for rank, count in counts.items() if count == 3), reverse=True)
        pairs = sorted((rank for rank, count in counts.items() if count == 2), reverse=True)

        if trips and (len(trips) > 1 or pairs):
            # a second set of trips plays as the pair
            pair = max(trips[1:] + pairs)
            return cls._strength(HandCategory.FULL_HOUSE, trips[0] * KICKER_BASE + pair)

        if flush_ranks is not None:
            return cls._strength(HandCategory.FLUSH, _pack(flush_ranks[:5], 5))

        straight_high = _straight_high(ranks)
        if straight_high:
            return cls._strength(HandCategory.STRAIGHT, straight_high)

        if trips:
            kickers = [r for r in ranks if r != trips[0]][:2]
            return cls._strength(HandCategory.THREE_OF_A_KIND, _pack([trips[0]] + kickers, 3))

        if len(pairs) >= 2:
            high, low = pairs[0], pairs[1]
            kicker = max((r for r in ranks if r not in (high, low)), default=0)
            return cls._strength(HandCategory.TWO_PAIR, _pack([high, low, kicker], 3))

        if pairs:
            kickers = [r for r in ranks if r != pairs[0]][:3]
            return cls._strength(HandCategory.PAIR, _pack([pairs[0]] + kickers, 4))

        return cls._strength(HandCategory.HIGH_CARD, _pack(ranks[:5], 5))

    @staticmethod
    def category_of(strength: int) -> HandCategory:
        """Recover the category from a strength value."""
        return HandCategory(strength // (1000 * CATEGORY_SCALE))

    @classmethod
    def describe(cls, strength: int) -> str:
        category = cls.category_of(strength)
        if category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH):
            high = strength - category.floor
            return f"{category} ({high} high)"
        return str(category)

    @staticmethod
    def _strength(category: HandCategory, payload: int) -> int:
        return category.floor + payload

    @staticmethod
    def _flush_ranks(cards: Sequence[Card]) -> Optional[List[int]]:
        """Descending ranks of the suit holding five or more cards, if any."""
        by_suit: Dict[Suit, List[int]] = {}
        for card in cards:
            by_suit.setdefault(card.suit, []).append(card.rank.value)

        for suited in by_suit.values():
            if len(suited) >= 5:
                return sorted(suited, reverse=True)
        return None

    @staticmethod
    def _validate(hole: Sequence[Card], community: Sequence[Card]) -> List[Card]:
        if len(hole) != 2:
            raise ValueError(f"Expected 2 hole cards, got {len(hole)}")
        if len(community) > 5:
            raise ValueError(f"At most 5 community cards, got {len(community)}")

        cards = list(hole) + list(community)
        for card in cards:
            if not isinstance(card, Card):
                raise ValueError(f"Not a card: {card!r}")
        if len(set(cards)) != len(cards):
            raise ValueError("Duplicate cards in hand")
        return cards


def evaluate_hand(hole: Sequence[Card], community: Sequence[Card] = ()) -> int:
    """Module level shortcut for ``HandEvaluator.evaluate_hand``."""
    return HandEvaluator.evaluate_hand(hole, community)
