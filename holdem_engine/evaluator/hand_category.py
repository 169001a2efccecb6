"""
Hand categories and their strength offsets.
"""

from enum import IntEnum

# Every category owns a band of CATEGORY_SCALE * 1000 values; kicker payloads
# are always below 15 ** 5, which fits inside one band.
CATEGORY_SCALE = 1000
KICKER_BASE = 15


class HandCategory(IntEnum):
    """
    Hand categories from weakest to strongest.

    ``base_offset`` is the conventional 0..9000 offset of the category; the
    evaluator multiplies it by ``CATEGORY_SCALE`` before adding kickers.
    """
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def base_offset(self) -> int:
        return self.value * 1000

    @property
    def floor(self) -> int:
        """Lowest strength value belonging to this category."""
        return self.base_offset * CATEGORY_SCALE

    def __str__(self) -> str:
        return HAND_CATEGORY_NAMES[self]


HAND_CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "high card",
    HandCategory.PAIR: "pair",
    HandCategory.TWO_PAIR: "two pair",
    HandCategory.THREE_OF_A_KIND: "three of a kind",
    HandCategory.STRAIGHT: "straight",
    HandCategory.FLUSH: "flush",
    HandCategory.FULL_HOUSE: "full house",
    HandCategory.FOUR_OF_A_KIND: "four of a kind",
    HandCategory.STRAIGHT_FLUSH: "straight flush",
    HandCategory.ROYAL_FLUSH: "royal flush",
}
