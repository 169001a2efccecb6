"""
Property-based tests for the hand evaluator

The evaluator works on all cards at once; these tests check it against the
best 5-card subset and against basic ordering properties.
"""

from itertools import combinations

import pytest
from hypothesis import given, settings, strategies as st

from holdem_engine.core.deck import Deck
from holdem_engine.evaluator import CATEGORY_SCALE, HandCategory, HandEvaluator, evaluate_hand

ALL_CARDS = Deck().cards


def distinct_cards(count):
    return st.lists(st.sampled_from(ALL_CARDS), min_size=count, max_size=count, unique=True)


@pytest.mark.property_test
@given(distinct_cards(7))
@settings(max_examples=200, deadline=None)
def test_seven_cards_equal_best_five(cards):
    best_subset = max(evaluate_hand(list(five[:2]), list(five[2:])) for five in combinations(cards, 5))
    assert evaluate_hand(cards[:2], cards[2:]) == best_subset


@pytest.mark.property_test
@given(distinct_cards(7), st.permutations(range(7)))
@settings(max_examples=100, deadline=None)
def test_split_between_hole_and_board_does_not_matter(cards, order):
    shuffled = [cards[i] for i in order]
    assert evaluate_hand(cards[:2], cards[2:]) == evaluate_hand(shuffled[:2], shuffled[2:])


@pytest.mark.property_test
@given(distinct_cards(7))
@settings(max_examples=100, deadline=None)
def test_more_board_cards_never_weaken_a_hand(cards):
    hole, board = cards[:2], cards[2:]
    strengths = [evaluate_hand(hole, board[:k]) for k in range(6)]
    assert strengths == sorted(strengths)


@pytest.mark.property_test
@given(distinct_cards(7))
@settings(max_examples=200, deadline=None)
def test_strength_stays_inside_its_category_band(cards):
    strength = evaluate_hand(cards[:2], cards[2:])
    category = HandEvaluator.category_of(strength)
    assert isinstance(category, HandCategory)
    assert category.floor <= strength < category.floor + 1000 * CATEGORY_SCALE
