"""
Pot distribution tests
"""

import pytest

from holdem_engine.betting.pot_manager import PotAward, PotDistributor, split_amount, summarize_awards
from holdem_engine.betting.side_pot import SidePot
from holdem_engine.core.card import parse_cards
from holdem_engine.core.player import Player


@pytest.mark.unit
class TestSplitAmount:

    def test_even_split(self):
        assert split_amount(300, 3) == [100, 100, 100]

    def test_remainder_goes_to_first_share(self):
        assert split_amount(10, 3) == [4, 3, 3]
        assert split_amount(1, 2) == [1, 0]

    def test_invalid_share_count(self):
        with pytest.raises(ValueError):
            split_amount(10, 0)


@pytest.mark.unit
class TestPotDistributor:

    def setup_method(self):
        self.board = parse_cards("2c 7d 9h Js 3s")
        self.players = [
            Player(1, "A", chips=0, hand=parse_cards("As Ad")),
            Player(2, "B", chips=0, hand=parse_cards("Ks Kd")),
            Player(3, "C", chips=0, hand=parse_cards("Qs Qd")),
        ]
        self.distributor = PotDistributor()

    def test_best_hand_takes_the_pot(self):
        awards = self.distributor.distribute([SidePot(300, [1, 2, 3])], self.players, self.board)
        assert [(a.player_id, a.amount) for a in awards] == [(1, 300)]
        assert self.players[0].chips == 300
        assert awards[0].strength is not None

    def test_side_pot_goes_to_best_eligible_hand(self):
        pots = [SidePot(300, [1, 2, 3]), SidePot(200, [2, 3])]
        awards = self.distributor.distribute(pots, self.players, self.board)
        assert summarize_awards(awards) == {1: 300, 2: 200}
        assert [p.chips for p in self.players] == [300, 200, 0]

    def test_split_pot_odd_chip_to_first_in_seat_order(self):
        board = parse_cards("Ah Kh Qh Jh Th")
        awards = self.distributor.distribute([SidePot(101, [1, 2, 3])], self.players, board)
        assert [(a.player_id, a.amount) for a in awards] == [(1, 35), (2, 33), (3, 33)]

    def test_pot_without_eligible_player_is_shared(self):
        awards = self.distributor.distribute([SidePot(90, [7])], self.players, self.board)
        assert [a.amount for a in awards] == [30, 30, 30]

    def test_evaluator_is_injectable(self):
        calls = []

        def reverse_rank(hole, community):
            calls.append(tuple(hole))
            return -hole[0].rank.value

        distributor = PotDistributor(reverse_rank)
        awards = distributor.distribute([SidePot(60, [1, 2, 3])], self.players, self.board)
        assert awards[0].player_id == 3
        assert len(calls) == 3

    def test_award_dict(self):
        award = PotAward(1, "A", 50, hand=tuple(parse_cards("As Ad")))
        assert award.to_dict()['hand'] == ["As", "Ad"]
        assert award.to_dict()['amount'] == 50

    def test_scores_outside_the_category_bands(self):
        distributor = PotDistributor(lambda hole, community: 10 ** 9 + hole[0].rank.value)
        awards = distributor.distribute([SidePot(60, [1, 2, 3])], self.players, self.board)
        assert [(a.player_id, a.amount) for a in awards] == [(1, 60)]
        assert awards[0].strength == 10 ** 9 + 14
