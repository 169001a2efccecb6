"""
Side pot construction tests
"""

import pytest

from holdem_engine.betting.side_pot import SidePot, calculate_side_pots, total_in_pots


@pytest.mark.unit
class TestCalculateSidePots:

    def test_single_pot_when_everyone_matches(self):
        pots = calculate_side_pots({1: 50, 2: 50, 3: 50}, [1, 2, 3])
        assert pots == [SidePot(150, [1, 2, 3])]

    def test_all_in_for_less_creates_a_side_pot(self):
        pots = calculate_side_pots({1: 100, 2: 250, 3: 250}, [1, 2, 3])
        assert pots == [SidePot(300, [1, 2, 3]), SidePot(300, [2, 3])]

    def test_three_levels(self):
        pots = calculate_side_pots({1: 25, 2: 50, 3: 100}, [1, 2, 3])
        assert [p.amount for p in pots] == [75, 50, 50]
        assert [p.eligible_players for p in pots] == [[1, 2, 3], [2, 3], [3]]

    def test_folded_money_is_dead_but_counted(self):
        pots = calculate_side_pots({1: 100, 2: 40, 3: 100}, [1, 3])
        assert pots == [SidePot(240, [1, 3])]

    def test_folded_player_between_levels(self):
        # player 2 folded after putting in 150; contenders are all-in at 100 and 200
        pots = calculate_side_pots({1: 100, 2: 150, 3: 200}, [1, 3])
        assert pots == [SidePot(300, [1, 3]), SidePot(150, [3])]

    def test_folded_overflow_goes_to_last_pot(self):
        pots = calculate_side_pots({1: 50, 2: 80, 3: 50}, [1, 3])
        assert pots == [SidePot(180, [1, 3])]

    def test_sum_matches_contributions(self):
        contributions = {1: 10, 2: 500, 3: 75, 4: 75, 5: 0}
        pots = calculate_side_pots(contributions, [1, 2, 3])
        assert total_in_pots(pots) == sum(contributions.values())

    def test_eligibility_keeps_seat_order(self):
        pots = calculate_side_pots({3: 100, 1: 100, 2: 100}, [2, 3, 1])
        assert pots[0].eligible_players == [3, 1, 2]

    def test_contenders_may_be_a_generator(self):
        pots = calculate_side_pots({1: 100, 2: 250, 3: 250}, (pid for pid in [1, 2, 3]))
        assert [p.eligible_players for p in pots] == [[1, 2, 3], [2, 3]]

    def test_nothing_contributed(self):
        assert calculate_side_pots({1: 0, 2: 0}, [1, 2]) == []


@pytest.mark.unit
class TestSidePot:

    def test_validation(self):
        with pytest.raises(ValueError):
            SidePot(-1, [1])
        with pytest.raises(ValueError):
            SidePot(10, [1, 1])

    def test_to_dict_and_str(self):
        pot = SidePot(300, [2, 3])
        assert pot.to_dict() == {'amount': 300, 'eligible_players': [2, 3]}
        assert str(pot) == "Pot(300 chips, players: 2, 3)"
