"""
GameState tests: legal actions, turn order, dealer rotation and resets
"""

import random

import pytest

from holdem_engine.core.actions import AvailableAction
from holdem_engine.core.enums import ActionType, GamePhase
from holdem_engine.core.exceptions import DealerResolutionError, GameConfigError
from holdem_engine.core.player import Player
from holdem_engine.game.game_state import GameState


def seat(chips_list, **kwargs) -> GameState:
    state = GameState(rng=random.Random(1), **kwargs)
    for index, chips in enumerate(chips_list, start=1):
        state.add_player(Player(index, f"P{index}", chips=chips))
    return state


def types(actions):
    return [a.action_type for a in actions]


@pytest.mark.unit
class TestAvailableActions:

    def setup_method(self):
        self.state = seat([1000, 1000, 1000])
        self.player = self.state.players[0]

    def test_unopened_street(self):
        actions = self.state.get_available_actions(self.player)
        assert types(actions) == [ActionType.FOLD, ActionType.CHECK, ActionType.RAISE]
        assert actions[-1] == AvailableAction(ActionType.RAISE, min_amount=10, max_amount=1000)

    def test_facing_a_bet(self):
        self.state.current_bet = 50
        self.state.min_raise = 40
        actions = self.state.get_available_actions(self.player)
        assert types(actions) == [ActionType.FOLD, ActionType.CALL, ActionType.RAISE]
        assert actions[1].value == 50
        assert (actions[2].min_amount, actions[2].max_amount) == (90, 1000)

    def test_matched_bet_can_check(self):
        self.state.current_bet = 10
        self.player.place_bet(10)
        assert ActionType.CHECK in types(self.state.get_available_actions(self.player))

    def test_short_stack_call_is_capped_and_cannot_raise(self):
        self.player.chips = 30
        self.state.current_bet = 50
        actions = self.state.get_available_actions(self.player)
        assert types(actions) == [ActionType.FOLD, ActionType.CALL]
        assert actions[1].value == 30

    def test_short_stack_may_raise_all_in_below_minimum(self):
        self.player.chips = 70
        self.state.current_bet = 50
        self.state.min_raise = 50
        raise_option = self.state.get_available_actions(self.player)[-1]
        assert raise_option.action_type is ActionType.RAISE
        assert raise_option.min_amount == raise_option.max_amount == 70

    def test_raise_bounds_include_current_bet(self):
        self.state.current_bet = 30
        self.state.min_raise = 20
        self.player.place_bet(10)
        raise_option = self.state.get_available_actions(self.player)[-1]
        assert raise_option.min_amount == 50
        assert raise_option.max_amount == 1000

    def test_fold_always_offered(self):
        self.player.chips = 0
        self.state.current_bet = 20
        assert types(self.state.get_available_actions(self.player)) == [ActionType.FOLD]

    def test_to_dict(self):
        option = AvailableAction(ActionType.RAISE, min_amount=20, max_amount=100)
        assert option.to_dict() == {'type': 'RAISE', 'min': 20, 'max': 100}
        assert AvailableAction(ActionType.CALL, value=15).to_dict() == {'type': 'CALL', 'value': 15}


@pytest.mark.unit
class TestTurnOrder:

    def test_next_player_skips_folded_and_all_in(self):
        state = seat([100, 100, 100, 100])
        state.current_player_index = 0
        state.players[1].fold()
        state.players[2].place_bet(100)
        assert state.next_player() is state.players[3]
        assert state.next_player() is state.players[0]

    def test_current_player_is_checked_last(self):
        state = seat([100, 100, 100])
        state.current_player_index = 1
        state.players[0].fold()
        state.players[2].fold()
        assert state.next_player() is state.players[1]

    def test_none_when_nobody_can_act(self):
        state = seat([100, 100])
        state.current_player_index = 0
        for player in state.players:
            player.place_bet(100)
        assert state.next_player() is None

    def test_first_to_act_after_dealer(self):
        state = seat([100, 100, 100])
        state.dealer_index = 2
        assert state.first_to_act_after_dealer() is state.players[0]

    def test_positions_three_handed(self):
        state = seat([100, 100, 100])
        assert state.assign_positions(0) == (1, 2)
        assert state.players[0].is_dealer
        assert state.players[1].is_small_blind
        assert state.players[2].is_big_blind
        assert state.current_player is state.players[0]

    def test_positions_heads_up(self):
        state = seat([100, 100])
        assert state.assign_positions(1) == (1, 0)
        dealer = state.players[1]
        assert dealer.is_dealer and dealer.is_small_blind
        assert state.players[0].is_big_blind
        assert state.current_player is dealer

    def test_assign_positions_out_of_range(self):
        with pytest.raises(DealerResolutionError):
            seat([100, 100]).assign_positions(5)


@pytest.mark.unit
class TestDealerRotation:

    def test_first_dealer_comes_from_the_random_source(self):
        state = seat([100, 100, 100, 100])
        expected = random.Random(1).randrange(4)
        assert state.next_dealer() == expected

    def test_button_moves_one_seat(self):
        state = seat([100, 100, 100])
        first = state.next_dealer()
        second = state.next_dealer()
        assert second == (first + 1) % 3

    def test_busted_players_are_skipped(self):
        state = seat([100, 100, 100, 100])
        state.dealer_index = state.next_dealer()
        dealer_seat = state.players.index(state.dealer)
        state.players[(dealer_seat + 1) % 4].chips = 0
        state.reset_for_new_round()

        new_dealer = state.active_players[state.next_dealer()]
        assert new_dealer is state.players[(dealer_seat + 2) % 4]

    def test_busted_dealer_passes_the_button_on(self):
        state = seat([100, 100, 100])
        first = state.active_players[state.next_dealer()]
        seat_index = state.players.index(first)
        first.chips = 0
        state.reset_for_new_round()

        new_dealer = state.active_players[state.next_dealer()]
        assert new_dealer is state.players[(seat_index + 1) % 3]

    def test_no_players(self):
        with pytest.raises(DealerResolutionError):
            GameState().next_dealer()


@pytest.mark.unit
class TestResets:

    def test_round_reset_drops_busted_players(self):
        state = seat([100, 0, 50])
        state.current_bet = 40
        state.min_raise = 80
        state.reset_for_new_round()
        assert [p.player_id for p in state.active_players] == [1, 3]
        assert state.phase is GamePhase.BLINDS
        assert state.current_bet == 0
        assert state.min_raise == state.big_blind

    def test_phase_reset_keeps_round_totals(self):
        state = seat([100, 100])
        state.players[0].place_bet(30)
        state.current_bet = 30
        state.min_raise = 20
        state.reset_for_new_phase()
        assert state.players[0].bet == 0
        assert state.players[0].total_bet == 30
        assert state.current_bet == 0
        assert state.min_raise == 10

    def test_round_then_phase_reset_clears_bets(self):
        state = seat([100, 100, 100])
        state.players[0].place_bet(40)
        state.players[1].place_bet(25)
        state.current_bet = 40
        state.min_raise = 30
        state.reset_for_new_round()
        state.reset_for_new_phase()
        assert all(p.bet == 0 for p in state.active_players)
        assert state.current_bet == 0

    def test_resets_are_idempotent(self):
        state = seat([100, 100, 100])
        state.reset_for_new_round()
        snapshot = state.to_dict()
        state.reset_for_new_round()
        assert state.to_dict() == snapshot

        state.reset_for_new_phase()
        snapshot = state.to_dict()
        state.reset_for_new_phase()
        assert state.to_dict() == snapshot


@pytest.mark.unit
class TestSeating:

    def test_duplicate_ids_rejected(self):
        state = seat([100])
        with pytest.raises(GameConfigError):
            state.add_player(Player(1, "Again"))

    def test_invalid_blinds(self):
        with pytest.raises(GameConfigError):
            GameState(small_blind=10, big_blind=10)
        with pytest.raises(GameConfigError):
            seat([100]).set_blinds(0, 10)

    def test_to_dict_hides_other_hands(self, cards):
        state = seat([100, 100])
        state.players[0].hand = cards("As Kd")
        state.players[1].hand = cards("2c 2d")
        view = state.to_dict(viewer_id=1)
        assert view['players'][0]['hand'] == ["As", "Kd"]
        assert view['players'][1]['hand'] is None
