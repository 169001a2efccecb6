"""
Game orchestration.

``Game`` seats bots, runs rounds and drives every state change: it posts the
blinds, deals, runs each betting street, builds side pots and pays them out.
The only ``await`` inside a round is the call to ``Bot.decide``.
"""

import logging
import math
import random
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Set, Union

from ..betting.pot_manager import Evaluate, PotAward, PotDistributor, summarize_awards
from ..betting.side_pot import SidePot, calculate_side_pots, total_in_pots
from ..core.actions import AvailableAction, Decision
from ..core.card import cards_to_str
from ..core.config import GameConfig
from ..core.deck import Deck
from ..core.enums import ActionType, GamePhase
from ..core.exceptions import GameConfigError, GameStateError, IllegalActionError
from ..core.player import Player
from ..core.table import Table
from ..evaluator.hand_evaluator import HandEvaluator
from .game_state import GameState
from .recorder import Recorder
from .snapshot import BotView, PlayerView

if TYPE_CHECKING:
    from ..bots.base import Bot

logger = logging.getLogger(__name__)

# cards dealt on each postflop street
STREET_CARDS = {
    GamePhase.FLOP: 3,
    GamePhase.TURN: 1,
    GamePhase.RIVER: 1,
}


@dataclass
class GameResult:
    """Outcome of ``Game.start_game``."""
    winners: List[str]
    final_chips: Dict[str, int]
    rounds_played: int
    history_path: Optional[Path] = None
    standings: List[Player] = field(default_factory=list, repr=False)


class Game:
    """
    Runs a sequence of No-Limit Hold'em rounds between bots.

    A single ``random.Random`` (seeded from ``config.random_seed``) drives
    both the deck and the first dealer choice, so a seed fixes the whole
    deal sequence.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 recorder: Optional[Recorder] = None,
                 rng: Optional[random.Random] = None,
                 evaluate: Evaluate = HandEvaluator.evaluate_hand):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.recorder = recorder if recorder is not None else Recorder()

        self.deck = Deck(rng=self.rng)
        self.table = Table()
        self.game_state = GameState(
            small_blind=self.config.small_blind,
            big_blind=self.config.big_blind,
            rng=self.rng,
        )
        self.bots: Dict[int, 'Bot'] = {}
        self.pot_distributor = PotDistributor(evaluate)

        self.current_round = 0
        self.blind_increase_count = 0

    # -- seating --

    def add_bot(self, bot: 'Bot') -> Player:
        """Seat a player for ``bot`` with the configured starting stack."""
        if len(self.game_state.players) >= self.config.max_players:
            raise GameConfigError(f"Table is full ({self.config.max_players} seats)")

        player = Player(bot.bot_id, bot.name, chips=self.config.starting_chips)
        self.game_state.add_player(player)
        self.bots[bot.bot_id] = bot
        logger.debug(f"Seated {player.name} (id {player.player_id})")
        return player

    @property
    def players(self) -> List[Player]:
        return self.game_state.players

    def players_with_chips(self) -> List[Player]:
        return [p for p in self.game_state.players if p.chips > 0]

    # -- game loop --

    async def start_game(self, max_rounds: Optional[int] = None,
                         save_history: bool = False,
                         log_dir: Union[str, Path] = "logs") -> GameResult:
        """
        Play rounds until one player holds every chip or ``max_rounds`` is reached.

        Any exception aborts the game. Before it propagates, the failure is
        logged and, with ``save_history``, an emergency history file is
        written.
        """
        if len(self.game_state.players) < self.config.min_players:
            raise GameConfigError(
                f"Need at least {self.config.min_players} players, "
                f"have {len(self.game_state.players)}"
            )

        for bot in self.bots.values():
            bot.reset()
        self.recorder.init_game(self.game_state.players)
        logger.info(f"Game starts with {len(self.game_state.players)} players")

        rounds_played = 0
        round_number = 1
        try:
            while len(self.players_with_chips()) > 1:
                if max_rounds is not None and round_number > max_rounds:
                    break
                if not await self.play_round(round_number):
                    break
                rounds_played += 1
                round_number += 1
        except Exception:
            logger.exception(
                f"Game aborted during round {round_number}, state: {self.game_state.to_dict()}"
            )
            if save_history:
                self.recorder.save_to_file(
                    f"emergency_{datetime.now().strftime('%Y-%m-%dT%H-%M-%S')}", log_dir
                )
            raise

        history_path = self.recorder.save_to_file(directory=log_dir) if save_history else None
        return self._build_result(rounds_played, history_path)

    def _build_result(self, rounds_played: int, history_path: Optional[Path]) -> GameResult:
        standings = sorted(self.game_state.players, key=lambda p: p.chips, reverse=True)
        top = standings[0].chips if standings else 0
        winners = [p.name for p in standings if p.chips == top and top > 0]
        logger.info(f"Game over after {rounds_played} rounds, winners: {', '.join(winners)}")
        return GameResult(
            winners=winners,
            final_chips={p.name: p.chips for p in self.game_state.players},
            rounds_played=rounds_played,
            history_path=history_path,
            standings=standings,
        )

    async def play_round(self, round_number: int) -> bool:
        """
        Play one complete round.

        Returns:
            False when fewer than two players have chips and nothing was
            played, True otherwise
        """
        self.current_round = round_number
        if len(self.players_with_chips()) < 2:
            logger.info(f"Round {round_number} skipped: fewer than two players with chips")
            return False

        self.apply_blind_schedule(round_number)
        self.recorder.start_round(round_number)
        self.recorder.set_blind_values(self.game_state.small_blind, self.game_state.big_blind)
        logger.info(
            f"=== Round {round_number} (blinds "
            f"{self.game_state.small_blind}/{self.game_state.big_blind}) ==="
        )

        if not self.prepare_round():
            return False

        state = self.game_state
        self.recorder.set_positions(
            state.dealer,
            self._find_seat(lambda p: p.is_small_blind),
            self._find_seat(lambda p: p.is_big_blind),
        )

        self.place_blinds()
        self.deal_hole_cards()

        await self.betting_round(GamePhase.PREFLOP)
        for phase in (GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER):
            if self.contender_count() <= 1:
                break
            self.deal_street(phase)
            await self.betting_round(phase)

        if self.contender_count() > 1:
            awards = self.showdown()
        else:
            awards = self.award_pot_to_last_player()

        names = {p.player_id: p.name for p in state.players}
        logger.info(
            f"Round {round_number} result: " + ", ".join(
                f"{names[player_id]} +{amount}"
                for player_id, amount in summarize_awards(awards).items()
            )
        )
        self.recorder.end_round(state.players)
        return True

    def apply_blind_schedule(self, round_number: int) -> bool:
        """Raise the blinds when the schedule says so; True if they changed."""
        schedule = self.config.blind_schedule
        if not schedule.is_due(round_number, self.blind_increase_count):
            return False

        state = self.game_state
        small_blind = math.floor(state.small_blind * schedule.increase_factor)
        big_blind = math.floor(state.big_blind * schedule.increase_factor)
        state.set_blinds(small_blind, big_blind)
        self.blind_increase_count += 1
        logger.info(f"Blinds increase to {small_blind}/{big_blind}")
        return True

    # -- round setup --

    def prepare_round(self) -> bool:
        """
        Reset deck, table and players, then move the button.

        Returns:
            False if fewer than two players have chips

        Raises:
            DealerResolutionError: no dealer can be chosen
        """
        self.deck.reset().shuffle()
        self.table.reset()

        state = self.game_state
        state.reset_for_new_round()
        if len(state.active_players) < 2:
            logger.info("Not enough players with chips to start a round")
            return False

        dealer_index = state.next_dealer()
        state.assign_positions(dealer_index)
        logger.info(
            "Seats: " + ", ".join(str(p) for p in state.active_players)
        )
        return True

    def place_blinds(self) -> None:
        """Post both blinds as ordinary bets, short stacks going all-in."""
        state = self.game_state
        self.recorder.start_phase(GamePhase.BLINDS.value)

        small = self._find_seat(lambda p: p.is_small_blind)
        big = self._find_seat(lambda p: p.is_big_blind)
        if small is None or big is None:
            raise GameStateError("Blind positions have not been assigned")

        self._post_blind(small, state.small_blind, "SMALL_BLIND")
        self._post_blind(big, state.big_blind, "BIG_BLIND")

        state.current_bet = state.big_blind
        state.min_raise = state.big_blind

    def _post_blind(self, player: Player, amount: int, label: str) -> int:
        posted = player.place_bet(amount)
        self.recorder.log_action(player, {'type': label, 'value': posted})
        if player.is_all_in:
            logger.info(f"{player.name} posts {label.lower().replace('_', ' ')} {posted} and is all-in")
        else:
            logger.info(f"{player.name} posts {label.lower().replace('_', ' ')} {posted}")
        return posted

    def deal_hole_cards(self) -> None:
        self.recorder.start_phase("DEAL")
        for player in self.game_state.active_players:
            player.hand = []
            for _ in range(2):
                player.receive_card(self.deck.deal())
            logger.debug(f"{player.name} receives {' '.join(cards_to_str(player.hand))}")

        self.recorder.log_player_hands([
            {'player_id': p.player_id, 'hand': list(p.hand)}
            for p in self.game_state.active_players
        ])

    def deal_street(self, phase: GamePhase) -> None:
        """Burn one card and deal the flop, turn or river."""
        if phase not in STREET_CARDS:
            raise GameStateError(f"No community cards are dealt on {phase.value}")

        self.recorder.start_phase(phase.value)
        self.deck.burn()
        self.table.add_community_cards(self.deck.deal_cards(STREET_CARDS[phase]))
        self.recorder.log_community_cards(self.table.community_cards)
        logger.info(f"{phase.value}: {' '.join(cards_to_str(self.table.community_cards))}")

    # -- betting --

    async def betting_round(self, phase: GamePhase) -> None:
        """
        Run one betting street.

        Preflop the posted blinds stay live and the turn starts at the seat
        chosen by ``assign_positions``; on later streets bets are cleared and
        the first actionable seat after the dealer opens.
        """
        state = self.game_state
        state.phase = phase
        self.recorder.start_phase(phase.value)

        if phase is GamePhase.PREFLOP:
            player = state.current_player
        else:
            state.reset_for_new_phase()
            player = state.first_to_act_after_dealer()

        if self._nobody_left_to_act():
            logger.info(f"No betting on {phase.value}: nobody is left to act")
            self.collect_bets()
            return

        players_acted: Set[int] = set()
        consecutive_checks = 0
        complete = False
        iterations = 0

        while player is not None and iterations < self.config.max_betting_iterations:
            iterations += 1
            if not player.is_actionable:
                player = state.next_player()
                continue

            available = state.get_available_actions(player)
            decision = await self.request_decision(player, available)
            result = self.process_action(player, decision)
            self.recorder.log_action(player, decision.to_dict(), result)
            players_acted.add(player.player_id)

            if decision.action_type is ActionType.CHECK and state.current_bet == 0:
                consecutive_checks += 1
            else:
                consecutive_checks = 0

            if consecutive_checks >= len(state.actionable_players()) or \
                    self.is_street_complete(players_acted):
                complete = True
                break

            player = state.next_player()

        if not complete and player is not None:
            logger.warning(
                f"{phase.value} betting stopped after {iterations} iterations "
                f"without settling"
            )

        self.collect_bets()

    def _nobody_left_to_act(self) -> bool:
        state = self.game_state
        if len(state.contenders()) <= 1:
            return True
        actionable = state.actionable_players()
        if not actionable:
            return True
        return len(actionable) == 1 and actionable[0].bet >= state.current_bet

    def is_street_complete(self, players_acted: Set[int]) -> bool:
        """
        A street is over when at most one player is still in the hand, or
        when every player who can act has acted and matched the current bet.
        """
        state = self.game_state
        if self._nobody_left_to_act():
            return True
        return all(
            p.player_id in players_acted and p.bet == state.current_bet
            for p in state.actionable_players()
        )

    async def request_decision(self, player: Player,
                               available: List[AvailableAction]) -> Decision:
        bot = self.bots.get(player.player_id)
        if bot is None:
            raise IllegalActionError(f"No bot is bound to player {player.player_id}")

        view = self.get_game_state_for_bot(player)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"View for {player.name}: {view.to_dict()}")
        raw = await bot.decide(view, list(available))
        decision = self.validate_decision(raw, available)
        if decision.explanation:
            logger.debug(f"{player.name}: {decision.explanation}")
        return decision

    def validate_decision(self, decision: Union[Decision, Mapping[str, Any]],
                          available: Sequence[AvailableAction]) -> Decision:
        """
        Check a bot decision against the legal options.

        Illegal or malformed decisions raise; a bad RAISE amount is repaired
        and logged instead.

        Raises:
            IllegalActionError: unknown shape or an action type not on offer
        """
        if isinstance(decision, Mapping):
            decision = Decision.from_mapping(decision)
        elif not isinstance(decision, Decision):
            raise IllegalActionError(f"Malformed decision: {decision!r}")

        try:
            action_type = ActionType.parse(decision.action_type)
        except ValueError as e:
            raise IllegalActionError(str(e))
        if action_type is not decision.action_type:
            decision = replace(decision, action_type=action_type)

        option = next((a for a in available if a.action_type is decision.action_type), None)
        if option is None:
            legal = ", ".join(str(a) for a in available)
            raise IllegalActionError(
                f"{decision.action_type.value} is not allowed; legal actions: {legal}"
            )

        if decision.action_type is ActionType.RAISE:
            return replace(decision, value=self._repair_raise_value(decision.value, option))
        if decision.action_type is ActionType.CALL:
            return replace(decision, value=option.value)
        return replace(decision, value=0)

    @staticmethod
    def _repair_raise_value(value: Any, option: AvailableAction) -> int:
        low, high = option.min_amount, option.max_amount
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.warning(f"Invalid raise amount {value!r}, using the minimum {low}")
            return low
        if value < low or value > high:
            clamped = min(max(value, low), high)
            logger.warning(f"Raise amount {value} outside [{low}, {high}], using {clamped}")
            return clamped
        return value

    def process_action(self, player: Player, decision: Decision) -> Dict[str, Any]:
        """
        Apply a validated decision.

        A RAISE value is the total street bet the player wants to reach. It
        is clamped to ``[current_bet, bet + chips]``. The minimum raise only
        follows an all-in raise when that raise is a full one.

        Returns:
            a small result mapping for the recorder
        """
        state = self.game_state
        action = decision.action_type

        if action is ActionType.FOLD:
            player.fold()
            logger.debug(f"{player.name} folds")
            return {'folded': True}

        if action is ActionType.CHECK:
            logger.debug(f"{player.name} checks")
            return {'checked': True}

        if action is ActionType.CALL:
            to_call = max(0, min(state.current_bet - player.bet, player.chips))
            moved = player.place_bet(to_call)
            logger.debug(f"{player.name} calls {moved}{' (all-in)' if player.is_all_in else ''}")
            return {'called': True, 'amount': moved, 'all_in': player.is_all_in}

        if action is ActionType.RAISE:
            return self._apply_raise(player, decision.value)

        raise IllegalActionError(f"Unsupported action: {action!r}")

    def _apply_raise(self, player: Player, value: Any) -> Dict[str, Any]:
        state = self.game_state
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            value = state.current_bet + state.min_raise

        previous_bet = state.current_bet
        target = max(state.current_bet, min(value, player.chips + player.bet))
        moved = player.place_bet(max(0, target - player.bet))

        state.current_bet = max(state.current_bet, player.bet)
        raise_size = player.bet - previous_bet
        if raise_size > 0 and (not player.is_all_in or raise_size >= state.min_raise):
            state.min_raise = raise_size

        logger.debug(
            f"{player.name} raises to {player.bet} (+{raise_size})"
            f"{' all-in' if player.is_all_in else ''}"
        )
        return {'raised': True, 'amount': moved, 'to': player.bet, 'all_in': player.is_all_in}

    def collect_bets(self) -> int:
        """Sweep every street bet into the pot and return the amount collected."""
        collected = 0
        for player in self.game_state.active_players:
            if player.bet > 0:
                self.table.add_to_pot(player.bet)
                collected += player.bet
                player.bet = 0
        if collected:
            logger.debug(f"Collected {collected}, pot is {self.table.pot}")
        return collected

    # -- showdown --

    def process_side_pots(self) -> List[SidePot]:
        """
        Split the collected pot by contribution tiers.

        Raises:
            GameStateError: the pots do not add up to the table pot
        """
        state = self.game_state
        contenders = [p.player_id for p in state.contenders()]
        contributions = {p.player_id: p.total_bet for p in state.active_players}

        pots = calculate_side_pots(contributions, contenders)
        if not pots and self.table.pot > 0:
            pots = [SidePot(self.table.pot, contenders)]

        if total_in_pots(pots) != self.table.pot:
            raise GameStateError(
                f"Side pots hold {total_in_pots(pots)} chips but the pot is {self.table.pot}"
            )

        for index, pot in enumerate(pots):
            logger.info(f"{'Main pot' if index == 0 else f'Side pot {index}'}: {pot}")
        return pots

    def showdown(self) -> List[PotAward]:
        """Evaluate the remaining hands and pay out every pot."""
        state = self.game_state
        state.phase = GamePhase.SHOWDOWN
        self.recorder.start_phase(GamePhase.SHOWDOWN.value)

        contenders = state.contenders()
        if len(contenders) < 2:
            return self.award_pot_to_last_player()

        pots = self.process_side_pots()
        awards = self.pot_distributor.distribute(pots, contenders, self.table.community_cards)
        self.table.take_pot()
        self.recorder.log_pot_award(awards)
        return awards

    def award_pot_to_last_player(self) -> List[PotAward]:
        """Give the whole pot to the only player who has not folded."""
        contenders = self.game_state.contenders()
        if len(contenders) != 1:
            raise GameStateError(
                f"Expected exactly one player left in the hand, found {len(contenders)}"
            )

        winner = contenders[0]
        amount = self.table.take_pot()
        winner.add_chips(amount)
        logger.info(f"{winner.name} wins {amount} uncontested")

        awards = [PotAward(winner.player_id, winner.name, amount)]
        self.recorder.log_pot_award(awards)
        return awards

    # -- views and helpers --

    def get_game_state_for_bot(self, player: Player) -> BotView:
        """Build the view ``player``'s bot decides from; other hands stay hidden."""
        state = self.game_state
        live_bets = sum(p.bet for p in state.active_players)
        return BotView(
            player_id=player.player_id,
            players=[
                PlayerView(
                    id=p.player_id,
                    name=p.name,
                    chips=p.chips,
                    bet=p.bet,
                    total_bet=p.total_bet,
                    folded=p.folded,
                    is_all_in=p.is_all_in,
                    is_dealer=p.is_dealer,
                    is_small_blind=p.is_small_blind,
                    is_big_blind=p.is_big_blind,
                    is_current_player=p.player_id == player.player_id,
                    hand=cards_to_str(p.hand) if p.player_id == player.player_id else None,
                )
                for p in state.active_players
            ],
            hand=cards_to_str(player.hand),
            community_cards=cards_to_str(self.table.community_cards),
            pot=self.table.pot + live_bets,
            phase=state.phase,
            current_bet=state.current_bet,
            small_blind=state.small_blind,
            big_blind=state.big_blind,
            min_raise=state.min_raise,
            round_number=max(self.current_round, 1),
        )

    def contender_count(self) -> int:
        return len(self.game_state.contenders())

    def total_chips_in_play(self) -> int:
        """Stacks plus live bets plus the pot; constant within a round."""
        players = self.game_state.players
        return sum(p.chips for p in players) + sum(p.bet for p in players) + self.table.pot

    def _find_seat(self, predicate) -> Optional[Player]:
        return next((p for p in self.game_state.active_players if predicate(p)), None)
