"""
Game history recording.

The game reports what happens through the ``Recorder`` notifications. The
base class ignores them; ``HistoryRecorder`` accumulates a JSON-ready history
and can save it to a file. Nothing a recorder does feeds back into the game.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..core.card import Card, cards_to_str
from ..core.player import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionRecord:
    """
    One recorded action, blinds included.
    """
    phase: str                          # street name, or BLINDS
    player_id: int
    player_name: str
    action: str                         # FOLD/CHECK/CALL/RAISE/SMALL_BLIND/BIG_BLIND
    value: Any
    chips_after: int
    timestamp: float
    explanation: Optional[str] = None
    result: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, phase: str, player: Player, action: Mapping[str, Any],
               result: Optional[Mapping[str, Any]] = None) -> 'ActionRecord':
        """Build a record stamped with the current time."""
        return cls(
            phase=phase,
            player_id=player.player_id,
            player_name=player.name,
            action=str(action.get('type')),
            value=action.get('value') or 0,
            chips_after=player.chips,
            timestamp=time.time(),
            explanation=action.get('explanation') or None,
            result=dict(result or {}),
        )

    def to_dict(self) -> dict:
        return {
            'phase': self.phase,
            'player_id': self.player_id,
            'player_name': self.player_name,
            'action': self.action,
            'value': self.value,
            'chips': self.chips_after,
            'timestamp': self.timestamp,
            'explanation': self.explanation,
            'result': self.result,
        }


class Recorder:
    """
    Notification sink for game events.

    Every hook is a no-op; subclasses override what they need.
    """

    def init_game(self, players: Sequence[Player]) -> None:
        pass

    def start_round(self, round_number: int) -> None:
        pass

    def set_blind_values(self, small_blind: int, big_blind: int) -> None:
        pass

    def set_positions(self, dealer: Optional[Player], small_blind: Optional[Player],
                      big_blind: Optional[Player]) -> None:
        pass

    def start_phase(self, name: str) -> None:
        pass

    def log_community_cards(self, cards: Sequence[Card]) -> None:
        pass

    def log_player_hands(self, entries: Sequence[Mapping[str, Any]]) -> None:
        pass

    def log_action(self, player: Player, action: Mapping[str, Any],
                   result: Optional[Mapping[str, Any]] = None) -> None:
        pass

    def log_pot_award(self, awards: Sequence[Any]) -> None:
        pass

    def end_round(self, players: Sequence[Player]) -> None:
        pass

    def save_to_file(self, filename: Optional[str] = None,
                     directory: Union[str, Path] = "logs") -> Optional[Path]:
        """Persist the history; the base recorder keeps none."""
        return None


def _seat_summary(player: Optional[Player]) -> Optional[dict]:
    if player is None:
        return None
    return {'id': player.player_id, 'name': player.name}


class HistoryRecorder(Recorder):
    """
    Records the whole game as nested dictionaries.

    The layout is ``{game_id, timestamp, players, rounds: [...]}`` where each
    round holds its blind values, positions, phases (with board and actions),
    dealt hands, pot awards and the chip counts before and after.
    """

    def __init__(self, game_id: Optional[str] = None):
        self.game_data: Dict[str, Any] = {
            'game_id': game_id or f"game_{int(time.time() * 1000)}",
            'timestamp': datetime.now().isoformat(),
            'players': [],
            'rounds': [],
        }
        self._players: List[Player] = []
        self._current_round: Optional[Dict[str, Any]] = None
        self._current_phase: Optional[Dict[str, Any]] = None
        self._actions: List[ActionRecord] = []

    @property
    def rounds(self) -> List[Dict[str, Any]]:
        return self.game_data['rounds']

    @property
    def action_count(self) -> int:
        return len(self._actions)

    def init_game(self, players: Sequence[Player]) -> None:
        self._players = list(players)
        self.game_data['players'] = [
            {'id': p.player_id, 'name': p.name, 'starting_chips': p.chips}
            for p in players
        ]

    def start_round(self, round_number: int) -> None:
        self._current_round = {
            'round': round_number,
            'blind_values': None,
            'dealer': None,
            'small_blind': None,
            'big_blind': None,
            'phases': [],
            'player_hands': [],
            'pot_award': [],
            'initial_state': {'players': self._chip_counts(self._players)},
            'final_state': None,
        }
        self._current_phase = None
        self.rounds.append(self._current_round)

    def set_blind_values(self, small_blind: int, big_blind: int) -> None:
        if self._current_round is not None:
            self._current_round['blind_values'] = {
                'small_blind': small_blind,
                'big_blind': big_blind,
            }

    def set_positions(self, dealer, small_blind, big_blind) -> None:
        if self._current_round is not None:
            self._current_round['dealer'] = _seat_summary(dealer)
            self._current_round['small_blind'] = _seat_summary(small_blind)
            self._current_round['big_blind'] = _seat_summary(big_blind)

    def start_phase(self, name: str) -> None:
        if self._current_round is None:
            return

        for phase in self._current_round['phases']:
            if phase['name'] == name:
                self._current_phase = phase
                return

        self._current_phase = {
            'name': name,
            'timestamp': datetime.now().isoformat(),
            'community_cards': [],
            'actions': [],
        }
        self._current_round['phases'].append(self._current_phase)

    def log_community_cards(self, cards: Sequence[Card]) -> None:
        if self._current_phase is not None:
            self._current_phase['community_cards'] = cards_to_str(cards)

    def log_player_hands(self, entries: Sequence[Mapping[str, Any]]) -> None:
        if self._current_round is not None:
            self._current_round['player_hands'] = [
                {'player_id': entry['player_id'], 'hand': cards_to_str(entry['hand'])}
                for entry in entries
            ]

    def log_action(self, player, action, result=None) -> None:
        if self._current_phase is None:
            return
        record = ActionRecord.create(self._current_phase['name'], player, action, result)
        self._actions.append(record)
        self._current_phase['actions'].append(record.to_dict())

    def log_pot_award(self, awards) -> None:
        if self._current_round is not None:
            self._current_round['pot_award'] = [award.to_dict() for award in awards]

    def end_round(self, players: Sequence[Player]) -> None:
        if self._current_round is not None:
            self._current_round['final_state'] = {'players': self._chip_counts(players)}

    def get_actions(self, player_id: Optional[int] = None,
                    phase: Optional[str] = None,
                    action: Optional[str] = None) -> List[ActionRecord]:
        """Recorded actions, optionally filtered by player, phase or action name."""
        records = self._actions
        if player_id is not None:
            records = [r for r in records if r.player_id == player_id]
        if phase is not None:
            records = [r for r in records if r.phase == phase]
        if action is not None:
            records = [r for r in records if r.action == action]
        return records

    def to_json(self) -> str:
        return json.dumps(self.game_data, indent=2, ensure_ascii=False)

    def save_to_file(self, filename: Optional[str] = None,
                     directory: Union[str, Path] = "logs") -> Optional[Path]:
        """
        Write the history as JSON.

        Args:
            filename: file name; defaults to ``poker_game_<timestamp>.json``
            directory: target directory, created if missing

        Returns:
            path of the written file
        """
        if not filename:
            filename = f"poker_game_{datetime.now().strftime('%Y-%m-%dT%H-%M-%S')}.json"
        elif not filename.endswith(".json"):
            filename = f"{filename}.json"

        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / filename

        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Game history saved to {path}")
        return path

    @staticmethod
    def _chip_counts(players: Sequence[Player]) -> List[dict]:
        return [{'id': p.player_id, 'name': p.name, 'chips': p.chips} for p in players]

    def __repr__(self) -> str:
        return f"HistoryRecorder(rounds={len(self.rounds)}, actions={len(self._actions)})"
