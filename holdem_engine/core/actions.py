"""
Legal action descriptors and bot decisions.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .enums import ActionType
from .exceptions import IllegalActionError


@dataclass(frozen=True)
class AvailableAction:
    """
    One legal option for the acting player.

    ``value`` is set for CALL (chips needed to call); ``min_amount`` and
    ``max_amount`` bound the total street bet of a RAISE.
    """
    action_type: ActionType
    value: Optional[int] = None
    min_amount: Optional[int] = None
    max_amount: Optional[int] = None

    def to_dict(self) -> dict:
        data: dict = {'type': self.action_type.value}
        if self.value is not None:
            data['value'] = self.value
        if self.action_type == ActionType.RAISE:
            data['min'] = self.min_amount
            data['max'] = self.max_amount
        return data

    def __str__(self) -> str:
        if self.action_type == ActionType.RAISE:
            return f"RAISE (min: {self.min_amount}, max: {self.max_amount})"
        if self.action_type == ActionType.CALL:
            return f"CALL {self.value}"
        return self.action_type.value


@dataclass(frozen=True)
class Decision:
    """
    What a bot wants to do.

    ``value`` is the RAISE target (total street bet) and is ignored for the
    other types. It is not checked here; the game repairs bad raise values.
    """
    action_type: ActionType
    value: Any = 0
    explanation: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Decision':
        """
        Build a decision from a ``{"type", "value", "explanation"}`` mapping.

        Raises:
            IllegalActionError: when ``type`` is missing or unknown
        """
        if 'type' not in data:
            raise IllegalActionError(f"Decision has no type: {dict(data)!r}")
        try:
            action_type = ActionType.parse(data['type'])
        except ValueError as e:
            raise IllegalActionError(str(e))
        return cls(action_type, data.get('value', 0), str(data.get('explanation') or ""))

    def to_dict(self) -> dict:
        return {
            'type': self.action_type.value,
            'value': self.value,
            'explanation': self.explanation,
        }
