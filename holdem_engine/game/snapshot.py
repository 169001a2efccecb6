"""Bot-facing view of the table.

Built by the game for the acting player only. The view carries public
information about every active player and the hole cards of the requesting
player; other players' cards are never included. Pydantic dataclasses validate
the values before a bot sees them.
"""

from typing import List, Optional

from pydantic import Field, TypeAdapter, ValidationInfo, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.card import Card
from ..core.enums import GamePhase


@pydantic_dataclass
class PlayerView:
    """Public state of one active player."""
    id: int = Field(..., description="player id")
    name: str = Field(..., min_length=1, description="display name")
    chips: int = Field(..., ge=0, description="stack behind")
    bet: int = Field(..., ge=0, description="committed on this street")
    total_bet: int = Field(..., ge=0, description="committed this round")
    folded: bool = Field(False, description="has folded")
    is_all_in: bool = Field(False, description="has no chips behind")
    is_dealer: bool = Field(False, description="holds the button")
    is_small_blind: bool = Field(False, description="posted the small blind")
    is_big_blind: bool = Field(False, description="posted the big blind")
    is_current_player: bool = Field(False, description="is the requesting player")
    hand: Optional[List[str]] = Field(None, description="hole cards, requester only")


@pydantic_dataclass
class BotView:
    """Everything a bot may know when asked for a decision."""
    player_id: int = Field(..., description="id of the requesting player")
    players: List[PlayerView] = Field(..., description="active players in seat order")
    hand: List[str] = Field(default_factory=list, description="requester's hole cards")
    community_cards: List[str] = Field(default_factory=list, description="the board")
    pot: int = Field(0, ge=0, description="collected pot plus live bets")
    phase: GamePhase = Field(GamePhase.PREFLOP, description="current street")
    current_bet: int = Field(0, ge=0, description="highest bet on this street")
    small_blind: int = Field(5, gt=0, description="small blind level")
    big_blind: int = Field(10, gt=0, description="big blind level")
    min_raise: int = Field(0, ge=0, description="minimum raise increment")
    round_number: int = Field(1, ge=1, description="1-based round counter")

    @field_validator('big_blind')
    @classmethod
    def validate_blind_relationship(cls, v: int, info: ValidationInfo) -> int:
        """The big blind must exceed the small blind."""
        small_blind = info.data.get('small_blind')
        if small_blind is not None and v <= small_blind:
            raise ValueError("big blind must exceed small blind")
        return v

    @field_validator('players')
    @classmethod
    def validate_hidden_cards(cls, v: List[PlayerView], info: ValidationInfo) -> List[PlayerView]:
        """Only the requesting player's hand may be visible."""
        requester = info.data.get('player_id')
        for player in v:
            if player.hand is not None and player.id != requester:
                raise ValueError(f"hand of player {player.id} must not be visible")
        return v

    @property
    def me(self) -> PlayerView:
        return next(p for p in self.players if p.id == self.player_id)

    @property
    def to_call(self) -> int:
        return max(self.current_bet - self.me.bet, 0)

    def hole_cards(self) -> List[Card]:
        return [Card.from_str(card) for card in self.hand]

    def board(self) -> List[Card]:
        return [Card.from_str(card) for card in self.community_cards]

    def to_dict(self) -> dict:
        return _BOT_VIEW_ADAPTER.dump_python(self, mode="json")


_BOT_VIEW_ADAPTER = TypeAdapter(BotView)
