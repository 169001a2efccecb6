"""
Engine exceptions.

Everything raised by the engine derives from PokerGameError. Insufficient
players and out-of-range raise amounts are handled without exceptions.
"""


class PokerGameError(Exception):
    """Base class for all engine errors"""
    pass


class DeckExhaustedError(PokerGameError):
    """A card was requested from an empty deck"""
    pass


class IllegalActionError(PokerGameError):
    """A decision was malformed or not among the legal actions"""
    pass


class DealerResolutionError(PokerGameError):
    """No valid dealer seat could be found among the active players"""
    pass


class GameStateError(PokerGameError):
    """The game state was driven into an impossible configuration"""
    pass


class GameConfigError(PokerGameError):
    """Invalid game configuration"""
    pass
