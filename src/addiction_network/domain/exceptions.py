class DomainException(Exception):
    """Base exception for all domain errors"""
    pass

class GameNotStartedError(DomainException):
    """Raised when a game action is issued before a game was started"""
    pass

class GameOverError(DomainException):
    """Raised when an action is attempted after the final day"""
    pass

class UnknownCommodityError(DomainException):
    """Raised when a commodity name is not part of the catalogue"""
    pass

class InvalidDestinationError(DomainException):
    """Raised when travelling to an unknown location or staying put"""
    pass

class InvalidQuantityError(DomainException):
    """Raised when a trade quantity is below one unit"""
    pass

class InsufficientCashError(DomainException):
    """Raised when the player can't pay for a purchase or upgrade"""
    pass

class InsufficientStashError(DomainException):
    """Raised when selling more units than the player holds"""
    pass

class InventoryLimitError(DomainException):
    """Raised when a purchase would exceed inventory capacity"""
    pass

class PendingOfferError(DomainException):
    """Raised when play continues while an upgrade offer awaits an answer"""
    pass

class NoPendingOfferError(DomainException):
    """Raised when answering an upgrade offer that doesn't exist"""
    pass

class LeaderboardError(DomainException):
    """Base exception for leaderboard operations"""
    pass

class LeaderboardUnavailableError(LeaderboardError):
    """Raised when top scores can't be fetched from the leaderboard store"""
    pass

class LeaderboardSubmissionError(LeaderboardError):
    """Raised when a score can't be stored"""
    pass
