"""
Dependency Injection Container.

Provides singleton instances and factory methods for:
- Database engine and the local leaderboard
- The remote leaderboard client (when Supabase is configured)
- The game session repository and random source
- Mediator with all handlers and pipeline behaviors registered
"""
import logging
import random
from typing import Optional

from sqlalchemy import Engine

from ..adapters.secondary.api.client import SupabaseLeaderboardClient
from ..adapters.secondary.persistence.engine import create_engine_from_config
from ..adapters.secondary.persistence.game_session_repository import InMemoryGameSessionRepository
from ..adapters.secondary.persistence.leaderboard_repository_sqlalchemy import LeaderboardRepositorySQLAlchemy
from ..adapters.secondary.persistence.models import metadata
from ..application.common.behaviors import LoggingBehavior, ValidationBehavior
from ..application.game.commands import (
    BuyCommodityCommand,
    BuyCommodityHandler,
    RespondToUpgradeOfferCommand,
    RespondToUpgradeOfferHandler,
    SellCommodityCommand,
    SellCommodityHandler,
    StartGameCommand,
    StartGameHandler,
    TravelCommand,
    TravelHandler,
)
from ..application.game.queries import (
    GetGameStateHandler,
    GetGameStateQuery,
    GetPriceRangesHandler,
    GetPriceRangesQuery,
)
from ..application.leaderboard.commands import SubmitScoreCommand, SubmitScoreHandler
from ..application.leaderboard.queries import GetLeaderboardHandler, GetLeaderboardQuery
from ..mediator import Mediator
from ..ports.outbound.game_repository import IGameSessionRepository
from ..ports.outbound.leaderboard import ILeaderboardClient
from .config import get_config
from .settings import settings

logger = logging.getLogger(__name__)

# Singleton instances
_engine = None
_game_repo = None
_leaderboard = None
_rng = None
_mediator = None


def get_engine() -> Engine:
    """Get or create the database engine, creating tables on first use"""
    global _engine
    if _engine is None:
        _engine = create_engine_from_config(settings.db_path)
        metadata.create_all(_engine)
    return _engine


def get_game_repository() -> IGameSessionRepository:
    global _game_repo
    if _game_repo is None:
        _game_repo = InMemoryGameSessionRepository()
    return _game_repo


def get_leaderboard_client() -> ILeaderboardClient:
    """
    Get or create the leaderboard client.

    Uses Supabase when SUPABASE_URL and SUPABASE_KEY are set, otherwise
    the local database.
    """
    global _leaderboard
    if _leaderboard is None:
        if settings.uses_remote_leaderboard:
            logger.info(f"Using Supabase leaderboard at {settings.supabase_url}")
            _leaderboard = SupabaseLeaderboardClient(
                settings.supabase_url,
                settings.supabase_key,
                table=settings.leaderboard_table
            )
        else:
            logger.info("Using local leaderboard database")
            _leaderboard = LeaderboardRepositorySQLAlchemy(get_engine())
    return _leaderboard


def get_random() -> random.Random:
    global _rng
    if _rng is None:
        _rng = random.Random()
    return _rng


def seed_random(seed: Optional[int]) -> None:
    """Reseed the shared random source (None reseeds from the OS)"""
    get_random().seed(seed)


def get_mediator() -> Mediator:
    """
    Get or create configured mediator with all handlers registered.

    Pipeline: LoggingBehavior -> ValidationBehavior -> handler
    """
    global _mediator
    if _mediator is None:
        _mediator = Mediator()

        _mediator.register_behavior(LoggingBehavior())
        _mediator.register_behavior(ValidationBehavior())

        game_repo = get_game_repository()
        rng = get_random()

        # ===== Game Command Handlers =====
        _mediator.register_handler(
            StartGameCommand,
            lambda: StartGameHandler(game_repo, rng, get_config().price_model)
        )
        _mediator.register_handler(
            TravelCommand,
            lambda: TravelHandler(game_repo, rng)
        )
        _mediator.register_handler(
            BuyCommodityCommand,
            lambda: BuyCommodityHandler(game_repo)
        )
        _mediator.register_handler(
            SellCommodityCommand,
            lambda: SellCommodityHandler(game_repo)
        )
        _mediator.register_handler(
            RespondToUpgradeOfferCommand,
            lambda: RespondToUpgradeOfferHandler(game_repo)
        )

        # ===== Game Query Handlers =====
        _mediator.register_handler(
            GetGameStateQuery,
            lambda: GetGameStateHandler(game_repo)
        )
        _mediator.register_handler(
            GetPriceRangesQuery,
            lambda: GetPriceRangesHandler()
        )

        # ===== Leaderboard Handlers =====
        # Lazy: the leaderboard client is only built when first needed
        _mediator.register_handler(
            GetLeaderboardQuery,
            lambda: GetLeaderboardHandler(get_leaderboard_client())
        )
        _mediator.register_handler(
            SubmitScoreCommand,
            lambda: SubmitScoreHandler(get_leaderboard_client())
        )

    return _mediator


def reset_container():
    """Drop all singletons (useful for testing)"""
    global _engine, _game_repo, _leaderboard, _rng, _mediator
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _game_repo = None
    _leaderboard = None
    _rng = None
    _mediator = None
