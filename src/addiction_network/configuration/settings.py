"""
Application settings and configuration.

Values come from environment variables when set, otherwise defaults.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union


def _env(name: str) -> Optional[str]:
    value = os.environ.get(name)
    return value.strip() if value and value.strip() else None


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        db_path: Path to the local SQLite leaderboard database
        supabase_url: Supabase project URL; enables the remote leaderboard
        supabase_key: Supabase anon/service key
        leaderboard_table: Table holding the scores
    """
    db_path: Union[Path, str] = field(
        default_factory=lambda: _env("ADDICTION_NETWORK_DB_PATH") or Path("var/addiction_network.db")
    )
    supabase_url: Optional[str] = field(default_factory=lambda: _env("SUPABASE_URL"))
    supabase_key: Optional[str] = field(default_factory=lambda: _env("SUPABASE_KEY"))
    leaderboard_table: str = field(
        default_factory=lambda: _env("ADDICTION_NETWORK_LEADERBOARD_TABLE") or "leaderboard"
    )

    @property
    def uses_remote_leaderboard(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


# Global settings instance
settings = Settings()
