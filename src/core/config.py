"""
Settings read from the environment (or a .env file) and the player configuration derived from them.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import ConfigurationError
from src.core.models import AppConfig, Player

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TICTACTOE_", env_file=".env")

    database_url: str = "sqlite:///./tictactoe.db"
    storage_key: str = "ttt-game-state"
    player1_id: str = "1"
    player1_name: str = "Player 1"
    player2_id: str = "2"
    player2_name: str = "Player 2"
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def load_app_config(settings: Settings) -> AppConfig:
    """Build the two player identities. Turn order and scoring both rely on the ids being distinct."""
    player1 = Player(id=settings.player1_id, name=settings.player1_name)
    player2 = Player(id=settings.player2_id, name=settings.player2_name)
    if not player1.id or not player2.id:
        raise ConfigurationError("Both players need a non-empty id.")
    if player1.id == player2.id:
        raise ConfigurationError(
            f"Players must have different ids. Both are configured as {player1.id!r}."
        )
    logger.debug(f"Loaded players {player1.name!r} and {player2.name!r}")
    return AppConfig(player1=player1, player2=player2)


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
