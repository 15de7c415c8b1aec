"""Wire settings, logging, SQL storage, and a GameStore together."""

import logging
from typing import Iterable, Optional

from src.core.config import (
    Settings,
    configure_logging,
    get_settings,
    load_app_config,
)
from src.db.database import init_db, make_engine
from src.db.sql_storage import SQLStorage
from src.services.game_store import GameStore, Listener

logger = logging.getLogger(__name__)


def open_game_store(
    settings: Optional[Settings] = None, listeners: Iterable[Listener] = ()
) -> GameStore:
    """Open the store described by the settings (environment / .env when none are given)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    config = load_app_config(settings)
    session_factory = init_db(make_engine(settings.database_url))
    logger.info(f"Using database {settings.database_url}")

    return GameStore(
        settings.storage_key,
        config,
        SQLStorage(session_factory()),
        listeners=listeners,
    )
