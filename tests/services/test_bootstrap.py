"""Unit tests for src/services/bootstrap.py"""

from unittest.mock import Mock

import pytest

from src.core.config import Settings
from src.core.exceptions import ConfigurationError
from src.core.models import Player
from src.db.sql_storage import SQLStorage
from src.services.bootstrap import open_game_store


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        storage_key="bootstrap-test",
        player1_id="x",
        player1_name="Crosses",
        player2_id="o",
        player2_name="Noughts",
        log_level="DEBUG",
    )


def test_open_game_store(settings: Settings) -> None:
    callback = Mock()
    store = open_game_store(settings, listeners=[callback])

    callback.assert_called_once_with()
    assert isinstance(store.storage, SQLStorage)
    assert store.storage_key == "bootstrap-test"
    assert store.config.player1 == Player(id="x", name="Crosses")
    assert store.current_game.current_player == Player(id="x", name="Crosses")


def test_store_is_usable(settings: Settings) -> None:
    store = open_game_store(settings)
    store.apply_move(1)
    assert store.current_game.current_player.id == "o"


def test_bad_player_config(settings: Settings) -> None:
    settings.player2_id = "x"
    with pytest.raises(ConfigurationError):
        open_game_store(settings)
