"""
Orchestration between the pure game rules, the byte store, and whoever listens for state changes (the UI).

The store is the only thing that reads, transitions, and writes the persisted GameState.
Every mutation follows the same cycle:

1. read the whole state from the byte store
2. compute a new state on an independent copy (see src/tictactoe/game.py)
3. write the new state in full
4. notify every listener once

If step 2 fails, nothing is written and nobody is notified.
"""

import logging
from typing import Callable, Iterable

from src.api.models import decode_state, encode_state
from src.core.exceptions import InvalidStateUpdateError
from src.core.models import AppConfig, CurrentGame, GameState, SquareId, Stats
from src.core.shared_types import StateEvent
from src.db.repository import PersistenceAdapter
from src.tictactoe.game import (
    current_game,
    round_stats,
    with_game_reset,
    with_move,
    with_new_round,
)

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
Transition = Callable[[GameState], GameState]


class GameStore:
    """Game, round, and history state for one storage key."""

    def __init__(
        self,
        storage_key: str,
        config: AppConfig,
        storage: PersistenceAdapter,
        default_state: Callable[[], GameState] = GameState.empty,
        listeners: Iterable[Listener] = (),
    ) -> None:
        self.storage_key = storage_key
        self.config = config
        self.storage = storage
        self._default_state = default_state
        self._listeners: list[Listener] = list(listeners)

        logger.info(f"Game store opened for {storage_key=}")

        # The stored state may have been written by another context sharing the key. Sync listeners to it right away.
        self.reload()

    # --- Listeners ---
    def add_listener(
        self, listener: Listener, event: str = StateEvent.STATE_CHANGE
    ) -> None:
        """Subscribe to state changes. Listeners get no payload: read `current_game` / `stats` again."""
        self._check_event(event)
        self._listeners.append(listener)

    def remove_listener(
        self, listener: Listener, event: str = StateEvent.STATE_CHANGE
    ) -> None:
        """Unsubscribe by identity. Unknown listeners are ignored."""
        self._check_event(event)
        for idx, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[idx]
                return

    # --- Read projections ---
    @property
    def current_game(self) -> CurrentGame:
        return current_game(self._get_state(), self.config)

    @property
    def stats(self) -> Stats:
        return round_stats(self._get_state(), self.config)

    @property
    def state(self) -> GameState:
        """Snapshot of the whole persisted state (freshly decoded, so safe to mutate)."""
        return self._get_state()

    # --- Mutations ---
    def apply_move(self, square_id: SquareId) -> None:
        """The player whose turn it is claims the square."""
        logger.debug(f"Move on square {square_id}")
        self.update_state(lambda prev: with_move(prev, self.config, square_id))

    def reset_game(self) -> None:
        """
        Resets the game.

        If the current game is complete, the game is archived.
        If the current game is NOT complete, it is deleted.
        """
        self.update_state(lambda prev: with_game_reset(prev, self.config))

    def start_new_round(self) -> None:
        """Resets the scoreboard (wins, losses, and ties). Full history is kept."""
        logger.info("Starting a new round")
        self.update_state(lambda prev: with_new_round(prev, self.config))

    def reload(self) -> None:
        """Re-save the stored state unchanged, to notify listeners of changes made by another context."""
        self.replace_state(self._get_state())

    def replace_state(self, new_state: GameState) -> None:
        """Save the given state as is."""
        if not isinstance(new_state, GameState):
            raise InvalidStateUpdateError(
                f"replace_state() needs a GameState, got {type(new_state).__name__}."
            )
        self._save_state(new_state)

    def update_state(self, transition: Transition) -> None:
        """Save the state derived from the currently stored one."""
        if not callable(transition):
            raise InvalidStateUpdateError(
                f"update_state() needs a transition function, got {type(transition).__name__}."
            )
        new_state = transition(self._get_state())
        if not isinstance(new_state, GameState):
            raise InvalidStateUpdateError(
                f"Transition returned {type(new_state).__name__} instead of a GameState."
            )
        self._save_state(new_state)

    # -- Internal helpers --
    def _get_state(self) -> GameState:
        """Read and decode the stored state. Nothing stored yet means a fresh, empty state."""
        raw = self.storage.get(self.storage_key)
        if not raw:
            return self._default_state()
        return decode_state(raw)

    def _save_state(self, new_state: GameState) -> None:
        """Write the whole state, then emit exactly one state change."""
        self.storage.set(self.storage_key, encode_state(new_state))
        self._emit(StateEvent.STATE_CHANGE)

    def _emit(self, event: StateEvent) -> None:
        logger.debug(f"Emitting {event} to {len(self._listeners)} listener(s)")
        # iterate over a copy so listeners can unsubscribe while being notified
        for listener in list(self._listeners):
            listener()

    @staticmethod
    def _check_event(event: str) -> None:
        if event != StateEvent.STATE_CHANGE:
            raise ValueError(
                f"Unknown event {event!r}. Only {StateEvent.STATE_CHANGE!r} is emitted."
            )
