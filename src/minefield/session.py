"""
Game session controller.

Holds the current board for a presentation layer, starts games from
seed text, routes clicks by flat cell index and notifies subscribers
whenever the visible state changes.
"""
import logging
from typing import Callable, List, Optional

from .board import Board, GameStatus
from .config import GameConfig
from .engine import initialize
from .seed import SeedResult, encode_seed, parse_seed


logger = logging.getLogger(__name__)

Listener = Callable[["GameSession"], None]


class GameSession:
    """
    Owns the active board, if any.

    A new game always replaces the board wholesale. A rejected seed
    leaves the current board in place.
    """

    def __init__(self) -> None:
        self.board: Optional[Board] = None
        self._listeners: List[Listener] = []

    # ========================================================================
    # Subscriptions
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback fired after every successful transition.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ========================================================================
    # Transitions
    # ========================================================================

    def start(self, seed_text: str) -> SeedResult:
        """Start a new game from seed text."""
        result = parse_seed(seed_text)
        if not result.ok:
            logger.info("Rejected seed %r: %s", seed_text, result.detail)
            return result
        self.start_config(result.config)
        return result

    def start_config(self, config: GameConfig) -> None:
        """Start a new game from a configuration."""
        self.board = initialize(config)
        logger.info(
            "Started %dx%d game with %d mines",
            config.width,
            config.height,
            config.num_mines,
        )
        self._notify()

    def click(self, index: int) -> bool:
        """
        Reveal the cell at a flat index.

        Returns:
            True if any cell was revealed.
        """
        if self.board is None:
            return False
        changed = self.board.reveal_index(index) > 0
        if changed:
            self._notify()
        return changed

    def restart(self) -> None:
        """Discard the current board."""
        self.board = None
        self._notify()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> Optional[GameStatus]:
        """Status of the current game, or None when no game is running."""
        if self.board is None:
            return None
        return self.board.status

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.LOST)

    @property
    def seed(self) -> Optional[str]:
        """Seed text that reproduces the current board."""
        if self.board is None:
            return None
        return encode_seed(self.board.config)
