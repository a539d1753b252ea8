"""
Background Search

Runs search() on a worker thread so an interactive host (a GUI event loop,
a web handler) stays responsive while the engine thinks.

Threading:
    - Host thread: start(), stop(), wait()
    - Search thread: runs search() on the snapshot it was given
    - Communication: a threading.Event polled by the search as its stop flag

The search itself shares nothing with the host: it only reads the immutable
board it was handed.
"""

import logging
import threading
from typing import Callable, Optional, Sequence

from draughts_engine.board.representation import Board, Color, Move
from draughts_engine.search.engine import Difficulty, search
from draughts_engine.search.minimax import SearchResult

logger = logging.getLogger(__name__)


class BackgroundSearch:
    """
    One search at a time on a daemon thread.

    Attributes:
        result: SearchResult of the last finished search (None while running)
        error: Exception raised by the last search, if any
    """

    def __init__(self):
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self.result: Optional[SearchResult] = None
        self.error: Optional[BaseException] = None

    @property
    def searching(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(
        self,
        board: Board,
        to_move: Color,
        ai_color: Optional[Color] = None,
        difficulty: Difficulty = None,
        deadline: Optional[float] = None,
        restrict_to: Optional[Sequence[Move]] = None,
        callback: Optional[Callable[[SearchResult], None]] = None,
        **search_kwargs,
    ):
        """
        Start searching `board` in the background.

        Args:
            callback: Called on the search thread with the SearchResult
            search_kwargs: Extra keyword arguments for search() (e.g. rng)

        Raises:
            RuntimeError: If a search is already running
        """
        if self.searching:
            raise RuntimeError("A search is already running")

        self._stop_event.clear()
        self.result = None
        self.error = None

        def worker():
            try:
                result = search(
                    board, to_move, ai_color, difficulty, deadline,
                    should_stop=self._stop_event.is_set, restrict_to=restrict_to,
                    **search_kwargs,
                )
                self.result = result
                if callback is not None:
                    callback(result)
            except Exception as e:
                self.error = e
                logger.error(f"Background search failed: {e}", exc_info=True)
            finally:
                logger.debug("Search thread finished")

        self._thread = threading.Thread(target=worker, name="draughts-search", daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 5.0) -> Optional[SearchResult]:
        """
        Ask the search to finish early and wait for its result.

        The search returns the best move completed so far.
        """
        self._stop_event.set()
        return self.wait(timeout)

    def wait(self, timeout: Optional[float] = None) -> Optional[SearchResult]:
        """Block until the search ends (or `timeout` passes) and return its result."""
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("Search thread did not finish within timeout")
                return None
        return self.result
