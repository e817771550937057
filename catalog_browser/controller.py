import logging
import threading
from typing import Callable, List, Optional

from catalog_browser import state as actions
from catalog_browser.client import CatalogClient
from catalog_browser.criteria import SearchCriteria
from catalog_browser.debounce import Debouncer
from catalog_browser.exceptions import CatalogBrowserError
from catalog_browser.models import GameRecord
from catalog_browser.state import BrowserState, reduce
from core.configuration.configuration import asset_base_url, debounce_seconds

logger = logging.getLogger(__name__)


class CatalogBrowser:
    """Drives ``BrowserState`` from user actions and API completions.

    Transitions are serialized through one lock so UI events and network
    callbacks (the debounce timer runs on its own thread) never interleave.
    Listeners are notified while that lock is held and must not block on
    another thread that drives the same browser.
    Network calls happen outside the lock; their outcome comes back as an
    action tagged with the sequence number reserved when the request was
    issued.
    """

    def __init__(
        self,
        client: Optional[CatalogClient] = None,
        asset_base: Optional[str] = None,
        live: bool = False,
        debounce_wait: Optional[float] = None,
        timer_factory=threading.Timer,
    ):
        self.client = client or CatalogClient()
        self.asset_base = asset_base or asset_base_url()
        self._state = BrowserState(live=live)
        self._lock = threading.RLock()
        self._listeners: List[Callable[[BrowserState], None]] = []
        wait = debounce_wait if debounce_wait is not None else debounce_seconds()
        self._debouncer = Debouncer(wait, self._send, timer_factory=timer_factory)

    @property
    def state(self) -> BrowserState:
        return self._state

    def subscribe(self, listener: Callable[[BrowserState], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, action) -> BrowserState:
        # Listeners run under the lock so they observe states in transition order
        with self._lock:
            self._state = reduce(self._state, action)
            new_state = self._state
            for listener in self._listeners:
                listener(new_state)
        return new_state

    def _send(self, seq: int, criteria: SearchCriteria) -> BrowserState:
        try:
            records = self.client.search(criteria)
        except CatalogBrowserError as exc:
            logger.error("Error fetching filtered data: %s", exc)
            return self.dispatch(actions.RequestFailed(seq, str(exc)))
        if seq != self._state.pending:
            logger.debug("Discarding stale response %s", seq)
        return self.dispatch(actions.ResponseReceived(seq, tuple(records)))

    def load_catalog(self) -> BrowserState:
        """Fetch the full catalog the local filter runs against."""
        try:
            records = self.client.fetch_catalog()
        except CatalogBrowserError as exc:
            logger.error("Error fetching data: %s", exc)
            return self._state
        return self.dispatch(actions.CatalogLoaded(tuple(records)))

    def edit(self, field: str, value: str) -> BrowserState:
        previous = self._state
        new_state = self.dispatch(actions.EditField(field, value))
        if not new_state.live:
            return new_state
        if new_state.pending is not None and new_state.pending != previous.pending:
            self._debouncer(new_state.pending, new_state.criteria)
        elif new_state.pending is None:
            self._debouncer.cancel()
        return new_state

    def search(self) -> BrowserState:
        self._debouncer.cancel()
        new_state = self.dispatch(actions.Search())
        if new_state.pending is None:
            return new_state
        return self._send(new_state.pending, new_state.criteria)

    def clear(self) -> BrowserState:
        self._debouncer.cancel()
        return self.dispatch(actions.Clear())

    def sort_by_title(self) -> BrowserState:
        return self.dispatch(actions.SortResults("title"))

    def sort_by_release_date(self) -> BrowserState:
        return self.dispatch(actions.SortResults("release_date"))

    def open_artwork(self, record: GameRecord) -> BrowserState:
        return self.dispatch(actions.SelectArtwork(record.artwork_url, self.asset_base))

    def close_artwork(self) -> BrowserState:
        return self.dispatch(actions.CloseArtwork())
