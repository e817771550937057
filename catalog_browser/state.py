"""
Browser state and the reducer that drives it.

Every user action and every network completion is a discrete action fed to
``reduce``; the state object is never mutated in place. Requests are tracked
with sequence numbers: ``issued`` only ever grows, and ``pending`` names the
single request whose answer may still change the display. Responses carrying
any other number are stale and leave the state untouched.

Precedence between the local filter and the server in live mode is
local-first, server-authoritative on arrival: every edit shows the local
filter (including "no results") immediately, and the matching server response
replaces it when it lands.

The local filter folds case with Python's Unicode ``str.lower``. The server
folds with the database (ASCII-only ``lower`` on SQLite, the column collation
on MariaDB), so for non-ASCII titles the preview can differ from the server
answer until that answer arrives.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from catalog_browser.artwork import resolve_artwork_url
from catalog_browser.criteria import SearchCriteria
from catalog_browser.models import GameRecord
from catalog_browser.sorting import sort_records

PROMPT_MESSAGE = "Please enter search criteria"
NO_RESULTS_MESSAGE = "No results found that met search criteria"


class Status(Enum):
    IDLE = "idle"
    QUERYING = "querying"
    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class BrowserState:
    criteria: SearchCriteria = SearchCriteria()
    results: Tuple[GameRecord, ...] = ()
    status: Status = Status.IDLE
    message: str = ""
    # Last fully loaded catalog, used by the local filter in live mode
    catalog: Optional[Tuple[GameRecord, ...]] = None
    live: bool = False
    issued: int = 0
    pending: Optional[int] = None
    selected_artwork: Optional[str] = None

    @property
    def is_querying(self) -> bool:
        return self.pending is not None


# Actions


@dataclass(frozen=True)
class EditField:
    field: str
    value: str


@dataclass(frozen=True)
class Search:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ResponseReceived:
    seq: int
    records: Tuple[GameRecord, ...]


@dataclass(frozen=True)
class RequestFailed:
    seq: int
    error: str


@dataclass(frozen=True)
class CatalogLoaded:
    records: Tuple[GameRecord, ...]


@dataclass(frozen=True)
class SortResults:
    key: str


@dataclass(frozen=True)
class SelectArtwork:
    artwork_url: Optional[str]
    asset_base: str


@dataclass(frozen=True)
class CloseArtwork:
    pass


def _prompt(state: BrowserState) -> BrowserState:
    return replace(state, results=(), status=Status.IDLE, message=PROMPT_MESSAGE, pending=None)


def _issue(state: BrowserState) -> BrowserState:
    """Reserve the next request token and show the local preview when possible."""
    seq = state.issued + 1
    state = replace(state, issued=seq, pending=seq, status=Status.QUERYING)
    if state.live and state.catalog is not None:
        local = state.criteria.filter(state.catalog)
        return replace(state, results=local, message="" if local else NO_RESULTS_MESSAGE)
    # Results of the previous criteria are not kept on screen
    return replace(state, results=(), message="")


def _edit(state: BrowserState, action: EditField) -> BrowserState:
    state = replace(state, criteria=state.criteria.with_field(action.field, action.value))
    if not state.live:
        return state
    if state.criteria.is_empty():
        return _prompt(state)
    return _issue(state)


def _search(state: BrowserState) -> BrowserState:
    if state.criteria.is_empty():
        return _prompt(state)
    return _issue(state)


def _response(state: BrowserState, action: ResponseReceived) -> BrowserState:
    if action.seq != state.pending:
        return state
    records = tuple(action.records)
    if not records:
        return replace(state, results=(), status=Status.EMPTY, message=NO_RESULTS_MESSAGE, pending=None)
    return replace(state, results=records, status=Status.LOADED, message="", pending=None)


def _failure(state: BrowserState, action: RequestFailed) -> BrowserState:
    if action.seq != state.pending:
        return state
    return replace(state, results=(), status=Status.FAILED, message=action.error, pending=None)


def reduce(state: BrowserState, action) -> BrowserState:
    if isinstance(action, EditField):
        return _edit(state, action)
    if isinstance(action, Search):
        return _search(state)
    if isinstance(action, Clear):
        return replace(
            state,
            criteria=SearchCriteria(),
            results=(),
            status=Status.IDLE,
            message="",
            pending=None,
        )
    if isinstance(action, ResponseReceived):
        return _response(state, action)
    if isinstance(action, RequestFailed):
        return _failure(state, action)
    if isinstance(action, CatalogLoaded):
        return replace(state, catalog=tuple(action.records))
    if isinstance(action, SortResults):
        return replace(state, results=sort_records(state.results, action.key))
    if isinstance(action, SelectArtwork):
        resolved = resolve_artwork_url(action.artwork_url, action.asset_base)
        if resolved is None:
            return state
        return replace(state, selected_artwork=resolved)
    if isinstance(action, CloseArtwork):
        return replace(state, selected_artwork=None)
    raise TypeError(f"Unknown action: {action!r}")
