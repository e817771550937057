"""
Client-side core of the video game catalog browser.

The browser keeps its UI state (search fields, displayed results, sort order
and selected artwork) in an immutable ``BrowserState`` that only changes
through ``reduce``. ``CatalogBrowser`` wires that reducer to the HTTP API,
the debouncer and the request sequence tokens that discard stale responses.
"""

from catalog_browser.controller import CatalogBrowser  # noqa: F401
from catalog_browser.criteria import SearchCriteria  # noqa: F401
from catalog_browser.models import GameRecord  # noqa: F401
from catalog_browser.state import BrowserState, Status, reduce  # noqa: F401
