from bmsearch.search.engine import EventSink, find_all, search
from bmsearch.search.events import AlignmentEvent, Heuristic, SearchResult, SearchStatus
from bmsearch.search.tables import (
    NUM_SYMBOLS,
    BadCharacterTable,
    InvalidSymbolError,
    SearchCancelledError,
    SearchError,
    build_bad_character_table,
    build_good_suffix_table,
)

__all__ = [
    "AlignmentEvent",
    "BadCharacterTable",
    "EventSink",
    "Heuristic",
    "InvalidSymbolError",
    "NUM_SYMBOLS",
    "SearchCancelledError",
    "SearchError",
    "SearchResult",
    "SearchStatus",
    "build_bad_character_table",
    "build_good_suffix_table",
    "find_all",
    "search",
]
