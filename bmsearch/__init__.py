"""Boyer-Moore exact substring search."""

from bmsearch.search import (
    AlignmentEvent,
    BadCharacterTable,
    Heuristic,
    InvalidSymbolError,
    SearchCancelledError,
    SearchError,
    SearchResult,
    SearchStatus,
    build_bad_character_table,
    build_good_suffix_table,
    find_all,
    search,
)

__version__ = "0.1.0"

__all__ = [
    "AlignmentEvent",
    "BadCharacterTable",
    "Heuristic",
    "InvalidSymbolError",
    "SearchCancelledError",
    "SearchError",
    "SearchResult",
    "SearchStatus",
    "build_bad_character_table",
    "build_good_suffix_table",
    "find_all",
    "search",
]
