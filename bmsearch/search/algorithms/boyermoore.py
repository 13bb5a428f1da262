import time
from typing import List, Optional

from bmsearch.search.base import SearchAlgorithm
from bmsearch.search.engine import EventSink, search
from bmsearch.search.events import AlignmentEvent
from bmsearch.search.tables import NUM_SYMBOLS


class BoyerMoore(SearchAlgorithm):
    """
    Boyer-Moore search over the contents of a file.

    Runs the Boyer-Moore engine on the raw bytes of the file, so the alphabet
    is the byte alphabet and offsets are byte offsets. Every occurrence is
    reported, overlapping ones included.

    Attributes:
        reread_on_query (bool): Determines whether the file should be re-read on
            every search query. Defaults to False.
        alphabet_size (int): Size of the symbol alphabet for the bad-character table.
        on_event (Optional[EventSink]): Sink forwarded to the engine, e.g. a trace renderer.
        _stats (dict): Statistics about the last search: alignments performed,
            characters skipped by shifts, matches found, bytes processed and
            elapsed time.

    Example:
        >>> bm = BoyerMoore('/path/to/file.txt')
        >>> bm.search('needle')
        [17, 402]
        >>> bm.get_stats()['alignments']
        95
    """
    def __init__(self, file_path: str, reread_on_query: bool = False, case_sensitive: bool = True,
                 alphabet_size: int = NUM_SYMBOLS, on_event: Optional[EventSink] = None) -> None:
        self.alphabet_size = alphabet_size
        self.on_event = on_event
        self._stats = {
            "alignments": 0,
            "skipped_characters": 0,
            "matches": 0,
            "bytes_processed": 0,
            "search_time": 0,
        }
        self._last_offset = 0
        super().__init__(file_path, reread_on_query, case_sensitive)

    def _observe(self, event: AlignmentEvent) -> None:
        self._stats["alignments"] += 1
        if event.shift > 1 and event.next_offset <= self._last_offset:
            self._stats["skipped_characters"] += event.shift - 1
        if self.on_event is not None:
            self.on_event(event)

    def search(self, query: str) -> List[int]:
        start_time = time.time()
        pattern = self._prepare_query(query)
        self._stats["alignments"] = 0
        self._stats["skipped_characters"] = 0
        self._last_offset = len(self._content) - len(pattern)

        result = search(
            self._content,
            pattern,
            self._observe,
            alphabet_size=self.alphabet_size,
            collect_events=False,
        )

        self._stats["matches"] = len(result.matches)
        self._stats["bytes_processed"] = len(self._content)
        self._stats["search_time"] = time.time() - start_time
        return list(result.matches)

    def get_stats(self) -> dict:
        return self._stats
