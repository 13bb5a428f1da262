import time
from typing import List

from bmsearch.search.base import SearchAlgorithm


class NaiveSearch(SearchAlgorithm):
    """Reference O(n*m) scan: tries every offset and compares left to right."""

    def __init__(self, file_path: str, reread_on_query: bool = False, case_sensitive: bool = True) -> None:
        self._stats = {"comparisons": 0, "matches": 0, "bytes_processed": 0, "search_time": 0}
        super().__init__(file_path, reread_on_query, case_sensitive)

    def search(self, query: str) -> List[int]:
        start_time = time.time()
        pattern = self._prepare_query(query)
        self._stats["comparisons"] = 0

        content = self._content
        m = len(pattern)
        matches = []
        for offset in range(len(content) - m + 1):
            for i in range(m):
                self._stats["comparisons"] += 1
                if content[offset + i] != pattern[i]:
                    break
            else:
                matches.append(offset)

        self._stats["matches"] = len(matches)
        self._stats["bytes_processed"] = len(content)
        self._stats["search_time"] = time.time() - start_time
        return matches

    def get_stats(self) -> dict:
        return self._stats
