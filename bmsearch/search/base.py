import os
from abc import ABC, abstractmethod
from typing import List


class SearchAlgorithm(ABC):
    """
    SearchAlgorithm Abstract Base Class

    Defines the interface shared by the file-backed substring searches. A
    concrete algorithm reads the file once (or on every query when
    `reread_on_query` is set), searches the raw bytes for a query and keeps
    statistics about the last search.

    Args:
        file_path (str): Path to the file to be searched

    Attributes:
        file_path (str): Path to the file that will be searched
        reread_on_query (bool): Flag indicating whether to reread the file on each query
        case_sensitive (bool): Whether ASCII letters must match case exactly

    Abstract Methods:
        search(query):
            Finds every occurrence of the query in the file.
            Returns:
                List[int]: Ascending byte offsets of the occurrences

        get_stats():
            Returns statistics about the last search operation.
    """
    def __init__(self, file_path: str, reread_on_query: bool = False, case_sensitive: bool = True) -> None:
        self.file_path = file_path
        self.reread_on_query = reread_on_query
        self.case_sensitive = case_sensitive
        self._last_modified: float = 0.0
        self._content: bytes = b""
        self._loaded = False
        if not self.reread_on_query:
            self._read_file()

    @abstractmethod
    def search(self, query: str) -> List[int]:
        pass

    @abstractmethod
    def get_stats(self) -> dict:
        pass

    def _prepare_query(self, query: str) -> bytes:
        """
        Validates the query, refreshes the content if needed and returns the
        query as bytes in the same case folding as the content.

        Raises:
            ValueError: If the query is empty.
        """
        if not query:
            raise ValueError("Query must not be empty")
        if self.reread_on_query or not self._loaded:
            self._read_file()
        query_bytes = query.encode("utf-8")
        if not self.case_sensitive:
            query_bytes = query_bytes.lower()
        return query_bytes

    def _read_file(self) -> None:
        """
        Read the file and load its content into memory.

        The file is skipped when it has not been modified since the last read.
        Case-insensitive searches keep an ASCII-lowercased copy, which has the
        same length as the original so offsets stay valid.
        """
        try:
            current_mtime = os.path.getmtime(self.file_path)
            if self._loaded and current_mtime <= self._last_modified:
                return
            self._last_modified = current_mtime
        except OSError:
            # Will be handled in the file opening block
            pass

        try:
            with open(self.file_path, "rb") as file:
                content = file.read()
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {self.file_path}")
        except OSError as e:
            raise RuntimeError(f"Error reading file: {e}") from e

        self._content = content if self.case_sensitive else content.lower()
        self._loaded = True

    def cleanup(self) -> None:
        """Releases the cached file content."""
        self._content = b""
        self._loaded = False
        self._last_modified = 0.0
