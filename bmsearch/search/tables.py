from typing import Dict, List, Optional, Sequence, Union

NUM_SYMBOLS = 256

Symbols = Union[str, bytes, bytearray, memoryview, Sequence[int]]


class SearchError(Exception):
    """Base exception for search-related errors."""
    pass


class InvalidSymbolError(SearchError, ValueError):
    """Raised when a pattern symbol falls outside the supported alphabet."""

    def __init__(self, symbol: int, index: int, alphabet_size: int) -> None:
        self.symbol = symbol
        self.index = index
        self.alphabet_size = alphabet_size
        super().__init__(
            f"Symbol {symbol!r} at pattern index {index} is outside the alphabet [0, {alphabet_size})"
        )


class SearchCancelledError(SearchError):
    """Raised when a search is cancelled before it completes."""
    pass


def to_symbols(sequence: Symbols) -> Sequence[int]:
    """
    Returns the sequence as integer symbol codes.

    Byte-like sequences already index to ints; strings are mapped to the code
    point of each character.
    """
    if isinstance(sequence, str):
        return [ord(char) for char in sequence]
    if isinstance(sequence, memoryview):
        return sequence.cast("B")
    return sequence


class BadCharacterTable:
    """
    Last-occurrence table for the bad-character rule.

    Maps each symbol of a fixed alphabet to the rightmost index at which it
    occurs in the pattern. Symbols that never occur, and symbols outside the
    alphabet, are absent and look up as None.

    Args:
        alphabet_size (int): Number of symbols in the alphabet.
    """
    def __init__(self, alphabet_size: int = NUM_SYMBOLS) -> None:
        if alphabet_size < 1:
            raise ValueError(f"Alphabet size must be at least 1, got: {alphabet_size}")
        self.alphabet_size = alphabet_size
        self._last: List[Optional[int]] = [None] * alphabet_size

    def __getitem__(self, symbol: int) -> Optional[int]:
        if 0 <= symbol < self.alphabet_size:
            return self._last[symbol]
        return None

    def __len__(self) -> int:
        return self.alphabet_size

    def __contains__(self, symbol: int) -> bool:
        return self[symbol] is not None

    def as_dict(self) -> Dict[int, int]:
        return {symbol: index for symbol, index in enumerate(self._last) if index is not None}

    def __repr__(self) -> str:
        return f"BadCharacterTable(alphabet_size={self.alphabet_size}, entries={self.as_dict()})"


def build_bad_character_table(pattern: Symbols, alphabet_size: int = NUM_SYMBOLS) -> BadCharacterTable:
    """
    Builds the bad-character table for a pattern.

    Scans the pattern left to right so that a repeated symbol ends up mapped to
    its rightmost index.

    Raises:
        InvalidSymbolError: If a pattern symbol is outside [0, alphabet_size).
    """
    table = BadCharacterTable(alphabet_size)
    for index, symbol in enumerate(to_symbols(pattern)):
        if not 0 <= symbol < alphabet_size:
            raise InvalidSymbolError(symbol, index, alphabet_size)
        table._last[symbol] = index
    return table


def build_good_suffix_table(pattern: Symbols) -> List[int]:
    """
    Builds the good-suffix shift table for a pattern.

    `shifts[k]` is the shift to apply when the mismatch happened at pattern
    index `k - 1`, i.e. after a matched suffix of length `m - k`. `shifts[0]`
    is the shift after a full match.

    The first pass walks the pattern right to left, computing for every suffix
    start the start of its widest border. Whenever the border chain has to be
    followed, the slot it leaves gets the distance to the next occurrence of
    the matched suffix (preceded by a different symbol). The second pass fills
    the remaining slots from the widest border of the whole pattern, so the
    longest prefix that is also a suffix of the matched part gets aligned.
    """
    symbols = to_symbols(pattern)
    m = len(symbols)
    shifts = [0] * (m + 1)
    border_pos = [0] * (m + 1)

    i = m
    j = m + 1
    border_pos[i] = j
    while i > 0:
        while j <= m and symbols[i - 1] != symbols[j - 1]:
            if shifts[j] == 0:
                shifts[j] = j - i
            j = border_pos[j]
        i -= 1
        j -= 1
        border_pos[i] = j

    j = border_pos[0]
    for i in range(m + 1):
        if shifts[i] == 0:
            shifts[i] = j
        if i == j:
            j = border_pos[j]

    return shifts
