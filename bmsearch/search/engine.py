from typing import Callable, List, Optional

from bmsearch.search.events import AlignmentEvent, Heuristic, SearchResult, SearchStatus
from bmsearch.search.tables import (
    NUM_SYMBOLS,
    SearchCancelledError,
    Symbols,
    build_bad_character_table,
    build_good_suffix_table,
    to_symbols,
)

EventSink = Callable[[AlignmentEvent], None]


def search(
    text: Symbols,
    pattern: Symbols,
    on_event: Optional[EventSink] = None,
    *,
    alphabet_size: int = NUM_SYMBOLS,
    collect_events: bool = True,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> SearchResult:
    """
    Finds every occurrence of `pattern` in `text` with the Boyer-Moore algorithm.

    The pattern is compared right to left at each alignment. After a full match
    the pattern moves by the good-suffix shift for a full match, which never
    exceeds the pattern length, so overlapping occurrences are reported. After a
    mismatch it moves by the larger of the bad-character and good-suffix shifts;
    ties are credited to the bad-character rule.

    Args:
        text: Sequence to search in.
        pattern: Sequence to search for.
        on_event: Optional sink called with each AlignmentEvent as it happens.
        alphabet_size: Number of symbols in the alphabet.
        collect_events: Whether to keep the events on the returned result.
        should_cancel: Optional callable polled once per alignment.

    Returns:
        SearchResult: Ascending match offsets and the alignment events. If the
        pattern is empty or longer than the text, no scan is performed and the
        result status is DEGENERATE_INPUT.

    Raises:
        InvalidSymbolError: If a pattern symbol is outside the alphabet.
        SearchCancelledError: If `should_cancel` returned True.
    """
    text_symbols = to_symbols(text)
    pattern_symbols = to_symbols(pattern)
    n = len(text_symbols)
    m = len(pattern_symbols)

    if m == 0 or n < m:
        return SearchResult(
            matches=(),
            status=SearchStatus.DEGENERATE_INPUT,
            text_length=n,
            pattern_length=m,
        )

    bad_char_table = build_bad_character_table(pattern_symbols, alphabet_size)
    good_suffix_shifts = build_good_suffix_table(pattern_symbols)

    matches: List[int] = []
    events: List[AlignmentEvent] = []
    shift = 0
    step = 1

    while shift <= n - m:
        if should_cancel is not None and should_cancel():
            raise SearchCancelledError(f"Search cancelled at offset {shift} after {step - 1} steps")

        j = m - 1
        while j >= 0 and pattern_symbols[j] == text_symbols[shift + j]:
            j -= 1

        if j < 0:
            matches.append(shift)
            event = AlignmentEvent(
                step=step,
                offset=shift,
                mismatch_index=None,
                bad_character_shift=None,
                good_suffix_shift=good_suffix_shifts[0],
                shift=good_suffix_shifts[0],
                heuristic=Heuristic.GOOD_SUFFIX,
            )
        else:
            last = bad_char_table[text_symbols[shift + j]]
            # an absent symbol moves the pattern past the bad character
            bad_char_shift = j + 1 if last is None else max(1, j - last)
            good_suffix_shift = good_suffix_shifts[j + 1]
            if bad_char_shift >= good_suffix_shift:
                heuristic = Heuristic.BAD_CHARACTER
            else:
                heuristic = Heuristic.GOOD_SUFFIX
            event = AlignmentEvent(
                step=step,
                offset=shift,
                mismatch_index=j,
                bad_character_shift=bad_char_shift,
                good_suffix_shift=good_suffix_shift,
                shift=max(bad_char_shift, good_suffix_shift),
                heuristic=heuristic,
            )

        if collect_events:
            events.append(event)
        if on_event is not None:
            on_event(event)

        shift += event.shift
        step += 1

    return SearchResult(
        matches=tuple(matches),
        events=tuple(events),
        status=SearchStatus.COMPLETED,
        text_length=n,
        pattern_length=m,
    )


def find_all(text: Symbols, pattern: Symbols, alphabet_size: int = NUM_SYMBOLS) -> List[int]:
    """Returns the match offsets only, without keeping alignment events."""
    return list(search(text, pattern, alphabet_size=alphabet_size, collect_events=False).matches)
