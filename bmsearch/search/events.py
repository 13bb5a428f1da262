from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Heuristic(Enum):
    BAD_CHARACTER = "Bad Character"
    GOOD_SUFFIX = "Good Suffix"


class SearchStatus(Enum):
    COMPLETED = "completed"
    DEGENERATE_INPUT = "degenerate_input"


@dataclass(frozen=True)
class AlignmentEvent:
    """
    One step of the right-to-left scan.

    Attributes:
        step (int): 1-based step counter within the search call.
        offset (int): Text offset the pattern was aligned at for this step.
        mismatch_index (Optional[int]): Pattern index of the mismatch, or None
            when the whole pattern matched.
        bad_character_shift (Optional[int]): Shift proposed by the bad-character
            rule. None on a full match, where only the good-suffix rule applies.
        good_suffix_shift (int): Shift proposed by the good-suffix rule.
        shift (int): Shift actually applied.
        heuristic (Heuristic): Rule credited with the applied shift.
    """
    step: int
    offset: int
    mismatch_index: Optional[int]
    bad_character_shift: Optional[int]
    good_suffix_shift: int
    shift: int
    heuristic: Heuristic

    @property
    def is_match(self) -> bool:
        return self.mismatch_index is None

    @property
    def next_offset(self) -> int:
        return self.offset + self.shift


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search call: match offsets plus the per-step events."""
    matches: Tuple[int, ...]
    events: Tuple[AlignmentEvent, ...] = field(default=())
    status: SearchStatus = SearchStatus.COMPLETED
    text_length: int = 0
    pattern_length: int = 0

    @property
    def degenerate(self) -> bool:
        return self.status is SearchStatus.DEGENERATE_INPUT

    @property
    def offsets(self) -> Tuple[int, ...]:
        return tuple(event.offset for event in self.events)

    def __bool__(self) -> bool:
        return bool(self.matches)
