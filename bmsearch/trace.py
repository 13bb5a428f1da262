"""Event sinks that turn alignment events into a readable trace."""

import logging
import sys
from typing import Iterable, Sequence, TextIO, Union

from bmsearch.search.events import AlignmentEvent, SearchResult

SEPARATOR = "-" * 56
SUMMARY_RULE = "=" * 48


def count_skipped_characters(events: Iterable[AlignmentEvent], text_length: int, pattern_length: int) -> int:
    """
    Counts the characters jumped over by shifts larger than one.

    Only shifts that land on a valid alignment are counted; the final shift
    that moves the pattern past the end of the text skips nothing.
    """
    last_offset = text_length - pattern_length
    return sum(
        event.shift - 1
        for event in events
        if event.shift > 1 and event.next_offset <= last_offset
    )


def _display(sequence: Union[str, bytes, bytearray, Sequence[int]]) -> str:
    if isinstance(sequence, str):
        return sequence
    if isinstance(sequence, (bytes, bytearray)):
        # latin-1 keeps one character per byte so the diagrams line up
        return sequence.decode("latin-1")
    return "".join(chr(symbol) for symbol in sequence)


class TraceRenderer:
    """
    Renders a step-by-step trace of a search to a text stream.

    Use an instance as the `on_event` sink of a search, then call `finish()`
    with the result to print the summary.

    Args:
        text: The searched text, used for the alignment diagrams.
        pattern: The pattern searched for.
        stream (TextIO): Output stream. Defaults to stdout.
        show_alignment (bool): Whether to draw the pattern under the text after
            each shift.
    """
    def __init__(self, text, pattern, stream: TextIO = None, show_alignment: bool = True) -> None:
        self.text = _display(text)
        self.pattern = _display(pattern)
        self.stream = stream if stream is not None else sys.stdout
        self.show_alignment = show_alignment
        self.skipped_characters = 0
        self._last_offset = len(self.text) - len(self.pattern)

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")

    def header(self) -> None:
        self._write(f"Text:    {self.text}")
        self._write(f"Pattern: {self.pattern}")
        self._write("-" * 34)

    def __call__(self, event: AlignmentEvent) -> None:
        self._write(f"Step {event.step}: Pattern aligned at index {event.offset}")
        in_range = event.next_offset <= self._last_offset

        if event.is_match:
            self._write(f"Pattern found at index: {event.offset}")
            if in_range:
                self._write(
                    f"- Shifting right by: {event.shift}      - Chosen Heuristic: {event.heuristic.value}"
                )
        else:
            self._write(
                f"- Bad character shift: {event.bad_character_shift}"
                f"      - Good suffix shift: {event.good_suffix_shift}"
                f"      - Heuristic Chosen: {event.heuristic.value}"
                f"      - Shifting right by: {event.shift}"
            )

        if event.shift > 1 and in_range:
            self.skipped_characters += event.shift - 1
        if in_range and self.show_alignment:
            self._write_alignment(event.next_offset)

    def _write_alignment(self, offset: int) -> None:
        self._write()
        self._write(f"Text:    {self.text}")
        self._write("Pattern: " + " " * offset + self.pattern)
        self._write(SEPARATOR)

    def finish(self, result: SearchResult) -> None:
        if result.degenerate:
            self._write("Pattern is empty or longer than the text.")
            return
        if not result.matches:
            self._write("Pattern not found in the text.")
        self._write()
        self._write(SUMMARY_RULE)
        self._write(
            "The pattern matched the text at index: "
            + "".join(f"{offset} " for offset in result.matches)
        )
        self._write(f"Total Skipped Characters: {self.skipped_characters}")


class LoggingEventSink:
    """Logs every alignment event on the given logger."""

    def __init__(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
        self.logger = logger
        self.level = level

    def __call__(self, event: AlignmentEvent) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        if event.is_match:
            self.logger.log(
                self.level,
                "Step %d: match at offset %d, shifting by %d (%s)",
                event.step, event.offset, event.shift, event.heuristic.value,
            )
        else:
            self.logger.log(
                self.level,
                "Step %d: mismatch at offset %d, pattern index %d; bad character %d, good suffix %d, shifting by %d (%s)",
                event.step, event.offset, event.mismatch_index,
                event.bad_character_shift, event.good_suffix_shift, event.shift, event.heuristic.value,
            )


class EventFanout:
    """Forwards each event to several sinks in order."""

    def __init__(self, *sinks) -> None:
        self.sinks = [sink for sink in sinks if sink is not None]

    def __call__(self, event: AlignmentEvent) -> None:
        for sink in self.sinks:
            sink(event)
