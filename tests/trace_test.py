import io
import logging

from bmsearch.search import search
from bmsearch.trace import (
    SEPARATOR,
    EventFanout,
    LoggingEventSink,
    TraceRenderer,
    count_skipped_characters,
)


def render(text, pattern, show_alignment=True):
    stream = io.StringIO()
    renderer = TraceRenderer(text, pattern, stream=stream, show_alignment=show_alignment)
    renderer.header()
    result = search(text, pattern, renderer)
    renderer.finish(result)
    return stream.getvalue().splitlines(), renderer


def test_worked_example_trace():
    lines, renderer = render("AAAAAAB", "AB")

    assert lines[:3] == ["Text:    AAAAAAB", "Pattern: AB", "-" * 34]
    assert lines[3] == "Step 1: Pattern aligned at index 0"
    assert lines[4] == (
        "- Bad character shift: 1      - Good suffix shift: 1"
        "      - Heuristic Chosen: Bad Character      - Shifting right by: 1"
    )
    assert lines[5:9] == ["", "Text:    AAAAAAB", "Pattern:  AB", SEPARATOR]
    assert "Step 6: Pattern aligned at index 5" in lines
    assert "Pattern found at index: 5" in lines
    # the final shift leaves the text, so it is not announced
    assert not any("Chosen Heuristic" in line for line in lines)
    assert "Pattern not found in the text." not in lines
    assert lines[-2] == "The pattern matched the text at index: 5 "
    assert lines[-1] == "Total Skipped Characters: 0"
    assert renderer.skipped_characters == 0


def test_match_shift_announced_when_in_range():
    lines, _ = render("AAAA", "AA")
    assert lines.count("- Shifting right by: 1      - Chosen Heuristic: Good Suffix") == 2
    assert lines[-2] == "The pattern matched the text at index: 0 1 2 "


def test_not_found_trace():
    lines, _ = render("AAAAAAB", "XYZ", show_alignment=False)
    assert "Pattern not found in the text." in lines
    assert SEPARATOR not in lines
    assert lines[-2] == "The pattern matched the text at index: "


def test_degenerate_trace():
    lines, _ = render("AB", "ABC")
    assert lines[-1] == "Pattern is empty or longer than the text."
    assert not any(line.startswith("Step") for line in lines)


def test_skipped_characters():
    lines, renderer = render("XYZXYZAB", "AB")
    assert renderer.skipped_characters == 3
    assert lines[-1] == "Total Skipped Characters: 3"

    result = search("XYZXYZAB", "AB")
    assert count_skipped_characters(result.events, 8, 2) == 3


def test_bytes_are_displayed_one_column_per_byte():
    lines, _ = render(b"xx\xffab", b"ab")
    assert "Text:    xx\xffab" in lines


def test_logging_sink(caplog):
    logger = logging.getLogger("trace_test.sink")
    with caplog.at_level(logging.DEBUG, logger="trace_test.sink"):
        search("AAAAAAB", "AB", LoggingEventSink(logger))
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 6
    assert messages[0].startswith("Step 1: mismatch at offset 0, pattern index 1")
    assert messages[-1] == "Step 6: match at offset 5, shifting by 2 (Good Suffix)"


def test_logging_sink_respects_level(caplog):
    logger = logging.getLogger("trace_test.quiet")
    with caplog.at_level(logging.INFO, logger="trace_test.quiet"):
        search("AAAAAAB", "AB", LoggingEventSink(logger))
    assert caplog.records == []


def test_fanout_skips_missing_sinks():
    first, second = [], []
    search("AAAA", "AA", EventFanout(first.append, None, second.append))
    assert len(first) == len(second) == 3
