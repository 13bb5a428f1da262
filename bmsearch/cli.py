import argparse
import logging
import string
import sys
from typing import List, Optional

from bmsearch.config.config import DEFAULT_CONFIG_FILE, Config, ConfigError
from bmsearch.search.algorithms import ALGORITHMS, BoyerMoore
from bmsearch.search.engine import search
from bmsearch.search.tables import SearchError
from bmsearch.trace import EventFanout, LoggingEventSink, TraceRenderer

EXAMPLE_TEXT = "AAAAAAB"
EXAMPLE_PATTERN = "AB"

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bm-search",
        description="Find every occurrence of a pattern with the Boyer-Moore algorithm",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="Path to the INI configuration file")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Text to search in")
    source.add_argument("--file", help="File to search in (overrides SEARCH.FILE_PATH)")
    parser.add_argument("--pattern", help="Pattern to search for")
    parser.add_argument("--trace", dest="trace", action="store_true", default=None,
                        help="Print the step-by-step trace")
    parser.add_argument("--no-trace", dest="trace", action="store_false",
                        help="Only print the match offsets")
    parser.add_argument("--no-alignment", action="store_true",
                        help="Leave the alignment diagrams out of the trace")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS),
                        help="Algorithm for file searches (overrides SEARCH.ALGORITHM)")
    parser.add_argument("--ignore-case", action="store_true",
                        help="Fold ASCII letters before matching")
    parser.add_argument("--log-level", choices=sorted(Config.VALID_LOG_LEVELS),
                        help="Override LOGGING.LEVEL")
    return parser


def _format_matches(matches) -> str:
    return " ".join(str(offset) for offset in matches) if matches else "no matches"


def _search_file(config: Config, args: argparse.Namespace, path: str, logger: logging.Logger) -> int:
    algorithm = (args.algorithm or config.search_algorithm).lower()
    case_sensitive = config.case_sensitive and not args.ignore_case
    algorithm_class = ALGORITHMS[algorithm]
    if algorithm_class is BoyerMoore:
        searcher = BoyerMoore(path, config.reread_on_query, case_sensitive,
                              alphabet_size=config.alphabet_size,
                              on_event=LoggingEventSink(logger))
    else:
        searcher = algorithm_class(path, config.reread_on_query, case_sensitive)

    logger.info("Searching '%s' with %s", path, algorithm)
    matches = searcher.search(args.pattern)
    logger.info("Search statistics: %s", searcher.get_stats())
    print(_format_matches(matches))
    return EXIT_MATCH if matches else EXIT_NO_MATCH


def _search_text(config: Config, args: argparse.Namespace, text: str, pattern: str,
                 logger: logging.Logger) -> int:
    if args.ignore_case or not config.case_sensitive:
        text = text.translate(_ASCII_LOWER)
        pattern = pattern.translate(_ASCII_LOWER)

    trace_enabled = config.trace_enabled if args.trace is None else args.trace
    renderer = None
    if trace_enabled:
        renderer = TraceRenderer(text, pattern, show_alignment=config.show_alignment and not args.no_alignment)
        renderer.header()

    result = search(
        text,
        pattern,
        EventFanout(renderer, LoggingEventSink(logger)),
        alphabet_size=config.alphabet_size,
        collect_events=False,
    )

    if result.degenerate:
        logger.warning("Pattern is empty or longer than the text; no search performed")
    else:
        logger.info("Found %d match(es) for a %d-symbol pattern in %d symbols",
                    len(result.matches), result.pattern_length, result.text_length)

    if renderer is not None:
        renderer.finish(result)
    else:
        print(_format_matches(result.matches))
    return EXIT_MATCH if result.matches else EXIT_NO_MATCH


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger = config.logger
    if args.log_level:
        logger.setLevel(args.log_level)
        for handler in logger.handlers:
            handler.setLevel(args.log_level)
    logger.debug("Loaded %s", config)

    path = args.file or (config.file_path if args.text is None else None)
    try:
        if path:
            if not args.pattern:
                parser.error("--pattern is required when searching a file")
            return _search_file(config, args, path, logger)
        if args.text is None:
            text, pattern = EXAMPLE_TEXT, args.pattern if args.pattern is not None else EXAMPLE_PATTERN
        elif args.pattern is None:
            parser.error("--pattern is required with --text")
        else:
            text, pattern = args.text, args.pattern
        return _search_text(config, args, text, pattern, logger)
    except (SearchError, ValueError, OSError, RuntimeError) as e:
        logger.error("Search failed: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
