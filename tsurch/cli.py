"""Command-line entry point for tsurch."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence

from loguru import logger

from tsurch import __description__, __version__
from tsurch.config import Config, load_config
from tsurch.search import DEFAULT_REGISTRY, SearchClient, SearchError, SearchOutcome


def _sources_epilog() -> str:
    lines = ["sources:"]
    for name in DEFAULT_REGISTRY.names():
        aliases = ", ".join(DEFAULT_REGISTRY.aliases_for(name))
        lines.append(f"  {name} ({aliases})" if aliases else f"  {name}")
    return "\n".join(lines)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="tsurch",
        description=__description__,
        epilog=_sources_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s",
        "--source",
        default=config.default_source,
        metavar="SOURCE",
        help=f"Select search result source (defaults to `{config.default_source}`)",
    )
    parser.add_argument(
        "--quote-term",
        action="store_true",
        help="Percent-encode the term before appending it to GET source URLs",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("term", metavar="TERM", help="Search term(s)")
    return parser


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {message}")


def format_seconds(elapsed: float) -> str:
    """Millisecond-resolution seconds, without a trailing ``.0`` on whole values."""
    seconds = repr(int(elapsed * 1000) / 1000)
    return seconds[:-2] if seconds.endswith(".0") else seconds


def format_outcome(outcome: SearchOutcome) -> str:
    return f"({format_seconds(outcome.elapsed)} seconds)\n{outcome.text}"


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Run one search and return the process exit code."""
    config = load_config(environ)
    args = build_parser(config).parse_args(argv)

    if args.quote_term:
        config = config.model_copy(update={"quote_get_terms": True})
    configure_logging("DEBUG" if args.verbose else config.log_level)

    client = SearchClient(config=config)
    try:
        outcome = client.run(args.source, args.term)
    except SearchError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code

    print(f'Searching on {outcome.source} for "{outcome.term}"')
    print(format_outcome(outcome))
    return 0
