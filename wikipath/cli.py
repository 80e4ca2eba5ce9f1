"""
WikiPath CLI - Find the shortest link path between two articles.

Usage:
    wikipath data/articles.tsv data/links.tsv "Albert Einstein" "Pizza"
    wikipath data/articles.tsv data/links.tsv "Albert Einstein" "Physics" "Pizza"
    wikipath data/articles.tsv data/links.tsv "Cat" "Dog" --undirected

With three article names, the middle one is an intermediate article
that the path must pass through.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wikipath.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL, UNDIRECTED_EDGES
from wikipath.data import load_graph, save_snapshot
from wikipath.graph import NameNotFoundError, PathFinder, WikiPathError, format_path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="wikipath",
        description="Find the shortest path between two articles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "nodes",
        help="File containing the article names, one per line",
    )
    parser.add_argument(
        "edges",
        help="File containing the links between articles, tab-separated",
    )
    parser.add_argument(
        "articles",
        nargs="+",
        metavar="ARTICLE",
        help="START [VIA] END: start article, optional intermediate article, end article",
    )
    parser.add_argument(
        "--undirected",
        action=argparse.BooleanOptionalAction,
        default=UNDIRECTED_EDGES,
        help="Follow links in both directions",
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        default=None,
        help="Also write the loaded graph to this msgpack file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if len(args.articles) not in (2, 3):
        parser.error("expected START END or START VIA END article names")
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        store = load_graph(args.nodes, args.edges, undirected=args.undirected)
    except FileNotFoundError as e:
        print(f"Error: the file name you entered was invalid ({e})", file=sys.stderr)
        return 1
    except WikiPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Graph ready: {store!r}")

    if args.snapshot:
        try:
            save_snapshot(store, args.snapshot)
        except OSError as e:
            print(f"Error: could not write snapshot ({e})", file=sys.stderr)
            return 1

    finder = PathFinder(store)

    if len(args.articles) == 2:
        start, end = args.articles
        via = None
    else:
        start, via, end = args.articles

    try:
        if via is None:
            path = finder.shortest_path(start, end)
        else:
            path = finder.shortest_path_via(start, via, end)
    except NameNotFoundError as e:
        print(f"Error: {e}. Please try again.", file=sys.stderr)
        return 1

    if not path:
        if via is None:
            print(f"No path found between {start} and {end}")
        else:
            print(f"No path found between {start} and {end} that passes through {via}")
        return 1

    length = len(path) - 1
    if via is None:
        print(f"Shortest path from {start} to {end}, length = {length}")
    else:
        print(f"Shortest path from {start} to {end} through {via}, length = {length}")
    print(format_path(path))

    return 0


if __name__ == "__main__":
    sys.exit(main())
