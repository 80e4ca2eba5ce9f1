#!/usr/bin/env python3
"""
Validate article graph data files and the loaded GraphStore.

Usage:
    python scripts/validate_graph.py
    python scripts/validate_graph.py --undirected "Albert Einstein" "Pizza"
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wikipath.config import EDGES_PATH, NODES_PATH  # noqa: E402 - must be after sys.path modification
from wikipath.data import load_graph  # noqa: E402
from wikipath.graph import (  # noqa: E402
    GraphStore,
    NameNotFoundError,
    PathFinder,
    WikiPathError,
    format_path,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_data_files_exist() -> bool:
    """Check that both data files exist."""
    print("\n=== Checking Data Files ===\n")

    files = {
        NODES_PATH.name: NODES_PATH,
        EDGES_PATH.name: EDGES_PATH,
    }

    all_exist = True
    for name, path in files.items():
        exists = path.exists()
        size_mb = path.stat().st_size / (1024 * 1024) if exists else 0
        status = f"✓ {name}: {size_mb:,.1f} MB" if exists else f"✗ {name}: NOT FOUND"
        print(status)
        if not exists:
            all_exist = False

    return all_exist


def load_and_validate(undirected: bool) -> GraphStore | None:
    """Load the graph and run structural checks."""
    print("\n=== Loading Graph ===\n")

    start_time = time.time()
    store = load_graph(NODES_PATH, EDGES_PATH, undirected=undirected)
    print(f"Load time: {time.time() - start_time:.1f} seconds")

    print("\n=== Graph Statistics ===\n")
    for key, value in store.stats().items():
        is_count = isinstance(value, int) and not isinstance(value, bool)
        print(f"  {key}: {value:,}" if is_count else f"  {key}: {value}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in store.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return store if all_valid else None


def run_sample_query(store: GraphStore, articles: list[str]) -> bool:
    """Run one shortest-path query against the loaded graph."""
    print("\n=== Sample Query ===\n")

    finder = PathFinder(store)
    try:
        if len(articles) == 3:
            path = finder.shortest_path_via(*articles)
        else:
            path = finder.shortest_path(*articles)
    except NameNotFoundError as e:
        print(f"  ✗ {e}")
        return False

    if not path:
        print(f"  ⚠ No path found for {articles}")
    else:
        print(f"  ✓ Length {len(path) - 1}: {format_path(path)}")
    return True


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description="Validate article graph data")
    parser.add_argument("articles", nargs="*", help="Optional START [VIA] END query to run")
    parser.add_argument("--undirected", action="store_true", help="Follow links in both directions")
    args = parser.parse_args()

    if args.articles and len(args.articles) not in (2, 3):
        parser.error("expected START END or START VIA END article names")

    print("=" * 60)
    print("WikiPath Data Validation")
    print("=" * 60)

    if not check_data_files_exist():
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        store = load_and_validate(args.undirected)
    except (OSError, WikiPathError) as e:
        print(f"\n✗ Error loading data: {e}")
        return 1

    if store is None:
        print("\n✗ Validation checks failed.")
        return 1

    if args.articles and not run_sample_query(store, args.articles):
        print("\n✗ Sample query failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
