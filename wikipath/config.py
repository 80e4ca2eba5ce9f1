"""
Configuration constants for the WikiPath project.

All paths, file-format settings, and tunable parameters are defined here.
Overrides are read from environment variables (a local .env file is honored).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of wikipath/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains node list and edge list)
DATA_DIR = Path(os.environ.get("WIKIPATH_DATA_DIR", PROJECT_ROOT / "data"))

# Individual data file paths
NODES_PATH = DATA_DIR / "articles.tsv"
EDGES_PATH = DATA_DIR / "links.tsv"

# =============================================================================
# File Format Configuration
# =============================================================================

# Lines starting with this prefix are ignored in both input files
COMMENT_PREFIX = "#"

# Separator between source and target article on an edge line
EDGE_DELIMITER = "\t"

# Encoding of node and edge files
FILE_ENCODING = "utf-8"

# Bumped whenever the snapshot layout changes
SNAPSHOT_VERSION = 1

# =============================================================================
# Graph Configuration
# =============================================================================

# Register every edge in both directions when loading.
# Off by default: links are followed only in the direction they were declared.
UNDIRECTED_EDGES = os.environ.get("WIKIPATH_UNDIRECTED", "0").lower() in ("1", "true", "yes")

# Length reported when no path exists between two articles
NO_PATH = -1

# Separator used when rendering a path for display
PATH_ARROW = " --> "

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
