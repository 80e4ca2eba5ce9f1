"""
WikiPath.

Finds shortest link paths between articles of a Wikipedia-style
link graph loaded from a node list and an edge list, optionally
routed through an intermediate article.
"""

__version__ = "0.1.0"
