"""Services layer - Application orchestration.

Available services:
- PathQueryService: Shortest-path queries against a loaded graph
"""

from .path_query import PathQueryService

__all__ = ["PathQueryService"]
