"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the file locations
and logging settings used by the command-line frontend.

Configuration can be overridden via environment variables:
- PATHGRAPH_GRAPH_DATA_DIR=/path/to/data
- PATHGRAPH_GRAPH_VERTICES_FILE=vertices.txt
- PATHGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with PATHGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "vertices.txt"
    edges_file: str = "edges.txt"

    @property
    def vertices_path(self) -> Path:
        """Full path to the vertex file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to the edge file."""
        return self.data_dir / self.edges_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.vertices_path)
        print(config.observability.level)

    Environment variables prefixed with PATHGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
