"""Core build logic.

This subpackage contains the reconciliation of the three sources into
the catalog document and the orchestration of a build run.

Key modules:
    - pipeline: Build orchestration via run_build()
    - merge: Joins, connection graph and aggregates
    - query: Filtering and lookup over a built document
    - lookups: Category icon and deploy normalization tables
"""

from agent_portfolio.core.pipeline import BuildResult, assemble, run_build
from agent_portfolio.core.merge import (
    build_connection_index,
    merge_agents,
    build_categories,
    build_deploy_targets,
    build_document,
)
from agent_portfolio.core.query import (
    load_document,
    filter_agents,
    find_agent,
    resolve_connections,
)

__all__ = [
    # pipeline
    "BuildResult",
    "assemble",
    "run_build",
    # merge
    "build_connection_index",
    "merge_agents",
    "build_categories",
    "build_deploy_targets",
    "build_document",
    # query
    "load_document",
    "filter_agents",
    "find_agent",
    "resolve_connections",
]
