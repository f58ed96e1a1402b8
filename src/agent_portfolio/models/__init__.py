"""
Agent Portfolio models.

This subpackage contains Pydantic models for the three source record
types, the reference tables, configuration, and the merged catalog
document.

Key models:
    - Config: Build configuration loaded from environment
    - AgentRecord: Entry scraped from the agent catalog
    - SubagentConfig: Profile loaded from subagent markdown frontmatter
    - ProjectHighlight: Entry parsed from the portfolio catalog
    - CatalogDocument: The merged output document
"""

from .config import Config, load_env
from .build_params import BuildParams
from .agent_record import AgentRecord, DEFAULT_DEPLOY
from .subagent_config import SubagentConfig, DEFAULT_MODEL
from .project_highlight import ProjectHighlight
from .reference import ArchitectureMap, Connection, ReferenceData
from .catalog import (
    CatalogDocument,
    CategorySummary,
    Counts,
    MergedAgent,
    Meta,
    ProjectInfo,
    SubagentInfo,
)

__all__ = [
    "Config",
    "load_env",
    "BuildParams",
    "AgentRecord",
    "DEFAULT_DEPLOY",
    "SubagentConfig",
    "DEFAULT_MODEL",
    "ProjectHighlight",
    "ArchitectureMap",
    "Connection",
    "ReferenceData",
    "CatalogDocument",
    "CategorySummary",
    "Counts",
    "MergedAgent",
    "Meta",
    "ProjectInfo",
    "SubagentInfo",
]
