"""Source and reference loading utilities.

This subpackage turns the raw build inputs into typed records. Each
extractor exposes a pure ``parse_*`` function over text plus a thin
``load_*`` wrapper that reads the file.

Key modules:
    - catalog: Agent catalog extraction
    - subagents: Subagent profile loading from markdown
    - projects: Portfolio project extraction
    - reference: Translation table and architecture map loading
    - frontmatter: Markdown header parsing
"""

from .frontmatter import split_frontmatter
from .catalog import parse_catalog, load_catalog
from .subagents import parse_subagent, load_subagents
from .projects import parse_projects, load_projects
from .reference import (
    load_translations,
    load_architecture_map,
    load_reference_data,
)

__all__ = [
    "split_frontmatter",
    "parse_catalog",
    "load_catalog",
    "parse_subagent",
    "load_subagents",
    "parse_projects",
    "load_projects",
    "load_translations",
    "load_architecture_map",
    "load_reference_data",
]
