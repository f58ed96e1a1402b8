"""
Portfolio project extractor.

Scrapes project blocks out of the portfolio catalog. Each block starts
at a ``  - id: <id>`` line and runs until the next one.
"""

from __future__ import annotations

import re
from pathlib import Path

from agent_portfolio.models.project_highlight import ProjectHighlight
from agent_portfolio.utils.logging import get_logger
from agent_portfolio.utils.parsing import (
    extract_bullets,
    extract_field,
    split_csv,
)
from agent_portfolio.utils.paths import require_file

logger = get_logger(__name__)

BLOCK_SPLIT_RE = re.compile(r"\n  - id: ")
BLOCK_ID_RE = re.compile(r"^(\S+)")
HIGHLIGHTS_RE = re.compile(r"highlights:\s*\n((?:\s+- .+\n?)+)")
TAGS_RE = re.compile(r"기술:\s*\[([^\]]+)\]")
FEATURED_MARKER = "in_master: true"


def parse_project_block(block: str) -> ProjectHighlight | None:
	"""
	Parse one project block (text following ``- id: ``).

	Parameters:
		block: Block text beginning with the id.

	Returns:
		ProjectHighlight, or None when no id can be read.
	"""
	m = BLOCK_ID_RE.match(block)
	if not m:
		return None
	hl = HIGHLIGHTS_RE.search(block)
	tags = TAGS_RE.search(block)
	return ProjectHighlight(
	    id=m.group(1),
	    title=extract_field(block, "title"),
	    oneliner=extract_field(block, "oneliner"),
	    highlights=extract_bullets(hl.group(1)) if hl else [],
	    tags=split_csv(tags.group(1)) if tags else [],
	    in_master=FEATURED_MARKER in block,
	)


def parse_projects(text: str) -> dict[str, ProjectHighlight]:
	"""
	Extract project highlights keyed by id.

	Parameters:
		text: Raw portfolio catalog text.

	Returns:
		Mapping of project id to ProjectHighlight.
	"""
	projects: dict[str, ProjectHighlight] = {}
	for block in BLOCK_SPLIT_RE.split(text)[1:]:
		proj = parse_project_block(block)
		if proj is None:
			logger.debug("skipping project block without id")
			continue
		projects[proj.id] = proj
	return projects


def load_projects(path: str | Path) -> dict[str, ProjectHighlight]:
	"""
	Load project highlights from the portfolio catalog file.

	Parameters:
		path: Path to the portfolio catalog.

	Returns:
		Mapping of project id to ProjectHighlight.

	Raises:
		FileNotFoundError: If the file is missing.
	"""
	p = require_file(Path(path), "portfolio catalog")
	return parse_projects(p.read_text(encoding="utf-8"))


__all__ = ["parse_project_block", "parse_projects", "load_projects"]
