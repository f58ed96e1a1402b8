"""
Subagent definition loader.

Provides functions for loading subagent profiles from markdown files
with a ``---`` delimited header containing ``name``, ``model`` and
``tools``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from agent_portfolio.models.subagent_config import SubagentConfig, DEFAULT_MODEL
from agent_portfolio.loaders.frontmatter import split_frontmatter
from agent_portfolio.utils.logging import get_logger
from agent_portfolio.utils.parsing import split_csv
from agent_portfolio.utils.paths import require_dir

logger = get_logger(__name__)


def _as_text(value: Any) -> Optional[str]:
	if value is None:
		return None
	text = str(value).strip()
	return text or None


def _as_tools(value: Any) -> list[str]:
	if value is None:
		return []
	if isinstance(value, (list, tuple)):
		return [str(t).strip() for t in value if str(t).strip()]
	return split_csv(str(value))


def parse_subagent(text: str) -> Optional[SubagentConfig]:
	"""
	Parse a subagent profile from markdown text.

	Parameters:
		text: The full markdown file content.

	Returns:
		SubagentConfig, or None when there is no header or no name.
	"""
	split = split_frontmatter(text)
	if split is None:
		return None
	meta, _ = split
	name = _as_text(meta.get("name"))
	if not name:
		return None
	return SubagentConfig(
	    name=name,
	    model=_as_text(meta.get("model")) or DEFAULT_MODEL,
	    tools=_as_tools(meta.get("tools")),
	)


def load_subagents(directory: str | Path) -> dict[str, SubagentConfig]:
	"""
	Load every subagent profile in a directory, keyed by name.

	Files are read in lexicographic filename order. A later file with an
	already-seen name replaces the earlier profile entirely.

	Parameters:
		directory: Directory holding ``*.md`` subagent files.

	Returns:
		Mapping of subagent name to SubagentConfig.

	Raises:
		FileNotFoundError: If the directory is missing.
	"""
	root = require_dir(Path(directory), "subagent directory")
	subs: dict[str, SubagentConfig] = {}
	for path in sorted(root.glob("*.md"), key=lambda p: p.name):
		if not path.is_file():
			continue
		sub = parse_subagent(path.read_text(encoding="utf-8"))
		if sub is None:
			logger.debug("skipping %s: no header or name", path.name)
			continue
		if sub.name in subs:
			logger.warning("duplicate subagent name %r in %s replaces earlier",
			               sub.name, path.name)
		subs[sub.name] = sub
	logger.debug("subagents: loaded %d profiles", len(subs))
	return subs


__all__ = ["parse_subagent", "load_subagents"]
