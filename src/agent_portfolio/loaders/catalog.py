"""
Agent catalog extractor.

Scrapes agent entries out of the object-literal catalog source. The
source is a JS module, so this is a best-effort pattern scan rather than
a parser: blocks that do not match the expected shape are skipped.
"""

from __future__ import annotations

import re
from pathlib import Path

from agent_portfolio.models.agent_record import AgentRecord, DEFAULT_DEPLOY
from agent_portfolio.utils.logging import get_logger
from agent_portfolio.utils.parsing import (
    extract_quoted,
    unescape_angle_brackets,
)
from agent_portfolio.utils.paths import require_file

logger = get_logger(__name__)

ENTRY_RE = re.compile(r"\{\s*id:\s*'([^']+)',\s*name:\s*'([^']+)',"
                      r"\s*category:\s*'([^']+)',\s*desc:\s*'([^']*)'"
                      r"(?:,\s*deploy:\s*'([^']*)')?")
KEYWORDS_RE = re.compile(r"keywords:\s*\[([^\]]+)\]")
USAGE_RE = re.compile(r"usage:\s*\[(.*?)\]", re.S)
ENTRY_START_RE = re.compile(r"\{\s*id:")


def parse_catalog(text: str) -> list[AgentRecord]:
	"""
	Extract agent records from catalog source text.

	Keyword and usage arrays are looked up between the start of an entry
	and the next ``{ id:`` opening, whether or not that block parses, so an
	entry without them gets empty lists instead of its neighbour's.

	When the same id appears more than once the last entry wins and keeps
	the position of the first.

	Parameters:
		text: Raw catalog source.

	Returns:
		Agent records in source order.
	"""
	matches = list(ENTRY_RE.finditer(text))
	records: dict[str, AgentRecord] = {}
	for m in matches:
		nxt = ENTRY_START_RE.search(text, m.end())
		end = nxt.start() if nxt else len(text)
		body = text[m.start():end]
		agent_id, name, category, desc, deploy = m.groups()

		kw = KEYWORDS_RE.search(body)
		usage = USAGE_RE.search(body)
		record = AgentRecord(
		    id=agent_id,
		    name=name,
		    category=category,
		    description=desc,
		    deploy_target=deploy or DEFAULT_DEPLOY,
		    keywords=extract_quoted(kw.group(1)) if kw else [],
		    usage_examples=[
		        unescape_angle_brackets(u)
		        for u in extract_quoted(usage.group(1))
		    ] if usage else [],
		)
		if agent_id in records:
			logger.warning("duplicate catalog id %r, keeping the later entry",
			               agent_id)
		records[agent_id] = record
	logger.debug("catalog: matched %d entries", len(matches))
	return list(records.values())


def load_catalog(path: str | Path) -> list[AgentRecord]:
	"""
	Load agent records from the catalog file.

	Parameters:
		path: Path to the catalog source.

	Returns:
		Agent records in source order.

	Raises:
		FileNotFoundError: If the catalog file is missing.
	"""
	p = require_file(Path(path), "agent catalog")
	return parse_catalog(p.read_text(encoding="utf-8"))


__all__ = ["parse_catalog", "load_catalog"]
