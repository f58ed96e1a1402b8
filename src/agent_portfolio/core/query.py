"""
Catalog queries over a built document.

Mirrors the filtering the catalog page does in the browser so the same
views can be inspected from the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from agent_portfolio.models.catalog import CatalogDocument, MergedAgent
from agent_portfolio.utils.paths import require_file

ALL_CATEGORIES = "all"


def load_document(path: str | Path) -> CatalogDocument:
	"""
	Read and validate an emitted data document.

	Parameters:
		path: Path to ``agents.json``.

	Returns:
		Parsed CatalogDocument.

	Raises:
		FileNotFoundError: If the file is missing.
		ValueError: If the file is not a valid catalog document.
	"""
	p = require_file(Path(path), "catalog data")
	try:
		return CatalogDocument.model_validate_json(
		    p.read_text(encoding="utf-8"))
	except ValidationError as exc:
		raise ValueError(f"invalid catalog data ({p}): {exc}") from exc


def _haystack(agent: MergedAgent) -> str:
	return " ".join([agent.id, agent.name, agent.description,
	                 " ".join(agent.keywords)]).lower()


def filter_agents(
    agents: Sequence[MergedAgent],
    category: str = ALL_CATEGORIES,
    deploy: Optional[str] = None,
    search: str = "",
) -> list[MergedAgent]:
	"""
	Filter agents by category, deploy target and free-text search.

	Parameters:
		agents: Agents to filter.
		category: Category id (case-insensitive) or ``all``.
		deploy: Exact canonical deploy target, or None for any.
		search: Case-insensitive substring over id, name, description
			and keywords.

	Returns:
		Matching agents in their original order.
	"""
	cat = (category or ALL_CATEGORIES).lower()
	needle = (search or "").lower()
	result = []
	for a in agents:
		if cat != ALL_CATEGORIES and a.category.lower() != cat:
			continue
		if deploy and a.deploy != deploy:
			continue
		if needle and needle not in _haystack(a):
			continue
		result.append(a)
	return result


def find_agent(agents: Sequence[MergedAgent],
               agent_id: str) -> Optional[MergedAgent]:
	"""Return the agent with the given id, or None."""
	for a in agents:
		if a.id == agent_id:
			return a
	return None


def resolve_connections(
    agents: Sequence[MergedAgent],
    agent: MergedAgent) -> list[tuple[str, Optional[MergedAgent]]]:
	"""
	Pair each connection id with its agent, None when unknown.

	Parameters:
		agents: All agents in the document.
		agent: Agent whose connections to resolve.

	Returns:
		List of (id, agent or None) in connection order.
	"""
	by_id = {a.id: a for a in agents}
	return [(cid, by_id.get(cid)) for cid in agent.connections]


__all__ = [
    "ALL_CATEGORIES",
    "load_document",
    "filter_agents",
    "find_agent",
    "resolve_connections",
]
