"""
Catalog reconciliation.

Joins the catalog records with subagent profiles, portfolio projects,
translations and the connection graph, and derives the aggregate
sections of the output document.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Mapping, Sequence

from agent_portfolio.core.lookups import (
    category_icon,
    is_latin_keyword,
    normalize_deploy,
)
from agent_portfolio.models.agent_record import AgentRecord
from agent_portfolio.models.catalog import (
    CatalogDocument,
    CategorySummary,
    Counts,
    MergedAgent,
    Meta,
    ProjectInfo,
    SubagentInfo,
)
from agent_portfolio.models.project_highlight import ProjectHighlight
from agent_portfolio.models.reference import Connection, ReferenceData
from agent_portfolio.models.subagent_config import SubagentConfig
from agent_portfolio.utils.logging import get_logger

logger = get_logger(__name__)


def build_connection_index(
    connections: Iterable[Connection]) -> dict[str, set[str]]:
	"""
	Build a symmetric adjacency index from directed edges.

	Every ``from -> to`` edge is recorded in both directions. Nodes that
	only ever appear as a target still get an entry. Self-loops are kept.

	Parameters:
		connections: Directed edges.

	Returns:
		Mapping of node id to the set of adjacent ids.
	"""
	index: dict[str, set[str]] = {}
	for conn in connections:
		index.setdefault(conn.source, set())
		for target in conn.to:
			index[conn.source].add(target)
			index.setdefault(target, set()).add(conn.source)
	return index


def _project_info(proj: ProjectHighlight | None) -> ProjectInfo | None:
	if proj is None:
		return None
	return ProjectInfo(
	    title=proj.title,
	    oneliner=proj.oneliner,
	    highlights=list(proj.highlights),
	    tags=list(proj.tags),
	    in_master=proj.in_master,
	)


def merge_agent(
    record: AgentRecord,
    subagents: Mapping[str, SubagentConfig],
    projects: Mapping[str, ProjectHighlight],
    translations: Mapping[str, str],
    connection_index: Mapping[str, set[str]],
    known_ids: set[str],
) -> MergedAgent:
	"""
	Merge one catalog record with everything that refers to it.

	The subagent map is keyed by profile *name* and is looked up with the
	catalog *id*; the two naming schemes are expected to coincide.

	Parameters:
		record: Catalog record.
		subagents: Subagent profiles keyed by name.
		projects: Portfolio projects keyed by id.
		translations: Translated descriptions keyed by id.
		connection_index: Symmetric adjacency index.
		known_ids: Ids of every catalog agent; other neighbours are dropped.

	Returns:
		The merged agent.
	"""
	sub = subagents.get(record.id)
	neighbours = connection_index.get(record.id, set())
	return MergedAgent(
	    id=record.id,
	    name=record.name,
	    category=record.category,
	    category_icon=category_icon(record.category),
	    description=translations.get(record.id) or record.description,
	    deploy=normalize_deploy(record.deploy_target),
	    usage=list(record.usage_examples),
	    keywords=[k for k in record.keywords if is_latin_keyword(k)],
	    type="subagent" if sub else "standalone",
	    subagent=SubagentInfo(model=sub.model, tools=list(sub.tools))
	    if sub else None,
	    project=_project_info(projects.get(record.id)),
	    connections=sorted(n for n in neighbours if n in known_ids),
	)


def merge_agents(
    records: Sequence[AgentRecord],
    subagents: Mapping[str, SubagentConfig],
    projects: Mapping[str, ProjectHighlight],
    reference: ReferenceData,
) -> list[MergedAgent]:
	"""
	Merge all catalog records in catalog order.

	Connections to ids that are not catalog agents stay in the index but
	are left out of ``MergedAgent.connections``; they are logged once.

	Parameters:
		records: Catalog records.
		subagents: Subagent profiles keyed by name.
		projects: Portfolio projects keyed by id.
		reference: Translation table and architecture map.

	Returns:
		Merged agents, one per record.
	"""
	index = build_connection_index(reference.architecture.connections)
	known_ids = {r.id for r in records}
	dangling = sorted(set(index) - known_ids)
	if dangling:
		logger.info("connections reference unknown agents: %s",
		            ", ".join(dangling))
	return [
	    merge_agent(r, subagents, projects, reference.translations, index,
	                known_ids) for r in records
	]


def build_categories(agents: Sequence[MergedAgent]) -> list[CategorySummary]:
	"""
	Count agents per category in first-appearance order.

	Parameters:
		agents: Merged agents.

	Returns:
		One summary per distinct category.
	"""
	counts: dict[str, int] = {}
	for a in agents:
		counts[a.category] = counts.get(a.category, 0) + 1
	return [
	    CategorySummary(id=name.lower(), name=name, icon=category_icon(name),
	                    count=count) for name, count in counts.items()
	]


def build_deploy_targets(agents: Sequence[MergedAgent]) -> list[str]:
	"""Return the sorted distinct canonical deploy targets."""
	return sorted({a.deploy for a in agents})


def utc_timestamp(now: datetime | None = None) -> str:
	"""
	Format a timestamp as ISO-8601 UTC with millisecond precision.

	Parameters:
		now: Time to format; defaults to the current time.

	Returns:
		Timestamp such as ``2025-01-31T12:00:00.000Z``.
	"""
	now = now or datetime.now(timezone.utc)
	stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
	return stamp.replace("+00:00", "Z")


def build_document(
    records: Sequence[AgentRecord],
    subagents: Mapping[str, SubagentConfig],
    projects: Mapping[str, ProjectHighlight],
    reference: ReferenceData,
    generated_at: datetime | None = None,
) -> CatalogDocument:
	"""
	Build the complete catalog document.

	Parameters:
		records: Catalog records.
		subagents: Subagent profiles keyed by name.
		projects: Portfolio projects keyed by id.
		reference: Translation table and architecture map.
		generated_at: Build time; defaults to now.

	Returns:
		CatalogDocument with agents and aggregates.
	"""
	agents = merge_agents(records, subagents, projects, reference)
	categories = build_categories(agents)
	deploy_targets = build_deploy_targets(agents)
	counts = Counts(
	    agents=len(agents),
	    subagents=sum(1 for a in agents if a.type == "subagent"),
	    projects=sum(1 for a in agents if a.project is not None),
	    categories=len(categories),
	    deploy_targets=len(deploy_targets),
	)
	return CatalogDocument(
	    meta=Meta(generated_at=utc_timestamp(generated_at), counts=counts),
	    categories=categories,
	    deploy_targets=deploy_targets,
	    agents=agents,
	)


__all__ = [
    "build_connection_index",
    "merge_agent",
    "merge_agents",
    "build_categories",
    "build_deploy_targets",
    "utc_timestamp",
    "build_document",
]
