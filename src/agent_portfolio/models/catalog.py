"""
Merged catalog document models.

Defines the output schema written to ``agents.json`` and embedded in the
``data.js`` module. Field aliases carry the camelCase names the browser
consumer reads; Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
	model_config = ConfigDict(populate_by_name=True)


class SubagentInfo(_CamelModel):
	"""Subagent settings attached to a merged agent."""

	model: str
	tools: list[str] = Field(default_factory=list)


class ProjectInfo(_CamelModel):
	"""Portfolio project details attached to a merged agent."""

	title: str | None = None
	oneliner: str | None = None
	highlights: list[str] = Field(default_factory=list)
	tags: list[str] = Field(default_factory=list)
	in_master: bool = Field(default=False, alias="inMaster")


class MergedAgent(_CamelModel):
	"""One catalog agent joined with its subagent and project data."""

	id: str
	name: str
	category: str
	category_icon: str = Field(alias="categoryIcon")
	description: str
	deploy: str
	usage: list[str] = Field(default_factory=list)
	keywords: list[str] = Field(default_factory=list)
	type: Literal["subagent", "standalone"]
	subagent: SubagentInfo | None = None
	project: ProjectInfo | None = None
	connections: list[str] = Field(default_factory=list)


class CategorySummary(_CamelModel):
	"""A category tab entry with its agent count."""

	id: str
	name: str
	icon: str
	count: int


class Counts(_CamelModel):
	"""Headline counters shown on the portfolio page."""

	agents: int = 0
	subagents: int = 0
	projects: int = 0
	categories: int = 0
	deploy_targets: int = Field(default=0, alias="deployTargets")


class Meta(_CamelModel):
	"""Build metadata."""

	generated_at: str = Field(alias="generatedAt")
	counts: Counts = Field(default_factory=Counts)


class CatalogDocument(_CamelModel):
	"""The complete merged catalog document."""

	meta: Meta
	categories: list[CategorySummary] = Field(default_factory=list)
	deploy_targets: list[str] = Field(default_factory=list,
	                                  alias="deployTargets")
	agents: list[MergedAgent] = Field(default_factory=list)

	def to_payload(self) -> dict[str, Any]:
		"""
		Return the JSON-ready dictionary using the consumer field names.

		Returns:
			Dictionary keyed by the camelCase aliases.
		"""
		return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "SubagentInfo",
    "ProjectInfo",
    "MergedAgent",
    "CategorySummary",
    "Counts",
    "Meta",
    "CatalogDocument",
]
