"""
Catalog record model.

Defines the AgentRecord Pydantic model for entries scraped from the
object-literal agent catalog.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DEPLOY = "Local"


class AgentRecord(BaseModel):
	"""A single agent entry parsed from the catalog source."""

	model_config = ConfigDict(frozen=True)

	id: str = Field(description="Stable agent identifier")
	name: str = Field(description="Display name")
	category: str = Field(description="Catalog category")
	description: str = Field(default="", description="Raw catalog description")
	deploy_target: str = Field(default=DEFAULT_DEPLOY,
	                           description="Raw deploy target")
	usage_examples: list[str] = Field(default_factory=list,
	                                  description="Usage examples")
	keywords: list[str] = Field(default_factory=list,
	                            description="Search keywords")


__all__ = ["AgentRecord", "DEFAULT_DEPLOY"]
