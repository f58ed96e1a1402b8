"""
Portfolio project model.

Defines the ProjectHighlight Pydantic model for blocks parsed from the
portfolio project catalog.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProjectHighlight(BaseModel):
	"""A portfolio project entry keyed by agent id."""

	model_config = ConfigDict(populate_by_name=True)

	id: str = Field(description="Project id (join key)")
	title: str | None = Field(default=None, description="Project title")
	oneliner: str | None = Field(default=None,
	                             description="One-line project summary")
	highlights: list[str] = Field(default_factory=list,
	                              description="Highlight bullets")
	tags: list[str] = Field(default_factory=list,
	                        description="Technology tags")
	in_master: bool = Field(default=False, alias="inMaster",
	                        description="Featured in the master portfolio")


__all__ = ["ProjectHighlight"]
