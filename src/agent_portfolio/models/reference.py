"""
Reference data models.

Defines the connection edge list and the bundle of lookup tables the
reconciler consumes alongside the extracted sources.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Connection(BaseModel):
	"""A directed edge from one agent to one or more others."""

	model_config = ConfigDict(populate_by_name=True)

	source: str = Field(alias="from", description="Edge origin id")
	to: list[str] = Field(default_factory=list, description="Edge targets")


class ArchitectureMap(BaseModel):
	"""Connection edge list as stored in the architecture map file."""

	connections: list[Connection] = Field(default_factory=list)


class ReferenceData(BaseModel):
	"""Static lookup tables used only while merging."""

	translations: dict[str, str] = Field(default_factory=dict)
	architecture: ArchitectureMap = Field(default_factory=ArchitectureMap)


__all__ = ["Connection", "ArchitectureMap", "ReferenceData"]
