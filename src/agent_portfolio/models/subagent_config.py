"""
Subagent configuration model.

Defines the SubagentConfig Pydantic model for profiles loaded from
markdown frontmatter.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MODEL = "sonnet"


class SubagentConfig(BaseModel):
	"""Subagent profile loaded from markdown frontmatter."""

	name: str = Field(description="Subagent name (join key)")
	model: str = Field(default=DEFAULT_MODEL, description="Model name")
	tools: list[str] = Field(default_factory=list,
	                         description="Available tools")


__all__ = ["SubagentConfig", "DEFAULT_MODEL"]
