"""
Build parameters model.

Defines the optional path overrides accepted by the ``build`` command.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class BuildParams(BaseModel):
	"""Validated CLI overrides for a build run."""

	catalog: Optional[str] = Field(default=None,
	                               description="Catalog source override")
	agents_dir: Optional[str] = Field(default=None,
	                                  description="Subagent directory override")
	portfolio: Optional[str] = Field(default=None,
	                                 description="Portfolio catalog override")
	translations: Optional[str] = Field(
	    default=None, description="Translation table override")
	architecture_map: Optional[str] = Field(
	    default=None, description="Architecture map override")
	out_dir: Optional[str] = Field(default=None,
	                               description="Output directory override")

	@field_validator("catalog", "agents_dir", "portfolio", "translations",
	                 "architecture_map", "out_dir")
	@classmethod
	def validate_not_blank(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if not v.strip():
			raise ValueError("path overrides must not be blank")
		return v


__all__ = ["BuildParams"]
