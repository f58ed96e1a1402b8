"""
Build orchestrator.

Runs the extract, merge and emit stages in order. Every input is read
and the document is fully built before anything is written, so a
missing or malformed input leaves existing outputs untouched.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from agent_portfolio.core.merge import build_document
from agent_portfolio.loaders.catalog import load_catalog
from agent_portfolio.loaders.projects import load_projects
from agent_portfolio.loaders.reference import load_reference_data
from agent_portfolio.loaders.subagents import load_subagents
from agent_portfolio.models.catalog import CatalogDocument
from agent_portfolio.models.config import Config
from agent_portfolio.ui.reporting import write_outputs
from agent_portfolio.utils.logging import get_logger

logger = get_logger(__name__)


class BuildResult(BaseModel):
	"""Outcome of a build run."""

	document: CatalogDocument
	json_path: str
	module_path: str


def assemble(config: Config,
             generated_at: datetime | None = None) -> CatalogDocument:
	"""
	Read every input and build the catalog document in memory.

	Reference tables are loaded first so a missing table fails before
	the sources are scanned.

	Parameters:
		config: Build configuration.
		generated_at: Build time; defaults to now.

	Returns:
		The merged CatalogDocument.

	Raises:
		FileNotFoundError: If any input is missing.
		ValueError: If a reference table is malformed.
	"""
	reference = load_reference_data(config.translations_path,
	                                config.architecture_map_path)
	records = load_catalog(config.catalog_path)
	logger.info("catalog: %d agents from %s", len(records),
	            config.catalog_path)
	subagents = load_subagents(config.subagents_path)
	logger.info("subagents: %d profiles from %s", len(subagents),
	            config.subagents_path)
	projects = load_projects(config.portfolio_path)
	logger.info("portfolio: %d projects from %s", len(projects),
	            config.portfolio_path)
	return build_document(records, subagents, projects, reference,
	                      generated_at=generated_at)


def run_build(config: Config,
              generated_at: datetime | None = None) -> BuildResult:
	"""
	Build the catalog and write both output artifacts.

	Parameters:
		config: Build configuration.
		generated_at: Build time; defaults to now.

	Returns:
		BuildResult with the document and the written paths.
	"""
	document = assemble(config, generated_at=generated_at)
	json_path = config.json_output_path
	module_path = config.module_output_path
	write_outputs(document, json_path, module_path)
	logger.info("wrote %s and %s", json_path, module_path)
	return BuildResult(document=document, json_path=str(json_path),
	                   module_path=str(module_path))


__all__ = ["BuildResult", "assemble", "run_build"]
