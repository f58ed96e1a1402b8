"""
Catalog rendering and persistence utilities.

Serializes a CatalogDocument to the pure data document and to the
embeddable browser module, and formats the build summary.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from agent_portfolio.models.catalog import CatalogDocument

MODULE_HEADER = "// Auto-generated by agent-portfolio build - do not edit"
MODULE_CONSTANT = "DATA"


def render_data_json(payload: dict[str, Any]) -> str:
	"""
	Render the payload as indented JSON.

	Parameters:
		payload: Output of ``CatalogDocument.to_payload()``.

	Returns:
		JSON text with two-space indentation.
	"""
	return json.dumps(payload, indent=2, ensure_ascii=False)


def render_data_module(payload: dict[str, Any]) -> str:
	"""
	Render the payload as an ES module exporting a constant.

	Parameters:
		payload: Output of ``CatalogDocument.to_payload()``.

	Returns:
		Module source with a generated-file header.
	"""
	body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
	return f"{MODULE_HEADER}\nexport const {MODULE_CONSTANT} = {body};\n"


def save_text(path: Path | str, content: str) -> None:
	"""
	Persist text content to disk, ensuring parent directories.

	Parameters:
		path: Destination file path.
		content: Text to write.
	"""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(content, encoding="utf-8")


def _temp_path(path: Path) -> Path:
	return path.with_name(f".{path.name}.tmp")


def write_outputs(document: CatalogDocument, json_path: Path | str,
                  module_path: Path | str) -> None:
	"""
	Write both artifacts from a single serialization of the document.

	Each artifact is first written next to its destination and both are
	moved into place only once every write has succeeded, so a failure
	leaves any previous pair of files untouched.

	Parameters:
		document: The merged catalog.
		json_path: Destination of the data document.
		module_path: Destination of the embeddable module.
	"""
	payload = document.to_payload()
	outputs = [
	    (Path(json_path), render_data_json(payload)),
	    (Path(module_path), render_data_module(payload)),
	]
	staged: list[tuple[Path, Path]] = []
	try:
		for path, content in outputs:
			tmp = _temp_path(path)
			save_text(tmp, content)
			staged.append((tmp, path))
	except OSError:
		for tmp, _ in staged:
			tmp.unlink(missing_ok=True)
		raise
	for tmp, path in staged:
		os.replace(tmp, path)


def format_summary(document: CatalogDocument) -> list[str]:
	"""
	Format the human-readable build summary.

	Parameters:
		document: The merged catalog.

	Returns:
		Summary lines: counts, then deploy targets.
	"""
	c = document.meta.counts
	return [
	    f"Built: {c.agents} agents, {c.categories} categories, "
	    f"{c.subagents} subagents, {c.projects} projects",
	    f"Deploy targets: {', '.join(document.deploy_targets)}",
	]


__all__ = [
    "MODULE_HEADER",
    "render_data_json",
    "render_data_module",
    "save_text",
    "write_outputs",
    "format_summary",
]
