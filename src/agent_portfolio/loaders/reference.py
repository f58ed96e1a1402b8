"""
Reference table loading utilities.

Loads the translation table and the architecture map. Unlike the source
extractors these are strict: a missing or malformed file aborts the
build.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from agent_portfolio.models.reference import ArchitectureMap, ReferenceData
from agent_portfolio.utils.paths import require_file


def _read_json(path: Path, label: str) -> Any:
	require_file(path, label)
	try:
		return json.loads(path.read_text(encoding="utf-8"))
	except json.JSONDecodeError as exc:
		raise ValueError(f"{label} is not valid JSON ({path}): {exc}") from exc


def load_translations(path: str | Path) -> dict[str, str]:
	"""
	Load translated descriptions keyed by agent id.

	Parameters:
		path: Path to the translation table JSON.

	Returns:
		Mapping of agent id to description text.

	Raises:
		FileNotFoundError: If the file is missing.
		ValueError: If the file is not a JSON object of strings.
	"""
	label = "translation table"
	data = _read_json(Path(path), label)
	if not isinstance(data, dict) or not all(
	    isinstance(v, str) for v in data.values()):
		raise ValueError(f"{label} must map ids to strings: {path}")
	return data


def load_architecture_map(path: str | Path) -> ArchitectureMap:
	"""
	Load the connection edge list.

	Parameters:
		path: Path to the architecture map JSON.

	Returns:
		Parsed ArchitectureMap.

	Raises:
		FileNotFoundError: If the file is missing.
		ValueError: If the file does not hold a ``connections`` list of
			``{from, to}`` edges.
	"""
	label = "architecture map"
	data = _read_json(Path(path), label)
	if not isinstance(data, dict) or "connections" not in data:
		raise ValueError(f"{label} must contain a 'connections' list: {path}")
	try:
		return ArchitectureMap.model_validate(data)
	except ValidationError as exc:
		raise ValueError(f"{label} is malformed ({path}): {exc}") from exc


def load_reference_data(translations_path: str | Path,
                        architecture_map_path: str | Path) -> ReferenceData:
	"""
	Load both reference tables.

	Parameters:
		translations_path: Path to the translation table.
		architecture_map_path: Path to the architecture map.

	Returns:
		ReferenceData bundling both tables.
	"""
	return ReferenceData(
	    translations=load_translations(translations_path),
	    architecture=load_architecture_map(architecture_map_path),
	)


__all__ = [
    "load_translations",
    "load_architecture_map",
    "load_reference_data",
]
