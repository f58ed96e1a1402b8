"""
Path utilities.

Provides functions for resolving package-relative asset paths and for
checking that required input files exist before a build starts.
"""

from __future__ import annotations

from pathlib import Path


# Root of the agent_portfolio package directory.
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent


def resolve_asset_path(relative_path: str) -> Path:
	"""Resolve a path that may be relative to the package directory.

	Resolution order:
	1. If the path exists as-is (absolute or cwd-relative), return it.
	2. Otherwise, resolve against the package directory.

	This lets an installed package find the bundled reference tables
	under ``data/`` when no local copy is present.

	Parameters:
		relative_path: Path string (may be absolute, cwd-relative, or
			package-relative like ``data/translations.json``).

	Returns:
		Resolved Path to the asset.
	"""
	p = Path(relative_path)
	if p.exists() or p.is_absolute():
		return p
	return PACKAGE_DIR / relative_path


def require_file(path: Path, label: str) -> Path:
	"""
	Ensure a required input file exists.

	Parameters:
		path: The file to check.
		label: Human-readable name of the resource for the error message.

	Returns:
		The original path if it is a file.

	Raises:
		FileNotFoundError: If the path is missing or not a regular file.
	"""
	if not path.is_file():
		raise FileNotFoundError(f"{label} not found: {path}")
	return path


def require_dir(path: Path, label: str) -> Path:
	"""
	Ensure a required input directory exists.

	Parameters:
		path: The directory to check.
		label: Human-readable name of the resource for the error message.

	Returns:
		The original path if it is a directory.

	Raises:
		FileNotFoundError: If the path is missing or not a directory.
	"""
	if not path.is_dir():
		raise FileNotFoundError(f"{label} not found: {path}")
	return path


__all__ = ["resolve_asset_path", "require_file", "require_dir", "PACKAGE_DIR"]
