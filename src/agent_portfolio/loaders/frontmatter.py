"""
YAML frontmatter parsing utilities.

Provides shared functions for extracting the ``---`` delimited header
from markdown files, used by the subagent loader.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

HEADER_LINE_RE = re.compile(r"^([A-Za-z_][\w-]*):[ \t]*(.*)$")


def parse_header_lines(text: str) -> dict[str, Any]:
	"""
	Parse a header as flat ``key: value`` lines.

	Used when the header is not valid YAML, which is common for agent
	descriptions that embed colons or example markup. Indented and
	non-matching lines are ignored; the first occurrence of a key wins.

	Parameters:
		text: Header text without delimiters.

	Returns:
		Dict of raw string values.
	"""
	meta: dict[str, Any] = {}
	for ln in text.splitlines():
		m = HEADER_LINE_RE.match(ln)
		if m and m.group(1) not in meta:
			meta[m.group(1)] = m.group(2).strip()
	return meta


def split_frontmatter(text: str) -> tuple[dict[str, Any], str] | None:
	"""
	Split YAML frontmatter from markdown body.

	Extracts the block between `---` delimiters at the start of the
	document and returns it along with the remaining body.

	Parameters:
		text: The full markdown file content.

	Returns:
		Tuple of (frontmatter dict, body text), or None when the document
		has no delimited header.
	"""
	lines = text.splitlines()

	# Need at least 3 lines: ---, content, ---
	if len(lines) < 3 or lines[0].strip() != "---":
		return None

	# Find closing delimiter
	end_idx = -1
	for i, ln in enumerate(lines[1:], start=1):
		if ln.strip() == "---":
			end_idx = i
			break

	if end_idx < 0:
		return None

	fm_text = "\n".join(lines[1:end_idx])
	body = "\n".join(lines[end_idx + 1:])

	try:
		meta = yaml.safe_load(fm_text)
	except yaml.YAMLError:
		meta = None
	if not isinstance(meta, dict):
		meta = parse_header_lines(fm_text)

	return meta, body.lstrip("\n")


__all__ = ["split_frontmatter", "parse_header_lines"]
