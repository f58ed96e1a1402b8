"""
Text scraping utilities.

Provides small helpers shared by the source extractors: reading quoted
string lists out of object-literal arrays, splitting comma lists,
extracting bullets and ``key: value`` lines, and unescaping the HTML
entities used for placeholder syntax.
"""

from __future__ import annotations

import re
from typing import List, Optional

QUOTED_RE = re.compile(r"'([^']+)'")
BULLET_RE = re.compile(r"- (.+)")
ENTITY_MAP = {"&lt;": "<", "&gt;": ">"}


def unescape_angle_brackets(text: str) -> str:
	"""
	Replace ``&lt;``/``&gt;`` with literal angle brackets.

	Only these two entities are touched; anything else stays raw.

	Parameters:
		text: Input text.

	Returns:
		Text with angle bracket entities unescaped.
	"""
	for entity, char in ENTITY_MAP.items():
		text = text.replace(entity, char)
	return text


def extract_quoted(fragment: str) -> List[str]:
	"""
	Extract non-empty single-quoted strings in order.

	Parameters:
		fragment: Source text such as the inside of ``[...]``.

	Returns:
		List of the quoted values without quotes.
	"""
	return QUOTED_RE.findall(fragment)


def split_csv(value: str) -> List[str]:
	"""
	Split a comma-separated value into trimmed, non-empty items.

	Parameters:
		value: Comma-separated text.

	Returns:
		List of trimmed items.
	"""
	return [p.strip() for p in value.split(",") if p.strip()]


def extract_field(block: str, key: str) -> Optional[str]:
	"""
	Return the trimmed value of the first ``key: value`` line in a block.

	Parameters:
		block: Text block to search.
		key: Field name without the colon.

	Returns:
		The value, or None when the key is absent or its value is empty.
	"""
	m = re.search(rf"^[ \t]*{re.escape(key)}:[ \t]*(.+)", block, re.M)
	if not m:
		return None
	return m.group(1).strip() or None


def extract_bullets(section: str) -> List[str]:
	"""
	Extract ``- item`` bullet texts from a section.

	Parameters:
		section: Text holding one bullet per line.

	Returns:
		List of bullet item texts without the marker.
	"""
	return [m.group(1) for m in BULLET_RE.finditer(section)]


__all__ = [
    "unescape_angle_brackets",
    "extract_quoted",
    "split_csv",
    "extract_field",
    "extract_bullets",
]
