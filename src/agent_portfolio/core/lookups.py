"""
Fixed lookup tables used while merging.
"""

from __future__ import annotations

import re

CATEGORY_ICONS: dict[str, str] = {
    "Production": "🏭",
    "Infrastructure": "🔧",
    "Content": "📝",
    "Development": "💻",
    "Business": "💼",
    "Finance": "💰",
    "Analytics": "📊",
    "Learning": "📚",
    "Orchestration": "🔗",
}
FALLBACK_ICON = "📦"

DEPLOY_NORMALIZE: dict[str, str] = {
    "Railway": "Railway",
    "Render + GitHub Pages": "Render",
    "Render": "Render",
    "Cloudflare Worker": "Cloudflare",
    "WSL systemd": "WSL",
    "로컬": "Local",
    "Local": "Local",
}

# Hangul compatibility jamo (U+3131) up to U+D79D, CJK included.
NON_LATIN_RE = re.compile("[\u3131-\ud79d]")


def category_icon(category: str) -> str:
	return CATEGORY_ICONS.get(category, FALLBACK_ICON)


def normalize_deploy(raw: str) -> str:
	"""Map a raw deploy string to its canonical name, else pass it through."""
	return DEPLOY_NORMALIZE.get(raw) or raw


def is_latin_keyword(keyword: str) -> bool:
	return NON_LATIN_RE.search(keyword) is None


__all__ = [
    "CATEGORY_ICONS",
    "FALLBACK_ICON",
    "DEPLOY_NORMALIZE",
    "category_icon",
    "normalize_deploy",
    "is_latin_keyword",
]
