import pytest

from agent_portfolio.loaders.frontmatter import (
    parse_header_lines,
    split_frontmatter,
)
from agent_portfolio.loaders.subagents import load_subagents, parse_subagent
from agent_portfolio.models.subagent_config import SubagentConfig

from conftest import ORCHESTRATOR_MD, NEWS_MD, NO_HEADER_MD


def test_split_frontmatter():
	"""Test header extraction from markdown."""
	meta, body = split_frontmatter(ORCHESTRATOR_MD)
	assert meta["name"] == "orchestrator"
	assert meta["tools"] == "Read, Bash, Grep"
	assert body.strip() == "Body"


def test_split_frontmatter_without_header():
	assert split_frontmatter(NO_HEADER_MD) is None


def test_split_frontmatter_unclosed_header():
	assert split_frontmatter("---\nname: x\nbody\n") is None


def test_invalid_yaml_falls_back_to_lines():
	"""Descriptions with embedded colons are not valid YAML."""
	text = ("---\nname: reviewer\ndescription: Use when: reviewing code: "
	        "always\ntools: Read\n---\n")
	meta, _ = split_frontmatter(text)
	assert meta["name"] == "reviewer"
	assert meta["tools"] == "Read"


def test_parse_header_lines_first_key_wins():
	meta = parse_header_lines("name: a\n  nested: skip\nname: b")
	assert meta == {"name": "a"}


def test_parse_subagent():
	sub = parse_subagent(ORCHESTRATOR_MD)
	assert isinstance(sub, SubagentConfig)
	assert sub.name == "orchestrator"
	assert sub.model == "opus"
	assert sub.tools == ["Read", "Bash", "Grep"]


def test_parse_subagent_defaults():
	sub = parse_subagent(NEWS_MD)
	assert sub.model == "sonnet"
	assert sub.tools == []


def test_parse_subagent_yaml_list_tools():
	sub = parse_subagent("---\nname: x\ntools: [Read, Write]\n---\n")
	assert sub.tools == ["Read", "Write"]


def test_parse_subagent_without_name():
	assert parse_subagent("---\nmodel: opus\n---\nbody\n") is None


def test_parse_subagent_without_header():
	assert parse_subagent(NO_HEADER_MD) is None


def test_load_subagents(tmp_path):
	(tmp_path / "a.md").write_text(ORCHESTRATOR_MD, encoding="utf-8")
	(tmp_path / "b.md").write_text(NEWS_MD, encoding="utf-8")
	(tmp_path / "c.md").write_text(NO_HEADER_MD, encoding="utf-8")
	(tmp_path / "d.txt").write_text(ORCHESTRATOR_MD.replace(
	    "orchestrator", "ignored"), encoding="utf-8")
	subs = load_subagents(tmp_path)
	assert set(subs) == {"orchestrator", "news-digest"}


def test_load_subagents_duplicate_last_file_wins(tmp_path):
	"""Files are read in filename order; the later duplicate replaces."""
	(tmp_path / "b-second.md").write_text(
	    "---\nname: dup\nmodel: haiku\n---\n", encoding="utf-8")
	(tmp_path / "a-first.md").write_text(
	    "---\nname: dup\nmodel: opus\ntools: Read\n---\n", encoding="utf-8")
	subs = load_subagents(tmp_path)
	assert subs["dup"].model == "haiku"
	assert subs["dup"].tools == []


def test_load_subagents_missing_dir(tmp_path):
	with pytest.raises(FileNotFoundError, match="subagent directory"):
		load_subagents(tmp_path / "nope")
