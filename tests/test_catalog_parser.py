import pytest

from agent_portfolio.loaders.catalog import load_catalog, parse_catalog
from agent_portfolio.models.agent_record import AgentRecord

from conftest import CATALOG_JS


def test_parse_catalog_source_order():
	records = parse_catalog(CATALOG_JS)
	assert [r.id for r in records] == [
	    "orchestrator", "news-digest", "deploy-watch", "ledger", "scratch"
	]
	assert all(isinstance(r, AgentRecord) for r in records)


def test_parse_catalog_fields():
	first = parse_catalog(CATALOG_JS)[0]
	assert first.name == "Orchestrator"
	assert first.category == "Orchestration"
	assert first.description == "명령 라우팅"
	assert first.deploy_target == "Railway"
	assert first.keywords == ["route", "라우팅", "telegram"]


def test_usage_unescapes_angle_brackets():
	first = parse_catalog(CATALOG_JS)[0]
	assert first.usage_examples == ["/run <agent>", "/status"]


def test_missing_deploy_defaults_to_local():
	ledger = [r for r in parse_catalog(CATALOG_JS) if r.id == "ledger"][0]
	assert ledger.deploy_target == "Local"


def test_empty_deploy_defaults_to_local():
	src = "{ id: 'a', name: 'A', category: 'Business', desc: 'x', deploy: '' }"
	assert parse_catalog(src)[0].deploy_target == "Local"


def test_missing_arrays_do_not_borrow_from_next_entry():
	"""An entry without keywords/usage must not pick up the next entry's."""
	records = {r.id: r for r in parse_catalog(CATALOG_JS)}
	assert records["deploy-watch"].keywords == []
	assert records["deploy-watch"].usage_examples == []
	assert records["news-digest"].keywords == ["news"]
	assert records["news-digest"].usage_examples == []


def test_malformed_block_is_skipped():
	src = """
	{ id: 'ok', name: 'Ok', category: 'Content', desc: 'fine' },
	{ id: 'broken', category: 'Content', desc: 'no name' },
	{ name: 'No Id', category: 'Content', desc: 'x' },
	"""
	assert [r.id for r in parse_catalog(src)] == ["ok"]


def test_skipped_block_does_not_lend_its_arrays():
	src = """
	{ id: 'a', name: 'A', category: 'Content', desc: 'x' },
	{ id: 'b', category: 'Content', desc: 'no name',
	  keywords: ['leak'], usage: ['/leak'] },
	"""
	records = parse_catalog(src)
	assert [r.id for r in records] == ["a"]
	assert records[0].keywords == []
	assert records[0].usage_examples == []


def test_duplicate_id_last_wins(caplog):
	src = """
	{ id: 'dup', name: 'First', category: 'Content', desc: 'one' },
	{ id: 'other', name: 'Other', category: 'Content', desc: 'x' },
	{ id: 'dup', name: 'Second', category: 'Finance', desc: 'two' },
	"""
	with caplog.at_level("WARNING"):
		records = parse_catalog(src)
	assert [r.id for r in records] == ["dup", "other"]
	assert records[0].name == "Second"
	assert "duplicate catalog id" in caplog.text


def test_empty_text():
	assert parse_catalog("") == []


def test_load_catalog(tmp_path):
	p = tmp_path / "agent-catalog.js"
	p.write_text(CATALOG_JS, encoding="utf-8")
	assert len(load_catalog(p)) == 5


def test_load_catalog_missing_file(tmp_path):
	with pytest.raises(FileNotFoundError, match="agent catalog"):
		load_catalog(tmp_path / "missing.js")
