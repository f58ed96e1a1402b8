import json

import pytest

from agent_portfolio.loaders.reference import (
    load_architecture_map,
    load_reference_data,
    load_translations,
)


def test_load_translations(tmp_path):
	p = tmp_path / "t.json"
	p.write_text(json.dumps({"a": "Alpha"}), encoding="utf-8")
	assert load_translations(p) == {"a": "Alpha"}


def test_load_translations_missing(tmp_path):
	with pytest.raises(FileNotFoundError, match="translation table"):
		load_translations(tmp_path / "t.json")


def test_load_translations_malformed_json(tmp_path):
	p = tmp_path / "t.json"
	p.write_text("{not json", encoding="utf-8")
	with pytest.raises(ValueError, match="not valid JSON"):
		load_translations(p)


def test_load_translations_wrong_shape(tmp_path):
	p = tmp_path / "t.json"
	p.write_text(json.dumps(["a", "b"]), encoding="utf-8")
	with pytest.raises(ValueError, match="must map ids to strings"):
		load_translations(p)


def test_load_architecture_map(tmp_path):
	p = tmp_path / "arch.json"
	p.write_text(json.dumps({"connections": [{"from": "a", "to": ["b"]}]}),
	             encoding="utf-8")
	arch = load_architecture_map(p)
	assert arch.connections[0].source == "a"
	assert arch.connections[0].to == ["b"]


def test_load_architecture_map_without_connections(tmp_path):
	p = tmp_path / "arch.json"
	p.write_text(json.dumps({"edges": []}), encoding="utf-8")
	with pytest.raises(ValueError, match="connections"):
		load_architecture_map(p)


def test_load_architecture_map_bad_edge(tmp_path):
	p = tmp_path / "arch.json"
	p.write_text(json.dumps({"connections": [{"to": ["b"]}]}),
	             encoding="utf-8")
	with pytest.raises(ValueError, match="malformed"):
		load_architecture_map(p)


def test_load_reference_data_missing_map(tmp_path):
	t = tmp_path / "t.json"
	t.write_text("{}", encoding="utf-8")
	with pytest.raises(FileNotFoundError, match="architecture map"):
		load_reference_data(t, tmp_path / "arch.json")


def test_bundled_reference_data_loads():
	from agent_portfolio.utils.paths import resolve_asset_path

	ref = load_reference_data(
	    resolve_asset_path("data/translations.json"),
	    resolve_asset_path("data/architecture-map.json"))
	assert ref.translations
	assert ref.architecture.connections
