from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from agent_portfolio.utils.paths import resolve_asset_path


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Build configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	catalog_file: str = Field(
	    "~/telegram-bot-agent/lib/agent-catalog.js",
	    alias="CATALOG_FILE",
	    description="Object-literal agent catalog source",
	)
	subagents_dir: str = Field(
	    "~/.claude/agents",
	    alias="SUBAGENTS_DIR",
	    description="Directory of subagent markdown files",
	)
	portfolio_file: str = Field(
	    "~/portfolio/catalog.yml",
	    alias="PORTFOLIO_FILE",
	    description="Portfolio project catalog",
	)
	translations_file: str = Field(
	    "data/translations.json",
	    alias="TRANSLATIONS_FILE",
	    description="Translated descriptions keyed by agent id",
	)
	architecture_map_file: str = Field(
	    "data/architecture-map.json",
	    alias="ARCHITECTURE_MAP_FILE",
	    description="Agent connection edge list",
	)
	output_dir: str = Field("public", alias="OUTPUT_DIR",
	                        description="Base output directory")
	data_json_path: str = Field(
	    "data/agents.json",
	    alias="DATA_JSON_PATH",
	    description="Data document path relative to output_dir",
	)
	data_module_path: str = Field(
	    "js/data.js",
	    alias="DATA_MODULE_PATH",
	    description="Embeddable module path relative to output_dir",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("data_json_path", "data_module_path")
	@classmethod
	def validate_relative(cls, v: Any) -> Any:
		if Path(str(v)).is_absolute():
			raise ValueError("output paths must be relative to output_dir")
		return v

	@property
	def catalog_path(self) -> Path:
		return Path(self.catalog_file).expanduser()

	@property
	def subagents_path(self) -> Path:
		return Path(self.subagents_dir).expanduser()

	@property
	def portfolio_path(self) -> Path:
		return Path(self.portfolio_file).expanduser()

	@property
	def translations_path(self) -> Path:
		"""Translation table path, falling back to the bundled copy."""
		return resolve_asset_path(str(Path(self.translations_file).expanduser()))

	@property
	def architecture_map_path(self) -> Path:
		"""Edge list path, falling back to the bundled copy."""
		return resolve_asset_path(
		    str(Path(self.architecture_map_file).expanduser()))

	@property
	def output_path(self) -> Path:
		"""Return output_dir as Path."""
		return Path(self.output_dir).expanduser()

	@property
	def json_output_path(self) -> Path:
		return self.output_path / self.data_json_path

	@property
	def module_output_path(self) -> Path:
		return self.output_path / self.data_module_path

	def apply_overrides(self, params: "BuildParams") -> None:
		"""Apply CLI overrides from BuildParams onto this config.

		Only non-None fields in params are applied, preserving
		environment-based defaults for anything the user didn't explicitly set.

		Parameters:
			params: Validated build parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
			("catalog", "catalog_file"),
			("agents_dir", "subagents_dir"),
			("portfolio", "portfolio_file"),
			("translations", "translations_file"),
			("architecture_map", "architecture_map_file"),
			("out_dir", "output_dir"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(params, param_field)
			if value is not None:
				setattr(self, config_field, str(value))


__all__ = ["Config", "load_env"]
