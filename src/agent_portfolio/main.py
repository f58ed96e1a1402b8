from __future__ import annotations

import sys

import typer
from typer.main import get_command

from agent_portfolio.core.pipeline import run_build
from agent_portfolio.core.query import (
    ALL_CATEGORIES,
    filter_agents,
    find_agent,
    load_document,
)
from agent_portfolio.models.build_params import BuildParams
from agent_portfolio.models.config import Config, load_env
from agent_portfolio.ui.console import print_agent_detail, print_agents
from agent_portfolio.ui.reporting import format_summary
from agent_portfolio.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=False)


def _fail(exc: Exception) -> None:
	typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
	raise typer.Exit(code=1)


def _setup() -> Config:
	load_env()
	config = Config()
	configure_logging(config.log_level)
	return config


@cli.callback()
def root() -> None:
	"""
	Root callback for the agent-portfolio CLI.

	Builds and browses the merged agent catalog.
	"""
	return None


def build_impl(
    catalog: str | None = None,
    agents_dir: str | None = None,
    portfolio: str | None = None,
    translations: str | None = None,
    architecture_map: str | None = None,
    out_dir: str | None = None,
) -> None:
	"""
	Merge the three sources and write the data document and module.

	Parameters:
		catalog: Override for the agent catalog path.
		agents_dir: Override for the subagent directory.
		portfolio: Override for the portfolio catalog path.
		translations: Override for the translation table path.
		architecture_map: Override for the architecture map path.
		out_dir: Override for the output directory.
	"""
	try:
		config = _setup()
		params = BuildParams(
		    catalog=catalog,
		    agents_dir=agents_dir,
		    portfolio=portfolio,
		    translations=translations,
		    architecture_map=architecture_map,
		    out_dir=out_dir,
		)
		config.apply_overrides(params)
		result = run_build(config)
	except (FileNotFoundError, ValueError) as exc:
		_fail(exc)
		return
	for line in format_summary(result.document):
		typer.echo(line)


@cli.command()
def build(
    catalog: str = typer.Option(None, "--catalog",
                                help="Agent catalog source file"),
    agents_dir: str = typer.Option(None, "--agents-dir",
                                   help="Subagent markdown directory"),
    portfolio: str = typer.Option(None, "--portfolio",
                                  help="Portfolio project catalog"),
    translations: str = typer.Option(None, "--translations",
                                     help="Translation table JSON"),
    architecture_map: str = typer.Option(None, "--architecture-map",
                                         help="Connection edge list JSON"),
    out_dir: str = typer.Option(None, "--out-dir",
                                help="Output directory"),
) -> None:
	"""
	Build agents.json and data.js from the configured sources.
	"""
	build_impl(catalog, agents_dir, portfolio, translations,
	           architecture_map, out_dir)


def _data_path(data: str | None) -> str:
	if data:
		return data
	return str(Config().json_output_path)


@cli.command("list")
def list_agents(
    category: str = typer.Option(ALL_CATEGORIES, "--category",
                                 help="Category name or 'all'"),
    deploy: str = typer.Option(None, "--deploy",
                               help="Canonical deploy target"),
    search: str = typer.Option("", "--search", help="Free-text search"),
    data: str = typer.Option(None, "--data", help="Built agents.json"),
) -> None:
	"""
	List agents from a built catalog, optionally filtered.
	"""
	load_env()
	try:
		document = load_document(_data_path(data))
	except (FileNotFoundError, ValueError) as exc:
		_fail(exc)
		return
	print_agents(
	    filter_agents(document.agents, category=category, deploy=deploy,
	                  search=search))


@cli.command()
def show(
    agent_id: str,
    data: str = typer.Option(None, "--data", help="Built agents.json"),
) -> None:
	"""
	Show the details of one agent from a built catalog.
	"""
	load_env()
	try:
		document = load_document(_data_path(data))
	except (FileNotFoundError, ValueError) as exc:
		_fail(exc)
		return
	agent = find_agent(document.agents, agent_id)
	if agent is None:
		_fail(LookupError(f"unknown agent id: {agent_id}"))
		return
	print_agent_detail(agent, document.agents)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `build` when appropriate.

	Allows calling 'agent-portfolio' or 'agent-portfolio --out-dir x'
	without explicitly specifying the 'build' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	if not args or (args[0].startswith("-") and
	                args[0] not in ("--help", "-h")):
		args = ["build"] + args
	return _click_app.main(
	    args=args,
	    prog_name="agent-portfolio",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
