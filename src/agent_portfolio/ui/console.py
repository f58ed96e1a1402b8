"""
Terminal views of a built catalog.

Provides Rich tables and panels for listing agents and showing one
agent's details, the command-line counterpart of the catalog page.
"""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_portfolio.core.query import resolve_connections
from agent_portfolio.models.catalog import MergedAgent

_DESC_WIDTH = 60


def _truncate(text: str, width: int = _DESC_WIDTH) -> str:
	return text[:width] + "..." if len(text) > width else text


def build_agent_table(agents: Sequence[MergedAgent]) -> Table:
	"""Build the agent listing table."""
	table = Table(box=box.ROUNDED, expand=True, show_header=True)
	table.add_column("Agent", style="bold")
	table.add_column("Category")
	table.add_column("Deploy", style="cyan")
	table.add_column("Type")
	table.add_column("Description", style="dim")
	for a in agents:
		kind = Text(a.type,
		            style="green" if a.type == "subagent" else "white")
		if a.project and a.project.in_master:
			kind.append(" ★", style="yellow")
		label = Text(a.name, style="bold")
		label.append(f"\n{a.id}", style="dim")
		table.add_row(
		    label,
		    Text(f"{a.category_icon} {a.category}"),
		    Text(a.deploy),
		    kind,
		    Text(_truncate(a.description)),
		)
	return table


def build_agent_detail(agent: MergedAgent,
                       agents: Sequence[MergedAgent]) -> Panel:
	"""Build the detail panel for a single agent."""
	text = Text()
	text.append(f"{agent.category_icon} {agent.category}", style="magenta")
	text.append(f"  ·  {agent.deploy}  ·  {agent.type}\n\n", style="cyan")
	text.append(f"{agent.description}\n")

	if agent.usage:
		text.append("\nUsage\n", style="bold")
		for u in agent.usage:
			text.append(f"  {u}\n", style="green")
	if agent.keywords:
		text.append("\nKeywords: ", style="bold")
		text.append(", ".join(agent.keywords) + "\n", style="dim")
	if agent.subagent:
		text.append("\nSubagent\n", style="bold")
		text.append(f"  model: {agent.subagent.model}\n")
		if agent.subagent.tools:
			text.append(f"  tools: {', '.join(agent.subagent.tools)}\n")
	if agent.project:
		proj = agent.project
		text.append("\nProject", style="bold")
		if proj.in_master:
			text.append(" ★", style="yellow")
		text.append("\n")
		if proj.title:
			text.append(f"  {proj.title}\n", style="bold")
		if proj.oneliner:
			text.append(f"  {proj.oneliner}\n", style="italic")
		for h in proj.highlights:
			text.append(f"  • {h}\n")
		if proj.tags:
			text.append(f"  tags: {', '.join(proj.tags)}\n", style="dim")
	if agent.connections:
		text.append("\nConnections\n", style="bold")
		for cid, other in resolve_connections(agents, agent):
			label = f"{other.name} ({cid})" if other else cid
			text.append(f"  → {label}\n")

	title = f"{escape(agent.name)} [dim]{escape(agent.id)}[/dim]"
	return Panel(Group(text), title=title, box=box.ROUNDED, expand=True)


def print_agents(agents: Sequence[MergedAgent],
                 console: Console | None = None) -> None:
	"""Print the listing table followed by a match count."""
	console = console or Console()
	console.print(build_agent_table(agents))
	console.print(f"[dim]{len(agents)} agents[/dim]")


def print_agent_detail(agent: MergedAgent, agents: Sequence[MergedAgent],
                       console: Console | None = None) -> None:
	"""Print the detail panel for one agent."""
	console = console or Console()
	console.print(build_agent_detail(agent, agents))


__all__ = [
    "build_agent_table",
    "build_agent_detail",
    "print_agents",
    "print_agent_detail",
]
