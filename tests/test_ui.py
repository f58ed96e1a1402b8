from rich.console import Console

from agent_portfolio.core.merge import build_document
from agent_portfolio.models.agent_record import AgentRecord
from agent_portfolio.models.project_highlight import ProjectHighlight
from agent_portfolio.models.reference import (
    ArchitectureMap,
    Connection,
    ReferenceData,
)
from agent_portfolio.models.subagent_config import SubagentConfig
from agent_portfolio.ui.console import (
    build_agent_detail,
    build_agent_table,
    print_agent_detail,
    print_agents,
)


def _agents():
	records = [
	    AgentRecord(id="news", name="News [beta]", category="Content",
	                description="Daily headlines", usage_examples=["/news <n>"],
	                keywords=["rss"]),
	    AgentRecord(id="ledger", name="Ledger", category="Finance",
	                description="Budget tracker"),
	]
	subs = {"news": SubagentConfig(name="news", model="haiku", tools=["Read"])}
	projects = {
	    "news":
	        ProjectHighlight(id="news", title="News Bot", oneliner="Headlines",
	                         highlights=["40 feeds"], tags=["Python"],
	                         in_master=True)
	}
	ref = ReferenceData(architecture=ArchitectureMap(connections=[
	    Connection.model_validate({"from": "news", "to": ["ledger"]})
	]))
	return build_document(records, subs, projects, ref).agents


def _render(renderable) -> str:
	console = Console(width=160, record=True)
	console.print(renderable)
	return console.export_text()


def test_agent_table_rows():
	out = _render(build_agent_table(_agents()))
	assert "News [beta]" in out
	assert "Ledger" in out
	assert "subagent" in out
	assert "★" in out


def test_agent_detail_sections():
	agents = _agents()
	out = _render(build_agent_detail(agents[0], agents))
	assert "/news <n>" in out
	assert "haiku" in out
	assert "News Bot" in out
	assert "40 feeds" in out
	assert "Ledger (ledger)" in out


def test_print_helpers_use_given_console():
	agents = _agents()
	console = Console(width=160, record=True)
	print_agents(agents, console=console)
	print_agent_detail(agents[1], agents, console=console)
	text = console.export_text()
	assert "2 agents" in text
	assert "News [beta] (news)" in text
