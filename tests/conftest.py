import json

import pytest

CATALOG_JS = """\
export const AGENTS = [
  { id: 'orchestrator', name: 'Orchestrator', category: 'Orchestration', desc: '명령 라우팅', deploy: 'Railway',
    keywords: ['route', '라우팅', 'telegram'],
    usage: ['/run &lt;agent&gt;', '/status'] },
  { id: 'news-digest', name: 'News Digest', category: 'Content', desc: 'daily digest', deploy: 'Render + GitHub Pages',
    keywords: ['news'] },
  { id: 'deploy-watch', name: 'Deploy Watch', category: 'Infrastructure', desc: 'watch deploys', deploy: 'WSL systemd' },
  { id: 'ledger', name: 'Ledger', category: 'Finance', desc: 'budget tracker' },
  { id: 'scratch', name: 'Scratch', category: 'Experimental', desc: 'toy', deploy: 'Fly.io' },
];
"""

PORTFOLIO_YML = """\
projects:
  - id: news-digest
    title: News Digest Bot
    oneliner: Morning news in one message
    in_master: true
    highlights:
      - Summarizes 40 feeds
      - Runs on a cron
    stack:
      기술: [Python, Telegram API]
  - id: ledger
    title: Ledger
    oneliner: Personal finance
    기술: [Node.js]
"""

ORCHESTRATOR_MD = """---
name: orchestrator
description: Routes work
tools: Read, Bash, Grep
model: opus
---
Body
"""

NEWS_MD = """---
name: news-digest
---
No model or tools.
"""

NO_HEADER_MD = "# Just notes\n\nname: ledger\n"


@pytest.fixture
def sources(tmp_path):
	"""Write a complete set of build inputs and return their paths."""
	catalog = tmp_path / "agent-catalog.js"
	catalog.write_text(CATALOG_JS, encoding="utf-8")

	agents_dir = tmp_path / "agents"
	agents_dir.mkdir()
	(agents_dir / "orchestrator.md").write_text(ORCHESTRATOR_MD,
	                                            encoding="utf-8")
	(agents_dir / "news-digest.md").write_text(NEWS_MD, encoding="utf-8")
	(agents_dir / "notes.md").write_text(NO_HEADER_MD, encoding="utf-8")

	portfolio = tmp_path / "catalog.yml"
	portfolio.write_text(PORTFOLIO_YML, encoding="utf-8")

	translations = tmp_path / "translations.json"
	translations.write_text(
	    json.dumps({"orchestrator": "Routes Telegram commands"}),
	    encoding="utf-8")

	arch = tmp_path / "architecture-map.json"
	arch.write_text(
	    json.dumps({
	        "connections": [
	            {"from": "orchestrator", "to": ["news-digest", "deploy-watch"]},
	            {"from": "deploy-watch", "to": ["ghost"]},
	        ]
	    }),
	    encoding="utf-8")

	return {
	    "catalog": catalog,
	    "agents_dir": agents_dir,
	    "portfolio": portfolio,
	    "translations": translations,
	    "architecture_map": arch,
	    "out_dir": tmp_path / "public",
	}
