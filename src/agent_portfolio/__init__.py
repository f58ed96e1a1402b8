"""
Agent Portfolio - static catalog builder for a personal agent collection.

This package merges an object-literal agent catalog, subagent markdown
profiles and a portfolio project catalog into one JSON document and an
embeddable browser module.

Main entry points:
    - agent_portfolio.main: CLI entrypoint
    - agent_portfolio.core.pipeline: run_build() for a full build
    - agent_portfolio.models.config: Config and load_env()
"""
