"""User interface components.

This subpackage provides output rendering for the build artifacts
and terminal views of a built catalog.

Key modules:
    - reporting: Data document and module rendering and persistence
    - console: Rich-based agent listing and detail views
"""

from agent_portfolio.ui.reporting import (
    render_data_json,
    render_data_module,
    write_outputs,
    format_summary,
)
from agent_portfolio.ui.console import (
    build_agent_table,
    build_agent_detail,
    print_agents,
    print_agent_detail,
)

__all__ = [
    "render_data_json",
    "render_data_module",
    "write_outputs",
    "format_summary",
    "build_agent_table",
    "build_agent_detail",
    "print_agents",
    "print_agent_detail",
]
