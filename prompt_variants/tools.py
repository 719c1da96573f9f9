"""
Tool identifiers.

Closed set of names for the actions an agent can be offered. Values are the
tool names the agent sees.
"""

from enum import Enum


class DefaultTool(str, Enum):
    """Identifiers for built-in agent tools."""
    BASH = "execute_command"
    FILE_READ = "read_file"
    FILE_NEW = "write_to_file"
    FILE_EDIT = "replace_in_file"
    APPLY_PATCH = "apply_patch"
    SEARCH = "search_files"
    LIST_FILES = "list_files"
    LIST_CODE_DEF = "list_code_definition_names"
    BROWSER = "browser_action"
    WEB_FETCH = "web_fetch"
    MCP_USE = "use_mcp_tool"
    MCP_ACCESS = "access_mcp_resource"
    ASK = "ask_followup_question"
    ATTEMPT = "attempt_completion"
    NEW_TASK = "new_task"
    PLAN_MODE = "plan_mode_respond"
    MCP_DOCS = "load_mcp_documentation"
    TODO = "focus_chain"
    CONDENSE = "condense"
    SUMMARIZE_TASK = "summarize_task"
    NEW_RULE = "new_rule"
