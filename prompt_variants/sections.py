"""
Section identifiers.

Closed set of keys naming the blocks of prompt content a variant can lay out.
The rendering engine resolves each key to text; here they are opaque.
"""

from enum import Enum


class SystemPromptSection(str, Enum):
    """Identifiers for system prompt sections."""
    AGENT_ROLE = "AGENT_ROLE_SECTION"
    TOOL_USE = "TOOL_USE_SECTION"
    TASK_PROGRESS = "TASK_PROGRESS_SECTION"
    MCP = "MCP_SECTION"
    EDITING_FILES = "EDITING_FILES_SECTION"
    ACT_VS_PLAN = "ACT_VS_PLAN_SECTION"
    CLI_SUBAGENTS = "CLI_SUBAGENTS_SECTION"
    CAPABILITIES = "CAPABILITIES_SECTION"
    FEEDBACK = "FEEDBACK_SECTION"
    RULES = "RULES_SECTION"
    SYSTEM_INFO = "SYSTEM_INFO_SECTION"
    OBJECTIVE = "OBJECTIVE_SECTION"
    USER_INSTRUCTIONS = "USER_INSTRUCTIONS_SECTION"
    TODO = "TODO_SECTION"
    SKILLS = "SKILLS_SECTION"


# Sections every usable layout is expected to carry
CORE_SECTIONS = (
    SystemPromptSection.AGENT_ROLE,
    SystemPromptSection.RULES,
    SystemPromptSection.SYSTEM_INFO,
)
