"""
Next-gen variant configuration.

Defines the matcher, the component and tool selectors, and the factory that
builds and validates the next-gen PromptVariant.
"""

import logging

from ...context import SystemPromptContext
from ...families import ModelFamily
from ...model_utils import (
    is_gpt5_model_family,
    is_local_model,
    is_next_gen_model_family,
    is_next_gen_model_provider,
)
from ...sections import SystemPromptSection
from ...tools import DefaultTool
from ..builder import create_variant
from ..schema import PromptVariant
from ..validator import ensure_valid
from .template import TEMPLATE_OVERRIDES


logger = logging.getLogger(__name__)


# Section explaining in-chat tool invocation, and the tool that performs it.
# Both are offered together or not at all.
INLINE_TOOL_PAIR = (SystemPromptSection.MCP, DefaultTool.MCP_USE)

COMPONENT_LAYOUT = (
    SystemPromptSection.AGENT_ROLE,
    SystemPromptSection.TOOL_USE,
    SystemPromptSection.TASK_PROGRESS,
    SystemPromptSection.MCP,
    SystemPromptSection.EDITING_FILES,
    SystemPromptSection.ACT_VS_PLAN,
    SystemPromptSection.CLI_SUBAGENTS,
    SystemPromptSection.CAPABILITIES,
    SystemPromptSection.FEEDBACK,
    SystemPromptSection.RULES,
    SystemPromptSection.SYSTEM_INFO,
    SystemPromptSection.OBJECTIVE,
    SystemPromptSection.USER_INSTRUCTIONS,
)

TOOL_LAYOUT = (
    DefaultTool.BASH,
    DefaultTool.FILE_READ,
    DefaultTool.FILE_NEW,
    DefaultTool.FILE_EDIT,
    DefaultTool.SEARCH,
    DefaultTool.LIST_FILES,
    DefaultTool.LIST_CODE_DEF,
    DefaultTool.BROWSER,
    DefaultTool.WEB_FETCH,
    DefaultTool.MCP_USE,
    DefaultTool.MCP_ACCESS,
    DefaultTool.ASK,
    DefaultTool.ATTEMPT,
    DefaultTool.NEW_TASK,
    DefaultTool.PLAN_MODE,
    DefaultTool.MCP_DOCS,
    DefaultTool.TODO,
)


def matches_next_gen(context: SystemPromptContext) -> bool:
    """Decide whether the next-gen variant applies to a context.

    Next-gen models with native tool calls disabled always match. Otherwise
    the model must be next-gen, must not be a compact prompt on a local
    model, must not be served by a native next-gen provider, and must not
    be a GPT-5 model without "chat" in its id (those use the GPT-5 variant).
    """
    provider_info = context.provider_info
    model_id = provider_info.model.id

    if is_next_gen_model_family(model_id) and not context.enable_native_tool_calls:
        return True

    return (
        not (provider_info.custom_prompt == "compact" and is_local_model(provider_info))
        and not is_next_gen_model_provider(provider_info)
        and is_next_gen_model_family(model_id)
        and not (is_gpt5_model_family(model_id) and "chat" not in model_id)
    )


def uses_inline_tools(context: SystemPromptContext) -> bool:
    """True unless the model can use native tools and the session enabled them."""
    return not (context.provider_info.model.can_use_tools and context.enable_native_tool_calls)


def select_components(context: SystemPromptContext) -> list[SystemPromptSection]:
    """Ordered sections for a context.

    The inline tool guidance section is kept only when uses_inline_tools()
    holds; every other section is always present in COMPONENT_LAYOUT order.
    """
    inline_section, _ = INLINE_TOOL_PAIR
    inline = uses_inline_tools(context)

    sections = []
    for section in COMPONENT_LAYOUT:
        if section is inline_section and not inline:
            continue
        sections.append(section)
    return sections


def select_tools(context: SystemPromptContext) -> list[DefaultTool]:
    """Ordered tools for a context, paired with select_components()."""
    _, inline_tool = INLINE_TOOL_PAIR
    inline = uses_inline_tools(context)

    tools = []
    for tool in TOOL_LAYOUT:
        if tool is inline_tool and not inline:
            continue
        tools.append(tool)
    return tools


def build_next_gen_variant(strict: bool = True) -> PromptVariant:
    """Build and validate the next-gen variant.

    Args:
        strict: Validate in strict mode.

    Returns:
        The validated PromptVariant.

    Raises:
        VariantBuildError: If required attributes are missing.
        VariantConfigurationError: If validation reports errors.
    """
    variant = (
        create_variant(ModelFamily.NEXT_GEN)
        .description("Prompt tailored to newer frontier models with smarter agentic capabilities.")
        .version(1)
        .tags("next-gen", "advanced", "production")
        .labels({
            "stable": 1,
            "production": 1,
            "advanced": 1,
        })
        .matcher(matches_next_gen)
        .template(TEMPLATE_OVERRIDES["BASE"])
        .components(select_components)
        .tools(select_tools)
        .placeholders({
            "MODEL_FAMILY": ModelFamily.NEXT_GEN.value,
        })
        .config({})
        .override_component(SystemPromptSection.RULES, template=TEMPLATE_OVERRIDES["RULES"])
        .override_component(SystemPromptSection.TOOL_USE, template=TEMPLATE_OVERRIDES["TOOL_USE"])
        .override_component(SystemPromptSection.OBJECTIVE, template=TEMPLATE_OVERRIDES["OBJECTIVE"])
        .override_component(SystemPromptSection.ACT_VS_PLAN, template=TEMPLATE_OVERRIDES["ACT_VS_PLAN"])
        .override_component(SystemPromptSection.FEEDBACK, template=TEMPLATE_OVERRIDES["FEEDBACK"])
        .build()
    )

    ensure_valid(variant, strict=strict)
    logger.debug(f"Next-gen variant ready: {variant.cache_key}")
    return variant
