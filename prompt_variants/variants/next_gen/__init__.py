"""
Next-gen prompt variant.

Prompt layout for newer frontier models (Claude 4, Gemini 2.5, Grok 4, GPT-5
chat models) when they are not served through a native tool-calling provider.
"""

from .config import (
    INLINE_TOOL_PAIR,
    build_next_gen_variant,
    matches_next_gen,
    select_components,
    select_tools,
    uses_inline_tools,
)
from .template import TEMPLATE_OVERRIDES

__all__ = [
    "INLINE_TOOL_PAIR",
    "TEMPLATE_OVERRIDES",
    "build_next_gen_variant",
    "matches_next_gen",
    "select_components",
    "select_tools",
    "uses_inline_tools",
]
