"""Template references used by the next-gen variant.

The rendering engine resolves these keys to template bodies.
"""

TEMPLATE_OVERRIDES = {
    "BASE": "next_gen/base",
    "RULES": "next_gen/rules",
    "TOOL_USE": "next_gen/tool_use",
    "OBJECTIVE": "next_gen/objective",
    "ACT_VS_PLAN": "next_gen/act_vs_plan",
    "FEEDBACK": "next_gen/feedback",
}
