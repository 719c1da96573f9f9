"""
Debug view of variant selection.

Renders which variant a registry picks for a context, and what it selects,
as a rich Table.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from .context import SystemPromptContext
from .registry import VariantRegistry


def describe_selection(registry: VariantRegistry, context: SystemPromptContext) -> Table:
    """Build a table describing the variant selected for a context.

    Args:
        registry: An initialized VariantRegistry.
        context: The context to evaluate.

    Returns:
        A two-column Table (field, value). If no variant matches, the table
        has a single "Variant" row reading "none".
    """
    table = Table(
        title=f"Prompt variant for {context.provider_id}/{context.model_id}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    variant = registry.select(context)
    if variant is None:
        table.add_row("Variant", "none")
        return table

    sections = variant.get_components(context)
    overrides = [s.name for s in sections if variant.get_override(s) is not None]

    table.add_row("Variant", variant.cache_key)
    table.add_row("Description", variant.description)
    table.add_row("Base template", variant.base_template)
    table.add_row("Sections", "\n".join(s.name for s in sections))
    table.add_row("Tools", "\n".join(t.value for t in variant.get_tools(context)))
    table.add_row("Overrides", ", ".join(overrides) or "-")
    return table


def print_selection(
    registry: VariantRegistry,
    context: SystemPromptContext,
    console: Optional[Console] = None,
) -> None:
    """Print describe_selection() to a console (stdout by default)."""
    (console or Console()).print(describe_selection(registry, context))
