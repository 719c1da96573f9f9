"""
Variant validation.

Inspects a built PromptVariant for structural consistency. Problems that make
the variant unusable are reported as errors; advisories are reported as
warnings. Selectors and the matcher are exercised against a set of probe
contexts so that duplicate or unknown identifiers surface at load time
instead of per request.
"""

import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from ..context import ModelInfo, ProviderInfo, SystemPromptContext
from ..sections import CORE_SECTIONS, SystemPromptSection
from ..tools import DefaultTool
from .schema import ComponentOverride, PromptVariant, VariantConfigurationError


logger = logging.getLogger(__name__)


# (provider_id, model_id) pairs covering generic, next-gen and local hosting
_PROBE_MODELS = (
    ("openai", "gpt-4o"),
    ("anthropic", "claude-sonnet-4"),
    ("ollama", "qwen3-coder"),
)


@dataclass
class ValidationResult:
    """Outcome of validating a variant.

    Attributes:
        is_valid: True when no errors were found.
        errors: Problems that make the variant unusable.
        warnings: Advisories that do not block availability.
    """
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def default_probe_contexts() -> list[SystemPromptContext]:
    """Build the grid of contexts used to exercise selectors.

    Covers every combination of native tool capability, the session's native
    tool flag and the provider kinds in _PROBE_MODELS.
    """
    contexts = []
    for (provider_id, model_id), can_use_tools, native in itertools.product(
        _PROBE_MODELS, (False, True), (False, True)
    ):
        contexts.append(
            SystemPromptContext(
                provider_info=ProviderInfo(
                    provider_id=provider_id,
                    model=ModelInfo(id=model_id, can_use_tools=can_use_tools),
                ),
                enable_native_tool_calls=native,
            )
        )
    return contexts


def _describe(context: SystemPromptContext) -> str:
    return (
        f"{context.provider_id}/{context.model_id} "
        f"(can_use_tools={context.can_use_tools}, "
        f"native_tool_calls={context.enable_native_tool_calls})"
    )


def _check_selector(
    label: str,
    selector: Callable[[SystemPromptContext], Sequence],
    identifier_type: type[Enum],
    contexts: Iterable[SystemPromptContext],
    errors: list[str],
) -> list[tuple[SystemPromptContext, list]]:
    """Run a selector over each context and record structural errors.

    Returns:
        (context, output) pairs for every context the selector handled.
    """
    outputs = []
    for context in contexts:
        try:
            selected = list(selector(context))
        except Exception as e:
            errors.append(f"{label} selector raised {type(e).__name__} for {_describe(context)}: {e}")
            continue

        unknown = [item for item in selected if not isinstance(item, identifier_type)]
        if unknown:
            errors.append(f"{label} selector returned unknown identifiers {unknown} for {_describe(context)}")

        seen = set()
        duplicates = []
        for item in (i for i in selected if isinstance(i, identifier_type)):
            if item in seen and item not in duplicates:
                duplicates.append(item)
            seen.add(item)
        if duplicates:
            names = ", ".join(getattr(d, "name", str(d)) for d in duplicates)
            errors.append(f"{label} selector returned duplicates ({names}) for {_describe(context)}")

        outputs.append((context, selected))
    return outputs


def validate_variant(
    variant: PromptVariant,
    strict: bool = False,
    probe_contexts: Optional[Sequence[SystemPromptContext]] = None,
) -> ValidationResult:
    """Validate a variant's structure and the behaviour of its selectors.

    Args:
        variant: The variant to inspect.
        strict: Treat advisories about core sections and unreachable
            overrides as errors.
        probe_contexts: Contexts used to exercise the matcher and selectors.
            Defaults to default_probe_contexts().

    Returns:
        A ValidationResult listing errors and warnings.

    Example:
        result = validate_variant(variant, strict=True)
        if not result.is_valid:
            print(f"Validation failed: {result.errors}")
    """
    errors: list[str] = []
    warnings: list[str] = []
    advisories: list[str] = []
    contexts = list(probe_contexts) if probe_contexts is not None else default_probe_contexts()

    # Identity
    if not variant.family:
        errors.append("Variant family is required")
    if isinstance(variant.version, bool) or not isinstance(variant.version, int):
        errors.append("Field 'version' must be an integer")
    elif variant.version < 1:
        errors.append(f"Field 'version' must be at least 1, got {variant.version}")
    if not variant.description:
        warnings.append("Variant has no description")
    if not variant.tags:
        warnings.append("Variant has no tags")

    # Templates
    if not isinstance(variant.base_template, str) or not variant.base_template:
        errors.append("Base template must be a non-empty string")
    for section, override in variant.component_overrides.items():
        if not isinstance(section, SystemPromptSection):
            errors.append(f"Override key '{section}' is not a known section")
            continue
        if not isinstance(override, ComponentOverride):
            errors.append(f"Override for {section.name} must be a ComponentOverride")
            continue
        if not isinstance(override.template, str) or not override.template:
            errors.append(f"Override for {section.name} must have a non-empty template")

    # Labels and placeholders
    for name, weight in variant.labels.items():
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            errors.append(f"Label '{name}' weight must be a number")
    for name in variant.placeholders:
        if not isinstance(name, str) or not name:
            errors.append(f"Placeholder name '{name}' must be a non-empty string")

    # Matcher
    if not callable(variant.matcher):
        errors.append("Matcher is required")
    else:
        for context in contexts:
            try:
                result = variant.matcher(context)
            except Exception as e:
                errors.append(f"Matcher raised {type(e).__name__} for {_describe(context)}: {e}")
                continue
            if not isinstance(result, bool):
                errors.append(f"Matcher returned {type(result).__name__} instead of bool for {_describe(context)}")
                break

    # Selectors
    rendered: set[SystemPromptSection] = set()
    if not callable(variant.components_fn):
        errors.append("Components selector is required")
    else:
        outputs = _check_selector("Components", variant.components_fn, SystemPromptSection, contexts, errors)
        for context, selected in outputs:
            if not selected:
                errors.append(f"Components selector returned no sections for {_describe(context)}")
                continue
            rendered.update(s for s in selected if isinstance(s, SystemPromptSection))
            missing = [s.name for s in CORE_SECTIONS if s not in selected]
            if missing:
                advisories.append(f"Core sections missing ({', '.join(missing)}) for {_describe(context)}")

        for section in variant.component_overrides:
            if isinstance(section, SystemPromptSection) and section not in rendered:
                advisories.append(f"Override for {section.name} targets a section that is never rendered")

    if not callable(variant.tools_fn):
        errors.append("Tools selector is required")
    else:
        outputs = _check_selector("Tools", variant.tools_fn, DefaultTool, contexts, errors)
        if outputs and not any(selected for _, selected in outputs):
            warnings.append("Tools selector never offers any tools")

    if strict:
        errors.extend(advisories)
    else:
        warnings.extend(advisories)

    return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)


def ensure_valid(
    variant: PromptVariant,
    strict: bool = True,
    probe_contexts: Optional[Sequence[SystemPromptContext]] = None,
) -> ValidationResult:
    """Validate a variant and abort construction if it is invalid.

    Warnings are logged and otherwise ignored.

    Raises:
        VariantConfigurationError: If validation reports any errors.
    """
    family = getattr(variant.family, "value", variant.family)
    result = validate_variant(variant, strict=strict, probe_contexts=probe_contexts)

    if not result.is_valid:
        logger.error(f"{family} variant configuration validation failed: {result.errors}")
        raise VariantConfigurationError(
            f"Invalid {family} variant configuration: {', '.join(result.errors)}",
            family=family,
            errors=result.errors,
        )

    if result.warnings:
        logger.warning(f"{family} variant configuration warnings: {result.warnings}")

    return result
