"""
Prompt variant record and error types.

Provides the immutable PromptVariant produced by VariantBuilder, the
ComponentOverride entry type, and the exceptions raised while constructing
a variant.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from ..context import SystemPromptContext
from ..sections import SystemPromptSection
from ..tools import DefaultTool


Matcher = Callable[[SystemPromptContext], bool]
ComponentsFn = Callable[[SystemPromptContext], Sequence[SystemPromptSection]]
ToolsFn = Callable[[SystemPromptContext], Sequence[DefaultTool]]
LabelWeight = Union[int, float]


class VariantError(Exception):
    """Base class for errors raised while constructing a variant."""


class VariantBuildError(VariantError):
    """Raised when a builder cannot assemble a variant."""

    def __init__(self, message: str, family: Optional[str] = None):
        self.family = family
        super().__init__(message)


class VariantConfigurationError(VariantError):
    """Raised when a built variant fails validation."""

    def __init__(self, message: str, family: Optional[str] = None, errors: Optional[list[str]] = None):
        self.family = family
        self.errors = errors or []
        super().__init__(message)


@dataclass(frozen=True)
class ComponentOverride:
    """Replacement template for a single section.

    Attributes:
        template: Template reference used instead of the base template's
            handling of the section.
        enabled: Whether the override is in effect.
    """
    template: str
    enabled: bool = True


def _frozen_mapping(data: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, eq=False)
class PromptVariant:
    """One complete, named prompt configuration for a class of models.

    Instances are created by VariantBuilder.build() and never mutated
    afterwards. Mapping attributes are read-only views.

    Attributes:
        family: Registry key of the model family this variant serves.
        description: Human readable summary.
        version: Positive integer bumped whenever the layout changes.
        tags: Free-form tags.
        labels: Label name to weight, used for ranking and telemetry.
        base_template: Template reference for the whole prompt.
        component_overrides: Section to ComponentOverride.
        placeholders: Placeholder name to bound value.
        matcher: Predicate deciding whether this variant applies.
        components_fn: Context to ordered section identifiers.
        tools_fn: Context to ordered tool identifiers.
        config: Reserved per-variant settings.
    """
    family: str
    base_template: str
    description: str = ""
    version: int = 1
    tags: frozenset[str] = frozenset()
    labels: Mapping[str, LabelWeight] = field(default_factory=dict)
    component_overrides: Mapping[SystemPromptSection, ComponentOverride] = field(default_factory=dict)
    placeholders: Mapping[str, Any] = field(default_factory=dict)
    matcher: Optional[Matcher] = None
    components_fn: Optional[ComponentsFn] = None
    tools_fn: Optional[ToolsFn] = None
    config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        tags = (self.tags,) if isinstance(self.tags, str) else self.tags
        object.__setattr__(self, "tags", frozenset(tags))
        object.__setattr__(self, "labels", _frozen_mapping(self.labels))
        object.__setattr__(self, "component_overrides", _frozen_mapping(self.component_overrides))
        object.__setattr__(self, "placeholders", _frozen_mapping(self.placeholders))
        object.__setattr__(self, "config", _frozen_mapping(self.config))

    @property
    def cache_key(self) -> str:
        """Key identifying this family and layout version, e.g. ``next-gen@v1``."""
        family = getattr(self.family, "value", self.family)
        return f"{family}@v{self.version}"

    def matches(self, context: SystemPromptContext) -> bool:
        if self.matcher is None:
            return False
        return self.matcher(context)

    def get_components(self, context: SystemPromptContext) -> list[SystemPromptSection]:
        if self.components_fn is None:
            return []
        return list(self.components_fn(context))

    def get_tools(self, context: SystemPromptContext) -> list[DefaultTool]:
        if self.tools_fn is None:
            return []
        return list(self.tools_fn(context))

    def get_override(self, section: SystemPromptSection) -> Optional[ComponentOverride]:
        """Return the enabled override for a section, or None."""
        override = self.component_overrides.get(section)
        if override is None or not override.enabled:
            return None
        return override

    def template_for(self, section: SystemPromptSection) -> str:
        """Template reference the renderer should use for a section."""
        override = self.get_override(section)
        return override.template if override else self.base_template
