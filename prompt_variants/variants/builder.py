"""
VariantBuilder - Fluent accumulator for PromptVariant records.

Each setter records one attribute and returns the builder so calls can be
chained. build() freezes the accumulated state into a PromptVariant.
"""

import logging
from typing import Any, Mapping, Optional

from ..sections import SystemPromptSection
from .schema import (
    ComponentOverride,
    ComponentsFn,
    LabelWeight,
    Matcher,
    PromptVariant,
    ToolsFn,
    VariantBuildError,
)


logger = logging.getLogger(__name__)


class VariantBuilder:
    """Builds a PromptVariant for one model family.

    Setters overwrite any earlier value for the same attribute, except
    override_component(), which adds or replaces one entry per section.
    A builder is single-use: after build() succeeds it cannot build again.

    Example:
        variant = (
            create_variant(ModelFamily.NEXT_GEN)
            .description("Prompt tailored to newer frontier models")
            .version(1)
            .tags("next-gen", "production")
            .matcher(matches_next_gen)
            .template("next_gen/base")
            .components(select_components)
            .tools(select_tools)
            .override_component(SystemPromptSection.RULES, template="next_gen/rules")
            .build()
        )
    """

    def __init__(self, family: str) -> None:
        """Initialize the builder.

        Args:
            family: Registry key of the model family being configured.
        """
        self._family = family
        self._description = ""
        self._version = 1
        self._tags: tuple[str, ...] = ()
        self._labels: dict[str, LabelWeight] = {}
        self._matcher: Optional[Matcher] = None
        self._template: Optional[str] = None
        self._components_fn: Optional[ComponentsFn] = None
        self._tools_fn: Optional[ToolsFn] = None
        self._placeholders: dict[str, Any] = {}
        self._config: dict[str, Any] = {}
        self._overrides: dict[SystemPromptSection, ComponentOverride] = {}
        self._built = False

    @property
    def family(self) -> str:
        return self._family

    def description(self, description: str) -> "VariantBuilder":
        self._description = description
        return self

    def version(self, version: int) -> "VariantBuilder":
        self._version = version
        return self

    def tags(self, *tags: str) -> "VariantBuilder":
        self._tags = tuple(tags)
        return self

    def labels(self, labels: Mapping[str, LabelWeight]) -> "VariantBuilder":
        self._labels = dict(labels)
        return self

    def matcher(self, matcher: Matcher) -> "VariantBuilder":
        self._matcher = matcher
        return self

    def template(self, template: str) -> "VariantBuilder":
        self._template = template
        return self

    def components(self, components_fn: ComponentsFn) -> "VariantBuilder":
        self._components_fn = components_fn
        return self

    def tools(self, tools_fn: ToolsFn) -> "VariantBuilder":
        self._tools_fn = tools_fn
        return self

    def placeholders(self, placeholders: Mapping[str, Any]) -> "VariantBuilder":
        self._placeholders = dict(placeholders)
        return self

    def config(self, config: Mapping[str, Any]) -> "VariantBuilder":
        self._config = dict(config)
        return self

    def override_component(
        self,
        section: SystemPromptSection,
        template: str,
        enabled: bool = True,
    ) -> "VariantBuilder":
        """Add or replace the override for one section.

        Args:
            section: The section whose template is replaced.
            template: Template reference used for that section.
            enabled: Whether the override is in effect.
        """
        self._overrides[section] = ComponentOverride(template=template, enabled=enabled)
        return self

    def build(self) -> PromptVariant:
        """Freeze the accumulated state into a PromptVariant.

        No validation is performed here; see validate_variant().

        Returns:
            The assembled PromptVariant.

        Raises:
            VariantBuildError: If the family or base template is missing,
                or if this builder has already produced a variant.
        """
        if self._built:
            raise VariantBuildError(
                f"Builder for '{self._family}' has already been used; create a new one",
                self._family,
            )
        if not self._family:
            raise VariantBuildError("Variant family is required")
        if not self._template:
            raise VariantBuildError(
                f"Variant '{self._family}' is missing a base template",
                self._family,
            )

        variant = PromptVariant(
            family=self._family,
            base_template=self._template,
            description=self._description,
            version=self._version,
            tags=frozenset(self._tags),
            labels=self._labels,
            component_overrides=self._overrides,
            placeholders=self._placeholders,
            matcher=self._matcher,
            components_fn=self._components_fn,
            tools_fn=self._tools_fn,
            config=self._config,
        )
        self._built = True
        logger.debug(f"Built variant: {variant.cache_key}")
        return variant


def create_variant(family: str) -> VariantBuilder:
    """Start a new builder for a model family."""
    return VariantBuilder(family)
