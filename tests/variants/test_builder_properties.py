"""
Property-based tests for VariantBuilder.

Tests chaining, last-write-wins setters, additive overrides and single use.
"""

import dataclasses

import allure
import pytest
from hypothesis import given, settings, strategies as st

from prompt_variants.families import ModelFamily
from prompt_variants.sections import SystemPromptSection
from prompt_variants.variants import (
    ComponentOverride,
    PromptVariant,
    VariantBuildError,
    VariantBuilder,
    create_variant,
)


def minimal_builder(family: str = "test-family") -> VariantBuilder:
    return create_variant(family).template("test/base")


@allure.feature("Variant Builder")
@allure.story("Setters are last write wins")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(
    versions=st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=5),
    descriptions=st.lists(st.text(max_size=50), min_size=1, max_size=5),
)
def test_setters_last_write_wins(versions: list[int], descriptions: list[str]):
    """
    For any sequence of calls to the same setter, the built variant SHALL
    carry the value of the last call.
    """
    builder = minimal_builder()
    for version in versions:
        builder.version(version)
    for description in descriptions:
        builder.description(description)

    variant = builder.build()

    assert variant.version == versions[-1]
    assert variant.description == descriptions[-1]


@allure.feature("Variant Builder")
@allure.story("Overrides are additive by section")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(entries=st.lists(
    st.tuples(st.sampled_from(list(SystemPromptSection)), st.text(min_size=1, max_size=20)),
    max_size=20,
))
def test_override_component_is_additive(entries):
    """
    For any sequence of override_component() calls, the override table SHALL
    hold one entry per section, carrying the last template given for it.
    """
    builder = minimal_builder()
    expected = {}
    for section, template in entries:
        builder.override_component(section, template=template)
        expected[section] = template

    variant = builder.build()

    assert {s: o.template for s, o in variant.component_overrides.items()} == expected


def test_setters_return_same_builder():
    builder = create_variant(ModelFamily.NEXT_GEN)

    assert builder.description("d") is builder
    assert builder.version(2) is builder
    assert builder.tags("a", "b") is builder
    assert builder.labels({"stable": 1}) is builder
    assert builder.matcher(lambda ctx: True) is builder
    assert builder.template("base") is builder
    assert builder.components(lambda ctx: []) is builder
    assert builder.tools(lambda ctx: []) is builder
    assert builder.placeholders({"MODEL_FAMILY": "x"}) is builder
    assert builder.config({}) is builder
    assert builder.override_component(SystemPromptSection.RULES, template="rules") is builder


def test_tags_replace_previous_tags():
    variant = minimal_builder().tags("a", "b").tags("c").build()
    assert variant.tags == frozenset({"c"})


def test_build_defaults():
    variant = minimal_builder().build()

    assert variant.family == "test-family"
    assert variant.base_template == "test/base"
    assert variant.version == 1
    assert variant.description == ""
    assert variant.tags == frozenset()
    assert dict(variant.labels) == {}
    assert dict(variant.config) == {}
    assert dict(variant.component_overrides) == {}
    assert variant.matcher is None
    assert variant.components_fn is None
    assert variant.tools_fn is None


def test_build_requires_base_template():
    with pytest.raises(VariantBuildError) as exc_info:
        create_variant("test-family").version(1).build()

    assert "base template" in str(exc_info.value)
    assert exc_info.value.family == "test-family"


def test_build_requires_family():
    with pytest.raises(VariantBuildError):
        create_variant("").template("test/base").build()


def test_builder_is_single_use():
    builder = minimal_builder()
    builder.build()

    with pytest.raises(VariantBuildError):
        builder.build()


def test_failed_build_does_not_consume_builder():
    builder = create_variant("test-family")
    with pytest.raises(VariantBuildError):
        builder.build()

    variant = builder.template("test/base").build()
    assert isinstance(variant, PromptVariant)


def test_variant_is_immutable():
    variant = minimal_builder().labels({"stable": 1}).build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        variant.version = 2
    with pytest.raises(TypeError):
        variant.labels["stable"] = 2


def test_variant_does_not_share_builder_inputs():
    labels = {"stable": 1}
    placeholders = {"MODEL_FAMILY": "next-gen"}
    variant = minimal_builder().labels(labels).placeholders(placeholders).build()

    labels["stable"] = 99
    placeholders["EXTRA"] = "x"

    assert variant.labels["stable"] == 1
    assert "EXTRA" not in variant.placeholders


def test_template_for_uses_enabled_overrides_only():
    variant = (
        minimal_builder()
        .override_component(SystemPromptSection.RULES, template="test/rules")
        .override_component(SystemPromptSection.FEEDBACK, template="test/feedback", enabled=False)
        .build()
    )

    assert variant.template_for(SystemPromptSection.RULES) == "test/rules"
    assert variant.template_for(SystemPromptSection.FEEDBACK) == "test/base"
    assert variant.template_for(SystemPromptSection.OBJECTIVE) == "test/base"
    assert variant.get_override(SystemPromptSection.RULES) == ComponentOverride(template="test/rules")


def test_cache_key_uses_family_value():
    variant = create_variant(ModelFamily.NEXT_GEN).template("base").version(3).build()
    assert variant.cache_key == "next-gen@v3"


def test_single_string_tag_is_not_split():
    variant = PromptVariant(family="test-family", base_template="test/base", tags="prod")
    assert variant.tags == frozenset({"prod"})
