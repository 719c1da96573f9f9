"""
Property-based tests for registry configuration.

Tests JSON round-trip and validation of RegistryConfig using hypothesis.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st

from prompt_variants.config import (
    CONFIG_VERSION,
    ConfigError,
    RegistryConfig,
    export_config,
    import_config,
    load_config,
    validate_config,
)


def family_names_strategy():
    """Generate lists of unique family keys."""
    return st.lists(
        st.from_regex(r"^[a-z][a-z0-9-]{0,15}$", fullmatch=True),
        max_size=5,
        unique=True,
    )


@st.composite
def registry_config_strategy(draw):
    """Generate valid RegistryConfig objects."""
    return RegistryConfig(
        strict_validation=draw(st.booleans()),
        fail_fast=draw(st.booleans()),
        family_order=draw(family_names_strategy()),
        disabled_families=draw(family_names_strategy()),
        fallback_family=draw(st.one_of(st.none(), st.sampled_from(["generic", "next-gen"]))),
    )


@allure.feature("Registry Configuration")
@allure.story("Configuration round-trip consistency")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(config=registry_config_strategy())
def test_config_round_trip_consistency(config: RegistryConfig):
    """
    For any valid RegistryConfig, serializing to JSON and deserializing back
    SHALL produce an equal RegistryConfig.
    """
    restored = import_config(export_config(config))

    assert restored == config


def test_export_includes_version():
    assert f'"version": "{CONFIG_VERSION}"' in export_config(RegistryConfig())


def test_from_dict_uses_defaults():
    assert RegistryConfig.from_dict({"version": "1.0"}) == RegistryConfig()


def test_invalid_json_reports_position():
    with pytest.raises(ConfigError) as exc_info:
        import_config('{"version": "1.0",\n "fail_fast": }')

    assert exc_info.value.line == 2
    assert exc_info.value.column is not None
    assert "line 2" in str(exc_info.value)


def test_missing_version_is_rejected():
    with pytest.raises(ConfigError) as exc_info:
        import_config('{"fail_fast": true}')

    assert "version" in str(exc_info.value)


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"version": 1}, "'version' must be a string"),
        ({"version": "1.0", "fail_fast": "yes"}, "'fail_fast' must be a boolean"),
        ({"version": "1.0", "strict_validation": 1}, "'strict_validation' must be a boolean"),
        ({"version": "1.0", "family_order": "next-gen"}, "'family_order' must be an array"),
        ({"version": "1.0", "family_order": ["a", 2]}, "'family_order[1]' must be a string"),
        ({"version": "1.0", "disabled_families": ["a", "a"]}, "must not contain duplicates"),
        ({"version": "1.0", "fallback_family": 3}, "'fallback_family' must be a string or null"),
    ],
)
def test_validate_config_errors(data, fragment):
    is_valid, errors = validate_config(data)

    assert not is_valid
    assert any(fragment in e for e in errors), errors


def test_validate_config_rejects_non_dict():
    assert validate_config(["version"]) == (False, ["Configuration must be a dictionary"])


def test_load_config_from_file(tmp_path):
    path = tmp_path / "variants.json"
    path.write_text(export_config(RegistryConfig(fail_fast=True, family_order=["next-gen"])), encoding="utf-8")

    config = load_config(path)

    assert config.fail_fast is True
    assert config.family_order == ["next-gen"]


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")
