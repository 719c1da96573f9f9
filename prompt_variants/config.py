"""
Registry configuration module.

Provides the RegistryConfig dataclass controlling how variants are loaded
and selected. Supports JSON serialization/deserialization with validation.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


class ConfigError(Exception):
    """Raised when configuration parsing or validation fails."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.line = line
        self.column = column

        if line is not None and column is not None:
            full_message = f"{message} (line {line}, column {column})"
        elif line is not None:
            full_message = f"{message} (line {line})"
        else:
            full_message = message

        super().__init__(full_message)


# Current configuration version
CONFIG_VERSION = "1.0"


@dataclass
class RegistryConfig:
    """Configuration for a VariantRegistry.

    Attributes:
        strict_validation: Validate variants in strict mode at load time.
        fail_fast: Re-raise the first variant construction error instead of
            disabling just that family.
        family_order: Matcher evaluation order. Families not listed follow in
            registration order.
        disabled_families: Families that are never loaded.
        fallback_family: Family returned by select() when no matcher
            accepts the context.

    Example:
        config = RegistryConfig(
            fail_fast=True,
            family_order=["gpt-5", "next-gen"],
        )
    """
    strict_validation: bool = True
    fail_fast: bool = False
    family_order: list[str] = field(default_factory=list)
    disabled_families: list[str] = field(default_factory=list)
    fallback_family: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary for serialization."""
        return {
            "version": CONFIG_VERSION,
            "strict_validation": self.strict_validation,
            "fail_fast": self.fail_fast,
            "family_order": list(self.family_order),
            "disabled_families": list(self.disabled_families),
            "fallback_family": self.fallback_family,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RegistryConfig":
        """Create a RegistryConfig from a dictionary.

        Missing fields take their defaults.
        """
        return cls(
            strict_validation=data.get("strict_validation", True),
            fail_fast=data.get("fail_fast", False),
            family_order=list(data.get("family_order", [])),
            disabled_families=list(data.get("disabled_families", [])),
            fallback_family=data.get("fallback_family"),
        )


def validate_config(data: dict[str, Any]) -> tuple[bool, list[str]]:
    """Validate a registry configuration dictionary against the schema.

    Args:
        data: Dictionary containing configuration to validate.

    Returns:
        A tuple of (is_valid, errors) where is_valid is True if validation
        passed and errors is a list of error messages (empty if valid).
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return False, ["Configuration must be a dictionary"]

    if "version" not in data:
        errors.append("Missing required field: 'version'")
    elif not isinstance(data["version"], str):
        errors.append("Field 'version' must be a string")

    for name in ("strict_validation", "fail_fast"):
        if name in data and not isinstance(data[name], bool):
            errors.append(f"Field '{name}' must be a boolean")

    for name in ("family_order", "disabled_families"):
        if name not in data:
            continue
        families = data[name]
        if not isinstance(families, list):
            errors.append(f"Field '{name}' must be an array")
            continue
        for i, family in enumerate(families):
            if not isinstance(family, str):
                errors.append(f"Field '{name}[{i}]' must be a string")
        names = [f for f in families if isinstance(f, str)]
        if len(set(names)) != len(names):
            errors.append(f"Field '{name}' must not contain duplicates")

    if "fallback_family" in data:
        fallback = data["fallback_family"]
        if fallback is not None and not isinstance(fallback, str):
            errors.append("Field 'fallback_family' must be a string or null")

    return len(errors) == 0, errors


def export_config(config: RegistryConfig) -> str:
    """Serialize a RegistryConfig to a JSON string."""
    return json.dumps(config.to_dict(), indent=2)


def import_config(json_str: str) -> RegistryConfig:
    """Deserialize a RegistryConfig from a JSON string.

    Raises:
        ConfigError: If the JSON is malformed or validation fails.

    Example:
        json_str = '{"version": "1.0", "fail_fast": true}'
        config = import_config(json_str)
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON: {e.msg}",
            line=e.lineno,
            column=e.colno,
        )

    is_valid, errors = validate_config(data)
    if not is_valid:
        raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    return RegistryConfig.from_dict(data)


def load_config(path: Path) -> RegistryConfig:
    """Load a RegistryConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the file content is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return import_config(f.read())
