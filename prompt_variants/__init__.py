"""
Prompt variant selection for llm agents.

This package decides which prompt layout, tool set and template overrides an
agent gets for the active model and provider.
"""

from .config import RegistryConfig, ConfigError, import_config, export_config
from .context import ContextError, ModelInfo, ProviderInfo, SystemPromptContext
from .families import ModelFamily
from .registry import InitializationResult, VariantRegistry, default_registry
from .sections import SystemPromptSection
from .tools import DefaultTool
from .variants import (
    ComponentOverride,
    PromptVariant,
    VariantBuilder,
    VariantBuildError,
    VariantConfigurationError,
    VariantError,
    create_variant,
    validate_variant,
)

__version__ = "0.1.0"

__all__ = [
    "RegistryConfig",
    "ConfigError",
    "import_config",
    "export_config",
    "ContextError",
    "ModelInfo",
    "ProviderInfo",
    "SystemPromptContext",
    "ModelFamily",
    "InitializationResult",
    "VariantRegistry",
    "default_registry",
    "SystemPromptSection",
    "DefaultTool",
    "ComponentOverride",
    "PromptVariant",
    "VariantBuilder",
    "VariantBuildError",
    "VariantConfigurationError",
    "VariantError",
    "create_variant",
    "validate_variant",
]
