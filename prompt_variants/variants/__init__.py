"""
Prompt variant module.

Provides the PromptVariant record, its builder and validator, and the
built-in variant definitions.
"""

from .schema import (
    ComponentOverride,
    PromptVariant,
    VariantBuildError,
    VariantConfigurationError,
    VariantError,
)
from .builder import VariantBuilder, create_variant
from .validator import (
    ValidationResult,
    default_probe_contexts,
    ensure_valid,
    validate_variant,
)

__all__ = [
    # Schema
    "ComponentOverride",
    "PromptVariant",
    "VariantError",
    "VariantBuildError",
    "VariantConfigurationError",
    # Builder
    "VariantBuilder",
    "create_variant",
    # Validation
    "ValidationResult",
    "default_probe_contexts",
    "ensure_valid",
    "validate_variant",
]
