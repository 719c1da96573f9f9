"""
VariantRegistry - Owns the prompt variants and picks one per context.

Variants are built once by an explicit initialize_variants() call. After that
the registry is read-only and select() can be called from any thread.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import RegistryConfig
from .context import SystemPromptContext
from .families import ModelFamily
from .variants.schema import PromptVariant, VariantError


logger = logging.getLogger(__name__)


# Factories take the validation mode and return a validated variant
VariantFactory = Callable[[bool], PromptVariant]


def _family_key(family: str) -> str:
    return getattr(family, "value", family)


@dataclass
class InitializationResult:
    """Outcome of loading every registered variant.

    Attributes:
        variants: Family key to the variant that loaded successfully.
        failures: Family key to the error that disabled it.
    """
    variants: dict[str, PromptVariant] = field(default_factory=dict)
    failures: dict[str, VariantError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


class VariantRegistry:
    """Registry of prompt variants keyed by model family.

    Factories are registered first, then initialize_variants() builds each
    one. A family whose factory raises VariantError is disabled and recorded
    in the result, unless the config asks to fail fast.

    Example:
        registry = VariantRegistry()
        registry.register_factory(ModelFamily.NEXT_GEN, build_next_gen_variant)
        result = registry.initialize_variants()

        variant = registry.select(context)
        if variant:
            sections = variant.get_components(context)
    """

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        """Initialize an empty registry.

        Args:
            config: Loading and selection settings. Defaults to RegistryConfig().
        """
        self._config = config or RegistryConfig()
        self._factories: dict[str, VariantFactory] = {}
        self._variants: dict[str, PromptVariant] = {}
        self._result: Optional[InitializationResult] = None

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def initialized(self) -> bool:
        return self._result is not None

    def register_factory(self, family: str, factory: VariantFactory) -> None:
        """Register the factory that builds a family's variant.

        Raises:
            RuntimeError: If the registry has already been initialized.
            ValueError: If the family already has a factory.
        """
        key = _family_key(family)
        if self._result is not None:
            raise RuntimeError(f"Cannot register '{key}' after variants were initialized")
        if key in self._factories:
            raise ValueError(f"Variant family '{key}' is already registered")
        self._factories[key] = factory

    def initialize_variants(self) -> InitializationResult:
        """Build every registered variant once.

        Calling this again returns the first result without rebuilding.

        Returns:
            The loaded variants and the families that failed.

        Raises:
            VariantError: If a factory fails and config.fail_fast is set.
        """
        if self._result is not None:
            return self._result

        result = InitializationResult()
        disabled = set(self._config.disabled_families)

        for key, factory in self._factories.items():
            if key in disabled:
                logger.info(f"Skipping disabled variant family: {key}")
                continue
            try:
                variant = factory(self._config.strict_validation)
            except VariantError as e:
                if self._config.fail_fast:
                    logger.error(f"Variant family '{key}' failed to load: {e}")
                    raise
                logger.error(f"Variant family '{key}' disabled: {e}")
                result.failures[key] = e
                continue

            result.variants[key] = variant
            logger.debug(f"Loaded variant: {variant.cache_key}")

        self._variants = dict(result.variants)
        self._result = result
        logger.info(
            f"Initialized {len(result.variants)} prompt variants"
            + (f", {len(result.failures)} failed" if result.failures else "")
        )
        return result

    def get(self, family: str) -> Optional[PromptVariant]:
        """Get a loaded variant by family, or None."""
        return self._variants.get(_family_key(family))

    def families(self) -> list[str]:
        """Loaded families in matcher evaluation order."""
        ordered = [f for f in self._config.family_order if f in self._variants]
        ordered.extend(f for f in self._variants if f not in ordered)
        return ordered

    def select(self, context: SystemPromptContext) -> Optional[PromptVariant]:
        """Pick the variant for a context.

        Matchers are evaluated in families() order and the first that accepts
        the context wins. If none does, the configured fallback family is
        returned when it is loaded.

        Raises:
            RuntimeError: If initialize_variants() has not been called.
        """
        if self._result is None:
            raise RuntimeError("Variants have not been initialized; call initialize_variants() first")

        for family in self.families():
            variant = self._variants[family]
            if variant.matches(context):
                logger.debug(f"Selected variant {variant.cache_key} for model '{context.model_id}'")
                return variant

        fallback = self._config.fallback_family
        if fallback is not None and fallback in self._variants:
            logger.debug(f"No variant matched model '{context.model_id}', falling back to '{fallback}'")
            return self._variants[fallback]

        logger.debug(f"No variant matched model '{context.model_id}'")
        return None

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, family: str) -> bool:
        return _family_key(family) in self._variants


def default_registry(config: Optional[RegistryConfig] = None) -> VariantRegistry:
    """Create a registry with the built-in variant factories registered.

    The registry is returned uninitialized; call initialize_variants().
    """
    from .variants.next_gen import build_next_gen_variant

    registry = VariantRegistry(config)
    registry.register_factory(ModelFamily.NEXT_GEN, build_next_gen_variant)
    return registry
