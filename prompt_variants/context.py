"""
SystemPromptContext - Runtime facts used to pick and shape a prompt variant.

This module provides the read-only snapshot of provider/model identity and
capability flags that matchers and selectors evaluate.
"""

from dataclasses import dataclass
from typing import Any, Optional


class ContextError(Exception):
    """Raised when a context cannot be built from the supplied data."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        super().__init__(message)


@dataclass(frozen=True)
class ModelInfo:
    """Identity and capabilities of the active model.

    Attributes:
        id: The model identifier as reported by the provider.
        can_use_tools: Whether the model supports native tool calls.
        supports_images: Whether the model accepts image input.
        context_window: Context window size in tokens, if known.
    """
    id: str
    can_use_tools: bool = False
    supports_images: bool = False
    context_window: Optional[int] = None


@dataclass(frozen=True)
class ProviderInfo:
    """The provider serving the model plus the session's custom prompt mode."""
    provider_id: str
    model: ModelInfo
    custom_prompt: Optional[str] = None


@dataclass(frozen=True)
class SystemPromptContext:
    """Snapshot evaluated by matchers and selectors.

    A fresh context is supplied by the caller for every decision. It is never
    mutated, so matchers and selectors can be called concurrently.

    Example:
        context = SystemPromptContext(
            provider_info=ProviderInfo(
                provider_id="openai",
                model=ModelInfo(id="claude-sonnet-4", can_use_tools=True),
            ),
            enable_native_tool_calls=True,
        )
    """
    provider_info: ProviderInfo
    enable_native_tool_calls: bool = False

    @property
    def model_id(self) -> str:
        return self.provider_info.model.id

    @property
    def provider_id(self) -> str:
        return self.provider_info.provider_id

    @property
    def custom_prompt(self) -> Optional[str]:
        return self.provider_info.custom_prompt

    @property
    def can_use_tools(self) -> bool:
        return self.provider_info.model.can_use_tools

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SystemPromptContext":
        """Create a context from a flat dictionary.

        Args:
            data: Dictionary with ``provider_id`` and ``model_id`` (required)
                and optionally ``can_use_tools``, ``supports_images``,
                ``context_window``, ``custom_prompt`` and
                ``enable_native_tool_calls``.

        Returns:
            A new SystemPromptContext.

        Raises:
            ContextError: If required fields are missing or have wrong types.
        """
        if not isinstance(data, dict):
            raise ContextError("Context data must be a dictionary")

        for name in ("provider_id", "model_id"):
            if name not in data:
                raise ContextError(f"Missing required field: '{name}'", name)
            if not isinstance(data[name], str):
                raise ContextError(f"Field '{name}' must be a string", name)

        for name in ("can_use_tools", "supports_images", "enable_native_tool_calls"):
            if name in data and not isinstance(data[name], bool):
                raise ContextError(f"Field '{name}' must be a boolean", name)

        custom_prompt = data.get("custom_prompt")
        if custom_prompt is not None and not isinstance(custom_prompt, str):
            raise ContextError("Field 'custom_prompt' must be a string or null", "custom_prompt")

        context_window = data.get("context_window")
        if context_window is not None and (
            isinstance(context_window, bool) or not isinstance(context_window, int)
        ):
            raise ContextError("Field 'context_window' must be an integer or null", "context_window")

        model = ModelInfo(
            id=data["model_id"],
            can_use_tools=data.get("can_use_tools", False),
            supports_images=data.get("supports_images", False),
            context_window=context_window,
        )
        return cls(
            provider_info=ProviderInfo(
                provider_id=data["provider_id"],
                model=model,
                custom_prompt=custom_prompt,
            ),
            enable_native_tool_calls=data.get("enable_native_tool_calls", False),
        )
