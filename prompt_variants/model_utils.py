"""
Model and provider classification helpers.

Pure string checks that sort model identifiers into families and providers
into hosting classes. Matchers combine these to decide variant eligibility.
"""

from .context import ProviderInfo


# Providers that run models on the user's own machine
LOCAL_PROVIDERS = frozenset({"ollama", "lmstudio"})

# Providers that serve next-gen models with native tool calling
NEXT_GEN_PROVIDERS = frozenset({
    "cline",
    "anthropic",
    "gemini",
    "vertex",
    "openrouter",
    "xai",
    "baseten",
    "openai-native",
    "vercel-ai-gateway",
})


def normalize_model_id(model_id: str) -> str:
    """Lower-case a model id and drop any ``provider/`` prefix.

    Example:
        >>> normalize_model_id("anthropic/Claude-Sonnet-4")
        'claude-sonnet-4'
    """
    normalized = model_id.strip().lower()
    if "/" in normalized:
        normalized = normalized.rsplit("/", 1)[1]
    return normalized


def is_claude4_model_family(model_id: str) -> bool:
    normalized = normalize_model_id(model_id)
    return any(
        marker in normalized
        for marker in ("sonnet-4", "opus-4", "haiku-4", "4-sonnet", "4-opus", "4-haiku")
    )


def is_gemini25_model_family(model_id: str) -> bool:
    normalized = normalize_model_id(model_id)
    return "gemini-2.5" in normalized or "gemini-3" in normalized


def is_grok4_model_family(model_id: str) -> bool:
    return "grok-4" in normalize_model_id(model_id)


def is_gpt5_model_family(model_id: str) -> bool:
    return "gpt-5" in normalize_model_id(model_id)


def is_next_gen_model_family(model_id: str) -> bool:
    """Check whether a model belongs to the next-generation family.

    Covers Claude 4, Gemini 2.5+, Grok 4 and GPT-5 models.
    """
    return (
        is_claude4_model_family(model_id)
        or is_gemini25_model_family(model_id)
        or is_grok4_model_family(model_id)
        or is_gpt5_model_family(model_id)
    )


def is_local_model(provider_info: ProviderInfo) -> bool:
    return provider_info.provider_id.strip().lower() in LOCAL_PROVIDERS


def is_next_gen_model_provider(provider_info: ProviderInfo) -> bool:
    return provider_info.provider_id.strip().lower() in NEXT_GEN_PROVIDERS
