# src/spec_fidelity/llms/factory.py

import logging

from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig

logger = logging.getLogger(__name__)


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Build the client for ``config.provider``.

    Provider SDKs are imported lazily so only the configured one has to be
    importable.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> client = create_llm_client(LLMConfig(provider="openai", model="gpt-4o"))
        >>> response = await client.complete(messages=[...], response_format="json")
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient as client_cls
    elif config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient as client_cls
    else:
        raise ValueError(f"Unknown LLM provider: {config.provider}")

    logger.info(
        "Creating %s client: model=%s, max_retries=%d",
        config.provider,
        config.model,
        config.max_retries,
    )
    return client_cls(
        api_key=config.api_key,
        model=config.model,
        timeout=config.timeout,
        max_retries=config.max_retries,
        metrics_hook=metrics_hook,
    )
