# src/spec_fidelity/llms/__init__.py

"""LLM transport boundary for spec-fidelity.

The auto-corrector is the only caller. It sends one system and one user
message and expects one JSON object back; everything else about the
provider stays inside the adapters.

Design principles:
- Stateless: Every call receives full message list
- Transport only: Retries only on network/rate-limit errors
- No behavior: No loops, no prompt fixing, no "smart" retries
- No leakage: Provider objects never escape the adapter

Example:
    >>> from spec_fidelity.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> client = create_llm_client(LLMConfig(provider="openai", model="gpt-4o"))
    >>> response = await client.complete(
    ...     messages=[
    ...         Message(role=Role.SYSTEM, content="Rewrite test steps."),
    ...         Message(role=Role.USER, content="..."),
    ...     ],
    ...     response_format="json",
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, ResponseFormat, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "ResponseFormat",
    "Role",
    "LLMResponse",
    "Usage",
]
