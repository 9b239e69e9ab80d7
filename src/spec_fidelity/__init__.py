# Chunking
from .chunking import ChunkedDocument, ChunkingConfig, DocumentChunk, chunk_document

# Fidelity
from .fidelity import (
    FidelityAnalyzer,
    FidelityConfig,
    KeywordExtractor,
    NewConceptsAnalysis,
    analyze_new_concepts,
)

# LLMs
from .llms import LLMClient, LLMConfig, create_llm_client

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import DocumentSection, ParsedDocument, ParseError, get_parser

# Prompts
from .prompts import Prompt, PromptsLibrary

# Settings
from .settings import Settings, build_validator, load_settings

# Validation
from .validation import (
    AutoCorrector,
    GeneratedTestScenario,
    NormalizedInput,
    ScenarioValidator,
    ValidationConfig,
    validate_scenarios,
)

__all__ = [
    # Chunking
    "ChunkedDocument",
    "ChunkingConfig",
    "DocumentChunk",
    "chunk_document",
    # Fidelity
    "FidelityAnalyzer",
    "FidelityConfig",
    "KeywordExtractor",
    "NewConceptsAnalysis",
    "analyze_new_concepts",
    # LLMs
    "LLMClient",
    "LLMConfig",
    "create_llm_client",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentSection",
    "ParseError",
    "ParsedDocument",
    "get_parser",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Settings
    "Settings",
    "build_validator",
    "load_settings",
    # Validation
    "AutoCorrector",
    "GeneratedTestScenario",
    "NormalizedInput",
    "ScenarioValidator",
    "ValidationConfig",
    "validate_scenarios",
]
