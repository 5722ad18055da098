"""
Observability module.

Provides structured logging, correlation ID tracking and Langfuse prompt
version management.
"""

from backend.observability.correlation import get_correlation_id, set_correlation_id
from backend.observability.logger import configure_logging
from backend.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = [
    "PromptRegistry",
    "ModelConfig",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
