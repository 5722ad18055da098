"""
Langfuse prompt registry module.

Versions LangChain text templates in Langfuse with model configuration
tracking.

Dependencies: langfuse, langchain_core, pydantic
System role: Prompt version management and LangChain integration
"""

from backend.observability.prompt_registry.models import ModelConfig
from backend.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
