"""
Album review summary prompt.

Defines the prompt template that asks the model for a concise digest of an
album's reviews. Supports Langfuse prompt registry integration.

Dependencies: langchain_core.prompts, backend.observability.prompt_registry
System role: Prompt template for review summaries
"""

import logging

from langchain_core.prompts import PromptTemplate

from backend.observability.prompt_registry.models import ModelConfig
from backend.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)

SUMMARY_PROMPT_NAME = "album-review-summary"

SUMMARY_TEMPLATE = """Analyze these album reviews and provide a concise summary:

{reviews}

Please provide a summary that includes:
1. Overall sentiment
2. Common themes in positive reviews
3. Common themes in negative reviews (if any)
4. Notable specific comments
Keep the summary concise and focused on the most important points."""

REVIEW_SUMMARY_PROMPT = PromptTemplate.from_template(SUMMARY_TEMPLATE)


def register_summary_prompt(
    registry: PromptRegistry,
    model_id: str,
    temperature: float,
    labels: list[str] | None = None,
    timeout: float | None = None,
) -> None:
    """
    Register the summary prompt with Langfuse.

    Args:
        registry: Prompt registry
        model_id: Gemini model identifier
        temperature: Model temperature
        labels: Optional labels (e.g., ["production", "staging"])
        timeout: Request timeout in seconds, if pinned
    """
    if not registry.is_enabled:
        logger.debug("Prompt registry disabled, skipping registration")
        return

    registry.register_prompt(
        name=SUMMARY_PROMPT_NAME,
        template=REVIEW_SUMMARY_PROMPT,
        config=ModelConfig(model=model_id, temperature=temperature, timeout=timeout),
        labels=labels or ["development"],
    )


def get_summary_prompt(
    registry: PromptRegistry | None = None,
    label: str | None = None,
) -> PromptTemplate:
    """
    Get the review summary prompt template.

    Falls back to the local template when the registry is absent,
    disabled, or cannot serve the prompt.

    Args:
        registry: Optional prompt registry
        label: Optional label filter when using registry

    Returns:
        PromptTemplate: Template with a single {reviews} variable
    """
    if registry is not None and registry.is_enabled:
        try:
            prompt = registry.get_langchain_prompt(SUMMARY_PROMPT_NAME, label=label)
        except Exception as e:
            logger.warning(
                "Registry fetch failed, using local template: name=%s error=%s",
                SUMMARY_PROMPT_NAME, e,
            )
            prompt = None
        if prompt is not None:
            logger.debug("Using prompt from registry: name=%s", SUMMARY_PROMPT_NAME)
            return prompt

    return REVIEW_SUMMARY_PROMPT
