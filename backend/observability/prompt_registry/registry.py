"""
Langfuse prompt registry for versioned prompt management.

Registers LangChain text templates as Langfuse prompt versions together
with their model configuration, and fetches them back as templates.
Constructed explicitly from settings; inactive without Langfuse keys.

Dependencies: langfuse, langchain_core, backend.configs
System role: Prompt version control and retrieval
"""

import logging
from typing import TYPE_CHECKING

from langchain_core.prompts import PromptTemplate
from langfuse import Langfuse

from backend.configs.observability import ObservabilitySettings
from backend.observability.prompt_registry.converter import (
    convert_text_template,
    to_langchain_variables,
)
from backend.observability.prompt_registry.models import ModelConfig

if TYPE_CHECKING:
    from langfuse.model import TextPromptClient

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Registry for Langfuse text prompts.

    Example:
        >>> registry = PromptRegistry(get_settings().observability)
        >>> registry.register_prompt(
        ...     name="album-review-summary",
        ...     template=PromptTemplate.from_template("Summarize {reviews}"),
        ...     config=ModelConfig(model="gemini-2.5-flash", temperature=0.3),
        ...     labels=["production"],
        ... )
    """

    def __init__(
        self,
        settings: ObservabilitySettings,
        client: Langfuse | None = None,
    ) -> None:
        """
        Initialize registry.

        Args:
            settings: Langfuse settings
            client: Pre-built Langfuse client (tests); built from settings when None
        """
        self._client: Langfuse | None = None
        self._enabled = False

        if not settings.enabled:
            logger.info("Langfuse disabled, prompt registry inactive")
            return

        if client is None and not (settings.public_key and settings.secret_key):
            logger.info("Langfuse keys not configured, prompt registry inactive")
            return

        self._client = client or Langfuse(
            public_key=settings.public_key,
            secret_key=settings.secret_key,
            host=settings.host,
        )
        self._enabled = True
        logger.info("Prompt registry initialized: host=%s", settings.host)

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_prompt(
        self,
        name: str,
        template: PromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> "TextPromptClient | None":
        """
        Register or version a text prompt in Langfuse.

        Langfuse adds a new version when the name already exists.

        Args:
            name: Unique prompt identifier
            template: LangChain PromptTemplate
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production", "staging"])

        Returns:
            Created Langfuse prompt, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, skipping registration: name=%s", name)
            return None

        labels = labels or []
        prompt = self._client.create_prompt(
            name=name,
            type="text",
            prompt=convert_text_template(template),
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            "Registered text prompt: name=%s version=%s labels=%s",
            name, prompt.version, labels,
        )
        return prompt

    def get_langchain_prompt(
        self,
        name: str,
        label: str | None = None,
    ) -> PromptTemplate | None:
        """
        Fetch a text prompt from Langfuse as a LangChain template.

        Args:
            name: Prompt identifier
            label: Optional label filter (e.g., "production")

        Returns:
            PromptTemplate with the Langfuse prompt attached as metadata,
            or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, cannot fetch: name=%s", name)
            return None

        kwargs: dict = {"name": name, "type": "text"}
        if label:
            kwargs["label"] = label
        prompt = self._client.get_prompt(**kwargs)

        template = PromptTemplate.from_template(to_langchain_variables(prompt.prompt))
        template.metadata = {"langfuse_prompt": prompt}
        logger.debug("Fetched prompt: name=%s version=%s", name, prompt.version)
        return template
