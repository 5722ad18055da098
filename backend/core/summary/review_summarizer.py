"""
Gemini review summarizer.

Turns an album's reviews into a short natural-language digest. The
summarizer never raises: an empty review list and any model failure map to
fixed user-facing messages.

Dependencies: langchain_google_genai, langchain_core, backend.core.summary
System role: Generative-text client for album review summaries
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.configs.summary import SummarySettings
from backend.core.exceptions import SummaryGenerationError
from backend.core.summary.summary_prompt import (
    get_summary_prompt,
    register_summary_prompt,
)
from backend.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)

NO_REVIEWS_MESSAGE = "No reviews available yet. Be the first to review this album!"
GENERATION_FAILED_MESSAGE = "Unable to generate review summary at this time."
LOAD_FAILED_MESSAGE = "Unable to load review summary at this time."


@dataclass(frozen=True)
class SummaryResult:
    """
    Outcome of a summary request.

    Attributes:
        summary: Model text or one of the fixed fallback messages
        review_count: Number of reviews considered
        generated: True only when the text came from the model
    """

    summary: str
    review_count: int
    generated: bool


def _review_field(review: Any, name: str) -> Any:
    if isinstance(review, Mapping):
        return review.get(name)
    return getattr(review, name, None)


def format_reviews(reviews: Sequence[Any]) -> str:
    """
    Render reviews as "Rating: X/5" / "Review: ..." blocks separated by blank lines.

    Accepts ORM rows, pydantic models or plain dicts carrying
    `rating` and `text`.
    """
    blocks = []
    for review in reviews:
        rating = _review_field(review, "rating")
        text = _review_field(review, "text") or ""
        blocks.append(f"Rating: {rating}/5\nReview: {text}")
    return "\n\n".join(blocks)


def _response_text(content: Any) -> str:
    """Flatten AIMessage content (plain string or list of parts) to text."""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, Mapping) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts).strip()
    return ""


class ReviewSummarizer:
    """
    Summarizes album reviews with Gemini.

    The chat model is created lazily on first use so a missing
    GOOGLE_API_KEY surfaces as the fallback message, not a startup error.
    """

    def __init__(
        self,
        model: BaseChatModel | None = None,
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.3,
        timeout: float = 30.0,
        prompt_registry: PromptRegistry | None = None,
        prompt_label: str | None = None,
    ) -> None:
        """
        Initialize summarizer.

        Args:
            model: Pre-built chat model (tests); Gemini is built lazily when None
            model_id: Gemini model identifier
            temperature: Sampling temperature
            timeout: Request timeout in seconds
            prompt_registry: Optional Langfuse registry for versioned prompts
            prompt_label: Label to fetch from the registry
        """
        self._model = model
        self._model_id = model_id
        self._temperature = temperature
        self._timeout = timeout
        self._prompt_registry = prompt_registry
        self._prompt_label = prompt_label

        if prompt_registry is not None:
            try:
                register_summary_prompt(
                    prompt_registry,
                    model_id=model_id,
                    temperature=temperature,
                    timeout=timeout,
                    labels=[prompt_label] if prompt_label else None,
                )
            except Exception as e:
                logger.warning("Summary prompt registration failed: %s", e)

    @classmethod
    def from_settings(
        cls,
        settings: SummarySettings,
        prompt_registry: PromptRegistry | None = None,
    ) -> "ReviewSummarizer":
        """Build a summarizer from summary settings."""
        return cls(
            model_id=settings.model,
            temperature=settings.temperature,
            timeout=settings.timeout,
            prompt_registry=prompt_registry if settings.use_prompt_registry else None,
            prompt_label=settings.prompt_label,
        )

    def _get_model(self) -> BaseChatModel:
        if self._model is None:
            self._model = ChatGoogleGenerativeAI(
                model=self._model_id,
                temperature=self._temperature,
                timeout=self._timeout,
            )
        return self._model

    async def _generate(self, reviews: Sequence[Any]) -> str:
        """
        Call the model once.

        Raises:
            SummaryGenerationError: If the call fails or returns no text
        """
        prompt = get_summary_prompt(self._prompt_registry, label=self._prompt_label)
        try:
            text = prompt.format(reviews=format_reviews(reviews))
            response = await self._get_model().ainvoke([HumanMessage(content=text)])
        except Exception as e:
            raise SummaryGenerationError(
                "Summary model call failed",
                details={"error": str(e), "model": self._model_id},
            ) from e

        summary = _response_text(response.content)
        if not summary:
            raise SummaryGenerationError(
                "Summary model returned an empty response",
                details={"model": self._model_id},
            )
        return summary

    async def summarize(self, reviews: Sequence[Any]) -> SummaryResult:
        """
        Summarize reviews.

        Args:
            reviews: Reviews carrying `rating` and `text`

        Returns:
            SummaryResult: Never raises; failures become fallback messages
        """
        count = len(reviews)
        if count == 0:
            return SummaryResult(summary=NO_REVIEWS_MESSAGE, review_count=0, generated=False)

        try:
            summary = await self._generate(reviews)
        except SummaryGenerationError as e:
            logger.error(
                "Review summary generation failed",
                extra={"review_count": count, "error": str(e)},
            )
            return SummaryResult(
                summary=GENERATION_FAILED_MESSAGE,
                review_count=count,
                generated=False,
            )

        logger.info(
            "Review summary generated",
            extra={"review_count": count, "summary_length": len(summary)},
        )
        return SummaryResult(summary=summary, review_count=count, generated=True)
