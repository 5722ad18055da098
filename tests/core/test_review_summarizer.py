"""Tests for the Gemini review summarizer."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from backend.configs.summary import SummarySettings
from backend.core.summary.review_summarizer import (
    GENERATION_FAILED_MESSAGE,
    NO_REVIEWS_MESSAGE,
    ReviewSummarizer,
    format_reviews,
)
from backend.core.summary.summary_prompt import (
    REVIEW_SUMMARY_PROMPT,
    SUMMARY_PROMPT_NAME,
    get_summary_prompt,
    register_summary_prompt,
)


@pytest.fixture
def reviews() -> list:
    return [
        {"rating": 5, "text": "Brilliant record"},
        SimpleNamespace(rating=2.0, text="Too long"),
    ]


@pytest.fixture
def mock_model() -> MagicMock:
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="Mostly positive."))
    return model


class TestFormatReviews:
    """Tests for prompt body rendering."""

    def test_blocks_joined_by_blank_line(self, reviews: list) -> None:
        assert format_reviews(reviews) == (
            "Rating: 5/5\nReview: Brilliant record\n\nRating: 2.0/5\nReview: Too long"
        )

    def test_missing_text_rendered_empty(self) -> None:
        assert format_reviews([{"rating": 3}]) == "Rating: 3/5\nReview: "


class TestSummarize:
    """Tests for summarize() outcomes."""

    @pytest.mark.asyncio
    async def test_no_reviews_skips_model(self, mock_model: MagicMock) -> None:
        summarizer = ReviewSummarizer(model=mock_model)

        result = await summarizer.summarize([])

        assert result.summary == NO_REVIEWS_MESSAGE
        assert result.review_count == 0
        assert result.generated is False
        mock_model.ainvoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_model_text_returned(self, mock_model: MagicMock, reviews: list) -> None:
        summarizer = ReviewSummarizer(model=mock_model)

        result = await summarizer.summarize(reviews)

        assert result.summary == "Mostly positive."
        assert result.review_count == 2
        assert result.generated is True

        messages = mock_model.ainvoke.call_args.args[0]
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)
        assert "Rating: 5/5\nReview: Brilliant record" in messages[0].content
        assert "Overall sentiment" in messages[0].content

    @pytest.mark.asyncio
    async def test_list_content_flattened(self, mock_model: MagicMock, reviews: list) -> None:
        mock_model.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Part one. "}, "Part two."]
        )
        summarizer = ReviewSummarizer(model=mock_model)

        result = await summarizer.summarize(reviews)

        assert result.summary == "Part one. Part two."

    @pytest.mark.asyncio
    async def test_model_error_returns_fallback(self, mock_model: MagicMock, reviews: list) -> None:
        mock_model.ainvoke.side_effect = RuntimeError("quota exceeded")
        summarizer = ReviewSummarizer(model=mock_model)

        result = await summarizer.summarize(reviews)

        assert result.summary == GENERATION_FAILED_MESSAGE
        assert result.review_count == 2
        assert result.generated is False

    @pytest.mark.asyncio
    async def test_empty_response_returns_fallback(self, mock_model: MagicMock, reviews: list) -> None:
        mock_model.ainvoke.return_value = AIMessage(content="   ")
        summarizer = ReviewSummarizer(model=mock_model)

        result = await summarizer.summarize(reviews)

        assert result.summary == GENERATION_FAILED_MESSAGE
        assert result.generated is False

    @pytest.mark.asyncio
    async def test_model_construction_failure_returns_fallback(self, reviews: list) -> None:
        with patch(
            "backend.core.summary.review_summarizer.ChatGoogleGenerativeAI",
            side_effect=ValueError("GOOGLE_API_KEY missing"),
        ):
            summarizer = ReviewSummarizer()
            result = await summarizer.summarize(reviews)

        assert result.summary == GENERATION_FAILED_MESSAGE

    def test_model_built_lazily_from_settings(self) -> None:
        settings = SummarySettings(model="gemini-test", temperature=0.1, timeout=5.0)
        with patch("backend.core.summary.review_summarizer.ChatGoogleGenerativeAI") as chat_cls:
            summarizer = ReviewSummarizer.from_settings(settings)
            chat_cls.assert_not_called()
            summarizer._get_model()

        chat_cls.assert_called_once_with(model="gemini-test", temperature=0.1, timeout=5.0)


class TestSummaryPrompt:
    """Tests for local and registry-served prompts."""

    def test_local_template_when_no_registry(self) -> None:
        assert get_summary_prompt(None) is REVIEW_SUMMARY_PROMPT
        assert REVIEW_SUMMARY_PROMPT.input_variables == ["reviews"]

    def test_local_template_when_registry_disabled(self) -> None:
        registry = MagicMock(is_enabled=False)
        assert get_summary_prompt(registry) is REVIEW_SUMMARY_PROMPT
        registry.get_langchain_prompt.assert_not_called()

    def test_registry_prompt_preferred(self) -> None:
        remote = MagicMock()
        registry = MagicMock(is_enabled=True)
        registry.get_langchain_prompt.return_value = remote

        assert get_summary_prompt(registry, label="production") is remote
        registry.get_langchain_prompt.assert_called_once_with(
            SUMMARY_PROMPT_NAME, label="production"
        )

    def test_registry_failure_falls_back(self) -> None:
        registry = MagicMock(is_enabled=True)
        registry.get_langchain_prompt.side_effect = ConnectionError("langfuse down")

        assert get_summary_prompt(registry) is REVIEW_SUMMARY_PROMPT

    def test_register_skipped_when_disabled(self) -> None:
        registry = MagicMock(is_enabled=False)
        register_summary_prompt(registry, model_id="m", temperature=0.3)
        registry.register_prompt.assert_not_called()

    def test_register_uses_model_config(self) -> None:
        registry = MagicMock(is_enabled=True)
        register_summary_prompt(registry, model_id="gemini-2.5-flash", temperature=0.3)

        kwargs = registry.register_prompt.call_args.kwargs
        assert kwargs["name"] == SUMMARY_PROMPT_NAME
        assert kwargs["template"] is REVIEW_SUMMARY_PROMPT
        assert kwargs["config"].model == "gemini-2.5-flash"
        assert kwargs["labels"] == ["development"]
