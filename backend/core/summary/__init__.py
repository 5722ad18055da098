"""
Review summary generation.

Dependencies: langchain_google_genai, langchain_core
System role: Gemini-backed album review digests
"""

from backend.core.summary.review_summarizer import (
    GENERATION_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
    NO_REVIEWS_MESSAGE,
    ReviewSummarizer,
    SummaryResult,
    format_reviews,
)
from backend.core.summary.summary_prompt import (
    REVIEW_SUMMARY_PROMPT,
    SUMMARY_PROMPT_NAME,
    get_summary_prompt,
    register_summary_prompt,
)

__all__ = [
    "ReviewSummarizer",
    "SummaryResult",
    "format_reviews",
    "NO_REVIEWS_MESSAGE",
    "GENERATION_FAILED_MESSAGE",
    "LOAD_FAILED_MESSAGE",
    "REVIEW_SUMMARY_PROMPT",
    "SUMMARY_PROMPT_NAME",
    "get_summary_prompt",
    "register_summary_prompt",
]
