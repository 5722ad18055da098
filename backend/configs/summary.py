"""
Review summary generation settings.

Model selection for the Gemini review summarizer. The API key itself is
read by langchain-google-genai from GOOGLE_API_KEY.

Dependencies: pydantic_settings
System role: Generative-text configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SummarySettings(BaseSettings):
    """Gemini summarizer configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SUMMARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model used for review summaries",
    )
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for summaries",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )
    use_prompt_registry: bool = Field(
        default=False,
        description="Fetch the summary prompt from the Langfuse registry",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Langfuse label to fetch when the registry is used",
    )
