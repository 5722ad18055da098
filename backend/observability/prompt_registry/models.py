"""
Generation settings stored with each prompt version.

Dependencies: pydantic
System role: Records which Gemini settings a registered prompt was written for
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelConfig(BaseModel):
    """
    Gemini settings attached to a prompt version in Langfuse.

    Unset fields are left out of the stored config, so a version only
    records what was actually pinned.
    """

    model_config = ConfigDict(protected_namespaces=())

    model: str = Field(description="Gemini model identifier, e.g. gemini-2.5-flash")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_output_tokens: int | None = Field(default=None, gt=0)
    timeout: float | None = Field(default=None, gt=0, description="Request timeout in seconds")

    def to_langfuse_config(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
