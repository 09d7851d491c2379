"""Request, instruction and result schemas of the extraction pipeline."""

import copy
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class InstructionSet(BaseModel):
    """System guidance plus invocation parameters; built once, shared by every request."""

    model_config = ConfigDict(frozen=True)

    system_prompt: str = Field(..., min_length=1, description="System-role instruction text")
    model: str = Field(..., min_length=1, description="Target model identifier")
    temperature: float = Field(default=0.0, ge=0.0, description="Sampling temperature (pinned to minimum)")
    max_output_tokens: int = Field(default=4096, gt=0, description="Upper bound on generated tokens")
    enforce_structured_output: bool = Field(default=True, description="Ask the backend for a single JSON object")


class ExtractionRequest(BaseModel):
    """One extraction request: literal resume text or a path to a PDF/DOCX document."""

    text: Optional[StrictStr] = Field(default=None, description="Full document content")
    file_path: Optional[StrictStr] = Field(default=None, description="Path resolved by the text acquisition adapter")


class DecodeFailure(BaseModel):
    """Marker for model output that could not be decoded into a JSON object."""

    model_config = ConfigDict(frozen=True)

    error: str = Field(..., description="Parser diagnostic")
    raw_text: str = Field(..., description="Model output exactly as received")


class ExtractionResult(BaseModel):
    """
    Per-request output of the Extractor Agent.
    Fields cannot be reassigned; structured_data is a deep copy taken at construction,
    detached from the decoder output it was built from.
    """

    model_config = ConfigDict(frozen=True)

    raw_text: str = Field(..., description="Text the prompt was built from")
    # left_to_right: a decoded dict that happens to carry "error" and "raw_text" keys stays data
    structured_data: Union[Dict[str, Any], DecodeFailure] = Field(
        ..., union_mode="left_to_right", description="Decoded record, or the decode failure marker"
    )
    extraction_status: Literal["completed", "failed"]
    confidence_score: float = Field(..., ge=0.0, le=1.0)

    @field_validator("structured_data", mode="before")
    @classmethod
    def _detach(cls, value: Any) -> Any:
        return copy.deepcopy(value) if isinstance(value, dict) else value


class ExtractionError(BaseModel):
    """Terminal error for a request that was aborted before a result could be composed."""

    model_config = ConfigDict(frozen=True)

    error: str
