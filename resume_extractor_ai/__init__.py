"""Resume Extractor AI: turn a resume document into a structured record with one LLM call."""

from resume_extractor_ai.agents.extractor_agent import ExtractorAgent, run_extractor_agent
from resume_extractor_ai.schemas.extraction import ExtractionError, ExtractionResult

__version__ = "0.1.0"

__all__ = ["ExtractorAgent", "run_extractor_agent", "ExtractionResult", "ExtractionError"]
