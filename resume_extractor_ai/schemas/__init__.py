"""Schema exports."""

from .extraction import (
    DecodeFailure,
    ExtractionError,
    ExtractionRequest,
    ExtractionResult,
    InstructionSet,
)
from .resume import Education, PersonalInfo, ResumeRecord, WorkExperience

__all__ = [
    "DecodeFailure",
    "ExtractionError",
    "ExtractionRequest",
    "ExtractionResult",
    "InstructionSet",
    "ResumeRecord",
    "PersonalInfo",
    "WorkExperience",
    "Education",
]
