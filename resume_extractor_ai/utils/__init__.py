"""Utility exports."""

from .errors import AcquisitionError, InputFormatError, InvocationError, ResumeExtractorError
from .logger import get_logger

__all__ = [
    "get_logger",
    "ResumeExtractorError",
    "InputFormatError",
    "AcquisitionError",
    "InvocationError",
]
