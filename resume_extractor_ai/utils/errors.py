"""Exceptions that abort an extraction request before a result can be composed."""

from typing import Any, Dict, Optional


class ResumeExtractorError(Exception):
    """Base exception for all Resume Extractor errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InputFormatError(ResumeExtractorError):
    """The request payload is not a well-formed extraction request."""


class AcquisitionError(ResumeExtractorError):
    """Document-to-text conversion failed (missing file, unsupported or unreadable format)."""


class InvocationError(ResumeExtractorError):
    """The generation backend call failed (network, auth, quota, backend error)."""
