"""Extract plain text from resume documents (PDF, DOCX) on disk or in memory."""

import re
import unicodedata
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

import pdfplumber
from docx import Document

from resume_extractor_ai.config import MAX_CV_CHARS, SUPPORTED_EXTENSIONS
from resume_extractor_ai.utils.errors import AcquisitionError
from resume_extractor_ai.utils.logger import get_logger

logger = get_logger(__name__)

TRUNCATION_MARKER = "\n\n[Content truncated.]"

Source = Union[str, Path, BinaryIO]


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) so accented names survive the round trip."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def clean_cv_text(text: str, max_chars: int = MAX_CV_CHARS) -> str:
    """Remove excessive whitespace, normalize unicode and cap length."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars] + TRUNCATION_MARKER
    return t


def _extract_pdf(source: Source) -> str:
    with pdfplumber.open(source) as pdf:
        parts = []
        for page in pdf.pages:
            ptext = page.extract_text()
            if ptext:
                parts.append(ptext)
        return "\n\n".join(parts)


def _extract_docx(source: Source) -> str:
    doc = Document(source)
    return "\n\n".join(p.text for p in doc.paragraphs if p.text.strip())


def _extension(name: str) -> str:
    ext = Path((name or "").strip()).suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise AcquisitionError(
            f"Unsupported file type: {name!r} (expected one of {', '.join(SUPPORTED_EXTENSIONS)})"
        )
    return ext


def _convert(source: Source, ext: str, label: str) -> str:
    converter = _extract_pdf if ext == ".pdf" else _extract_docx
    try:
        raw = converter(source)
    except Exception as e:
        # pdfplumber / python-docx raise a wide range of parser errors
        logger.exception("Text extraction failed for %s", label)
        raise AcquisitionError(f"Could not read {label}: {e}") from e

    text = clean_cv_text(raw)
    if not text:
        raise AcquisitionError(f"No extractable text in {label}")
    return text


def extract_plain_text(reference: Union[str, Path]) -> str:
    """
    Resolve a document path into cleaned plain text.
    Raises AcquisitionError if the file is missing, unsupported, unreadable or empty.
    """
    path = Path(reference)
    try:
        exists = path.is_file()
    except OSError as e:
        raise AcquisitionError(f"Could not access {reference}: {e}") from e
    if not exists:
        raise AcquisitionError(f"File not found at path: {reference}")
    ext = _extension(path.name)
    logger.info("Extracting text from %s", path)
    text = _convert(str(path), ext, str(path))
    logger.info("Extracted %s characters from %s", len(text), path.name)
    return text


def extract_text_from_file(file_bytes: bytes, filename: str) -> str:
    """
    Extract and clean text from an uploaded CV file (PDF or DOCX).
    File is read from bytes in memory; no disk write.
    """
    ext = _extension(filename)
    if not file_bytes:
        raise AcquisitionError(f"Uploaded file {filename!r} is empty")
    return _convert(BytesIO(file_bytes), ext, filename)
