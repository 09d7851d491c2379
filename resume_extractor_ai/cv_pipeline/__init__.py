"""CV pipeline: document text acquisition (PDF/DOCX) and the extraction prompt."""

from .prompts import build_extraction_prompt, build_instruction_set
from .text_extractor import extract_plain_text, extract_text_from_file

__all__ = [
    "build_extraction_prompt",
    "build_instruction_set",
    "extract_plain_text",
    "extract_text_from_file",
]
