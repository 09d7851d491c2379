"""Fixed instruction set and prompt template for resume extraction."""

import json

from resume_extractor_ai.config import (
    LLM_MAX_OUTPUT_TOKENS,
    LLM_TEMPERATURE,
    MODEL_NAME,
    TARGET_LANGUAGE,
)
from resume_extractor_ai.schemas.extraction import InstructionSet
from resume_extractor_ai.schemas.resume import RESUME_RECORD_SHAPE

RESUME_EXTRACTION_SYSTEM_PROMPT = """You are a highly detail-oriented Data Extractor.
Your task is to extract all significant data from the provided resume text, which may be written in any language.
You must TRANSLATE ALL TEXTUAL CONTENT (summary, descriptions, degrees) into {language} and transform it into a single, comprehensive JSON object.
You must strictly adhere to the requested JSON structure and provide ONLY the JSON object."""

RESUME_EXTRACTION_TEMPLATE = """Transform the following raw resume text into a single JSON object.

Your JSON object must contain these keys:
{shape}

Raw Resume Text:
---
{raw_text}
---

Return ONLY the JSON object."""

NO_CONTENT_SENTINEL = "No valid resume text or file path provided."


def build_system_prompt(language: str = TARGET_LANGUAGE) -> str:
    return RESUME_EXTRACTION_SYSTEM_PROMPT.format(language=language.upper())


def build_instruction_set(
    language: str = TARGET_LANGUAGE,
    model: str = MODEL_NAME,
) -> InstructionSet:
    """Instruction set for the extractor; temperature and output cap come from config."""
    return InstructionSet(
        system_prompt=build_system_prompt(language),
        model=model,
        temperature=LLM_TEMPERATURE,
        max_output_tokens=LLM_MAX_OUTPUT_TOKENS,
        enforce_structured_output=True,
    )


def build_extraction_prompt(raw_text: str) -> str:
    """Render the user prompt: target field shape, then the resume text verbatim."""
    # str.replace, not format(): resume text may contain braces
    shape = json.dumps(RESUME_RECORD_SHAPE, indent=4)
    return RESUME_EXTRACTION_TEMPLATE.replace("{shape}", shape).replace("{raw_text}", raw_text)
