"""Extractor Agent: acquire resume text, prompt the LLM once, decode, annotate the result."""

import asyncio
import json
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError

from resume_extractor_ai.config import CONFIDENCE_COMPLETED, CONFIDENCE_FAILED
from resume_extractor_ai.cv_pipeline.prompts import (
    NO_CONTENT_SENTINEL,
    build_extraction_prompt,
    build_instruction_set,
)
from resume_extractor_ai.cv_pipeline.text_extractor import extract_plain_text
from resume_extractor_ai.schemas.extraction import (
    ExtractionError,
    ExtractionRequest,
    ExtractionResult,
    InstructionSet,
)
from resume_extractor_ai.services.json_decoder import (
    DecodedValue,
    decode_json_object,
    is_decode_failure,
)
from resume_extractor_ai.services.llm_client import LLMClient
from resume_extractor_ai.utils.errors import (
    AcquisitionError,
    InputFormatError,
    InvocationError,
)
from resume_extractor_ai.utils.logger import get_logger

logger = get_logger(__name__)

RequestPayload = Union[ExtractionRequest, Mapping[str, Any], str, bytes]
AgentOutput = Union[ExtractionResult, ExtractionError]


def parse_request(payload: RequestPayload) -> ExtractionRequest:
    """
    Accept a request object, a mapping, or its JSON encoding.
    Raises InputFormatError for anything that is not a well-formed request.
    """
    if isinstance(payload, ExtractionRequest):
        return payload
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload or "{}")
        except ValueError as e:
            raise InputFormatError(f"request is not valid JSON: {e}") from e
    if not isinstance(payload, Mapping):
        raise InputFormatError(f"request must be a JSON object, got {type(payload).__name__}")
    try:
        return ExtractionRequest.model_validate(dict(payload))
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InputFormatError(f"request fields are malformed: {fields}") from e


class ExtractorAgent:
    """
    Turns one extraction request into one ExtractionResult (or ExtractionError).
    Holds only read-only configuration, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        llm: LLMClient,
        instruction_set: Optional[InstructionSet] = None,
        text_extractor: Callable[[str], str] = extract_plain_text,
    ) -> None:
        self.llm = llm
        self.instruction_set = instruction_set or build_instruction_set()
        self.text_extractor = text_extractor

    @classmethod
    def from_config(cls, instruction_set: Optional[InstructionSet] = None) -> "ExtractorAgent":
        """Agent wired to the configured backend; raises InvocationError without an API key."""
        instruction_set = instruction_set or build_instruction_set()
        return cls(LLMClient.from_instruction_set(instruction_set), instruction_set)

    def acquire_text(self, request: ExtractionRequest) -> str:
        if request.text:
            logger.info("Using text directly from request (%s chars)", len(request.text))
            return request.text
        if request.file_path:
            logger.info("Extracting text from document: %s", request.file_path)
            text = self.text_extractor(request.file_path)
            logger.info("Document extraction complete")
            return text
        logger.warning("No text or file path provided; continuing with placeholder text")
        return NO_CONTENT_SENTINEL

    def compose(self, raw_text: str, decoded: DecodedValue) -> ExtractionResult:
        if is_decode_failure(decoded):
            logger.warning("JSON decoding failed: %s", decoded.error)
            return ExtractionResult(
                raw_text=raw_text,
                structured_data=decoded,
                extraction_status="failed",
                confidence_score=CONFIDENCE_FAILED,
            )
        return ExtractionResult(
            raw_text=raw_text,
            structured_data=decoded,
            extraction_status="completed",
            confidence_score=CONFIDENCE_COMPLETED,
        )

    async def run(self, payload: RequestPayload) -> AgentOutput:
        """Run the pipeline for one request. Only input, acquisition and backend errors abort it."""
        logger.info("Extractor: processing resume")
        try:
            request = parse_request(payload)
        except InputFormatError as e:
            logger.error("Invalid input format: %s", e)
            return ExtractionError(error=f"Invalid input format to ExtractorAgent: {e.message}")

        try:
            raw_text = self.acquire_text(request)
        except AcquisitionError as e:
            logger.error("Document extraction failed: %s", e)
            return ExtractionError(error=f"PDF Extraction failed: {e.message}")

        prompt = build_extraction_prompt(raw_text)
        try:
            output = await self.llm.invoke(
                self.instruction_set.system_prompt,
                prompt,
                self.instruction_set.enforce_structured_output,
            )
        except InvocationError as e:
            logger.error("Extractor failed due to model API error: %s", e)
            return ExtractionError(error=f"API Failure: {e.message}")

        result = self.compose(raw_text, decode_json_object(output))
        logger.info(
            "Extractor finished: status=%s confidence=%s",
            result.extraction_status,
            result.confidence_score,
        )
        return result


def run_extractor_agent(payload: RequestPayload, agent: Optional[ExtractorAgent] = None) -> AgentOutput:
    """
    Run the Extractor Agent from sync code (CLI, scripts).
    Builds an agent from config when none is given; a missing API key becomes an ExtractionError.
    """
    if agent is None:
        try:
            agent = ExtractorAgent.from_config()
        except InvocationError as e:
            logger.error("%s", e)
            return ExtractionError(error=f"API Failure: {e.message}")
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(agent.run(payload))
    finally:
        loop.close()
