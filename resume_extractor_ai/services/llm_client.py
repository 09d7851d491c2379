"""Single-shot chat completion against an OpenAI-compatible backend (Groq by default)."""

from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from resume_extractor_ai.config import (
    LLM_API_KEY,
    LLM_BASE_URL,
    LLM_MAX_OUTPUT_TOKENS,
    LLM_MAX_RETRIES,
    LLM_TEMPERATURE,
    MODEL_NAME,
)
from resume_extractor_ai.schemas.extraction import InstructionSet
from resume_extractor_ai.utils.errors import InvocationError
from resume_extractor_ai.utils.logger import get_logger

logger = get_logger(__name__)


def create_async_client(
    api_key: str = LLM_API_KEY,
    base_url: str = LLM_BASE_URL,
    max_retries: int = LLM_MAX_RETRIES,
) -> AsyncOpenAI:
    """Build the backend client handle once at process start; callers pass it around."""
    if not api_key:
        raise InvocationError("GROQ_API_KEY (or OPENAI_API_KEY) is not set; cannot call the model backend")
    return AsyncOpenAI(api_key=api_key, base_url=base_url or None, max_retries=max_retries)


class LLMClient:
    """
    Sends one system instruction plus one user payload and returns the completion text.
    Sampling is pinned to the configured minimum temperature and output is capped at
    max_output_tokens. No retries or decoding happen here.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = MODEL_NAME,
        temperature: float = LLM_TEMPERATURE,
        max_output_tokens: int = LLM_MAX_OUTPUT_TOKENS,
    ) -> None:
        self._client = client
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @classmethod
    def from_instruction_set(
        cls, instruction_set: InstructionSet, client: Optional[AsyncOpenAI] = None
    ) -> "LLMClient":
        """Client configured with the instruction set's model, temperature and output cap."""
        return cls(
            client if client is not None else create_async_client(),
            model=instruction_set.model,
            temperature=instruction_set.temperature,
            max_output_tokens=instruction_set.max_output_tokens,
        )

    @staticmethod
    def build_messages(instructions: str, user_payload: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": instructions},
            {"role": "user", "content": user_payload},
        ]

    async def invoke(
        self,
        instructions: str,
        user_payload: str,
        enforce_structured_output: bool = False,
    ) -> str:
        """
        Return the first choice's text ("" when the backend sent none).
        Raises InvocationError on any transport, auth or backend error.
        """
        if not instructions or not user_payload:
            raise ValueError("instructions and user_payload must be non-empty")

        request: Dict[str, Any] = {
            "model": self.model,
            "messages": self.build_messages(instructions, user_payload),
            "temperature": self.temperature,
            "max_tokens": self.max_output_tokens,
        }
        if enforce_structured_output:
            request["response_format"] = {"type": "json_object"}

        logger.info("Querying model %s (structured_output=%s)", self.model, enforce_structured_output)
        try:
            response = await self._client.chat.completions.create(**request)
        except OpenAIError as e:
            logger.error("Model backend call failed: %s", e)
            raise InvocationError(str(e), {"model": self.model}) from e

        choice = response.choices[0] if response.choices else None
        if choice is None:
            logger.warning("Model %s returned no choices", self.model)
            return ""
        if getattr(choice, "finish_reason", None) == "length":
            logger.warning(
                "Model output hit max_tokens=%s and was truncated; decoding may fail",
                self.max_output_tokens,
            )
        message = getattr(choice, "message", None)
        return (message.content if message is not None else None) or ""
