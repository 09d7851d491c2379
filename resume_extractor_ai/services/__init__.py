"""Service exports."""

from .json_decoder import decode_json_object, is_decode_failure
from .llm_client import LLMClient, create_async_client

__all__ = [
    "LLMClient",
    "create_async_client",
    "decode_json_object",
    "is_decode_failure",
]
