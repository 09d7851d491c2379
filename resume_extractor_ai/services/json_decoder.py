"""Recover a JSON object from LLM output that may carry prose or markdown fences.

Decoding runs a fixed sequence of stages and stops at the first that applies:

1. trim surrounding whitespace;
2. if the text opens with a ``` fence, keep only the first fenced segment and
   drop a leading language tag such as ``json``;
3. slice from the first ``{`` to the last ``}`` when both exist in that order;
4. otherwise keep the fence-stripped text as is;
5. parse the candidate with the strict ``json`` parser.

There is no repair step: when stage 5 fails, a :class:`DecodeFailure` holding
the parser diagnostic and the untouched input is returned. The brace slice is
a coarse pre-filter, not a tokenizer, so a ``}`` inside a trailing string
literal can still produce a wrong slice.
"""

import json
import re
from typing import Any, Dict, Optional, Union

from resume_extractor_ai.schemas.extraction import DecodeFailure

FENCE = "```"

# A bare word right after the opening fence, e.g. ```json or ```JSON5
_LANGUAGE_TAG = re.compile(r"^[A-Za-z][A-Za-z0-9_+.-]*(?=\s|[{\[]|$)")

DecodedValue = Union[Dict[str, Any], DecodeFailure]


def _strip_fence(text: str) -> str:
    """Return the first fenced segment without its language tag, or text unchanged."""
    if not text.startswith(FENCE):
        return text
    parts = text.split(FENCE)
    if len(parts) < 2:
        return text
    segment = parts[1].strip()
    return _LANGUAGE_TAG.sub("", segment, count=1).strip()


def _slice_outer_braces(text: str) -> Optional[str]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or start >= end:
        return None
    return text[start : end + 1]


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _parse_strict(candidate: str) -> Dict[str, Any]:
    value = json.loads(candidate, parse_constant=_reject_constant)
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value


def decode_json_object(text: Optional[str]) -> DecodedValue:
    """
    Decode the JSON object embedded in model output.
    Returns the parsed dict, or a DecodeFailure whose raw_text is the original input.
    """
    original = text or ""
    candidate = _strip_fence(original.strip())
    candidate = _slice_outer_braces(candidate) or candidate
    try:
        return _parse_strict(candidate)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError subclass
        return DecodeFailure(error=f"Invalid JSON content: {e}", raw_text=original)


def is_decode_failure(value: DecodedValue) -> bool:
    """True when value is the failure marker rather than decoded data."""
    return isinstance(value, DecodeFailure)
