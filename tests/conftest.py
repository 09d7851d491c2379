"""
Shared fixtures: an in-process stand-in for the chat-completions backend.
"""

from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

from resume_extractor_ai.agents.extractor_agent import ExtractorAgent
from resume_extractor_ai.services.llm_client import LLMClient

Responder = Union[str, None, Callable[[Dict[str, Any]], str]]


class FakeChatBackend:
    """Mimics ``AsyncOpenAI().chat.completions.create`` and records every request."""

    def __init__(
        self,
        content: Responder = "",
        finish_reason: str = "stop",
        error: Optional[Exception] = None,
        no_choices: bool = False,
    ) -> None:
        self.content = content
        self.finish_reason = finish_reason
        self.error = error
        self.no_choices = no_choices
        self.calls: List[Dict[str, Any]] = []
        self.chat = SimpleNamespace(completions=self)

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.no_choices:
            return SimpleNamespace(choices=[])
        content = self.content(kwargs) if callable(self.content) else self.content
        choice = SimpleNamespace(
            message=SimpleNamespace(role="assistant", content=content),
            finish_reason=self.finish_reason,
        )
        return SimpleNamespace(choices=[choice])


@pytest.fixture
def fake_backend() -> Callable[..., FakeChatBackend]:
    """Factory: ``fake_backend(content=..., error=...)``."""
    return FakeChatBackend


@pytest.fixture
def make_agent() -> Callable[..., ExtractorAgent]:
    """Build an ExtractorAgent on top of a FakeChatBackend."""

    def _make(backend: FakeChatBackend, text_extractor: Optional[Callable[[str], str]] = None) -> ExtractorAgent:
        kwargs = {"text_extractor": text_extractor} if text_extractor else {}
        return ExtractorAgent(LLMClient(backend), **kwargs)

    return _make


@pytest.fixture
def resume_json() -> str:
    return (
        '{"personal_info": {"name": "Anna Berg", "email": "anna@example.se", "phone": "+46 70 123 45 67"}, '
        '"summary": "Backend engineer with eight years of experience.", '
        '"work_experience": [{"title": "Senior Developer", "company": "Spotify", '
        '"duration": "2019 - present", "description": "Built payment services."}], '
        '"education": [{"degree": "MSc Computer Science", "institution": "KTH", "year": "2016"}], '
        '"technical_skills": ["Python", "Kafka"], "certifications": ["AWS SAA"]}'
    )
