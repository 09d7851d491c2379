"""Agent exports."""

from .extractor_agent import ExtractorAgent, parse_request, run_extractor_agent

__all__ = ["ExtractorAgent", "parse_request", "run_extractor_agent"]
