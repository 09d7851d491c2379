"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode. Any OpenAI-compatible endpoint works; Groq by default.
LLM_API_KEY: str = os.getenv("GROQ_API_KEY") or os.getenv("OPENAI_API_KEY", "")
LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
MODEL_NAME: str = os.getenv("MODEL_NAME", "meta-llama/llama-4-scout-17b-16e-instruct")

# Generation settings (extraction wants reproducibility, not creativity)
LLM_TEMPERATURE: float = 0.0
LLM_MAX_OUTPUT_TOKENS: int = 4096
LLM_MAX_RETRIES: int = int(os.getenv("LLM_MAX_RETRIES", "0"))

# All textual content of the record is normalized into this language
TARGET_LANGUAGE: str = os.getenv("TARGET_LANGUAGE", "English")

# Text acquisition
SUPPORTED_EXTENSIONS: tuple = (".pdf", ".docx")
MAX_CV_CHARS: int = 50000

# Fixed confidence signal per extraction status
CONFIDENCE_COMPLETED: float = 0.95
CONFIDENCE_FAILED: float = 0.2

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
