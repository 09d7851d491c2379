"""Allow ``python -m resume_extractor_ai``."""

from resume_extractor_ai.cli import app

if __name__ == "__main__":
    app()
