"""Assistant service configuration — loads from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).resolve().parent
CONTENT_DIR = Path(
    os.getenv("ASSISTANT_CONTENT_DIR", str(BASE_DIR / "content" / "assistant_pages"))
)

# Assistant API
PORT = int(os.getenv("ASSISTANT_PORT", "5080"))
HOST = os.getenv("ASSISTANT_HOST", "127.0.0.1")
LOG_LEVEL = os.getenv("ASSISTANT_LOG_LEVEL", "INFO")

# Help content: "markdown" (converted on read) or "html" (served as-is)
CONTENT_FORMAT = os.getenv("ASSISTANT_CONTENT_FORMAT", "markdown")

# Question answering: "openai" or "mock"
ANSWER_BACKEND = os.getenv("ASSISTANT_ANSWER_BACKEND", "openai")

# OpenAI chat completion
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("ASSISTANT_OPENAI_MODEL", "gpt-3.5-turbo")
OPENAI_MAX_TOKENS = int(os.getenv("ASSISTANT_OPENAI_MAX_TOKENS", "500"))
OPENAI_TEMPERATURE = float(os.getenv("ASSISTANT_OPENAI_TEMPERATURE", "0.7"))
OPENAI_TIMEOUT = float(os.getenv("ASSISTANT_OPENAI_TIMEOUT", "30"))

# Version
VERSION = "1.0.0"
