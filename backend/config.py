"""Configuration management for the Formal Editor backend."""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(value):
    """Parse an optional float setting; empty or 'none' disables it."""
    if value is None or value.strip().lower() in ("", "none"):
        return None
    return float(value)


# Webhook Configuration
WEBHOOK_URL = os.getenv(
    "WEBHOOK_URL",
    "https://rasp.nthang91.io.vn/webhook/translate-formal"
)
WEBHOOK_TIMEOUT = _optional_float(os.getenv("WEBHOOK_TIMEOUT", "120"))  # seconds
WEBHOOK_AUTH_TOKEN = os.getenv("WEBHOOK_AUTH_TOKEN")

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # text | json

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:5173"
).split(",")

# Chunking Configuration
MAX_WORDS_PER_CHUNK = int(os.getenv("MAX_WORDS_PER_CHUNK", "300"))
CHUNK_SEPARATOR = "\n\n"

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
