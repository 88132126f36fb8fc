import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper() or "INFO"

# Mistral API
MISTRAL_API_KEY_ENV = "MISTRAL_API_KEY"
MISTRAL_API_BASE_URL = os.getenv("MISTRAL_API_BASE_URL", "https://api.mistral.ai/v1")

# Model defaults used when the caller does not pick one
DEFAULT_TRANSCRIPTION_MODEL = "voxtral-mini-latest"
DEFAULT_CHAT_MODEL = "mistral-small-latest"

# Uploaded recordings are always AAC in an MP4 container
AUDIO_MIME_TYPE = "audio/mp4"
