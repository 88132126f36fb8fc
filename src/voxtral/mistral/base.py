from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Optional, Protocol, Union

from voxtral import config

from .types import ModelDescriptor, TranscriptionResult

AudioPath = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class ClientSettings:
    """Per-client model/language selection and endpoint.

    Passed explicitly to the client; nothing is read from global user state.
    """

    transcription_model: str = config.DEFAULT_TRANSCRIPTION_MODEL
    chat_model: str = config.DEFAULT_CHAT_MODEL
    language: Optional[str] = None
    base_url: str = config.MISTRAL_API_BASE_URL
    api_key_env: str = config.MISTRAL_API_KEY_ENV


def resolve_transcription_model(stored: Optional[str]) -> str:
    """Return ``stored`` if it looks like a transcription model id, else the default."""

    if stored and "voxtral" in stored:
        return stored
    return config.DEFAULT_TRANSCRIPTION_MODEL


class TranscriptionService(Protocol):
    """Interface the app talks to; ``MistralClient`` is the implementation."""

    async def transcribe(
        self,
        audio_path: AudioPath,
        language: Optional[str] = None,
        model: Optional[str] = None,
    ) -> TranscriptionResult:
        raise NotImplementedError

    async def run_prompt(
        self, transcript: str, system_prompt: str, model: Optional[str] = None
    ) -> str:
        raise NotImplementedError

    async def list_chat_models(self) -> list[ModelDescriptor]:
        raise NotImplementedError

    async def list_transcription_models(self) -> list[ModelDescriptor]:
        raise NotImplementedError

    async def validate_api_key(self) -> bool:
        raise NotImplementedError
