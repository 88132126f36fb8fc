from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import httpx

from voxtral import config
from voxtral import logger as logger_mod

from ._auth import EnvSecretStore, SecretStore, resolve_api_key
from ._json import CHAT_SCHEMA, MODELS_SCHEMA, TRANSCRIPTION_SCHEMA, decode
from ._multipart import MultipartBody
from ._retry import RequestConfiguration, Sleep, execute_with_retry
from .base import AudioPath, ClientSettings, TranscriptionService
from .errors import ApiError, EmptyResult
from .models import chat_models, transcription_models
from .templates import PromptTemplate
from .types import ChatMessage, ModelDescriptor, TranscriptionResult

log = logger_mod.get_logger()


def _wants_language(language: Optional[str]) -> bool:
    return bool(language) and language != "auto"


class MistralClient(TranscriptionService):
    """Async client for the Mistral transcription, chat and models endpoints.

    Every public coroutine is self-contained: it resolves the credential,
    builds one request, runs it through the retry executor and decodes the
    payload. The instance only holds immutable collaborators, so calls can
    run concurrently.

    Usage:

        async with MistralClient(ClientSettings(language="fr")) as client:
            result = await client.transcribe("memo.m4a")
            summary = await client.run_prompt(result.text, "Summarize.")
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        secret_store: SecretStore | None = None,
        api_key: Optional[str] = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self._settings = settings or ClientSettings()
        self._secrets = secret_store or EnvSecretStore(self._settings.api_key_env)
        self._api_key_override = api_key
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient()
        self._sleep = sleep

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def __aenter__(self) -> "MistralClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        # An injected client belongs to the caller.
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Request builders
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._settings.base_url.rstrip('/')}/{path}"

    def _auth_headers(self) -> dict[str, str]:
        key = resolve_api_key(self._secrets, self._api_key_override)
        return {"Authorization": f"Bearer {key}"}

    def build_transcription_request(
        self,
        audio: bytes,
        filename: str,
        *,
        model: str,
        language: Optional[str] = None,
        boundary: Optional[str] = None,
    ) -> httpx.Request:
        headers = self._auth_headers()

        body = MultipartBody(boundary)
        body.add_field("model", model)
        if _wants_language(language):
            body.add_field("language", language)
        body.add_file("file", filename, config.AUDIO_MIME_TYPE, audio)

        headers["Content-Type"] = body.content_type
        return self._http.build_request(
            "POST",
            self._url("audio/transcriptions"),
            headers=headers,
            content=body.close(),
            timeout=RequestConfiguration.TRANSCRIPTION.timeout,
        )

    def build_chat_request(
        self, transcript: str, system_prompt: str, *, model: str
    ) -> httpx.Request:
        headers = self._auth_headers()
        headers["Content-Type"] = "application/json"

        payload = {
            "model": model,
            "messages": [
                ChatMessage(role="system", content=system_prompt).to_dict(),
                ChatMessage(role="user", content=transcript).to_dict(),
            ],
        }
        return self._http.build_request(
            "POST",
            self._url("chat/completions"),
            headers=headers,
            content=json.dumps(payload).encode("utf-8"),
            timeout=RequestConfiguration.DEFAULT.timeout,
        )

    def build_models_request(self) -> httpx.Request:
        return self._http.build_request(
            "GET",
            self._url("models"),
            headers=self._auth_headers(),
            timeout=RequestConfiguration.DEFAULT.timeout,
        )

    async def _execute(
        self,
        request: httpx.Request,
        *,
        context: str,
        retry: RequestConfiguration = RequestConfiguration.DEFAULT,
    ) -> bytes:
        return await execute_with_retry(
            lambda: self._http.send(request),
            context=context,
            retry=retry,
            sleep=self._sleep,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def transcribe(
        self,
        audio_path: AudioPath,
        language: Optional[str] = None,
        model: Optional[str] = None,
    ) -> TranscriptionResult:
        """Upload an audio file and return its transcript.

        ``language`` falls back to the settings; ``None``, ``""`` and
        ``"auto"`` all mean auto-detect.
        """

        # Fail fast on a missing key before touching the file.
        self._auth_headers()

        path = Path(audio_path)
        audio = await asyncio.to_thread(path.read_bytes)
        model = model or self._settings.transcription_model
        language = language if language is not None else self._settings.language

        log.info(
            f"Transcribing {path.name} ({len(audio)} bytes) with {model}, "
            f"language={language or 'auto'}"
        )
        request = self.build_transcription_request(
            audio, path.name, model=model, language=language
        )
        payload = await self._execute(
            request,
            context=f"transcribing {path.name}",
            retry=RequestConfiguration.TRANSCRIPTION,
        )

        data = decode(payload, TRANSCRIPTION_SCHEMA)
        return TranscriptionResult(text=data["text"], language=data.get("language"))

    async def run_prompt(
        self, transcript: str, system_prompt: str, model: Optional[str] = None
    ) -> str:
        model = model or self._settings.chat_model
        request = self.build_chat_request(transcript, system_prompt, model=model)
        payload = await self._execute(request, context=f"running prompt with {model}")

        data = decode(payload, CHAT_SCHEMA)
        choices = data["choices"]
        if not choices:
            raise EmptyResult()
        content = choices[0]["message"].get("content")
        if content is None:
            raise EmptyResult()
        return content

    async def run_template(
        self, transcript: str, template: PromptTemplate, model: Optional[str] = None
    ) -> str:
        log.debug(f"Running template {template.name!r}")
        return await self.run_prompt(transcript, template.system_prompt, model=model)

    async def _model_entries(self, context: str) -> list[dict[str, Any]]:
        payload = await self._execute(self.build_models_request(), context=context)
        return decode(payload, MODELS_SCHEMA)["data"]

    async def list_chat_models(self) -> list[ModelDescriptor]:
        entries = await self._model_entries("listing chat models")
        models = chat_models(entries)
        log.debug(f"{len(models)} chat models out of {len(entries)} listed")
        return models

    async def list_transcription_models(self) -> list[ModelDescriptor]:
        entries = await self._model_entries("listing transcription models")
        models = transcription_models(entries)
        log.debug(f"{len(models)} transcription models out of {len(entries)} listed")
        return models

    async def validate_api_key(self) -> bool:
        """True for a working key, False when the API answers 401.

        Any other failure propagates.
        """

        request = self.build_models_request()
        try:
            await self._execute(request, context="validating API key")
        except ApiError as e:
            if e.status_code == 401:
                return False
            raise
        return True
