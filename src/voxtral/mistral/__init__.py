"""Mistral API client core (transcription, chat, model discovery).

Design goals:
- One async client, one retry executor, a small closed error taxonomy.
- Callers get exactly one result or one ``MistralError`` per call.
- Wire formats match the public REST API byte for byte (multipart upload).
"""

from ._auth import EnvSecretStore, SecretStore, StaticSecretStore
from ._retry import RequestConfiguration
from .base import ClientSettings, TranscriptionService, resolve_transcription_model
from .client import MistralClient
from .errors import (
    ApiError,
    EmptyResult,
    InvalidResponseShape,
    MissingCredential,
    MistralError,
)
from .pricing import ModelPricing, ModelPricingService
from .templates import BUILT_IN_TEMPLATES, PromptTemplate
from .types import ModelDescriptor, TranscriptionResult

__all__ = [
    "ApiError",
    "BUILT_IN_TEMPLATES",
    "ClientSettings",
    "EmptyResult",
    "EnvSecretStore",
    "InvalidResponseShape",
    "MissingCredential",
    "MistralClient",
    "MistralError",
    "ModelDescriptor",
    "ModelPricing",
    "ModelPricingService",
    "PromptTemplate",
    "RequestConfiguration",
    "SecretStore",
    "StaticSecretStore",
    "TranscriptionResult",
    "TranscriptionService",
    "resolve_transcription_model",
]
