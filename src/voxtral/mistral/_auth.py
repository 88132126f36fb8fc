from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Protocol

from voxtral import config

from .errors import MissingCredential


class SecretStore(Protocol):
    """Where the API key lives (keychain, env, ...)."""

    def get_api_key(self) -> Optional[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class EnvSecretStore:
    """Reads the API key from the environment (``.env`` is loaded by config)."""

    api_key_env: str = config.MISTRAL_API_KEY_ENV

    def get_api_key(self) -> Optional[str]:
        return os.getenv(self.api_key_env)


@dataclass(frozen=True)
class StaticSecretStore:
    api_key: Optional[str] = None

    def get_api_key(self) -> Optional[str]:
        return self.api_key


def resolve_api_key(store: SecretStore, override: Optional[str] = None) -> str:
    """Return the bearer credential or raise MissingCredential.

    A non-blank ``override`` wins over the store.
    """

    if override and override.strip():
        return override
    key = store.get_api_key()
    if not key or not key.strip():
        raise MissingCredential()
    return key
