from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    language: Optional[str] = None


@dataclass(frozen=True)
class ModelDescriptor:
    """A remote model usable for chat or transcription."""

    id: str
    capabilities: frozenset[str] = field(default_factory=frozenset)

    @property
    def display_name(self) -> str:
        """Short display name.

        "voxtral-mini-transcribe-26-02" -> "Voxtral Mini Transcribe v26.02"
        """

        parts = [p for p in self.id.split("-") if p]

        # Trailing all-digit segments form the version ("26", "02")
        version: list[str] = []
        while parts and parts[-1].isdigit():
            version.insert(0, parts.pop())

        base = " ".join(p[:1].upper() + p[1:] for p in parts)
        if not version:
            return base
        return f"{base} v{'.'.join(version)}"
