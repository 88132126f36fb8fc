"""Filtering of the ``/models`` listing into chat and transcription choices."""

from __future__ import annotations

from typing import Any, Iterable

from .types import ModelDescriptor

CHAT_EXCLUDED_SUBSTRINGS = ("pixtral", "vibe", "voxtral", "embed", "moderation")


def _is_chat_model(entry: dict[str, Any]) -> bool:
    model_id = entry["id"]
    capabilities = entry.get("capabilities") or {}
    return (
        capabilities.get("completion_chat") is True
        and model_id.endswith("-latest")
        and not any(s in model_id for s in CHAT_EXCLUDED_SUBSTRINGS)
    )


def _is_transcription_model(entry: dict[str, Any]) -> bool:
    model_id = entry["id"]
    return (
        "voxtral" in model_id
        and "realtime" not in model_id
        and "small" not in model_id
    )


def unique_sorted(models: Iterable[ModelDescriptor]) -> list[ModelDescriptor]:
    """Keep the first descriptor per id, then sort ascending by id."""

    seen: dict[str, ModelDescriptor] = {}
    for m in models:
        seen.setdefault(m.id, m)
    return sorted(seen.values(), key=lambda m: m.id)


def chat_models(entries: Iterable[dict[str, Any]]) -> list[ModelDescriptor]:
    return unique_sorted(
        ModelDescriptor(id=e["id"], capabilities=frozenset({"chat"}))
        for e in entries
        if _is_chat_model(e)
    )


def transcription_models(entries: Iterable[dict[str, Any]]) -> list[ModelDescriptor]:
    return unique_sorted(
        ModelDescriptor(id=e["id"], capabilities=frozenset({"transcription"}))
        for e in entries
        if _is_transcription_model(e)
    )
