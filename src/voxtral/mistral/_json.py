from __future__ import annotations

import json
from typing import Any

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from .errors import InvalidResponseShape

TRANSCRIPTION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["text"],
    "properties": {
        "text": {"type": "string"},
        "language": {"type": ["string", "null"]},
    },
}

CHAT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["choices"],
    "properties": {
        "choices": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["message"],
                "properties": {
                    "message": {
                        "type": "object",
                        "required": ["content"],
                        "properties": {"content": {"type": ["string", "null"]}},
                    }
                },
            },
        }
    },
}

MODELS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["data"],
    "properties": {
        "data": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id"],
                "properties": {
                    "id": {"type": "string"},
                    "capabilities": {
                        "type": ["object", "null"],
                        "properties": {
                            "completion_chat": {"type": ["boolean", "null"]}
                        },
                    },
                },
            },
        }
    },
}


def parse_json(payload: bytes | str) -> dict[str, Any]:
    """Parse a JSON object from a 200 response body."""

    try:
        data = json.loads(payload)
    except (ValueError, TypeError) as e:
        raise InvalidResponseShape(f"Failed to parse JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidResponseShape("Expected a JSON object")
    return data


def validate_json(instance: dict[str, Any], schema: dict[str, Any]) -> None:
    try:
        validate(instance=instance, schema=schema)
    except _SchemaValidationError as e:
        raise InvalidResponseShape(f"JSON schema validation failed: {e.message}") from e


def decode(payload: bytes | str, schema: dict[str, Any]) -> dict[str, Any]:
    data = parse_json(payload)
    validate_json(data, schema)
    return data
