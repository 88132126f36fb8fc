from __future__ import annotations


class MistralError(RuntimeError):
    """Base error for voxtral.mistral.

    Every failure the client core reports is one of the subclasses below.
    ``str(err)`` is the user-facing message.
    """

    message = "Mistral API request failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def is_retryable(self) -> bool:
        return False


class MissingCredential(MistralError):
    """No API key is available; raised before any network attempt."""

    message = "No API key configured. Add your Mistral API key in Settings."


class InvalidResponseShape(MistralError):
    """The transport returned something that is not a usable HTTP response."""

    message = "Invalid response from Mistral API."

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"{self.message} {detail}" if detail else None)


class EmptyResult(MistralError):
    """A 200 response that carries no usable content (e.g. no chat choices)."""

    message = "Empty response from Mistral API."


class ApiError(MistralError):
    """Non-200 HTTP response."""

    def __init__(self, status_code: int, body: str):
        self.status_code = int(status_code)
        self.body = body
        super().__init__(f"API error ({self.status_code}): {body}")

    @property
    def is_retryable(self) -> bool:
        return is_retryable_status(self.status_code)


def is_retryable_status(status_code: int) -> bool:
    """Rate limiting and transient server errors are worth another attempt."""

    return status_code == 429 or 500 <= status_code <= 504
