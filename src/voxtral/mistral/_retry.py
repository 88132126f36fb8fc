from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass
from typing import Awaitable, Callable, ClassVar, Optional

import httpx

from voxtral import logger as logger_mod

from .errors import ApiError, InvalidResponseShape

log = logger_mod.get_logger()

MAX_BACKOFF_S = 30.0

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RequestConfiguration:
    """Timeout and retry settings for one kind of API call.

    Two presets exist: ``DEFAULT`` for chat and model listing, and
    ``TRANSCRIPTION`` for audio uploads (longer timeouts, fewer retries,
    larger base delay).
    """

    request_timeout_s: float = 30.0
    resource_timeout_s: float = 300.0
    max_retries: int = 3
    base_retry_delay_s: float = 1.0

    DEFAULT: ClassVar["RequestConfiguration"]
    TRANSCRIPTION: ClassVar["RequestConfiguration"]

    def __post_init__(self) -> None:
        # Clamp instead of raising; a zero budget still makes one attempt.
        if self.max_retries < 0:
            object.__setattr__(self, "max_retries", 0)

        if self.base_retry_delay_s < 0:
            object.__setattr__(self, "base_retry_delay_s", 0.0)

    @property
    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.request_timeout_s)


RequestConfiguration.DEFAULT = RequestConfiguration(
    request_timeout_s=30.0,
    resource_timeout_s=300.0,
    max_retries=3,
    base_retry_delay_s=1.0,
)

RequestConfiguration.TRANSCRIPTION = RequestConfiguration(
    request_timeout_s=60.0,
    resource_timeout_s=600.0,
    max_retries=2,
    base_retry_delay_s=2.0,
)


def backoff_delay(attempt: int, base_delay_s: float) -> float:
    """Delay before ``attempt`` (0-based). The first attempt never waits."""

    if attempt <= 0:
        return 0.0
    return min(base_delay_s * 2 ** (attempt - 1), MAX_BACKOFF_S)


_TRANSIENT_TRANSPORT_ERRORS = (
    # timed out
    httpx.TimeoutException,
    asyncio.TimeoutError,
    TimeoutError,
    # not connected / host unreachable
    httpx.ConnectError,
    # connection lost mid-request
    httpx.ReadError,
    httpx.WriteError,
    httpx.RemoteProtocolError,
)


def is_transient_transport_error(error: BaseException) -> bool:
    return isinstance(error, _TRANSIENT_TRANSPORT_ERRORS)


class AttemptAction(enum.Enum):
    SUCCEED = "succeed"
    RETRY = "retry"
    FAIL = "fail"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of classifying a single attempt."""

    action: AttemptAction
    payload: Optional[bytes] = None
    error: Optional[BaseException] = None


def _body_text(content: bytes) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return "Unknown error"


def classify_response(
    response: object, *, attempt: int, max_retries: int
) -> AttemptOutcome:
    """Decide what to do with whatever the transport handed back."""

    if not isinstance(response, httpx.Response):
        return AttemptOutcome(AttemptAction.FAIL, error=InvalidResponseShape())

    if response.status_code != 200:
        error = ApiError(response.status_code, _body_text(response.content))
        if error.is_retryable and attempt < max_retries:
            return AttemptOutcome(AttemptAction.RETRY, error=error)
        return AttemptOutcome(AttemptAction.FAIL, error=error)

    return AttemptOutcome(AttemptAction.SUCCEED, payload=response.content)


def classify_transport_error(
    error: Exception, *, attempt: int, max_retries: int
) -> AttemptOutcome:
    """Decide what to do when the transport raised instead of responding."""

    if isinstance(error, httpx.DecodingError):
        return AttemptOutcome(AttemptAction.FAIL, error=InvalidResponseShape())

    if is_transient_transport_error(error) and attempt < max_retries:
        return AttemptOutcome(AttemptAction.RETRY, error=error)

    return AttemptOutcome(AttemptAction.FAIL, error=error)


async def execute_with_retry(
    send: Callable[[], Awaitable[httpx.Response]],
    *,
    context: str,
    retry: RequestConfiguration | None = None,
    sleep: Sleep = asyncio.sleep,
) -> bytes:
    """Run ``send`` until it yields an HTTP 200 or the retry budget is spent.

    Returns the raw response payload. Intermediate failures are logged and
    never surface; the caller sees the payload or exactly one error.
    """

    retry = retry or RequestConfiguration.DEFAULT
    total = retry.max_retries + 1
    last_error: BaseException | None = None

    for attempt in range(total):
        if attempt > 0:
            wait = backoff_delay(attempt, retry.base_retry_delay_s)
            log.warning(
                f"⚠️ Retryable error while {context}; retrying in {wait:.1f}s "
                f"(attempt {attempt + 1}/{total}): {last_error}"
            )
            await sleep(wait)

        try:
            response = await asyncio.wait_for(send(), timeout=retry.resource_timeout_s)
        except Exception as e:
            outcome = classify_transport_error(
                e, attempt=attempt, max_retries=retry.max_retries
            )
            if outcome.action is AttemptAction.FAIL:
                log.error(
                    f"❌ Transport error while {context} "
                    f"(attempt {attempt + 1}/{total}): {e!r}"
                )
                if outcome.error is e:
                    raise
                raise outcome.error from e
        else:
            outcome = classify_response(
                response, attempt=attempt, max_retries=retry.max_retries
            )
            if outcome.action is AttemptAction.SUCCEED:
                return outcome.payload or b""
            if outcome.action is AttemptAction.FAIL:
                # 4xx (e.g. 401 during key validation) logs at warning.
                status = getattr(outcome.error, "status_code", None)
                emit = log.warning if status is not None and status < 500 else log.error
                emit(
                    f"❌ Mistral API error while {context} "
                    f"(attempt {attempt + 1}/{total}): {outcome.error}"
                )
                raise outcome.error

        last_error = outcome.error

    # Defensive: the final attempt always succeeds or fails above
    if last_error:
        raise last_error
    raise RuntimeError(f"Unknown error while {context}")
