"""Gemini analysis service: image and text prompts with retry on transient failures."""

import base64
import binascii
import logging
import time

from google import genai
from google.genai import types

from deteksi.config import get_settings
from deteksi.exceptions import (
    AuthenticationError,
    IntegrationError,
    InvalidInputError,
    RateLimitError,
    ServiceBusyError,
)
from deteksi.prompts import text_analysis_prompt

logger = logging.getLogger(__name__)

BUSY_MESSAGE = "Server Google AI sedang sibuk. Silakan coba lagi dalam beberapa menit."
RATE_LIMIT_MESSAGE = "Terlalu banyak permintaan. Silakan tunggu sebentar dan coba lagi."
IMAGE_FAILURE_MESSAGE = "Gagal menganalisis gambar. Silakan periksa koneksi internet dan coba lagi."
TEXT_FAILURE_MESSAGE = "Gagal menganalisis teks. Silakan periksa koneksi internet dan coba lagi."
SEARCH_FAILURE_MESSAGE = "Gagal mencari informasi sejarah"

_BUSY_MARKERS = ("503", "overloaded")
_RATE_LIMIT_MARKERS = ("429", "rate limit")


def _get_client() -> genai.Client:
    api_key = get_settings().google_ai_api_key
    if not api_key:
        raise AuthenticationError(
            "Google AI API key not configured. Get one at "
            "https://aistudio.google.com/apikey and set GOOGLE_AI_API_KEY in .env"
        )
    return genai.Client(api_key=api_key)


def _matches(exc: Exception, code: int, markers: tuple[str, ...]) -> bool:
    if getattr(exc, "code", None) == code:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in markers)


def is_busy(exc: Exception) -> bool:
    return _matches(exc, 503, _BUSY_MARKERS)


def is_rate_limited(exc: Exception) -> bool:
    return _matches(exc, 429, _RATE_LIMIT_MARKERS)


def is_transient(exc: Exception) -> bool:
    """True for overload/503 and rate-limit/429 failures, the only ones worth retrying."""
    return is_busy(exc) or is_rate_limited(exc)


def _classify_failure(exc: Exception, failure_message: str) -> IntegrationError:
    if is_busy(exc):
        return ServiceBusyError(BUSY_MESSAGE)
    if is_rate_limited(exc):
        return RateLimitError(RATE_LIMIT_MESSAGE)
    return IntegrationError(failure_message)


def generate_with_retry(
    contents,
    failure_message: str,
    max_retries: int | None = None,
    retry_delay: float | None = None,
) -> str:
    """Call Gemini, retrying transient failures with a linearly growing delay.

    Attempt n that fails transiently waits n * retry_delay seconds before
    attempt n + 1. Non-transient failures are not retried. Once attempts are
    exhausted the last error is mapped to ServiceBusyError, RateLimitError or
    an IntegrationError carrying failure_message.
    """
    settings = get_settings()
    if max_retries is None:
        max_retries = settings.max_retries
    if retry_delay is None:
        retry_delay = settings.retry_delay_seconds
    client = _get_client()

    for attempt in range(1, max_retries + 1):
        try:
            response = client.models.generate_content(
                model=settings.gemini_model,
                contents=contents,
            )
            if not response.text:
                raise IntegrationError("Gemini returned an empty response")
            return response.text
        except Exception as exc:
            logger.warning("Gemini attempt %d/%d failed: %s", attempt, max_retries, exc)
            if not is_transient(exc) or attempt == max_retries:
                error = _classify_failure(exc, failure_message)
                logger.error("Gemini request failed after %d attempt(s): %s", attempt, error)
                raise error from exc
            delay = attempt * retry_delay
            logger.info("Model busy, waiting %.0f seconds before retrying", delay)
            time.sleep(delay)

    # max_retries < 1
    raise IntegrationError(failure_message)


def encode_image(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def strip_data_url(value: str) -> str:
    """Drop a "data:image/jpeg;base64," prefix if present."""
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def analyze_image(image_base64: str, prompt: str, mime_type: str = "image/jpeg") -> str:
    """Send a prompt plus an inline base64 image to Gemini."""
    if not prompt or not prompt.strip():
        raise InvalidInputError("Prompt tidak boleh kosong.")
    # line-wrapped (MIME-style) payloads are accepted
    payload = "".join(strip_data_url((image_base64 or "").strip()).split())
    if not payload:
        raise InvalidInputError("Silakan upload gambar terlebih dahulu!")
    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError("Gambar tidak valid. Silakan upload ulang.") from exc

    contents = [
        prompt,
        types.Part.from_bytes(data=image_bytes, mime_type=mime_type or "image/jpeg"),
    ]
    return generate_with_retry(contents, IMAGE_FAILURE_MESSAGE)


def analyze_text(text: str, analysis_type: str) -> str:
    """Run one of the text analyses (sentiment, language, keywords, factargument)."""
    if not text or not text.strip():
        raise InvalidInputError("Silakan masukkan teks untuk dianalisis!")
    prompt = text_analysis_prompt(text, analysis_type)
    return generate_with_retry(prompt, TEXT_FAILURE_MESSAGE)


def generate_text(prompt: str) -> str:
    """Single text-only generation without retries."""
    if not prompt or not prompt.strip():
        raise InvalidInputError("Prompt tidak boleh kosong.")
    return generate_with_retry(prompt, SEARCH_FAILURE_MESSAGE, max_retries=1)
