import logging
import os
import threading
from typing import Optional

import google.genai as genai
from google.genai import types

from .config import MODEL_NAME, TEMPERATURE, TOP_P
from .errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

_client: Optional[genai.Client] = None
_client_lock = threading.Lock()


def get_client() -> genai.Client:
    """Return the process-wide Gemini client, creating it on first use."""
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                api_key = os.getenv("GEMINI_API_KEY")
                if not api_key:
                    raise ConfigurationError("GEMINI_API_KEY is not defined")
                _client = genai.Client(api_key=api_key)
                logger.info("Gemini client initialized for model %s", MODEL_NAME)
    return _client


def reset_client() -> None:
    global _client
    with _client_lock:
        _client = None


def _response_text(response) -> str:
    text = getattr(response, "text", None)
    if text:
        return text
    chunks = []
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            if getattr(part, "text", None):
                chunks.append(part.text)
    return "".join(chunks)


def generate_text(prompt: str, image: Optional[bytes] = None, mime_type: Optional[str] = None) -> str:
    client = get_client()
    parts = [types.Part.from_text(text=prompt)]
    if image is not None:
        parts.append(types.Part.from_bytes(data=image, mime_type=mime_type or "image/png"))
    try:
        response = client.models.generate_content(
            model=MODEL_NAME,
            contents=[types.Content(role="user", parts=parts)],
            config=types.GenerateContentConfig(
                automatic_function_calling=types.AutomaticFunctionCallingConfig(disable=True),
                temperature=TEMPERATURE,
                top_p=TOP_P,
            ),
        )
    except Exception as exc:
        raise TransportError(f"Gemini request failed: {exc}") from exc
    return _response_text(response)
