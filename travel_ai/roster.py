import base64
import binascii
import json
import logging
import re
from io import BytesIO
from typing import Callable, List, Optional, Tuple

from fastapi import APIRouter, Body, HTTPException
from PIL import Image, UnidentifiedImageError

from . import gemini_client
from .config import API_PREFIX
from .errors import ConfigurationError, SchemaError, TravelAIError
from .models import RosterImageRequest, RosterNamesResponse

logger = logging.getLogger(__name__)

router = APIRouter()

NAMES_PROMPT = (
    "この画像は名簿やリストです。画像内の「人名」だけを日本語で配列で抽出してください。"
    "姓と名が分かる場合はフルネームで。JSON配列で返してください。"
)

_ARRAY = re.compile(r"\[.*\]", re.DOTALL)
_DATA_URL_PREFIX = re.compile(r"^data:[^;,]*;base64,", re.IGNORECASE)


def decode_image(image_base64: str) -> Tuple[bytes, str]:
    """Decode a base64 image (plain or data URL) and sniff its MIME type."""
    payload = _DATA_URL_PREFIX.sub("", image_base64.strip())
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SchemaError(f"Image is not valid base64: {exc}") from exc
    try:
        with Image.open(BytesIO(raw)) as img:
            image_format = img.format
    except UnidentifiedImageError as exc:
        raise SchemaError("Uploaded data is not a recognizable image") from exc
    except Image.DecompressionBombError as exc:
        raise SchemaError(f"Uploaded image is too large: {exc}") from exc
    mime_type = Image.MIME.get(image_format or "", "image/png")
    return raw, mime_type


def parse_names(text: str) -> List[str]:
    match = _ARRAY.search(text)
    if match:
        names = json.loads(match.group(0))
        if isinstance(names, list):
            return [str(name).strip() for name in names if str(name).strip()]
    return [line.strip() for line in text.splitlines() if line.strip()]


def extract_names_from_image(
    image_base64: str, generate: Optional[Callable[..., str]] = None
) -> List[str]:
    raw, mime_type = decode_image(image_base64)
    generate = generate if generate is not None else gemini_client.generate_text
    try:
        text = generate(NAMES_PROMPT, image=raw, mime_type=mime_type)
        return parse_names(text)
    except ConfigurationError:
        raise
    except (TravelAIError, json.JSONDecodeError) as exc:
        logger.error("Failed to extract names from roster image: %s", exc, exc_info=True)
        return []


@router.post(f"{API_PREFIX}/extract-names", response_model=RosterNamesResponse)
def extract_names(request: RosterImageRequest = Body(...)):
    try:
        names = extract_names_from_image(request.image)
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    except SchemaError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return RosterNamesResponse(names=names)
