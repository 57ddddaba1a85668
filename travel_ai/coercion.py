from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .config import PLACEHOLDER_IMAGE_URL
from .errors import ExtractionError, ParseError, SchemaError
from .extraction import Extraction, Found
from .models import AIRecommendation, GeneratedPlan

logger = logging.getLogger(__name__)

_IMAGE_URL = re.compile(r"https://.*\.(jpg|jpeg|png|webp|gif|bmp|svg)(\?.*)?", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s")
IMAGE_URL_MIN_LENGTH = 15
IMAGE_URL_MAX_LENGTH = 300


def load_candidate(outcome: Extraction) -> Any:
    if isinstance(outcome, Found):
        try:
            return json.loads(outcome.text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"JSON Parse Error: {exc}") from exc
    try:
        return json.loads(outcome.raw)
    except json.JSONDecodeError as exc:
        raise ExtractionError("No JSON payload found in model response") from exc


def coerce_plan(outcome: Extraction) -> GeneratedPlan:
    payload = load_candidate(outcome)
    try:
        return GeneratedPlan.model_validate(payload)
    except ValidationError as exc:
        raise SchemaError(f"Plan does not match the expected shape: {exc.error_count()} error(s)") from exc


def _strip_whitespace(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return _WHITESPACE.sub("", value)


def matches_destination(item: Dict[str, Any], destination: str, region: Optional[str] = None) -> bool:
    name = _strip_whitespace(item.get("name"))
    description = _strip_whitespace(item.get("description"))
    dest = _strip_whitespace(destination)
    if dest in name or dest in description:
        return True
    area = _strip_whitespace(region)
    return bool(area) and (area in name or area in description)


def is_valid_image_url(url: Any) -> bool:
    return (
        isinstance(url, str)
        and url.startswith("https://")
        and _IMAGE_URL.fullmatch(url) is not None
        and IMAGE_URL_MIN_LENGTH <= len(url) <= IMAGE_URL_MAX_LENGTH
    )


def coerce_recommendations(
    outcome: Extraction, destination: str, region: Optional[str] = None
) -> List[AIRecommendation]:
    payload = load_candidate(outcome)
    if not isinstance(payload, list):
        raise SchemaError("Malformed Response Error: recommendations must be a JSON array")

    recommendations: List[AIRecommendation] = []
    for item in payload:
        if not isinstance(item, dict) or not matches_destination(item, destination, region):
            logger.info("Dropping recommendation unrelated to %s: %s", destination, _describe(item))
            continue
        entry = dict(item)
        if not is_valid_image_url(entry.get("image")):
            entry["image"] = PLACEHOLDER_IMAGE_URL
        # bookmarks belong to the user, never to the model
        entry["isBookmarked"] = False
        try:
            recommendations.append(AIRecommendation.model_validate(entry))
        except ValidationError as exc:
            logger.warning("Dropping malformed recommendation %s: %s", _describe(item), exc)
    return recommendations


def _describe(item: Any) -> str:
    if isinstance(item, dict):
        return repr(item.get("name"))
    return type(item).__name__
