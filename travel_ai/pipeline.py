"""Plan and recommendation generation.

Plans degrade to a deterministic mock plan on any generation failure;
recommendations degrade to an empty list with an error. A missing API key is
never absorbed by either path.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from . import gemini_client
from .coercion import coerce_plan, coerce_recommendations
from .errors import ConfigurationError, TravelAIError
from .extraction import extract_json
from .fallback import generate_mock_plan
from .models import RecommendationPreferences, TravelPreferences
from .prompts import build_plan_prompt, build_recommendation_prompt
from .results import Failed, Fallback, Ok, PlanResult, RecommendationResult

logger = logging.getLogger(__name__)

Generate = Callable[[str], str]


def _generator(generate: Optional[Generate]) -> Generate:
    return generate if generate is not None else gemini_client.generate_text


def generate_travel_plan(prefs: TravelPreferences, generate: Optional[Generate] = None) -> PlanResult:
    prompt = build_plan_prompt(prefs)
    try:
        raw_text = _generator(generate)(prompt)
        plan = coerce_plan(extract_json(raw_text, expect="object"))
    except ConfigurationError:
        raise
    except TravelAIError as exc:
        logger.error("Travel plan generation failed for %s: %s", prefs.destination, exc, exc_info=True)
        return Fallback(generate_mock_plan(prefs), str(exc) or type(exc).__name__)
    logger.info("Generated travel plan for %s with %d day(s)", prefs.destination, len(plan.schedule))
    return Ok(plan)


def generate_recommendations(
    prefs: RecommendationPreferences, generate: Optional[Generate] = None
) -> RecommendationResult:
    logger.info("AI recommendation request destination=%s region=%s", prefs.destination, prefs.region)
    prompt = build_recommendation_prompt(prefs)
    try:
        raw_text = _generator(generate)(prompt)
        recommendations = coerce_recommendations(
            extract_json(raw_text, expect="array"), prefs.destination, prefs.region
        )
    except ConfigurationError:
        raise
    except TravelAIError as exc:
        logger.error("Recommendation generation failed for %s: %s", prefs.destination, exc, exc_info=True)
        return Failed(str(exc) or type(exc).__name__)
    logger.info("Returning %d recommendation(s) for %s", len(recommendations), prefs.destination)
    return Ok(recommendations)
