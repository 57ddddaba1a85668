from fastapi import APIRouter, Body, HTTPException

from .config import API_PREFIX
from .errors import ConfigurationError
from .models import RecommendationPreferences, RecommendationResponse
from .pipeline import generate_recommendations
from .results import Ok

router = APIRouter()


@router.post(f"{API_PREFIX}/ai-recommendations", response_model=RecommendationResponse)
def get_ai_recommendations(prefs: RecommendationPreferences = Body(...)):
    try:
        result = generate_recommendations(prefs)
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    if isinstance(result, Ok):
        return RecommendationResponse(
            success=True,
            recommendations=result.data,
            message=f"{len(result.data)} recommendation(s) generated",
        )
    return RecommendationResponse(success=False, recommendations=[], error=result.error)
