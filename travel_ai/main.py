# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import API_PREFIX, CORS_ALLOW_ORIGINS
from .errors import ConfigurationError
from .models import PlanResponse, TravelPreferences
from .pipeline import generate_travel_plan
from .recommendations import router as recommendations_router
from .results import Ok
from .roster import router as roster_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Travel AI Planner API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendations_router)
app.include_router(roster_router)


@app.get("/health")
def healthcheck() -> dict[str, str]:
    return {"message": "Travel App API is running"}


@app.post(f"{API_PREFIX}/travels/generate-plan", response_model=PlanResponse)
def generate_plan(prefs: TravelPreferences = Body(...)):
    try:
        result = generate_travel_plan(prefs)
    except ConfigurationError as exc:
        logger.error("Travel plan generation is not configured: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))

    if isinstance(result, Ok):
        return PlanResponse(success=True, plan=result.data, message="Travel plan generated")
    return PlanResponse(
        success=False,
        plan=result.data,
        message="AI generation failed; returning a template plan",
        error=result.error,
    )
