"""Pytest configuration and shared fixtures for the travel AI service."""
from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict

import pytest

# Ensure the project root is on sys.path so that travel_ai imports without installation.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from travel_ai.models import RecommendationPreferences, TravelPreferences  # noqa: E402


@pytest.fixture
def kyoto_prefs() -> TravelPreferences:
    return TravelPreferences(
        destination="京都",
        startDate=date(2024, 3, 15),
        endDate=date(2024, 3, 17),
        memberCount=2,
        budget=100000,
        interests=["寺社", "グルメ"],
        travelStyle="relaxed",
        description="",
    )


@pytest.fixture
def kyoto_recommendation_prefs() -> RecommendationPreferences:
    return RecommendationPreferences(
        destination="京都",
        interests=["寺社"],
        budget="medium",
        travelStyle="balanced",
        groupSize=2,
        duration=3,
    )


@pytest.fixture
def plan_payload() -> Dict[str, Any]:
    return {
        "schedule": [
            {
                "date": "2024-03-15",
                "day": "Day 1",
                "items": [
                    {
                        "time": "10:00",
                        "title": "京都駅到着",
                        "location": "京都駅",
                        "description": "新幹線で移動",
                        "category": "transport",
                    },
                    {
                        "time": "13:00",
                        "title": "清水寺",
                        "location": "東山区",
                        "description": "清水の舞台を見学",
                        "category": "sightseeing",
                    },
                ],
            }
        ],
        "places": [{"name": "清水寺", "category": "寺院", "rating": 4.7, "description": "世界遺産"}],
        "budget": {"transportation": 30000, "accommodation": 40000, "food": 20000, "activities": 10000},
        "recommendations": {
            "mustVisit": ["清水寺"],
            "localFood": ["湯豆腐"],
            "tips": ["早朝の拝観がおすすめ"],
        },
    }


def recommendation(name: str, description: str = "", **extra: Any) -> Dict[str, Any]:
    item = {
        "name": name,
        "category": "観光",
        "rating": 4.5,
        "image": "",
        "description": description,
        "aiReason": "興味に合致",
        "matchScore": 90,
        "estimatedTime": "2時間",
        "priceRange": "¥500-¥1000",
        "tags": ["寺社"],
        "isBookmarked": False,
    }
    item.update(extra)
    return item


def fenced(payload: Any) -> str:
    return "以下がプランです。\n```json\n" + json.dumps(payload, ensure_ascii=False) + "\n```\nお楽しみください。"
