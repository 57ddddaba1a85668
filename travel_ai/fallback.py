import math

from .models import (
    BudgetBreakdown,
    GeneratedPlan,
    Place,
    PlanRecommendations,
    ScheduleDay,
    ScheduleItem,
    TravelPreferences,
)

BUDGET_SPLIT = {
    "transportation": 0.3,
    "accommodation": 0.4,
    "food": 0.2,
    "activities": 0.1,
}

GENERIC_TIPS = ["現地の天気をチェックしましょう", "公共交通機関の時刻表を確認しましょう"]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_mock_plan(prefs: TravelPreferences) -> GeneratedPlan:
    """Build the deterministic plan returned when AI generation fails."""
    destination = prefs.destination
    return GeneratedPlan(
        schedule=[
            ScheduleDay(
                date=prefs.startDate.isoformat(),
                day="Day 1",
                items=[
                    ScheduleItem(
                        time="09:00",
                        title=f"{destination}到着",
                        location=destination,
                        description="空港・駅から目的地への移動",
                        category="transport",
                    ),
                    ScheduleItem(
                        time="14:00",
                        title="おすすめ観光スポット",
                        location=f"{destination}の名所",
                        description=f"{'、'.join(prefs.interests)}に基づいたおすすめスポット",
                        category="sightseeing",
                    ),
                ],
            )
        ],
        places=[
            Place(
                name=f"{destination}の人気スポット",
                category="観光地",
                rating=4.5,
                description="AIが選んだおすすめの場所",
            )
        ],
        budget=BudgetBreakdown(
            **{key: _round_half_up(prefs.budget * share) for key, share in BUDGET_SPLIT.items()}
        ),
        recommendations=PlanRecommendations(
            mustVisit=[f"{destination}の必見スポット"],
            localFood=[f"{destination}の名物グルメ"],
            tips=list(GENERIC_TIPS),
        ),
    )
