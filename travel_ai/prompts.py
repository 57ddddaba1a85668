from __future__ import annotations

from datetime import date
from typing import Tuple

from .config import RECOMMENDATION_COUNT
from .errors import InvalidDateRangeError
from .models import RecommendationPreferences, TravelPreferences

NOT_SPECIFIED = "特になし"

PLAN_JSON_EXAMPLE = """{
  "schedule": [
    {
      "date": "YYYY-MM-DD",
      "day": "Day 1",
      "items": [
        {
          "time": "HH:MM",
          "title": "アクティビティ名",
          "location": "場所名",
          "description": "詳細説明",
          "category": "transport|sightseeing|food|accommodation|activity"
        }
      ]
    }
  ],
  "places": [
    {
      "name": "スポット名",
      "category": "カテゴリ",
      "rating": 4.5,
      "description": "説明"
    }
  ],
  "budget": {
    "transportation": 予算,
    "accommodation": 予算,
    "food": 予算,
    "activities": 予算
  },
  "recommendations": {
    "mustVisit": ["必見スポット1", "必見スポット2"],
    "localFood": ["地元グルメ1", "地元グルメ2"],
    "tips": ["旅行のコツ1", "旅行のコツ2"]
  }
}"""

RECOMMENDATION_JSON_EXAMPLE = """[
  {
    "name": "スポット名",
    "category": "カテゴリ",
    "rating": 4.5,
    "image": "",
    "description": "説明",
    "aiReason": "このスポットを選んだ理由",
    "matchScore": 90,
    "estimatedTime": "2時間",
    "priceRange": "¥1000-¥2000",
    "tags": ["タグ1", "タグ2"],
    "isBookmarked": false
  }
]"""


def trip_length(start: date, end: date) -> Tuple[int, int]:
    """Return ``(days, nights)`` for a trip, counting both endpoints as days."""
    if end < start:
        raise InvalidDateRangeError(f"endDate {end.isoformat()} is before startDate {start.isoformat()}")
    days = (end - start).days + 1
    return days, days - 1


def _format_yen(amount: float) -> str:
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,}"


def build_plan_prompt(prefs: TravelPreferences) -> str:
    days, nights = trip_length(prefs.startDate, prefs.endDate)
    start, end = prefs.startDate.isoformat(), prefs.endDate.isoformat()
    return f"""
以下の条件に基づいて、詳細な旅行プランを生成してください。

【旅行基本情報】
- 目的地: {prefs.destination}
- 旅行期間: {start} から {end} ({nights}泊{days}日)
- 参加人数: {prefs.memberCount}名
- 予算: ¥{_format_yen(prefs.budget)}
- 興味: {", ".join(prefs.interests) or NOT_SPECIFIED}
- 旅行スタイル: {prefs.travelStyle or NOT_SPECIFIED}
- 追加要望: {prefs.description or NOT_SPECIFIED}

【出力形式】
以下のJSON形式で出力してください：

{PLAN_JSON_EXAMPLE}

【注意事項】
- 予算内で現実的なプランを作成してください
- 参加人数に応じた適切なアクティビティを提案してください
- 興味に基づいたスポットを選定してください
- 旅行スタイルに合わせたスケジュールにしてください
- 交通手段や移動時間も考慮してください
- categoryは transport, sightseeing, food, accommodation, activity のいずれかにしてください
- 日本語で出力してください
"""


def build_recommendation_prompt(prefs: RecommendationPreferences, count: int = RECOMMENDATION_COUNT) -> str:
    region = prefs.region
    region_text = f"および『{region}』" if region else ""
    region_example = "例：目的地がラスベガス、領域がネバダ州ならラスベガス市内やネバダ州内のみ。" if region else ""
    region_name_rule = f"または領域名（{region}）" if region else ""
    region_line = f"- 領域: {region}\n" if region else ""
    return f"""
以下の条件に基づいて、旅行者におすすめの観光地・体験・グルメスポットを**必ず{count}件**リストアップしてください。

【重要】
- 必ず『{prefs.destination}』{region_text}に関係あるものだけを出力してください。
- {region_example}
- 他県・他国・遠方のスポット、全国的な有名スポットは含めないでください。
- スポット名や説明文に必ず目的地名（{prefs.destination}）{region_name_rule}を含めてください。
- imageフィールドは必ず空文字 '' にしてください。画像URLは不要です。

【旅行条件】
- 目的地: {prefs.destination}
{region_line}- 興味: {", ".join(prefs.interests) or NOT_SPECIFIED}
- 予算レベル: {prefs.budget or NOT_SPECIFIED}
- 旅行スタイル: {prefs.travelStyle or NOT_SPECIFIED}
- グループ人数: {prefs.groupSize}
- 日数: {prefs.duration}
- こだわり・要望: {prefs.customNote or NOT_SPECIFIED}

【出力形式】
以下のJSON配列形式で**{count}件**出力してください：
{RECOMMENDATION_JSON_EXAMPLE}

【注意事項】
- 旅行条件に合うものを厳選してください
- 日本語で出力してください
- 必ずJSON配列のみを返してください。説明や補足は一切不要です。
"""
