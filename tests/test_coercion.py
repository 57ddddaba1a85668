import json

import pytest

from travel_ai.coercion import (
    coerce_plan,
    coerce_recommendations,
    is_valid_image_url,
    load_candidate,
    matches_destination,
)
from travel_ai.config import PLACEHOLDER_IMAGE_URL
from travel_ai.errors import ExtractionError, ParseError, SchemaError
from travel_ai.extraction import Found, NotFound
from travel_ai.models import GeneratedPlan

from conftest import recommendation


def _found(payload) -> Found:
    return Found(json.dumps(payload, ensure_ascii=False))


def test_load_candidate_raises_parse_error_for_malformed_json():
    with pytest.raises(ParseError):
        load_candidate(Found('{"a": 1,'))


def test_load_candidate_raises_extraction_error_when_nothing_found():
    with pytest.raises(ExtractionError):
        load_candidate(NotFound("the model refused"))


def test_load_candidate_parses_raw_text_when_it_is_json():
    assert load_candidate(NotFound("42")) == 42


def test_coerce_plan_returns_model(plan_payload):
    plan = coerce_plan(_found(plan_payload))

    assert isinstance(plan, GeneratedPlan)
    assert plan.schedule[0].items[1].title == "清水寺"
    assert plan.budget.total() == 100000


def test_coerce_plan_rejects_missing_budget(plan_payload):
    del plan_payload["budget"]
    with pytest.raises(SchemaError):
        coerce_plan(_found(plan_payload))


def test_coerce_plan_rejects_unknown_category(plan_payload):
    plan_payload["schedule"][0]["items"][0]["category"] = "shopping"
    with pytest.raises(SchemaError):
        coerce_plan(_found(plan_payload))


def test_coerce_plan_rejects_negative_budget(plan_payload):
    plan_payload["budget"]["food"] = -1
    with pytest.raises(SchemaError):
        coerce_plan(_found(plan_payload))


def test_coerce_plan_rejects_array_payload():
    with pytest.raises(SchemaError):
        coerce_plan(Found("[]"))


def test_recommendations_must_be_array():
    with pytest.raises(SchemaError, match="Malformed Response Error"):
        coerce_recommendations(_found({"name": "京都タワー"}), "京都")


def test_drops_recommendation_not_mentioning_destination():
    payload = [recommendation("東京タワー", "東京の展望台"), recommendation("清水寺", "京都を代表する寺院")]

    result = coerce_recommendations(_found(payload), "京都")

    assert [rec.name for rec in result] == ["清水寺"]


def test_matching_ignores_whitespace():
    assert matches_destination({"name": "京 都 タワー"}, " 京都 ")
    assert matches_destination({"description": "Las  Vegas strip"}, "LasVegas")


def test_matching_is_case_sensitive():
    assert not matches_destination({"name": "las vegas strip"}, "Las Vegas")


def test_region_used_when_destination_missing():
    payload = [
        recommendation("フーバーダム", "ネバダ州とアリゾナ州の境"),
        recommendation("グランドキャニオン", "アリゾナ州の渓谷"),
    ]

    result = coerce_recommendations(_found(payload), "ラスベガス", region="ネバダ州")

    assert [rec.name for rec in result] == ["フーバーダム"]


def test_non_object_elements_are_dropped():
    payload = ["京都", None, recommendation("京都御所")]

    result = coerce_recommendations(_found(payload), "京都")

    assert [rec.name for rec in result] == ["京都御所"]


def test_every_survivor_mentions_destination_or_region():
    payload = [
        recommendation("金閣寺", "京都の寺"),
        recommendation("伏見稲荷", "千本鳥居"),
        recommendation("嵐山", "嵯峨野エリア"),
        recommendation("京都タワー", ""),
    ]

    result = coerce_recommendations(_found(payload), "京都", region="嵯峨野")

    for rec in result:
        text = rec.name + rec.description
        assert "京都" in text or "嵯峨野" in text
    assert [rec.name for rec in result] == ["金閣寺", "嵐山", "京都タワー"]


def test_invalid_images_replaced_with_placeholder():
    payload = [
        recommendation("京都御所", image="http://example.com/photo.jpg"),
        recommendation("京都水族館", image="https://example.com/photo.webp?w=600"),
    ]

    result = coerce_recommendations(_found(payload), "京都")

    assert result[0].image == PLACEHOLDER_IMAGE_URL
    assert result[1].image == "https://example.com/photo.webp?w=600"


def test_bookmark_flag_is_never_taken_from_model():
    payload = [recommendation("京都御所", isBookmarked=True)]

    assert coerce_recommendations(_found(payload), "京都")[0].isBookmarked is False


def test_match_score_is_clamped():
    payload = [recommendation("京都御所", matchScore=140), recommendation("京都駅", matchScore="-3")]

    scores = [rec.matchScore for rec in coerce_recommendations(_found(payload), "京都")]

    assert scores == [100, 0]


def test_uncoercible_recommendation_is_dropped():
    payload = [recommendation("京都御所", matchScore=[1]), recommendation("京都駅")]

    result = coerce_recommendations(_found(payload), "京都")

    assert [rec.name for rec in result] == ["京都駅"]


@pytest.mark.parametrize(
    "url, valid",
    [
        ("https://example.com/a.jpg", True),
        ("https://example.com/a.JPEG", True),
        ("https://example.com/a.png?auto=compress&w=600", True),
        ("https://a.b/.gif", True),
        ("https://a/.gif", False),
        ("http://example.com/a.jpg", False),
        ("https://example.com/a.jpg.html", False),
        ("https://example.com/a.tiff", False),
        ("https://example.com/" + "a" * 300 + ".jpg", False),
        ("", False),
        (None, False),
        (123, False),
    ],
)
def test_is_valid_image_url(url, valid):
    assert is_valid_image_url(url) is valid


@pytest.mark.parametrize("constant", ["Infinity", "-Infinity", "NaN"])
def test_coerce_plan_rejects_non_finite_budget(plan_payload, constant):
    text = json.dumps(plan_payload).replace('"activities": 10000', f'"activities": {constant}')

    with pytest.raises(SchemaError):
        coerce_plan(Found(text))


def test_coerce_plan_rejects_non_finite_rating(plan_payload):
    text = json.dumps(plan_payload).replace('"rating": 4.7', '"rating": NaN')

    with pytest.raises(SchemaError):
        coerce_plan(Found(text))


def test_non_finite_recommendation_rating_is_dropped():
    text = json.dumps([recommendation("京都御所"), recommendation("京都駅")], ensure_ascii=False)
    text = text.replace('"rating": 4.5', '"rating": Infinity', 1)

    result = coerce_recommendations(Found(text), "京都")

    assert [rec.name for rec in result] == ["京都駅"]


def test_unknown_recommendation_keys_are_kept():
    payload = [recommendation("京都御所", openingHours="9:00-16:30", access="今出川駅から徒歩5分")]

    dumped = coerce_recommendations(_found(payload), "京都")[0].model_dump()

    assert dumped["openingHours"] == "9:00-16:30"
    assert dumped["access"] == "今出川駅から徒歩5分"
