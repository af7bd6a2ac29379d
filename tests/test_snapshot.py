import json

from config import (CATEGORIES, QUESTIONS, RECOMMENDATION_LIMIT,
                    RECOMMENDATIONS, SHOW_ALL_REGION)
from engine import build_snapshot, filter_questions, overall_progress


def best_answers(questions):
    return {q["id"]: q["options"][0] for q in questions}


def worst_answers(questions):
    return {q["id"]: q["options"][-1] for q in questions}


def test_best_answers_reach_top_tier_without_recommendations():
    filtered = filter_questions(QUESTIONS, SHOW_ALL_REGION)
    snap = build_snapshot(
        QUESTIONS, CATEGORIES, RECOMMENDATIONS, best_answers(filtered), SHOW_ALL_REGION, "Acme"
    )
    assert snap["overall"] == 100
    assert snap["maturity"]["name"] == "Optimising"
    assert snap["maturity"]["stage_index"] == 4
    assert snap["recommendations"] == []
    assert all(i["tag"] == "Strength" for i in snap["insights"])
    assert snap["answered"] == snap["total"] == len(QUESTIONS)
    assert snap["organization"] == "Acme"


def test_worst_answers_only_fire_last_option_triggers():
    filtered = filter_questions(QUESTIONS, "EU")
    answers = worst_answers(filtered)
    snap = build_snapshot(QUESTIONS, CATEGORIES, RECOMMENDATIONS, answers, "EU")
    assert snap["overall"] == 0
    assert snap["maturity"]["name"] == "Initial"
    # "No third-party models used" and "Not applicable" are outside the explicit lists
    assert [r["id"] for r in snap["recommendations"]] == ["REC_DATA_GOVERNANCE"]


def test_eu_gaps_select_the_three_catalog_recommendations():
    filtered = filter_questions(QUESTIONS, "EU")
    answers = worst_answers(filtered)
    answers["thirdPartyGenAi"] = "Yes, but not understood"
    answers["euAiActApplicability"] = "Unsure"
    snap = build_snapshot(QUESTIONS, CATEGORIES, RECOMMENDATIONS, answers, "EU")
    assert len(snap["recommendations"]) == RECOMMENDATION_LIMIT
    assert [r["id"] for r in snap["recommendations"]] == [
        "REC_DATA_GOVERNANCE",
        "REC_MODEL_SECURITY",
        "REC_COMPLIANCE_AUTOMATION",
    ]


def test_snapshot_matches_engine_and_is_json_serialisable():
    filtered = filter_questions(QUESTIONS, "USA")
    answers = {q["id"]: q["options"][1] for q in filtered[::2]}
    snap = build_snapshot(QUESTIONS, CATEGORIES, RECOMMENDATIONS, answers, "USA")
    assert snap["overall"] == overall_progress(filtered, answers)
    assert snap["total"] == len(filtered)
    assert snap["answered"] == len(answers)
    assert [i["id"] for i in snap["insights"]] == [c["id"] for c in CATEGORIES]
    unanswered = [r for r in snap["responses"] if r["answer"] is None]
    assert len(unanswered) == len(filtered) - len(answers)
    assert json.loads(json.dumps(snap)) == snap


def test_snapshot_does_not_share_catalog_dicts():
    filtered = filter_questions(QUESTIONS, "EU")
    snap = build_snapshot(QUESTIONS, CATEGORIES, RECOMMENDATIONS, worst_answers(filtered), "EU")
    snap["recommendations"][0]["title"] = "edited"
    assert all(r["title"] != "edited" for r in RECOMMENDATIONS)
