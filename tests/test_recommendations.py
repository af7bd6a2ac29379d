import itertools

import pytest
from conftest import FOUR_OPTIONS, make_question

from engine import select_recommendations, triggers


def test_scenario_d_explicit_trigger_values_win():
    q = make_question("q", recommendation="REC_A", trigger_values=["Partially"])
    assert triggers(q, {"q": "Partially"})
    assert not triggers(q, {"q": "No, not started"})


def test_explicit_list_can_include_last_option():
    q = make_question(
        "q", recommendation="REC_A", trigger_values=["Partially", "No, not started"]
    )
    assert triggers(q, {"q": "No, not started"})


def test_fallback_fires_only_on_last_option():
    q = make_question("q", recommendation="REC_A")
    assert triggers(q, {"q": "No, not started"})
    for opt in FOUR_OPTIONS[:-1]:
        assert not triggers(q, {"q": opt})


def test_empty_explicit_list_never_fires():
    q = make_question("q", recommendation="REC_A", trigger_values=[])
    assert not triggers(q, {"q": "No, not started"})


def test_unanswered_stale_or_untriggered_questions_never_fire():
    q = make_question("q", recommendation="REC_A", trigger_values=["Partially", "gone"])
    assert not triggers(q, {})
    assert not triggers(q, {"q": "gone"})
    assert not triggers(make_question("p"), {"p": "No, not started"})


def test_scenario_e_same_recommendation_selected_once(recommendations):
    questions = [make_question(f"q{i}", recommendation="REC_A") for i in range(5)]
    answers = {f"q{i}": "No, not started" for i in range(5)}
    result = select_recommendations(questions, answers, recommendations, limit=3)
    assert [r["id"] for r in result] == ["REC_A"]


def test_stable_priority_sort_and_limit(recommendations):
    order = ["REC_A", "REC_B", "REC_C", "REC_D", "REC_E"]
    questions = [make_question(f"q{i}", recommendation=rid) for i, rid in enumerate(order)]
    answers = {f"q{i}": "No, not started" for i in range(len(order))}

    result = select_recommendations(questions, answers, recommendations, limit=10)
    assert [r["id"] for r in result] == ["REC_B", "REC_E", "REC_A", "REC_C", "REC_D"]

    top = select_recommendations(questions, answers, recommendations, limit=3)
    assert [r["id"] for r in top] == ["REC_B", "REC_E", "REC_A"]


def test_dangling_trigger_is_skipped(recommendations):
    questions = [
        make_question("q1", recommendation="REC_MISSING"),
        make_question("q2", recommendation="REC_D"),
    ]
    answers = {"q1": "No, not started", "q2": "No, not started"}
    result = select_recommendations(questions, answers, recommendations, limit=3)
    assert [r["id"] for r in result] == ["REC_D"]


def test_zero_or_negative_limit(recommendations):
    questions = [make_question("q", recommendation="REC_B")]
    answers = {"q": "No, not started"}
    assert select_recommendations(questions, answers, recommendations, limit=0) == []
    assert select_recommendations(questions, answers, recommendations, limit=-1) == []


def test_catalog_is_not_reordered(recommendations):
    before = [r["id"] for r in recommendations]
    questions = [make_question("q", recommendation="REC_D")]
    select_recommendations(questions, {"q": "No, not started"}, recommendations)
    assert [r["id"] for r in recommendations] == before


@pytest.mark.parametrize("limit", [1, 2, 3, 5])
def test_never_duplicates_or_exceeds_limit(recommendations, limit):
    rec_ids = ["REC_A", "REC_B", "REC_A", "REC_C", "REC_B", "REC_E"]
    questions = [make_question(f"q{i}", recommendation=rid) for i, rid in enumerate(rec_ids)]
    choices = [None, "Partially", "No, not started"]
    for combo in itertools.product(choices, repeat=len(questions)):
        answers = {f"q{i}": v for i, v in enumerate(combo) if v is not None}
        result = select_recommendations(questions, answers, recommendations, limit=limit)
        got = [r["id"] for r in result]
        assert len(got) <= limit
        assert len(got) == len(set(got))
