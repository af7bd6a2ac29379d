import itertools

import pytest
from conftest import make_question

from engine import (answered_count, category_progress, is_category_answered,
                    is_complete, next_category, overall_progress,
                    progress_label, score_question)


@pytest.mark.parametrize("n", range(2, 9))
def test_linear_descending_scale(n):
    options = [f"opt{i}" for i in range(n)]
    q = make_question("q", options=options)
    for i, opt in enumerate(options):
        assert score_question(q, {"q": opt}) == pytest.approx((n - 1 - i) / (n - 1) * 100)
    assert score_question(q, {"q": options[0]}) == 100
    assert score_question(q, {"q": options[-1]}) == 0


def test_single_option_question():
    q = make_question("q", options=["Yes"])
    assert score_question(q, {"q": "Yes"}) == 100
    assert score_question(q, {}) == 0


def test_no_options_scores_zero():
    q = make_question("q", options=[])
    assert score_question(q, {"q": "anything"}) == 0


def test_stale_answer_scores_as_unanswered():
    q = make_question("q")
    assert score_question(q, {"q": "Option from an older catalog"}) == 0
    assert score_question(q, {"q": None}) == 0
    assert answered_count([q], {"q": "Option from an older catalog"}) == 0


def test_scenario_a_single_question_rounds_to_67():
    q = make_question("q", options=["A", "B", "C", "D"])
    assert score_question(q, {"q": "B"}) == pytest.approx(66.6667, abs=1e-3)
    assert overall_progress([q], {"q": "B"}) == 67
    assert category_progress("cat1", [q], {"q": "B"}) == 67


def test_scenario_b_question_weighted_overall():
    questions = [
        make_question("a1", category="cat1"),
        make_question("a2", category="cat1"),
        make_question("b1", category="cat2"),
    ]
    answers = {"a1": "Yes, fully", "a2": "Yes, fully"}
    assert category_progress("cat1", questions, answers) == 100
    assert category_progress("cat2", questions, answers) == 0
    assert overall_progress(questions, answers) == 67


def test_empty_sets_score_zero():
    assert overall_progress([], {"x": "y"}) == 0
    assert category_progress("missing", [make_question("q")], {"q": "Yes, fully"}) == 0


def test_half_percent_rounds_up():
    questions = [make_question(f"q{i}", options=["Yes", "No"]) for i in range(8)]
    assert overall_progress(questions, {"q0": "Yes"}) == 13


def test_category_progress_is_order_independent():
    questions = [
        make_question("q1"),
        make_question("q2"),
        make_question("q3", options=["Yes", "No"]),
        make_question("q4", options=["Only"]),
    ]
    answers = {"q1": "Partially", "q2": "No, not started", "q3": "Yes", "q4": "Only"}
    expected = category_progress("cat1", questions, answers)
    for perm in itertools.permutations(questions):
        assert category_progress("cat1", list(perm), answers) == expected


def test_overall_is_not_mean_of_categories():
    questions = [make_question(f"a{i}", category="cat1") for i in range(3)]
    questions.append(make_question("b0", category="cat2"))
    answers = {f"a{i}": "Yes, fully" for i in range(3)}
    # mean of categories would be 50
    assert overall_progress(questions, answers) == 75


def test_completion_requires_valid_answer_for_every_filtered_question():
    questions = [make_question("q1"), make_question("q2")]
    assert not is_complete(questions, questions, {"q1": "Partially"}, "EU")
    assert not is_complete(questions, questions, {"q1": "Partially", "q2": "bogus"}, "EU")
    assert is_complete(questions, questions, {"q1": "Partially", "q2": "Yes, fully"}, "EU")


def test_completion_with_empty_filtered_set():
    catalog = [make_question("q1", regions=["EU"])]
    assert is_complete([], catalog, {}, None) is False
    assert is_complete([], [], {}, None) is True
    assert is_complete([], catalog, {}, "USA") is True


def test_progress_label_forms():
    catalog = [make_question("q1", regions=["EU"]), make_question("q2")]
    assert progress_label([], catalog, {}, None) == "Select a region to begin."
    assert progress_label([], [], {}, None) == "0 of 0 questions answered"
    assert progress_label(catalog, catalog, {"q2": "Partially"}, "EU") == (
        "1 of 2 questions answered"
    )


def test_category_answered_is_vacuous_for_empty_category():
    questions = [make_question("q1", category="cat1")]
    assert is_category_answered("cat2", questions, {})
    assert not is_category_answered("cat1", questions, {})
    assert is_category_answered("cat1", questions, {"q1": "Yes, fully"})


def test_next_category(categories):
    assert next_category(categories, "cat1") == "cat2"
    assert next_category(categories, "cat2") is None
    assert next_category(categories, "unknown") == "cat1"
