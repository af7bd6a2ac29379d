import app
from config import CATEGORIES, QUESTIONS, SHOW_ALL_REGION
from engine import filter_questions


def all_answered(region):
    return {q["id"]: q["options"][0] for q in filter_questions(QUESTIONS, region)}


def test_region_pick_resets_session():
    changes = app.next_session_state(
        "region-select", None, {"x": "y"}, "ethics", "", "EU", []
    )
    assert changes["region"] == "EU"
    assert changes["answers"] == {}
    assert changes["snapshot"] is None
    assert changes["category"] == CATEGORIES[0]["id"]
    assert changes["tab"] == "tab-assess"


def test_same_region_is_a_no_op():
    assert app.next_session_state("region-select", "EU", {}, "ethics", "", "EU", []) == {}


def test_answers_are_merged():
    trigger = {"type": "q-input", "qid": "genAiInventory"}
    qvalues = [("genAiInventory", "Partially"), ("dataSourcesGenAi", None)]
    changes = app.next_session_state(
        trigger, "EU", {"modelPurposeGenAi": "No"}, "discovery", "", "EU", qvalues
    )
    assert changes == {
        "answers": {"modelPurposeGenAi": "No", "genAiInventory": "Partially"}
    }
    unchanged = app.next_session_state(
        trigger, "EU", {"genAiInventory": "Partially"}, "discovery", "", "EU", qvalues
    )
    assert unchanged == {}


def test_next_category_moves_forward_and_stops_at_end():
    first, second = CATEGORIES[0]["id"], CATEGORIES[1]["id"]
    assert app.next_session_state("next-category", "EU", {}, first, "", "EU", []) == {
        "category": second
    }
    last = CATEGORIES[-1]["id"]
    assert app.next_session_state("next-category", "EU", {}, last, "", "EU", []) == {}


def test_finish_requires_complete_assessment():
    assert app.next_session_state("finish", "EU", {}, "capability", "", "EU", []) == {}


def test_finish_captures_snapshot():
    answers = all_answered("UK")
    changes = app.next_session_state("finish", "UK", answers, "capability", "Acme", "UK", [])
    assert changes["tab"] == "tab-results"
    assert changes["snapshot"]["overall"] == 100
    assert changes["snapshot"]["organization"] == "Acme"


def test_reset_clears_everything():
    changes = app.next_session_state("reset", "EU", {"a": "b"}, "ethics", "", "EU", [])
    assert changes["region"] is None
    assert changes["region_select"] is None
    assert changes["answers"] == {}
    assert changes["snapshot"] is None


def test_navigation_state_before_region():
    label, pct, next_disabled, finish_disabled = app.navigation_state(
        {}, None, CATEGORIES[0]["id"]
    )
    assert label == "0 of 38 questions answered"
    assert pct == 0
    assert next_disabled and finish_disabled


def test_navigation_state_complete():
    answers = all_answered(SHOW_ALL_REGION)
    label, pct, next_disabled, finish_disabled = app.navigation_state(
        answers, SHOW_ALL_REGION, CATEGORIES[0]["id"]
    )
    assert label == f"{len(QUESTIONS)} of {len(QUESTIONS)} questions answered"
    assert pct == 100
    assert not next_disabled
    assert not finish_disabled


def test_question_cards_only_show_region_questions():
    cards = app.build_question_cards("data", "USA", {"hipaaComplianceGenAi": "Partially compliant"})
    rows = [c for c in cards[0].children if getattr(c, "className", None) == "qrow"]
    qids = [row.children[1].id["qid"] for row in rows]
    assert "hipaaComplianceGenAi" in qids
    assert "gdprComplianceGenAi" not in qids
    dropdown = rows[qids.index("hipaaComplianceGenAi")].children[1]
    assert dropdown.value == "Partially compliant"


def test_results_children():
    assert app.results_children(None).children.startswith("Finish")
    answers = all_answered("EU")
    changes = app.next_session_state("finish", "EU", answers, "capability", "", "EU", [])
    children = app.results_children(changes["snapshot"], "dark")
    assert len(children) == 5


def test_figures():
    insights = [{"name": "A", "progress": 50, "tag": "Developing", "color": "#000000"}]
    bar = app.category_bar_figure(insights)
    assert list(bar.data[0].y) == [50]
    stage = app.stage_figure(55, 2)
    assert len(stage.data) == 5


def test_theme_switch_sets_page_class_and_chart_colours():
    assert app.apply_theme(True) == ("page theme-dark", "dark")
    assert app.apply_theme(False) == ("page theme-light", "light")
    dark = app.category_bar_figure([], "dark")
    assert dark.layout.font.color == "#f6f7fb"
    assert dark.layout.height == app.BAR_H
    stage = app.stage_figure(10, 0, "light")
    assert stage.layout.height == app.STAGE_H
    assert stage.layout.xaxis.fixedrange
