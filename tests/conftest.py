import pytest

FOUR_OPTIONS = ["Yes, fully", "Partially", "No, in progress", "No, not started"]


def make_question(qid, category="cat1", options=None, **extra):
    q = {
        "id": qid,
        "text": f"Question {qid}?",
        "options": list(FOUR_OPTIONS if options is None else options),
        "category": category,
    }
    q.update(extra)
    return q


@pytest.fixture
def categories():
    return [
        {"id": "cat1", "name": "Category One", "description": "First", "color": "#f7b96e"},
        {"id": "cat2", "name": "Category Two", "description": "Second", "color": "#7192bf"},
    ]


@pytest.fixture
def recommendations():
    return [
        {"id": "REC_A", "title": "A", "description": "a", "link": "https://a", "priority": "medium"},
        {"id": "REC_B", "title": "B", "description": "b", "link": "https://b", "priority": "high"},
        {"id": "REC_C", "title": "C", "description": "c", "link": "https://c", "priority": "medium"},
        {"id": "REC_D", "title": "D", "description": "d", "link": "https://d", "priority": "low"},
        {"id": "REC_E", "title": "E", "description": "e", "link": "https://e", "priority": "high"},
    ]
