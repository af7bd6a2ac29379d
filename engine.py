# engine.py

import logging
import math

from config import (MATURITY_LEVELS, PRIORITY_ORDER, RECOMMENDATION_LIMIT,
                    SHOW_ALL_REGION)

logger = logging.getLogger(__name__)

MAX_QUESTION_SCORE = 100

# Per-category insight buckets, independent of MATURITY_LEVELS.
STRENGTH_THRESHOLD = 67
DEVELOPING_THRESHOLD = 34


class CatalogError(ValueError):
    """Raised by strict catalog validation when the question bank is inconsistent."""


# ----------- Catalog validation -------------
def validate_catalog(questions, categories, recommendations, strict=False):
    """
    Check the sanity of a question catalog.

    Logs a warning for every problem found: questions without options,
    unknown categories, duplicate ids, dangling recommendation ids, trigger
    values that are not among the options, and unknown priorities.

    :param questions: list of question dicts
    :param categories: list of category dicts
    :param recommendations: list of recommendation dicts
    :param strict: raise CatalogError instead of only logging
    :return: list of problem descriptions (empty when the catalog is clean)
    """
    category_ids = {c["id"] for c in categories}
    rec_ids = {r["id"] for r in recommendations}
    problems = []
    seen = set()

    for q in questions:
        qid = q.get("id")
        options = q.get("options") or []
        if qid in seen:
            problems.append(f"{qid}: duplicate question id")
        seen.add(qid)
        if not options:
            problems.append(f"{qid}: no options")
        if q.get("category") not in category_ids:
            problems.append(f"{qid}: unknown category {q.get('category')!r}")
        if q.get("priority") is not None and q["priority"] not in PRIORITY_ORDER:
            problems.append(f"{qid}: unknown priority {q['priority']!r}")
        rec_id = q.get("recommendation")
        if rec_id is not None and rec_id not in rec_ids:
            problems.append(f"{qid}: unknown recommendation {rec_id!r}")
        stray = [v for v in q.get("trigger_values") or [] if v not in options]
        if stray:
            problems.append(f"{qid}: trigger values not in options {stray}")

    for r in recommendations:
        if r.get("priority") not in PRIORITY_ORDER:
            problems.append(f"{r.get('id')}: unknown priority {r.get('priority')!r}")

    for p in problems:
        logger.warning("[catalog] %s", p)
    if problems and strict:
        raise CatalogError(f"{len(problems)} catalog problem(s): " + "; ".join(problems))
    return problems


# ----------- Question filter -------------
def _is_untagged(question):
    return not question.get("regions")


def filter_questions(questions, region):
    """
    Narrow the catalog to the questions relevant to a region.

    SHOW_ALL_REGION keeps everything, no region keeps only the untagged
    (universally applicable) questions, and a concrete region keeps untagged
    questions plus the ones tagged with it. Catalog order is preserved.
    """
    if region == SHOW_ALL_REGION:
        return list(questions)
    if not region:
        return [q for q in questions if _is_untagged(q)]
    return [
        q for q in questions if _is_untagged(q) or region in (q.get("regions") or [])
    ]


# ----------- Scoring -------------
def _round_half_up(x):
    return int(math.floor(x + 0.5))


def selected_index(question, answers):
    """
    Return the index of the stored answer within the question's options.

    Unanswered questions and answers that are no longer among the options
    (stale catalog versions) both yield None.
    """
    answer = answers.get(question["id"])
    options = question.get("options") or []
    if answer is None or answer not in options:
        return None
    return options.index(answer)


def is_answered(question, answers):
    return selected_index(question, answers) is not None


def score_question(question, answers):
    """
    Score a single question on a descending linear scale.

    Index 0 scores 100 and the last option scores 0, with equal spacing in
    between. A single-option question scores 100 when answered.

    :param question: question dict
    :param answers: mapping of question id to selected option label
    :return: score in [0, 100]
    """
    n = len(question.get("options") or [])
    i = selected_index(question, answers)
    if n == 0 or i is None:
        return 0.0
    if n == 1:
        return float(MAX_QUESTION_SCORE)
    return (n - 1 - i) / (n - 1) * MAX_QUESTION_SCORE


def _percent(questions, answers):
    if not questions:
        return 0
    total = sum(score_question(q, answers) for q in questions)
    return _round_half_up(total / (len(questions) * MAX_QUESTION_SCORE) * 100)


def category_questions(category_id, questions):
    return [q for q in questions if q.get("category") == category_id]


def category_progress(category_id, questions, answers):
    """
    Percentage score of one category over the (filtered) question set.

    A category without questions scores 0.
    """
    return _percent(category_questions(category_id, questions), answers)


def overall_progress(questions, answers):
    """
    Percentage score over the whole filtered question set.

    This is the sum of every question score over the maximum possible total,
    so categories are weighted by their question count.
    """
    return _percent(questions, answers)


def answered_count(questions, answers):
    return sum(1 for q in questions if is_answered(q, answers))


def is_category_answered(category_id, questions, answers):
    """True when every question of the category is answered (vacuously true when empty)."""
    return all(is_answered(q, answers) for q in category_questions(category_id, questions))


def is_complete(filtered, questions, answers, region):
    """
    Decide whether the assessment can be finished.

    :param filtered: questions applicable to the selected region
    :param questions: the full catalog
    :param answers: mapping of question id to selected option label
    :param region: selected region, or None when nothing was picked yet
    :return: True when every filtered question has a valid answer
    """
    if not filtered:
        # an empty selection before a region is picked is not a finished one
        return not questions or bool(region)
    return all(is_answered(q, answers) for q in filtered)


def progress_label(filtered, questions, answers, region):
    if not filtered and questions and not region:
        return "Select a region to begin."
    if not filtered:
        return "0 of 0 questions answered"
    return f"{answered_count(filtered, answers)} of {len(filtered)} questions answered"


def next_category(categories, current_id):
    """Return the id of the category after current_id, or None at the end."""
    ids = [c["id"] for c in categories]
    if current_id not in ids:
        return ids[0] if ids else None
    pos = ids.index(current_id) + 1
    return ids[pos] if pos < len(ids) else None


# ----------- Maturity -------------
def classify_maturity(percent, levels=MATURITY_LEVELS):
    """
    Map an overall percentage to a maturity tier.

    Tiers are scanned from the highest threshold down and the first one whose
    min_score is reached wins; the lowest tier is the fallback.

    :param percent: overall percentage (0-100)
    :param levels: tiers ordered by ascending min_score
    :return: a copy of the tier with its "stage_index"
    """
    for i in range(len(levels) - 1, -1, -1):
        if percent >= levels[i]["min_score"]:
            return {**levels[i], "stage_index": i}
    return {**levels[0], "stage_index": 0}


# ----------- Insights -------------
def insight_tag(progress):
    if progress >= STRENGTH_THRESHOLD:
        return "Strength"
    if progress >= DEVELOPING_THRESHOLD:
        return "Developing"
    return "Priority Focus"


def build_insight(category, progress):
    return {
        "id": category["id"],
        "name": category["name"],
        "color": category.get("color"),
        "progress": progress,
        "tag": insight_tag(progress),
    }


def category_insights(categories, questions, answers):
    """One insight per category, in catalog order, over the filtered question set."""
    return [
        build_insight(c, category_progress(c["id"], questions, answers))
        for c in categories
    ]


# ----------- Recommendations -------------
def triggers(question, answers):
    """
    Decide whether a question fires its recommendation.

    An explicit "trigger_values" list wins; without one only the last option
    (the least mature answer) fires. Unanswered questions never fire.
    """
    if not question.get("recommendation"):
        return False
    i = selected_index(question, answers)
    if i is None:
        return False
    answer = question["options"][i]
    explicit = question.get("trigger_values")
    if explicit is not None:
        return answer in explicit
    return i == len(question["options"]) - 1


def select_recommendations(
    questions, answers, recommendations, limit=RECOMMENDATION_LIMIT
):
    """
    Pick the prioritised recommendations triggered by the answers.

    Recommendations are collected in question order, first occurrence wins,
    then stably sorted high < medium < low and cut to `limit`. Trigger ids
    that do not resolve to a recommendation are skipped.

    Args:
        questions (list): question dicts (the full catalog)
        answers (dict): question id -> selected option label
        recommendations (list): recommendation dicts
        limit (int): maximum number of results

    Returns:
        list: recommendation dicts, at most `limit`, no duplicate ids
    """
    by_id = {r["id"]: r for r in recommendations}
    picked = []
    seen = set()
    for q in questions:
        if not triggers(q, answers):
            continue
        rec = by_id.get(q["recommendation"])
        if rec is None or rec["id"] in seen:
            continue
        seen.add(rec["id"])
        picked.append(rec)

    picked = sorted(
        picked, key=lambda r: PRIORITY_ORDER.get(r.get("priority"), len(PRIORITY_ORDER))
    )
    return picked[: max(0, limit)]


# ----------- Snapshot -------------
def build_snapshot(
    questions,
    categories,
    recommendations,
    answers,
    region,
    organization="",
    limit=RECOMMENDATION_LIMIT,
):
    """
    Capture the results of a finished assessment.

    Everything the results screen and the exports display is computed here
    once, so a downloaded report always matches what was shown on screen.

    Returns:
        dict: JSON-serialisable snapshot with overall percent, maturity,
            per-category insights, selected recommendations and responses.
    """
    filtered = filter_questions(questions, region)
    overall = overall_progress(filtered, answers)
    responses = []
    for q in filtered:
        i = selected_index(q, answers)
        responses.append(
            {
                "id": q["id"],
                "category": q["category"],
                "text": q["text"],
                "answer": q["options"][i] if i is not None else None,
                "score": round(score_question(q, answers), 2),
            }
        )
    selected = select_recommendations(questions, answers, recommendations, limit)
    snapshot = {
        "organization": organization or "",
        "region": region,
        "overall": overall,
        "maturity": classify_maturity(overall),
        "insights": category_insights(categories, filtered, answers),
        "recommendations": [dict(r) for r in selected],
        "responses": responses,
        "answered": answered_count(filtered, answers),
        "total": len(filtered),
    }
    logger.info(
        "Captured snapshot: region=%s overall=%s%% maturity=%s recommendations=%s",
        region,
        overall,
        snapshot["maturity"]["name"],
        [r["id"] for r in snapshot["recommendations"]],
    )
    return snapshot
