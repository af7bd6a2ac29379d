# app.py

import logging

import dash
import dash_daq as daq
import plotly.graph_objects as go
from dash import ALL, Input, Output, State, ctx, dcc, html

import engine
from config import (APP_TITLE, CATEGORIES, DEBUG, HOST, LOG_LEVEL,
                    MATURITY_LEVELS, PORT, QUESTIONS, RECOMMENDATIONS, REGIONS)
from report import (NO_RECOMMENDATIONS_TEXT, responses_frame, write_pdf_bytes,
                    write_ppt_bytes)

logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = dash.Dash(__name__, suppress_callback_exceptions=True)
app.title = APP_TITLE
server = app.server

engine.validate_catalog(QUESTIONS, CATEGORIES, RECOMMENDATIONS)

CATEGORY_BY_ID = {c["id"]: c for c in CATEGORIES}
FIRST_CATEGORY = CATEGORIES[0]["id"] if CATEGORIES else None
REGION_OPTIONS = [{"label": r["name"], "value": r["id"]} for r in REGIONS]

# for chart sizes
BAR_H = 360
STAGE_H = 120


def _base_fig_layout(fig, theme="light", height=BAR_H):
    """
    Shared styling for the results charts (category bar and maturity stage bar).

    Transparent background so the chart sits on the results card, font and
    grid colours taken from the page theme, zoom disabled on both axes.

    :param fig: the category or stage figure
    :param theme: "light" or "dark", as held in the theme store
    :param height: pixel height, BAR_H or STAGE_H
    :return: the same figure, for chaining
    """
    font_color = "#f6f7fb" if theme == "dark" else "#0b1020"
    grid_color = "#334155" if theme == "dark" else "#CBD5E1"
    fig.update_layout(
        autosize=False,
        height=height,
        margin=dict(l=30, r=30, t=30, b=30),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=font_color),
        xaxis=dict(
            showgrid=True,
            gridcolor=grid_color,
            zeroline=False,
            linecolor=font_color,
            fixedrange=True,
        ),
        yaxis=dict(
            showgrid=True,
            gridcolor=grid_color,
            zeroline=False,
            linecolor=font_color,
            fixedrange=True,
        ),
        uirevision="keep",
    )
    return fig


# ---------- Figures ------------------
def category_bar_figure(insights, theme="light"):
    """
    Return a bar figure of the per-category scores, coloured by category.

    Args:
        insights (list): insight dicts as stored in the snapshot
        theme (str, optional): light or dark. Defaults to "light".

    Returns:
        go.Figure: bar figure
    """
    names = [i["name"] for i in insights]
    fig = go.Figure(
        go.Bar(
            x=names,
            y=[i["progress"] for i in insights],
            marker_color=[i.get("color") for i in insights],
            text=[f"{i['progress']}% · {i['tag']}" for i in insights],
            textposition="auto",
        )
    )
    fig.update_layout(
        xaxis=dict(categoryorder="array", categoryarray=names),
        yaxis=dict(range=[0, 100], tick0=0, dtick=20),
    )
    return _base_fig_layout(fig, theme, height=BAR_H)


def stage_figure(overall, stage_index, theme="light"):
    """
    Return the five-segment maturity bar with a marker at the overall score.

    Segments up to the reached stage take the tier colour; the rest are grey.
    """
    fig = go.Figure()
    bounds = [lvl["min_score"] for lvl in MATURITY_LEVELS] + [100]
    for i, lvl in enumerate(MATURITY_LEVELS):
        fig.add_trace(
            go.Bar(
                x=[bounds[i + 1] - bounds[i]],
                y=["maturity"],
                orientation="h",
                name=lvl["name"],
                marker_color=lvl["color"] if i <= stage_index else "#4b5563",
                hovertemplate=f"{lvl['name']} (from {lvl['min_score']}%)<extra></extra>",
            )
        )
    marker = "#ffffff" if theme == "dark" else "#0b1020"
    fig.add_vline(x=overall, line_width=3, line_color=marker)
    fig.update_layout(
        barmode="stack",
        showlegend=True,
        legend=dict(orientation="h", y=1.4),
        xaxis=dict(range=[0, 100], ticksuffix="%"),
        yaxis=dict(visible=False),
    )
    return _base_fig_layout(fig, theme, height=STAGE_H)


# -------------- Layout --------------------
def build_question_cards(category_id, region, answers):
    """
    Build the question rows of one category for the selected region.

    :param category_id: id of the category being answered
    :param region: selected region id
    :param answers: mapping of question id to selected option
    :return: a list of HTML Div elements
    """
    category = CATEGORY_BY_ID.get(category_id)
    if category is None:
        return []
    filtered = engine.filter_questions(QUESTIONS, region)
    qlist = engine.category_questions(category_id, filtered)
    children = [
        html.H3(
            category["name"],
            className="domain-title",
            style={"color": category["color"]},
        ),
        html.P(category["description"], className="muted"),
        html.Div(f"{len(qlist)} Questions in {category['name']}", className="muted"),
    ]
    for q in qlist:
        value = answers.get(q["id"])
        children.append(
            html.Div(
                [
                    html.Div(q["text"], className="qtext"),
                    dcc.Dropdown(
                        id={"type": "q-input", "qid": q["id"]},
                        options=[{"label": o, "value": o} for o in q["options"]],
                        value=value if value in q["options"] else None,
                        placeholder="Select your answer...",
                        clearable=False,
                        className="answer",
                    ),
                    html.Details(
                        [html.Summary("More info"), html.Div(q["info"])],
                        className="qinfo",
                    )
                    if q.get("info")
                    else None,
                ],
                className="qrow",
            )
        )
    return [html.Div(children, className="domain-card")]


app.layout = html.Div(
    id="page-root",
    className="page theme-light",
    children=[
        dcc.Store(id="region-store", data=None),
        dcc.Store(id="answers-store", data={}),
        dcc.Store(id="snapshot-store", data=None),
        dcc.Store(id="theme-store", data="light"),
        # Header
        html.Div(
            [
                html.H1(APP_TITLE),
                html.Div(
                    [
                        html.Div(
                            [
                                html.Label("Organization"),
                                dcc.Input(
                                    id="org-name",
                                    placeholder="e.g., Acme Ltd",
                                    className="textin",
                                ),
                            ],
                            className="field",
                        ),
                        html.Div(
                            [
                                html.Label("Dark mode"),
                                daq.BooleanSwitch(
                                    id="theme-switch",
                                    on=False,
                                    color="#10b981",
                                    className="theme-switch",
                                ),
                            ],
                            className="field",
                        ),
                    ],
                    className="meta",
                ),
            ],
            className="header",
        ),
        dcc.Tabs(
            id="tabs",
            value="tab-assess",
            children=[
                dcc.Tab(
                    label="Assessment",
                    value="tab-assess",
                    children=[
                        html.H3("Select your region"),
                        dcc.RadioItems(
                            id="region-select",
                            options=REGION_OPTIONS,
                            value=None,
                            className="regions",
                        ),
                        html.Div(id="progress-label", className="progress-label"),
                        dcc.Tabs(
                            id="category-tabs",
                            value=FIRST_CATEGORY,
                            children=[
                                dcc.Tab(label=c["name"], value=c["id"]) for c in CATEGORIES
                            ],
                        ),
                        html.Div(id="questions", className="grid"),
                        html.Div(
                            [
                                html.Button(
                                    "Next Compliance Area",
                                    id="next-category",
                                    n_clicks=0,
                                    className="secondary",
                                ),
                                html.Button(
                                    "Finish & View Results",
                                    id="finish",
                                    n_clicks=0,
                                    className="primary",
                                ),
                            ],
                            className="nav-row",
                        ),
                    ],
                ),
                dcc.Tab(
                    label="Results & Insights",
                    value="tab-results",
                    children=[
                        dcc.Loading(html.Div(id="results")),
                        html.Div(
                            [
                                html.Button(
                                    "Download PDF", id="dl-pdf", n_clicks=0, className="secondary"
                                ),
                                dcc.Download(id="dl-pdf-out"),
                                html.Button(
                                    "Download PPTX", id="dl-ppt", n_clicks=0, className="secondary"
                                ),
                                dcc.Download(id="dl-ppt-out"),
                                html.Button(
                                    "Download CSV", id="dl-csv", n_clicks=0, className="secondary"
                                ),
                                dcc.Download(id="dl-csv-out"),
                                html.Button(
                                    "New Assessment", id="reset", n_clicks=0, className="primary"
                                ),
                            ],
                            className="export-row",
                        ),
                    ],
                ),
            ],
        ),
    ],
)


# -------- Session ------------------
def next_session_state(trigger, region, answers, category, org, selected_region, qvalues):
    """
    Reduce one user event into the new session state.

    Args:
        trigger: id of the component that fired (str or pattern dict).
        region (str): region currently held in the region store.
        answers (dict): answers currently held in the answers store.
        category (str): category tab being answered.
        org (str): organization name entered in the header.
        selected_region (str): value of the region picker.
        qvalues (list): (question id, value) pairs of the rendered answer inputs.

    Returns:
        dict: only the keys that change, out of "region", "answers",
            "snapshot", "tab", "category" and "region_select".
    """
    answers = answers or {}
    if trigger == "region-select":
        if selected_region == region:
            return {}
        logger.info("Region selected: %s", selected_region)
        return {
            "region": selected_region,
            "answers": {},
            "snapshot": None,
            "tab": "tab-assess",
            "category": FIRST_CATEGORY,
        }
    if trigger == "reset":
        return {
            "region": None,
            "answers": {},
            "snapshot": None,
            "tab": "tab-assess",
            "category": FIRST_CATEGORY,
            "region_select": None,
        }
    if trigger == "next-category":
        nxt = engine.next_category(CATEGORIES, category)
        return {"category": nxt} if nxt else {}
    if trigger == "finish":
        filtered = engine.filter_questions(QUESTIONS, region)
        if not engine.is_complete(filtered, QUESTIONS, answers, region):
            return {}
        snapshot = engine.build_snapshot(
            QUESTIONS, CATEGORIES, RECOMMENDATIONS, answers, region, organization=org
        )
        return {"snapshot": snapshot, "tab": "tab-results"}
    if isinstance(trigger, dict) and trigger.get("type") == "q-input":
        updated = dict(answers)
        for qid, value in qvalues:
            if value is not None:
                updated[qid] = value
        if updated == answers:
            return {}
        return {"answers": updated}
    return {}


@app.callback(
    Output("region-store", "data"),
    Output("answers-store", "data"),
    Output("snapshot-store", "data"),
    Output("tabs", "value"),
    Output("category-tabs", "value"),
    Output("region-select", "value"),
    Input("region-select", "value"),
    Input({"type": "q-input", "qid": ALL}, "value"),
    Input("next-category", "n_clicks"),
    Input("finish", "n_clicks"),
    Input("reset", "n_clicks"),
    State({"type": "q-input", "qid": ALL}, "id"),
    State("region-store", "data"),
    State("answers-store", "data"),
    State("category-tabs", "value"),
    State("org-name", "value"),
    prevent_initial_call=True,
)
def on_session_event(
    selected_region, values, _next, _finish, _reset, ids, region, answers, category, org
):
    """
    Route region picks, answers, navigation, finish and reset into the stores.

    Changing region clears the answers; finishing captures the results
    snapshot once so the results screen and the exports agree.
    """
    qvalues = [(i["qid"], v) for i, v in zip(ids or [], values or [])]
    changes = next_session_state(
        ctx.triggered_id, region, answers, category, org, selected_region, qvalues
    )
    if not changes:
        raise dash.exceptions.PreventUpdate
    keys = ("region", "answers", "snapshot", "tab", "category", "region_select")
    return tuple(changes[k] if k in changes else dash.no_update for k in keys)


@app.callback(
    Output("questions", "children"),
    Input("region-store", "data"),
    Input("category-tabs", "value"),
    State("answers-store", "data"),
)
def render_questions(region, category, answers):
    """Render the current category's questions; nothing until a region is picked."""
    if not region:
        return html.P(
            "Select a region to see the questions that apply to you.", className="muted"
        )
    return build_question_cards(category, region, answers or {})


def navigation_state(answers, region, category):
    """
    Compute the progress line and which navigation buttons are disabled.

    Returns:
        tuple: (label, overall percent, next disabled, finish disabled)
    """
    filtered = engine.filter_questions(QUESTIONS, region)
    label = engine.progress_label(filtered, QUESTIONS, answers, region)
    pct = engine.overall_progress(filtered, answers)
    has_next = engine.next_category(CATEGORIES, category) is not None
    next_disabled = (
        not region
        or not has_next
        or not engine.is_category_answered(category, filtered, answers)
    )
    finish_disabled = not region or not engine.is_complete(
        filtered, QUESTIONS, answers, region
    )
    return label, pct, next_disabled, finish_disabled


@app.callback(
    Output("progress-label", "children"),
    Output("next-category", "disabled"),
    Output("finish", "disabled"),
    Input("answers-store", "data"),
    Input("region-store", "data"),
    Input("category-tabs", "value"),
)
def update_progress(answers, region, category):
    """Refresh the progress line and the navigation buttons."""
    label, pct, next_disabled, finish_disabled = navigation_state(
        answers or {}, region, category
    )
    return (
        [
            html.Span(label),
            html.Progress(value=str(pct), max="100"),
            html.Span(f" {pct}%"),
        ],
        next_disabled,
        finish_disabled,
    )


@app.callback(
    Output("results", "children"),
    Input("snapshot-store", "data"),
    Input("theme-store", "data"),
)
def render_results(snapshot, theme):
    return results_children(snapshot, theme)


def results_children(snapshot, theme="light"):
    """
    Render the results screen from the captured snapshot.

    Args:
        snapshot (dict): results captured when the assessment was finished.
        theme (str): "light" or "dark".

    Returns:
        list: Dash components for the results tab.
    """
    if not snapshot:
        return html.P("Finish the assessment to see your results.", className="muted")
    maturity = snapshot["maturity"]
    recs = snapshot.get("recommendations", [])
    return [
        html.Div(
            [
                html.H2("Overall AI Security Maturity"),
                html.Span(
                    maturity["name"],
                    className="badge",
                    style={"backgroundColor": maturity["color"]},
                ),
                html.P(maturity["description"]),
                dcc.Graph(
                    figure=stage_figure(
                        snapshot["overall"], maturity["stage_index"], theme
                    ),
                    config={"displaylogo": False, "responsive": False},
                ),
                html.Div(f"{snapshot['overall']:.0f}% Complete", className="kpi-value"),
            ],
            className="kpi",
        ),
        html.H2("Key Domain Insights"),
        dcc.Graph(
            figure=category_bar_figure(snapshot.get("insights", []), theme),
            style={"height": f"{BAR_H}px"},
            config={"displaylogo": False, "responsive": False},
        ),
        html.H2("Priority Recommendations"),
        html.Ul(
            [
                html.Li(
                    [
                        html.B(r["title"]),
                        html.Span(f" ({r['priority']} priority)", className="muted"),
                        html.P(r["description"]),
                        html.A("Learn more", href=r["link"], target="_blank"),
                    ]
                )
                for r in recs
            ]
            or [html.Li(NO_RECOMMENDATIONS_TEXT)],
            className="actions",
        ),
    ]


# Exports
@app.callback(
    Output("dl-pdf-out", "data"),
    Input("dl-pdf", "n_clicks"),
    State("snapshot-store", "data"),
    prevent_initial_call=True,
)
def download_pdf(_, snapshot):
    """
    Download the captured results as a PDF report.

    Raises:
        dash.exceptions.PreventUpdate: when no assessment has been finished.
    """
    if not snapshot:
        raise dash.exceptions.PreventUpdate
    return dcc.send_bytes(
        lambda b: write_pdf_bytes(b, snapshot), "ai-compliance-assessment.pdf"
    )


@app.callback(
    Output("dl-ppt-out", "data"),
    Input("dl-ppt", "n_clicks"),
    State("snapshot-store", "data"),
    prevent_initial_call=True,
)
def download_ppt(_, snapshot):
    if not snapshot:
        raise dash.exceptions.PreventUpdate
    return dcc.send_bytes(
        lambda b: write_ppt_bytes(b, snapshot), "ai-compliance-assessment.pptx"
    )


@app.callback(
    Output("dl-csv-out", "data"),
    Input("dl-csv", "n_clicks"),
    State("snapshot-store", "data"),
    prevent_initial_call=True,
)
def download_csv(_, snapshot):
    if not snapshot:
        raise dash.exceptions.PreventUpdate
    return dcc.send_data_frame(
        responses_frame(snapshot).to_csv, "ai-compliance-responses.csv", index=False
    )


# Dark mode switch -> page class, and the theme the result charts redraw with
@app.callback(
    Output("page-root", "className"),
    Output("theme-store", "data"),
    Input("theme-switch", "on"),
)
def apply_theme(is_on):
    """
    Switch the page between light and dark.

    The theme store feeds render_results, so the category bar and the stage
    bar are redrawn with matching font and marker colours.

    Args:
        is_on (bool): state of the header's dark mode switch.

    Returns:
        tuple: (page class name, theme name for the charts).
    """
    theme = "dark" if is_on else "light"
    return f"page theme-{theme}", theme


def main():
    app.run(host=HOST, port=PORT, debug=DEBUG)


# ---------- Main -------------------
if __name__ == "__main__":
    main()
