# report.py

import logging
from xml.sax.saxutils import escape

import pandas as pd
from pptx import Presentation
from pptx.util import Inches
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import (ListFlowable, ListItem, Paragraph,
                                SimpleDocTemplate, Spacer, Table, TableStyle)

from config import (APP_TITLE, CATEGORIES, CONSULT_URL, MATURITY_LEVELS,
                    NEXT_STEPS, REGIONS)

logger = logging.getLogger(__name__)

NO_RECOMMENDATIONS_TEXT = (
    "No specific recommendations triggered based on your assessment."
)

HEADER_BG = colors.HexColor("#e9ebf3")
HEADER_FG = colors.HexColor("#0b1020")
EMPTY_SEGMENT = colors.HexColor("#d1d5db")

RESPONSE_COLUMNS = ["id", "category", "text", "answer", "score"]


def region_name(region_id):
    if not region_id:
        return "Not selected"
    for r in REGIONS:
        if r["id"] == region_id:
            return r["name"]
    return region_id


def responses_frame(snapshot):
    """
    Build a dataframe of the captured responses, one row per question.

    Unanswered questions keep an empty answer. The category column carries
    the display name rather than the id.
    """
    df = pd.DataFrame(snapshot.get("responses", []), columns=RESPONSE_COLUMNS)
    names = {c["id"]: c["name"] for c in CATEGORIES}
    df["category"] = df["category"].map(lambda c: names.get(c, c))
    df["answer"] = df["answer"].fillna("")
    return df


def insights_frame(snapshot):
    df = pd.DataFrame(
        snapshot.get("insights", []), columns=["name", "progress", "tag"]
    )
    return df.rename(columns={"name": "Domain", "progress": "Score (%)", "tag": "Insight"})


def _table_style(align="LEFT"):
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_BG),
            ("TEXTCOLOR", (0, 0), (-1, 0), HEADER_FG),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("ALIGN", (1, 1), (-1, -1), align),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
            ("TOPPADDING", (0, 0), (-1, 0), 6),
        ]
    )


def _stage_bar(stage_index, width):
    """Five-segment maturity bar; segments up to the reached stage are coloured."""
    seg_w = width / len(MATURITY_LEVELS)
    labels = [[lvl["name"] for lvl in MATURITY_LEVELS], [""] * len(MATURITY_LEVELS)]
    tbl = Table(labels, colWidths=[seg_w] * len(MATURITY_LEVELS), rowHeights=[14, 10])
    style = [
        ("FONTSIZE", (0, 0), (-1, 0), 8),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.grey),
    ]
    for i, lvl in enumerate(MATURITY_LEVELS):
        fill = colors.HexColor(lvl["color"]) if i <= stage_index else EMPTY_SEGMENT
        style.append(("BACKGROUND", (i, 1), (i, 1), fill))
    tbl.setStyle(TableStyle(style))
    return tbl


def _progress_bar(progress, color, width):
    filled = max(0.0, min(100.0, float(progress))) / 100 * width
    if filled <= 0:
        tbl = Table([[""]], colWidths=[width], rowHeights=[8])
        tbl.setStyle(TableStyle([("BACKGROUND", (0, 0), (0, 0), EMPTY_SEGMENT)]))
        return tbl
    if filled >= width:
        cols = [width]
    else:
        cols = [filled, width - filled]
    tbl = Table([[""] * len(cols)], colWidths=cols, rowHeights=[8])
    style = [("BACKGROUND", (0, 0), (0, 0), colors.HexColor(color or "#27ae60"))]
    if len(cols) == 2:
        style.append(("BACKGROUND", (1, 0), (1, 0), EMPTY_SEGMENT))
    tbl.setStyle(TableStyle(style))
    return tbl


def write_pdf_bytes(buf, snapshot):
    """
    Write the assessment report PDF for a captured snapshot.

    Sections: header, overall maturity (badge, description and stage bar),
    key domain insights, key recommendations, answers per domain, next steps
    and the consultation link.

    Args:
        buf (BytesIO): buffer to write the document to.
        snapshot (dict): results captured when the assessment was finished.

    Returns:
        None
    """
    doc = SimpleDocTemplate(
        buf, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36
    )
    styles = getSampleStyleSheet()
    avail = A4[0] - 72
    maturity = snapshot["maturity"]
    story = []

    story += [
        Paragraph(f"<b>{escape(APP_TITLE)}</b>", styles["Title"]),
        Spacer(1, 8),
        Paragraph(
            f"Organization: {escape(snapshot.get('organization', ''))}&nbsp;&nbsp;&nbsp; "
            f"Region: {escape(region_name(snapshot.get('region')))}&nbsp;&nbsp;&nbsp; "
            f"Answered: {snapshot.get('answered', 0)} of {snapshot.get('total', 0)}",
            styles["Normal"],
        ),
        Spacer(1, 12),
    ]

    # Overall maturity
    badge = Table([[maturity["name"]]], hAlign="LEFT")
    badge.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (0, 0), colors.HexColor(maturity["color"])),
                ("TEXTCOLOR", (0, 0), (0, 0), colors.white),
                ("FONTNAME", (0, 0), (0, 0), "Helvetica-Bold"),
            ]
        )
    )
    story += [
        Paragraph("<b>Overall AI Security Maturity</b>", styles["Heading2"]),
        badge,
        Spacer(1, 6),
        Paragraph(escape(maturity["description"]), styles["Normal"]),
        Spacer(1, 8),
        _stage_bar(maturity["stage_index"], avail),
        Spacer(1, 4),
        Paragraph(f"{snapshot['overall']:.0f}% Complete", styles["Normal"]),
        Spacer(1, 12),
    ]

    # Key domain insights
    story += [Paragraph("<b>Key Domain Insights</b>", styles["Heading2"])]
    for ins in snapshot.get("insights", []):
        story += [
            Paragraph(
                f"{escape(ins['name'])}: {ins['progress']:.0f}% - {ins['tag']}",
                styles["Normal"],
            ),
            Spacer(1, 2),
            _progress_bar(ins["progress"], ins.get("color"), avail * 0.75),
            Spacer(1, 6),
        ]
    story += [Spacer(1, 6)]

    # Recommendations
    story += [Paragraph("<b>Key Recommendations</b>", styles["Heading2"])]
    recs = snapshot.get("recommendations", [])
    if recs:
        story += [
            ListFlowable(
                [
                    ListItem(
                        Paragraph(
                            f"<b>{escape(r['title'])}</b> ({r['priority']} priority)<br/>"
                            f"{escape(r['description'])}<br/>"
                            f"<link href='{escape(r['link'])}'>{escape(r['link'])}</link>",
                            styles["Normal"],
                        )
                    )
                    for r in recs
                ],
                bulletType="bullet",
            )
        ]
    else:
        story += [Paragraph(NO_RECOMMENDATIONS_TEXT, styles["Normal"])]
    story += [Spacer(1, 12)]

    # Answers per domain
    df = responses_frame(snapshot)
    if not df.empty:
        story += [Paragraph("<b>Responses</b>", styles["Heading2"])]
        cell = styles["BodyText"]
        for cat in CATEGORIES:
            rows = df[df["category"] == cat["name"]]
            if rows.empty:
                continue
            tbl_data = [["Question", "Answer"]] + [
                [Paragraph(escape(t), cell), Paragraph(escape(a or "Not Answered"), cell)]
                for t, a in zip(rows["text"], rows["answer"])
            ]
            tbl = Table(tbl_data, colWidths=[avail * 0.65, avail * 0.35], hAlign="LEFT")
            tbl.setStyle(_table_style())
            story += [
                Paragraph(f"<b>{escape(cat['name'])}</b>", styles["Heading3"]),
                tbl,
                Spacer(1, 8),
            ]

    # Next steps
    story += [
        Paragraph("<b>Next Steps</b>", styles["Heading2"]),
        ListFlowable(
            [ListItem(Paragraph(escape(s), styles["Normal"])) for s in NEXT_STEPS],
            bulletType="bullet",
        ),
        Spacer(1, 12),
        Paragraph("<b>Book a Consultation</b>", styles["Heading3"]),
        Paragraph(
            "For personalised guidance on implementing these recommendations and ensuring "
            "full compliance with the EU AI Act, book a consultation with our experts at:",
            styles["Normal"],
        ),
        Paragraph(f"<link href='{CONSULT_URL}'>{CONSULT_URL}</link>", styles["Normal"]),
    ]

    doc.build(story)
    logger.info("Wrote PDF report (%d recommendations)", len(recs))


def write_ppt_bytes(buf, snapshot):
    """
    Write a PowerPoint deck with the following slides to a bytes buffer.

    1. Title slide with organization and region.
    2. Summary slide with overall score and maturity tier.
    3. Domain scores table with insight tags.
    4. Key recommendations.
    """
    prs = Presentation()
    slide = prs.slides.add_slide(prs.slide_layouts[0])
    slide.shapes.title.text = APP_TITLE
    slide.placeholders[1].text = (
        f"Organization: {snapshot.get('organization', '')}\n"
        f"Region: {region_name(snapshot.get('region'))}"
    )

    maturity = snapshot["maturity"]
    slide = prs.slides.add_slide(prs.slide_layouts[1])
    slide.shapes.title.text = "Summary"
    body = slide.shapes.placeholders[1].text_frame
    body.clear()
    body.paragraphs[0].text = f"Overall: {snapshot['overall']:.0f}% ({maturity['name']})"
    body.add_paragraph().text = maturity["description"]
    body.add_paragraph().text = (
        f"Questions answered: {snapshot.get('answered', 0)} of {snapshot.get('total', 0)}"
    )

    slide = prs.slides.add_slide(prs.slide_layouts[5])
    slide.shapes.title.text = "Key Domain Insights"
    df = insights_frame(snapshot)
    rows, cols = len(df) + 1, len(df.columns)
    table = slide.shapes.add_table(
        rows, cols, Inches(0.8), Inches(1.5), Inches(8.0), Inches(0.8 + 0.35 * rows)
    ).table
    for j, col in enumerate(df.columns):
        table.cell(0, j).text = col
    for i, row in enumerate(df.itertuples(index=False), start=1):
        table.cell(i, 0).text = str(row[0])
        table.cell(i, 1).text = f"{float(row[1]):.0f}"
        table.cell(i, 2).text = str(row[2])

    slide = prs.slides.add_slide(prs.slide_layouts[1])
    slide.shapes.title.text = "Key Recommendations"
    tf = slide.placeholders[1].text_frame
    tf.clear()
    recs = snapshot.get("recommendations", [])
    if not recs:
        tf.paragraphs[0].text = NO_RECOMMENDATIONS_TEXT
    for i, rec in enumerate(recs):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.text = f"[{rec['priority']}] {rec['title']}"
    prs.save(buf)
    logger.info("Wrote PPTX report")
