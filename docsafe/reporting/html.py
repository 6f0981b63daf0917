"""Human-readable HTML rendering of a report.

Every value that originates from the document or the checking service is
escaped before it is placed in the page.
"""

from html import escape

from docsafe.models import CheckMatch, Report

MAX_SUGGESTIONS = 3
EMPTY_ROW = '<tr><td colspan="5" style="padding:10px;">Aucune suggestion.</td></tr>'

_CELL = '<td style="padding:8px;border-bottom:1px solid #e5e7eb;">{}</td>'

_PAGE = """<!doctype html>
<html lang="fr">
<head>
<meta charset="utf-8"/>
<title>DocSafe - Rapport LanguageTool</title>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<style>
body{{font-family:ui-sans-serif,system-ui,sans-serif;background:#0f172a;
  color:#e5e7eb;margin:0;padding:24px;}}
.card{{background:#0b1220;border:1px solid #1f2937;border-radius:16px;
  max-width:1000px;margin:0 auto;box-shadow:0 10px 25px rgba(0,0,0,.35);}}
.card h1{{font-size:22px;margin:0;padding:16px 20px;border-bottom:1px solid #1f2937;}}
.section{{padding:16px 20px;}}
.kv{{display:flex;flex-wrap:wrap;gap:12px;font-size:14px;}}
.kv div{{background:#111827;border:1px solid #1f2937;padding:10px 12px;border-radius:10px;}}
.table{{width:100%;border-collapse:collapse;margin-top:16px;font-size:14px;background:#0b1220;}}
th{{background:#111827;text-align:left;padding:10px;border-bottom:1px solid #1f2937;}}
td{{vertical-align:top;}}
</style>
</head>
<body>
  <div class="card">
    <h1>Rapport LanguageTool</h1>
    <div class="section">
      <div class="kv">
        <div><b>Fichier:</b> {file_name}</div>
        <div><b>Langue:</b> {language}</div>
        <div><b>Longueur texte:</b> {text_length}</div>
        <div><b>Total issues:</b> {total_issues}</div>
      </div>
      <table class="table">
        <thead>
          <tr>
            <th>#</th><th>Règle</th><th>Message</th><th>Suggestions</th><th>Contexte</th>
          </tr>
        </thead>
        <tbody>
          {rows}
        </tbody>
      </table>
    </div>
  </div>
</body>
</html>
"""


def _suggestions(match: CheckMatch) -> str:
    values = [r.value for r in match.replacements[:MAX_SUGGESTIONS]]
    return ", ".join(values) or "-"


def _row(index: int, match: CheckMatch) -> str:
    cells = (
        str(index),
        match.rule_id or "",
        match.message,
        _suggestions(match),
        match.context.text if match.context else "",
    )
    return "<tr>" + "".join(_CELL.format(escape(cell)) for cell in cells) + "</tr>"


def render_report_html(report: Report) -> str:
    """Render a report as a standalone HTML page.

    Args:
        report: Report to render.

    Returns:
        HTML document with the summary and one table row per match, or a
        single "Aucune suggestion." row when there are none.
    """
    rows = "\n          ".join(_row(i, m) for i, m in enumerate(report.matches, start=1))
    summary = report.summary
    return _PAGE.format(
        file_name=escape(summary.file_name),
        language=escape(summary.language),
        text_length=summary.text_length,
        total_issues=summary.total_issues,
        rows=rows or EMPTY_ROW,
    )
