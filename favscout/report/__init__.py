"""favscout.report: отчёты о запуске (JSON и HTML) для CLI и тестов."""

from favscout.report.html_report import render_html
from favscout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
