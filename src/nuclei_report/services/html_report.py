"""Static HTML report rendered through an autoescaping Jinja2 template."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, Template, TemplateError

from ..domain.models import Finding
from .report_config import DEFAULT_HTML_TITLE
from .table_renderer import COLUMNS

_LOG = logging.getLogger(__name__)

HTML_OUTPUT_FILENAME = "output.html"
"""Fixed report location, relative to the current working directory."""

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <style>
        table {
            width: 100%;
            border-collapse: collapse;
        }
        th, td {
            border: 1px solid black;
            padding: 8px;
            text-align: left;
        }
        th {
            background-color: #f2f2f2;
        }
    </style>
</head>
<body>
    <h1>Scan Result</h1>
    <table>
        <tr>
        {%- for column in columns %}
            <th>{{ column }}</th>
        {%- endfor %}
        </tr>
        {%- for finding in findings %}
        <tr>
            <td>{{ finding.template_id }}</td>
            <td>{{ finding.name }}</td>
            <td>{{ finding.severity }}</td>
            <td>{{ finding.host }}</td>
            <td>{{ finding.matched_at }}</td>
        </tr>
        {%- endfor %}
    </table>
</body>
</html>
"""


class HtmlReportError(RuntimeError):
    """Raised when the HTML report cannot be produced."""


def _compile_template(source: str = HTML_TEMPLATE) -> Template:
    env = Environment(autoescape=True)
    try:
        return env.from_string(source)
    except TemplateError as exc:
        raise HtmlReportError(f"Failed to parse template: {exc}") from exc


def render_html(
    findings: Iterable[Finding],
    title: str = DEFAULT_HTML_TITLE,
    template_source: str = HTML_TEMPLATE,
) -> str:
    """Render the report document; every field value is HTML-escaped."""

    template = _compile_template(template_source)
    try:
        return template.render(
            title=title,
            columns=[column for column, _ in COLUMNS],
            findings=list(findings),
        )
    except TemplateError as exc:
        raise HtmlReportError(f"Failed to execute template: {exc}") from exc


def write_html_report(
    findings: Iterable[Finding],
    path: Path | str = HTML_OUTPUT_FILENAME,
    title: str = DEFAULT_HTML_TITLE,
) -> Path:
    """
    Render ``findings`` and write the document to ``path``.

    An existing file at ``path`` is overwritten. Every failure surfaces as
    :class:`HtmlReportError`.
    """

    path = Path(path)
    document = render_html(findings, title=title)
    try:
        fh = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise HtmlReportError(f"Failed to create HTML file {path}: {exc}") from exc
    try:
        with fh:
            fh.write(document)
    except (OSError, UnicodeError) as exc:
        raise HtmlReportError(f"Failed to write HTML file {path}: {exc}") from exc

    _LOG.info("HTML report written to %s", path)
    return path
