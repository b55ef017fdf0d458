"""Report rendering: turn a ProjectSummary into console, text, JSON, YAML, CSV, XML or HTML.

Renderers return strings; writing them anywhere is up to the caller.
"""

from __future__ import annotations

import csv
import html
import io
import json
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Callable

import yaml

from locc.config import ReportFormat
from locc.languages.registry import LanguageRegistry, default_registry
from locc.models.counts import Counts, ProjectSummary
from locc.models.syntax import PLAIN_TEXT, UNKNOWN_LANGUAGE

FORMAT_VERSION = 1


class _Context:
    """Shared inputs of one render call."""

    def __init__(
        self,
        summary: ProjectSummary,
        registry: LanguageRegistry,
        project_name: str,
        generated_at: datetime,
    ) -> None:
        self.summary = summary
        self.registry = registry
        self.project_name = project_name
        self.timestamp = generated_at.isoformat(timespec="seconds")

    def display_name(self, language: str) -> str:
        if language == UNKNOWN_LANGUAGE:
            return PLAIN_TEXT.name
        profile = self.registry.get(language)
        return profile.name if profile else language

    def sorted_languages(self) -> list[str]:
        return sorted(self.summary.languages, key=lambda lang: self.display_name(lang).lower())


def _counts_line(counts: Counts) -> str:
    return (
        f"    Lines: {counts.total} total, {counts.code} code, "
        f"{counts.comment} comment, {counts.blank} blank"
    )


def render_console(ctx: _Context) -> str:
    rows = [("Language", "Files", "Lines", "Code", "Comment", "Blank")]
    for lang in ctx.sorted_languages():
        s = ctx.summary.languages[lang]
        rows.append(
            (
                ctx.display_name(lang),
                str(s.files),
                str(s.counts.total),
                str(s.counts.code),
                str(s.counts.comment),
                str(s.counts.blank),
            )
        )
    totals = ctx.summary.totals
    footer = (
        "Total",
        str(ctx.summary.file_count),
        str(totals.total),
        str(totals.code),
        str(totals.comment),
        str(totals.blank),
    )

    widths = [max(len(r[i]) for r in rows + [footer]) for i in range(len(footer))]
    rule = "-" * (sum(widths) + 2 * (len(widths) - 1))

    def fmt(row: tuple[str, ...]) -> str:
        cells = [row[0].ljust(widths[0])] + [c.rjust(w) for c, w in zip(row[1:], widths[1:])]
        return "  ".join(cells)

    lines = [fmt(rows[0]), rule]
    lines.extend(fmt(r) for r in rows[1:])
    lines.extend([rule, fmt(footer)])
    if ctx.summary.skipped:
        lines.append(f"Skipped files: {len(ctx.summary.skipped)}")
    return "\n".join(lines) + "\n"


def render_text(ctx: _Context) -> str:
    summary = ctx.summary
    totals = summary.totals
    out = [
        f"Line Count Report For {ctx.project_name}",
        "-" * 80,
        f"Date: {ctx.timestamp}",
        f"Number of files: {summary.file_count}",
        f"Number unrecognized files: {len(summary.unrecognized)}",
        f"Number of skipped files: {len(summary.skipped)}",
        f"Number of languages: {len(summary.languages)}",
        f"Total lines: {totals.total}",
        f"Code lines: {totals.code}",
        f"Comment lines: {totals.comment}",
        f"Blank lines: {totals.blank}",
        "",
        "Languages",
        "-" * 9,
    ]
    for lang in ctx.sorted_languages():
        s = ctx.summary.languages[lang]
        out.append(f"{ctx.display_name(lang)} ({s.files} files)")
        out.append(_counts_line(s.counts))
        out.append("")

    out.extend(["Files", "-" * 5])
    for i, f in enumerate(summary.files):
        if i:
            out.append("")
        out.append(f.path)
        out.append(_counts_line(f.counts))
        names = sorted(ctx.display_name(lang) for lang in f.language_counts)
        out.append(f"    Languages: {', '.join(names)}")

    if summary.skipped:
        out.extend(["", "Skipped", "-" * 7])
        out.extend(f"{s.path}: {s.reason}" for s in summary.skipped)
    return "\n".join(out) + "\n"


def _counts_members(counts: Counts) -> dict[str, int]:
    return {
        "totalLines": counts.total,
        "codeLines": counts.code,
        "commentLines": counts.comment,
        "blankLines": counts.blank,
    }


def _document(ctx: _Context) -> dict:
    """Report contents shared by the JSON and YAML renderers."""
    summary = ctx.summary
    doc: dict = {
        "formatVersion": FORMAT_VERSION,
        "date": ctx.timestamp,
        "projectName": ctx.project_name,
        "numFiles": summary.file_count,
        "numUnrecognized": len(summary.unrecognized),
        "numLanguages": len(summary.languages),
        **_counts_members(summary.totals),
        "languages": [
            {
                "name": lang,
                "displayName": ctx.display_name(lang),
                "numFiles": summary.languages[lang].files,
                **_counts_members(summary.languages[lang].counts),
            }
            for lang in ctx.sorted_languages()
        ],
        "files": [],
        "skipped": [{"pathname": s.path, "reason": s.reason} for s in summary.skipped],
    }
    for f in summary.files:
        entry: dict = {
            "pathname": f.path,
            "language": f.language,
            "numLanguages": len(f.language_counts),
        }
        if f.language == UNKNOWN_LANGUAGE:
            entry["unrecognized"] = True
        entry.update(_counts_members(f.counts))
        entry["languages"] = [
            {"name": lang, **_counts_members(counts)}
            for lang, counts in sorted(f.language_counts.items())
        ]
        doc["files"].append(entry)
    return doc


def render_json(ctx: _Context) -> str:
    return json.dumps(_document(ctx), indent=2) + "\n"


def render_yaml(ctx: _Context) -> str:
    return yaml.safe_dump(
        _document(ctx),
        sort_keys=False,
        allow_unicode=True,
        explicit_start=True,
        explicit_end=True,
    )


def render_csv(ctx: _Context) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(["ID", "Name", "Files", "Total Lines", "Code Lines", "Comment Lines", "Blank Lines"])
    totals = ctx.summary.totals
    writer.writerow(
        ["ALL", "All languages", ctx.summary.file_count, totals.total, totals.code, totals.comment, totals.blank]
    )
    for lang in ctx.sorted_languages():
        s = ctx.summary.languages[lang]
        writer.writerow(
            [
                lang,
                ctx.display_name(lang),
                s.files,
                s.counts.total,
                s.counts.code,
                s.counts.comment,
                s.counts.blank,
            ]
        )
    return buf.getvalue()


def _set_counts(element: ET.Element, counts: Counts) -> None:
    for key, value in _counts_members(counts).items():
        element.set(key, str(value))


def render_xml(ctx: _Context) -> str:
    summary = ctx.summary
    root = ET.Element(
        "locc",
        {
            "formatVersion": str(FORMAT_VERSION),
            "date": ctx.timestamp,
            "projectName": ctx.project_name,
            "numFiles": str(summary.file_count),
            "numUnrecognized": str(len(summary.unrecognized)),
            "numLanguages": str(len(summary.languages)),
        },
    )
    _set_counts(root, summary.totals)

    languages = ET.SubElement(root, "languages")
    for lang in ctx.sorted_languages():
        el = ET.SubElement(
            languages,
            "language",
            {
                "name": lang,
                "displayName": ctx.display_name(lang),
                "numFiles": str(summary.languages[lang].files),
            },
        )
        _set_counts(el, summary.languages[lang].counts)

    files = ET.SubElement(root, "files")
    for f in summary.files:
        el = ET.SubElement(files, "file", {"pathname": f.path, "language": f.language})
        _set_counts(el, f.counts)
        for lang, counts in sorted(f.language_counts.items()):
            _set_counts(ET.SubElement(el, "language", {"name": lang}), counts)

    if summary.skipped:
        skipped = ET.SubElement(root, "skipped")
        for s in summary.skipped:
            ET.SubElement(skipped, "file", {"pathname": s.path, "reason": s.reason})

    ET.indent(root)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode") + "\n"


_HTML_STYLE = """\
    body { font-family: sans-serif; margin: 2em; }
    table { border-collapse: collapse; margin-bottom: 2em; }
    th, td { border: 1px solid #ccc; padding: 0.3em 0.8em; text-align: left; }
    th { background: #eee; }
    .CountCell { text-align: right; }
    .TotalCell { font-weight: bold; }"""

_COUNT_HEADERS = ("Total Lines", "Code Lines", "Comment Lines", "Blank Lines")


def _count_cells(counts: Counts, css: str = "CountCell") -> list[str]:
    values = (counts.total, counts.code, counts.comment, counts.blank)
    return [f'<td class="{css}">{v}</td>' for v in values]


def _table(headers: list[str], rows: list[list[str]]) -> list[str]:
    out = ["<table>", "<thead>", "<tr>"]
    for h in headers:
        cls = ' class="CountCell"' if h in _COUNT_HEADERS else ""
        out.append(f"<th{cls}>{html.escape(h)}</th>")
    out.extend(["</tr>", "</thead>", "<tbody>"])
    for row in rows:
        out.append("<tr>" + "".join(row) + "</tr>")
    out.extend(["</tbody>", "</table>"])
    return out


def render_html(ctx: _Context) -> str:
    summary = ctx.summary
    totals = summary.totals
    title = html.escape(f"Line Count Report For {ctx.project_name}")

    out = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8"/>',
        f"<title>{title}</title>",
        "<style>",
        _HTML_STYLE,
        "</style>",
        "</head>",
        "<body>",
        f"<h1>{title}</h1>",
        "<h2>Summary</h2>",
    ]
    facts = [
        ("Project", ctx.project_name),
        ("Report date", ctx.timestamp),
        ("Number of files", summary.file_count),
        ("Number of languages", len(summary.languages)),
        ("Unrecognized files", len(summary.unrecognized)),
        ("Skipped files", len(summary.skipped)),
        ("Total lines", totals.total),
        ("Code lines", totals.code),
        ("Comment lines", totals.comment),
        ("Blank lines", totals.blank),
    ]
    out.append("<table>")
    out.append("<tbody>")
    for label, value in facts:
        out.append(f"<tr><td>{label}</td><td>{html.escape(str(value))}</td></tr>")
    out.extend(["</tbody>", "</table>"])

    out.append("<h2>Line Count by Language</h2>")
    rows = []
    for lang in ctx.sorted_languages():
        s = summary.languages[lang]
        rows.append(
            [f"<td>{html.escape(ctx.display_name(lang))}</td>", f'<td class="CountCell">{s.files}</td>']
            + _count_cells(s.counts)
        )
    rows.append(
        ['<td class="TotalCell">Total</td>', f'<td class="TotalCell CountCell">{summary.file_count}</td>']
        + _count_cells(totals, "TotalCell CountCell")
    )
    out.extend(_table(["Name", "Files", *_COUNT_HEADERS], rows))

    out.append("<h2>Line Count by File</h2>")
    rows = []
    for f in summary.files:
        names = ", ".join(sorted(ctx.display_name(lang) for lang in f.language_counts))
        rows.append(
            [f"<td>{html.escape(f.path)}</td>", f"<td>{html.escape(names)}</td>"]
            + _count_cells(f.counts)
        )
    out.extend(_table(["Pathname", "Languages", *_COUNT_HEADERS], rows))

    if summary.skipped:
        out.append("<h2>Skipped Files</h2>")
        rows = [
            [f"<td>{html.escape(s.path)}</td>", f"<td>{html.escape(s.reason)}</td>"]
            for s in summary.skipped
        ]
        out.extend(_table(["Pathname", "Reason"], rows))

    out.extend(["</body>", "</html>"])
    return "\n".join(out) + "\n"


RENDERERS: dict[ReportFormat, Callable[[_Context], str]] = {
    ReportFormat.CONSOLE: render_console,
    ReportFormat.TEXT: render_text,
    ReportFormat.JSON: render_json,
    ReportFormat.CSV: render_csv,
    ReportFormat.XML: render_xml,
    ReportFormat.YAML: render_yaml,
    ReportFormat.HTML: render_html,
}


def render(
    summary: ProjectSummary,
    fmt: ReportFormat | str,
    project_name: str = "",
    registry: LanguageRegistry | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Render ``summary`` in the given format."""
    ctx = _Context(
        summary,
        registry if registry is not None else default_registry(),
        project_name,
        generated_at or datetime.now(timezone.utc),
    )
    return RENDERERS[ReportFormat(fmt)](ctx)
