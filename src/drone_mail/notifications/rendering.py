from __future__ import annotations

from html import escape
from typing import Optional

from ..build.context import BuildContext
from ..config import PluginSettings
from ..pipeline.timing import time_taken
from .policy import status_text


def _blank(value: Optional[str]) -> str:
    return value or ""


def detail_rows(context: BuildContext) -> list[tuple[str, str]]:
    return [
        ("Branch", _blank(context.branch)),
        ("Committer", _blank(context.author)),
        ("Repository", _blank(context.repo_name)),
        ("Commit", _blank(context.commit_link)),
        ("Time taken", time_taken(context.started, context.finished)),
    ]


def render_subject(context: BuildContext, settings: PluginSettings) -> str:
    if settings.subject:
        return settings.subject
    return (
        f"Drone build {_blank(context.build)} {_blank(context.status)}: "
        f"{_blank(context.branch)}"
    )


def render_html(context: BuildContext) -> str:
    link = escape(_blank(context.link), quote=True)
    build = escape(_blank(context.build))
    lines = [
        f'<h2>Drone <a href="{link}">Build {build}</a>: '
        f"{status_text(context.status)}</h2>",
        "",
        "<table>",
    ]
    for label, value in detail_rows(context):
        lines.append(f'<tr><td>{label}</td><td align="left">{escape(value)}</td></tr>')
    lines.append("</table>")
    return "\n".join(lines) + "\n"


def render_text(context: BuildContext) -> str:
    lines = [
        f"Build {_blank(context.build)} {status_text(context.status)}: "
        f"{_blank(context.link)}",
        "",
    ]
    lines.extend(f"{label}: {value}" for label, value in detail_rows(context))
    return "\n".join(lines) + "\n"
