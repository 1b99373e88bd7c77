from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .config import RunContext
from .formatting import resolve_offense_path
from .logging import ReporterLogger
from .models import Classification, Offense

ERRORS_HEADER = "### 🚨 Errors"
WARNINGS_HEADER = "### ⚠️ Warnings"
SECTION_SEPARATOR = "---"
FAILED_SUMMARY = "Error: Failed to run theme check script."
WRITE_FAILED_NOTICE = "⚠️ Error: Could not write report file."


@dataclass(frozen=True)
class Report:
    title: str
    summary_line: str
    body: str
    trailing_link: str = ""

    def _link_suffix(self) -> str:
        if not self.trailing_link:
            return ""
        return f"\n\n[View Full Action Run Details]({self.trailing_link})"

    def _header(self) -> str:
        return f"{self.title}\n**{self.summary_line}**\n\n"

    def render(self) -> str:
        return f"{self._header()}{self.body}{self._link_suffix()}"

    def render_fallback(self) -> str:
        """Inline body used when the report file could not be written."""
        return f"{self._header()}{WRITE_FAILED_NOTICE}{self._link_suffix()}"


def report_title(ctx: RunContext) -> str:
    return f"## Theme Check Report for PR #{ctx.pr_number}"


def format_offense(
    offense: Offense,
    ctx: RunContext,
    logger: Optional[ReporterLogger] = None,
) -> str:
    """Render one offense as a Markdown list item."""
    resolved = resolve_offense_path(offense, ctx, logger)
    if resolved.link:
        path_md = f"[{resolved.display_path}]({resolved.link})"
    else:
        path_md = resolved.display_path
    location = f":`{offense.start.line}:{offense.start.character}`"
    description = f"{offense.message or 'No message'} ({offense.check or 'No check code'})"
    return f"- {path_md}{location}\n  {description}"


def _format_section(
    header: str,
    offenses: Iterable[Offense],
    ctx: RunContext,
    logger: Optional[ReporterLogger],
) -> str:
    lines = "\n".join(format_offense(offense, ctx, logger) for offense in offenses)
    return f"{header}\n{lines}"


def render_body(
    classification: Classification,
    ctx: RunContext,
    logger: Optional[ReporterLogger] = None,
) -> str:
    if classification.error_count == 0 and classification.warning_count == 0:
        return f"✅ ({classification.summary_line})"

    body = ""
    if classification.error_count:
        body += _format_section(ERRORS_HEADER, classification.errors, ctx, logger) + "\n"
    if classification.warning_count:
        if classification.error_count:
            body += f"\n{SECTION_SEPARATOR}\n"
        body += _format_section(WARNINGS_HEADER, classification.warnings, ctx, logger)
    return body


def build_report(
    classification: Classification,
    ctx: RunContext,
    logger: Optional[ReporterLogger] = None,
) -> Report:
    return Report(
        title=report_title(ctx),
        summary_line=classification.summary_line,
        body=render_body(classification, ctx, logger),
        trailing_link=ctx.action_run_url,
    )


def build_failure_report(error: BaseException, ctx: RunContext) -> Report:
    """Report used when Theme Check could not be run or its result was unusable."""
    detail = str(error) or type(error).__name__
    return Report(
        title=report_title(ctx),
        summary_line=FAILED_SUMMARY,
        body=f"⚠️ **Theme Check Script Failed**\n```\n{detail}\n```",
        trailing_link=ctx.action_run_url,
    )
