from __future__ import annotations

import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..constants import REPORT_FILE_PREFIX, Outputs
from ..logging import ReporterLogger
from ..models import Classification
from ..report import Report
from .outputs import set_output


@dataclass(frozen=True)
class PublishResult:
    succeeded: bool
    report_file: Optional[Path] = None
    fallback_body: str = ""


def write_report_file(body: str, directory: Path) -> Path:
    """
    Write the comment body to a uniquely named Markdown file.

    The name carries a millisecond timestamp plus a random suffix so
    overlapping runs on one runner never share a file.
    """
    stamp = int(time.time() * 1000)
    fd, path_str = tempfile.mkstemp(
        prefix=f"{REPORT_FILE_PREFIX}{stamp}-",
        suffix=".md",
        dir=str(directory),
    )
    try:
        # Engine text can carry lone surrogates (JSON "\ud800" escapes).
        with os.fdopen(fd, "w", encoding="utf-8", errors="replace") as f:
            f.write(body)
    except BaseException:
        os.unlink(path_str)
        raise
    return Path(path_str).resolve()


def publish_report(
    report: Report,
    classification: Classification,
    *,
    report_dir: Path,
    output_path: Path,
    logger: Optional[ReporterLogger] = None,
) -> PublishResult:
    """Persist the report and emit the step outputs for the comment step."""
    try:
        report_file = write_report_file(report.render(), report_dir)
    except Exception as exc:
        if logger:
            logger.error(
                "Error writing comment body file",
                report_dir=str(report_dir),
                error=str(exc),
            )
        fallback = report.render_fallback()
        set_output(output_path, Outputs.COMMENT_BODY_FILE, "", logger)
        set_output(output_path, Outputs.FALLBACK_COMMENT_BODY, fallback, logger)
        result = PublishResult(succeeded=False, fallback_body=fallback)
    else:
        if logger:
            logger.info("Comment body written", report_file=str(report_file))
        set_output(output_path, Outputs.COMMENT_BODY_FILE, str(report_file), logger)
        set_output(output_path, Outputs.FALLBACK_COMMENT_BODY, "", logger)
        result = PublishResult(succeeded=True, report_file=report_file)

    set_output(output_path, Outputs.ERROR_COUNT, classification.error_count, logger)
    set_output(output_path, Outputs.WARNING_COUNT, classification.warning_count, logger)
    return result
