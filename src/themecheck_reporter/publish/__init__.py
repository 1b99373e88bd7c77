from __future__ import annotations

from .outputs import set_output
from .report_file import PublishResult, publish_report, write_report_file

__all__ = [
    "PublishResult",
    "publish_report",
    "set_output",
    "write_report_file",
]
