from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    FAILURE = 1


class Outputs:
    """Names of the step outputs consumed by the comment-posting step."""

    COMMENT_BODY_FILE = "comment_body_file"
    FALLBACK_COMMENT_BODY = "fallback_comment_body"
    ERROR_COUNT = "error_count"
    WARNING_COUNT = "warning_count"


DEFAULT_PR_NUMBER = "N/A"
UNKNOWN_PATH = "unknown_path"
FILE_SCHEME = "file://"
REPORT_FILE_PREFIX = "comment-body-"
