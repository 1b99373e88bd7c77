from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..logging import ReporterLogger, escape_workflow_command


def set_output(
    output_path: Path,
    name: str,
    value: object,
    logger: Optional[ReporterLogger] = None,
) -> bool:
    """
    Append `name=value` to the GitHub Actions output file.

    Best-effort: a failed write is logged and reported through the return
    value so the caller decides whether it matters.
    """
    line = f"{name}={escape_workflow_command(str(value))}\n"
    try:
        with open(output_path, "a", encoding="utf-8", errors="replace") as f:
            f.write(line)
    except OSError as exc:
        if logger:
            logger.error("Failed to write step output", output=name, error=str(exc))
        return False
    return True
