from __future__ import annotations

import asyncio
import sys
import uuid

from . import __version__
from .classify import classify_offenses
from .config import RunContext
from .engine import load_engine, run_engine
from .errors import SetupError
from .gate import evaluate_gate
from .logging import ReporterLogger
from .models import Classification
from .publish import publish_report
from .report import build_failure_report, build_report

ACTION_VERSION = __version__


def main() -> int:
    """Main entry point."""
    return asyncio.run(async_main())


async def async_main() -> int:
    """Run Theme Check once, publish the report and return the exit code."""
    # Setup failures are logged before the workflow run id is available.
    logger = ReporterLogger(str(uuid.uuid4()))

    try:
        ctx = RunContext.from_environment()
        output_path = ctx.validate_output_destination()
        engine = load_engine(ctx)
    except SetupError as exc:
        logger.error(f"Fatal setup error: {exc}")
        return int(exc.exit_code)

    logger = logger.bind(ctx.run_id)
    logger.info(
        "Theme Check reporter starting",
        version=ACTION_VERSION,
        pr_number=ctx.pr_number,
        theme_path=ctx.theme_path,
        workspace=ctx.workspace_path,
        fail_on_warnings=ctx.fail_on_warnings,
    )

    script_failed = False
    try:
        with logger.stage("theme_check"):
            offenses = await run_engine(engine, ctx.theme_path, logger)
        classification = classify_offenses(offenses)
        if classification.ignored:
            logger.info(
                "Offenses with unrecognized severity left out of the report",
                count=classification.ignored,
            )
        logger.info("Summary", summary=classification.summary_line)
        report = build_report(classification, ctx, logger)
    except Exception as exc:
        logger.error("Error running theme check script", error=str(exc), error_type=type(exc).__name__)
        script_failed = True
        classification = Classification()
        report = build_failure_report(exc, ctx)

    published = publish_report(
        report,
        classification,
        report_dir=ctx.report_dir,
        output_path=output_path,
        logger=logger,
    )

    gate = evaluate_gate(
        error_count=classification.error_count,
        warning_count=classification.warning_count,
        fail_on_warnings=ctx.fail_on_warnings,
        publish_succeeded=published.succeeded,
        script_failed=script_failed,
    )
    if gate.should_fail:
        logger.error(gate.reason, exit_code=int(gate.exit_code))
    else:
        logger.info(gate.reason, exit_code=int(gate.exit_code))
    return int(gate.exit_code)


if __name__ == "__main__":
    sys.exit(main())
