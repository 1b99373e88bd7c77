from __future__ import annotations

import json

import pytest

from themecheck_reporter.constants import ExitCode
from themecheck_reporter.errors import EngineError, ReporterError, SetupError
from themecheck_reporter.logging import ReporterLogger, escape_workflow_command


def test_logger_emits_json(capsys) -> None:
    logger = ReporterLogger("run-1")
    logger.info("hello", detail="world")
    captured = capsys.readouterr()

    payload = json.loads(captured.err.strip().splitlines()[0])
    assert payload["run_id"] == "run-1"
    assert payload["message"] == "hello"
    assert payload["detail"] == "world"


def test_logger_emits_annotations(capsys) -> None:
    logger = ReporterLogger("run-2")
    logger.error("fail")
    logger.warning("careful\nnow")
    captured = capsys.readouterr()
    assert "::error::fail" in captured.err
    assert "::warning::careful%0Anow" in captured.err


def test_logger_redacts_sensitive_keys(capsys) -> None:
    logger = ReporterLogger("run-3")
    logger.info("token passthrough", github_token="ghs_test")
    payload = json.loads(capsys.readouterr().err.strip().splitlines()[0])
    assert payload["github_token"] == "***"


def test_stage_records_duration_and_errors(capsys) -> None:
    logger = ReporterLogger("run-4")
    with pytest.raises(RuntimeError):
        with logger.stage("theme_check"):
            raise RuntimeError("boom")

    lines = [json.loads(ln) for ln in capsys.readouterr().err.splitlines() if ln.startswith("{")]
    messages = [entry["message"] for entry in lines]
    assert messages == ["stage_start", "stage_error", "stage_end"]
    assert lines[-1]["status"] == "error"
    assert isinstance(lines[-1]["duration_ms"], int)


def test_escape_workflow_command() -> None:
    assert escape_workflow_command("a%b\r\nc") == "a%25b%0D%0Ac"


def test_error_exit_codes() -> None:
    assert ReporterError().exit_code == ExitCode.FAILURE
    assert SetupError("x").exit_code == 1
    assert isinstance(EngineError("x"), ReporterError)


def test_bind_tags_later_entries_with_run_id(capsys) -> None:
    setup_logger = ReporterLogger("setup-uuid")
    bound = setup_logger.bind("4242")
    bound.info("after context")
    setup_logger.bind("").info("no run id")

    lines = [json.loads(ln) for ln in capsys.readouterr().err.splitlines()]
    assert lines[0]["run_id"] == "4242"
    assert lines[1]["run_id"] == "setup-uuid"
