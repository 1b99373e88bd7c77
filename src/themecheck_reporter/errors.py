from __future__ import annotations

from .constants import ExitCode


class ReporterError(Exception):
    """Base exception for all Theme Check reporter errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class SetupError(ReporterError):
    """Run cannot start: bad output destination, config or engine entry point."""


class EngineError(ReporterError):
    """Theme Check invocation failed or returned an unexpected shape."""
