from __future__ import annotations

from dataclasses import dataclass

from .constants import ExitCode


@dataclass(frozen=True)
class GateResult:
    should_fail: bool
    reason: str

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.FAILURE if self.should_fail else ExitCode.SUCCESS


def evaluate_gate(
    *,
    error_count: int,
    warning_count: int,
    fail_on_warnings: bool,
    publish_succeeded: bool = True,
    script_failed: bool = False,
) -> GateResult:
    """Decide whether the step fails. Publish and script failures always fail."""
    if script_failed:
        return GateResult(True, "Theme check script failed")
    if not publish_succeeded:
        return GateResult(True, "Report file could not be written")
    if error_count > 0:
        return GateResult(True, f"Theme Check found {error_count} errors")
    if warning_count > 0 and fail_on_warnings:
        return GateResult(
            True,
            f"Theme Check found {warning_count} warnings and FAIL_ON_WARNINGS is true",
        )
    return GateResult(False, f"No blocking offenses ({warning_count} warnings)")
