from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from themecheck_reporter.config import RunContext

_CONTEXT_ENV = (
    "PR_NUMBER",
    "WORKSPACE_PATH",
    "THEME_PATH",
    "REPO_URL",
    "COMMIT_SHA",
    "RUN_ID",
    "FAIL_ON_WARNINGS",
    "GITHUB_OUTPUT",
    "RUNNER_TEMP",
    "THEME_CHECK_ENGINE",
)


@pytest.fixture(params=["asyncio"])
def anyio_backend(request):
    """Restrict anyio tests to asyncio only (trio is not installed)."""
    return request.param


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's own Actions environment out of the tests."""
    for name in _CONTEXT_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def linked_ctx() -> RunContext:
    return RunContext(
        pr_number="42",
        workspace_path="/workspace",
        theme_path="/workspace",
        repo_url="https://github.com/org/repo",
        commit_sha="abc123",
        run_id="987",
    )


@pytest.fixture
def bare_ctx() -> RunContext:
    return RunContext(workspace_path="/workspace", theme_path="/workspace")


@pytest.fixture
def read_outputs():
    """Parse a GITHUB_OUTPUT file into a name -> raw value mapping."""

    def _read(path: Path) -> dict[str, str]:
        outputs: dict[str, str] = {}
        for line in path.read_text(encoding="utf-8").splitlines():
            name, _, value = line.partition("=")
            outputs[name] = value
        return outputs

    return _read
