from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_PR_NUMBER
from .errors import SetupError


class RunContext(BaseSettings):
    """Immutable snapshot of the environment the action step runs in."""

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Pull request + repository identity
    pr_number: str = Field(default=DEFAULT_PR_NUMBER, description="Pull request number")
    repo_url: str = Field(default="", description="Server URL joined with owner/repo")
    commit_sha: str = Field(default="", description="Head commit SHA used for blob links")
    run_id: str = Field(default="", description="Workflow run id for the details link")

    # Paths
    workspace_path: str = Field(
        default_factory=os.getcwd,
        description="Checkout root; stripped from offense paths",
    )
    theme_path: str = Field(
        default_factory=os.getcwd,
        description="Path handed to Theme Check",
    )
    github_output: Optional[str] = Field(
        default=None,
        description="File that step outputs are appended to (required)",
    )
    runner_temp: Optional[str] = Field(
        default=None,
        description="Directory for the generated comment body file",
    )

    # Behaviour
    fail_on_warnings: bool = Field(
        default=False,
        description='Fail the step on warnings; only the literal "true" enables it',
    )
    theme_check_engine: str = Field(
        default="",
        description="Optional module:callable overriding the bundled Node engine",
    )

    @field_validator("fail_on_warnings", mode="before")
    @classmethod
    def _strict_true_literal(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value == "true"
        return value

    @classmethod
    def from_environment(cls) -> "RunContext":
        """Load context from the process environment."""
        try:
            return cls()
        except ValidationError as exc:
            raise SetupError(f"Invalid environment configuration: {exc}") from exc

    @property
    def action_run_url(self) -> str:
        if self.repo_url and self.run_id:
            return f"{self.repo_url}/actions/runs/{self.run_id}"
        return ""

    @property
    def report_dir(self) -> Path:
        return Path(self.runner_temp or tempfile.gettempdir())

    def validate_output_destination(self) -> Path:
        """Return the output file path, or raise if it cannot be appended to."""
        if not self.github_output:
            raise SetupError("GITHUB_OUTPUT path invalid or not set")
        output_path = Path(self.github_output)
        if not output_path.parent.is_dir():
            raise SetupError(
                f"GITHUB_OUTPUT path invalid or directory does not exist: {self.github_output}"
            )
        return output_path
