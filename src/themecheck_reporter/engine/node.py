from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path
from typing import Any, Optional

from ..errors import EngineError, SetupError

THEME_CHECK_PACKAGE = "@shopify/theme-check-node"

# Loads Theme Check from the checked-out theme's node_modules, runs it once
# and prints the offenses as a single JSON line on stdout.
BRIDGE_SCRIPT = r"""
const path = require('node:path');
const { themeCheckRun } = require(path.resolve(process.cwd(), 'node_modules', '@shopify/theme-check-node'));
if (typeof themeCheckRun !== 'function') {
  console.error(`themeCheckRun is not a function, got: ${typeof themeCheckRun}`);
  process.exit(3);
}
themeCheckRun(process.argv[1])
  .then((results) => {
    const offenses = results && Array.isArray(results.offenses)
      ? results.offenses.map((o) => ({
          uri: o.uri,
          start: o.start ? { line: o.start.line, character: o.start.character } : undefined,
          severity: o.severity,
          message: o.message,
          check: o.check,
        }))
      : null;
    process.stdout.write('\n' + JSON.stringify({ offenses }) + '\n');
  })
  .catch((err) => {
    console.error(err && err.stack ? err.stack : String(err));
    process.exit(2);
  });
"""


def parse_bridge_output(stdout: str) -> dict[str, Any]:
    """Return the JSON payload printed on the last non-empty stdout line."""
    lines = [ln.strip() for ln in (stdout or "").splitlines() if ln.strip()]
    if not lines:
        raise EngineError("Theme check produced no output")
    try:
        payload = json.loads(lines[-1])
    except json.JSONDecodeError as exc:
        raise EngineError(f"Theme check output was not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise EngineError("Theme check output was not a JSON object")
    return payload


class NodeThemeCheck:
    """Runs `themeCheckRun` from @shopify/theme-check-node through `node`."""

    def __init__(self, theme_root: str, node_bin: Optional[str] = None) -> None:
        self.theme_root = Path(theme_root)
        self.node_bin = node_bin

    @property
    def package_dir(self) -> Path:
        return self.theme_root / "node_modules" / THEME_CHECK_PACKAGE

    def ensure_available(self) -> None:
        if not self.node_bin:
            self.node_bin = shutil.which("node")
        if not self.node_bin:
            raise SetupError("Node.js executable 'node' not found in PATH")
        if not self.package_dir.is_dir():
            raise SetupError(
                f"Failed to find '{THEME_CHECK_PACKAGE}' under {self.theme_root / 'node_modules'}. "
                "Make sure it is listed in your package.json or installed by the "
                "workflow's 'Install Theme Check' step."
            )

    async def __call__(self, target_path: str) -> dict[str, Any]:
        if not self.node_bin:
            self.ensure_available()

        try:
            proc = await asyncio.create_subprocess_exec(
                str(self.node_bin),
                "-e",
                BRIDGE_SCRIPT,
                target_path,
                cwd=str(self.theme_root),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise EngineError(f"Node.js executable not found: {self.node_bin}") from exc

        stdout_b, stderr_b = await proc.communicate()
        stdout = (stdout_b or b"").decode("utf-8", errors="replace")
        stderr = (stderr_b or b"").decode("utf-8", errors="replace").strip()

        if int(proc.returncode or 0) != 0:
            detail = f": {stderr}" if stderr else ""
            raise EngineError(f"Theme check exited with code {proc.returncode}{detail}")

        return parse_bridge_output(stdout)
