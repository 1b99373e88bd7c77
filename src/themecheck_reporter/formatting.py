from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote, unquote

from .config import RunContext
from .constants import FILE_SCHEME, UNKNOWN_PATH
from .logging import ReporterLogger
from .models import Offense, ResolvedPath

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def github_blob_url(
    *,
    repo_url: str,
    commit_sha: str,
    path: str,
    line: Optional[int] = None,
) -> str:
    """
    Build a stable GitHub blob URL for a file at a specific commit SHA.

    Note: `path` is URL-encoded to handle spaces and special chars.
    """
    base = (repo_url or "").rstrip("/")
    safe_path = quote((path or "").lstrip("/"), safe="/")
    url = f"{base}/blob/{commit_sha}/{safe_path}"
    if line:
        url += f"#L{int(line)}"
    return url


def normalize_workspace_root(workspace_path: str) -> str:
    return (workspace_path or "").rstrip("/") + "/"


def decode_uri_path(raw_path: str) -> str:
    """Percent-decode a URI path, rejecting malformed escapes and invalid UTF-8."""
    if _MALFORMED_ESCAPE.search(raw_path):
        raise ValueError(f"malformed percent escape in {raw_path!r}")
    return unquote(raw_path, errors="strict")


def resolve_offense_path(
    offense: Offense,
    ctx: RunContext,
    logger: Optional[ReporterLogger] = None,
) -> ResolvedPath:
    """Map an offense uri to a workspace-relative display path and blob link."""
    uri = offense.uri
    if not uri:
        return ResolvedPath(display_path=UNKNOWN_PATH)
    if not uri.startswith(FILE_SCHEME):
        return ResolvedPath(display_path=uri)

    try:
        decoded = decode_uri_path(uri[len(FILE_SCHEME):])
    except ValueError as exc:
        if logger:
            logger.warning("Could not decode offense uri", uri=uri, error=str(exc))
        return ResolvedPath(display_path=uri)

    root = normalize_workspace_root(ctx.workspace_path)
    if not decoded.startswith(root):
        if logger:
            logger.warning(
                "Offense path is outside the workspace",
                path=decoded,
                workspace=root,
            )
        return ResolvedPath(display_path=decoded)

    relative = decoded[len(root):]
    link = None
    line = offense.start.line
    if ctx.repo_url and ctx.commit_sha and relative and relative != UNKNOWN_PATH and line > 0:
        link = github_blob_url(
            repo_url=ctx.repo_url,
            commit_sha=ctx.commit_sha,
            path=relative,
            line=line,
        )
    return ResolvedPath(display_path=relative, relative_path=relative, link=link)
