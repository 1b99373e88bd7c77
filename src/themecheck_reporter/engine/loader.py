from __future__ import annotations

import importlib
from typing import Any, Callable

from ..config import RunContext
from ..errors import SetupError
from .node import NodeThemeCheck

ThemeCheckEngine = Callable[[str], Any]


def _import_entry_point(spec: str) -> ThemeCheckEngine:
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise SetupError(
            f"THEME_CHECK_ENGINE must look like 'module:callable', got {spec!r}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SetupError(f"Failed to import theme check engine module {module_name!r}: {exc}") from exc

    target: Any = module
    for part in attr.split("."):
        target = getattr(target, part, None)
        if target is None:
            raise SetupError(f"Theme check engine {spec!r} not found")
    if not callable(target):
        raise SetupError(
            f"Theme check engine {spec!r} is not callable, got: {type(target).__name__}"
        )
    return target


def load_engine(ctx: RunContext) -> ThemeCheckEngine:
    """Resolve the engine entry point before any check runs."""
    if ctx.theme_check_engine:
        return _import_entry_point(ctx.theme_check_engine)
    engine = NodeThemeCheck(ctx.theme_path)
    engine.ensure_available()
    return engine
