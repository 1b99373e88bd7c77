from __future__ import annotations

from .loader import ThemeCheckEngine, load_engine
from .node import NodeThemeCheck
from .runner import run_engine

__all__ = [
    "NodeThemeCheck",
    "ThemeCheckEngine",
    "load_engine",
    "run_engine",
]
