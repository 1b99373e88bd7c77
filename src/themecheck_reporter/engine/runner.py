from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Optional

from ..errors import EngineError
from ..logging import ReporterLogger
from ..models import Offense


def _extract_offenses(results: Any) -> Any:
    if isinstance(results, Mapping):
        return results.get("offenses")
    return getattr(results, "offenses", None)


async def run_engine(
    engine: Any,
    target_path: str,
    logger: Optional[ReporterLogger] = None,
) -> list[Offense]:
    """
    Invoke the engine once and validate the shape of what it returned.

    Sync and async engines are both accepted. Anything other than an object
    exposing an `offenses` list raises EngineError.
    """
    results = engine(target_path)
    if inspect.isawaitable(results):
        results = await results

    raw_offenses = _extract_offenses(results)
    if not isinstance(raw_offenses, (list, tuple)):
        if logger:
            keys = [str(k) for k in results] if isinstance(results, Mapping) else None
            logger.error(
                "Unexpected structure returned by theme check",
                results_type=type(results).__name__,
                results_keys=keys,
            )
        raise EngineError("Theme check did not return the expected offenses array structure.")

    return [Offense.from_raw(raw) for raw in raw_offenses]
