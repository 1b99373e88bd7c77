from __future__ import annotations

from typing import Iterable

from .models import Classification, Offense, SeverityClass


def classify_offenses(offenses: Iterable[Offense]) -> Classification:
    """Split offenses into errors and warnings, keeping engine order."""
    errors: list[Offense] = []
    warnings: list[Offense] = []
    ignored = 0
    for offense in offenses:
        bucket = offense.severity_class
        if bucket is SeverityClass.ERROR:
            errors.append(offense)
        elif bucket is SeverityClass.WARNING:
            warnings.append(offense)
        else:
            ignored += 1
    return Classification(errors=tuple(errors), warnings=tuple(warnings), ignored=ignored)
