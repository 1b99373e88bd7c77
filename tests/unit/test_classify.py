from __future__ import annotations

import pytest

from themecheck_reporter.classify import classify_offenses
from themecheck_reporter.models import Offense, SeverityClass


def _offense(severity, message: str = "m") -> Offense:
    return Offense(uri="file:///workspace/a.liquid", severity=severity, message=message)


def test_partitions_preserve_engine_order() -> None:
    offenses = [
        _offense(1, "w1"),
        _offense(0, "e1"),
        _offense(1, "w2"),
        _offense(0, "e2"),
    ]
    result = classify_offenses(offenses)

    assert [o.message for o in result.errors] == ["e1", "e2"]
    assert [o.message for o in result.warnings] == ["w1", "w2"]
    assert result.error_count == 2
    assert result.warning_count == 2


def test_unrecognized_severities_are_excluded() -> None:
    offenses = [_offense(0), _offense(2), _offense(None), _offense("0"), _offense(True), _offense(1)]
    result = classify_offenses(offenses)

    assert result.error_count == 1
    assert result.warning_count == 1
    assert result.ignored == 4
    assert result.error_count + result.warning_count <= len(offenses)


def test_empty_input() -> None:
    result = classify_offenses([])
    assert result.errors == ()
    assert result.warnings == ()
    assert result.summary_line == "0 error(s), 0 warning(s) found."


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, SeverityClass.ERROR),
        (1, SeverityClass.WARNING),
        (1.0, SeverityClass.WARNING),
        (2, SeverityClass.IGNORED),
        (-1, SeverityClass.IGNORED),
        (False, SeverityClass.IGNORED),
        ("1", SeverityClass.IGNORED),
        (None, SeverityClass.IGNORED),
    ],
)
def test_severity_class_from_raw(raw, expected: SeverityClass) -> None:
    assert SeverityClass.from_raw(raw) is expected
