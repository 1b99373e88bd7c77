from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .errors import EngineError


class SeverityClass(str, Enum):
    """Report bucket for a Theme Check severity value."""

    ERROR = "error"
    WARNING = "warning"
    IGNORED = "ignored"

    @classmethod
    def from_raw(cls, value: Any) -> "SeverityClass":
        # Theme Check encodes severity as 0 = error, 1 = warning, 2 = info.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return cls.IGNORED
        if value == 0:
            return cls.ERROR
        if value == 1:
            return cls.WARNING
        return cls.IGNORED


def _field(raw: Any, name: str) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(name)
    return getattr(raw, name, None)


def _coerce_position(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


@dataclass(frozen=True)
class Position:
    line: int = 0
    character: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> "Position":
        if raw is None:
            return cls()
        return cls(
            line=_coerce_position(_field(raw, "line")),
            character=_coerce_position(_field(raw, "character")),
        )


@dataclass(frozen=True)
class Offense:
    """One diagnostic finding reported by Theme Check."""

    uri: Optional[str] = None
    start: Position = field(default_factory=Position)
    severity: Any = None
    message: Optional[str] = None
    check: Optional[str] = None

    @property
    def severity_class(self) -> SeverityClass:
        return SeverityClass.from_raw(self.severity)

    @classmethod
    def from_raw(cls, raw: Any) -> "Offense":
        """Normalise an engine record (mapping or attribute object)."""
        if raw is None or isinstance(raw, (str, bytes, int, float, list, tuple)):
            raise EngineError(f"Offense record has unexpected type: {type(raw).__name__}")
        uri = _field(raw, "uri")
        message = _field(raw, "message")
        check = _field(raw, "check")
        return cls(
            uri=str(uri) if uri else None,
            start=Position.from_raw(_field(raw, "start")),
            severity=_field(raw, "severity"),
            message=str(message) if message else None,
            check=str(check) if check else None,
        )


@dataclass(frozen=True)
class Classification:
    errors: tuple[Offense, ...] = ()
    warnings: tuple[Offense, ...] = ()
    ignored: int = 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def summary_line(self) -> str:
        return f"{self.error_count} error(s), {self.warning_count} warning(s) found."


@dataclass(frozen=True)
class ResolvedPath:
    display_path: str
    relative_path: Optional[str] = None
    link: Optional[str] = None
