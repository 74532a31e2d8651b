from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    OK = "ok"
    WARNING = "warning"
    FATAL = "fatal"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one orchestrated action.

    WARNING results are logged and the workflow continues; FATAL results abort
    the run. Steps marked best-effort in the pipeline can only ever produce OK
    or WARNING.
    """

    severity: Severity
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.severity is Severity.OK

    @property
    def fatal(self) -> bool:
        return self.severity is Severity.FATAL

    @classmethod
    def success(cls, message: str = "") -> "StepResult":
        return cls(Severity.OK, message)

    @classmethod
    def warning(cls, message: str) -> "StepResult":
        return cls(Severity.WARNING, message)

    @classmethod
    def failure(cls, message: str) -> "StepResult":
        return cls(Severity.FATAL, message)
