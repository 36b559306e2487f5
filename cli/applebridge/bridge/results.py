"""
📦 Bridge Results
One discriminated result type for every adapter operation:
Found(records) | NotFound | Failed(kind, detail).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class FailureKind(str, Enum):
    PROCESS_ERROR       = "process_error"
    TIMEOUT             = "timeout"
    INTERPRETER_WARNING = "interpreter_warning"
    MALFORMED_RECORD    = "malformed_record"
    INVALID_INPUT       = "invalid_input"


@dataclass(frozen=True)
class Failure:
    """A failed step inside the bridge."""

    kind: FailureKind
    detail: str
    exit_code: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}"


@dataclass(frozen=True)
class ExecutionResult:
    """Raw outcome of one script invocation."""

    output: str = ""
    warnings: tuple[str, ...] = ()
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class Found:
    records: tuple[Any, ...]
    warnings: tuple[str, ...] = field(default=())

    ok = True
    found = True

    @property
    def first(self) -> Any:
        return self.records[0]


@dataclass(frozen=True)
class NotFound:
    warnings: tuple[str, ...] = field(default=())

    ok = True
    found = False
    records = ()

    @property
    def first(self) -> None:
        return None


@dataclass(frozen=True)
class Failed:
    kind: FailureKind
    detail: str

    ok = False
    found = False
    records = ()
    warnings = ()

    @classmethod
    def from_failure(cls, failure: Failure) -> "Failed":
        return cls(kind=failure.kind, detail=failure.detail)

    @property
    def first(self) -> None:
        return None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}"


BridgeResult = Union[Found, NotFound, Failed]
