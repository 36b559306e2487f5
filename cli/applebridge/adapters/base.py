"""
🔌 Adapter Base
Shared build → run → decode → bind pipeline for the domain adapters.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from ..bridge import codec
from ..bridge.executor import ScriptExecutor
from ..bridge.results import BridgeResult, Failed, FailureKind, Found, NotFound
from ..bridge.scripts import ScriptBuilder
from ..errors import MalformedRecordError, ScriptValueError, UnknownOperationError


@dataclass(frozen=True)
class RecordLayout:
    """Positional field names of one record kind."""

    name: str
    fields: tuple[str, ...]
    required: int = 0

    def bind(self, values: Sequence[str]) -> dict[str, str]:
        """Map a decoded tuple onto field names; missing optional fields become ''."""
        minimum = self.required or len(self.fields)
        if len(values) < minimum:
            raise MalformedRecordError(
                f"{self.name} record has {len(values)} field(s), expected at least {minimum}",
                tuple(values),
            )
        padded = list(values[: len(self.fields)]) + [""] * (len(self.fields) - len(values))
        return dict(zip(self.fields, padded))


class BaseAdapter:
    """Composes ScriptBuilder + ScriptExecutor + codec for one application."""

    application = ""

    def __init__(self, builder: ScriptBuilder, executor: ScriptExecutor) -> None:
        self.builder = builder
        self.executor = executor

    def _call(
        self,
        operation: str,
        params: Optional[Mapping[str, Any]],
        layout: RecordLayout,
        to_record: Callable[[dict[str, str]], Any],
        keep: Optional[Callable[[Any], bool]] = None,
    ) -> BridgeResult:
        try:
            script = self.builder.build(operation, params)
        except (ScriptValueError, UnknownOperationError) as e:
            return Failed(FailureKind.INVALID_INPUT, str(e))

        result = self.executor.run(script)
        if result.failure is not None:
            return Failed.from_failure(result.failure)

        rows = codec.decode_batch(result.output)
        try:
            records = [to_record(layout.bind(row)) for row in rows]
        except MalformedRecordError as e:
            return Failed(FailureKind.MALFORMED_RECORD, str(e))

        if keep is not None:
            records = [r for r in records if keep(r)]
        if not records:
            return NotFound(warnings=result.warnings)
        return Found(records=tuple(records), warnings=result.warnings)


def optional_text(value: str) -> Optional[str]:
    return value or None
