"""
⚙️ Process Executor
Runs rendered scripts through osascript, one child process per call.
"""

import subprocess
import threading
import time
from typing import Any, Callable, Optional

from .results import ExecutionResult, Failure, FailureKind
from .scripts import Script

STDERR_POLICIES = ("warn", "fail")

TraceCallback = Callable[[str, dict[str, Any]], None]


class ScriptExecutor:
    """
    Spawns the interpreter for each Script and maps every outcome to an
    ExecutionResult. Never raises for process-level problems.

    Calls against the same application are serialized; the target
    applications do not tolerate concurrent scripted mutation.
    """

    def __init__(
        self,
        interpreter: str = "osascript",
        timeout: float = 30.0,
        stderr_policy: str = "warn",
        trace_callback: Optional[TraceCallback] = None,
        status_callback: Optional[Callable[[str], None]] = None,
    ) -> None:
        if stderr_policy not in STDERR_POLICIES:
            raise ValueError(f"stderr_policy must be one of {STDERR_POLICIES}, got {stderr_policy!r}")
        self.interpreter = interpreter
        self.timeout = timeout
        self.stderr_policy = stderr_policy
        self.trace = trace_callback or (lambda event, data: None)
        self.status_callback = status_callback or (lambda msg: None)
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, application: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(application, threading.Lock())

    def run(self, script: Script) -> ExecutionResult:
        with self._lock_for(script.application):
            return self._run(script)

    def _run(self, script: Script) -> ExecutionResult:
        started = time.time()
        self.status_callback(f"🍎 Running {script.operation} in {script.application}...")
        self.trace("script_started", {
            "operation": script.operation,
            "application": script.application,
            "arg_count": len(script.args),
        })

        try:
            proc = subprocess.run(
                script.argv(self.interpreter),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            return self._fail(script, started, Failure(
                FailureKind.TIMEOUT,
                f"{script.application} did not answer within {self.timeout:g} seconds",
            ))
        except OSError as e:
            return self._fail(script, started, Failure(
                FailureKind.PROCESS_ERROR,
                f"Could not start {self.interpreter}: {e}",
            ))

        stdout = proc.stdout or ""
        if stdout.endswith("\n"):
            stdout = stdout[:-1]
        stderr = (proc.stderr or "").strip()

        if proc.returncode != 0:
            return self._fail(script, started, Failure(
                FailureKind.PROCESS_ERROR,
                stderr or f"{self.interpreter} exited with code {proc.returncode}",
                exit_code=proc.returncode,
            ))

        warnings = tuple(ln for ln in stderr.splitlines() if ln.strip())
        if warnings:
            self.trace("script_warning", {"operation": script.operation, "warnings": list(warnings)})
            if self.stderr_policy == "fail":
                return self._fail(script, started, Failure(
                    FailureKind.INTERPRETER_WARNING,
                    "; ".join(warnings),
                    exit_code=0,
                ))

        self.trace("script_finished", {
            "operation": script.operation,
            "elapsed_ms": int((time.time() - started) * 1000),
            "output_chars": len(stdout),
        })
        return ExecutionResult(output=stdout, warnings=warnings)

    def _fail(self, script: Script, started: float, failure: Failure) -> ExecutionResult:
        self.trace("script_failed", {
            "operation": script.operation,
            "kind": failure.kind.value,
            "detail": failure.detail,
            "exit_code": failure.exit_code,
            "elapsed_ms": int((time.time() - started) * 1000),
        })
        return ExecutionResult(failure=failure)
