"""Context manager that reports how long a block took."""

from __future__ import annotations

import sys
import time
from typing import Optional, TextIO


class LogDuration:
    """Write ``Operation time: N ms`` to ``out`` when the block ends."""

    def __init__(self, operation_id: str, out: Optional[TextIO] = None) -> None:
        self.operation_id = operation_id
        self._out = out
        self._start_ns = 0

    def __enter__(self) -> "LogDuration":
        self._start_ns = time.monotonic_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        elapsed_ms = (time.monotonic_ns() - self._start_ns) // 1_000_000
        out = self._out if self._out is not None else sys.stderr
        print(f"Operation time: {elapsed_ms} ms", file=out, flush=True)