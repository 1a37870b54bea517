"""Report and error output channels."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class ReportSink(Protocol):
    def report(self, text: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class ConsoleSink:
    """Reports go to stdout; errors and warnings go to stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    def report(self, text: str) -> None:
        print(text, file=self._out or sys.stdout)

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=self._err or sys.stderr)

    def warning(self, message: str) -> None:
        print(f"Warning: {message}", file=self._err or sys.stderr)


class MemorySink:
    def __init__(self) -> None:
        self.reports: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def report(self, text: str) -> None:
        self.reports.append(text)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)
