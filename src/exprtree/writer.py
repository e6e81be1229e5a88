from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

DEBUG = os.environ.get("EXPRTREE_DEBUG", "") not in ("", "0")


class TraceWriter:
    """Console output for the demo and debug traces for the evaluator.

    ``debug`` overrides the process-wide ``EXPRTREE_DEBUG`` switch.
    """

    def __init__(
        self,
        indent_size: int = 3,
        debug: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._debug = debug
        self._stream = stream

    @property
    def debugging(self) -> bool:
        return DEBUG if self._debug is None else self._debug

    @property
    def stream(self) -> TextIO:
        # resolved per write so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stdout

    def debugln(self, message: str) -> None:
        if self.debugging:
            self._write_indentation()
            self.stream.write(message + "\n")

    def println(self, message: str) -> None:
        self._write_indentation()
        self.stream.write(message + "\n")

    def indent(self) -> None:
        self._indents += 1

    def dedent(self) -> None:
        self._indents = max(0, self._indents - 1)

    def newline(self, on_debug_only: bool = False) -> None:
        if not on_debug_only or self.debugging:
            self.stream.write("\n")

    def print_division_line(self, size: int = 80) -> None:
        self.stream.write("-" * size + "\n")

    def _write_indentation(self) -> None:
        self.stream.write(" " * self._indent_size * self._indents)


@contextmanager
def indented_output(output_writer: TraceWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def title_box(output_writer: TraceWriter, omit_lower_line: bool = False) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        if not omit_lower_line:
            output_writer.print_division_line()
