"""
Console collaborator: the only place that touches text streams.
Notes:
- Streams are injectable so tests can script input and capture output
  without swapping sys.stdin / sys.stdout.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Console:
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def puts(self, text: str = "") -> None:
        """Write ``text`` followed by a newline unless it already ends with one."""
        self.stdout.write(text if text.endswith("\n") else text + "\n")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def blank_line(self) -> None:
        self.puts()

    def read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")
