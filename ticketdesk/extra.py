"""Console and text helpers: CSV line reading, splitting, screen control."""

from __future__ import annotations

import subprocess
import sys
from itertools import groupby
from typing import Optional, TextIO

MAX_LINE_LENGTH = 1024
MAX_FIELDS = 300


def read_csv_line(file: TextIO, separator: str = ",") -> Optional[list[str]]:
    """Read one line from ``file`` and split it into fields.

    A field may be wrapped in double quotes, in which case it may contain
    the separator. Runs of two separators count as one. At most
    ``MAX_LINE_LENGTH - 1`` characters are read per call and at most
    ``MAX_FIELDS - 1`` fields returned. Returns None at end of file.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    raw = file.readline(MAX_LINE_LENGTH - 1)
    if not raw:
        return None
    line = raw.split("\n", 1)[0]
    n = len(line)

    def at(i: int) -> str:
        return line[i] if i < n else ""

    fields: list[str] = []
    ptr = 0
    while ptr < n:
        if len(fields) >= MAX_FIELDS - 1:
            break
        if line[ptr] == '"':
            ptr += 1
            start = ptr
            while ptr < n and not (line[ptr] == '"' and at(ptr + 1) == separator):
                ptr += 1
        else:
            start = ptr
            while ptr < n and line[ptr] != separator:
                ptr += 1
        end = ptr
        if ptr < n:
            ptr += 1
            if at(ptr) == separator:
                ptr += 1
        quote = ptr - 2
        if start <= quote < end and line[quote] == '"':
            end = quote
        fields.append(line[start:end])
    return fields


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on any character of ``delim``, trimming spaces.

    Empty pieces between delimiters are dropped.
    """
    delims = set(delim)
    return [
        "".join(chars).strip(" ")
        for is_delim, chars in groupby(text, key=lambda c: c in delims)
        if not is_delim
    ]


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        pass


def wait_for_key() -> None:
    """Prompt and wait until the user enters a line."""
    print("Presione una tecla para continuar...", flush=True)
    sys.stdin.readline()