"""Small text-file helpers: appending, merging and joining words."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_LINE = "NoobScience"


def append_line(path: PathLike, text: str = DEFAULT_LINE) -> str:
    """Append text and a newline to a file, creating it if needed.

    Returns the whole content of the file after the append.
    """
    target = Path(path)
    with target.open("a", encoding="utf-8") as handle:
        handle.write(f"{text}\n")
    return target.read_text(encoding="utf-8")


def merge_files(target: PathLike, *args: PathLike) -> str:
    """Write the contents of the given files, in order, into target.

    Sources that do not exist are skipped. Returns the merged content.
    """
    destination = Path(target)
    with destination.open("w", encoding="utf-8") as out:
        for source in args:
            try:
                with Path(source).open("r", encoding="utf-8") as handle:
                    for chunk in iter(lambda: handle.read(65536), ""):
                        out.write(chunk)
            except FileNotFoundError:
                continue
    return destination.read_text(encoding="utf-8")


def join_words(first: str, second: str) -> str:
    """Join two words with a single space."""
    return f"{first} {second}"