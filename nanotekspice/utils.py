"""Text and file helpers used by the circuit file parser and the logger."""

from __future__ import annotations

from pathlib import Path


class FileError(Exception):
    """Raised when a file cannot be opened for reading or appending."""

    def __init__(self, message: str = "Error of file.") -> None:
        super().__init__(message)


def split_words(buffer: str, delimiters: str) -> list[str]:
    """Split ``buffer`` on any character of ``delimiters``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in buffer:
        if char in delimiters:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def read_file(file_name: str | Path) -> str:
    """Return the whole content of ``file_name``."""
    try:
        return Path(file_name).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileError() from exc


def write_in_file(text: str, file_name: str | Path) -> None:
    """Append ``text`` to ``file_name``, creating the file if needed."""
    try:
        with open(file_name, "a") as handle:
            handle.write(text)
    except OSError as exc:
        raise FileError() from exc


def remove_comment(line: str) -> str:
    """Return ``line`` cut before its first ``#``."""
    return line.split("#", 1)[0]