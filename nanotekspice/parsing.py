"""Reading of circuit description files into a shell."""

from __future__ import annotations

import enum
from pathlib import Path

from .shell import InvalidFileInstruction, Shell
from .utils import read_file, remove_comment, split_words


class NameAlreadyUsed(Exception):
    """Raised when two chipsets share a name."""

    def __init__(self, message: str = "Name already used") -> None:
        super().__init__(message)


class Section(enum.Enum):
    """Section of the description file currently being read."""

    NOTHING = enum.auto()
    CHIPSET = enum.auto()
    LINKS = enum.auto()


def _apply(shell: Shell, section: Section, words: list[str]) -> None:
    if len(words) != 2 or section is Section.NOTHING:
        raise InvalidFileInstruction()
    first, second = words
    if section is Section.LINKS:
        shell.add_link(second, first)
        shell.add_link(first, second)
        return
    if any(":" in word for word in words):
        raise InvalidFileInstruction()
    if shell.get_component(second) is not None:
        raise NameAlreadyUsed()
    shell.add_component(second, first)
    if first in ("input", "clock"):
        shell.add_input(second)
    if first == "output":
        shell.add_output(second)
    if first == "logger":
        shell.add_logger(second)


def parse_text(shell: Shell, text: str) -> Shell:
    """Load the chipsets and links described by ``text`` into ``shell``."""
    section = Section.NOTHING
    for line in split_words(text, "\n"):
        line = remove_comment(line)
        if not line:
            continue
        words = split_words(line, " \t")
        if not words or words[0].startswith("#"):
            continue
        if words[0] == ".chipsets:":
            section = Section.CHIPSET
            continue
        if words[0] == ".links:":
            section = Section.LINKS
            continue
        _apply(shell, section, words)
    if shell.list_empty():
        raise InvalidFileInstruction()
    return shell


def parse_file(shell: Shell, file_name: str | Path) -> Shell:
    """Load the circuit described in ``file_name`` into ``shell``."""
    return parse_text(shell, read_file(file_name))