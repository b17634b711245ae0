"""Interactive shell driving a circuit: links, inputs and simulation commands."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

from .circuit import Circuit, Component, Tristate
from .factory import Factory
from .utils import split_words


class NoChipsetFailure(Exception):
    """Raised when links are declared before any chipset exists."""

    def __init__(self, message: str = "No chipset failure") -> None:
        super().__init__(message)


class ComponentDontExist(Exception):
    """Raised when a link names a component that was never declared."""

    def __init__(self, message: str = "Component dont exist") -> None:
        super().__init__(message)


class InvalidFileInstruction(Exception):
    """Raised on a malformed circuit description instruction."""

    def __init__(self, message: str = "Invalid instruction in file") -> None:
        super().__init__(message)


_LEADING_DIGITS = re.compile(r"\d*")


def _leading_int(text: str) -> int:
    """Value of the leading decimal digits of ``text``, 0 when there are none."""
    digits = _LEADING_DIGITS.match(text).group()
    return int(digits) if digits else 0


class Shell:
    """A circuit together with its declared inputs, outputs and loggers."""

    def __init__(self) -> None:
        self.circuit = Circuit()
        self.inputs: list[str] = []
        self.outputs: list[str] = []
        self.loggers: list[str] = []
        self.output_string = ""
        self._factory = Factory()

    def add_link(self, source: str, target: str) -> None:
        """Wire ``source`` (``name:pin``) to ``target`` (``name:pin``)."""
        source_words = split_words(source, ":")
        target_words = split_words(target, ":")

        if self.circuit.is_empty():
            raise NoChipsetFailure()
        if not source_words or not target_words:
            raise InvalidFileInstruction()
        if source_words[-1] == source_words[0] or target_words[-1] == target_words[0]:
            raise InvalidFileInstruction()
        source_component = self.get_component(source_words[0])
        target_component = self.get_component(target_words[0])
        if source_component is None or target_component is None:
            raise ComponentDontExist()
        if not self.only_digit(source_words[-1]) or not self.only_digit(target_words[-1]):
            raise InvalidFileInstruction()
        source_pin = int(source_words[-1])
        target_pin = int(target_words[-1])
        if not source_component.has_pin(source_pin) or not target_component.has_pin(target_pin):
            raise InvalidFileInstruction()
        source_component.set_link(source_pin, target_words[0], target_pin)

    def add_component(self, name: str, component_type: str) -> Component | None:
        """Create a ``component_type`` chipset called ``name``; unknown types are ignored."""
        return self._factory.create_component(component_type, name, self.circuit)

    def get_component(self, name: str) -> Component | None:
        return self.circuit.get_component(name)

    def add_input(self, name: str) -> None:
        self.inputs.append(name)

    def add_output(self, name: str) -> None:
        self.outputs.append(name)

    def add_logger(self, name: str) -> None:
        self.loggers.append(name)

    def input_is_valid(self, buffer: str) -> bool:
        """Apply an assignment such as ``name=1``; return whether it was accepted."""
        words = split_words(buffer, "=")
        if " " in buffer or "\t" in buffer or len(words) != 2 or buffer.count("=") != 1:
            return False
        name, value = words
        component = self.get_component(name)
        if component is None or not self.only_digit_undefined(value):
            return False
        if value == "U":
            state = Tristate.UNDEFINED
        else:
            number = _leading_int(value)
            if number not in (0, 1):
                return False
            state = Tristate.TRUE if number == 1 else Tristate.FALSE
        component.change_pin_state(1, state)
        return True

    def list_empty(self) -> bool:
        """True when there is no input or no output declared."""
        return not self.inputs or not self.outputs

    def only_digit(self, text: str) -> bool:
        return all("0" <= char <= "9" for char in text)

    def only_digit_undefined(self, text: str) -> bool:
        return all(char == "U" or "0" <= char <= "9" for char in text)

    def run(self, lines: Iterable[str], out: TextIO) -> None:
        """Read commands from ``lines`` and write prompts and reports to ``out``."""
        self.output_string = self._report()
        out.write("> ")
        for raw in lines:
            command = raw.removesuffix("\n")
            if command == "exit":
                break
            self.circuit.computed_pins.clear()
            if command == "display":
                out.write(self.output_string)
            elif command == "simulate":
                self._step()
            elif command == "loop":
                self._loop()
                out.write(self.output_string)
            elif not self.input_is_valid(command):
                out.write("Invalid Command\n")
            out.write("> ")

    def _report(self) -> str:
        lines = [f"tick: {self.circuit.tick}", "input(s):"]
        for name in self.inputs:
            component = self.get_component(name)
            if component is not None:
                lines.append(f"  {name}: {component.get_pin_state(1)!s}")
        lines.append("output(s):")
        for name in self.outputs:
            component = self.get_component(name)
            if component is not None:
                lines.append(f"  {name}: {component.compute(1, self.circuit)!s}")
        return "\n".join(lines) + "\n"

    def _step(self) -> None:
        self.circuit.increment_tick()
        report = self._report()
        for name in self.loggers:
            component = self.get_component(name)
            if component is not None:
                component.compute(1, self.circuit)
        self.output_string = report

    def _loop(self) -> None:
        """Simulate repeatedly until interrupted with Ctrl-C."""
        try:
            while True:
                self._step()
        except KeyboardInterrupt:
            pass