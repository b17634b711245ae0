"""Core model of a circuit: tri-state values, pins, components and the circuit map."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field


class Tristate(enum.Enum):
    """Logic level of a pin."""

    UNDEFINED = -1
    TRUE = 1
    FALSE = 0

    def __str__(self) -> str:
        return "U" if self is Tristate.UNDEFINED else str(self.value)


@dataclass
class Pin:
    """A component pin, its current state and the pin it is wired to."""

    state: Tristate = Tristate.UNDEFINED
    linked_component: str = ""
    other_pin: int = 0


@dataclass
class Circuit:
    """Named components, the current tick and the pins computed this round."""

    tick: int = 0
    computed_pins: set[tuple[str, int]] = field(default_factory=set)
    _components: dict[str, Component] = field(default_factory=dict, repr=False)

    def add_component(self, name: str, component: Component) -> None:
        """Register ``component`` under ``name``; an existing entry is kept."""
        self._components.setdefault(name, component)

    def get_component(self, name: str) -> Component | None:
        """Return the component called ``name``, or None."""
        return self._components.get(name)

    def increment_tick(self) -> None:
        self.tick += 1

    def is_empty(self) -> bool:
        return not self._components


class Component(abc.ABC):
    """Base of every chipset: a named set of numbered pins."""

    def __init__(self, name: str, pin_count: int) -> None:
        self.name = name
        self.pins: dict[int, Pin] = {number: Pin() for number in range(1, pin_count + 1)}

    def simulate(self, tick: int) -> None:
        """Advance to ``tick``; components without internal state do nothing."""

    @abc.abstractmethod
    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        """Return the value seen on ``pin``."""

    def set_link(self, pin: int, name_other: str, other_pin: int) -> None:
        """Wire ``pin`` to pin ``other_pin`` of the component ``name_other``."""
        target = self.pins[pin]
        target.linked_component = name_other
        target.other_pin = other_pin

    def change_pin_state(self, pin: int, new_state: Tristate) -> None:
        self.pins[pin].state = new_state

    def get_pin_state(self, pin: int) -> Tristate:
        return self.pins[pin].state

    def has_pin(self, pin: int) -> bool:
        return pin in self.pins

    def get_link(self, pin: int, circuit: Circuit) -> Tristate:
        """Compute the value arriving on ``pin`` from whatever it is wired to."""
        wire = self.pins[pin]
        if not wire.linked_component:
            return Tristate.UNDEFINED
        other = circuit.get_component(wire.linked_component)
        if other is None:
            return Tristate.UNDEFINED
        return other.compute(wire.other_pin, circuit)

    def _already_computed(self, pin: int, circuit: Circuit) -> Tristate | None:
        """Return the stored state if ``pin`` was computed this round, else mark it."""
        key = (self.name, pin)
        if key in circuit.computed_pins:
            return self.pins[pin].state
        circuit.computed_pins.add(key)
        return None