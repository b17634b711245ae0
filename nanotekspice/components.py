"""Elementary chipsets: or, xor, output and true."""

from __future__ import annotations

from .circuit import Circuit, Component, Tristate


class _TwoInputGate(Component):
    """Gate with inputs on pins 1 and 2 and its output on pin 3."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 3)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._already_computed(pin, circuit)
        if cached is not None:
            return cached
        self.pins[1].state = self.get_link(1, circuit)
        self.pins[2].state = self.get_link(2, circuit)
        if pin != 3:
            return Tristate.UNDEFINED
        return self._evaluate(self.pins[1].state, self.pins[2].state)

    def _evaluate(self, first: Tristate, second: Tristate) -> Tristate:
        raise NotImplementedError


class OrComponent(_TwoInputGate):
    """Two-input OR gate."""

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)

    def _evaluate(self, first: Tristate, second: Tristate) -> Tristate:
        if Tristate.TRUE in (first, second):
            return Tristate.TRUE
        if first is Tristate.FALSE and second is Tristate.FALSE:
            return Tristate.FALSE
        return Tristate.UNDEFINED


class XorComponent(_TwoInputGate):
    """Two-input XOR gate."""

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)

    def _evaluate(self, first: Tristate, second: Tristate) -> Tristate:
        if first is Tristate.TRUE and second is Tristate.TRUE:
            return Tristate.FALSE
        if Tristate.UNDEFINED in (first, second):
            return Tristate.UNDEFINED
        if first is Tristate.FALSE and second is Tristate.FALSE:
            return Tristate.FALSE
        return Tristate.TRUE


class OutputComponent(Component):
    """Single-pin output that shows what its pin is wired to."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 1)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._already_computed(pin, circuit)
        if cached is not None:
            return cached
        self.pins[1].state = self.get_link(1, circuit)
        return self.pins[1].state


class TrueComponent(Component):
    """Constant source that always yields true."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 1)
        self.pins[1].state = Tristate.TRUE

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return self.pins[1].state