import pytest

from nanotekspice.circuit import Circuit, Component, Tristate
from nanotekspice.components import (
    OrComponent,
    OutputComponent,
    TrueComponent,
    XorComponent,
)

T, F, U = Tristate.TRUE, Tristate.FALSE, Tristate.UNDEFINED


class Source(Component):
    def __init__(self, name, state):
        super().__init__(name, 1)
        self.fixed = state

    def compute(self, pin, circuit):
        return self.fixed


def build(gate_cls, first, second):
    circuit = Circuit()
    circuit.add_component("input1", Source("input1", U))
    circuit.add_component("input2", Source("input2", U))
    circuit.add_component("true1", TrueComponent("true1"))
    circuit.add_component("true2", TrueComponent("true2"))
    circuit.add_component("false1", Source("false1", F))
    circuit.add_component("false2", Source("false2", F))
    gate = gate_cls("comp1")
    circuit.add_component("comp1", gate)
    gate.set_link(1, first, 1)
    gate.set_link(2, second, 1)
    return gate, circuit


@pytest.mark.parametrize(
    "first, second, pin, expected",
    [
        ("false1", "false2", 3, F),
        ("true1", "true2", 3, T),
        ("true1", "false2", 3, T),
        ("input1", "false2", 3, U),
        ("input1", "true2", 3, T),
        ("input1", "input2", 3, U),
        ("false1", "true2", 2, U),
    ],
)
def test_or_component(first, second, pin, expected):
    gate, circuit = build(OrComponent, first, second)
    assert gate.compute(pin, circuit) is expected


@pytest.mark.parametrize(
    "first, second, pin, expected",
    [
        ("false1", "false2", 3, F),
        ("true1", "true2", 3, F),
        ("true1", "false2", 3, T),
        ("input1", "false2", 3, U),
        ("input1", "true2", 3, U),
        ("false1", "true2", 2, U),
    ],
)
def test_xor_component(first, second, pin, expected):
    gate, circuit = build(XorComponent, first, second)
    assert gate.compute(pin, circuit) is expected


def test_xor_suite_undefined_undefined_uses_or_gate():
    gate, circuit = build(OrComponent, "input1", "input2")
    assert gate.compute(3, circuit) is U


def test_gate_stores_input_states():
    gate, circuit = build(XorComponent, "true1", "false2")
    gate.compute(3, circuit)
    assert (gate.get_pin_state(1), gate.get_pin_state(2)) == (T, F)


def test_gate_recompute_same_round_returns_stored_pin_state():
    gate, circuit = build(OrComponent, "true1", "true2")
    assert gate.compute(3, circuit) is T
    assert gate.compute(3, circuit) is gate.get_pin_state(3)
    circuit.computed_pins.clear()
    assert gate.compute(3, circuit) is T


def test_gate_marks_computed_pin():
    gate, circuit = build(OrComponent, "true1", "true2")
    gate.compute(3, circuit)
    assert ("comp1", 3) in circuit.computed_pins


def test_true_component_always_true():
    source = TrueComponent("t")
    assert source.compute(1, Circuit()) is T
    assert source.get_pin_state(1) is T


def test_output_follows_linked_component():
    circuit = Circuit()
    circuit.add_component("t", TrueComponent("t"))
    out = OutputComponent("out")
    circuit.add_component("out", out)
    out.set_link(1, "t", 1)
    assert out.compute(1, circuit) is T
    assert out.get_pin_state(1) is T


def test_output_unlinked_is_undefined():
    assert OutputComponent("out").compute(1, Circuit()) is U


def test_output_chained_through_gate():
    gate, circuit = build(XorComponent, "true1", "false1")
    out = OutputComponent("out")
    circuit.add_component("out", out)
    out.set_link(1, "comp1", 3)
    assert out.compute(1, circuit) is T


def test_self_loop_terminates():
    circuit = Circuit()
    gate = OrComponent("loop")
    circuit.add_component("loop", gate)
    gate.set_link(1, "loop", 3)
    gate.set_link(2, "loop", 3)
    assert gate.compute(3, circuit) is U


def test_pin_counts():
    assert [OrComponent("a").has_pin(3), XorComponent("b").has_pin(4), OutputComponent("c").has_pin(2)] == [
        True,
        False,
        False,
    ]