"""Creation of components from their chipset type names."""

from __future__ import annotations

from collections.abc import Callable

from .circuit import Circuit, Component
from .components import OrComponent, OutputComponent, TrueComponent, XorComponent


class Factory:
    """Builds components by type name and registers them in a circuit."""

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[str], Component]] = {
            "or": OrComponent,
            "xor": XorComponent,
            "output": OutputComponent,
            "true": TrueComponent,
        }

    def create_component(self, component_type: str, name: str, circuit: Circuit) -> Component | None:
        """Build a ``component_type`` called ``name`` into ``circuit``.

        Unknown types are ignored and None is returned.
        """
        builder = self._builders.get(component_type)
        if builder is None:
            return None
        component = builder(name)
        circuit.add_component(name, component)
        return component