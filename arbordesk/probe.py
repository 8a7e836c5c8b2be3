"""Probes that record a quantity at a locset."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

KINDS: tuple[str, ...] = (
    "Voltage",
    "Axial Current",
    "Membrane Current",
    "Internal Concentration",
    "External Concentration",
    "Mechanism State",
)

_ION_KINDS = frozenset({"Membrane Current", "Internal Concentration", "External Concentration"})


@dataclass
class ProbeDef:
    """A probe: sampling frequency in Hz, kind and recorded variable."""

    frequency: float = 1000.0
    kind: str = KINDS[0]
    variable: str = ""

    kinds: ClassVar[tuple[str, ...]] = KINDS

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown probe kind: {self.kind}")

    def variable_choices(
        self, ion_names: Sequence[str], state_variables: Sequence[str]
    ) -> list[str]:
        """The variables that may be chosen for the current kind."""
        if self.kind in _ION_KINDS:
            return list(ion_names)
        if self.kind == "Mechanism State":
            return list(state_variables)
        return []

    def select_variable(
        self, name: str, ion_names: Sequence[str], state_variables: Sequence[str]
    ) -> None:
        """Set ``variable`` to ``name`` if the current kind allows it."""
        if name not in self.variable_choices(ion_names, state_variables):
            raise ValueError(f"Variable {name!r} not available for probe kind {self.kind}")
        self.variable = name